# Middleware package init
"""
Birdwatch API — Middleware Package
====================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID: sets the correlation ID used by everything downstream
    2. Logging: one access-log line per request, tagged with that ID
    3. CORS: FastAPI's CORSMiddleware (handles preflight)
"""
