# Routes package init
"""
Birdwatch API — API Routes Package
====================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - birds.py:   GET /birds             (index: all birds)
                  GET /birds/{id}        (show: one bird)
    - health.py:  GET /health            (service health check)

Routes stay thin: they resolve the store, call it, and shape the response.
Error responses come from the global handlers in main.py.
"""
