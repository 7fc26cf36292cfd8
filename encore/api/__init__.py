"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← FastAPI dependencies
    ├── handlers/         ← Route handlers
    └── middleware/       ← Error handling, request context

Usage:
======
    # Run the API
    uvicorn encore.api.main:app --reload

    # Import the app
    from encore.api.main import app, create_application
"""
