"""ASGI entry point.

Run with:
    uvicorn gatekeeper.main:app
"""

from gatekeeper.presentation.app import create_app

app = create_app()
