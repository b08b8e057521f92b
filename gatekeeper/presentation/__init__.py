"""Presentation layer: FastAPI application, routers and error handlers."""
