"""Gatekeeper: request-admission pipeline for the user-account service.

Every inbound read or write to account data passes through rate limiting,
schema validation and bearer-token verification before it reaches storage,
and every outcome is normalized into one response envelope.

Layers:
    - core: Result types, error taxonomy, settings, container
    - domain: entities, value objects, protocols (ports), validators
    - infrastructure: adapters (clock, rate limiter, JWT, bcrypt, storage, logging)
    - application: command handlers, request pipeline, error formatter
    - presentation: FastAPI routers, middleware, exception handlers
"""
