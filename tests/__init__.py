"""Test suite for Gatekeeper.

Test structure follows the test pyramid:
- unit/: Unit tests - pipeline, limiter, tokens, validators in isolation
- integration/: Integration tests - real bcrypt, real structlog, repository
- api/: API endpoint tests - HTTP surface through FastAPI TestClient
"""
