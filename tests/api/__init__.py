"""API tests package.

End-to-end tests for the HTTP surface using TestClient. Adapters are real
(bcrypt at minimum cost, in-memory repository); the clock, limiter and
token service are swapped in through dependency overrides so windows and
expiry can be moved explicitly.
"""
