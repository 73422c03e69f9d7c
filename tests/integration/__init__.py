"""Integration tests for the FastAPI application.

Requests go through httpx.AsyncClient with ASGITransport against the real
app; only the answer generator is replaced via dependency overrides.
"""
