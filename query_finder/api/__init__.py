"""FastAPI application hosting the chat page and a small JSON API.

Endpoints:
    - GET /health: Service health status
    - POST /api/extract: Text extraction from an uploaded PDF or text file
    - POST /api/ask: Single-shot question, optionally with context

The NiceGUI page is mounted onto the same application by the entry point.
"""

from query_finder.api.app import app, create_app

__all__ = ["app", "create_app"]
