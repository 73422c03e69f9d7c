"""Query Finder AI - single-page chat assistant with document context.

Combines NiceGUI for the chat interface, FastAPI for hosting and a small
JSON API, httpx for the generative-language service, and Pydantic for
data validation.

Components:
    - chat: Transcript state and request orchestration
    - generation: Client for the remote answer-generation service
    - parsing: PDF and plain-text extraction for conversation context
    - theme: Dark/light preference persistence
    - ui: Web interface for chat interactions
    - api: HTTP endpoints and application factory
    - models: Transcript, wire-format and API schemas
"""

__version__ = "0.1.0"
