"""Test package for Query Finder.

Structure:
    - unit/: Parsing, generation client, controller, theme and config tests
    - integration/: HTTP API tests through the ASGI app

Sample PDFs are generated in fixtures. The remote generation service is
replaced by httpx.MockTransport or a fake generator; no test needs network
access or an API key.
"""
