"""Unit tests for individual components in isolation.

Coverage:
    - parsing/: Content-type gating and text extraction
    - generation/: Request body, response validation, error mapping
    - chat/: Prompt building, busy guard, transcript ordering
    - theme: Preference persistence

Leverages pytest-check for multiple assertions per test.
"""
