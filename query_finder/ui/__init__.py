"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Transcript display with markdown-rendered answers
    - Welcome screen with suggested prompts
    - File upload for PDF and text context
    - Dark/light theme toggle

Contains no business logic. Delegates all operations to ChatController.
"""
