"""NiceGUI chat interface backed by ChatController."""

import logging
from functools import partial

from nicegui import app, events, ui

from query_finder.chat.controller import (
    SUGGESTIONS,
    UNSUPPORTED_FILE_MESSAGE,
    ChatController,
)
from query_finder.generation.client import get_generation_client
from query_finder.models.schemas import EntryKind, TranscriptEntry
from query_finder.parsing.document_parser import (
    DocumentParseError,
    UnsupportedFileTypeError,
)
from query_finder.theme import ThemeStore

logger = logging.getLogger(__name__)

TITLE = "Query Finder AI"
ACCEPTED_FILES = ".pdf,.txt,application/pdf,text/plain"
SYSTEM_DARK_JS = "window.matchMedia('(prefers-color-scheme: dark)').matches"
# Enter sends, Shift+Enter inserts a newline
SEND_ON_ENTER_JS = """(e) => {
    if (e.key === "Enter" && !e.shiftKey) { e.preventDefault(); emit(); }
}"""

SUGGESTION_ICONS = {
    "General knowledge": "lightbulb",
    "Technical questions": "build",
    "Writing assistance": "edit_note",
    "Problem solving": "psychology",
}

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: linear-gradient(90deg, #eff6ff 0%, #dbeafe 100%); min-height: 100vh; }
    body.body--dark { background: linear-gradient(90deg, #111827 0%, #1f2937 100%); }

    .panel {
        background: white;
        border-radius: 8px;
        box-shadow: 0 4px 12px rgba(0, 0, 0, 0.1);
    }
    .body--dark .panel { background: #1f2937; color: white; }

    .title { color: #3b82f6; }
    .body--dark .title { color: #93c5fd; }

    .message-question {
        background: #3b82f6;
        color: white;
        border-radius: 8px 8px 0 8px;
    }
    .body--dark .message-question { background: #1d4ed8; }

    .message-answer {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 8px 8px 8px 0;
    }
    .body--dark .message-answer { background: #374151; color: white; }

    .message-info { background: #fef9c3; color: #1f2937; border-radius: 8px; }
    .body--dark .message-info { background: #374151; color: #fde047; }

    .context-preview {
        background: #fefce8;
        color: #854d0e;
        border: 1px solid #fef08a;
        border-radius: 4px;
    }
    .body--dark .context-preview { background: #374151; color: #fde047; border-color: #a16207; }

    .suggestion { background: white; border-radius: 8px; }
    .body--dark .suggestion { background: #4b5563; color: white; }

    .welcome { background: #eff6ff; border-radius: 12px; }
    .body--dark .welcome { background: #374151; color: white; }

    .thinking { animation: pulse 2s cubic-bezier(0.4, 0, 0.6, 1) infinite; }
    @keyframes pulse { 50% { opacity: .5; } }

    .message-answer p { margin: 0.25rem 0; }
    .message-answer strong { font-weight: 600; }
    .message-answer pre { margin: 0.5rem 0; }
</style>
"""


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    theme = ThemeStore(app.storage.user)
    dark = ui.dark_mode(theme.load())

    controller = ChatController(
        get_generation_client(),
        on_change=lambda: refresh(),
    )
    session = controller.session

    messages_container: ui.column
    scroll_area: ui.scroll_area
    context_row: ui.row
    context_label: ui.label
    input_field: ui.textarea
    send_btn: ui.button
    theme_btn: ui.button

    def theme_icon() -> str:
        if dark.value is None:
            return "brightness_medium"
        return "light_mode" if dark.value else "dark_mode"

    async def toggle_theme() -> None:
        current = dark.value
        if current is None:
            current = await ui.run_javascript(SYSTEM_DARK_JS)
        dark.value = theme.toggle(bool(current))
        theme_btn.props(f"icon={theme_icon()}")

    def render_entry(entry: TranscriptEntry) -> None:
        if entry.kind == EntryKind.QUESTION:
            with ui.row().classes("w-full justify-end"):
                with ui.element("div").classes("max-w-[80%] p-4 message-question"):
                    ui.label(entry.content).classes("whitespace-pre-wrap")
        elif entry.kind == EntryKind.INFO:
            with ui.row().classes("w-full justify-start"):
                with ui.element("div").classes("max-w-[80%] p-4 message-info"):
                    ui.label(entry.content)
        else:
            with ui.row().classes("w-full justify-start"):
                with ui.element("div").classes("max-w-[80%] p-4 message-answer"):
                    ui.markdown(entry.content)

    def render_welcome() -> None:
        with ui.column().classes("w-full h-full items-center justify-center p-6"):
            with ui.column().classes("welcome p-8 max-w-2xl items-center gap-4"):
                ui.label(f"Welcome to {TITLE} 👋").classes("text-2xl font-bold title")
                ui.label(
                    "I'm here to help you with anything you'd like to know. "
                    "You can ask me about:"
                ).classes("text-center opacity-80")
                with ui.grid(columns=2).classes("w-full gap-4"):
                    for label in SUGGESTIONS:
                        with ui.button(on_click=partial(ask, label)).props(
                            "flat no-caps align=left"
                        ).classes("suggestion p-4 shadow-sm"):
                            ui.icon(SUGGESTION_ICONS.get(label, "help")).classes(
                                "text-blue-500 mr-2"
                            )
                            ui.label(label)
                ui.label(
                    "Just type your question below and press Enter or click Send!"
                ).classes("text-sm opacity-60")

    def refresh() -> None:
        messages_container.clear()
        with messages_container:
            if not session.entries and not session.is_busy:
                render_welcome()
            for entry in session.entries:
                render_entry(entry)
            if session.is_busy:
                with ui.row().classes("w-full justify-start"):
                    ui.label("Thinking...").classes("message-answer thinking p-3")

        context_row.set_visibility(session.has_context)
        context_label.set_text(f"Uploaded File Content: {session.context_preview()}")
        send_btn.set_enabled(not session.is_busy)
        send_btn.set_text("Generating..." if session.is_busy else "Send")
        scroll_area.scroll_to(percent=1.0)

    async def ask(question: str) -> None:
        if session.is_busy:
            return
        input_field.value = ""
        await controller.submit(question)

    async def send_typed() -> None:
        await ask(input_field.value or "")

    async def handle_upload(e: events.UploadEventArguments) -> None:
        name = e.file.name
        try:
            data = await e.file.read()
            await controller.upload(name, e.file.content_type, data)
        except UnsupportedFileTypeError:
            ui.notify(UNSUPPORTED_FILE_MESSAGE, type="warning")
        except DocumentParseError as err:
            logger.warning(f"Could not read {name}: {err}")
            ui.notify(f"Could not read {name}. The file may be damaged.", type="negative")
        finally:
            uploader.reset()

    # === UI Layout ===
    with ui.column().classes("w-full max-w-4xl mx-auto p-3 gap-4").style("height: 100vh"):
        # Header
        with ui.row().classes("w-full items-center justify-center relative py-2"):
            ui.label(TITLE).classes("text-4xl font-bold title")
            theme_btn = (
                ui.button(icon=theme_icon(), on_click=toggle_theme)
                .props("round flat")
                .classes("absolute right-0")
            )

        # Transcript
        with ui.element("div").classes("panel w-full flex-grow overflow-hidden"):
            with ui.scroll_area().classes("w-full h-full") as scroll_area:
                messages_container = ui.column().classes("w-full p-4 gap-4")

        # Input
        with ui.column().classes("panel w-full p-4 gap-2"):
            with ui.row().classes("w-full items-center context-preview p-3 text-sm") as context_row:
                context_label = ui.label().classes("flex-grow break-all")
                ui.button(icon="close", on_click=controller.clear_context).props(
                    "flat round dense size=sm"
                )
            with ui.row().classes("w-full gap-2 items-end"):
                uploader = (
                    ui.upload(on_upload=handle_upload, auto_upload=True, max_files=1)
                    .props(f'accept="{ACCEPTED_FILES}" flat bordered')
                    .classes("w-48")
                )
                input_field = (
                    ui.textarea(placeholder="Ask anything...")
                    .props("autogrow outlined dense rows=2")
                    .classes("flex-grow")
                    .on("keydown", send_typed, js_handler=SEND_ON_ENTER_JS)
                )
                send_btn = ui.button("Send", on_click=send_typed).props("unelevated color=primary")

    refresh()

