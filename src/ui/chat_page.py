"""NiceGUI chat interface for the Gemini conversation pipeline."""

import logging

from nicegui import ui

from src.agent.pipeline import get_pipeline
from src.models.schemas import Turn, TurnRole
from src.ui.state import ChatState, submit_turn

logger = logging.getLogger(__name__)

APP_TITLE = "Rehan AI"

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    .header { background: linear-gradient(135deg, #2563eb 0%, #4f46e5 100%); }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 16px 16px 4px 16px;
    }

    .message-assistant {
        background: white;
        color: #1f2937;
        border: 1px solid #e5e7eb;
        border-radius: 16px 16px 16px 4px;
    }
    .body--dark .message-assistant {
        background: #4b5563;
        color: white;
        border-color: #6b7280;
    }

    .message-error {
        background: #fee2e2;
        color: #b91c1c;
        border: 1px solid #fecaca;
        border-radius: 16px;
    }
    .body--dark .message-error {
        background: #7f1d1d;
        color: #fecaca;
        border-color: #991b1b;
    }

    .message-text { white-space: pre-wrap; word-break: break-word; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #2563eb;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.1s; }
    .typing-dot:nth-child(3) { animation-delay: 0.2s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }
</style>
"""

BUBBLE_CLASSES = {
    TurnRole.USER: "message-user",
    TurnRole.ASSISTANT: "message-assistant",
    TurnRole.ERROR: "message-error",
}


def format_timestamp(turn: Turn) -> str:
    """Format a turn's creation time as HH:MM."""
    return turn.created_at.strftime("%H:%M")


def send_button_state(prompt: str | None, loading: bool) -> tuple[bool, str]:
    """Return whether Send is enabled and the label it shows."""
    if loading:
        return False, "Sending..."
    return bool(prompt and prompt.strip()), "Send"


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    state = ChatState()
    pipeline = get_pipeline()
    dark = ui.dark_mode(value=state.dark_mode)

    messages_container: ui.column
    scroll_area: ui.scroll_area
    input_field: ui.textarea
    send_btn: ui.button
    clear_btn: ui.button

    def render_turn(turn: Turn) -> None:
        is_user = turn.role is TurnRole.USER
        align = "justify-end" if is_user else "justify-start"

        with ui.row().classes(f"w-full {align}"):
            with ui.column().classes("max-w-[80%] gap-1"):
                with ui.element("div").classes(f"px-4 py-3 {BUBBLE_CLASSES[turn.role]}"):
                    ui.label(turn.text).classes("message-text text-sm leading-relaxed")
                ui.label(format_timestamp(turn)).classes(
                    f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
                )

    def render_typing_indicator() -> None:
        with ui.row().classes("w-full justify-start"):
            with ui.element("div").classes("message-assistant px-4 py-3"):
                with ui.row().classes("items-center gap-2"):
                    with ui.row().classes("gap-1"):
                        for _ in range(3):
                            ui.element("div").classes("typing-dot")
                    ui.label("Thinking...").classes("text-sm text-gray-500 italic")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if state.is_empty and not state.loading:
                with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                    ui.label(f"Welcome to {APP_TITLE}!").classes("text-2xl font-semibold")
                    ui.label("Ask me anything and I'll be happy to help.").classes(
                        "text-gray-400"
                    )
            for turn in state.turns:
                render_turn(turn)
            if state.loading:
                render_typing_indicator()
            if state.error and not state.loading:
                with ui.row().classes("w-full justify-center"):
                    ui.label(state.error).classes("text-sm text-red-500")
        scroll_area.scroll_to(percent=1.0)

    def update_send_button() -> None:
        enabled, label = send_button_state(input_field.value, state.loading)
        send_btn.set_text(label)
        if enabled:
            send_btn.enable()
        else:
            send_btn.disable()

    def set_busy(busy: bool) -> None:
        for element in (input_field, clear_btn):
            if busy:
                element.disable()
            else:
                element.enable()
        update_send_button()

    async def send_message() -> None:
        text = input_field.value or ""
        if not text.strip() or state.loading:
            return

        input_field.value = ""

        def on_start() -> None:
            set_busy(True)
            refresh_messages()

        try:
            await submit_turn(state, pipeline, text, on_start=on_start)
        finally:
            set_busy(False)
            refresh_messages()

        if state.error:
            ui.notify(state.error, type="negative")

    def clear_chat() -> None:
        if state.loading:
            return
        state.clear()
        input_field.value = ""
        refresh_messages()

    def toggle_dark_mode() -> None:
        dark.set_value(state.toggle_dark_mode())

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto rounded-xl shadow-md").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            ui.label(APP_TITLE).classes("text-lg font-semibold text-white")
            with ui.row().classes("items-center gap-3"):
                ui.switch(value=state.dark_mode, on_change=toggle_dark_mode).props(
                    "color=white"
                )
                clear_btn = ui.button("Clear Chat", on_click=clear_chat).props(
                    "flat color=white"
                )

        # Messages
        with ui.scroll_area().classes("flex-grow w-full") as scroll_area:
            messages_container = ui.column().classes("w-full p-5 gap-4")

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end border-t"):
            input_field = (
                ui.textarea(placeholder="Type your message...")
                .props("autogrow outlined dense rows=1 clearable")
                .classes("flex-grow")
                .on("keydown.enter.exact.prevent", send_message)
            )
            input_field.on_value_change(update_send_button)
            send_btn = ui.button("Send", on_click=send_message).props("unelevated")

    update_send_button()
    refresh_messages()
