# ui.py
from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.widgets import (Button, Input, Label, Markdown, RichLog, Select,
                             Static, Switch)

from languages import language_options
from models import DARK, NOT_AVAILABLE, AppState, ThemeState

IDLE_HINT = "*Search for a word to see its definition.*"


def render_result(state: AppState) -> str:
    """Markdown for the result area. Depends on nothing but the snapshot."""
    if state.loading:
        return "Loading..."
    record = state.record
    if record is None:
        return NOT_AVAILABLE if state.searched else IDLE_HINT
    lines = [
        f"## Word: {record.word}",
        f"**Part of Speech:** {record.part_of_speech}",
        f"**Definition:** {record.definition}",
    ]
    if record.synonyms:
        lines.append(f"**Synonyms:** {', '.join(record.synonyms)}")
    return "\n\n".join(lines)


class ThemeSwitch(Static):
    """Switch plus label; checked means dark."""
    def compose(self) -> ComposeResult:
        yield Switch(value=True, id="theme-switch")
        yield Label("Dark Mode", id="theme-label")

    def show_theme(self, theme: ThemeState) -> None:
        is_dark = theme == DARK
        switch = self.query_one(Switch)
        if switch.value != is_dark:
            switch.value = is_dark
        self.query_one(Label).update("Dark Mode" if is_dark else "Light Mode")


class SearchControls(Static):
    """Widget for the search input, button and language selector."""
    class SearchRequested(Message):
        def __init__(self, query: str) -> None:
            self.query = query
            super().__init__()

    class LanguageChanged(Message):
        def __init__(self, code: str) -> None:
            self.code = code
            super().__init__()

    def __init__(self, target_language: str = "en", **kwargs) -> None:
        super().__init__(**kwargs)
        self.target_language = target_language

    def compose(self) -> ComposeResult:
        with Horizontal(id="searchbar"):
            yield Input(placeholder="Search Word", id="search-input")
            yield Button("Search", variant="primary", id="search-button")
            yield Select(language_options(), value=self.target_language, allow_blank=False, id="language-select")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.post_search_message()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self.post_search_message()

    def on_select_changed(self, event: Select.Changed) -> None:
        if isinstance(event.value, str):
            self.post_message(self.LanguageChanged(event.value))

    def post_search_message(self) -> None:
        query = self.query_one(Input).value.strip()
        if query:
            self.post_message(self.SearchRequested(query))


class ResultCard(Static):
    """Widget to display the current DisplayRecord and its actions."""
    class SpeakRequested(Message):
        def __init__(self, word: str) -> None:
            self.word = word
            super().__init__()

    class ReadMoreRequested(Message):
        def __init__(self, url: str) -> None:
            self.url = url
            super().__init__()

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.snapshot: Optional[AppState] = None

    def compose(self) -> ComposeResult:
        yield Markdown(IDLE_HINT, id="result-text")
        with Horizontal(id="result-actions"):
            yield Button("Pronounce", id="pronounce", disabled=True)
            yield Button("Read More", id="read-more", disabled=True)

    def update_result(self, state: AppState) -> None:
        self.snapshot = state
        self.query_one(Markdown).update(render_result(state))
        record = None if state.loading else state.record
        self.query_one("#pronounce", Button).disabled = record is None
        self.query_one("#read-more", Button).disabled = record is None or record.read_more_url is None

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        record = self.snapshot.record if self.snapshot else None
        if record is None:
            return
        if event.button.id == "pronounce":
            self.post_message(self.SpeakRequested(record.word))
        elif event.button.id == "read-more" and record.read_more_url:
            self.post_message(self.ReadMoreRequested(record.read_more_url))


class LogPane(RichLog):
    """A dedicated widget for logging application events."""
    def add_message(self, message: str) -> None:
        self.write(message)
