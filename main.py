# main.py
import logging

try:
    import pyperclip
except ImportError:
    pyperclip = None

from rich.markup import escape
from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.logging import TextualHandler
from textual.reactive import reactive
from textual.widgets import Footer, Header, Label, Switch

from config import Config
from controller import (SearchPipeline, resolve_empty, resolve_found,
                        select_language, submit_search, toggle_theme)
from models import DARK, AppState
from services import DictionaryService, Speaker, TranslationService
from ui import LogPane, ResultCard, SearchControls, ThemeSwitch

class VocabVaultApp(App):
    TITLE = "VocabVault"
    BINDINGS = [
        ("d", "toggle_theme", "Toggle theme"),
        ("q", "quit", "Quit"),
        ("c", "copy_link", "Copy Link"),
    ]
    CSS_PATH = "vocab_vault.tcss"

    app_state = reactive(AppState(), always_update=True, init=False)

    def __init__(self, pipeline: SearchPipeline, speaker: Speaker, config: Config):
        super().__init__()
        self.pipeline = pipeline
        self.speaker = speaker
        self.config = config
        self.set_reactive(VocabVaultApp.app_state, AppState(target_language=config.DEFAULT_TARGET_LANGUAGE))

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="main-container"):
            with Horizontal(id="head"):
                yield Label("📖 Dictionary", id="heading")
                yield ThemeSwitch(id="theme-toggle")
            yield SearchControls(target_language=self.app_state.target_language)
            yield ResultCard(id="result-card")
            yield LogPane(id="log", wrap=True, highlight=True, markup=True)
        yield Footer()

    def on_mount(self) -> None:
        log = self.query_one(LogPane)
        self.query_one("#search-input").focus()
        if self.speaker.is_available:
            log.add_message(f"[green]✅ {self.config.SPEECH_COMMAND} found.[/green]")
        else:
            log.add_message(f"[yellow]⚠️ '{self.config.SPEECH_COMMAND}' not found, pronunciation disabled.[/yellow]")
        if not pyperclip:
            log.add_message("[yellow]⚠️ 'pyperclip' not installed.[/yellow]")
        self.apply_state(self.app_state)

    def watch_app_state(self, old_state: AppState, new_state: AppState) -> None:
        self.apply_state(new_state)

    def apply_state(self, state: AppState) -> None:
        self.theme = state.theme.textual_theme
        container = self.query_one("#main-container")
        container.styles.color = state.theme.color
        container.styles.background = state.theme.background
        container.styles.border = ("round", state.theme.border)
        self.query_one(ThemeSwitch).show_theme(state.theme)
        self.query_one(ResultCard).update_result(state)

    def action_toggle_theme(self) -> None:
        self.app_state = toggle_theme(self.app_state)

    def action_copy_link(self) -> None:
        log = self.query_one(LogPane)
        if not pyperclip:
            log.add_message("[red]❌ 'pyperclip' not installed.[/red]")
            return
        record = self.app_state.record
        if record and record.read_more_url:
            pyperclip.copy(record.read_more_url)
            log.add_message(f"📋 Copied source link for '[b]{escape(record.word)}[/b]'.")
        else:
            log.add_message("[yellow]⚠️ No source link to copy.[/yellow]")

    def on_switch_changed(self, event: Switch.Changed) -> None:
        if event.value != (self.app_state.theme == DARK):
            self.action_toggle_theme()

    def on_search_controls_language_changed(self, message: SearchControls.LanguageChanged) -> None:
        self.app_state = select_language(self.app_state, message.code)

    def on_search_controls_search_requested(self, message: SearchControls.SearchRequested) -> None:
        state = submit_search(self.app_state, message.query)
        if state is self.app_state:
            return
        self.app_state = state
        self.query_one(LogPane).add_message(f"🔎 Searching for '{escape(state.search_text)}'...")
        self.workers.cancel_group(self, "search_worker")
        self.run_worker(
            self.perform_search(state.search_text, state.target_language, state.generation),
            group="search_worker", exclusive=True,
        )

    def on_result_card_speak_requested(self, message: ResultCard.SpeakRequested) -> None:
        success, text = self.speaker.speak(message.word)
        if not success:
            self.query_one(LogPane).add_message(f"[red]❌ {escape(text)}[/red]")

    def on_result_card_read_more_requested(self, message: ResultCard.ReadMoreRequested) -> None:
        self.open_url(message.url)
        self.query_one(LogPane).add_message(f"🌐 Opening {escape(message.url)}")

    async def perform_search(self, query: str, target_language: str, generation: int) -> None:
        log = self.query_one(LogPane)
        record = await self.pipeline.run(query, target_language)
        if record is None:
            self.app_state = resolve_empty(self.app_state, generation)
            log.add_message(f"🤷 No definition found for '{escape(query)}'.")
        else:
            self.app_state = resolve_found(self.app_state, generation, record)
            log.add_message(f"📖 Found '{escape(record.word)}' ({escape(record.part_of_speech)}).")


def build_app(config: Config) -> VocabVaultApp:
    dictionary = DictionaryService(config.DICTIONARY_URL)
    translator = TranslationService(config.TRANSLATION_URL, config.SOURCE_LANGUAGE)
    pipeline = SearchPipeline(dictionary, translator, config.SOURCE_LANGUAGE)
    return VocabVaultApp(pipeline, Speaker(config.SPEECH_COMMAND), config)


def run() -> None:
    app_config = Config()
    logging.basicConfig(level=app_config.LOG_LEVEL, handlers=[TextualHandler()])
    build_app(app_config).run()


if __name__ == "__main__":
    run()
