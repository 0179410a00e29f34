# controller.py
"""State transitions and the lookup -> translate -> display pipeline.

Every transition takes the current AppState and returns a new one; nothing
here touches the UI. The App keeps the latest snapshot and re-renders on
each change.
"""
import asyncio
import logging
from dataclasses import replace
from typing import Optional

from models import (DARK, LIGHT, NO_DEFINITION, NO_PART_OF_SPEECH, NO_SYNONYMS,
                    AppState, DisplayRecord, LookupResult, SearchStatus)
from services import DictionaryService, TranslationService

logger = logging.getLogger(__name__)


def submit_search(state: AppState, text: str) -> AppState:
    query = text.strip()
    if not query:
        return state
    return replace(
        state,
        status=SearchStatus.LOADING,
        search_text=query,
        record=None,
        generation=state.generation + 1,
    )


def resolve_empty(state: AppState, generation: int) -> AppState:
    if generation != state.generation:
        return state
    return replace(state, status=SearchStatus.RESOLVED_EMPTY, record=None)


def resolve_found(state: AppState, generation: int, record: DisplayRecord) -> AppState:
    if generation != state.generation:
        return state
    return replace(state, status=SearchStatus.RESOLVED_FOUND, record=record)


def select_language(state: AppState, code: str) -> AppState:
    # Only the next search picks this up.
    return replace(state, target_language=code)


def toggle_theme(state: AppState) -> AppState:
    return replace(state, theme=LIGHT if state.theme == DARK else DARK)


def placeholder_record(result: LookupResult) -> DisplayRecord:
    return DisplayRecord(
        word=result.word,
        part_of_speech=NO_PART_OF_SPEECH,
        definition=NO_DEFINITION,
        synonyms=[NO_SYNONYMS],
        source_urls=list(result.source_urls),
    )


def first_definition(result: LookupResult) -> Optional[str]:
    definitions = result.meanings[0].definitions
    if definitions and definitions[0].definition:
        return definitions[0].definition
    return None


def build_display_record(result: LookupResult) -> DisplayRecord:
    """Untranslated record from the first meaning and its first definition."""
    if not result.meanings:
        return placeholder_record(result)
    meaning = result.meanings[0]
    return DisplayRecord(
        word=result.word,
        part_of_speech=meaning.part_of_speech or NO_PART_OF_SPEECH,
        definition=first_definition(result) or NO_DEFINITION,
        synonyms=list(meaning.synonyms) or [NO_SYNONYMS],
        source_urls=list(result.source_urls),
    )


class SearchPipeline:
    """Runs one search: dictionary lookup, then translation when needed."""
    def __init__(self, dictionary: DictionaryService, translator: TranslationService, source_language: str = "en"):
        self.dictionary = dictionary
        self.translator = translator
        self.source_language = source_language

    async def run(self, word: str, target_language: str) -> Optional[DisplayRecord]:
        try:
            result = await asyncio.to_thread(self.dictionary.lookup, word)
        except Exception:
            logger.exception("Lookup for %r failed", word)
            return None
        if result is None:
            return None
        if not result.meanings or target_language == self.source_language:
            return build_display_record(result)
        return await self.translate_record(result, target_language)

    async def translate_record(self, result: LookupResult, target_language: str) -> DisplayRecord:
        meaning = result.meanings[0]
        word = await asyncio.to_thread(self.translator.translate, result.word, target_language)
        definition = await asyncio.to_thread(
            self.translator.translate, first_definition(result) or NO_DEFINITION, target_language
        )
        synonyms = []
        if meaning.synonyms:
            synonyms = await self.translator.translate_all(meaning.synonyms, target_language)
        return DisplayRecord(
            word=word,
            part_of_speech=meaning.part_of_speech or NO_PART_OF_SPEECH,
            definition=definition,
            synonyms=synonyms or [NO_SYNONYMS],
            source_urls=list(result.source_urls),
        )
