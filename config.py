# config.py
import sys
from dataclasses import dataclass

import languages

@dataclass
class Config:
    """Holds all application configuration."""
    DICTIONARY_URL: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    TRANSLATION_URL: str = "https://api.mymemory.translated.net/get"
    SOURCE_LANGUAGE: str = languages.SOURCE_LANGUAGE
    DEFAULT_TARGET_LANGUAGE: str = languages.SOURCE_LANGUAGE
    SPEECH_COMMAND: str = "say" if sys.platform == "darwin" else "espeak"
    LOG_LEVEL: str = "INFO"
