# models.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

NO_PART_OF_SPEECH = "N/A"
NO_DEFINITION = "No definition available"
NO_SYNONYMS = "No synonyms available"
NO_TRANSLATION = "No translation available"
TRANSLATION_MISSING = "Translation not available"
TRANSLATION_ERROR = "Error fetching translation"
NOT_AVAILABLE = "Not available"

@dataclass(frozen=True)
class Definition:
    definition: str

@dataclass(frozen=True)
class Meaning:
    part_of_speech: str
    definitions: List[Definition] = field(default_factory=list)
    synonyms: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class LookupResult:
    """The first entry returned by the dictionary service for a word."""
    word: str
    meanings: List[Meaning] = field(default_factory=list)
    source_urls: List[str] = field(default_factory=list)

@dataclass(frozen=True)
class DisplayRecord:
    """Everything the result card shows, already translated where requested."""
    word: str
    part_of_speech: str
    definition: str
    synonyms: List[str]
    source_urls: List[str] = field(default_factory=list)

    @property
    def read_more_url(self) -> Optional[str]:
        return self.source_urls[0] if self.source_urls else None

@dataclass(frozen=True)
class ThemeState:
    name: str
    color: str
    background: str
    border: str
    textual_theme: str

LIGHT = ThemeState(
    name="light",
    color="black",
    background="white",
    border="rgb(10,8,8)",
    textual_theme="textual-light",
)
DARK = ThemeState(
    name="dark",
    color="white",
    background="rgb(34,34,34)",
    border="rgb(234,228,228)",
    textual_theme="textual-dark",
)

class SearchStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    RESOLVED_EMPTY = "resolved-empty"
    RESOLVED_FOUND = "resolved-found"

@dataclass(frozen=True)
class AppState:
    """A single object to hold the entire application state."""
    status: SearchStatus = SearchStatus.IDLE
    search_text: str = ""
    target_language: str = "en"
    record: Optional[DisplayRecord] = None
    theme: ThemeState = DARK
    generation: int = 0

    @property
    def loading(self) -> bool:
        return self.status is SearchStatus.LOADING

    @property
    def searched(self) -> bool:
        return self.status is not SearchStatus.IDLE
