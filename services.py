# services.py
import asyncio
import logging
import shutil
import subprocess
from typing import List, Optional, Tuple
from urllib.parse import quote

import requests

from models import (NO_TRANSLATION, TRANSLATION_ERROR, TRANSLATION_MISSING,
                    Definition, LookupResult, Meaning)

logger = logging.getLogger(__name__)

class DictionaryService:
    """A service to handle interactions with the Free Dictionary API."""
    def __init__(self, base_url: str):
        self.base_url = base_url.rstrip("/")

    def lookup(self, word: str) -> Optional[LookupResult]:
        """Fetches a word and returns its first entry, or None when nothing usable came back."""
        url = f"{self.base_url}/{quote(word, safe='')}"
        logger.debug("Looking up %r at %s", word, url)
        try:
            response = requests.get(url)
            payload = response.json()
            if not isinstance(payload, list) or not payload:
                return None
            return self._parse_entry(payload[0])
        except (requests.RequestException, ValueError, TypeError, AttributeError) as e:
            logger.warning("Error fetching definition for %r: %s", word, e)
            return None

    def _parse_entry(self, entry: dict) -> LookupResult:
        """Parses a single raw API entry into our LookupResult data model."""
        meanings = []
        for raw in entry.get("meanings") or []:
            definitions = [
                Definition(definition=d.get("definition", ""))
                for d in raw.get("definitions") or []
            ]
            meanings.append(Meaning(
                part_of_speech=raw.get("partOfSpeech", ""),
                definitions=definitions,
                synonyms=list(raw.get("synonyms") or []),
            ))
        return LookupResult(
            word=entry.get("word", ""),
            meanings=meanings,
            source_urls=list(entry.get("sourceUrls") or []),
        )


class TranslationService:
    """A service to handle interactions with the MyMemory translation API."""
    def __init__(self, base_url: str, source_language: str = "en"):
        self.base_url = base_url
        self.source_language = source_language

    def translate(self, text: str, target_language: str) -> str:
        """Translates one fragment. Never raises; failures come back as placeholder text."""
        if not text:
            return NO_TRANSLATION
        params = {"q": text, "langpair": f"{self.source_language}|{target_language}"}
        try:
            response = requests.get(self.base_url, params=params)
            data = response.json()
            translated = (data.get("responseData") or {}).get("translatedText")
            return translated or TRANSLATION_MISSING
        except (requests.RequestException, ValueError, TypeError, AttributeError) as e:
            logger.warning("Error fetching translation for %r: %s", text, e)
            return TRANSLATION_ERROR

    async def translate_all(self, texts: List[str], target_language: str) -> List[str]:
        """Starts every translation at once and waits for all of them, keeping input order."""
        if not texts:
            return []
        return list(await asyncio.gather(
            *(asyncio.to_thread(self.translate, text, target_language) for text in texts)
        ))


class Speaker:
    """A service to hand words to the platform's text-to-speech command."""
    def __init__(self, command: str):
        self.command_name = command
        self.command_path = shutil.which(command)
        self.processes: List[subprocess.Popen] = []

    @property
    def is_available(self) -> bool:
        return self.command_path is not None

    def reap(self) -> None:
        """Collects finished speech processes without blocking on running ones."""
        self.processes = [p for p in self.processes if p.poll() is None]

    def speak(self, text: str) -> Tuple[bool, str]:
        """Starts speaking and returns at once; the process is never waited on."""
        if not self.is_available:
            return False, f"Command '{self.command_name}' not found."
        self.reap()
        try:
            process = subprocess.Popen([self.command_path, text], stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
            self.processes.append(process)
            return True, f"Pronouncing '{text}'."
        except OSError as e:
            return False, f"Could not start '{self.command_name}': {e}"
