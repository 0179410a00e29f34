import asyncio

import pytest
import requests

import services
from models import (NO_TRANSLATION, TRANSLATION_ERROR, TRANSLATION_MISSING,
                    Definition)
from services import DictionaryService, Speaker, TranslationService

HELLO_PAYLOAD = [
    {
        "word": "hello",
        "phonetic": "həˈləʊ",
        "meanings": [
            {
                "partOfSpeech": "noun",
                "definitions": [{"definition": "\"Hello!\" or an equivalent greeting.", "example": "She gave a cheery hello."}],
                "synonyms": ["greeting"],
            },
            {
                "partOfSpeech": "verb",
                "definitions": [{"definition": "To greet with \"hello\"."}],
                "synonyms": [],
            },
        ],
        "sourceUrls": ["https://en.wiktionary.org/wiki/hello"],
    },
    {"word": "hello", "meanings": []},
]


class DummyResponse:
    def __init__(self, payload=None, error=None) -> None:
        self.payload = payload
        self.error = error

    def json(self):
        if self.error:
            raise self.error
        return self.payload


def fake_get(payload=None, error=None, calls=None):
    def _get(url, params=None, **kwargs):
        if calls is not None:
            calls.append((url, params))
        return DummyResponse(payload, error)
    return _get


def test_lookup_parses_first_entry(monkeypatch):
    calls = []
    monkeypatch.setattr(services.requests, "get", fake_get(HELLO_PAYLOAD, calls=calls))
    result = DictionaryService("https://dict.test/entries/en/").lookup("hello")

    assert calls == [("https://dict.test/entries/en/hello", None)]
    assert result.word == "hello"
    assert [m.part_of_speech for m in result.meanings] == ["noun", "verb"]
    assert result.meanings[0].definitions[0] == Definition("\"Hello!\" or an equivalent greeting.")
    assert result.meanings[0].synonyms == ["greeting"]
    assert result.source_urls == ["https://en.wiktionary.org/wiki/hello"]


def test_lookup_quotes_word(monkeypatch):
    calls = []
    monkeypatch.setattr(services.requests, "get", fake_get([], calls=calls))
    DictionaryService("https://dict.test").lookup("ice cream")
    assert calls[0][0] == "https://dict.test/ice%20cream"


def test_lookup_keeps_slash_in_one_path_segment(monkeypatch):
    calls = []
    monkeypatch.setattr(services.requests, "get", fake_get([], calls=calls))
    DictionaryService("https://dict.test").lookup("and/or")
    assert calls[0][0] == "https://dict.test/and%2For"


@pytest.mark.parametrize("payload", [
    [],
    {"title": "No Definitions Found", "message": "Sorry pal."},
    None,
])
def test_lookup_returns_none_without_entries(monkeypatch, payload):
    monkeypatch.setattr(services.requests, "get", fake_get(payload))
    assert DictionaryService("https://dict.test").lookup("zzzzxxxx") is None


@pytest.mark.parametrize("error", [
    requests.ConnectionError("offline"),
    ValueError("not json"),
])
def test_lookup_swallows_failures(monkeypatch, error):
    monkeypatch.setattr(services.requests, "get", fake_get(error=error))
    assert DictionaryService("https://dict.test").lookup("hello") is None


def test_lookup_tolerates_missing_fields(monkeypatch):
    monkeypatch.setattr(services.requests, "get", fake_get([{"word": "odd"}]))
    result = DictionaryService("https://dict.test").lookup("odd")
    assert result.word == "odd"
    assert result.meanings == []
    assert result.source_urls == []


def test_translate_sends_langpair(monkeypatch):
    calls = []
    payload = {"responseData": {"translatedText": "bonjour"}}
    monkeypatch.setattr(services.requests, "get", fake_get(payload, calls=calls))
    translator = TranslationService("https://mt.test/get")

    assert translator.translate("hello", "fr") == "bonjour"
    assert calls == [("https://mt.test/get", {"q": "hello", "langpair": "en|fr"})]


@pytest.mark.parametrize("payload", [
    {"responseData": {"translatedText": ""}},
    {"responseData": None},
    {},
])
def test_translate_missing_text_gives_placeholder(monkeypatch, payload):
    monkeypatch.setattr(services.requests, "get", fake_get(payload))
    assert TranslationService("https://mt.test/get").translate("hello", "fr") == TRANSLATION_MISSING


def test_translate_failure_gives_error_placeholder(monkeypatch):
    monkeypatch.setattr(services.requests, "get", fake_get(error=requests.Timeout("slow")))
    assert TranslationService("https://mt.test/get").translate("hello", "fr") == TRANSLATION_ERROR


def test_translate_empty_text_skips_request(monkeypatch):
    calls = []
    monkeypatch.setattr(services.requests, "get", fake_get({}, calls=calls))
    assert TranslationService("https://mt.test/get").translate("", "fr") == NO_TRANSLATION
    assert calls == []


def test_translate_all_keeps_order_and_isolates_failures(monkeypatch):
    def _get(url, params=None, **kwargs):
        if params["q"] == "bad":
            raise requests.ConnectionError("boom")
        return DummyResponse({"responseData": {"translatedText": params["q"].upper()}})

    monkeypatch.setattr(services.requests, "get", _get)
    translator = TranslationService("https://mt.test/get")
    result = asyncio.run(translator.translate_all(["one", "bad", "three"], "de"))
    assert result == ["ONE", TRANSLATION_ERROR, "THREE"]


def test_translate_all_empty_input(monkeypatch):
    calls = []
    monkeypatch.setattr(services.requests, "get", fake_get({}, calls=calls))
    assert asyncio.run(TranslationService("https://mt.test/get").translate_all([], "de")) == []
    assert calls == []


def test_speaker_unavailable(monkeypatch):
    monkeypatch.setattr(services.shutil, "which", lambda command: None)
    speaker = Speaker("espeak")
    assert speaker.is_available is False
    assert speaker.speak("hello") == (False, "Command 'espeak' not found.")


def test_speaker_launches_without_waiting(monkeypatch):
    launched = []

    class DummyProcess:
        def __init__(self, args, **kwargs) -> None:
            launched.append(args)

        def wait(self):
            raise AssertionError("speech must not be awaited")

    monkeypatch.setattr(services.shutil, "which", lambda command: f"/usr/bin/{command}")
    monkeypatch.setattr(services.subprocess, "Popen", DummyProcess)
    success, message = Speaker("espeak").speak("hello")

    assert success is True
    assert launched == [["/usr/bin/espeak", "hello"]]
    assert "hello" in message


def test_speaker_reports_launch_error(monkeypatch):
    def _popen(args, **kwargs):
        raise OSError("permission denied")

    monkeypatch.setattr(services.shutil, "which", lambda command: "/usr/bin/espeak")
    monkeypatch.setattr(services.subprocess, "Popen", _popen)
    success, message = Speaker("espeak").speak("hello")
    assert success is False
    assert "permission denied" in message


def test_speaker_reaps_finished_processes(monkeypatch):
    class DummyProcess:
        def __init__(self, args, **kwargs) -> None:
            self.word = args[-1]
            self.returncode = None

        def poll(self):
            return self.returncode

    monkeypatch.setattr(services.shutil, "which", lambda command: "/usr/bin/espeak")
    monkeypatch.setattr(services.subprocess, "Popen", DummyProcess)
    speaker = Speaker("espeak")
    speaker.speak("hello")
    speaker.speak("world")
    speaker.processes[0].returncode = 0

    speaker.speak("again")
    assert [p.word for p in speaker.processes] == ["world", "again"]

    for process in speaker.processes:
        process.returncode = 0
    speaker.reap()
    assert speaker.processes == []
