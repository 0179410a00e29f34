# languages.py
from typing import Dict, List, Tuple

# Definitions always come back in English; translations start from here.
SOURCE_LANGUAGE = "en"

# Display name -> MyMemory language code.
LANGUAGE_CODES: Dict[str, str] = {
    "English": "en",
    "Arabic": "ar",
    "Bengali": "bn",
    "Chinese": "zh",
    "Dutch": "nl",
    "French": "fr",
    "German": "de",
    "Greek": "el",
    "Gujarati": "gu",
    "Hindi": "hi",
    "Indonesian": "id",
    "Italian": "it",
    "Japanese": "ja",
    "Kannada": "kn",
    "Korean": "ko",
    "Malayalam": "ml",
    "Marathi": "mr",
    "Polish": "pl",
    "Portuguese": "pt",
    "Punjabi": "pa",
    "Russian": "ru",
    "Spanish": "es",
    "Swedish": "sv",
    "Tamil": "ta",
    "Telugu": "te",
    "Turkish": "tr",
    "Ukrainian": "uk",
    "Urdu": "ur",
    "Vietnamese": "vi",
}


def language_options() -> List[Tuple[str, str]]:
    """(label, code) pairs in table order, ready for a Select widget."""
    return list(LANGUAGE_CODES.items())
