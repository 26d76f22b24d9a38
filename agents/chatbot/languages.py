"""Language names accepted by the Translate intent and their translation codes"""

from types import MappingProxyType
from typing import Mapping

DEFAULT_LANGUAGE_CODE = "en"

LANGUAGE_CODES: Mapping[str, str] = MappingProxyType({
    "spanish": "es",
    "french": "fr",
    "german": "de",
    "hindi": "hi",
    "italian": "it",
    "portuguese": "pt",
    "russian": "ru",
    "japanese": "ja",
    "korean": "ko",
    "chinese": "zh",
    "arabic": "ar",
    "dutch": "nl",
    "swedish": "sv",
    "norwegian": "no",
    "danish": "da",
    "finnish": "fi",
    "turkish": "tr",
    "thai": "th",
    "vietnamese": "vi",
    "polish": "pl",
    "czech": "cs",
    "hungarian": "hu",
    "greek": "el",
    "hebrew": "he",
})


def language_code(language_name: str) -> str:
    """Map a human language name to its code, falling back to English"""
    return LANGUAGE_CODES.get(language_name.lower(), DEFAULT_LANGUAGE_CODE)
