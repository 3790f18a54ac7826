"""Text-to-speech voices supported by the OpenKarotz firmware."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .errors import KarotzValidationError

# Order matters: the voice number sent to the device is derived from it.
SUPPORTED_LANGUAGES: Tuple[str, ...] = (
    "fr",
    "fr-CA",
    "en-US",
    "en-GB",
    "de",
    "it",
    "es",
    "nl",
    "af",
    "sq",
    "ar",
    "hy",
    "bs",
    "pt-BR",
    "hr",
    "cs",
    "da",
    "en-AU",
    "eo",
    "fi",
    "el",
    "ht",
    "hi",
    "hu",
    "is",
    "id",
    "ja",
    "ko",
    "la",
    "no",
    "pl",
    "pt-PT",
    "ro",
    "ru",
    "sr",
    "sh",
    "sk",
    "sw",
    "sv",
    "ta",
    "th",
    "tr",
    "vi",
    "cy",
)


class VoiceGender(str, Enum):
    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True, slots=True)
class Voice:
    """A language/gender pair and the voice number the device expects."""

    language: str
    gender: VoiceGender
    index: int


def voice_index(language: str, female: bool) -> int:
    """
    Compute the device voice number for a language and gender.

    Each language owns two consecutive slots: ``position * 2 + 1`` for the
    male voice and ``position * 2 + 2`` for the female one.

    Raises:
        KarotzValidationError: If the language is not supported.
    """
    if language is None:
        raise KarotzValidationError("Language is required")
    try:
        position = SUPPORTED_LANGUAGES.index(language)
    except ValueError:
        raise KarotzValidationError(
            f"Language not supported: {language}",
            {"language": language},
        ) from None
    return (position * 2) + (2 if female else 1)


def resolve_voice(language: str, female: bool) -> Voice:
    gender = VoiceGender.FEMALE if female else VoiceGender.MALE
    return Voice(language=language, gender=gender, index=voice_index(language, female))
