from __future__ import annotations

import pytest

from openkarotz.domain.entities.errors import KarotzValidationError
from openkarotz.domain.entities.voice import (
    SUPPORTED_LANGUAGES,
    VoiceGender,
    resolve_voice,
    voice_index,
)


def test_supported_languages() -> None:
    assert len(SUPPORTED_LANGUAGES) == 44
    assert len(set(SUPPORTED_LANGUAGES)) == 44
    assert SUPPORTED_LANGUAGES[:4] == ("fr", "fr-CA", "en-US", "en-GB")
    assert SUPPORTED_LANGUAGES[-1] == "cy"


@pytest.mark.parametrize("position, language", list(enumerate(SUPPORTED_LANGUAGES)))
def test_voice_index_for_every_language(position, language) -> None:
    assert voice_index(language, female=False) == position * 2 + 1
    assert voice_index(language, female=True) == position * 2 + 2


def test_voice_index_known_values() -> None:
    assert voice_index("fr", False) == 1
    assert voice_index("fr", True) == 2
    assert voice_index("de", False) == 9
    assert voice_index("cy", True) == 88


@pytest.mark.parametrize("language", ["xx", "FR", "en", "de-DE", ""])
def test_voice_index_rejects_unsupported_language(language) -> None:
    with pytest.raises(KarotzValidationError) as exc:
        voice_index(language, False)

    assert exc.value.message == f"Language not supported: {language}"


def test_voice_index_requires_language() -> None:
    with pytest.raises(KarotzValidationError, match="Language is required"):
        voice_index(None, True)


def test_resolve_voice() -> None:
    voice = resolve_voice("it", female=True)

    assert voice.language == "it"
    assert voice.gender is VoiceGender.FEMALE
    assert voice.index == 12
