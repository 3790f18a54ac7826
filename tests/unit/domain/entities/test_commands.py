from __future__ import annotations

import pytest

from openkarotz.domain.entities.commands import (
    COMMANDS,
    ResponseShape,
    ResultConvention,
    get_command,
)
from openkarotz.domain.entities.errors import KarotzValidationError


def test_build_without_parameters() -> None:
    assert get_command("sleep").build() == "sleep"
    assert get_command("get_free_space").build() == "get_free_space"


def test_build_keeps_declared_order() -> None:
    path = get_command("ears").build(noreset=True, right=12, left=3)

    assert path == "ears?left=3&right=12&noreset=1"


def test_build_renders_booleans_as_digits() -> None:
    assert get_command("wakeup").build(silent=True) == "wakeup?silent=1"
    assert get_command("snapshot").build(silent=False) == "snapshot?silent=0"


def test_build_skips_none_values() -> None:
    path = get_command("leds").build(color="ff0000", pulse=None, speed=None)

    assert path == "leds?color=ff0000"


def test_build_encodes_values() -> None:
    path = get_command("tts").build(voice=3, text="Hello world & more")

    assert path == "tts?voice=3&text=Hello+world+%26+more"


def test_build_rejects_unknown_parameter() -> None:
    with pytest.raises(KarotzValidationError, match="Unknown parameter"):
        get_command("sleep").build(silent=True)


def test_build_rejects_missing_required_parameter() -> None:
    with pytest.raises(KarotzValidationError, match="Missing parameter"):
        get_command("ears").build(left=1, noreset=True)


def test_optional_parameters() -> None:
    assert get_command("moods").build() == "apps/moods"
    assert get_command("moods").build(id=4) == "apps/moods?id=4"
    assert get_command("clock").build(hour=0) == "apps/clock?hour=0"


def test_sound_commands_share_path() -> None:
    assert get_command("sound_by_id").build(id="bip1") == "sound?id=bip1"
    assert get_command("sound_by_url").path == "sound"


def test_tts_uses_return_flag() -> None:
    tts = get_command("tts")

    assert tts.convention is ResultConvention.RETURN_FLAG
    assert tts.shape is ResponseShape.TTS


def test_only_tts_uses_tts_shape() -> None:
    tts_shaped = [
        name for name, cmd in COMMANDS.items() if cmd.shape is ResponseShape.TTS
    ]

    assert tts_shaped == ["tts"]


@pytest.mark.parametrize("name", ["get_free_space", "sound_list", "status", "wakeup"])
def test_commands_without_status(name) -> None:
    assert get_command(name).convention is ResultConvention.NONE


def test_get_command_unknown() -> None:
    with pytest.raises(KarotzValidationError, match="Unknown command: fly"):
        get_command("fly")
