"""
Command table for the OpenKarotz CGI API.

Every remote action is described once here: the CGI path, the ordered query
parameters it accepts, the JSON shape it answers with and the rule that tells
whether the device reported success. The device mixes two success
conventions (numeric ``return == 0`` for most commands, boolean
``return == true`` for text-to-speech) with no general rule, so the
convention is recorded per command.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, FrozenSet, List, Mapping, Tuple
from urllib.parse import urlencode

from .errors import KarotzValidationError


class ResultConvention(str, Enum):
    """How a command signals success in its JSON answer."""

    STATUS_ZERO = "status_zero"
    RETURN_FLAG = "return_flag"
    NONE = "none"


class ResponseShape(str, Enum):
    """Which result record a command's answer is parsed into."""

    GENERAL = "general"
    TTS = "tts"


def _render(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


@dataclass(frozen=True, slots=True)
class CommandDescriptor:
    name: str
    path: str
    params: Tuple[str, ...] = ()
    required: FrozenSet[str] = field(default_factory=frozenset)
    convention: ResultConvention = ResultConvention.STATUS_ZERO
    shape: ResponseShape = ResponseShape.GENERAL

    def build(self, **values: Any) -> str:
        """
        Render the relative request path for this command.

        Parameters are emitted in declaration order, ``None`` values are
        skipped and every value is form-encoded.

        Raises:
            KarotzValidationError: On unknown or missing required parameters.
        """
        unknown = sorted(set(values) - set(self.params))
        if unknown:
            raise KarotzValidationError(
                f"Unknown parameter(s) for {self.name}: {', '.join(unknown)}",
                {"command": self.name, "unknown": unknown},
            )

        missing = sorted(name for name in self.required if values.get(name) is None)
        if missing:
            raise KarotzValidationError(
                f"Missing parameter(s) for {self.name}: {', '.join(missing)}",
                {"command": self.name, "missing": missing},
            )

        pairs: List[Tuple[str, str]] = [
            (name, _render(values[name]))
            for name in self.params
            if values.get(name) is not None
        ]
        if not pairs:
            return self.path
        return f"{self.path}?{urlencode(pairs)}"


def _command(
    name: str,
    path: str | None = None,
    params: Tuple[str, ...] = (),
    required: Tuple[str, ...] | None = None,
    convention: ResultConvention = ResultConvention.STATUS_ZERO,
    shape: ResponseShape = ResponseShape.GENERAL,
) -> CommandDescriptor:
    return CommandDescriptor(
        name=name,
        path=path or name,
        params=params,
        required=frozenset(params if required is None else required),
        convention=convention,
        shape=shape,
    )


_NO_STATUS = ResultConvention.NONE

COMMANDS: Mapping[str, CommandDescriptor] = {
    descriptor.name: descriptor
    for descriptor in (
        _command("get_free_space", convention=_NO_STATUS),
        _command("sound_list", convention=_NO_STATUS),
        _command("status", convention=_NO_STATUS),
        _command("wakeup", params=("silent",), convention=_NO_STATUS),
        _command("sleep"),
        _command("ears_reset"),
        _command("ears_random"),
        _command("ears_mode", params=("disable",)),
        _command("ears", params=("left", "right", "noreset")),
        _command(
            "leds",
            params=("color", "pulse", "speed", "color2"),
            required=("color",),
        ),
        _command("display_cache"),
        _command("clear_cache"),
        _command(
            "tts",
            params=("voice", "text"),
            convention=ResultConvention.RETURN_FLAG,
            shape=ResponseShape.TTS,
        ),
        _command("sound_by_id", path="sound", params=("id",)),
        _command("sound_by_url", path="sound", params=("url",)),
        _command("sound_control", params=("cmd",)),
        _command("squeezebox", params=("cmd",)),
        _command("snapshot_list"),
        _command("clear_snapshots"),
        _command("snapshot", params=("silent",)),
        _command("rfid_list"),
        _command("rfid_start_record"),
        _command("rfid_stop_record"),
        _command("moods", path="apps/moods", params=("id",), required=()),
        _command("clock", path="apps/clock", params=("hour",), required=()),
    )
}


def get_command(name: str) -> CommandDescriptor:
    try:
        return COMMANDS[name]
    except KeyError:
        raise KarotzValidationError(f"Unknown command: {name}") from None
