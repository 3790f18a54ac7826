"""Domain service helpers for validating command arguments and request paths."""

import re
from typing import Any, Optional
from urllib.parse import quote

from openkarotz.domain.entities.errors import KarotzValidationError

EAR_POSITION_MIN = 0
EAR_POSITION_MAX = 17
CLOCK_HOUR_MIN = 0
CLOCK_HOUR_MAX = 23

_COLOR_RE = re.compile(r"^[0-9a-fA-F]{6}$")
_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")
# RFC 3986 unreserved + sub-delims, plus the separators used in a path+query
_URL_SAFE_CHARS = "/?&=%+-._~:@,;!$'()*"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_ear_position(name: str, value: Any) -> int:
    if not _is_int(value) or not EAR_POSITION_MIN <= value <= EAR_POSITION_MAX:
        raise KarotzValidationError(
            f"Invalid ear position, must be {EAR_POSITION_MIN}-{EAR_POSITION_MAX}",
            {name: value},
        )
    return value


def validate_color(value: Optional[str], name: str = "color") -> str:
    """Check a ``rrggbb`` colour made of hexadecimal digits."""
    if not isinstance(value, str) or not _COLOR_RE.match(value):
        label = name.capitalize()
        raise KarotzValidationError(
            f"{label} must be rrggbb (0-9,a-f)", {name: value}
        )
    return value


def validate_pulse_speed(speed: Any) -> int:
    if not _is_int(speed) or speed < 0:
        raise KarotzValidationError("Speed must be >= 0", {"speed": speed})
    return speed


def validate_clock_hour(hour: Any) -> int:
    if not _is_int(hour) or not CLOCK_HOUR_MIN <= hour <= CLOCK_HOUR_MAX:
        raise KarotzValidationError(
            f"Hour must be {CLOCK_HOUR_MIN}-{CLOCK_HOUR_MAX}", {"hour": hour}
        )
    return hour


def require(value: Any, name: str) -> Any:
    if value is None:
        raise KarotzValidationError(f"{name} is required", {"parameter": name})
    return value


def sanitize_url_path(path: str) -> str:
    """
    Make a relative command path safe to append to ``/cgi-bin``.

    Control characters and fragments are dropped, backslashes are turned into
    slashes, ``.``/``..`` segments and empty segments are removed from the
    path part, and any remaining character outside the URL-safe set is
    percent-encoded. The result always starts with ``/``.

    Raises:
        KarotzValidationError: If nothing usable is left.
    """
    if path is None:
        raise KarotzValidationError("URL path is required")

    cleaned = _CONTROL_CHARS_RE.sub("", path).strip().replace("\\", "/")
    cleaned = cleaned.split("#", 1)[0]

    route, sep, query = cleaned.partition("?")
    segments = [
        segment for segment in route.split("/") if segment not in ("", ".", "..")
    ]
    if not segments:
        raise KarotzValidationError("URL path is empty", {"path": path})

    sanitized = "/" + "/".join(segments)
    if sep and query:
        sanitized = f"{sanitized}?{query}"
    return quote(sanitized, safe=_URL_SAFE_CHARS)
