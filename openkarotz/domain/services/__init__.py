"""Domain services: argument validation and request path sanitizing."""

from .validation import (
    require,
    sanitize_url_path,
    validate_clock_hour,
    validate_color,
    validate_ear_position,
    validate_pulse_speed,
)

__all__ = [
    "require",
    "sanitize_url_path",
    "validate_clock_hour",
    "validate_color",
    "validate_ear_position",
    "validate_pulse_speed",
]
