"""
Domain Entities Package

Value objects, the command table and the error taxonomy of the client.
"""

from .commands import (
    COMMANDS,
    CommandDescriptor,
    ResponseShape,
    ResultConvention,
    get_command,
)
from .errors import (
    DomainError,
    InvalidHostnameError,
    KarotzConfigurationError,
    KarotzValidationError,
    UnsupportedOperationError,
)
from .device import DeviceStatus
from .hostname import Hostname
from .voice import SUPPORTED_LANGUAGES, Voice, VoiceGender, resolve_voice, voice_index

__all__ = [
    "COMMANDS",
    "CommandDescriptor",
    "ResponseShape",
    "ResultConvention",
    "get_command",
    "DomainError",
    "InvalidHostnameError",
    "KarotzConfigurationError",
    "KarotzValidationError",
    "UnsupportedOperationError",
    "DeviceStatus",
    "Hostname",
    "SUPPORTED_LANGUAGES",
    "Voice",
    "VoiceGender",
    "resolve_voice",
    "voice_index",
]
