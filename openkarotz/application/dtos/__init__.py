from .karotz_dto import (
    RESPONSE_MODELS,
    KarotzResults,
    RabbitResults,
    SnapshotEntry,
    SoundEntry,
    TtsResults,
    parse_response,
)

__all__ = [
    "RESPONSE_MODELS",
    "KarotzResults",
    "RabbitResults",
    "SnapshotEntry",
    "SoundEntry",
    "TtsResults",
    "parse_response",
]
