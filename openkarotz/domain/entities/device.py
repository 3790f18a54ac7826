"""Domain entities describing the state reported by a Karotz."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class DeviceStatus:
    """Snapshot of the ``status`` command answer."""

    version: Optional[int] = None
    ears_disabled: bool = False
    sleeping: bool = False
    sleep_time: Optional[int] = None
    led_color: Optional[str] = None
    led_pulse: bool = False
    tts_cache_size: Optional[int] = None
    karotz_free_space: Optional[str] = None
    usb_free_space: Optional[str] = None
    karotz_percent_used_space: Optional[int] = None
    usb_percent_used_space: Optional[int] = None
    eth_mac: Optional[str] = None
    wlan_mac: Optional[str] = None
    nb_tags: Optional[int] = None
    nb_moods: Optional[int] = None
    nb_sounds: Optional[int] = None
    nb_stories: Optional[int] = None
    data_dir: Optional[str] = None
