"""
Karotz Gateway Interface - Domain Layer

This module defines the contract for talking to an OpenKarotz rabbit.
Methods return plain values; a device-reported failure is ``False`` (or
``-1`` for counters), never an exception.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from openkarotz.domain.entities.device import DeviceStatus


class IKarotzGateway(ABC):
    """Interface for the OpenKarotz CGI API."""

    @abstractmethod
    def execute_get(self, path: str) -> str:
        """
        Perform ``GET /cgi-bin/<path>`` and return the response body.

        Raises:
            UnsupportedOperationError: If the device answers HTTP 400.
        """
        pass

    # Storage

    @abstractmethod
    def get_free_karotz_space(self) -> int:
        """Percentage of used space on the internal storage."""
        pass

    @abstractmethod
    def get_free_usb_space(self) -> int:
        """Percentage of used space on the USB key, -1 when there is none."""
        pass

    @abstractmethod
    def status(self) -> DeviceStatus:
        pass

    # Power

    @abstractmethod
    def wakeup(self, silent: bool) -> bool:
        """Wake the rabbit up; returns whether the wakeup was silent."""
        pass

    @abstractmethod
    def sleep(self) -> bool:
        """Put the rabbit to sleep; returns ``False`` if it was already sleeping."""
        pass

    # Ears

    @abstractmethod
    def ears_reset(self) -> bool:
        pass

    @abstractmethod
    def ears_random(self) -> bool:
        pass

    @abstractmethod
    def ears_mode(self, disabled: bool) -> bool:
        pass

    @abstractmethod
    def ears_position(self, left: int, right: int, reset: bool = False) -> bool:
        pass

    # LEDs

    @abstractmethod
    def led_color(
        self,
        color: str,
        pulse: bool = False,
        speed: int = 0,
        color2: Optional[str] = None,
    ) -> bool:
        pass

    # Text to speech cache

    @abstractmethod
    def display_cache(self) -> int:
        pass

    @abstractmethod
    def clear_cache(self) -> bool:
        pass

    @abstractmethod
    def tts(self, female: bool, language: str, text: str) -> bool:
        pass

    # Sounds

    @abstractmethod
    def get_sound_list(self) -> List[str]:
        pass

    @abstractmethod
    def play_sound_by_id(self, sound_id: str) -> bool:
        pass

    @abstractmethod
    def play_sound_by_url(self, url: str) -> bool:
        pass

    @abstractmethod
    def quit_sound(self) -> bool:
        pass

    @abstractmethod
    def pause_sound(self) -> bool:
        pass

    @abstractmethod
    def start_squeezebox(self) -> bool:
        pass

    @abstractmethod
    def stop_squeezebox(self) -> bool:
        pass

    # Camera

    @abstractmethod
    def snapshot_list(self) -> List[str]:
        pass

    @abstractmethod
    def clear_snapshots(self) -> bool:
        pass

    @abstractmethod
    def take_snapshot(self, silent: bool) -> bool:
        pass

    # RFID and apps

    @abstractmethod
    def rfid_list(self) -> List[Dict[str, Any]]:
        pass

    @abstractmethod
    def rfid_start_record(self) -> bool:
        pass

    @abstractmethod
    def rfid_stop_record(self) -> bool:
        pass

    @abstractmethod
    def moods(self, mood_id: Optional[int] = None) -> int:
        """Play a mood (or a random one); returns the mood id, -1 on failure."""
        pass

    @abstractmethod
    def clock(self, hour: Optional[int] = None) -> int:
        """Announce the given (or current) hour; returns it, -1 on failure."""
        pass
