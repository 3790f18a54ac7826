"""DTOs for the JSON payloads answered by the OpenKarotz CGI scripts."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from openkarotz.domain.entities.commands import ResponseShape
from openkarotz.domain.entities.device import DeviceStatus


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


def _number_to_str(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class SoundEntry(BaseModel):
    """A sound stored on the rabbit."""

    id: str = Field(description="Sound identifier")

    model_config = ConfigDict(extra="ignore")


class SnapshotEntry(BaseModel):
    """A camera snapshot stored on the rabbit."""

    id: str = Field(description="Snapshot file name")

    model_config = ConfigDict(extra="ignore")


class RabbitResults(BaseModel):
    """
    General answer of the CGI scripts.

    Each command fills only the fields relevant to it; everything is
    optional. The device quotes numbers in some answers (``"return": "0"``)
    and leaves some of them blank, so numeric strings are coerced and blank
    strings read as missing.
    """

    return_code: Optional[int] = Field(
        default=None, alias="return", description="0 on success"
    )
    msg: Optional[str] = None
    silent: Optional[int] = None

    karotz_percent_used_space: Optional[int] = None
    usb_percent_used_space: Optional[int] = None

    color: Optional[str] = None
    secondary_color: Optional[str] = None
    pulse: Optional[int] = None
    no_memory: Optional[int] = None
    speed: Optional[str] = None

    disabled: Optional[int] = None
    left: Optional[int] = None
    right: Optional[int] = None

    count: Optional[int] = None
    id: Optional[str] = None
    url: Optional[str] = None
    moods: Optional[int] = None
    hour: Optional[int] = None

    tags: Optional[List[Dict[str, Any]]] = None
    sounds: Optional[List[SoundEntry]] = None
    snapshots: Optional[List[SnapshotEntry]] = None

    version: Optional[int] = None
    ears_disabled: Optional[int] = None
    sleep: Optional[int] = None
    sleep_time: Optional[int] = None
    led_color: Optional[str] = None
    led_pulse: Optional[int] = None
    tts_cache_size: Optional[int] = None
    usb_free_space: Optional[str] = None
    karotz_free_space: Optional[str] = None
    eth_mac: Optional[str] = None
    wlan_mac: Optional[str] = None
    nb_tags: Optional[int] = None
    nb_moods: Optional[int] = None
    nb_sounds: Optional[int] = None
    nb_stories: Optional[int] = None
    data_dir: Optional[str] = None

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={"example": {"return": "0", "left": "4", "right": "12"}},
    )

    @field_validator("*", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: Any) -> Any:
        return _blank_to_none(value)

    @field_validator(
        "msg",
        "color",
        "secondary_color",
        "speed",
        "id",
        "url",
        "led_color",
        "usb_free_space",
        "karotz_free_space",
        "eth_mac",
        "wlan_mac",
        "data_dir",
        mode="before",
    )
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        return _number_to_str(value)

    @property
    def succeeded(self) -> bool:
        return self.return_code == 0

    def sound_ids(self) -> List[str]:
        return [sound.id for sound in self.sounds or []]

    def snapshot_ids(self) -> List[str]:
        return [snapshot.id for snapshot in self.snapshots or []]

    def to_domain(self) -> DeviceStatus:
        return DeviceStatus(
            version=self.version,
            ears_disabled=self.ears_disabled == 1,
            sleeping=self.sleep == 1,
            sleep_time=self.sleep_time,
            led_color=self.led_color,
            led_pulse=self.led_pulse == 1,
            tts_cache_size=self.tts_cache_size,
            karotz_free_space=self.karotz_free_space,
            usb_free_space=self.usb_free_space,
            karotz_percent_used_space=self.karotz_percent_used_space,
            usb_percent_used_space=self.usb_percent_used_space,
            eth_mac=self.eth_mac,
            wlan_mac=self.wlan_mac,
            nb_tags=self.nb_tags,
            nb_moods=self.nb_moods,
            nb_sounds=self.nb_sounds,
            nb_stories=self.nb_stories,
            data_dir=self.data_dir,
        )


class TtsResults(BaseModel):
    """Answer of the ``tts`` command, which reports success as a boolean."""

    return_flag: Optional[bool] = Field(
        default=None, alias="return", description="true when the text was spoken"
    )
    played: Optional[bool] = None
    cache: Optional[bool] = Field(
        default=None, description="true when the audio came from the TTS cache"
    )
    voicelanguage: Optional[str] = None
    voicegender: Optional[str] = None
    id: Optional[str] = Field(default=None, description="Generated audio identifier")
    msg: Optional[str] = Field(default=None, description="Error text on failure")

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
        json_schema_extra={
            "example": {
                "return": True,
                "played": True,
                "cache": False,
                "voicelanguage": "fr",
                "voicegender": "male",
                "id": "e9847b2545c521ff03cd5358bfce3781",
            }
        },
    )

    @field_validator("return_flag", mode="before")
    @classmethod
    def _json_boolean_only(cls, value: Any) -> Any:
        # the CGI error form answers {"return": "1", "msg": ...}
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        return False

    @property
    def succeeded(self) -> bool:
        return self.return_flag is True


KarotzResults = Union[RabbitResults, TtsResults]

RESPONSE_MODELS: Dict[ResponseShape, Type[BaseModel]] = {
    ResponseShape.GENERAL: RabbitResults,
    ResponseShape.TTS: TtsResults,
}


def parse_response(shape: ResponseShape, body: str) -> KarotzResults:
    """
    Parse a raw JSON body into the record declared for the command.

    Raises:
        pydantic.ValidationError: If the body is not a JSON object of the
            expected shape.
    """
    return RESPONSE_MODELS[shape].model_validate_json(body)
