"""OpenKarotz gateway implementation - Infrastructure layer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

import httpx

from openkarotz.application.dtos.karotz_dto import (
    KarotzResults,
    RabbitResults,
    TtsResults,
    parse_response,
)
from openkarotz.domain.entities.commands import ResultConvention, get_command
from openkarotz.domain.entities.device import DeviceStatus
from openkarotz.domain.entities.errors import (
    KarotzConfigurationError,
    KarotzValidationError,
    UnsupportedOperationError,
)
from openkarotz.domain.entities.hostname import Hostname
from openkarotz.domain.entities.voice import resolve_voice
from openkarotz.domain.gateways.karotz_gateway import IKarotzGateway
from openkarotz.domain.services.validation import (
    require,
    sanitize_url_path,
    validate_clock_hour,
    validate_color,
    validate_ear_position,
    validate_pulse_speed,
)
from openkarotz.infrastructure.http import build_http_client
from openkarotz.shared import CGI_BIN_PREFIX, DEFAULT_TIMEOUT_SECONDS, get_logger

logger = get_logger(__name__)


def interpret_success(convention: ResultConvention, results: KarotzResults) -> bool:
    """Apply a command's success convention to its parsed answer."""
    if convention is ResultConvention.STATUS_ZERO:
        return isinstance(results, RabbitResults) and results.return_code == 0
    if convention is ResultConvention.RETURN_FLAG:
        return isinstance(results, TtsResults) and results.return_flag is True
    return True


class OpenKarotzGateway(IKarotzGateway):
    """HTTP client for the OpenKarotz CGI API."""

    def __init__(
        self,
        client: httpx.Client,
        hostname: Union[Hostname, str],
        *,
        log: Any = None,
        owns_client: bool = False,
    ):
        """
        Initialize the gateway with an externally supplied transport.

        Args:
            client: httpx client used for every request
            hostname: Karotz hostname, ``host`` or ``host:port``
            log: Optional structlog logger receiving diagnostics
            owns_client: Close ``client`` when the gateway is closed

        Raises:
            KarotzConfigurationError: If ``client`` is missing
            InvalidHostnameError: If ``hostname`` is missing or invalid
        """
        if client is None:
            raise KarotzConfigurationError("An HTTP client is required")
        if not isinstance(hostname, Hostname):
            hostname = Hostname.of(hostname)
        self.hostname = hostname
        self.client = client
        self.base_url = f"http://{self.hostname.string_value}{CGI_BIN_PREFIX}"
        self._owns_client = owns_client
        self._logger = (log or logger).bind(hostname=self.hostname.string_value)

    @classmethod
    def new_instance(
        cls,
        hostname: Optional[str],
        *,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        trust_self_signed: bool = True,
        log: Any = None,
    ) -> "OpenKarotzGateway":
        """
        Create a gateway with its own transport.

        The transport accepts self-signed certificates unless
        ``trust_self_signed`` is disabled.

        Raises:
            InvalidHostnameError: If ``hostname`` is missing or invalid
            KarotzConfigurationError: If the TLS context cannot be built
        """
        validated = Hostname.of(hostname)
        client = build_http_client(
            timeout=timeout, trust_self_signed=trust_self_signed
        )
        return cls(client, validated, log=log, owns_client=True)

    @classmethod
    def new_instance_with_client(
        cls,
        client: httpx.Client,
        hostname: Union[Hostname, str],
        *,
        log: Any = None,
    ) -> "OpenKarotzGateway":
        """
        Create a gateway on a caller-owned transport.

        The client is left open by :meth:`close`; its owner keeps control of
        timeouts, proxies and TLS settings.

        Raises:
            KarotzConfigurationError: If ``client`` is missing
            InvalidHostnameError: If ``hostname`` is missing or invalid
        """
        return cls(client, hostname, log=log, owns_client=False)

    def close(self) -> None:
        if self._owns_client:
            self.client.close()

    def __enter__(self) -> "OpenKarotzGateway":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def execute_get(self, path: str) -> str:
        sanitized = sanitize_url_path(path)
        url = f"{self.base_url}{sanitized}"

        self._logger.info("karotz.request", url=url)

        try:
            response = self.client.get(url)
        except httpx.RequestError as e:
            self._logger.error(
                "karotz.request_error",
                error=str(e),
                url=url,
                exc_info=e,
            )
            raise

        if response.status_code != httpx.codes.OK:
            self._logger.debug(
                "karotz.response.status_line",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
            self._logger.info(
                "karotz.response.unexpected_status",
                status_code=response.status_code,
                url=url,
            )
            if response.status_code == httpx.codes.BAD_REQUEST:
                raise UnsupportedOperationError(sanitized, response.status_code)

        body = response.text
        self._logger.debug(
            "karotz.response",
            content_type=response.headers.get("content-type"),
            body=body,
        )
        return body

    def _outcome(self, command: str, **params: Any) -> Tuple[bool, Any]:
        descriptor = get_command(command)
        body = self.execute_get(descriptor.build(**params))
        results = parse_response(descriptor.shape, body)
        return interpret_success(descriptor.convention, results), results

    def _query(self, command: str, **params: Any) -> RabbitResults:
        _, results = self._outcome(command, **params)
        return results

    def _succeeds(self, command: str, **params: Any) -> bool:
        succeeded, _ = self._outcome(command, **params)
        return succeeded

    # ------------------------------------------------------------------
    # Storage
    # ------------------------------------------------------------------

    def get_free_karotz_space(self) -> int:
        used = self._query("get_free_space").karotz_percent_used_space
        return -1 if used is None else used

    def get_free_usb_space(self) -> int:
        used = self._query("get_free_space").usb_percent_used_space
        return -1 if used is None else used

    def status(self) -> DeviceStatus:
        return self._query("status").to_domain()

    # ------------------------------------------------------------------
    # Power
    # ------------------------------------------------------------------

    def wakeup(self, silent: bool) -> bool:
        return self._query("wakeup", silent=bool(silent)).silent == 1

    def sleep(self) -> bool:
        # the device answers 1 when it was already sleeping
        return self._query("sleep").return_code != 1

    # ------------------------------------------------------------------
    # Ears
    # ------------------------------------------------------------------

    def ears_reset(self) -> bool:
        return self._succeeds("ears_reset")

    def ears_random(self) -> bool:
        succeeded, results = self._outcome("ears_random")
        if succeeded:
            self._logger.info(
                "karotz.ears.random", left=results.left, right=results.right
            )
        return succeeded

    def ears_mode(self, disabled: bool) -> bool:
        succeeded, results = self._outcome("ears_mode", disable=bool(disabled))
        if succeeded:
            return results.disabled == 1
        return False

    def ears_position(self, left: int, right: int, reset: bool = False) -> bool:
        validate_ear_position("left", left)
        validate_ear_position("right", right)

        succeeded, results = self._outcome(
            "ears", left=left, right=right, noreset=not reset
        )
        if succeeded:
            self._logger.info(
                "karotz.ears.position",
                requested_left=left,
                requested_right=right,
                left=results.left,
                right=results.right,
            )
        return succeeded

    # ------------------------------------------------------------------
    # LEDs
    # ------------------------------------------------------------------

    def led_color(
        self,
        color: str,
        pulse: bool = False,
        speed: int = 0,
        color2: Optional[str] = None,
    ) -> bool:
        validate_color(color, "color")
        if pulse:
            validate_pulse_speed(speed)
            validate_color(color2, "color2")

        succeeded, results = self._outcome(
            "leds",
            color=color,
            pulse=True if pulse else None,
            speed=speed if pulse else None,
            color2=color2 if pulse else None,
        )
        if succeeded:
            self._logger.debug(
                "karotz.leds.color",
                color=results.color,
                secondary_color=results.secondary_color,
                pulse=results.pulse,
                speed=results.speed,
                no_memory=results.no_memory,
            )
        return succeeded

    # ------------------------------------------------------------------
    # Text to speech
    # ------------------------------------------------------------------

    def display_cache(self) -> int:
        succeeded, results = self._outcome("display_cache")
        if not succeeded:
            return -1
        return results.count or 0

    def clear_cache(self) -> bool:
        succeeded, results = self._outcome("clear_cache")
        self._logger.info("karotz.cache.cleared", succeeded=succeeded, msg=results.msg)
        return succeeded

    def tts(self, female: bool, language: str, text: str) -> bool:
        require(text, "text")
        voice = resolve_voice(language, female)

        succeeded, results = self._outcome("tts", voice=voice.index, text=text)
        self._logger.info(
            "karotz.tts",
            voice=voice.index,
            played=results.played,
            cache=results.cache,
            voicelanguage=results.voicelanguage,
            voicegender=results.voicegender,
            id=results.id,
            msg=results.msg,
        )
        return succeeded

    # ------------------------------------------------------------------
    # Sounds
    # ------------------------------------------------------------------

    def get_sound_list(self) -> List[str]:
        return self._query("sound_list").sound_ids()

    def play_sound_by_id(self, sound_id: str) -> bool:
        require(sound_id, "sound_id")
        return self._succeeds("sound_by_id", id=sound_id)

    def play_sound_by_url(self, url: str) -> bool:
        require(url, "url")
        return self._succeeds("sound_by_url", url=url)

    def quit_sound(self) -> bool:
        return self._succeeds("sound_control", cmd="quit")

    def pause_sound(self) -> bool:
        return self._succeeds("sound_control", cmd="pause")

    def start_squeezebox(self) -> bool:
        return self._succeeds("squeezebox", cmd="start")

    def stop_squeezebox(self) -> bool:
        return self._succeeds("squeezebox", cmd="stop")

    # ------------------------------------------------------------------
    # Camera
    # ------------------------------------------------------------------

    def snapshot_list(self) -> List[str]:
        succeeded, results = self._outcome("snapshot_list")
        if not succeeded:
            return []
        return results.snapshot_ids()

    def clear_snapshots(self) -> bool:
        return self._succeeds("clear_snapshots")

    def take_snapshot(self, silent: bool) -> bool:
        return self._succeeds("snapshot", silent=bool(silent))

    # ------------------------------------------------------------------
    # RFID and apps
    # ------------------------------------------------------------------

    def rfid_list(self) -> List[Dict[str, Any]]:
        succeeded, results = self._outcome("rfid_list")
        if not succeeded:
            return []
        return list(results.tags or [])

    def rfid_start_record(self) -> bool:
        return self._succeeds("rfid_start_record")

    def rfid_stop_record(self) -> bool:
        return self._succeeds("rfid_stop_record")

    def moods(self, mood_id: Optional[int] = None) -> int:
        if mood_id is not None and (
            isinstance(mood_id, bool) or not isinstance(mood_id, int) or mood_id < 0
        ):
            raise KarotzValidationError("Mood id must be >= 0", {"mood_id": mood_id})

        succeeded, results = self._outcome("moods", id=mood_id)
        if not succeeded or results.moods is None:
            return -1
        return results.moods

    def clock(self, hour: Optional[int] = None) -> int:
        if hour is not None:
            validate_clock_hour(hour)

        succeeded, results = self._outcome("clock", hour=hour)
        if not succeeded or results.hour is None:
            return -1
        return results.hour
