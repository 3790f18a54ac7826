"""Command-line interface for openkarotz."""

from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from typing import Any, Callable, Dict, Optional, Tuple

import httpx
from pydantic import ValidationError

from openkarotz.domain.entities.errors import DomainError
from openkarotz.domain.entities.voice import SUPPORTED_LANGUAGES
from openkarotz.domain.gateways.karotz_gateway import IKarotzGateway
from openkarotz.shared import (
    EnumLogLevel,
    bind_log_context,
    clear_log_context,
    configure_logging,
    get_logger,
)

from .config import get_settings
from .container import gateway_lifespan, init_container

logger = get_logger(__name__)

# name -> (call, exit with 1 when the result is falsy / negative)
Handler = Tuple[Callable[[IKarotzGateway, argparse.Namespace], Any], bool]

HANDLERS: Dict[str, Handler] = {
    "status": (lambda gw, args: gw.status(), False),
    "space": (
        lambda gw, args: {
            "karotz": gw.get_free_karotz_space(),
            "usb": gw.get_free_usb_space(),
        },
        False,
    ),
    "sounds": (lambda gw, args: gw.get_sound_list(), False),
    "snapshots": (lambda gw, args: gw.snapshot_list(), False),
    "wakeup": (lambda gw, args: gw.wakeup(args.silent), False),
    "sleep": (lambda gw, args: gw.sleep(), False),
    "ears": (
        lambda gw, args: gw.ears_position(args.left, args.right, args.reset),
        True,
    ),
    "ears-reset": (lambda gw, args: gw.ears_reset(), True),
    "ears-random": (lambda gw, args: gw.ears_random(), True),
    "ears-mode": (lambda gw, args: gw.ears_mode(args.mode == "off"), False),
    "led": (
        lambda gw, args: gw.led_color(args.color, args.pulse, args.speed, args.color2),
        True,
    ),
    "tts": (lambda gw, args: gw.tts(args.female, args.language, args.text), True),
    "sound": (
        lambda gw, args: (
            gw.play_sound_by_id(args.id) if args.id else gw.play_sound_by_url(args.url)
        ),
        True,
    ),
    "sound-control": (
        lambda gw, args: gw.quit_sound() if args.cmd == "quit" else gw.pause_sound(),
        True,
    ),
    "squeezebox": (
        lambda gw, args: (
            gw.start_squeezebox() if args.cmd == "start" else gw.stop_squeezebox()
        ),
        True,
    ),
    "snapshot": (lambda gw, args: gw.take_snapshot(args.silent), True),
    "cache": (lambda gw, args: gw.display_cache(), True),
    "clear-cache": (lambda gw, args: gw.clear_cache(), True),
    "clear-snapshots": (lambda gw, args: gw.clear_snapshots(), True),
    "rfid-list": (lambda gw, args: gw.rfid_list(), False),
    "rfid-record": (
        lambda gw, args: (
            gw.rfid_start_record() if args.cmd == "start" else gw.rfid_stop_record()
        ),
        True,
    ),
    "moods": (lambda gw, args: gw.moods(args.id), True),
    "clock": (lambda gw, args: gw.clock(args.hour), True),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openkarotz", description="Control an OpenKarotz rabbit"
    )
    parser.add_argument(
        "--host",
        help="Karotz hostname (default: KAROTZ_HOSTNAME or the configured value)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log requests and responses"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("status", help="Show the device status")
    subparsers.add_parser("space", help="Show used storage in percent")
    subparsers.add_parser("sounds", help="List stored sounds")
    subparsers.add_parser("snapshots", help="List stored snapshots")

    wakeup = subparsers.add_parser("wakeup", help="Wake the rabbit up")
    wakeup.add_argument("--silent", action="store_true", help="Do not play a sound")

    subparsers.add_parser("sleep", help="Put the rabbit to sleep")

    ears = subparsers.add_parser("ears", help="Move the ears")
    ears.add_argument("left", type=int, help="Left ear position (0-17)")
    ears.add_argument("right", type=int, help="Right ear position (0-17)")
    ears.add_argument("--reset", action="store_true", help="Reset the ears first")

    subparsers.add_parser("ears-reset", help="Reset the ears")
    subparsers.add_parser("ears-random", help="Move the ears randomly")

    ears_mode = subparsers.add_parser("ears-mode", help="Enable or disable the ears")
    ears_mode.add_argument("mode", choices=["on", "off"])

    led = subparsers.add_parser("led", help="Set the LED color")
    led.add_argument("color", help="Color as rrggbb")
    led.add_argument("--pulse", action="store_true", help="Pulse between colors")
    led.add_argument("--speed", type=int, default=700, help="Pulse speed")
    led.add_argument("--color2", default="000000", help="Second pulse color")

    tts = subparsers.add_parser("tts", help="Speak a text")
    tts.add_argument("text")
    tts.add_argument("--language", default="en-US", choices=SUPPORTED_LANGUAGES)
    tts.add_argument("--female", action="store_true", help="Use the female voice")

    sound = subparsers.add_parser("sound", help="Play a sound")
    source = sound.add_mutually_exclusive_group(required=True)
    source.add_argument("--id", help="Stored sound identifier")
    source.add_argument("--url", help="URL of a sound to stream")

    sound_control = subparsers.add_parser("sound-control", help="Control playback")
    sound_control.add_argument("cmd", choices=["quit", "pause"])

    squeezebox = subparsers.add_parser("squeezebox", help="Control squeezebox")
    squeezebox.add_argument("cmd", choices=["start", "stop"])

    snapshot = subparsers.add_parser("snapshot", help="Take a snapshot")
    snapshot.add_argument("--silent", action="store_true", help="Do not play a sound")

    subparsers.add_parser("cache", help="Show the TTS cache size")
    subparsers.add_parser("clear-cache", help="Clear the TTS cache")
    subparsers.add_parser("clear-snapshots", help="Delete all snapshots")

    subparsers.add_parser("rfid-list", help="List known RFID tags")
    rfid_record = subparsers.add_parser("rfid-record", help="Record RFID tags")
    rfid_record.add_argument("cmd", choices=["start", "stop"])

    moods = subparsers.add_parser("moods", help="Play a mood")
    moods.add_argument("--id", type=int, help="Mood identifier (default: random)")

    clock = subparsers.add_parser("clock", help="Announce the time")
    clock.add_argument("--hour", type=int, help="Hour to announce (0-23)")

    return parser


def _to_jsonable(result: Any) -> Any:
    if dataclasses.is_dataclass(result):
        return dataclasses.asdict(result)
    return result


def _failed(result: Any) -> bool:
    if isinstance(result, bool):
        return not result
    if isinstance(result, int):
        return result < 0
    return False


def run_command(gateway: IKarotzGateway, args: argparse.Namespace) -> int:
    call, check = HANDLERS[args.command]
    result = call(gateway, args)
    print(json.dumps({"command": args.command, "result": _to_jsonable(result)}))
    return 1 if check and _failed(result) else 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.host:
        settings.karotz.hostname = args.host

    level = EnumLogLevel.DEBUG if args.verbose else settings.logging.level
    configure_logging(
        level=level.value,
        file_path=settings.logging.file_path,
        environment=settings.environment.value,
        stream=sys.stderr,
    )
    bind_log_context(command=args.command, karotz=settings.karotz.hostname)

    try:
        init_container(settings)
        with gateway_lifespan() as gateway:
            return run_command(gateway, args)
    except DomainError as exc:
        logger.error("cli.command_failed", command=args.command, error=exc.message)
        print(f"error: {exc.message}", file=sys.stderr)
        return 1
    except httpx.HTTPError as exc:
        logger.error("cli.transport_failed", command=args.command, error=str(exc))
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except ValidationError as exc:
        logger.error("cli.malformed_response", command=args.command, error=str(exc))
        print("error: malformed response from the device", file=sys.stderr)
        return 1
    finally:
        clear_log_context()


if __name__ == "__main__":
    sys.exit(main())
