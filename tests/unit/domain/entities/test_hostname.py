from __future__ import annotations

import pytest

from openkarotz.domain.entities.errors import (
    InvalidHostnameError,
    KarotzConfigurationError,
)
from openkarotz.domain.entities.hostname import Hostname


@pytest.mark.parametrize(
    "value, host, port",
    [
        ("192.168.1.10", "192.168.1.10", None),
        ("192.168.1.10:8080", "192.168.1.10", 8080),
        ("Karotz.Local", "karotz.local", None),
        ("karotz", "karotz", None),
        ("rabbit-1.home.lan:80", "rabbit-1.home.lan", 80),
        ("fe80::1", "fe80::1", None),
        ("[fe80::1]", "fe80::1", None),
        ("[fe80::1]:8080", "fe80::1", 8080),
        ("  karotz  ", "karotz", None),
    ],
)
def test_hostname_accepts_valid_values(value, host, port) -> None:
    hostname = Hostname.of(value)

    assert hostname.host == host
    assert hostname.port == port


@pytest.mark.parametrize(
    "value",
    [
        None,
        "",
        "   ",
        "not a host",
        "-karotz",
        "karotz-",
        "kar_otz",
        "256.1.1.1",
        "1.2.3",
        "karotz:0",
        "karotz:65536",
        "karotz:http",
        ":8080",
        "[fe80::1",
        "[fe80::1]8080",
        "a" * 64,
        42,
    ],
)
def test_hostname_rejects_invalid_values(value) -> None:
    with pytest.raises(InvalidHostnameError):
        Hostname.of(value)


def test_invalid_hostname_error_is_configuration_and_value_error() -> None:
    with pytest.raises(InvalidHostnameError) as exc:
        Hostname.of("not a host")

    assert isinstance(exc.value, KarotzConfigurationError)
    assert isinstance(exc.value, ValueError)
    assert exc.value.details["hostname"] == "not a host"


def test_string_value() -> None:
    assert Hostname.of("karotz").string_value == "karotz"
    assert Hostname.of("karotz:8080").string_value == "karotz:8080"
    assert Hostname.of("fe80::1").string_value == "[fe80::1]"
    assert str(Hostname.of("[fe80::1]:81")) == "[fe80::1]:81"


def test_hostname_is_immutable() -> None:
    hostname = Hostname.of("karotz")

    with pytest.raises(AttributeError):
        hostname.host = "other"  # type: ignore[misc]
