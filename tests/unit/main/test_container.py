from __future__ import annotations

from dataclasses import dataclass, field

import pytest
from dependency_injector import providers

from openkarotz.domain.entities.hostname import Hostname
from openkarotz.infrastructure.gateways.karotz_gateway import OpenKarotzGateway
from openkarotz.main.config import AppSettings, KarotzSettings
from openkarotz.main.container import gateway_lifespan, get_container, init_container


@dataclass
class _StubGateway:
    hostname: Hostname = field(default_factory=lambda: Hostname.of("karotz"))
    closed: bool = False

    def close(self) -> None:
        self.closed = True


def _settings(hostname: str = "192.168.1.10") -> AppSettings:
    return AppSettings(karotz=KarotzSettings(hostname=hostname, timeout=4))


def test_init_and_get_container() -> None:
    container = init_container(_settings())

    assert hasattr(container, "karotz_gateway")
    assert get_container() is container


def test_container_builds_configured_gateway() -> None:
    container = init_container(_settings("karotz.local:8080"))

    gateway = container.karotz_gateway()

    assert isinstance(gateway, OpenKarotzGateway)
    assert gateway.base_url == "http://karotz.local:8080/cgi-bin"
    assert gateway.client.timeout.read == 4
    assert container.karotz_gateway() is gateway
    gateway.close()


def test_gateway_lifespan_closes_gateway() -> None:
    container = init_container(_settings())
    stub = _StubGateway()
    container.karotz_gateway.override(providers.Object(stub))

    with gateway_lifespan() as gateway:
        assert gateway is stub
        assert stub.closed is False

    assert stub.closed is True


def test_gateway_lifespan_closes_on_error() -> None:
    container = init_container(_settings())
    stub = _StubGateway()
    container.karotz_gateway.override(providers.Object(stub))

    with pytest.raises(RuntimeError):
        with gateway_lifespan():
            raise RuntimeError("boom")

    assert stub.closed is True


def test_get_container_without_init_raises(monkeypatch) -> None:
    monkeypatch.setattr("openkarotz.main.container._app_container", None)
    with pytest.raises(RuntimeError):
        get_container()
