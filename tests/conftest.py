from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from openkarotz.infrastructure.gateways.karotz_gateway import OpenKarotzGateway


KAROTZ_HOST = "192.168.1.10"


class FakeKarotz:
    """Records requests and answers them with canned JSON bodies."""

    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self.status_code = 200
        self.body: str = "{}"

    def reply(self, payload: Any, status_code: int = 200) -> "FakeKarotz":
        self.body = payload if isinstance(payload, str) else json.dumps(payload)
        self.status_code = status_code
        return self

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(
            self.status_code,
            content=self.body.encode("utf-8"),
            headers={"content-type": "text/plain"},
        )

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_params(self) -> Dict[str, str]:
        return dict(self.last_request.url.params)


class RecordingLogger:
    """Minimal structlog-like logger keeping every event in memory."""

    def __init__(self) -> None:
        self.events: List[tuple[str, str, Dict[str, Any]]] = []
        self.context: Dict[str, Any] = {}

    def bind(self, **kwargs: Any) -> "RecordingLogger":
        self.context.update(kwargs)
        return self

    def _record(self, level: str) -> Callable[..., None]:
        def log(event: str, **kwargs: Any) -> None:
            self.events.append((level, event, kwargs))

        return log

    def __getattr__(self, name: str) -> Callable[..., None]:
        if name in ("debug", "info", "warning", "error"):
            return self._record(name)
        raise AttributeError(name)

    def names(self, level: Optional[str] = None) -> List[str]:
        return [event for lvl, event, _ in self.events if level in (None, lvl)]


@pytest.fixture()
def fake_karotz() -> FakeKarotz:
    return FakeKarotz()


@pytest.fixture()
def recording_logger() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture()
def gateway(fake_karotz: FakeKarotz, recording_logger: RecordingLogger):
    client = httpx.Client(transport=httpx.MockTransport(fake_karotz))
    gw = OpenKarotzGateway(client, KAROTZ_HOST, log=recording_logger)
    yield gw
    client.close()
