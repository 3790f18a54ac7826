from __future__ import annotations

import runpy

import pytest


def test_main_module_invokes_cli(monkeypatch):
    executed = {}

    def fake_main() -> int:
        executed["called"] = True
        return 0

    monkeypatch.setattr("openkarotz.main.cli.main", fake_main)

    with pytest.raises(SystemExit) as exc:
        runpy.run_module("openkarotz.main.__main__", run_name="__main__")

    assert exc.value.code == 0
    assert executed["called"] is True
