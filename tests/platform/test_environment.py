from __future__ import annotations

import sys

from engine.platform import command_args


def test_command_args_is_startup_snapshot(monkeypatch) -> None:
    before = command_args()
    assert isinstance(before, tuple)
    assert all(isinstance(a, str) for a in before)
    monkeypatch.setattr(sys, "argv", ["changed", "--flag"])
    assert command_args() == before
    assert command_args() is command_args()
