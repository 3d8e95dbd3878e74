from __future__ import annotations

import os
from pathlib import Path

import pytest

from viz_lesson import __main__ as launcher


def test_launch_renders_inline_under_streamlit(monkeypatch) -> None:
    called = {}
    monkeypatch.setenv("STREAMLIT_SERVER_PORT", "1")
    monkeypatch.setattr(launcher.app_main, "main", lambda: called.setdefault("main", True), raising=True)

    launcher.launch([])

    assert called == {"main": True}


def test_launch_execs_streamlit(monkeypatch) -> None:
    monkeypatch.delenv("STREAMLIT_SERVER_PORT", raising=False)
    captured = {}

    def fake_execv(exe: str, cmd: list[str]) -> None:
        captured["exe"] = exe
        captured["cmd"] = cmd
        raise SystemExit

    monkeypatch.setattr(os, "execv", fake_execv, raising=True)

    with pytest.raises(SystemExit):
        launcher.launch(["--server.port", "8600"])

    assert captured["cmd"][0] == captured["exe"]
    assert captured["cmd"][1:4] == ["-m", "streamlit", "run"]
    assert captured["cmd"][4] == str(Path(launcher.app_main.__file__).resolve())
    assert captured["cmd"][5:] == ["--server.port", "8600"]
