from __future__ import annotations

import importlib

from viz_lesson.config import settings


def _reload_with(monkeypatch, **env):
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return importlib.reload(settings)


def test_environment_overrides(monkeypatch) -> None:
    try:
        reloaded = _reload_with(
            monkeypatch,
            VIZ_LESSON_THEME="dark",
            VIZ_LESSON_REPORT_PATH="out/lesson.html",
        )
        assert reloaded.DEFAULT_SETTINGS["default_theme"] == "dark"
        assert reloaded.REPORT_SETTINGS["output_path"] == "out/lesson.html"
    finally:
        monkeypatch.delenv("VIZ_LESSON_THEME", raising=False)
        monkeypatch.delenv("VIZ_LESSON_REPORT_PATH", raising=False)
        importlib.reload(settings)


def test_defaults_without_environment(monkeypatch) -> None:
    monkeypatch.delenv("VIZ_LESSON_THEME", raising=False)
    monkeypatch.delenv("VIZ_LESSON_REPORT_PATH", raising=False)
    reloaded = importlib.reload(settings)
    assert reloaded.DEFAULT_SETTINGS["default_theme"] == "grey"
    assert reloaded.REPORT_SETTINGS["output_path"] == "viz-lesson.html"
    assert reloaded.DEFAULT_SETTINGS["default_theme"] in reloaded.THEMES
