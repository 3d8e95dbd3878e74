from __future__ import annotations

import pytest

from viz_lesson import report
from viz_lesson.lesson.registry import Example, get_example
from viz_lesson.lesson.runner import run_example, run_lesson
from viz_lesson.report import build_report, markdown_to_html, plotlyjs_tag, write_report


def _broken_builder(datasets):
    raise ValueError("bad encoding")


def test_markdown_to_html() -> None:
    out = markdown_to_html("Uses `show_legend=False` and **bold**.\n\nSecond *para* & more")
    assert out == (
        "<p>Uses <code>show_legend=False</code> and <b>bold</b>.</p>\n"
        "<p>Second <i>para</i> &amp; more</p>"
    )


def test_plotlyjs_tag() -> None:
    assert plotlyjs_tag("cdn").startswith('<script src="https://cdn.plot.ly/plotly-')
    with pytest.raises(ValueError):
        plotlyjs_tag("none")


def test_plotlyjs_tag_inline() -> None:
    tag = plotlyjs_tag("inline")
    assert tag.startswith('<script type="text/javascript">')
    assert tag.endswith("</script>")
    assert "src=" not in tag[:60]
    assert len(tag) > 100_000


def test_build_report_structure(datasets) -> None:
    rendered = run_lesson(datasets, sections=["setup", "rich_text"])

    html = build_report(rendered, title="My <Lesson>")

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>My &lt;Lesson&gt;</title>" in html
    assert html.count("cdn.plot.ly") == 1
    assert 'href="#section-setup"' in html
    assert 'href="#section-rich_text"' in html
    assert "section-theming" not in html
    assert 'id="colored-title-0"' in html
    assert "def build_colored_title(datasets):" in html
    # Sections appear in lesson order
    assert html.index('id="section-setup"') < html.index('id="section-rich_text"')


def test_build_report_shows_errors(datasets) -> None:
    broken = Example("broken", "setup", "Broken", "Fails.", _broken_builder)
    rendered = [run_example(broken, datasets), run_example(get_example("data-preview"), datasets)]

    html = build_report(rendered)

    assert '<div class="error"><b>Error:</b> ValueError: bad encoding</div>' in html
    assert 'id="data-preview-1"' in html


def test_write_report_creates_parent_dirs(tmp_path, datasets) -> None:
    rendered = [run_example(get_example("default-theme"), datasets)]
    path = write_report(tmp_path / "out" / "lesson.html", rendered)
    assert path.exists()
    assert "Default theme" in path.read_text(encoding="utf-8")


def test_cli_writes_report(tmp_path, capsys) -> None:
    output = tmp_path / "lesson.html"

    code = report.main(["--output", str(output), "--section", "theming"])

    assert code == 0
    assert output.exists()
    assert str(output) in capsys.readouterr().out
    assert "section-composition" not in output.read_text(encoding="utf-8")


def test_cli_inline_plotlyjs(tmp_path) -> None:
    output = tmp_path / "offline.html"

    assert report.main(["--output", str(output), "--section", "setup", "--inline-plotlyjs"]) == 0

    html = output.read_text(encoding="utf-8")
    assert '<script src="https://cdn.plot.ly' not in html
    assert html.count('<script type="text/javascript">') >= 1


def test_cli_fails_when_an_example_fails(tmp_path, monkeypatch) -> None:
    broken = Example("broken", "setup", "Broken", "Fails.", _broken_builder)

    def fake_run_lesson(sections=None, stop_on_error=False):
        return [run_example(broken, {}, stop_on_error)]

    monkeypatch.setattr(report, "run_lesson", fake_run_lesson, raising=True)

    assert report.main(["--output", str(tmp_path / "x.html")]) == 1
    with pytest.raises(ValueError, match="bad encoding"):
        report.main(["--output", str(tmp_path / "y.html"), "--strict"])
