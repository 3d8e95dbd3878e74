from __future__ import annotations

from viz_lesson.visualization.markup import (
    colored,
    join_words,
    markdown_to_plotly,
    rich_title,
    strip_markup,
)


def test_emphasis_and_line_breaks() -> None:
    assert markdown_to_plotly("**bold** and *italic*") == "<b>bold</b> and <i>italic</i>"
    assert markdown_to_plotly("__bold__ and _italic_") == "<b>bold</b> and <i>italic</i>"
    assert markdown_to_plotly("CO^2^ and H~2~O") == "CO<sup>2</sup> and H<sub>2</sub>O"
    assert markdown_to_plotly("one\ntwo") == "one<br>two"


def test_existing_tags_pass_through_untouched() -> None:
    text = "<span style='color:#E69F00;font_weight:bold'>Africa</span> is **here**"
    assert markdown_to_plotly(text) == (
        "<span style='color:#E69F00;font_weight:bold'>Africa</span> is <b>here</b>"
    )


def test_emphasis_can_wrap_tags() -> None:
    assert markdown_to_plotly("**<span style='color:red'>x</span>**") == (
        "<b><span style='color:red'>x</span></b>"
    )


def test_snake_case_and_lone_asterisks_are_not_emphasis() -> None:
    assert markdown_to_plotly("gdp_per_cap") == "gdp_per_cap"
    assert markdown_to_plotly("2 * 3 = 6") == "2 * 3 = 6"


def test_conversion_is_idempotent() -> None:
    once = markdown_to_plotly("**Life** expectancy in *2007*")
    assert markdown_to_plotly(once) == once
    assert markdown_to_plotly(None) is None


def test_strip_markup() -> None:
    label = "**China** <span style='color:#009E73'>(Asia)</span>"
    assert strip_markup(label) == "China (Asia)"
    assert strip_markup("a\nb") == "a b"
    assert strip_markup(None) == ""


def test_colored_and_join_words() -> None:
    assert colored("Europe", "#0072B2") == "<span style='color:#0072B2'>Europe</span>"
    assert join_words(["A"]) == "A"
    assert join_words(["A", "B"]) == "A and B"
    assert join_words(["A", "B", "C"], "or") == "A, B or C"
    assert join_words([]) == ""


def test_rich_title_with_subtitle() -> None:
    title = rich_title("Life in *2007*", "Source: **gapminder**")
    assert title["text"].startswith("Life in <i>2007</i><br><span style='font-size:13px;")
    assert "<b>gapminder</b></span>" in title["text"]
    assert title["xanchor"] == "left"
    assert rich_title("Plain")["text"] == "Plain"


def test_rich_title_subtitle_only() -> None:
    title = rich_title(None, "Source: gapminder")
    assert title["text"].startswith("<span style='font-size:13px;")
    assert "<br>" not in title["text"]
    assert rich_title(None)["text"] == ""
