"""
Rich Text Markup Module
Markdown in chart titles, subtitles and axis labels

Plotly renders a small HTML subset inside chart text:
<b>, <i>, <br>, <sup>, <sub>, <a> and <span style=...>.
Markdown emphasis is translated into that subset; tags already in
the subset pass through untouched.
"""

import re

from ..config.settings import COLOR_PALETTE

_TAG = re.compile(r"<[^>]+>")
_PLACEHOLDER = re.compile(r"\x00(\d+)\x00")

# Order matters: strong emphasis before emphasis
_RULES = [
    (re.compile(r"\*\*(.+?)\*\*", re.S), r"<b>\1</b>"),
    (re.compile(r"(?<!\w)__(.+?)__(?!\w)", re.S), r"<b>\1</b>"),
    (re.compile(r"\*(?!\s)(.+?)(?<!\s)\*", re.S), r"<i>\1</i>"),
    (re.compile(r"(?<!\w)_(?!\s)(.+?)(?<!\s)_(?!\w)", re.S), r"<i>\1</i>"),
    (re.compile(r"\^(?!\s)(.+?)(?<!\s)\^"), r"<sup>\1</sup>"),
    (re.compile(r"~(?!\s)(.+?)(?<!\s)~"), r"<sub>\1</sub>"),
    (re.compile(r"\r?\n"), "<br>"),
]


def markdown_to_plotly(text):
    """Translate markdown emphasis into plotly's rich text subset"""
    if text is None:
        return None
    text = str(text)

    # Shield existing tags so attribute values are never rewritten
    tags = []

    def _shield(match):
        tags.append(match.group(0))
        return f"\x00{len(tags) - 1}\x00"

    converted = _TAG.sub(_shield, text)
    for pattern, replacement in _RULES:
        converted = pattern.sub(replacement, converted)

    return _PLACEHOLDER.sub(lambda m: tags[int(m.group(1))], converted)


def colored(text, color):
    """Wrap text in a colored span"""
    return f"<span style='color:{color}'>{text}</span>"


def strip_markup(text):
    """Plain text with markdown and tags removed"""
    if text is None:
        return ""
    html = markdown_to_plotly(text)
    html = re.sub(r"<br\s*/?>", " ", html)
    return " ".join(_TAG.sub("", html).split())


def rich_title(title, subtitle=None, subtitle_size=13):
    """Left-aligned plotly title with an optional smaller grey subtitle line"""
    text = markdown_to_plotly(title) or ""
    if subtitle:
        sub = (
            f"<span style='font-size:{subtitle_size}px;color:{COLOR_PALETTE['subtitle']}'>"
            f"{markdown_to_plotly(subtitle)}</span>"
        )
        text = f"{text}<br>{sub}" if text else sub
    return dict(text=text, x=0.01, xanchor="left", xref="paper")


def join_words(words, conjunction="and"):
    """'A', 'A and B', 'A, B and C'"""
    words = list(words)
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    return f"{', '.join(words[:-1])} {conjunction} {words[-1]}"
