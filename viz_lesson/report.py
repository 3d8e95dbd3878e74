"""
Lesson Report Module
Runs every example in order and writes one standalone HTML report

Usage:
    python -m viz_lesson.report --output viz-lesson.html
    python -m viz_lesson.report --section theming --section rich_text --strict
"""

import argparse
import html
import logging
import re
import sys
from datetime import datetime
from pathlib import Path

from plotly.offline import get_plotlyjs, get_plotlyjs_version

from .config.settings import LESSON_SECTIONS, REPORT_SETTINGS
from .lesson.runner import run_lesson
from .visualization.markup import markdown_to_plotly
from .visualization.render import figure_to_html

logger = logging.getLogger(__name__)

REPORT_CSS = """
body { font-family: Arial, sans-serif; max-width: 1100px; margin: 0 auto; padding: 1rem 2rem; color: #1F2937; }
h1 { color: #1E3A8A; }
h2 { border-bottom: 2px solid #D1D5DB; padding-bottom: 0.4rem; margin-top: 2.5rem; }
.section-description, .example-description { color: #4B5563; }
pre { background: #F3F4F6; padding: 0.8rem; border-radius: 6px; overflow-x: auto; font-size: 0.85rem; }
code { background: #F3F4F6; padding: 0 0.2rem; border-radius: 3px; }
.error { background: #FEF2F2; border-left: 4px solid #DC2626; padding: 0.8rem; }
footer { margin-top: 3rem; color: #6B7280; font-size: 0.85rem; text-align: center; }
"""


def markdown_to_html(text):
    """Paragraphs, inline code and emphasis; enough for example descriptions"""
    paragraphs = []
    for block in re.split(r"\n\s*\n", text.strip()):
        escaped = html.escape(block, quote=False)
        escaped = re.sub(r"`([^`]+)`", r"<code>\1</code>", escaped)
        # Inline code must not pick up emphasis
        parts = re.split(r"(<code>.*?</code>)", escaped)
        body = "".join(
            part if part.startswith("<code>") else markdown_to_plotly(part.replace("\n", " "))
            for part in parts
        )
        paragraphs.append(f"<p>{body}</p>")
    return "\n".join(paragraphs)


def plotlyjs_tag(include_plotlyjs):
    """Single <script> tag that makes plotly.js available to every chart"""
    if include_plotlyjs == "inline":
        return f'<script type="text/javascript">{get_plotlyjs()}</script>'
    if include_plotlyjs == "cdn":
        return (
            f'<script src="https://cdn.plot.ly/plotly-{get_plotlyjs_version()}.min.js" '
            'charset="utf-8"></script>'
        )
    raise ValueError(f"include_plotlyjs must be 'cdn' or 'inline', got {include_plotlyjs!r}")


def _example_html(rendered):
    example = rendered.example
    parts = [
        f'<h3 id="{example.key}">{html.escape(example.title)}</h3>',
        f'<div class="example-description">{markdown_to_html(example.description)}</div>',
        f"<pre><code>{html.escape(rendered.source)}</code></pre>"
    ]
    if rendered.ok:
        for index, fig in enumerate(rendered.figures):
            parts.append(figure_to_html(
                fig,
                mode=example.mode,
                include_plotlyjs=False,
                div_id=f"{example.key}-{index}"
            ))
    else:
        parts.append(f'<div class="error"><b>Error:</b> {html.escape(rendered.error)}</div>')
    return "\n".join(parts)


def build_report(rendered, title=None, include_plotlyjs=None):
    """Standalone HTML document: table of contents, then each section's examples"""
    title = title or REPORT_SETTINGS["title"]
    include_plotlyjs = include_plotlyjs or REPORT_SETTINGS["include_plotlyjs"]

    sections = [s for s in LESSON_SECTIONS if any(r.example.section == s for r in rendered)]

    toc = ["<ul>"]
    body = []
    for section in sections:
        info = LESSON_SECTIONS[section]
        toc.append(f'<li><a href="#section-{section}">{html.escape(info["title"])}</a></li>')
        body.append(f'<h2 id="section-{section}">{html.escape(info["title"])}</h2>')
        body.append(f'<p class="section-description">{html.escape(info["description"])}</p>')
        for item in rendered:
            if item.example.section == section:
                body.append(_example_html(item))
    toc.append("</ul>")

    generated = datetime.now().strftime("%Y-%m-%d %H:%M")
    return "\n".join([
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{html.escape(title)}</title>",
        f"<style>{REPORT_CSS}</style>",
        plotlyjs_tag(include_plotlyjs),
        "</head>",
        "<body>",
        f"<h1>{html.escape(title)}</h1>",
        "\n".join(toc),
        "\n".join(body),
        f"<footer>Generated {generated}</footer>",
        "</body>",
        "</html>"
    ])


def write_report(path, rendered, title=None, include_plotlyjs=None):
    """Write the report and return its path"""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(build_report(rendered, title, include_plotlyjs), encoding="utf-8")
    logger.info("Wrote report %s", path)
    return path


def main(argv=None):
    """Console entrypoint; returns 1 when any example failed"""
    parser = argparse.ArgumentParser(description="Render the visualization lesson to HTML")
    parser.add_argument(
        "--output", "-o",
        default=REPORT_SETTINGS["output_path"],
        help="Report path (default: %(default)s)"
    )
    parser.add_argument(
        "--section",
        action="append",
        choices=list(LESSON_SECTIONS),
        help="Only render this section; repeatable"
    )
    parser.add_argument("--title", default=REPORT_SETTINGS["title"], help="Report title")
    parser.add_argument(
        "--inline-plotlyjs",
        action="store_true",
        help="Embed plotly.js so the report works offline"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Stop at the first failing example"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    rendered = run_lesson(sections=args.section, stop_on_error=args.strict)
    path = write_report(
        args.output,
        rendered,
        title=args.title,
        include_plotlyjs="inline" if args.inline_plotlyjs else "cdn"
    )

    failed = [r.example.key for r in rendered if not r.ok]
    if failed:
        logger.error("%d example(s) failed: %s", len(failed), ", ".join(failed))
        return 1
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
