"""
Lesson Runner Module
Executes lesson examples in order and collects their charts
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import List, Optional

import plotly.graph_objects as go

from ..config.settings import LESSON_SECTIONS
from ..data.loader import load_datasets
from ..errors import ChartConfigError
from .registry import EXAMPLES, Example

logger = logging.getLogger(__name__)


@dataclass
class RenderedExample:
    example: Example
    figures: List[go.Figure] = field(default_factory=list)
    source: str = ""
    error: Optional[str] = None

    @property
    def ok(self):
        return self.error is None


def example_source(example):
    """Source code of an example's builder"""
    try:
        return inspect.getsource(example.builder)
    except (OSError, TypeError):
        # Builders defined interactively have no source file
        return f"# source unavailable for {example.builder!r}"


def _as_figures(result):
    if isinstance(result, go.Figure):
        return [result]
    figures = list(result)
    for fig in figures:
        if not isinstance(fig, go.Figure):
            raise ChartConfigError(f"builder returned {type(fig).__name__}, expected a Figure")
    return figures


def run_example(example, datasets, stop_on_error=False):
    """Build one example; failures are recorded unless stop_on_error"""
    rendered = RenderedExample(example=example, source=example_source(example))
    try:
        rendered.figures = _as_figures(example.builder(datasets))
    except Exception as e:
        if stop_on_error:
            raise
        logger.exception("Example %s failed", example.key)
        rendered.error = f"{type(e).__name__}: {e}"
    else:
        logger.debug("Example %s rendered %d figure(s)", example.key, len(rendered.figures))
    return rendered


def run_lesson(datasets=None, sections=None, stop_on_error=False, examples=None):
    """Run every example of the selected sections in lesson order"""
    if sections is not None:
        unknown = [s for s in sections if s not in LESSON_SECTIONS]
        if unknown:
            raise ChartConfigError(
                f"unknown section(s) {', '.join(unknown)}; choose from {', '.join(LESSON_SECTIONS)}"
            )
    if datasets is None:
        datasets = load_datasets()
    if examples is None:
        examples = EXAMPLES

    selected = [e for e in examples if sections is None or e.section in sections]
    # Section order first, registry order within a section
    order = list(LESSON_SECTIONS)
    selected.sort(key=lambda e: order.index(e.section) if e.section in order else len(order))

    results = [run_example(example, datasets, stop_on_error) for example in selected]
    failed = sum(not r.ok for r in results)
    logger.info("Lesson run: %d example(s), %d failed", len(results), failed)
    return results
