"""
Lesson Module
Example registry and runner
"""

from .registry import (
    Example,
    EXAMPLES,
    examples_for_section,
    get_example
)

from .runner import (
    RenderedExample,
    example_source,
    run_example,
    run_lesson
)

__all__ = [
    'Example',
    'EXAMPLES',
    'examples_for_section',
    'get_example',
    'RenderedExample',
    'example_source',
    'run_example',
    'run_lesson'
]
