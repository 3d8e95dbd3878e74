"""
Lesson Errors
Exceptions raised while loading datasets and building charts
"""


class VizLessonError(Exception):
    """Base class for lesson errors"""


class ChartConfigError(VizLessonError, ValueError):
    """
    Raised when a chart is configured with something it cannot use.

    Examples:
        - A visual encoding that refers to a missing column
        - An unknown theme name or theme option
        - A plot grid too small for the figures given
    """


class DatasetError(VizLessonError):
    """Raised when a bundled dataset cannot be loaded"""
