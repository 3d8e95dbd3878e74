"""
Configuration Module
Settings, palettes and themes
"""

from .settings import (
    DEFAULT_SETTINGS,
    CHART_CONFIG,
    COLOR_PALETTE,
    CONTINENT_COLORS,
    CYLINDER_COLORS,
    TRANSMISSION_COLORS,
    THEME_DEFAULTS,
    THEMES,
    LESSON_SECTIONS,
    REPORT_SETTINGS
)

__all__ = [
    'DEFAULT_SETTINGS',
    'CHART_CONFIG',
    'COLOR_PALETTE',
    'CONTINENT_COLORS',
    'CYLINDER_COLORS',
    'TRANSMISSION_COLORS',
    'THEME_DEFAULTS',
    'THEMES',
    'LESSON_SECTIONS',
    'REPORT_SETTINGS'
]
