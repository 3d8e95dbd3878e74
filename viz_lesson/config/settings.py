"""
Data Visualization Lesson Settings
Page settings, chart defaults, palettes and theme definitions
"""

import os

# Page and lesson defaults
DEFAULT_SETTINGS = {
    "page_title": "📊 Data Visualization Lesson",
    "page_icon": "📊",
    "layout": "wide",
    "cache_ttl": 3600,  # 1 hour
    "default_theme": os.environ.get("VIZ_LESSON_THEME", "grey"),
    "chart_height": 500,
    "chart_width": 900,
    "gapminder_year": 2007,
    "top_countries": 10,
    "highlight_continents": ("Africa", "Europe"),
    "line_countries": ("China", "India", "United States", "Nigeria", "Germany")
}

# Base layout merged into every chart
CHART_CONFIG = {
    "plot_bgcolor": "white",
    "paper_bgcolor": "white",
    "font_family": "Arial, sans-serif",
    "title_font_size": 18,
    "legend_font_size": 12,
    "margin": dict(l=80, r=40, t=90, b=60),
    "hovermode": "closest"
}

# UI colors
COLOR_PALETTE = {
    "primary": "#1f77b4",
    "secondary": "#ff7f0e",
    "success": "#2ca02c",
    "danger": "#d62728",
    "muted": "#CCCCCC",
    "subtitle": "#666666",
    "light": "#f8f9fa",
    "dark": "#343a40"
}

# Okabe-Ito, colorblind safe. Titles reuse these so words match markers.
CONTINENT_COLORS = {
    "Africa": "#E69F00",
    "Americas": "#56B4E9",
    "Asia": "#009E73",
    "Europe": "#0072B2",
    "Oceania": "#CC79A7"
}

CYLINDER_COLORS = {
    "4": "#1B9E77",
    "6": "#D95F02",
    "8": "#7570B3"
}

TRANSMISSION_COLORS = {
    "Automatic": "#4E8397",
    "Manual": "#F18F01"
}

# Every theme option and its default; themes override a subset
THEME_DEFAULTS = {
    "base_size": 12,
    "base_family": "Arial, sans-serif",
    "font_color": "#333333",
    "title_size": 16,
    "title_color": "#1A1A1A",
    "background": "white",
    "panel_background": "#EBEBEB",
    "grid_major": True,
    "grid_minor": True,
    "grid_color": "white",
    "minor_grid_color": "#F5F5F5",
    "axis_line": False,
    "line_color": "#333333",
    "mirror": False,
    "show_ticks": True,
    "show_legend": True,
    "legend_position": "right"
}

THEMES = {
    "grey": {},
    "minimal": {
        "panel_background": "white",
        "grid_color": "#EBEBEB",
        "minor_grid_color": "#F7F7F7"
    },
    "classic": {
        "panel_background": "white",
        "grid_major": False,
        "grid_minor": False,
        "axis_line": True
    },
    "bw": {
        "panel_background": "white",
        "grid_color": "#EBEBEB",
        "minor_grid_color": "#F7F7F7",
        "axis_line": True,
        "mirror": True
    },
    "light": {
        "panel_background": "white",
        "grid_color": "#DEDEDE",
        "minor_grid_color": "#EFEFEF",
        "axis_line": True,
        "line_color": "#B3B3B3",
        "mirror": True
    },
    "dark": {
        "panel_background": "#7F7F7F",
        "grid_color": "#999999",
        "minor_grid_color": "#8C8C8C"
    },
    "void": {
        "panel_background": "white",
        "grid_major": False,
        "grid_minor": False,
        "show_ticks": False
    },
    "lesson": {
        "base_size": 13,
        "base_family": "Roboto Condensed, Arial Narrow, sans-serif",
        "title_size": 20,
        "title_color": "#1E3A8A",
        "panel_background": "white",
        "grid_color": "#E5E7EB",
        "grid_minor": False,
        "legend_position": "top"
    }
}

# Lesson sections in reading order
LESSON_SECTIONS = {
    "setup": {
        "title": "Setup and data",
        "description": "The two sample tables every example draws from."
    },
    "theming": {
        "title": "Theming",
        "description": "Fonts, colors, gridlines, axis titles and legends."
    },
    "composition": {
        "title": "Composing plots",
        "description": "Several charts arranged in one figure with panel labels."
    },
    "rich_text": {
        "title": "Rich text labels",
        "description": "Markdown and colored words in titles and axis labels."
    },
    "interactive": {
        "title": "Interactive charts",
        "description": "Hover tooltips, pan and zoom, and animation."
    }
}

# HTML report
REPORT_SETTINGS = {
    "title": "Data Visualization Lesson",
    "output_path": os.environ.get("VIZ_LESSON_REPORT_PATH", "viz-lesson.html"),
    "include_plotlyjs": "cdn"  # or "inline"
}
