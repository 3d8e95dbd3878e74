"""
Visualization Module
Themes, composition, rich text and the lesson charts
"""

from .charts import (
    scatter_chart,
    mtcars_scatter,
    mtcars_boxplot,
    mtcars_bar,
    theme_gallery,
    custom_theme_scatter,
    gapminder_bubble,
    life_expectancy_lines,
    continent_bar,
    rich_text_scatter,
    labeled_country_bar,
    interactive_scatter,
    animated_bubble,
    composed_mtcars_grid,
    data_table
)
from .composition import plot_grid, panel_labels, grid_shape
from .markup import markdown_to_plotly, colored, strip_markup, rich_title
from .render import STATIC, INTERACTIVE, plotly_config, figure_to_html, show_figure
from .themes import apply_theme, build_theme, legend_position, register_templates

__all__ = [
    'scatter_chart',
    'mtcars_scatter',
    'mtcars_boxplot',
    'mtcars_bar',
    'theme_gallery',
    'custom_theme_scatter',
    'gapminder_bubble',
    'life_expectancy_lines',
    'continent_bar',
    'rich_text_scatter',
    'labeled_country_bar',
    'interactive_scatter',
    'animated_bubble',
    'composed_mtcars_grid',
    'data_table',
    'plot_grid',
    'panel_labels',
    'grid_shape',
    'markdown_to_plotly',
    'colored',
    'strip_markup',
    'rich_title',
    'STATIC',
    'INTERACTIVE',
    'plotly_config',
    'figure_to_html',
    'show_figure',
    'apply_theme',
    'build_theme',
    'legend_position',
    'register_templates'
]
