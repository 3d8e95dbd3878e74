"""
Lesson Registry Module
The lesson's examples, in reading order

Each builder takes the dict returned by load_datasets() and returns a
figure or a list of figures. The builder's own source is shown next to
its chart, so builders stay short and read like worked examples.
"""

from dataclasses import dataclass
from typing import Callable

from ..config.settings import LESSON_SECTIONS
from ..data.processor import summarize_by_continent
from ..errors import ChartConfigError
from ..visualization.charts import (
    data_table, mtcars_scatter, custom_theme_scatter, theme_gallery,
    composed_mtcars_grid, mtcars_boxplot, gapminder_bubble, continent_bar,
    rich_text_scatter, labeled_country_bar, interactive_scatter, animated_bubble,
    life_expectancy_lines
)
from ..visualization.composition import plot_grid
from ..visualization.render import STATIC, INTERACTIVE


@dataclass(frozen=True)
class Example:
    key: str
    section: str
    title: str
    description: str
    builder: Callable
    mode: str = STATIC


def build_data_preview(datasets):
    mtcars = data_table(datasets["mtcars"], ["model", "mpg", "cyl", "disp", "hp", "wt", "am"])
    gapminder = data_table(
        datasets["gapminder_labeled"], ["country", "continent", "year", "lifeExp", "pop", "label"]
    )
    return [mtcars, gapminder]


def build_default_theme(datasets):
    return mtcars_scatter(datasets["mtcars"], theme="grey")


def build_minimal_theme(datasets):
    return mtcars_scatter(datasets["mtcars"], theme="minimal")


def build_custom_theme(datasets):
    return custom_theme_scatter(datasets["mtcars"])


def build_theme_without_legend(datasets):
    return mtcars_scatter(datasets["mtcars"], theme="classic", show_legend=False, base_size=15)


def build_theme_gallery(datasets):
    return list(theme_gallery(datasets["mtcars"]).values())


def build_labeled_grid(datasets):
    return composed_mtcars_grid(datasets["mtcars"])


def build_relative_widths(datasets):
    gapminder_2007 = datasets["gapminder_labeled"]
    return plot_grid(
        [gapminder_bubble(gapminder_2007), continent_bar(summarize_by_continent(gapminder_2007))],
        ncol=2,
        labels="auto",
        rel_widths=[2, 1],
        keep_titles=False,
        title="Wealth, health and **continents**, 2007"
    )


def build_stacked_rows(datasets):
    return plot_grid(
        [life_expectancy_lines(datasets["gapminder"]), mtcars_boxplot(datasets["mtcars"])],
        nrow=2,
        labels=["Countries", "Cars"],
        rel_heights=[3, 2],
        label_size=13
    )


def build_colored_title(datasets):
    return rich_text_scatter(datasets["gapminder_labeled"], highlight=["Africa", "Europe"])


def build_markup_axis_labels(datasets):
    return labeled_country_bar(datasets["gapminder_labeled"], n=10)


def build_hover_scatter(datasets):
    return interactive_scatter(datasets["mtcars"])


def build_interactive_bubble(datasets):
    return gapminder_bubble(datasets["gapminder_labeled"])


def build_animated_bubble(datasets):
    return animated_bubble(datasets["gapminder"])


EXAMPLES = (
    Example(
        "data-preview", "setup", "The sample tables",
        "`mtcars` has one row per car with the model name as a column. "
        "`gapminder_labeled` is the **2007** slice of `gapminder` with a markup `label` column.",
        build_data_preview
    ),
    Example(
        "default-theme", "theming", "Default theme",
        "Displacement against horsepower. Color encodes cylinders, size encodes *mpg*.",
        build_default_theme
    ),
    Example(
        "minimal-theme", "theming", "A minimal theme",
        "Same chart, white panel and light gridlines. Only the theme changed.",
        build_minimal_theme
    ),
    Example(
        "custom-theme", "theming", "Tuning theme options",
        "Serif font, larger base size, no minor gridlines, axis lines on and the legend on top.",
        build_custom_theme
    ),
    Example(
        "no-legend", "theming", "Hiding the legend",
        "The classic theme with `show_legend=False`.",
        build_theme_without_legend
    ),
    Example(
        "theme-gallery", "theming", "Theme gallery",
        "One chart per built-in theme.",
        build_theme_gallery
    ),
    Example(
        "labeled-grid", "composition", "A labeled plot grid",
        "Three charts in one row with panels labeled **A**, **B** and **C**. "
        "The scatter gets a wider column.",
        build_labeled_grid
    ),
    Example(
        "relative-widths", "composition", "Relative widths",
        "A bubble chart two thirds wide next to a continent summary, labeled `auto`.",
        build_relative_widths
    ),
    Example(
        "stacked-rows", "composition", "Stacked rows with custom labels",
        "Two rows with heights 3:2 and explicit panel labels.",
        build_stacked_rows
    ),
    Example(
        "colored-title", "rich_text", "Colored words in a title",
        "The title names the highlighted continents in their marker colors, "
        "so the chart needs no legend.",
        build_colored_title
    ),
    Example(
        "markup-axis-labels", "rich_text", "Markup on the axis",
        "Each bar's label is the `label` column: the country in **bold** and its continent in color.",
        build_markup_axis_labels
    ),
    Example(
        "hover-scatter", "interactive", "Hover tooltips",
        "Hover a point for the car's details; drag to zoom, double-click to reset.",
        build_hover_scatter, INTERACTIVE
    ),
    Example(
        "interactive-bubble", "interactive", "An interactive bubble chart",
        "The 2007 bubble chart with hover, pan and zoom.",
        build_interactive_bubble, INTERACTIVE
    ),
    Example(
        "animated-bubble", "interactive", "Animation over time",
        "Every year from 1952 to 2007. Press play or drag the slider.",
        build_animated_bubble, INTERACTIVE
    ),
)


def examples_for_section(section):
    """Examples of one section, in lesson order"""
    if section not in LESSON_SECTIONS:
        raise ChartConfigError(
            f"unknown section {section!r}; choose from {', '.join(LESSON_SECTIONS)}"
        )
    return [example for example in EXAMPLES if example.section == section]


def get_example(key):
    """Look up an example by key"""
    for example in EXAMPLES:
        if example.key == key:
            return example
    raise ChartConfigError(f"unknown example {key!r}")
