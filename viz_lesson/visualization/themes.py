"""
Chart Themes Module
Named cosmetic themes applied on top of any plotly figure

A theme only changes how a chart looks: fonts, background colors,
gridlines, axis lines, ticks and legend placement. Data and visual
encodings are never touched.
"""

import plotly.graph_objects as go
import plotly.io as pio

from ..config.settings import THEME_DEFAULTS, THEMES
from ..errors import ChartConfigError

TEMPLATE_PREFIX = "viz_lesson_"

LEGEND_POSITIONS = {
    "right": dict(orientation="v", x=1.02, xanchor="left", y=1, yanchor="top"),
    "left": dict(orientation="v", x=-0.12, xanchor="right", y=1, yanchor="top"),
    "top": dict(orientation="h", x=0.5, xanchor="center", y=1.02, yanchor="bottom"),
    "bottom": dict(orientation="h", x=0.5, xanchor="center", y=-0.18, yanchor="top"),
    "none": {}
}


def legend_position(position):
    """Plotly legend placement for a position keyword"""
    if position not in LEGEND_POSITIONS:
        raise ChartConfigError(
            f"unknown legend position {position!r}; choose from {', '.join(LEGEND_POSITIONS)}"
        )
    return dict(LEGEND_POSITIONS[position])


def resolve_theme(name, **overrides):
    """Theme options after defaults, the named theme and overrides are merged"""
    if name not in THEMES:
        raise ChartConfigError(f"unknown theme {name!r}; choose from {', '.join(THEMES)}")
    unknown = sorted(set(overrides) - set(THEME_DEFAULTS))
    if unknown:
        raise ChartConfigError(f"unknown theme option(s): {', '.join(unknown)}")

    options = {**THEME_DEFAULTS, **THEMES[name], **overrides}
    # Validate early so a typo fails here rather than inside plotly
    legend_position(options["legend_position"])
    return options


def build_theme(name="grey", **overrides):
    """Resolve a theme into plotly layout and axis keyword dicts"""
    opts = resolve_theme(name, **overrides)

    show_legend = opts["show_legend"] and opts["legend_position"] != "none"
    layout = dict(
        paper_bgcolor=opts["background"],
        plot_bgcolor=opts["panel_background"],
        font=dict(family=opts["base_family"], size=opts["base_size"], color=opts["font_color"]),
        title=dict(font=dict(size=opts["title_size"], color=opts["title_color"])),
        showlegend=show_legend
    )
    if show_legend:
        layout["legend"] = legend_position(opts["legend_position"])

    axes = dict(
        showgrid=opts["grid_major"],
        gridcolor=opts["grid_color"],
        minor=dict(showgrid=opts["grid_minor"], gridcolor=opts["minor_grid_color"]),
        showline=opts["axis_line"],
        linecolor=opts["line_color"],
        mirror=opts["mirror"],
        zeroline=False,
        ticks="outside" if opts["show_ticks"] else "",
        showticklabels=opts["show_ticks"],
        tickfont=dict(size=round(opts["base_size"] * 0.9)),
        title_font=dict(size=opts["base_size"], color=opts["font_color"])
    )

    return {"layout": layout, "axes": axes}


def apply_theme(fig, name="grey", **overrides):
    """Apply a theme to every axis of a figure; returns the figure for chaining"""
    theme = build_theme(name, **overrides)
    fig.update_layout(**theme["layout"])
    fig.update_xaxes(**theme["axes"])
    fig.update_yaxes(**theme["axes"])
    return fig


def register_templates():
    """Register each theme as a plotly template named viz_lesson_<theme>"""
    names = []
    for name in THEMES:
        theme = build_theme(name)
        template = go.layout.Template(
            layout=dict(theme["layout"], xaxis=theme["axes"], yaxis=theme["axes"])
        )
        template_name = f"{TEMPLATE_PREFIX}{name}"
        pio.templates[template_name] = template
        names.append(template_name)
    return names
