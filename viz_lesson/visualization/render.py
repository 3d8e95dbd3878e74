"""
Chart Rendering Module
Turns a figure into a static or interactive artifact
"""

import streamlit as st

from ..errors import ChartConfigError

STATIC = "static"
INTERACTIVE = "interactive"
RENDER_MODES = (STATIC, INTERACTIVE)


def plotly_config(mode=INTERACTIVE):
    """Plotly config for a render mode"""
    if mode == STATIC:
        # An image in all but name: no hover, no zoom, no mode bar
        return {"staticPlot": True, "displayModeBar": False, "responsive": True}
    if mode == INTERACTIVE:
        return {
            "displaylogo": False,
            "scrollZoom": True,
            "responsive": True,
            "modeBarButtonsToRemove": ["lasso2d", "select2d"]
        }
    raise ChartConfigError(f"unknown render mode {mode!r}; choose from {', '.join(RENDER_MODES)}")


def figure_to_html(fig, mode=INTERACTIVE, include_plotlyjs="cdn", div_id=None, full_html=False):
    """HTML for one chart"""
    return fig.to_html(
        full_html=full_html,
        include_plotlyjs=include_plotlyjs,
        config=plotly_config(mode),
        div_id=div_id,
        auto_play=False
    )


def show_figure(fig, mode=INTERACTIVE, key=None):
    """Render a chart inside the Streamlit app"""
    st.plotly_chart(fig, use_container_width=True, config=plotly_config(mode), key=key)
