"""
Plot Composition Module
Arrange several figures into one grid with panel labels
"""

import math
import string

from plotly.subplots import make_subplots

from ..config.settings import DEFAULT_SETTINGS
from ..errors import ChartConfigError
from .markup import rich_title

# Axis properties carried from each source figure into its panel
AXIS_PROPERTIES = ("type", "categoryorder", "categoryarray", "tickformat", "autorange")


def grid_shape(n, ncol=None, nrow=None):
    """(rows, cols) for n panels; a square-ish grid when neither is given"""
    if n < 1:
        raise ChartConfigError("plot grid needs at least one figure")
    for name, value in (("ncol", ncol), ("nrow", nrow)):
        if value is not None and value < 1:
            raise ChartConfigError(f"{name} must be >= 1, got {value}")

    if ncol is None and nrow is None:
        ncol = math.ceil(math.sqrt(n))
        nrow = math.ceil(n / ncol)
    elif ncol is None:
        ncol = math.ceil(n / nrow)
    elif nrow is None:
        nrow = math.ceil(n / ncol)

    if nrow * ncol < n:
        raise ChartConfigError(f"{nrow}x{ncol} grid cannot hold {n} figures")
    return nrow, ncol


def _letter_label(index, alphabet):
    # A..Z, AA, AB, ...
    label = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        label = alphabet[rem] + label
    return label


def panel_labels(choice, n):
    """Resolve labels: None, "AUTO" (A, B, ...), "auto" (a, b, ...) or an explicit list"""
    if choice is None:
        return []
    if choice == "AUTO":
        return [_letter_label(i, string.ascii_uppercase) for i in range(n)]
    if choice == "auto":
        return [_letter_label(i, string.ascii_lowercase) for i in range(n)]
    if isinstance(choice, str):
        raise ChartConfigError(f"labels must be 'AUTO', 'auto' or a list, got {choice!r}")

    labels = [str(label) for label in choice]
    if len(labels) != n:
        raise ChartConfigError(f"got {len(labels)} labels for {n} figures")
    return labels


def _relative_sizes(sizes, count, name):
    if sizes is None:
        return None
    sizes = list(sizes)
    if len(sizes) != count:
        raise ChartConfigError(f"{name} needs {count} values, got {len(sizes)}")
    if any(s <= 0 for s in sizes):
        raise ChartConfigError(f"{name} must all be positive")
    total = float(sum(sizes))
    return [s / total for s in sizes]


def _spacing(value, default, count, name):
    """Gap between panels; plotly caps it at 1 / (count - 1)"""
    if count < 2:
        return default if value is None else value
    limit = 1 / (count - 1)
    if value is None:
        # Long strips shrink the gap and keep half of each cell for the panel
        return min(default, limit / 2)
    if not 0 <= value <= limit:
        raise ChartConfigError(f"{name} must be between 0 and {limit:.4f} for {count} panels, got {value}")
    return value


def _axis_updates(axis):
    updates = {}
    if axis.title.text:
        updates["title_text"] = axis.title.text
    for prop in AXIS_PROPERTIES:
        value = axis[prop]
        if value is not None:
            updates[prop] = value
    return updates


def plot_grid(figures, ncol=None, nrow=None, labels=None, label_size=16,
              rel_widths=None, rel_heights=None, title=None, subtitle=None,
              keep_titles=True, shared_legend=True,
              horizontal_spacing=None, vertical_spacing=None, height=None):
    """Compose figures into a grid, row by row, with optional panel labels"""
    figures = list(figures)
    rows, cols = grid_shape(len(figures), ncol, nrow)
    horizontal_spacing = _spacing(horizontal_spacing, 0.08, cols, "horizontal_spacing")
    vertical_spacing = _spacing(vertical_spacing, 0.12, rows, "vertical_spacing")
    labels = panel_labels(labels, len(figures))
    column_widths = _relative_sizes(rel_widths, cols, "rel_widths")
    row_heights = _relative_sizes(rel_heights, rows, "rel_heights")

    subplot_titles = None
    if keep_titles:
        subplot_titles = [fig.layout.title.text or "" for fig in figures]

    composite = make_subplots(
        rows=rows,
        cols=cols,
        column_widths=column_widths,
        row_heights=row_heights,
        subplot_titles=subplot_titles,
        horizontal_spacing=horizontal_spacing,
        vertical_spacing=vertical_spacing
    )

    seen_names = set()
    for index, fig in enumerate(figures):
        row, col = divmod(index, cols)
        row, col = row + 1, col + 1

        for trace in fig.data:
            trace_json = trace.to_plotly_json()
            name = trace_json.get("name")
            if shared_legend and name:
                trace_json["legendgroup"] = trace_json.get("legendgroup") or name
                if name in seen_names:
                    trace_json["showlegend"] = False
                seen_names.add(name)
            composite.add_trace(trace_json, row=row, col=col)

        composite.update_xaxes(**_axis_updates(fig.layout.xaxis), row=row, col=col)
        composite.update_yaxes(**_axis_updates(fig.layout.yaxis), row=row, col=col)

        # Grouped bars and boxes are a layout setting, not a trace one
        for mode in ("barmode", "boxmode"):
            if fig.layout[mode] is not None:
                composite.layout[mode] = fig.layout[mode]

        if labels:
            subplot = composite.get_subplot(row, col)
            composite.add_annotation(
                text=f"<b>{labels[index]}</b>",
                x=subplot.xaxis.domain[0],
                y=subplot.yaxis.domain[1],
                xref="paper",
                yref="paper",
                xanchor="right",
                yanchor="bottom",
                showarrow=False,
                font=dict(size=label_size)
            )

    composite.update_layout(
        height=height or DEFAULT_SETTINGS["chart_height"] * 0.8 * rows,
        showlegend=True
    )
    if title:
        composite.update_layout(title=rich_title(title, subtitle), margin=dict(t=110))

    return composite
