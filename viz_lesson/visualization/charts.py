"""
Lesson Charts Module
Each function maps table columns to visual channels and styles the result
"""

import plotly.graph_objects as go
import plotly.express as px

from ..config.settings import (
    CHART_CONFIG, COLOR_PALETTE, CONTINENT_COLORS, CYLINDER_COLORS,
    TRANSMISSION_COLORS, DEFAULT_SETTINGS
)
from ..data.processor import (
    CYLINDER_ORDER, validate_columns, add_cylinder_factor, add_transmission_label,
    count_by_cylinders_and_transmission, top_countries, log_axis_range, linear_axis_range
)
from ..errors import ChartConfigError
from .composition import plot_grid
from .markup import markdown_to_plotly, rich_title, colored, join_words
from .themes import apply_theme


def _single_year(df):
    """The year a table covers, or None when it holds no rows or several years"""
    if "year" not in df or df["year"].nunique() != 1:
        return None
    return int(df["year"].iloc[0])


def scatter_chart(df, x, y, color=None, size=None, symbol=None, hover_name=None,
                  hover_data=None, title=None, subtitle=None, x_title=None, y_title=None,
                  log_x=False, color_map=None, category_orders=None, size_max=20,
                  height=None):
    """Encoding-driven scatter plot"""
    columns = [x, y, color, size, symbol, hover_name] + list(hover_data or [])
    validate_columns(df, columns, "scatter_chart")

    fig = px.scatter(
        df,
        x=x,
        y=y,
        color=color,
        # Marker sizes scale against the column maximum
        size=size if len(df) else None,
        symbol=symbol,
        hover_name=hover_name,
        hover_data=hover_data,
        log_x=log_x,
        color_discrete_map=color_map,
        category_orders=category_orders,
        size_max=size_max
    )

    fig.update_layout(
        xaxis_title=markdown_to_plotly(x_title or x),
        yaxis_title=markdown_to_plotly(y_title or y),
        **CHART_CONFIG,
        height=height or DEFAULT_SETTINGS["chart_height"]
    )
    if title:
        fig.update_layout(title=rich_title(title, subtitle))

    return fig


def mtcars_scatter(mtcars, theme=None, **theme_overrides):
    """Displacement vs horsepower, colored by cylinders, sized by fuel efficiency"""
    df = add_cylinder_factor(mtcars)
    fig = scatter_chart(
        df,
        x="disp",
        y="hp",
        color="cyl_label",
        size="mpg",
        hover_name="model",
        title="Bigger engines, more horsepower",
        subtitle="Point size shows miles per gallon",
        x_title="Displacement (cu. in.)",
        y_title="Gross horsepower",
        color_map=CYLINDER_COLORS,
        category_orders={"cyl_label": CYLINDER_ORDER},
        size_max=18
    )
    fig.update_layout(legend_title_text="Cylinders")
    return apply_theme(fig, theme or DEFAULT_SETTINGS["default_theme"], **theme_overrides)


def mtcars_boxplot(mtcars, theme=None):
    """Fuel efficiency distribution per cylinder count, with every car shown"""
    df = add_cylinder_factor(mtcars)
    validate_columns(df, ['mpg', 'model'], "mtcars_boxplot")

    fig = px.box(
        df,
        x="cyl_label",
        y="mpg",
        color="cyl_label",
        points="all",
        hover_name="model",
        color_discrete_map=CYLINDER_COLORS,
        category_orders={"cyl_label": CYLINDER_ORDER}
    )
    fig.update_layout(
        title=rich_title("Fewer cylinders, *further* per gallon"),
        xaxis_title="Cylinders",
        yaxis_title="Miles per gallon",
        legend_title_text="Cylinders",
        boxmode="overlay",
        **CHART_CONFIG,
        height=DEFAULT_SETTINGS["chart_height"]
    )
    return apply_theme(fig, theme or DEFAULT_SETTINGS["default_theme"])


def mtcars_bar(mtcars, theme=None):
    """Car count per cylinder count, dodged by transmission"""
    counts = count_by_cylinders_and_transmission(mtcars)

    fig = px.bar(
        counts,
        x="cyl_label",
        y="count",
        color="transmission",
        barmode="group",
        color_discrete_map=TRANSMISSION_COLORS,
        category_orders={"cyl_label": CYLINDER_ORDER}
    )
    fig.update_layout(
        title=rich_title("Most V8s are automatics"),
        xaxis_title="Cylinders",
        yaxis_title="Number of cars",
        legend_title_text="Transmission",
        **CHART_CONFIG,
        height=DEFAULT_SETTINGS["chart_height"]
    )
    return apply_theme(fig, theme or DEFAULT_SETTINGS["default_theme"])


def theme_gallery(mtcars, themes=("grey", "minimal", "classic", "bw", "light", "dark")):
    """The same scatter once per theme, keyed by theme name"""
    gallery = {}
    for name in themes:
        fig = mtcars_scatter(mtcars, theme=name, legend_position="bottom")
        fig.update_layout(title=rich_title(f"theme: **{name}**"), height=380)
        gallery[name] = fig
    return gallery


def custom_theme_scatter(mtcars):
    """The scatter with hand-tuned theme options"""
    fig = mtcars_scatter(
        mtcars,
        theme="minimal",
        base_size=14,
        base_family="Georgia, serif",
        title_size=22,
        title_color="#1E3A8A",
        grid_minor=False,
        axis_line=True,
        legend_position="top"
    )
    return fig


def gapminder_bubble(gapminder_year, theme=None):
    """Wealth vs health: GDP per capita (log) against life expectancy"""
    year = _single_year(gapminder_year)
    fig = scatter_chart(
        gapminder_year,
        x="gdpPercap",
        y="lifeExp",
        color="continent",
        size="pop",
        hover_name="country",
        title="Richer countries live longer",
        subtitle=f"Bubble size shows population, {year}" if year else None,
        x_title="GDP per capita (US$, *log scale*)",
        y_title="Life expectancy (years)",
        log_x=True,
        color_map=CONTINENT_COLORS,
        category_orders={"continent": list(CONTINENT_COLORS)},
        size_max=55
    )
    fig.update_layout(legend_title_text="Continent")
    return apply_theme(fig, theme or "minimal")


def life_expectancy_lines(gapminder, countries=None, theme=None):
    """Life expectancy over time for a handful of countries"""
    countries = list(countries or DEFAULT_SETTINGS["line_countries"])
    validate_columns(gapminder, ['country', 'year', 'lifeExp'], "life_expectancy_lines")
    missing = sorted(set(countries) - set(gapminder['country']))
    if missing:
        raise ChartConfigError(f"unknown countries: {', '.join(missing)}")

    df = gapminder[gapminder['country'].isin(countries)]
    fig = px.line(
        df,
        x="year",
        y="lifeExp",
        color="country",
        markers=True,
        category_orders={"country": countries}
    )
    fig.update_layout(
        title=rich_title("Life expectancy, 1952-2007"),
        xaxis_title="Year",
        yaxis_title="Life expectancy (years)",
        legend_title_text="Country",
        **CHART_CONFIG,
        height=DEFAULT_SETTINGS["chart_height"]
    )
    return apply_theme(fig, theme or "minimal")


def continent_bar(summary, theme=None):
    """Mean life expectancy per continent"""
    validate_columns(summary, ['continent', 'lifeExp_mean', 'countries'], "continent_bar")
    df = summary.sort_values('lifeExp_mean')

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=df['lifeExp_mean'],
        y=df['continent'],
        orientation='h',
        marker_color=[CONTINENT_COLORS.get(c, COLOR_PALETTE["muted"]) for c in df['continent']],
        customdata=df[['countries']].to_numpy(),
        showlegend=False,
        hovertemplate=(
            "<b>%{y}</b><br>"
            "Mean life expectancy: %{x:.1f} years<br>"
            "Countries: %{customdata[0]}<br>"
            "<extra></extra>"
        )
    ))
    fig.update_layout(
        title=rich_title("Mean life expectancy by continent"),
        xaxis_title="Life expectancy (years)",
        yaxis_title="",
        **CHART_CONFIG,
        height=DEFAULT_SETTINGS["chart_height"] * 0.8
    )
    return apply_theme(fig, theme or "minimal")


def rich_text_scatter(gapminder_year, highlight=None, theme=None):
    """Highlighted continents in color, named in matching colors in the title"""
    highlight = list(highlight or DEFAULT_SETTINGS["highlight_continents"])
    validate_columns(
        gapminder_year, ['continent', 'country', 'gdpPercap', 'lifeExp'], "rich_text_scatter"
    )
    unknown = sorted(set(highlight) - set(CONTINENT_COLORS))
    if unknown:
        raise ChartConfigError(f"unknown continents: {', '.join(unknown)}")

    fig = go.Figure()

    # Context first so highlighted points draw on top
    others = gapminder_year[~gapminder_year['continent'].isin(highlight)]
    fig.add_trace(go.Scatter(
        x=others['gdpPercap'],
        y=others['lifeExp'],
        mode='markers',
        name='Other continents',
        marker=dict(color=COLOR_PALETTE["muted"], size=9, opacity=0.7),
        text=others['country'],
        showlegend=False,
        hovertemplate="<b>%{text}</b><br>GDP per capita: %{x:$,.0f}<br>Life expectancy: %{y:.1f}<extra></extra>"
    ))

    for continent in highlight:
        group = gapminder_year[gapminder_year['continent'] == continent]
        fig.add_trace(go.Scatter(
            x=group['gdpPercap'],
            y=group['lifeExp'],
            mode='markers',
            name=continent,
            marker=dict(color=CONTINENT_COLORS[continent], size=11,
                        line=dict(color="white", width=1)),
            text=group['country'],
            showlegend=False,
            hovertemplate=(
                f"<b>%{{text}}</b> ({continent})<br>"
                "GDP per capita: %{x:$,.0f}<br>"
                "Life expectancy: %{y:.1f}<extra></extra>"
            )
        ))

    words = [colored(f"**{c}**", CONTINENT_COLORS[c]) for c in highlight]
    year = _single_year(gapminder_year)
    fig.update_layout(
        title=rich_title(
            f"Life expectancy in {join_words(words)}",
            "GDP per capita against life expectancy" + (f", *{year}*" if year else "")
        ),
        xaxis_title=markdown_to_plotly("GDP per capita (US$, *log scale*)"),
        yaxis_title=markdown_to_plotly("Life expectancy (years)"),
        **CHART_CONFIG,
        height=DEFAULT_SETTINGS["chart_height"]
    )
    fig.update_xaxes(type="log")
    return apply_theme(fig, theme or "minimal")


def labeled_country_bar(gapminder_labeled, n=None, theme=None):
    """Most populous countries with markup labels on the category axis"""
    validate_columns(gapminder_labeled, ['label', 'pop', 'country', 'continent'], "labeled_country_bar")
    top = top_countries(gapminder_labeled, "pop", n or DEFAULT_SETTINGS["top_countries"])

    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=top['pop'] / 1e6,
        y=[markdown_to_plotly(label) for label in top['label']],
        orientation='h',
        marker_color=[CONTINENT_COLORS.get(c, COLOR_PALETTE["muted"]) for c in top['continent']],
        customdata=top[['country']].to_numpy(),
        showlegend=False,
        hovertemplate=(
            "<b>%{customdata[0]}</b><br>"
            "Population: %{x:,.1f} million<br>"
            "<extra></extra>"
        )
    ))
    fig.update_layout(
        title=rich_title(
            f"The **{len(top)}** most populous countries",
            "Country names in **bold**, continents in their map colors"
        ),
        xaxis_title="Population (millions)",
        yaxis_title="",
        **CHART_CONFIG,
        height=DEFAULT_SETTINGS["chart_height"]
    )
    # Largest at the top
    fig.update_yaxes(autorange="reversed")
    return apply_theme(fig, theme or "minimal", grid_minor=False)


def interactive_scatter(mtcars, theme=None):
    """Weight vs fuel efficiency with a hover card per car"""
    df = add_transmission_label(add_cylinder_factor(mtcars))
    validate_columns(df, ['wt', 'mpg', 'model', 'hp', 'qsec'], "interactive_scatter")

    fig = go.Figure()
    for cyl in CYLINDER_ORDER:
        group = df[df['cyl_label'] == cyl]
        if group.empty:
            continue
        fig.add_trace(go.Scatter(
            x=group['wt'],
            y=group['mpg'],
            mode='markers',
            name=f"{cyl} cylinders",
            marker=dict(color=CYLINDER_COLORS[cyl], size=12, line=dict(color="white", width=1)),
            customdata=group[['model', 'hp', 'transmission', 'qsec']].to_numpy(),
            hovertemplate=(
                "<b>%{customdata[0]}</b><br>"
                "Weight: %{x:.2f} (1000 lbs)<br>"
                "MPG: %{y:.1f}<br>"
                "Horsepower: %{customdata[1]}<br>"
                "Transmission: %{customdata[2]}<br>"
                "1/4 mile: %{customdata[3]:.2f} s<br>"
                "<extra></extra>"
            )
        ))

    fig.update_layout(
        title=rich_title("Heavier cars burn more fuel", "Hover a point to see the car; drag to zoom"),
        xaxis_title="Weight (1000 lbs)",
        yaxis_title="Miles per gallon",
        legend_title_text="Cylinders",
        dragmode="zoom",
        **CHART_CONFIG,
        height=DEFAULT_SETTINGS["chart_height"]
    )
    return apply_theme(fig, theme or "minimal")


def animated_bubble(gapminder, theme=None):
    """The wealth and health bubble chart animated over every year"""
    validate_columns(
        gapminder, ['year', 'country', 'continent', 'gdpPercap', 'lifeExp', 'pop'], "animated_bubble"
    )
    df = gapminder.sort_values(['year', 'country'])

    fig = px.scatter(
        df,
        x="gdpPercap",
        y="lifeExp",
        size="pop",
        color="continent",
        hover_name="country",
        animation_frame="year",
        animation_group="country",
        log_x=True,
        size_max=55,
        # Fixed ranges so axes do not jump between frames
        range_x=log_axis_range(df['gdpPercap']),
        range_y=linear_axis_range(df['lifeExp'], step=5),
        color_discrete_map=CONTINENT_COLORS,
        category_orders={"continent": list(CONTINENT_COLORS)}
    )
    fig.update_layout(
        title=rich_title("Wealth and health of nations", "Press play to watch 1952-2007"),
        xaxis_title=markdown_to_plotly("GDP per capita (US$, *log scale*)"),
        yaxis_title="Life expectancy (years)",
        legend_title_text="Continent",
        **CHART_CONFIG,
        height=DEFAULT_SETTINGS["chart_height"] * 1.2
    )
    return apply_theme(fig, theme or "minimal")


def composed_mtcars_grid(mtcars):
    """Scatter, boxplot and bar chart side by side with panel labels"""
    fig = plot_grid(
        [mtcars_scatter(mtcars), mtcars_boxplot(mtcars), mtcars_bar(mtcars)],
        ncol=3,
        labels="AUTO",
        rel_widths=[1.4, 1, 1],
        keep_titles=False,
        title="Motor Trend cars at a glance",
        subtitle="Displacement and power, fuel efficiency, transmissions"
    )
    return apply_theme(fig, DEFAULT_SETTINGS["default_theme"], legend_position="bottom")


def data_table(df, columns=None, max_rows=8):
    """First rows of a table as a plotly table"""
    columns = list(columns or df.columns)
    validate_columns(df, columns, "data_table")
    head = df[columns].head(max_rows)

    fig = go.Figure(go.Table(
        header=dict(
            values=[f"<b>{c}</b>" for c in columns],
            fill_color=COLOR_PALETTE["light"],
            align='left'
        ),
        cells=dict(
            values=[head[c].tolist() for c in columns],
            align='left'
        )
    ))
    fig.update_layout(
        margin=dict(l=10, r=10, t=40, b=10),
        height=60 + 28 * len(head)
    )
    return fig
