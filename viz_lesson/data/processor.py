"""
Data Processor Module
Derived columns, filters and summaries that feed the lesson charts
"""

import numpy as np
import pandas as pd

from ..config.settings import CONTINENT_COLORS, COLOR_PALETTE
from ..errors import ChartConfigError

CYLINDER_ORDER = ["4", "6", "8"]
TRANSMISSION_LABELS = {0: "Automatic", 1: "Manual"}


def validate_columns(df, columns, context="chart"):
    """Raise ChartConfigError when any encoded column is missing from the table"""
    wanted = [c for c in columns if c is not None]
    missing = [c for c in wanted if c not in df.columns]
    if missing:
        raise ChartConfigError(
            f"{context}: unknown column(s) {', '.join(repr(c) for c in missing)}; "
            f"available: {', '.join(map(str, df.columns))}"
        )


def add_cylinder_factor(mtcars):
    """Categorical cylinder count for discrete color scales"""
    validate_columns(mtcars, ['cyl'], "add_cylinder_factor")
    df = mtcars.copy()
    df['cyl_label'] = df['cyl'].astype(int).astype(str)
    return df


def add_transmission_label(mtcars):
    """0/1 transmission flag as readable labels"""
    validate_columns(mtcars, ['am'], "add_transmission_label")
    df = mtcars.copy()
    df['transmission'] = df['am'].map(TRANSMISSION_LABELS)
    return df


def filter_year(gapminder, year):
    """Rows of a single year"""
    validate_columns(gapminder, ['year'], "filter_year")
    available = sorted(gapminder['year'].unique())
    if year not in available:
        raise ChartConfigError(
            f"no data for year {year}; available years: {', '.join(map(str, available))}"
        )
    return gapminder[gapminder['year'] == year].copy()


def make_country_label(country, continent):
    """Markdown label naming a country and its continent in the continent's color"""
    color = CONTINENT_COLORS.get(continent, COLOR_PALETTE["subtitle"])
    return f"**{country}** <span style='color:{color}'>({continent})</span>"


def add_country_labels(gapminder, year=2007):
    """Single-year copy with a markup `label` column"""
    validate_columns(gapminder, ['country', 'continent'], "add_country_labels")
    df = filter_year(gapminder, year)
    df['label'] = [
        make_country_label(country, continent)
        for country, continent in zip(df['country'], df['continent'])
    ]
    return df.reset_index(drop=True)


def top_countries(df, by="pop", n=10):
    """The n largest rows by a column, largest first"""
    validate_columns(df, [by], "top_countries")
    if n < 1:
        raise ChartConfigError(f"top_countries needs n >= 1, got {n}")
    return df.nlargest(n, by).reset_index(drop=True)


def summarize_by_continent(gapminder_year):
    """Population, life expectancy and country count per continent"""
    validate_columns(
        gapminder_year, ['continent', 'country', 'pop', 'lifeExp'], "summarize_by_continent"
    )
    rows = []
    for continent, group in gapminder_year.groupby('continent', sort=True):
        rows.append({
            'continent': continent,
            'countries': group['country'].nunique(),
            'pop': group['pop'].sum(),
            'lifeExp_mean': group['lifeExp'].mean(),
            # Population weighted, so China and India count for more than Iceland
            'lifeExp_weighted': np.average(group['lifeExp'], weights=group['pop'])
        })
    return pd.DataFrame(rows)


def summarize_by_cylinders(mtcars):
    """Car count, mean mpg and mean horsepower per cylinder count"""
    df = add_cylinder_factor(mtcars)
    summary = (
        df.groupby('cyl_label')
        .agg(cars=('model', 'size'), mpg_mean=('mpg', 'mean'), hp_mean=('hp', 'mean'))
        .reindex(CYLINDER_ORDER)
        .dropna(how='all')
        .rename_axis('cyl_label')
        .reset_index()
    )
    summary['cars'] = summary['cars'].astype(int)
    return summary


def count_by_cylinders_and_transmission(mtcars):
    """Car count per cylinder and transmission pair, zero-filled"""
    df = add_transmission_label(add_cylinder_factor(mtcars))
    index = pd.MultiIndex.from_product(
        [CYLINDER_ORDER, list(TRANSMISSION_LABELS.values())],
        names=['cyl_label', 'transmission']
    )
    counts = df.groupby(['cyl_label', 'transmission']).size()
    return counts.reindex(index, fill_value=0).reset_index(name='count')


def log_axis_range(values):
    """Axis range in data units snapped to whole decades"""
    values = np.asarray(values, dtype=float)
    values = values[values > 0]
    if values.size == 0:
        raise ChartConfigError("log axis needs at least one positive value")
    low = 10 ** np.floor(np.log10(values.min()))
    high = 10 ** np.ceil(np.log10(values.max()))
    return [float(low), float(high)]


def linear_axis_range(values, step=5):
    """Axis range snapped outward to multiples of step"""
    values = np.asarray(values, dtype=float)
    low = np.floor(values.min() / step) * step
    high = np.ceil(values.max() / step) * step
    return [float(low), float(high)]
