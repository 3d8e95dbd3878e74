"""
Dataset Loader Module
Loads the car specifications and country-year sample tables
"""

import logging
from importlib import resources

import pandas as pd
import plotly.express as px
import streamlit as st

from ..config.settings import DEFAULT_SETTINGS
from ..errors import DatasetError
from .processor import add_country_labels

logger = logging.getLogger(__name__)

MTCARS_FILE = "mtcars.csv"

MTCARS_COLUMNS = [
    'model', 'mpg', 'cyl', 'disp', 'hp', 'drat',
    'wt', 'qsec', 'vs', 'am', 'gear', 'carb'
]

GAPMINDER_COLUMNS = [
    'country', 'continent', 'year', 'lifeExp',
    'pop', 'gdpPercap', 'iso_alpha', 'iso_num'
]


@st.cache_data(ttl=DEFAULT_SETTINGS["cache_ttl"])
def load_mtcars():
    """Motor Trend car road tests, one row per car model"""
    source = resources.files(__package__).joinpath("datasets").joinpath(MTCARS_FILE)
    try:
        with source.open("r", encoding="utf-8") as fh:
            df = pd.read_csv(fh)
    except FileNotFoundError as e:
        logger.error("Bundled dataset %s is missing", MTCARS_FILE)
        raise DatasetError(f"bundled dataset {MTCARS_FILE} is missing") from e

    missing = [c for c in MTCARS_COLUMNS if c not in df.columns]
    if missing:
        raise DatasetError(f"{MTCARS_FILE} lacks columns: {', '.join(missing)}")

    logger.debug("Loaded mtcars: %d rows", len(df))
    return df[MTCARS_COLUMNS]


@st.cache_data(ttl=DEFAULT_SETTINGS["cache_ttl"])
def load_gapminder():
    """Gapminder country-year table shipped with plotly"""
    df = px.data.gapminder()
    missing = [c for c in GAPMINDER_COLUMNS if c not in df.columns]
    if missing:
        raise DatasetError(f"gapminder lacks columns: {', '.join(missing)}")

    logger.debug("Loaded gapminder: %d rows", len(df))
    return df[GAPMINDER_COLUMNS]


def load_datasets(year=None):
    """All lesson tables keyed by name, including the labeled single-year copy"""
    if year is None:
        year = DEFAULT_SETTINGS["gapminder_year"]

    mtcars = load_mtcars()
    gapminder = load_gapminder()

    return {
        "mtcars": mtcars,
        "gapminder": gapminder,
        "gapminder_labeled": add_country_labels(gapminder, year)
    }
