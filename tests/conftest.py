from __future__ import annotations

import pandas as pd
import pytest

from viz_lesson.data.loader import load_datasets, load_gapminder, load_mtcars


@pytest.fixture(scope="session")
def mtcars() -> pd.DataFrame:
    return load_mtcars()


@pytest.fixture(scope="session")
def gapminder() -> pd.DataFrame:
    return load_gapminder()


@pytest.fixture(scope="session")
def datasets() -> dict:
    return load_datasets()


@pytest.fixture(scope="session")
def gapminder_2007(datasets) -> pd.DataFrame:
    return datasets["gapminder_labeled"]
