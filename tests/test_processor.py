from __future__ import annotations

import pandas as pd
import pytest

from viz_lesson.config.settings import CONTINENT_COLORS
from viz_lesson.data.processor import (
    add_country_labels,
    add_cylinder_factor,
    add_transmission_label,
    count_by_cylinders_and_transmission,
    filter_year,
    linear_axis_range,
    log_axis_range,
    make_country_label,
    summarize_by_continent,
    summarize_by_cylinders,
    top_countries,
    validate_columns,
)
from viz_lesson.errors import ChartConfigError


def test_validate_columns_names_missing_and_available() -> None:
    df = pd.DataFrame({"a": [1], "b": [2]})
    validate_columns(df, ["a", None, "b"])

    with pytest.raises(ChartConfigError) as excinfo:
        validate_columns(df, ["a", "nope"], "scatter")
    message = str(excinfo.value)
    assert "scatter" in message
    assert "'nope'" in message
    assert "available: a, b" in message


def test_chart_config_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        validate_columns(pd.DataFrame({"a": [1]}), ["z"])


def test_add_cylinder_factor_copies_and_labels(mtcars) -> None:
    out = add_cylinder_factor(mtcars)
    assert "cyl_label" not in mtcars.columns
    assert set(out["cyl_label"]) == {"4", "6", "8"}
    assert out.loc[out["model"] == "Valiant", "cyl_label"].item() == "6"


def test_add_transmission_label(mtcars) -> None:
    out = add_transmission_label(mtcars)
    assert out["transmission"].value_counts().to_dict() == {"Automatic": 19, "Manual": 13}


def test_filter_year_unknown_year_lists_available(gapminder) -> None:
    assert len(filter_year(gapminder, 1952)) == 142
    with pytest.raises(ChartConfigError, match="available years: 1952"):
        filter_year(gapminder, 2008)


def test_make_country_label_is_deterministic() -> None:
    first = make_country_label("China", "Asia")
    assert first == make_country_label("China", "Asia")
    assert first == f"**China** <span style='color:{CONTINENT_COLORS['Asia']}'>(Asia)</span>"


def test_make_country_label_unknown_continent_is_grey() -> None:
    assert "color:#666666" in make_country_label("Atlantis", "Ocean")


def test_add_country_labels_one_row_per_country(gapminder) -> None:
    labeled = add_country_labels(gapminder, 2007)
    assert len(labeled) == 142
    assert labeled["country"].is_unique
    row = labeled[labeled["country"] == "Kenya"].iloc[0]
    assert row["label"] == make_country_label("Kenya", "Africa")


def test_top_countries_descending(gapminder_2007) -> None:
    top = top_countries(gapminder_2007, "pop", 3)
    assert top["country"].tolist() == ["China", "India", "United States"]
    with pytest.raises(ChartConfigError):
        top_countries(gapminder_2007, "pop", 0)


def test_summarize_by_continent(gapminder_2007) -> None:
    summary = summarize_by_continent(gapminder_2007)
    assert summary["continent"].tolist() == ["Africa", "Americas", "Asia", "Europe", "Oceania"]
    assert summary["countries"].sum() == 142
    assert summary["pop"].sum() == gapminder_2007["pop"].sum()
    asia = summary.set_index("continent").loc["Asia"]
    # Weighted mean sits nearer to the populous countries' values
    assert asia["lifeExp_weighted"] != pytest.approx(asia["lifeExp_mean"])


def test_summarize_by_cylinders(mtcars) -> None:
    summary = summarize_by_cylinders(mtcars)
    assert summary["cyl_label"].tolist() == ["4", "6", "8"]
    assert summary["cars"].tolist() == [11, 7, 14]
    assert summary.loc[0, "mpg_mean"] == pytest.approx(26.6636, abs=1e-3)


def test_count_by_cylinders_and_transmission_zero_filled(mtcars) -> None:
    counts = count_by_cylinders_and_transmission(mtcars)
    assert len(counts) == 6
    assert counts["count"].sum() == 32
    lookup = counts.set_index(["cyl_label", "transmission"])["count"]
    assert lookup[("8", "Manual")] == 2
    assert lookup[("4", "Automatic")] == 3


def test_axis_ranges() -> None:
    assert log_axis_range([241.2, 49357.2]) == [100.0, 100000.0]
    assert linear_axis_range([23.6, 82.6], step=5) == [20.0, 85.0]
    with pytest.raises(ChartConfigError):
        log_axis_range([0, -1])
