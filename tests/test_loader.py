from __future__ import annotations

from viz_lesson.data.loader import GAPMINDER_COLUMNS, MTCARS_COLUMNS


def test_mtcars_has_every_car_and_model_column(mtcars) -> None:
    assert len(mtcars) == 32
    assert list(mtcars.columns) == MTCARS_COLUMNS
    assert mtcars["model"].is_unique
    assert "Mazda RX4" in set(mtcars["model"])
    # Row identifier is data, not an index
    assert mtcars.index.tolist() == list(range(32))


def test_mtcars_values_match_the_classic_table(mtcars) -> None:
    row = mtcars.set_index("model").loc["Maserati Bora"]
    assert row["hp"] == 335
    assert row["cyl"] == 8
    assert row["carb"] == 8


def test_gapminder_columns_and_years(gapminder) -> None:
    assert list(gapminder.columns) == GAPMINDER_COLUMNS
    years = sorted(gapminder["year"].unique())
    assert years[0] == 1952
    assert years[-1] == 2007
    assert set(gapminder["continent"]) == {"Africa", "Americas", "Asia", "Europe", "Oceania"}


def test_load_datasets_keys_and_labeled_copy(datasets) -> None:
    assert set(datasets) == {"mtcars", "gapminder", "gapminder_labeled"}
    labeled = datasets["gapminder_labeled"]
    assert set(labeled["year"]) == {2007}
    assert "label" in labeled.columns
    # The source table is left untouched
    assert "label" not in datasets["gapminder"].columns
