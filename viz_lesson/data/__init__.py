"""
Data Module
Sample datasets and the reshaping that feeds each chart
"""

from .loader import (
    load_mtcars,
    load_gapminder,
    load_datasets
)

from .processor import (
    validate_columns,
    add_cylinder_factor,
    add_transmission_label,
    filter_year,
    make_country_label,
    add_country_labels,
    top_countries,
    summarize_by_continent,
    summarize_by_cylinders,
    count_by_cylinders_and_transmission
)

__all__ = [
    'load_mtcars',
    'load_gapminder',
    'load_datasets',
    'validate_columns',
    'add_cylinder_factor',
    'add_transmission_label',
    'filter_year',
    'make_country_label',
    'add_country_labels',
    'top_countries',
    'summarize_by_continent',
    'summarize_by_cylinders',
    'count_by_cylinders_and_transmission'
]
