"""
Data Visualization Lesson
Polished static and interactive charts from tabular data

Theming, plot composition, rich text labels and interactive widgets
"""

__version__ = "1.0.0"
__author__ = "Data Visualization Lesson Team"
__description__ = "Chart theming, composition, rich text and interactivity with plotly"
