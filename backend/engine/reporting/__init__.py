"""Presentation adapters: table rows, chart series and CSV export."""

from .chart_data import comparison_series, stacked_area_series
from .csv_export import comparison_to_csv, trajectory_to_csv
from .tables import comparison_table, projection_table

__all__ = [
    "comparison_series",
    "stacked_area_series",
    "comparison_to_csv",
    "trajectory_to_csv",
    "comparison_table",
    "projection_table",
]
