"""
Environmental Analytics DTOs
"""

from .environmental_data_dto import (
    CSV_COLUMNS,
    EXPORT_FILENAME_PREFIX,
    EnvironmentalDataPoint,
    build_environmental_csv,
    get_export_filename,
    to_data_points,
)

__all__ = [
    "CSV_COLUMNS",
    "EXPORT_FILENAME_PREFIX",
    "EnvironmentalDataPoint",
    "build_environmental_csv",
    "get_export_filename",
    "to_data_points",
]
