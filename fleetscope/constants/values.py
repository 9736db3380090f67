"""Scalar constants shared across screens."""

from typing import Final

APP_TITLE: Final = "FleetScope"

NOT_AVAILABLE: Final = "N/A"
STATUS_NEVER: Final = "Never"
NO_DATA_MESSAGE: Final = "No data available for the selected cluster"
NO_CLUSTERS_MESSAGE: Final = "No clusters reported by the data source"

__all__ = [
    "APP_TITLE",
    "NOT_AVAILABLE",
    "NO_CLUSTERS_MESSAGE",
    "NO_DATA_MESSAGE",
    "STATUS_NEVER",
]
