"""
Common models, configuration and aggregation for the availability viewer
"""
from .config import Config, load_config
from .models import (
    CampsiteAvailability,
    MonthSpec,
    AvailabilityQuery,
    CampsiteRecord,
    MonthlyAvailability,
    AggregatedAvailability,
    SiteAvailability,
    Campground,
    Campsite,
    AvailabilityReport,
)
from .aggregation import aggregate, derive_available_dates_by_site
from .pages import WebPages

__all__ = [
    "Config",
    "load_config",
    "CampsiteAvailability",
    "MonthSpec",
    "AvailabilityQuery",
    "CampsiteRecord",
    "MonthlyAvailability",
    "AggregatedAvailability",
    "SiteAvailability",
    "Campground",
    "Campsite",
    "AvailabilityReport",
    "aggregate",
    "derive_available_dates_by_site",
    "WebPages",
]
