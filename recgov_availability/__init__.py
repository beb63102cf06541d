"""
Recreation.gov Campground Availability Viewer

Fetches a campground's availability for a set of months, merges the
monthly responses per campsite and lists the available dates per site.

1. Data pipeline (recgov_availability.api, recgov_availability.common)
   - Concurrent monthly fetches, all-or-nothing
   - Pure aggregation and available-dates projection

2. Presentation (recgov_availability.display)
   - Rich tables for the terminal
"""
from .common.config import Config, load_config

__version__ = "1.0.0"

__all__ = [
    "Config",
    "load_config",
]
