"""
Availability aggregation and the available-dates projection

Both functions are pure: no I/O and no mutation of their inputs.
"""
import logging
from datetime import datetime, date
from typing import Iterable, List, Optional

from .models import (
    AggregatedAvailability,
    CampsiteRecord,
    MonthlyAvailability,
    SiteAvailability,
)

logger = logging.getLogger(__name__)


def merge_campsite(existing: Optional[CampsiteRecord], incoming: CampsiteRecord) -> CampsiteRecord:
    """
    Merge one campsite record into another.

    Fields that ``incoming`` actually carries overwrite ``existing``, including
    an explicit null; fields it omits keep their earlier value. Availability
    maps are combined key-wise with ``incoming`` winning on collision.
    """
    if existing is None:
        return incoming.model_copy(deep=True)

    merged = {**existing.model_dump(), **incoming.model_dump(exclude_unset=True)}
    merged["availabilities"] = {
        **existing.availabilities,
        **incoming.availabilities,
    }
    return CampsiteRecord(**merged)


def aggregate(monthly_responses: Iterable[MonthlyAvailability]) -> AggregatedAvailability:
    """
    Left-fold monthly availability responses into one structure.

    Responses are applied in the order given, so for the same
    (campsite, date) key the later response wins.
    """
    campsites = {}
    count = 0
    for response in monthly_responses:
        count += 1
        for campsite_id, record in response.campsites.items():
            campsites[campsite_id] = merge_campsite(campsites.get(campsite_id), record)

    logger.debug(f"Aggregated {count} monthly responses into {len(campsites)} campsites")
    return AggregatedAvailability(campsites=campsites)


def parse_availability_date(date_str: str) -> date:
    """Parse an availability key ("2020-07-01" or "2020-07-01T00:00:00Z")"""
    return datetime.fromisoformat(date_str.replace("Z", "+00:00")).date()


def derive_available_dates_by_site(availability: AggregatedAvailability) -> List[SiteAvailability]:
    """
    Project aggregated availability onto available dates per site label.

    Only dates whose status is exactly "Available" are kept. Sites without
    any available date are dropped. The result is sorted by site label and
    each site's dates ascend.
    """
    view = []
    for campsite_id, record in availability.campsites.items():
        dates = set()
        for date_str in record.available_dates():
            try:
                dates.add(parse_availability_date(date_str))
            except ValueError:
                logger.debug(f"Skipping unparseable date {date_str!r} for campsite {campsite_id}")
                continue

        if dates:
            view.append(SiteAvailability(
                site=record.site if record.site is not None else campsite_id,
                dates=tuple(sorted(dates))
            ))

    # Dates break ties between campsites sharing a label
    view.sort(key=lambda s: (s.site, s.dates))
    return view
