"""
Data models for Recreation.gov availability lookups
"""
from datetime import date
from typing import Optional, List, Dict, Set, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum

from .pages import WebPages


class CampsiteAvailability(str, Enum):
    AVAILABLE = "Available"
    RESERVED = "Reserved"
    NOT_AVAILABLE = "Not Available"
    WALK_UP = "Walk Up"
    NOT_RESERVABLE = "Not Reservable"
    OPEN = "Open"


class MonthSpec(BaseModel):
    """One calendar month to query"""
    model_config = ConfigDict(frozen=True)

    year: int = Field(ge=1000, le=9999)
    month: int = Field(ge=1, le=12)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def start_date(self) -> str:
        """Start date parameter for the monthly availability endpoint"""
        return self.first_day.strftime("%Y-%m-%dT00:00:00.000Z")


def _as_month(value) -> int:
    """Whole month number from an int, an integral float or a digit string"""
    if isinstance(value, str):
        return int(value.strip())
    month = int(value)
    if month != value:
        raise ValueError(f"invalid month: {value!r}")
    return month


class AvailabilityQuery(BaseModel):
    """
    Immutable description of one availability lookup.

    Built fresh for every user-initiated query and passed explicitly
    to the client; nothing is kept at module level.
    """
    model_config = ConfigDict(frozen=True)

    campground_id: str = Field(min_length=1)
    year: int = Field(ge=1000, le=9999)
    months: Tuple[int, ...]

    @field_validator("campground_id", mode="before")
    @classmethod
    def _normalize_campground_id(cls, value):
        if isinstance(value, int):
            value = str(value)
        if isinstance(value, str):
            value = value.strip()
        return value

    @field_validator("months", mode="before")
    @classmethod
    def _normalize_months(cls, value):
        if isinstance(value, (int, float, str)):
            value = [value]
        months = sorted({_as_month(m) for m in value})
        if not months:
            raise ValueError("at least one month is required")
        for month in months:
            if not 1 <= month <= 12:
                raise ValueError(f"invalid month: {month}")
        return tuple(months)

    @property
    def month_specs(self) -> List[MonthSpec]:
        """Requested months in ascending order"""
        return [MonthSpec(year=self.year, month=m) for m in self.months]


class CampsiteRecord(BaseModel):
    """
    Availability record for one campsite as returned by the monthly endpoint.

    Provider fields other than ``site`` and ``availabilities`` (loop,
    campsite_type, max_num_people, ...) are kept as extra fields.
    """
    model_config = ConfigDict(extra="allow")

    site: Optional[str] = None
    availabilities: Dict[str, str] = Field(default_factory=dict)

    def available_dates(self) -> Set[str]:
        """Raw date keys whose status is exactly Available"""
        return {
            date_str
            for date_str, status in self.availabilities.items()
            if status == CampsiteAvailability.AVAILABLE.value
        }


class MonthlyAvailability(BaseModel):
    """Decoded body of one monthly availability response"""
    campsites: Dict[str, CampsiteRecord] = Field(default_factory=dict)


class AggregatedAvailability(BaseModel):
    """Union of all requested months, keyed by campsite id"""
    campsites: Dict[str, CampsiteRecord] = Field(default_factory=dict)

    @property
    def campsite_ids(self) -> List[str]:
        return sorted(self.campsites)


class SiteAvailability(BaseModel):
    """Available dates for one site label, ascending"""
    model_config = ConfigDict(frozen=True)

    site: str
    dates: Tuple[date, ...]

    def as_tuple(self) -> Tuple[str, List[date]]:
        return self.site, list(self.dates)


class Campground(BaseModel):
    """Recreation.gov campground"""
    id: str
    name: str
    parent_name: Optional[str] = None  # e.g., "Yosemite National Park"
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def url(self) -> str:
        return WebPages.campground(self.id)


class Campsite(BaseModel):
    """Individual campsite within a campground"""
    id: str
    campground_id: Optional[str] = None
    name: str  # e.g., "A001" or "Site 42"
    site_type: Optional[str] = None  # STANDARD, GROUP, etc.
    max_people: Optional[int] = None
    min_people: Optional[int] = None
    loop: Optional[str] = None

    @property
    def url(self) -> str:
        return WebPages.campsite(self.id)


class AvailabilityReport(BaseModel):
    """Campground metadata together with its aggregated availability"""
    query: AvailabilityQuery
    campground: Campground
    availability: AggregatedAvailability
