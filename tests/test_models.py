"""
Tests for data models (recgov_availability/common/models.py)
"""
import pytest
from datetime import date

from pydantic import ValidationError

from recgov_availability.common.pages import WebPages
from recgov_availability.common.models import (
    CampsiteAvailability,
    MonthSpec,
    AvailabilityQuery,
    CampsiteRecord,
    MonthlyAvailability,
    AggregatedAvailability,
    SiteAvailability,
    Campground,
    Campsite,
)


class TestCampsiteAvailability:
    def test_availability_values(self):
        assert CampsiteAvailability.AVAILABLE.value == "Available"
        assert CampsiteAvailability.RESERVED.value == "Reserved"
        assert CampsiteAvailability.NOT_AVAILABLE.value == "Not Available"
        assert CampsiteAvailability.WALK_UP.value == "Walk Up"
        assert CampsiteAvailability.NOT_RESERVABLE.value == "Not Reservable"
        assert CampsiteAvailability.OPEN.value == "Open"


class TestMonthSpec:
    def test_start_date(self):
        assert MonthSpec(year=2020, month=7).start_date == "2020-07-01T00:00:00.000Z"

    def test_start_date_pads_month(self):
        assert MonthSpec(year=2021, month=1).start_date == "2021-01-01T00:00:00.000Z"

    def test_first_day(self):
        assert MonthSpec(year=2020, month=12).first_day == date(2020, 12, 1)

    def test_invalid_month(self):
        with pytest.raises(ValidationError):
            MonthSpec(year=2020, month=13)

    def test_invalid_year(self):
        with pytest.raises(ValidationError):
            MonthSpec(year=20, month=1)


class TestAvailabilityQuery:
    def test_months_sorted_and_deduplicated(self):
        query = AvailabilityQuery(campground_id="232487", year=2020, months=[9, 7, 8, 7])
        assert query.months == (7, 8, 9)

    def test_accepts_set_of_months(self):
        query = AvailabilityQuery(campground_id="232487", year=2020, months={8, 7})
        assert query.months == (7, 8)

    def test_integer_campground_id(self):
        query = AvailabilityQuery(campground_id=232487, year=2020, months=[7])
        assert query.campground_id == "232487"

    def test_month_specs_in_order(self):
        query = AvailabilityQuery(campground_id="1", year=2020, months={9, 7})
        assert [m.start_date for m in query.month_specs] == [
            "2020-07-01T00:00:00.000Z",
            "2020-09-01T00:00:00.000Z",
        ]

    def test_empty_months_rejected(self):
        with pytest.raises(ValidationError):
            AvailabilityQuery(campground_id="232487", year=2020, months=[])

    def test_out_of_range_month_rejected(self):
        with pytest.raises(ValidationError):
            AvailabilityQuery(campground_id="232487", year=2020, months=[0, 7])

    def test_fractional_month_rejected(self):
        with pytest.raises(ValidationError):
            AvailabilityQuery(campground_id="232487", year=2020, months=[7.9])

    def test_integral_float_and_digit_string_months(self):
        query = AvailabilityQuery(campground_id="232487", year=2020, months=[7.0, "8"])
        assert query.months == (7, 8)

    def test_non_numeric_month_rejected(self):
        with pytest.raises(ValidationError):
            AvailabilityQuery(campground_id="232487", year=2020, months=["July"])

    def test_blank_campground_rejected(self):
        with pytest.raises(ValidationError):
            AvailabilityQuery(campground_id="  ", year=2020, months=[7])

    def test_two_digit_year_rejected(self):
        with pytest.raises(ValidationError):
            AvailabilityQuery(campground_id="232487", year=20, months=[7])

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            AvailabilityQuery(campground_id="232487", year=2020, months=[])

    def test_query_is_immutable(self):
        query = AvailabilityQuery(campground_id="232487", year=2020, months=[7])
        with pytest.raises(ValidationError):
            query.year = 2021


class TestCampsiteRecord:
    def test_extra_fields_kept(self):
        record = CampsiteRecord(site="A10", loop="A", max_num_people=6)
        dumped = record.model_dump()
        assert dumped["loop"] == "A"
        assert dumped["max_num_people"] == 6

    def test_defaults(self):
        record = CampsiteRecord()
        assert record.site is None
        assert record.availabilities == {}

    def test_available_dates_exact_match_only(self):
        record = CampsiteRecord(
            site="A10",
            availabilities={
                "2020-07-01": "Available",
                "2020-07-02": "Reserved",
                "2020-07-03": "Open",
                "2020-07-04": "available",
            },
        )
        assert record.available_dates() == {"2020-07-01"}


class TestAvailabilityContainers:
    def test_monthly_from_payload(self):
        monthly = MonthlyAvailability(campsites={"101": {"site": "A10", "availabilities": {}}})
        assert monthly.campsites["101"].site == "A10"

    def test_campsite_ids_sorted(self):
        aggregated = AggregatedAvailability(campsites={"3": {}, "1": {}, "2": {}})
        assert aggregated.campsite_ids == ["1", "2", "3"]


class TestSiteAvailability:
    def test_as_tuple(self):
        site = SiteAvailability(site="A10", dates=(date(2020, 7, 1),))
        assert site.as_tuple() == ("A10", [date(2020, 7, 1)])


class TestCampground:
    def test_campground_url_property(self):
        campground = Campground(id="232447", name="North Pines")
        assert campground.url == WebPages.campground("232447")
        assert campground.url == "https://www.recreation.gov/camping/campgrounds/232447"

    def test_optional_fields_default_none(self):
        campground = Campground(id="1", name="Test")
        assert campground.parent_name is None
        assert campground.latitude is None


class TestCampsite:
    def test_campsite_url_property(self):
        campsite = Campsite(id="99999", name="Site 42")
        assert campsite.url == WebPages.campsite("99999")
        assert campsite.url == "https://www.recreation.gov/camping/campsites/99999"

    def test_campsite_with_optional_fields(self):
        campsite = Campsite(
            id="1001",
            campground_id="12345",
            name="A001",
            site_type="STANDARD",
            max_people=6,
            min_people=1,
            loop="Loop A",
        )
        assert campsite.site_type == "STANDARD"
        assert campsite.max_people == 6
        assert campsite.loop == "Loop A"
