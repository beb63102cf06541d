"""
Recreation.gov API Endpoints

⚠️ WARNING: These endpoints are undocumented and may change without notice.

These were discovered by inspecting network traffic in browser DevTools.
"""
from dataclasses import dataclass


BASE_URL = "https://www.recreation.gov"
API_BASE = f"{BASE_URL}/api"


@dataclass
class Endpoints:
    """
    Public (no auth required) Recreation.gov endpoints used for availability.

    ``base_url`` can point at a mirror or a test server.
    """
    base_url: str = BASE_URL

    @property
    def api_base(self) -> str:
        return f"{self.base_url.rstrip('/')}/api"

    def campground_details(self, campground_id: str) -> str:
        """
        Get campground details.

        GET /api/camps/campgrounds/{id}
        """
        return f"{self.api_base}/camps/campgrounds/{campground_id}"

    def campsite_details(self, campsite_id: str) -> str:
        """
        Get individual campsite details.

        GET /api/camps/campsites/{id}
        """
        return f"{self.api_base}/camps/campsites/{campsite_id}"

    def campground_availability(self, campground_id: str) -> str:
        """
        Get availability for all campsites in a campground for a month.

        GET /api/camps/availability/campground/{id}/month?start_date={ISO_DATE}

        The start_date query parameter is passed separately and should be the
        first of the month, e.g., "2025-08-01T00:00:00.000Z".
        Response includes availability status for each campsite for each day.
        """
        return f"{self.api_base}/camps/availability/campground/{campground_id}/month"


# Common request headers to mimic browser
DEFAULT_HEADERS = {
    "Accept": "application/json, text/plain, */*",
    "Accept-Language": "en-US,en;q=0.9",
    "Origin": "https://www.recreation.gov",
    "Referer": "https://www.recreation.gov/",
    "Sec-Fetch-Dest": "empty",
    "Sec-Fetch-Mode": "cors",
    "Sec-Fetch-Site": "same-origin",
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
}


# Known response structures
#
# Monthly availability:
# {
#     "campsites": {
#         "12345": {  # campsite_id
#             "availabilities": {
#                 "2025-08-15T00:00:00Z": "Available",
#                 "2025-08-16T00:00:00Z": "Reserved",
#                 ...
#             },
#             "campsite_id": "12345",
#             "campsite_type": "STANDARD",
#             "loop": "A",
#             "max_num_people": 6,
#             "min_num_people": 1,
#             "site": "A001",
#             ...
#         },
#         ...
#     }
# }
#
# Campground details: {"campground": {"facility_id": ..., "facility_name": ..., ...}}
# Campsite details:   {"campsite": {"campsite_id": ..., "site": ..., "loop": ..., ...}}
