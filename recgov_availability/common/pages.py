"""
Links to recreation.gov web pages

These always point at the public site. ``api.base_url`` only redirects the
JSON API calls; a mirror or local stub of the API has no web pages to link to.
"""

WEB_BASE_URL = "https://www.recreation.gov"


class WebPages:
    """recreation.gov pages linked from the output"""

    @staticmethod
    def campground(campground_id: str) -> str:
        return f"{WEB_BASE_URL}/camping/campgrounds/{campground_id}"

    @staticmethod
    def campsite(campsite_id: str) -> str:
        return f"{WEB_BASE_URL}/camping/campsites/{campsite_id}"

    @staticmethod
    def availability(campground_id: str) -> str:
        return f"{WEB_BASE_URL}/camping/campgrounds/{campground_id}/availability"
