import json

import httpx
import pytest

from recgov_availability.common.config import Config, QueryConfig
from recgov_availability.common.models import AvailabilityQuery, MonthlyAvailability
from tests.payloads import JULY_2020, AUGUST_2020


@pytest.fixture()
def config():
    return Config(
        query=QueryConfig(campground_id="232487", year=2020, months=[7, 8]),
    )

@pytest.fixture()
def query():
    return AvailabilityQuery(campground_id="232487", year=2020, months={7, 8})

@pytest.fixture()
def july():
    return MonthlyAvailability(**JULY_2020)

@pytest.fixture()
def august():
    return MonthlyAvailability(**AUGUST_2020)

@pytest.fixture()
def recgov_routes():
    """
    Map of "path?start_date" or "path" to (status, body) used by the mock transport.

    Tests add entries; unmatched requests get a 404.
    """
    return {}

@pytest.fixture()
def transport(recgov_routes):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        start_date = request.url.params.get("start_date")
        key = f"{request.url.path}?{start_date}" if start_date else request.url.path
        if key not in recgov_routes:
            return httpx.Response(404, json={"error": "not found"})
        status, body = recgov_routes[key]
        if isinstance(body, (dict, list)):
            return httpx.Response(status, content=json.dumps(body).encode(),
                                  headers={"Content-Type": "application/json"})
        return httpx.Response(status, content=body)

    mock = httpx.MockTransport(handler)
    mock.requests = requests
    return mock
