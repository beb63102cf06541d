"""
Recreation.gov Availability Client

Fetches monthly campground availability concurrently and aggregates it
into a single per-campsite map. Also exposes the campground and campsite
metadata lookups.
"""
import asyncio
import logging
from typing import Optional, List, Iterable

import httpx

from .endpoints import Endpoints, DEFAULT_HEADERS
from .errors import HttpStatusError, NetworkError, NotFoundError
from .decode import decode_month_availability, decode_campground, decode_campsite
from ..common.aggregation import aggregate
from ..common.config import Config
from ..common.models import (
    AggregatedAvailability,
    AvailabilityQuery,
    AvailabilityReport,
    Campground,
    Campsite,
    MonthSpec,
    MonthlyAvailability,
)

logger = logging.getLogger(__name__)


class RecGovAvailabilityClient:
    """
    Async client for the public Recreation.gov availability endpoints.

    Use as an async context manager so the underlying connection pool
    is closed when done.
    """

    def __init__(self, config: Optional[Config] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config or Config()
        self.endpoints = Endpoints(base_url=self.config.api.base_url)
        self.client = httpx.AsyncClient(
            headers={**DEFAULT_HEADERS, **self.config.api.headers},
            timeout=self.config.api.timeout,
            follow_redirects=True,
            transport=transport
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.client.aclose()

    async def _get(self, url: str, params: Optional[dict] = None) -> httpx.Response:
        """GET a URL, mapping transport failures and non-2xx statuses to APIError"""
        try:
            response = await self.client.get(url, params=params)
        except httpx.RequestError as e:
            raise NetworkError(f"Request to {url} failed: {e}") from e

        if not response.is_success:
            raise HttpStatusError(
                f"GET {url} returned {response.status_code}",
                response.status_code,
                response.text
            )
        return response

    # ========================================
    # Metadata
    # ========================================

    async def fetch_campground(self, campground_id: str) -> Campground:
        """Get campground metadata, raising NotFoundError for unknown ids"""
        url = self.endpoints.campground_details(campground_id)
        try:
            response = await self._get(url)
        except HttpStatusError as e:
            if e.status_code == 404:
                raise NotFoundError(f"Campground {campground_id} not found", 404, e.response_body) from e
            raise

        campground = decode_campground(response, campground_id)
        logger.info(f"Campground {campground.id}: {campground.name}")
        return campground

    async def fetch_campsite(self, campsite_id: str) -> Campsite:
        """Get metadata for a single campsite"""
        response = await self._get(self.endpoints.campsite_details(campsite_id))
        return decode_campsite(response, campsite_id)

    async def fetch_campsites(self, campsite_ids: Iterable[str]) -> List[Campsite]:
        """
        Get metadata for several campsites concurrently.

        Fails as a whole if any single lookup fails.
        """
        campsite_ids = list(campsite_ids)
        logger.info(f"Fetching metadata for {len(campsite_ids)} campsites")
        return list(await asyncio.gather(
            *[self.fetch_campsite(cid) for cid in campsite_ids]
        ))

    # ========================================
    # Availability
    # ========================================

    async def fetch_month(self, campground_id: str, month: MonthSpec) -> MonthlyAvailability:
        """
        Get availability for all campsites in a campground for one month.

        Args:
            campground_id: Campground ID (e.g., "232447")
            month: Calendar month to check

        Returns:
            Decoded monthly availability keyed by campsite id
        """
        url = self.endpoints.campground_availability(campground_id)
        logger.debug(f"Fetching {month.year}-{month.month:02d} for campground {campground_id}")
        response = await self._get(url, params={"start_date": month.start_date})
        monthly = decode_month_availability(response)
        logger.debug(
            f"{month.year}-{month.month:02d}: {len(monthly.campsites)} campsites"
        )
        return monthly

    async def fetch_query(self, query: AvailabilityQuery) -> AggregatedAvailability:
        """
        Fetch every month of a query concurrently and aggregate the results.

        All requests must succeed; the first failure propagates and no
        partial aggregate is returned.
        """
        months = query.month_specs
        logger.info(
            f"Fetching availability for campground {query.campground_id}: "
            f"{len(months)} month(s) of {query.year}"
        )

        monthly = await asyncio.gather(
            *[self.fetch_month(query.campground_id, m) for m in months]
        )

        availability = aggregate(monthly)
        logger.info(f"Aggregated availability for {len(availability.campsites)} campsites")
        return availability

    async def fetch_availability(
        self,
        campground_id: str,
        year: int,
        months: Iterable[int]
    ) -> AggregatedAvailability:
        """Validate the inputs and fetch aggregated availability"""
        query = AvailabilityQuery(campground_id=campground_id, year=year, months=months)
        return await self.fetch_query(query)

    async def check_availability(self, query: AvailabilityQuery) -> AvailabilityReport:
        """
        Fetch campground metadata and all requested months concurrently.

        Raises NotFoundError for an unknown campground and any other
        APIError if one of the availability requests fails.
        """
        campground, availability = await asyncio.gather(
            self.fetch_campground(query.campground_id),
            self.fetch_query(query)
        )
        return AvailabilityReport(
            query=query,
            campground=campground,
            availability=availability
        )
