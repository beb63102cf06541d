"""
Decoding and validation of Recreation.gov JSON responses

Each decoder checks for the top-level key its endpoint is expected to
return and raises MalformedResponseError instead of letting a missing
field surface later as a KeyError.
"""
import json
import logging
from typing import Any, Dict, Optional

import httpx
from pydantic import ValidationError

from .errors import MalformedResponseError, NotFoundError
from ..common.models import Campground, Campsite, MonthlyAvailability

logger = logging.getLogger(__name__)


def decode_json(response: httpx.Response) -> Dict[str, Any]:
    """Decode a response body that must be a JSON object"""
    try:
        data = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise MalformedResponseError(
            f"Invalid JSON from {response.request.url}: {e}",
            response.status_code,
            response.text
        ) from e

    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected a JSON object from {response.request.url}, got {type(data).__name__}",
            response.status_code,
            response.text
        )
    return data


def _require(data: Dict[str, Any], key: str, response: httpx.Response) -> Any:
    if key not in data:
        raise MalformedResponseError(
            f"Response from {response.request.url} is missing '{key}'",
            response.status_code,
            response.text
        )
    return data[key]


def decode_month_availability(response: httpx.Response) -> MonthlyAvailability:
    """Decode a monthly campground availability response"""
    data = decode_json(response)
    campsites = _require(data, "campsites", response)
    if not isinstance(campsites, dict):
        raise MalformedResponseError(
            "'campsites' must be an object",
            response.status_code,
            response.text
        )

    try:
        return MonthlyAvailability(campsites=campsites)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Invalid campsite availability data: {e}",
            response.status_code,
            response.text
        ) from e


def decode_campground(response: httpx.Response, campground_id: str) -> Campground:
    """
    Decode a campground details response.

    An absent, null or empty ``campground`` object means the provider has no
    such campground and raises NotFoundError.
    """
    data = decode_json(response)
    campground = data.get("campground")
    if not campground:
        raise NotFoundError(f"Campground {campground_id} not found", response.status_code)
    if not isinstance(campground, dict):
        raise MalformedResponseError(
            "'campground' must be an object",
            response.status_code,
            response.text
        )

    try:
        return Campground(
            id=str(campground.get("facility_id") or campground_id),
            name=campground.get("facility_name") or f"Campground {campground_id}",
            parent_name=campground.get("parent_asset_name"),
            latitude=_as_float(campground.get("facility_latitude")),
            longitude=_as_float(campground.get("facility_longitude")),
        )
    except ValidationError as e:
        raise MalformedResponseError(
            f"Invalid campground data: {e}",
            response.status_code,
            response.text
        ) from e


def decode_campsite(response: httpx.Response, campsite_id: str) -> Campsite:
    """Decode a campsite details response"""
    data = decode_json(response)
    campsite = _require(data, "campsite", response)
    if not isinstance(campsite, dict):
        raise MalformedResponseError(
            "'campsite' must be an object",
            response.status_code,
            response.text
        )

    campground_id = campsite.get("parent_asset_id") or campsite.get("campground_id")
    try:
        return Campsite(
            id=str(campsite.get("campsite_id") or campsite_id),
            campground_id=str(campground_id) if campground_id else None,
            name=campsite.get("campsite_name") or campsite.get("site") or campsite_id,
            site_type=campsite.get("campsite_type") or campsite.get("type"),
            max_people=campsite.get("max_num_people"),
            min_people=campsite.get("min_num_people"),
            loop=campsite.get("loop"),
        )
    except ValidationError as e:
        raise MalformedResponseError(
            f"Invalid campsite data: {e}",
            response.status_code,
            response.text
        ) from e


def _as_float(value) -> Optional[float]:
    try:
        return float(value) if value is not None else None
    except (TypeError, ValueError):
        logger.debug(f"Ignoring non-numeric coordinate {value!r}")
        return None
