"""
Recreation.gov availability API module
"""
from .client import RecGovAvailabilityClient
from .errors import APIError, NetworkError, HttpStatusError, MalformedResponseError, NotFoundError
from .endpoints import Endpoints, DEFAULT_HEADERS

__all__ = [
    "RecGovAvailabilityClient",
    "APIError",
    "NetworkError",
    "HttpStatusError",
    "MalformedResponseError",
    "NotFoundError",
    "Endpoints",
    "DEFAULT_HEADERS",
]
