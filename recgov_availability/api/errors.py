"""
Errors raised by the Recreation.gov availability client
"""
from typing import Optional


class APIError(Exception):
    """Raised when an API request fails"""
    def __init__(self, message: str, status_code: Optional[int] = None, response_body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class NetworkError(APIError):
    """Request could not be completed (DNS, connection, timeout)"""
    pass


class HttpStatusError(APIError):
    """Server answered with a non-2xx status"""
    pass


class MalformedResponseError(APIError):
    """Body is not JSON or lacks an expected field"""
    pass


class NotFoundError(APIError):
    """Provider has no campground for the requested id"""
    pass
