from __future__ import annotations
from typing import List, Optional


class LumaAPIError(Exception):
    """Base class for every failure raised while sending a request."""


class InvalidURLError(LumaAPIError):
    """The request URL could not be built from the base URL and path."""

    def __init__(self, url: Optional[str] = None):
        super().__init__('Invalid URL')
        self.url = url


class NetworkError(LumaAPIError):
    """Transport failure reaching the API or reading its response."""

    def __init__(self, cause: BaseException):
        super().__init__(f'Network error: {cause}')
        self.cause = cause


class RequestFailedError(LumaAPIError):
    """HTTP status outside 2xx (401/403/404/429/5xx alike)."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        desc = f'API error ({status_code})'
        if message is not None:
            desc += f': {message}'
        super().__init__(desc)
        self.status_code = status_code
        self.message = message


class DecodingFailedError(LumaAPIError):
    """Body matched neither the enveloped nor the bare response type."""

    def __init__(self, cause: BaseException, attempts: Optional[List[BaseException]] = None):
        super().__init__(f'Decoding error: {cause}')
        self.cause = cause
        # one error per decode attempt, in the order tried
        self.attempts = list(attempts) if attempts else [cause]


class ConfigurationError(Exception):
    """Missing or invalid client configuration (raised before any request)."""
