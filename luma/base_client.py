from __future__ import annotations
import logging
from typing import Any, Optional, Tuple

import requests

from .decoding import decode_entries
from .endpoints import LumaRequest
from .exceptions import NetworkError, RequestFailedError
from .rate_limit import RateLimitInfo, extract_rate_limit

logger = logging.getLogger(__name__)


class BaseClient:
    """HTTP plumbing shared by API clients: build, execute, classify, decode.

    Holds no per-call state; api key, base URL, timeout and session are fixed
    at construction, so one instance can serve concurrent callers.
    """

    def __init__(self, api_key: str, base_url: str, session: Optional[requests.Session] = None, timeout: float = 30):
        self._api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def send(self, request: LumaRequest) -> Tuple[Any, Optional[RateLimitInfo]]:
        prepared = request.build(self.base_url, self._api_key, session=self.session)
        resp = self._execute(prepared)
        self._raise_for_status(resp)
        decoded = decode_entries(resp.content, request.response_type)
        return decoded, extract_rate_limit(resp.headers)

    def _execute(self, prepared: requests.PreparedRequest) -> requests.Response:
        logger.debug('%s %s', prepared.method, prepared.url)
        settings = self.session.merge_environment_settings(prepared.url, {}, None, None, None)
        try:
            resp = self.session.send(prepared, timeout=self.timeout, **settings)
        except requests.RequestException as e:
            raise NetworkError(e) from e
        if resp.status_code is None:
            cause = requests.RequestException('Malformed response: no status code', response=resp)
            raise NetworkError(cause) from cause
        return resp

    @staticmethod
    def _raise_for_status(resp: requests.Response) -> None:
        if 200 <= resp.status_code <= 299:
            return
        # UTF-8 regardless of the charset declared in Content-Type
        message = resp.content.decode('utf-8', errors='replace') if resp.content else None
        logger.warning('API error %s for %s', resp.status_code, resp.url)
        raise RequestFailedError(resp.status_code, message)
