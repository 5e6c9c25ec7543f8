"""
requests Backend

ApiService implementation over a ``requests.Session``. Interchangeable
with the httpx backend; the composition root decides which one is used.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

import requests

from ..config import config
from .errors import DecodeError, ResponseValidationError, TransportError
from .service import BaseApiService, Parameters


logger = logging.getLogger(__name__)


class RequestsApiService(BaseApiService):
    """ApiService backed by requests."""

    name = "requests"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        validate_status: Optional[bool] = None
    ):
        super().__init__(executor=executor, validate_status=validate_status)
        self.timeout = timeout or config.api.timeout_seconds
        self._owns_session = session is None
        if session is None:
            session = requests.Session()
            session.headers.update({
                "User-Agent": config.api.user_agent,
                "Accept": "application/json",
            })
        self.session = session
        logger.info(f"RequestsApiService initialized (timeout: {self.timeout}s)")

    def close(self) -> None:
        super().close()
        if self._owns_session:
            self.session.close()

    def _perform(
        self,
        method: str,
        url: str,
        params: Parameters = None,
        json: Any = None,
        parse_body: bool = False
    ) -> Any:
        try:
            response = self.session.request(
                method,
                url,
                params=dict(params) if params else None,
                json=json,
                timeout=self.timeout
            )
            if self.validate_status:
                response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise ResponseValidationError(str(e), url=url, status_code=status_code) from e
        except requests.RequestException as e:
            raise TransportError(f"{type(e).__name__}: {e}", url=url) from e

        logger.debug(f"{method} {url} -> {response.status_code}")

        if not parse_body:
            return None
        try:
            return response.json()
        except (ValueError, RecursionError) as e:
            raise DecodeError(
                f"Response is not valid JSON: {e}",
                url=url,
                status_code=response.status_code
            ) from e
