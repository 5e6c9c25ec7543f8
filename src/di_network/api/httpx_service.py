"""
httpx Backend

ApiService implementation over an ``httpx.Client``.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

import httpx

from ..config import config
from .errors import DecodeError, ResponseValidationError, TransportError
from .service import BaseApiService, Parameters


logger = logging.getLogger(__name__)


class HttpxApiService(BaseApiService):
    """
    ApiService backed by httpx.

    The client is created per instance unless one is injected, which is
    how tests substitute a mock transport.
    """

    name = "httpx"

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
        executor: Optional[ThreadPoolExecutor] = None,
        validate_status: Optional[bool] = None
    ):
        super().__init__(executor=executor, validate_status=validate_status)
        self._owns_client = client is None
        self.client = client or httpx.Client(
            timeout=timeout or config.api.timeout_seconds,
            headers={"User-Agent": config.api.user_agent, "Accept": "application/json"},
            follow_redirects=True
        )
        logger.info(f"HttpxApiService initialized (validate_status: {self.validate_status})")

    def close(self) -> None:
        super().close()
        if self._owns_client:
            self.client.close()

    def _perform(
        self,
        method: str,
        url: str,
        params: Parameters = None,
        json: Any = None,
        parse_body: bool = False
    ) -> Any:
        try:
            response = self.client.request(
                method, url, params=dict(params) if params else None, json=json
            )
            if self.validate_status:
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ResponseValidationError(
                str(e), url=url, status_code=e.response.status_code
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
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
