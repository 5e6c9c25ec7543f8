"""
ApiService Module

Capability interface shared by every HTTP backend, plus the base class
that runs requests on a worker pool and reports each outcome through a
single completion call.
"""

import logging
from abc import ABC, abstractmethod
from concurrent.futures import Future, ThreadPoolExecutor
from typing import (
    Any, Callable, Mapping, Optional, Protocol, runtime_checkable
)

from ..config import config
from .decoding import decode
from .errors import ApiError
from .result import Completion, Failure, Result, Success


logger = logging.getLogger(__name__)

Parameters = Optional[Mapping[str, Any]]


@runtime_checkable
class ApiService(Protocol):
    """
    Generic CRUD contract over an HTTP endpoint.

    Every operation is asynchronous: it returns immediately and calls
    ``completion`` exactly once with a Success or a Failure.
    """

    def get(
        self,
        endpoint: str,
        response_type: Any,
        completion: Completion,
        parameters: Parameters = None
    ) -> Future:
        """Fetch ``endpoint`` and decode the body into ``response_type``."""
        ...

    def create(self, endpoint: str, payload: Any, completion: Completion) -> Future:
        """POST ``payload`` as JSON."""
        ...

    def update(self, endpoint: str, payload: Any, completion: Completion) -> Future:
        """PUT ``payload`` as JSON."""
        ...

    def delete(self, endpoint: str, completion: Completion) -> Future:
        """DELETE ``endpoint``."""
        ...


class BaseApiService(ABC):
    """
    Shared machinery for ApiService backends.

    Features:
    - Worker pool owned per instance (no global client)
    - Exactly one completion call per operation
    - Uniform decode step for every backend

    Subclasses only implement ``_perform``.
    """

    name = "base"

    def __init__(
        self,
        executor: Optional[ThreadPoolExecutor] = None,
        validate_status: Optional[bool] = None
    ):
        self.validate_status = (
            config.api.validate_status if validate_status is None else validate_status
        )
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=config.api.max_workers,
            thread_name_prefix=f"{self.name}-api"
        )

    def get(
        self,
        endpoint: str,
        response_type: Any,
        completion: Completion,
        parameters: Parameters = None
    ) -> Future:
        def operation() -> Any:
            body = self._perform("GET", endpoint, params=parameters, parse_body=True)
            return decode(body, response_type, url=endpoint)

        return self._submit("GET", endpoint, operation, completion)

    def create(self, endpoint: str, payload: Any, completion: Completion) -> Future:
        def operation() -> None:
            self._perform("POST", endpoint, json=_encode(payload))

        return self._submit("POST", endpoint, operation, completion)

    def update(self, endpoint: str, payload: Any, completion: Completion) -> Future:
        def operation() -> None:
            self._perform("PUT", endpoint, json=_encode(payload))

        return self._submit("PUT", endpoint, operation, completion)

    def delete(self, endpoint: str, completion: Completion) -> Future:
        def operation() -> None:
            self._perform("DELETE", endpoint)

        return self._submit("DELETE", endpoint, operation, completion)

    def close(self) -> None:
        """Release the worker pool and any backend resources."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @abstractmethod
    def _perform(
        self,
        method: str,
        url: str,
        params: Parameters = None,
        json: Any = None,
        parse_body: bool = False
    ) -> Any:
        """
        Execute one HTTP request synchronously.

        Returns:
            The parsed JSON body when ``parse_body`` is set, else None.

        Raises:
            ApiError: For transport, validation and body parsing failures.
        """

    def _submit(
        self,
        method: str,
        url: str,
        operation: Callable[[], Any],
        completion: Completion
    ) -> Future:
        logger.info(f"{method} {url} via {self.name}")

        def task() -> Result:
            try:
                result: Result = Success(operation())
            except ApiError as e:
                logger.warning(f"{method} {url} failed: {e}")
                result = Failure(e)
            completion(result)
            return result

        return self._executor.submit(task)


def _encode(payload: Any) -> Any:
    to_dict = getattr(payload, "to_dict", None)
    return to_dict() if to_dict is not None else payload
