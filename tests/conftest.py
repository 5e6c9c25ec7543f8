"""
Shared test fixtures.
"""

import sys
from concurrent.futures import Future
from pathlib import Path
from typing import Any, List, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from di_network.viewmodels import MainContext


class StubApiService:
    """
    ApiService that records calls and holds completions until a test
    resolves them, so completion order is fully controlled.
    """

    def __init__(self):
        self.calls: List[Tuple[str, str, Any]] = []
        self._pending: List[Tuple[Any, Future]] = []

    def get(self, endpoint, response_type, completion, parameters=None):
        self.calls.append(("GET", endpoint, parameters))
        return self._hold(completion)

    def create(self, endpoint, payload, completion):
        self.calls.append(("POST", endpoint, payload))
        return self._hold(completion)

    def update(self, endpoint, payload, completion):
        self.calls.append(("PUT", endpoint, payload))
        return self._hold(completion)

    def delete(self, endpoint, completion):
        self.calls.append(("DELETE", endpoint, None))
        return self._hold(completion)

    def resolve(self, index: int, result) -> None:
        """Deliver ``result`` to the completion of call number ``index``."""
        completion, future = self._pending[index]
        completion(result)
        future.set_result(result)

    def _hold(self, completion) -> Future:
        future: Future = Future()
        self._pending.append((completion, future))
        return future


@pytest.fixture
def stub_api():
    """Create a StubApiService."""
    return StubApiService()


@pytest.fixture
def main_context():
    """Create a fresh MainContext."""
    return MainContext()
