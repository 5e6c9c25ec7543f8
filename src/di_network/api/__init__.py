"""
API Module

Generic ApiService contract and its two interchangeable backends.
"""

from .errors import ApiError, DecodeError, ResponseValidationError, TransportError
from .result import Completion, Failure, Result, Success
from .service import ApiService, BaseApiService
from .httpx_service import HttpxApiService
from .requests_service import RequestsApiService

__all__ = [
    "ApiService",
    "BaseApiService",
    "HttpxApiService",
    "RequestsApiService",
    "ApiError",
    "TransportError",
    "ResponseValidationError",
    "DecodeError",
    "Success",
    "Failure",
    "Result",
    "Completion",
]
