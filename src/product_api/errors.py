"""
Error taxonomy for the product catalogue client.

Construction errors are raised synchronously by ProductApi(...).
Per-call errors are raised when the endpoint coroutine is awaited.
"""

from __future__ import annotations

from typing import Optional


class ProductApiError(Exception):
    """Base class for every error raised by the client."""


class ConfigurationError(ProductApiError):
    pass


class EndpointDefinitionError(ProductApiError):
    pass


class DuplicateEndpointError(ProductApiError):
    def __init__(self, name: str) -> None:
        super().__init__(f"endpoint {name} already exists")
        self.name = name


class InvalidRequestError(ProductApiError):
    pass


class UnsupportedMethodError(ProductApiError):
    def __init__(self, method: str) -> None:
        super().__init__(f"client only supports GET methods (got {method})")
        self.method = method


class TransportError(ProductApiError):
    def __init__(self, message: str, *, url: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.url = url
        self.cause = cause
