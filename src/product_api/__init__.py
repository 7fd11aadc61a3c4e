"""
Product catalogue API client.

A configurable async client for the product catalogue service: products, brands,
categories, facets, rules and suggestions. See client.ProductApi.
"""

from .catalog import CATALOG_ENDPOINTS
from .client import ProductApi, endpoint_names
from .contracts import EndpointDefinition, ProductApiConfig, ProductApiSettings
from .errors import (
    ConfigurationError,
    DuplicateEndpointError,
    EndpointDefinitionError,
    InvalidRequestError,
    ProductApiError,
    TransportError,
    UnsupportedMethodError,
)

__all__ = [
    "CATALOG_ENDPOINTS",
    "ProductApi",
    "endpoint_names",
    # contracts
    "EndpointDefinition", "ProductApiConfig", "ProductApiSettings",
    # errors
    "ConfigurationError", "DuplicateEndpointError", "EndpointDefinitionError",
    "InvalidRequestError", "ProductApiError", "TransportError", "UnsupportedMethodError",
]
