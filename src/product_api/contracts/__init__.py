"""
Contracts (data models).

Defines the shapes shared by the registry, the transports and the facade:
- ProductApiSettings / ProductApiConfig: client configuration
- EndpointDefinition: a templated remote operation

Both the fixed catalogue and endpoints registered at runtime use these contracts.
"""

from .config import ProductApiConfig, ProductApiSettings
from .endpoints import EndpointDefinition

__all__ = ["EndpointDefinition", "ProductApiConfig", "ProductApiSettings"]
