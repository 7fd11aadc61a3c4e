"""
HTTP transports for the product catalogue client.

- HttpTransport: httpx client that can talk cross-origin (server side, modern clients)
- LegacyTransport: GET-only transport with a hand-built query string, used client-side
  when cross-origin requests are not available

select_transport() picks one of them once, from configuration. TransportAdapter wraps
the chosen transport with the method policy and the single same-origin retry.
"""

from .transports import (
    HttpTransport,
    LegacyTransport,
    Transport,
    TransportAdapter,
    build_legacy_query,
    check_query_params,
    select_transport,
    strip_host,
)

__all__ = [
    "HttpTransport",
    "LegacyTransport",
    "Transport",
    "TransportAdapter",
    "build_legacy_query",
    "check_query_params",
    "select_transport",
    "strip_host",
]
