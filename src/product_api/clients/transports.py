"""
Transport layer.

Implementation notes:
- Uses httpx for async requests; one AsyncClient per attempt, nothing is pooled or cached
- A transport performs exactly one attempt; retries are decided by TransportAdapter
- HTTP status errors (4xx/5xx) are treated as failed attempts
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Protocol, Tuple
from urllib.parse import quote

import httpx

from src.product_api.contracts.config import ProductApiConfig
from src.product_api.errors import InvalidRequestError, TransportError, UnsupportedMethodError
from src.product_api.policy.templates import to_param_str

logger = logging.getLogger(__name__)

# characters encodeURIComponent leaves alone, on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"

_ATTEMPT_ERRORS: Tuple[type, ...] = (httpx.HTTPError, httpx.InvalidURL)

_QUERY_PRIMITIVES = (str, int, float, bool, type(None))


class Transport(Protocol):
    name: str

    async def request(self, method: str, url: str, params: Dict[str, Any]) -> Any:
        ...


def check_query_params(params: Dict[str, Any]) -> None:
    """Query strings carry primitives or flat lists of primitives only."""
    for key, value in params.items():
        items = value if isinstance(value, (list, tuple)) else [value]
        if not all(isinstance(item, _QUERY_PRIMITIVES) for item in items):
            raise InvalidRequestError(f"option {key} cannot be sent as a query parameter: {value!r}")


def _parse_body(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


def strip_host(url: str, host: str) -> str:
    """'//api.example.com/v1/brands' -> '/v1/brands'"""
    prefix = f"//{host}"
    if url.startswith(prefix):
        return url[len(prefix):] or "/"
    return url.replace(host, "", 1)


def build_legacy_query(url: str, params: Dict[str, Any]) -> str:
    """
    Append params the way the legacy cross-domain transport always has:
    key + '+' + encoded value, pairs concatenated without a separator.

    The deployed service expects this exact form, so it is kept as-is.
    """
    operator = "&" if "?" in url else "?"
    param_string = "".join(
        f"{key}+{quote(to_param_str(value), safe=_URI_COMPONENT_SAFE)}" for key, value in params.items()
    )
    return f"{url}{operator}{param_string}"


class _BaseHttpxTransport:
    name = "base"

    def __init__(self, config: ProductApiConfig, http_transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
        self._config = config
        self._http_transport = http_transport

    def _absolute_url(self, url: str) -> str:
        if url.startswith("//"):
            return f"{self._config.scheme}:{url}"
        if url.startswith("/"):
            if not self._config.origin:
                raise httpx.UnsupportedProtocol(f"No origin configured for same-origin request {url}")
            return f"{self._config.origin.rstrip('/')}{url}"
        return url

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._config.timeout_seconds,
            transport=self._http_transport,
            headers={"Accept": "application/json"},
        )


class HttpTransport(_BaseHttpxTransport):
    name = "http"

    async def request(self, method: str, url: str, params: Dict[str, Any]) -> Any:
        target = self._absolute_url(url)
        async with self._client() as client:
            if method == "GET":
                # merged explicitly: templates such as "/products?q={{query}}" already carry a query
                response = await client.request(method, httpx.URL(target).copy_merge_params(params))
            else:
                response = await client.request(method, target, json=params)
            response.raise_for_status()
            return _parse_body(response)


class LegacyTransport(_BaseHttpxTransport):
    name = "legacy"

    async def request(self, method: str, url: str, params: Dict[str, Any]) -> Any:
        target = self._absolute_url(build_legacy_query(url, params))
        async with self._client() as client:
            response = await client.get(target)
            response.raise_for_status()
            return _parse_body(response)


def select_transport(
    config: ProductApiConfig,
    http_transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Transport:
    if not config.is_server and not config.cross_origin:
        return LegacyTransport(config, http_transport)
    return HttpTransport(config, http_transport)


class TransportAdapter:
    """Method policy plus the single same-origin retry around one Transport."""

    def __init__(self, config: ProductApiConfig, transport: Transport) -> None:
        self._config = config
        self.transport = transport

    async def send(self, method: str, url: str, params: Dict[str, Any]) -> Any:
        config = self._config
        method = (method or "GET").upper()
        host = config.host
        debug = config.debug

        if not config.is_server and method != "GET":
            if debug:
                logger.warning("client only supports GET methods, refused %s %s", method, url)
            raise UnsupportedMethodError(method)

        if method == "GET":
            check_query_params(params)

        # only client-side calls get the same-origin fallback
        can_retry = not config.is_server

        try:
            return await self._attempt(method, url, params, debug)
        except _ATTEMPT_ERRORS as exc:
            if not can_retry:
                raise TransportError(f"{method} {url} failed: {exc}", url=url, cause=exc) from exc
            first_error = exc

        fallback_url = strip_host(url, host)
        if debug:
            logger.warning("%s %s failed (%s), retrying same-origin as %s", method, url, first_error, fallback_url)

        try:
            return await self._attempt(method, fallback_url, params, debug)
        except _ATTEMPT_ERRORS as exc:
            raise TransportError(f"{method} {fallback_url} failed: {exc}", url=fallback_url, cause=exc) from exc

    async def _attempt(self, method: str, url: str, params: Dict[str, Any], debug: bool) -> Any:
        if debug:
            logger.info("[%s] %s %s params=%s", self.transport.name, method, url, params)
        return await self.transport.request(method, url, params)
