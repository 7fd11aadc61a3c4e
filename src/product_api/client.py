"""
ProductApi: client facade for the product catalogue service.

Usage:
    api = ProductApi({"host": "api.backcountry.com", "site": "bcs"})
    body = await api.findProducts({"productId": "TNF0123"}, {"fields": "id,title,brand"})

Every call resolves to the raw response body. Errors from a call are raised when it is
awaited; only construction errors are raised synchronously.

Exposure:
- debug=True: `helpers` and `set_endpoint` are available for testing and extension
- debug=False: the instance exposes only the endpoint callables
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

import httpx
from pydantic import ValidationError

from src.product_api.catalog import CATALOG_ENDPOINTS
from src.product_api.clients.transports import TransportAdapter, select_transport
from src.product_api.contracts.config import ProductApiConfig, ProductApiSettings
from src.product_api.contracts.endpoints import EndpointDefinition
from src.product_api.errors import (
    ConfigurationError,
    DuplicateEndpointError,
    EndpointDefinitionError,
    InvalidRequestError,
)
from src.product_api.policy.options import merge_options
from src.product_api.policy.templates import render
from src.product_api.registry import EndpointRegistry

logger = logging.getLogger(__name__)

MODULE_NAME = "[ProductApi]"

# attributes set in debug mode; endpoints may not take these names
_RESERVED_NAMES = frozenset({"helpers", "set_endpoint"})


def _validate_settings(settings: Any) -> ProductApiSettings:
    if isinstance(settings, ProductApiSettings):
        return settings
    if not isinstance(settings, Mapping):
        raise ConfigurationError(f"{MODULE_NAME} must be initialized with a settings object")
    if not settings.get("host") or not settings.get("site"):
        raise ConfigurationError(f"{MODULE_NAME} missing required properties for host and/or site")
    try:
        return ProductApiSettings.model_validate(dict(settings))
    except ValidationError as exc:
        raise ConfigurationError(f"{MODULE_NAME} invalid settings: {exc}") from exc


class Helpers:
    """Request pipeline used by every endpoint: options -> url -> transport."""

    def __init__(self, config: ProductApiConfig, adapter: TransportAdapter) -> None:
        self._config = config
        self._adapter = adapter

    def template(self, template: str, data: Mapping[str, Any]) -> str:
        return render(template, data)

    def build_options(self, defaults: Optional[Mapping[str, Any]], options: Any) -> Dict[str, Any]:
        return merge_options(defaults, options, site=self._config.site, preview=self._config.preview)

    def get_config(self) -> ProductApiConfig:
        """Snapshot of the current configuration; writes to it do not affect the client."""
        return self._config.model_copy()

    async def process_request(
        self,
        endpoint: Union[EndpointDefinition, Mapping[str, Any]],
        request: Any,
        options: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        definition = EndpointDefinition.coerce(endpoint)
        if not isinstance(request, Mapping):
            raise InvalidRequestError(f"{MODULE_NAME} request for {definition.tpl} must be a mapping")

        config = self._config
        params = self.build_options(definition.opt, options)
        url = f"//{config.host}/v{config.version}{self.template(definition.tpl, request)}"
        return await self.api_call(definition.method, url, params)

    async def api_call(self, method: str, url: str, params: Dict[str, Any]) -> Any:
        return await self._adapter.send(method, url, params)

    def _assign(self, field: str, value: Any) -> None:
        try:
            setattr(self._config, field, value)
        except ValidationError as exc:
            raise ConfigurationError(f"{MODULE_NAME} invalid value for {field}: {value!r}") from exc

    def set_debug(self, value: bool) -> None:
        self._assign("debug", value)

    def set_host(self, value: str) -> None:
        self._assign("host", value)

    def set_preview(self, value: bool) -> None:
        self._assign("preview", value)


class ProductApi:
    def __init__(
        self,
        settings: Union[Mapping[str, Any], ProductApiSettings, None] = None,
        *,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        validated = _validate_settings(settings)
        config = ProductApiConfig.from_settings(validated)

        self._config = config
        self._adapter = TransportAdapter(config, select_transport(config, http_transport))
        self._helpers = Helpers(config, self._adapter)
        self._registry = EndpointRegistry(self._dispatch)

        for name, definition in CATALOG_ENDPOINTS.items():
            self._set_endpoint(name, definition)

        logger.debug(
            "%s ready: host=%s site=%s transport=%s endpoints=%d",
            MODULE_NAME,
            config.host,
            config.site,
            self._adapter.transport.name,
            len(self._registry),
        )

        if config.debug:
            self.helpers = self._helpers
            self.set_endpoint = self._set_endpoint

    async def _dispatch(
        self,
        definition: EndpointDefinition,
        request: Any,
        options: Optional[Mapping[str, Any]],
    ) -> Any:
        # looked up per call so a patched helpers.process_request is honoured
        return await self._helpers.process_request(definition, request, options)

    def _set_endpoint(
        self,
        name: str,
        endpoint: Union[EndpointDefinition, Mapping[str, Any]],
        override: bool = False,
    ) -> bool:
        if isinstance(name, str) and name.startswith("_"):
            raise EndpointDefinitionError(f"{MODULE_NAME} endpoint names cannot start with an underscore")
        if name in _RESERVED_NAMES:
            raise DuplicateEndpointError(name)

        self._registry.register(name, endpoint, override)
        setattr(self, name, self._registry.get(name))
        return True


def endpoint_names(api: ProductApi) -> List[str]:
    """Names of the endpoint callables installed on api."""
    return api._registry.names()
