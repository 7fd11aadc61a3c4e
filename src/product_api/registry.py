"""
Endpoint registry.

Maps endpoint names to callables bound to one EndpointDefinition. Names form a flat,
case-sensitive namespace: once registered, a name is only replaced when the caller
asks for it explicitly (override=True).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Iterator, List, Mapping, Optional, Union

from src.product_api.contracts.endpoints import EndpointDefinition
from src.product_api.errors import DuplicateEndpointError, EndpointDefinitionError

logger = logging.getLogger(__name__)

Dispatch = Callable[[EndpointDefinition, Any, Optional[Mapping[str, Any]]], Awaitable[Any]]


@dataclass(frozen=True)
class Endpoint:
    name: str
    definition: EndpointDefinition
    dispatch: Dispatch

    async def __call__(self, request: Any = None, options: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.dispatch(self.definition, request, options)

    def __repr__(self) -> str:
        return f"<Endpoint {self.name} {self.definition.method} {self.definition.tpl}>"


def make_endpoint(name: str, definition: EndpointDefinition, dispatch: Dispatch) -> Endpoint:
    return Endpoint(name=name, definition=definition, dispatch=dispatch)


class EndpointRegistry:
    def __init__(self, dispatch: Dispatch) -> None:
        self._dispatch = dispatch
        self._endpoints: Dict[str, Endpoint] = {}

    def register(
        self,
        name: str,
        definition: Union[EndpointDefinition, Mapping[str, Any]],
        override: bool = False,
    ) -> bool:
        if not name or not isinstance(name, str):
            raise EndpointDefinitionError("endpoint needs a name")
        endpoint_def = EndpointDefinition.coerce(definition)

        if name in self._endpoints and not override:
            raise DuplicateEndpointError(name)

        self._endpoints[name] = make_endpoint(name, endpoint_def, self._dispatch)
        logger.debug("Registered endpoint %s -> %s %s", name, endpoint_def.method, endpoint_def.tpl)
        return True

    def get(self, name: str) -> Endpoint:
        return self._endpoints[name]

    def names(self) -> List[str]:
        return list(self._endpoints)

    def __contains__(self, name: object) -> bool:
        return name in self._endpoints

    def __iter__(self) -> Iterator[str]:
        return iter(self._endpoints)

    def __len__(self) -> int:
        return len(self._endpoints)
