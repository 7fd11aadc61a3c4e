from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from src.product_api.errors import EndpointDefinitionError


@dataclass(frozen=True)
class EndpointDefinition:
    """A templated remote operation: path template, default options and HTTP verb."""

    tpl: str
    opt: Mapping[str, Any] = field(default_factory=dict)
    method: str = "GET"

    def __post_init__(self) -> None:
        if not self.tpl or not isinstance(self.tpl, str):
            raise EndpointDefinitionError("endpoint needs a template")
        # defaults are shared by every call, so freeze a private copy
        object.__setattr__(self, "opt", MappingProxyType(dict(self.opt or {})))
        object.__setattr__(self, "method", (self.method or "GET").upper())

    @classmethod
    def coerce(cls, definition: Any) -> "EndpointDefinition":
        if isinstance(definition, cls):
            return definition
        if not isinstance(definition, Mapping):
            raise EndpointDefinitionError("endpoint needs a template")
        return cls(
            tpl=definition.get("tpl"),
            opt=definition.get("opt") or {},
            method=definition.get("method") or "GET",
        )
