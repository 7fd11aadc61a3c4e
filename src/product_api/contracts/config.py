"""
Client configuration contracts.

ProductApiSettings is what callers hand to ProductApi(...): a dict or an instance
of this model. Keys may use the service's camelCase names (isServer) or snake_case.
Validation is strict: values are stored exactly as given or rejected, never coerced.

ProductApiConfig is the live configuration owned by one ProductApi instance.
Only the facade setters (set_debug / set_host / set_preview) write to it.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


def detect_server_runtime() -> bool:
    """A Python process never has a browser global, so it always runs server-side."""
    return True


class ProductApiSettings(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, strict=True)

    host: str = Field(..., min_length=1, description="API host domain, e.g. api.backcountry.com")
    site: str = Field(..., min_length=1, description="Site code (alpha, not numeric)")
    is_server: Optional[bool] = Field(default=None, alias="isServer")
    preview: bool = False
    version: int = Field(default=1, ge=1)
    debug: bool = False

    # transport tuning, not part of the wire contract
    scheme: str = "https"
    origin: Optional[str] = Field(
        default=None,
        description="Origin used for same-origin retries when running client-side.",
    )
    cross_origin: bool = Field(
        default=True,
        alias="crossOrigin",
        description="False selects the legacy query-string transport client-side.",
    )
    timeout_seconds: float = Field(default=20.0, gt=0, alias="timeoutSeconds")


class ProductApiConfig(BaseModel):
    model_config = ConfigDict(validate_assignment=True, strict=True)

    debug: bool
    host: str = Field(..., min_length=1)
    is_server: bool
    preview: bool
    site: str
    version: int
    scheme: str = "https"
    origin: Optional[str] = None
    cross_origin: bool = True
    timeout_seconds: float = 20.0

    @classmethod
    def from_settings(cls, settings: ProductApiSettings) -> "ProductApiConfig":
        is_server = settings.is_server
        if is_server is None:
            is_server = detect_server_runtime()
        return cls(
            debug=settings.debug,
            host=settings.host,
            is_server=is_server,
            preview=settings.preview,
            site=settings.site,
            version=settings.version,
            scheme=settings.scheme,
            origin=settings.origin,
            cross_origin=settings.cross_origin,
            timeout_seconds=settings.timeout_seconds,
        )
