"""
Configuration loader for the product catalogue client
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from src.product_api.contracts.config import ProductApiSettings
from src.product_api.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "PRODUCT_API_"

# settings field -> environment variable suffix
ENV_FIELDS = {
    "host": "HOST",
    "site": "SITE",
    "version": "VERSION",
    "preview": "PREVIEW",
    "debug": "DEBUG",
    "is_server": "IS_SERVER",
    "scheme": "SCHEME",
    "origin": "ORIGIN",
    "cross_origin": "CROSS_ORIGIN",
    "timeout_seconds": "TIMEOUT_SECONDS",
}

STRING_FIELDS = {"host", "site", "scheme", "origin"}

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "product_api.yml"

# the service documents its settings in camelCase
CAMEL_CASE_KEYS = {
    "isServer": "is_server",
    "crossOrigin": "cross_origin",
    "timeoutSeconds": "timeout_seconds",
}


def _env_overrides(environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    environ = os.environ if environ is None else environ
    overrides: Dict[str, Any] = {}
    for field_name, suffix in ENV_FIELDS.items():
        value = environ.get(ENV_PREFIX + suffix)
        if value is None or value.strip() == "":
            continue
        value = value.strip()
        # settings validate strictly, so "true" / "3" / "5.0" are read as YAML scalars
        if field_name in STRING_FIELDS:
            overrides[field_name] = value
            continue
        try:
            overrides[field_name] = yaml.safe_load(value)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Unreadable value for {ENV_PREFIX}{suffix}: {value}") from e
    return overrides


def load_product_api_settings(
    config_path: Optional[Path] = None,
    environ: Optional[Dict[str, str]] = None,
) -> ProductApiSettings:
    """
    Load and validate client settings from YAML, then overlay PRODUCT_API_* env vars

    Args:
        config_path: Path to config file. Defaults to config/product_api.yml.
            A missing file is fine as long as the environment supplies host and site.
        environ: Environment mapping, defaults to os.environ

    Returns:
        Validated ProductApiSettings object

    Raises:
        ConfigurationError: If the merged settings are missing host/site or fail validation
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    data: Dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must contain a mapping: {config_path}")
    else:
        logger.info("Config file not found, using environment only: %s", config_path)

    settings_data = {CAMEL_CASE_KEYS.get(key, key): value for key, value in data.items()}
    settings_data.update(_env_overrides(environ))

    if not settings_data.get("host") or not settings_data.get("site"):
        raise ConfigurationError("Product API settings need both host and site")

    try:
        settings = ProductApiSettings.model_validate(settings_data)
    except ValidationError as e:
        logger.error("Product API config validation failed: %s", e)
        raise ConfigurationError(f"Invalid product API settings: {e}") from e

    logger.info("Loaded product API settings for host=%s site=%s", settings.host, settings.site)
    return settings
