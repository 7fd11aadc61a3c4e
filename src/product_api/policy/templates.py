"""
Placeholder substitution for endpoint path templates.

"/products/{{productId}}" + {"productId": "ABC123"} -> "/products/ABC123"
"""

from __future__ import annotations

from typing import Any, Mapping


def to_param_str(value: Any) -> str:
    """String form of a value as it goes on the wire (matches httpx query encoding)."""
    if value is True:
        return "true"
    if value is False:
        return "false"
    if value is None:
        return ""
    return str(value)


def render(template: str, data: Mapping[str, Any]) -> str:
    """
    Replace every ``{{key}}`` in template with the matching value from data.

    Keys are applied in insertion order. Placeholders without a key in data are
    left as-is; callers are responsible for passing complete data.
    """
    for key, value in data.items():
        template = template.replace("{{" + str(key) + "}}", to_param_str(value))
    return template
