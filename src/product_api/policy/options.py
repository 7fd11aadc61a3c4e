from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


def merge_options(
    defaults: Optional[Mapping[str, Any]],
    overrides: Any,
    *,
    site: str,
    preview: bool,
) -> Dict[str, Any]:
    """
    Build the parameter set for one call.

    Call overrides win unless they are missing or falsy, in which case the
    endpoint default is used. site and preview always come from configuration.
    Neither argument is modified.
    """
    options: Dict[str, Any] = dict(overrides) if isinstance(overrides, Mapping) else {}

    for key, value in (defaults or {}).items():
        if not options.get(key):
            options[key] = value

    options["site"] = site
    options["preview"] = preview
    return options
