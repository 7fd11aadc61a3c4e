"""
Request-building policy: URL templating and option merging.

Both are pure functions; configuration values are passed in by the caller.
"""

from .options import merge_options
from .templates import render, to_param_str

__all__ = ["merge_options", "render", "to_param_str"]
