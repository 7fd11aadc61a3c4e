"""
Utility modules for the product catalogue client
"""
from .config_loader import load_product_api_settings

__all__ = [
    'load_product_api_settings',
]
