#!/usr/bin/env python3
"""
Call one product catalogue endpoint from the terminal and print the response body.

Examples:
    python scripts/query_catalog.py --list
    python scripts/query_catalog.py findProducts productId=TNF0123 --option fields=id,title,brand
    python scripts/query_catalog.py searchProducts query=jacket --option limit=10 --verbose
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List

sys.path.insert(0, str(Path(__file__).parent.parent))

try:
    from dotenv import load_dotenv
    load_dotenv()
except ImportError:
    pass  # run without .env if python-dotenv not installed

from src.product_api import CATALOG_ENDPOINTS, ProductApi, ProductApiError
from src.utils.config_loader import load_product_api_settings


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")


def parse_pairs(pairs: List[str]) -> Dict[str, str]:
    """['a=1', 'b=x'] -> {'a': '1', 'b': 'x'}"""
    out: Dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(f"expected key=value, got '{pair}'")
        key, value = pair.split("=", 1)
        out[key.strip()] = value
    return out


def print_catalog() -> None:
    width = max(len(name) for name in CATALOG_ENDPOINTS)
    for name, definition in CATALOG_ENDPOINTS.items():
        defaults = ", ".join(f"{k}={v}" for k, v in definition.opt.items())
        print(f"{name:<{width}}  {definition.method:<4} {definition.tpl}  {defaults}".rstrip())


async def run(endpoint: str, request: Dict[str, str], options: Dict[str, str], config_path: Path | None) -> int:
    settings = load_product_api_settings(config_path)
    api = ProductApi(settings)

    call = getattr(api, endpoint, None)
    if endpoint not in CATALOG_ENDPOINTS or call is None:
        print(f"Unknown endpoint '{endpoint}'. Use --list to see the catalogue.", file=sys.stderr)
        return 2

    body = await call(request, options)
    print(json.dumps(body, indent=2, ensure_ascii=False))
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Query the product catalogue API")
    parser.add_argument("endpoint", nargs="?", help="Endpoint name, e.g. findProducts")
    parser.add_argument("request", nargs="*", help="Template values as key=value")
    parser.add_argument("--option", "-o", action="append", default=[], help="Request option key=value (repeatable)")
    parser.add_argument("--config", type=Path, default=None, help="Path to product_api.yml")
    parser.add_argument("--list", action="store_true", help="List catalogue endpoints and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args()

    setup_logging(args.verbose)

    if args.list:
        print_catalog()
        return 0
    if not args.endpoint:
        parser.error("endpoint is required unless --list is given")

    try:
        request = parse_pairs(args.request)
        options = parse_pairs(args.option)
    except argparse.ArgumentTypeError as e:
        parser.error(str(e))

    try:
        return asyncio.run(run(args.endpoint, request, options, args.config))
    except ProductApiError as e:
        logging.getLogger(__name__).error("Request failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
