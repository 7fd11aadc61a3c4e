"""
Fixed endpoint catalogue registered by every ProductApi instance.

Endpoint names are the service's own (camelCase) operation names.
"""

from __future__ import annotations

from typing import Dict

from src.product_api.contracts.endpoints import EndpointDefinition

# routes
BRAND_ROUTE = "/brands"
CATEGORY_ROUTE = "/categories"
FACET_ROUTE = "/facets"
PRODUCT_ROUTE = "/products"
Q_PARAM = "?q="
QUERIES_ROUTE = "/queries"
RULE_ROUTE = "/rules"
SUGGEST_ROUTE = "/suggestions"

# id placeholders
BRAND_ID = "/{{brandId}}"
CATEGORY_ID = "/{{categoryId}}"
ID = "/{{id}}"
PRODUCT_ID = "/{{productId}}"
QUERY = "{{query}}"

TAXONOMY_OPTIONS = {
    "fields": "id,name,childCategories",
    "maxLevels": 1,
    "maxChildren": -1,
    "outlet": False,
}

CATALOG_ENDPOINTS: Dict[str, EndpointDefinition] = {
    # suggestions
    "suggestAll": EndpointDefinition(tpl=SUGGEST_ROUTE + Q_PARAM + QUERY),
    # queries
    "suggestQueries": EndpointDefinition(
        tpl=QUERIES_ROUTE + SUGGEST_ROUTE + Q_PARAM + QUERY,
        opt={"limit": 8},
    ),
    # products
    "findProducts": EndpointDefinition(tpl=PRODUCT_ROUTE + PRODUCT_ID),
    "suggestProducts": EndpointDefinition(
        tpl=PRODUCT_ROUTE + SUGGEST_ROUTE + Q_PARAM + QUERY,
        opt={"limit": 8},
    ),
    "searchProducts": EndpointDefinition(tpl=PRODUCT_ROUTE + Q_PARAM + QUERY, opt={"limit": 40}),
    "browseCategory": EndpointDefinition(tpl=CATEGORY_ROUTE + CATEGORY_ID + PRODUCT_ROUTE),
    "browseBrandCategory": EndpointDefinition(
        tpl=BRAND_ROUTE + BRAND_ID + CATEGORY_ROUTE + CATEGORY_ID + PRODUCT_ROUTE,
        opt={"limit": 40},
    ),
    "findProductGenerations": EndpointDefinition(tpl=PRODUCT_ROUTE + PRODUCT_ID + "/generations"),
    "findSimilarProducts": EndpointDefinition(tpl=PRODUCT_ROUTE + PRODUCT_ID + "/similar"),
    "findCrossSellProducts": EndpointDefinition(
        tpl=PRODUCT_ROUTE + PRODUCT_ID + "/recommendations",
        opt={"limit": 8},
    ),
    # categories
    "suggestCategories": EndpointDefinition(tpl=CATEGORY_ROUTE + SUGGEST_ROUTE + Q_PARAM + QUERY),
    "findCategory": EndpointDefinition(tpl=CATEGORY_ROUTE + CATEGORY_ID, opt={"limit": 8}),
    "categoryTaxonomy": EndpointDefinition(tpl=CATEGORY_ROUTE, opt=TAXONOMY_OPTIONS),
    "findCategoryBrands": EndpointDefinition(tpl=CATEGORY_ROUTE + CATEGORY_ID + BRAND_ROUTE),
    # brands
    "findBrands": EndpointDefinition(tpl=BRAND_ROUTE + BRAND_ID, opt={"limit": 8}),
    "findBrandCategories": EndpointDefinition(tpl=BRAND_ROUTE + BRAND_ID + CATEGORY_ROUTE, opt=TAXONOMY_OPTIONS),
    "suggestBrands": EndpointDefinition(
        tpl=BRAND_ROUTE + SUGGEST_ROUTE + Q_PARAM + QUERY,
        opt={"limit": 8},
    ),
    "allBrands": EndpointDefinition(tpl=BRAND_ROUTE, opt={"limit": 2000}),
    # rules
    "findRules": EndpointDefinition(tpl=RULE_ROUTE + ID),
    # facets
    "findFacets": EndpointDefinition(tpl=FACET_ROUTE + ID),
    "createFacet": EndpointDefinition(tpl=FACET_ROUTE + ID, method="PUT"),
}
