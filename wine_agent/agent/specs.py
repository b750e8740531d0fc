# ----------------------------------------------------
"""
Declarative tool specifications for Anthropic tool use.
Each entry describes a callable tool the model can invoke; no implementation here.
"""
# ----------------------------------------------------

SEARCH_WINES_SPEC = {
    "name": "search_wines",
    "description": (
        "Search wines by full-text query across wine names, brands, reviews, regions, "
        "AVAs, and varietals. Every search word must appear somewhere in those fields. "
        "Use this for keywords or phrases (e.g. \"cherry oak\", \"Napa Valley\", \"Quilceda Creek\")."
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search terms (e.g., \"cherry oak\", \"Napa Valley\", \"Pinot Noir\")",
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of results to return (default: 20)",
            },
            "sort_by": {
                "type": "string",
                "description": "Column to sort by (e.g., \"rating\", \"price\", \"vintage\", \"publicationDate\")",
            },
            "sort_order": {
                "type": "string",
                "enum": ["asc", "desc"],
                "description": "Sort direction (default: \"desc\")",
            },
        },
        "required": ["query"],
    },
}

FILTER_WINES_SPEC = {
    "name": "filter_wines",
    "description": (
        "Filter wines by specific criteria with comparison operators. Filters combine with AND. "
        "Use operators for numeric/date fields (e.g. \">4\", \"<50\", \">=2012\"). "
        "Text fields match partially and case-insensitively."
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "filters": {
                "type": "object",
                "description": (
                    "Filters as key-value pairs. Keys: mainVarietal, type, region, ava, brandName, "
                    "price (with operators), rating (with operators, 0-5 stars), vintage (with operators), "
                    "publicationDate (with operators), tastingDate (with operators). "
                    "Example: {\"mainVarietal\": \"Pinot Noir\", \"rating\": \">4\", \"price\": \"<40\"}"
                ),
                "additionalProperties": {"type": "string"},
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of results (default: 20)",
            },
            "sort_by": {
                "type": "string",
                "description": "Column to sort by",
            },
            "sort_order": {
                "type": "string",
                "enum": ["asc", "desc"],
                "description": "Sort direction (default: \"desc\")",
            },
        },
        "required": ["filters"],
    },
}

GET_WINE_DETAILS_SPEC = {
    "name": "get_wine_details",
    "description": (
        "Get complete information about a specific wine by name, including review, rating, "
        "price and link. Use when the user asks about a particular wine."
    ),
    "input_schema": {
        "type": "object",
        "properties": {
            "wine_name": {
                "type": "string",
                "description": "Name or partial name of the wine (brand + name also works)",
            },
            "exact_match": {
                "type": "boolean",
                "description": "If true, requires an exact name match (default: false)",
            },
        },
        "required": ["wine_name"],
    },
}

LIST_COLUMNS_SPEC = {
    "name": "list_columns",
    "description": (
        "List all column names in the wine database. Useful for knowing which fields "
        "can be used for filtering and sorting."
    ),
    "input_schema": {
        "type": "object",
        "properties": {},
    },
}
