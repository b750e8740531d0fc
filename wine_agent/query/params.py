"""
Pydantic parameter models for the query tools (agent, MCP and API callers).
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

from wine_agent.config import DEFAULT_LIMIT


class SearchParams(BaseModel):
    query: str = Field(description="Search term(s) to find in wine data")
    limit: int = Field(DEFAULT_LIMIT, ge=1, description="Maximum number of results to return")
    sort_by: Optional[str] = Field(None, description="Column to sort by (e.g., rating, price, vintage)")
    sort_order: Literal["asc", "desc"] = "desc"


class FilterParams(BaseModel):
    filters: dict[str, str] = Field(
        description='Column name → filter string, e.g. {"rating": ">4", "mainVarietal": "Pinot Noir"}'
    )
    limit: int = Field(DEFAULT_LIMIT, ge=1, description="Maximum number of results")
    sort_by: Optional[str] = Field(None, description="Column to sort by")
    sort_order: Literal["asc", "desc"] = "desc"


class DetailsParams(BaseModel):
    wine_name: str = Field(description="Name or partial name of the wine to find")
    exact_match: bool = False
