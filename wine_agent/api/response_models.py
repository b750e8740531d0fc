"""
Pydantic request/response schemas for the API.
"""
from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel

from wine_agent.data.schemas import Wine


class WineOut(BaseModel):
    id: str
    brandName: str
    wineName: str
    ava: str
    vintage: str
    price: str
    rating: str
    review: str
    region: str
    type: str
    mainVarietal: str
    tastingDate: str
    publicationDate: str
    setting: str
    purchasedProvided: str
    temp: str
    hyperlink: str

    @classmethod
    def from_wine(cls, wine: Wine) -> "WineOut":
        return cls(**wine.to_dict())


class HealthResponse(BaseModel):
    status: str
    wines: int
    columns: int
    loaded_at: Optional[str]


class ColumnsResponse(BaseModel):
    columns: list[str]
    description: str = "Available columns for filtering and sorting"


class MetaResponse(BaseModel):
    varietals: list[str]
    regions: list[str]
    types: list[str]
    avaList: list[str]


class ReloadResponse(BaseModel):
    status: str
    wines: int


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: list[ChatMessage] = []


class ChatResponse(BaseModel):
    message: str
