# 📦 /schemas/schemas.py

from pydantic import BaseModel, Field
from typing import List, Optional


class Preferences(BaseModel):
    preferred_location: Optional[str] = None
    body_types: List[str] = []
    skin_tones: List[str] = []
    age_ranges: List[str] = []
    services: List[str] = []


class ExploreFilters(BaseModel):
    location: str = "all"
    search: str = ""
    online_only: bool = False
    available_only: bool = False
    extras: List[str] = []
    price_range: str = "Any price"
    favorites: Optional[List[str]] = None
    body_types: List[str] = []
    skin_tones: List[str] = []
    age_ranges: List[str] = []
    services: List[str] = []


class ExploreRequest(BaseModel):
    filters: ExploreFilters = Field(default_factory=ExploreFilters)
    sort_by: str = "recommended"
    preferences: Optional[Preferences] = None


class CategoryScore(BaseModel):
    score: float
    weight: float


class Explanation(BaseModel):
    creator_id: str
    match_percentage: int
    categories: dict[str, CategoryScore]


class CreatorListResponse(BaseModel):
    status: str
    data: List[dict]


class ExplainResponse(BaseModel):
    status: str
    data: Explanation


class ReloadResponse(BaseModel):
    status: str
    count: int


class HealthCheckResponse(BaseModel):
    status: str
    message: str
    version: str


class ErrorResponse(BaseModel):
    status: str
    message: str
    info: Optional[str | dict] = None
