# models/analyze_model.py
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field

Energy = Literal["high", "medium", "low"]
BusinessCategory = Literal["planning", "challenge", "achievement", "growth", "learning", "reflection"]
AnalysisSource = Literal["hugging-face-server", "fallback-system"]


class AnalysisResult(BaseModel):
    primary_mood: str
    confidence: int = Field(ge=0, le=100)
    energy: Energy
    emotions: List[str]
    business_category: BusinessCategory
    insights: List[str] = Field(min_length=1, max_length=2)
    ai_heading: str = Field(min_length=1)
    analysis_source: AnalysisSource


class UsageStats(BaseModel):
    # camelCase on the wire, same keys the admin monitor page already reads
    model_config = ConfigDict(populate_by_name=True)

    requests_today: int = Field(0, alias="requestsToday")
    errors_today: int = Field(0, alias="errorsToday")
    last_request_time: int = Field(0, alias="lastRequestTime")  # epoch ms
    quota_exceeded: bool = Field(False, alias="quotaExceeded")
    fallback_mode: bool = Field(False, alias="fallbackMode")


class StatusResponse(BaseModel):
    usage_stats: UsageStats
    api_health: Literal["healthy", "quota_exceeded"]
    fallback_active: bool
    last_request: str  # ISO string
    requests_today: int
    errors_today: int
