from typing import Literal

from pydantic import BaseModel

from app.schemas.travel_input import CAMEL_CONFIG, TravelInput


class RecommendationMetadata(BaseModel):
    season: str | None = None
    duration: int | None = None  # days
    difficulty: str | None = None

    model_config = CAMEL_CONFIG


class Recommendation(BaseModel):
    type: Literal["destination", "experience"]
    title: str
    description: str
    reasoning: str
    confidence: float
    related_to: list[str]
    metadata: RecommendationMetadata | None = None

    model_config = CAMEL_CONFIG


class IntegrationResult(BaseModel):
    updated_input: TravelInput
    recommendations: list[Recommendation]

    model_config = CAMEL_CONFIG
