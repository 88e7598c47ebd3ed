from datetime import date, datetime
from typing import Literal

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

# camelCase on the wire, snake_case in Python; either is accepted on input
CAMEL_CONFIG = {"alias_generator": to_camel, "populate_by_name": True}


class BudgetRange(BaseModel):
    min: float = 0
    max: float = 0
    currency: str = "USD"

    model_config = CAMEL_CONFIG


class Preferences(BaseModel):
    budget_range: BudgetRange | None = None
    travel_style: str | None = None  # budget | mid-range | luxury | adventure
    interests: list[str] = []
    travel_duration: str | None = None  # short | medium | long
    group_size: int | None = None
    accessibility: list[str] = []

    model_config = CAMEL_CONFIG


class Timeframe(BaseModel):
    start_date: date | None = None
    end_date: date | None = None
    flexibility: str | None = None  # fixed | flexible | very-flexible | seasonal
    preferred_months: list[int] = []
    duration: int | None = None

    model_config = CAMEL_CONFIG


class TravelInput(BaseModel):
    destinations: list[str] = []
    experiences: list[str] = []
    preferences: Preferences | None = None
    timeframe: Timeframe | None = None

    model_config = CAMEL_CONFIG


class ValidationResult(BaseModel):
    is_valid: bool
    errors: list[str] = []
    warnings: list[str] = []

    model_config = CAMEL_CONFIG


class IncompleteAnalysis(BaseModel):
    needs_follow_up: bool
    incomplete_areas: list[str] = []
    suggestions: list[str] = []

    model_config = CAMEL_CONFIG


class FollowUpQuestion(BaseModel):
    id: str
    question: str
    type: Literal["text", "multiple-choice", "range"]
    options: list[str] | None = None
    context: str
    required: bool = True

    model_config = CAMEL_CONFIG


class LocationData(BaseModel):
    city: str
    country: str
    airport_code: str | None = None

    model_config = CAMEL_CONFIG


class UserProfile(BaseModel):
    id: str | None = None
    home_location: LocationData | None = None
    preferences: Preferences | None = None

    model_config = CAMEL_CONFIG


class StoredTravelInput(BaseModel):
    user_id: str
    travel_input: TravelInput
    last_updated: datetime

    model_config = CAMEL_CONFIG
