"""Recommendations router — scoring, follow-up loop, and bucket-list browsing."""

import logging
from typing import Any

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from app.config import settings
from app.data.bucket_list import TRAVEL_COMPANY_LINKS
from app.errors import IntegrationError, ScoringError, WanderlistError
from app.schemas.travel_input import CAMEL_CONFIG, TravelInput, UserProfile
from app.services.catalog_service import catalog_service
from app.services.input_analyzer import input_analyzer, usable_entries
from app.services.recommendation.engine import recommendation_engine
from app.services.recommendation.question_generator import question_generator

logger = logging.getLogger(__name__)

router = APIRouter()


class GenerateRequest(BaseModel):
    travel_input: TravelInput
    user_profile: UserProfile | None = None

    model_config = CAMEL_CONFIG


class IntegrateAnswersRequest(BaseModel):
    original_input: TravelInput
    answers: dict[str, Any]
    user_profile: UserProfile | None = None

    model_config = CAMEL_CONFIG


def _dump(model: BaseModel) -> dict:
    return model.model_dump(by_alias=True, mode="json")


def _service_error(e: WanderlistError, message: str, code: str) -> HTTPException:
    return HTTPException(
        status_code=500,
        detail={
            "message": message,
            "code": code,
            "details": e.details if settings.expose_error_details else None,
        },
    )


@router.post("/generate")
async def generate_recommendations(req: GenerateRequest):
    """Score the bucket list and heuristics against the travel input."""
    travel_input = req.travel_input
    if not usable_entries(travel_input.destinations) or not usable_entries(travel_input.experiences):
        raise HTTPException(
            status_code=400,
            detail={
                "message": "At least one destination and one experience are required",
                "code": "MISSING_TRAVEL_INPUT",
                "details": None,
            },
        )

    try:
        recommendations = recommendation_engine.score(req.user_profile, travel_input)
    except ScoringError as e:
        raise _service_error(e, "Failed to generate recommendations", "RECOMMENDATION_GENERATION_FAILED")

    return {
        "success": True,
        "data": {
            "recommendations": [_dump(r) for r in recommendations],
            "count": len(recommendations),
        },
    }


@router.post("/follow-up-questions")
async def recommendation_follow_up_questions(req: TravelInput):
    questions = question_generator.generate(req)
    return {
        "success": True,
        "data": {
            "questions": [_dump(q) for q in questions],
            "analysis": _dump(input_analyzer.detect_incomplete(req)),
            "completenessScore": input_analyzer.completeness_score(req),
        },
    }


@router.post("/integrate-answers")
async def integrate_answers(req: IntegrateAnswersRequest):
    """Apply follow-up answers, then re-score the updated input."""
    try:
        result = recommendation_engine.integrate_and_score(req.original_input, req.answers, req.user_profile)
    except IntegrationError as e:
        raise _service_error(e, "Failed to integrate follow-up answers", "ANSWER_INTEGRATION_FAILED")
    except ScoringError as e:
        raise _service_error(e, "Failed to generate recommendations", "RECOMMENDATION_GENERATION_FAILED")

    return {"success": True, "data": _dump(result)}


@router.get("/bucket-list")
async def list_bucket_list(
    status: str = Query("incomplete"),
    priority: int | None = Query(None, ge=1, le=6),
    gail_interest: str | None = Query(None),
    tags: str | None = Query(None, description="Comma-separated tags"),
    difficulty: str | None = Query(None),
    min_duration: int | None = Query(None, ge=1),
    max_duration: int | None = Query(None, ge=1),
    month: int | None = Query(None),
):
    """Browse the curated bucket list with optional filters."""
    try:
        items = catalog_service.query(
            status=status,
            tags=tags.split(",") if tags else None,
            difficulty=difficulty,
            min_duration=min_duration,
            max_duration=max_duration,
            gail_interest=gail_interest,
            priority=priority,
            month=month,
        )
    except ValueError as e:
        raise HTTPException(
            status_code=400,
            detail={"message": str(e), "code": "INVALID_FILTER", "details": None},
        )

    return {
        "success": True,
        "data": {
            "items": [item.to_dict() for item in items],
            "travelCompanies": list(TRAVEL_COMPANY_LINKS),
            "count": len(items),
        },
    }


@router.get("/bucket-list/{item_id}")
async def get_bucket_list_item(item_id: str):
    item = catalog_service.get(item_id)
    if item is None:
        raise HTTPException(
            status_code=404,
            detail={"message": "Bucket list item not found", "code": "BUCKET_LIST_ITEM_NOT_FOUND", "details": None},
        )
    return {"success": True, "data": item.to_dict()}
