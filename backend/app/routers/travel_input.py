"""Travel input router — validation, follow-up questions, and per-user storage."""

import logging

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from app.schemas.travel_input import CAMEL_CONFIG, TravelInput
from app.services.input_analyzer import input_analyzer
from app.services.recommendation.question_generator import question_generator
from app.services.travel_input_store import travel_input_store

logger = logging.getLogger(__name__)

router = APIRouter()


class StoreTravelInputRequest(BaseModel):
    user_id: str
    travel_input: TravelInput

    model_config = CAMEL_CONFIG


def _dump(model: BaseModel) -> dict:
    return model.model_dump(by_alias=True, mode="json")


@router.post("/validate")
async def validate_travel_input(req: TravelInput):
    """Validate input and report completeness and areas needing follow-up."""
    validation = input_analyzer.validate(req)
    analysis = input_analyzer.detect_incomplete(req)
    return {
        "success": True,
        "data": {
            "validation": _dump(validation),
            "completenessScore": input_analyzer.completeness_score(req),
            "incompleteAnalysis": _dump(analysis),
            "normalizedInput": _dump(input_analyzer.normalize(req)) if validation.is_valid else None,
        },
    }


@router.post("/follow-up-questions")
async def travel_input_follow_up_questions(req: TravelInput):
    questions = question_generator.generate(req)
    analysis = input_analyzer.detect_incomplete(req)
    return {
        "success": True,
        "data": {
            "questions": [_dump(q) for q in questions],
            "analysis": _dump(analysis),
            "hasFollowUp": bool(questions),
        },
    }


@router.post("/store")
async def store_travel_input(req: StoreTravelInputRequest):
    """Validate, normalize, and persist the latest travel input for a user."""
    validation = input_analyzer.validate(req.travel_input)
    if not validation.is_valid:
        raise HTTPException(
            status_code=400,
            detail={
                "message": "Invalid travel input",
                "code": "INVALID_TRAVEL_INPUT",
                "details": _dump(validation),
            },
        )

    normalized = input_analyzer.normalize(req.travel_input)
    stored = await travel_input_store.save(req.user_id, normalized)
    logger.info(f"Stored travel input for user {req.user_id}")
    return {
        "success": True,
        "data": {
            "stored": _dump(stored),
            "completenessScore": input_analyzer.completeness_score(normalized),
            "warnings": validation.warnings,
        },
    }


@router.get("/{user_id}")
async def get_travel_input(user_id: str):
    stored = await travel_input_store.get(user_id)
    if stored is None:
        raise HTTPException(
            status_code=404,
            detail={"message": "No travel input stored for this user", "code": "TRAVEL_INPUT_NOT_FOUND", "details": None},
        )
    return {"success": True, "data": _dump(stored)}


@router.delete("/{user_id}")
async def delete_travel_input(user_id: str):
    deleted = await travel_input_store.delete(user_id)
    return {"success": True, "data": {"deleted": deleted}}
