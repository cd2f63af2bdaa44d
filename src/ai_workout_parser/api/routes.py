"""
AI workout endpoints

POST /ai-workouts/extract   - find the JSON candidate in an assistant reply
POST /ai-workouts/validate  - validate a reply without storing anything
POST /ai-workouts           - validate and store a reply as a workout
"""

import logging
from datetime import datetime
from functools import partial
from typing import Callable, Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ai_workout_parser.errors import PersistenceError
from ai_workout_parser.models import WorkoutPlan, WorkoutValidationResult
from ai_workout_parser.parsers.extractor import extract_candidate
from ai_workout_parser.services.ai_workout_service import (
    store_validated_workout,
    validate_ai_workout_response,
)
from ai_workout_parser.services.usage_service import UsageService
from ai_workout_parser.services.workout_store import SupabaseWorkoutStore, WorkoutStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai-workouts", tags=["ai-workouts"])


# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------

class AIResponseRequest(BaseModel):
    """Assistant reply to process"""
    text: str = Field(..., max_length=50000, description="Raw assistant reply")


class CreateWorkoutRequest(AIResponseRequest):
    """Assistant reply plus the day to schedule the workout for"""
    target_date: Optional[datetime] = Field(default=None, description="Defaults to now")


class ExtractResponse(BaseModel):
    candidate: Optional[str] = None


class CreateWorkoutResponse(BaseModel):
    id: str
    workout: WorkoutPlan


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

def get_owner_key(x_owner_key: str = Header(..., min_length=1)) -> str:
    """Owner of created workouts, supplied by the calling application."""
    return x_owner_key


def get_workout_store() -> WorkoutStore:
    return SupabaseWorkoutStore()


def get_usage_meter(owner_key: str = Depends(get_owner_key)) -> Callable[[str], bool]:
    return partial(UsageService.increment_usage, owner_key)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("/extract", response_model=ExtractResponse)
def extract(request: AIResponseRequest) -> ExtractResponse:
    """Return the JSON text found in the reply, or null."""
    return ExtractResponse(candidate=extract_candidate(request.text))


@router.post("/validate", response_model=WorkoutValidationResult)
def validate(request: AIResponseRequest) -> WorkoutValidationResult:
    """
    Validate an assistant reply.

    Always returns 200; `is_valid` and `error` say whether a workout was found.
    """
    return validate_ai_workout_response(request.text)


@router.post("", status_code=201, response_model=CreateWorkoutResponse)
def create(
    request: CreateWorkoutRequest,
    owner_key: str = Depends(get_owner_key),
    store: WorkoutStore = Depends(get_workout_store),
    increment_usage: Callable[[str], bool] = Depends(get_usage_meter),
):
    """
    Create a workout from an assistant reply.

    ## Errors
    - **422**: the reply holds no valid workout (`error`, `error_type`)
    - **502**: the workout store rejected the write
    """
    validation = validate_ai_workout_response(request.text)
    if not validation.is_valid:
        return JSONResponse(
            status_code=422,
            content={"error": validation.error, "error_type": validation.error_type},
        )

    try:
        record_id = store_validated_workout(
            owner_key,
            validation.workout,
            request.target_date,
            store=store,
            increment_usage=increment_usage,
        )
    except PersistenceError as e:
        logger.error(f"Failed to store AI workout for {owner_key}: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return CreateWorkoutResponse(id=record_id, workout=validation.workout)
