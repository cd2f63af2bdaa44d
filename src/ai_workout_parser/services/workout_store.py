"""Append-only workout storage backed by Supabase."""
from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional, Protocol

from ai_workout_parser.config import settings
from ai_workout_parser.errors import PersistenceError
from ai_workout_parser.models import WorkoutPlan, WorkoutRecord
from ai_workout_parser.services.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)


class WorkoutStore(Protocol):
    """Writes workouts and returns the new record id.

    Every call appends a new record, even for identical input.
    """

    def store(self, owner_key: str, workout: WorkoutPlan, workout_date: Optional[datetime] = None) -> str:
        ...


def build_record(owner_key: str, workout: WorkoutPlan, workout_date: Optional[datetime] = None) -> WorkoutRecord:
    """Build the stored document for a workout."""
    now = datetime.now(timezone.utc)
    return WorkoutRecord(
        owner_key=owner_key,
        title=workout.title,
        date=workout_date or now,
        exercises=workout.exercises,
        notes=workout.notes,
        is_completed=False,
        duration=workout.duration or 0,
        created_at=now,
    )


class SupabaseWorkoutStore:
    """Inserts workout records into a Supabase table."""

    def __init__(self, client=None, table: Optional[str] = None):
        self._client = client
        self.table = table or settings.WORKOUTS_TABLE

    def _get_client(self):
        if self._client is None:
            self._client = get_supabase_client()
        return self._client

    def store(self, owner_key: str, workout: WorkoutPlan, workout_date: Optional[datetime] = None) -> str:
        """
        Insert a workout for an owner.

        Args:
            owner_key: Account the workout belongs to
            workout: Canonical workout plan
            workout_date: Day the workout is scheduled for (defaults to now)

        Returns:
            Id of the inserted row

        Raises:
            PersistenceError: If the client is unavailable or the insert fails
        """
        client = self._get_client()
        if not client:
            raise PersistenceError("Workout storage is not configured")

        record = build_record(owner_key, workout, workout_date)
        # Stored rows use snake_case keys throughout, nested exercises included
        payload = record.model_dump(mode="json")

        try:
            result = client.table(self.table).insert(payload).execute()
        except Exception as e:
            logger.error("Workout insert failed for %s: %s", owner_key, e)
            raise PersistenceError(f"Failed to store workout: {e}") from e

        rows = result.data or []
        if not rows or "id" not in rows[0]:
            raise PersistenceError("Workout insert returned no id")

        record_id = str(rows[0]["id"])
        logger.info("Workout created successfully: %s", record_id)
        return record_id
