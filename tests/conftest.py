"""
Test fixtures for ai-workout-parser.

Provides sample assistant replies and fake collaborators (workout store,
usage meter) so tests run offline and deterministically.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make src/ importable so tests can do `import ai_workout_parser...`
for p in {ROOT, SRC}:
    p_str = str(p)
    if p_str not in sys.path:
        sys.path.insert(0, p_str)

from ai_workout_parser.main import app
from ai_workout_parser.api.routes import get_usage_meter, get_workout_store


TEST_OWNER_KEY = "test-user-123"


# ---------------------------------------------------------------------------
# Fake collaborators
# ---------------------------------------------------------------------------


class FakeWorkoutStore:
    """Append-only in-memory store handing out sequential ids."""

    def __init__(self):
        self.records = []

    def store(self, owner_key, workout, workout_date=None):
        self.records.append((owner_key, workout, workout_date))
        return f"workout-{len(self.records)}"


class UsageRecorder:
    """Records every feature key it is called with."""

    def __init__(self):
        self.calls = []

    def __call__(self, feature):
        self.calls.append(feature)
        return True


@pytest.fixture
def workout_store() -> FakeWorkoutStore:
    return FakeWorkoutStore()


@pytest.fixture
def usage_meter() -> UsageRecorder:
    return UsageRecorder()


# ---------------------------------------------------------------------------
# Test Client
# ---------------------------------------------------------------------------


@pytest.fixture
def client(workout_store, usage_meter) -> TestClient:
    """FastAPI TestClient wired to the fake store and meter."""
    app.dependency_overrides[get_workout_store] = lambda: workout_store
    app.dependency_overrides[get_usage_meter] = lambda: usage_meter
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def owner_headers() -> Dict[str, str]:
    return {"X-Owner-Key": TEST_OWNER_KEY}


# ---------------------------------------------------------------------------
# Sample Data Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def leg_day_json() -> str:
    """Canonical workout as compact JSON."""
    return json.dumps({
        "title": "Leg Day",
        "exercises": [
            {"name": "Squat", "sets": [{"reps": "5", "weight": "225"}]},
        ],
    }, separators=(",", ":"))


@pytest.fixture
def leg_day_response(leg_day_json) -> str:
    """Assistant reply wrapping the canonical workout in a json fence."""
    return f"Sure! ```json\n{leg_day_json}\n```"


@pytest.fixture
def canonical_workout_dict() -> Dict[str, Any]:
    """Fully populated canonical workout, every optional field present."""
    return {
        "title": "Push Day",
        "exercises": [
            {
                "id": "ex-1",
                "name": "Bench Press",
                "sets": [
                    {"id": "set-1", "reps": "8", "weight": "135", "notes": ""},
                    {"id": "set-2", "reps": "6", "weight": "155", "notes": "last set"},
                ],
                "notes": "pause at the bottom",
                "isMaxLift": False,
            },
            {
                "id": "ex-2",
                "name": "Dips",
                "sets": [{"id": "set-1", "reps": "AMRAP", "weight": "", "notes": ""}],
                "notes": "",
                "isMaxLift": True,
            },
        ],
        "notes": "Go heavy",
        "duration": 60,
    }


@pytest.fixture
def legacy_array_response() -> str:
    return '[{"exercise":"Row","reps":"12","sets":2}]'
