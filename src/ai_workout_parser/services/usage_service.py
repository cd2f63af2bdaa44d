"""Feature usage metering backed by Supabase."""
import logging
from datetime import datetime, timezone

from ai_workout_parser.config import settings
from ai_workout_parser.services.supabase_client import get_supabase_client

logger = logging.getLogger(__name__)

# Feature counted once per workout created from an AI response
CUSTOM_WORKOUTS_FEATURE = "maxCustomWorkouts"


class UsageService:
    """Static methods for recording feature usage events."""

    @staticmethod
    def increment_usage(owner_key: str, feature: str) -> bool:
        """Append one usage event for the owner. Returns True on success."""
        if not settings.USAGE_METERING_ENABLED:
            logger.debug("Usage metering disabled, skipping %s", feature)
            return False

        client = get_supabase_client()
        if not client:
            return False
        try:
            client.table(settings.USAGE_TABLE).insert({
                "owner_key": owner_key,
                "feature": feature,
                "used_at": datetime.now(timezone.utc).isoformat(),
            }).execute()
            logger.info("Incremented usage for %s: %s", owner_key, feature)
            return True
        except Exception as e:
            logger.error("Usage increment failed for %s/%s: %s", owner_key, feature, e)
            return False
