"""Supabase client shared by the storage and usage services."""
import logging

from ai_workout_parser.config import settings

logger = logging.getLogger(__name__)


def get_supabase_client():
    """Get Supabase client instance, or None when it cannot be created."""
    try:
        from supabase import create_client
    except ImportError:
        logger.warning("Supabase library not installed. Storage will be disabled.")
        return None

    if not settings.SUPABASE_URL or not settings.SUPABASE_KEY:
        logger.warning("Supabase credentials not configured. Storage will be disabled.")
        return None

    try:
        return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)
    except Exception as e:
        logger.error(f"Failed to create Supabase client: {e}")
        return None
