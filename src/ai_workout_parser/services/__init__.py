"""Services for normalizing, storing and metering AI-generated workouts."""
