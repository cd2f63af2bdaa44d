"""HTTP routes for the AI workout parser."""
