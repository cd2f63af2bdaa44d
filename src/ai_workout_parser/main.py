"""Main FastAPI application."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ai_workout_parser.api.routes import router
from ai_workout_parser.config import settings

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title="AI Workout Parser API")

# Configure CORS to allow requests from the UI
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:3001"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)
