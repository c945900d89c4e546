# api.py

import logging
from typing import Optional

import pydantic
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from textcat.config import settings, configure_logging
from textcat.core import TextCat

# App Setup
configure_logging(settings.log_level)

app = FastAPI(
    title="TextCat Language Identifier API",
    description="An API to identify the language of a text with n-gram fingerprints (TextCat).",
    version="1.0.0"
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Model Loading, the profiles are read once on startup and shared by every request.
classifier: Optional[TextCat] = None

try:
    logging.info(f"Loading language profiles from {settings.profile_dir}...")
    classifier = TextCat.from_directory(settings.profile_dir, settings.language_map)
except FileNotFoundError as e:
    logging.critical(f"FATAL ERROR: Could not load language profiles. Please run 'scripts/build_profiles.py'. Details: {e}")


# API Data Models (using Pydantic)

class ClassifyRequest(pydantic.BaseModel):
    text: str
    top_n: int = pydantic.Field(default=settings.top_n, validate_default=True)

    @pydantic.field_validator('top_n')
    @classmethod
    def top_n_must_be_in_range(cls, v):
        if not 1 <= v <= 20:
            raise ValueError('top_n must be between 1 and 20')
        return v

class ScoreEntry(pydantic.BaseModel):
    lang: str
    score: Optional[int] = None

class ClassifyResponse(pydantic.BaseModel):
    prediction: Optional[str] = None
    distribution: Optional[list[ScoreEntry]] = None
    top_features: Optional[list[str]] = None
    error: Optional[str] = None


# API Endpoints

@app.get("/", summary="Health Check")
def read_root():
    """A simple endpoint to check if the API is running."""
    languages = classifier.languages if classifier else {}
    return {"status": "TextCat Language Identifier API is running.", "languages": languages}


@app.post("/classify", response_model=ClassifyResponse, summary="Classify Language")
def classify_language(request: ClassifyRequest):
    """
    Identifies the language of the input text.
    """
    if not classifier:
        raise HTTPException(
            status_code=503, # Service Unavailable
            detail="The classifier is not available. It may have failed to load on startup."
        )

    return classifier.identify(request.text, top_n=request.top_n)
