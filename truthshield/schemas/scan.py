"""
API Schemas — Scan Request and Response Models

Pydantic models for the /scan endpoints.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field

from truthshield.config import settings


# ============================================================
# REQUESTS
# ============================================================

class ScanRequest(BaseModel):
    """POST /scan/message and /scan/fraud request body."""
    text: str = Field(..., max_length=settings.MAX_TEXT_LENGTH,
                      description="The text to score. "
                                  "Short text returns a degraded result, not an error.")

    model_config = {"json_schema_extra": {"examples": [
        {"text": "BREAKING: scientists discovered a secret cure the government is hiding!"},
    ]}}


class AudioScanRequest(BaseModel):
    """POST /scan/audio request body."""
    has_audio: bool = Field(True, description="Whether an audio sample was captured.")
    seed: Optional[int] = Field(None, description="Seed for the simulated analyzer (reproducible demo).")


class ImageClaimRequest(BaseModel):
    """POST /scan/image request body."""
    description: str = Field(..., min_length=1, max_length=5_000,
                             description="Caption or claim attached to the image.")


# ============================================================
# RESPONSES
# ============================================================

class FlagResponse(BaseModel):
    type: str
    description: str
    severity: str
    weight: int


class DetectionResponse(BaseModel):
    score: int
    confidence: int
    flags: list[FlagResponse]
    analysis: str
    score_breakdown: Optional[dict] = None


class MessageScanResponse(DetectionResponse):
    """POST /scan/message response body."""
    recommendations: list[str]


class FraudScanResponse(DetectionResponse):
    """POST /scan/fraud response body."""
    risk_level: str
    safeguards: list[str]


class AudioCharacteristicResponse(BaseModel):
    label: str
    value: str
    status: str


class AudioScanResponse(DetectionResponse):
    """POST /scan/audio response body. Simulated output is illustrative only."""
    characteristics: list[AudioCharacteristicResponse]
    recommendations: list[str]
    simulated: bool = True


class ImageClaimResponse(BaseModel):
    suggestions: list[str]
    risk_level: str


# ============================================================
# HEALTH
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    core_version: str
    audio_mode: str
    challenges: int
