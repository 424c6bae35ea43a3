"""
TruthShield API — Main Application

POST /scan/message        — Credibility score for a message or post
POST /scan/fraud          — Scam / phishing score for an email or message
POST /scan/audio          — Audio authenticity (simulated demo analyzer)
POST /scan/image          — Verification suggestions for an image claim
GET  /patterns            — List detection rules (by domain)
GET  /challenges          — Challenge catalog (optionally by difficulty)
GET  /challenges/random   — One random challenge
GET  /challenges/{id}     — One challenge by id
POST /board/answer        — Apply an answer to a player
GET  /health              — Health check
"""

from __future__ import annotations

import random
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.requests import Request

from truthshield import __version__
from truthshield.board import Player, answer_challenge, winner
from truthshield.challenges import (
    CHALLENGES,
    all_challenges,
    by_difficulty,
    find_challenge,
    random_challenge,
)
from truthshield.config import settings
from truthshield.detector import engine
from truthshield.errors import (
    AudioAnalysisUnavailableError,
    ChallengeNotFoundError,
    EmptyPoolError,
    InvalidAnswerError,
)
from truthshield.image_claims import analyze_image_claims
from truthshield.logging import setup_logging, get_logger
from truthshield.narrative import (
    audio_characteristics,
    audio_recommendations,
    fraud_risk_level,
    fraud_safeguards,
    message_recommendations,
)
from truthshield.patterns import CORE_VERSION
from truthshield.rate_limit import check_rate_limit
from truthshield.schemas.board import (
    AnswerRequest,
    AnswerResponse,
    ChallengeListResponse,
    ChallengeResponse,
)
from truthshield.schemas.scan import (
    AudioScanRequest,
    AudioScanResponse,
    FraudScanResponse,
    HealthResponse,
    ImageClaimRequest,
    ImageClaimResponse,
    MessageScanResponse,
    ScanRequest,
)

logger = get_logger("api")

DIFFICULTY_PATTERN = "^(beginner|intermediate|advanced)$"


# ============================================================
# STARTUP / SHUTDOWN
# ============================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info(f"TruthShield API starting (audio mode: {settings.AUDIO_MODE})")
    yield
    logger.info("TruthShield API shutting down")


app = FastAPI(
    title="TruthShield API",
    description="Rule-based credibility and fraud scoring with a media-literacy challenge board",
    version=f"{__version__} (core {CORE_VERSION})",
    lifespan=lifespan,
)

# CORS — set TRUTHSHIELD_CORS_ORIGINS in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in settings.CORS_ORIGINS.split(",")],
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
    allow_credentials=False,
)


# ============================================================
# ERROR HANDLERS
# ============================================================

@app.exception_handler(ChallengeNotFoundError)
async def challenge_not_found_handler(request: Request, exc: ChallengeNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(EmptyPoolError)
async def empty_pool_handler(request: Request, exc: EmptyPoolError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(InvalidAnswerError)
async def invalid_answer_handler(request: Request, exc: InvalidAnswerError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(AudioAnalysisUnavailableError)
async def audio_unavailable_handler(request: Request, exc: AudioAnalysisUnavailableError):
    logger.warning("Audio scan requested while disabled", extra={"path": request.url.path})
    return JSONResponse(status_code=503, content={"detail": str(exc)})


@app.exception_handler(Exception)
async def global_error_handler(request: Request, exc: Exception):
    """Catch unhandled exceptions — return structured error, don't leak internals."""
    logger.error(
        f"Unhandled exception: {type(exc).__name__}",
        extra={
            "error": str(exc),
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error. The request could not be completed."},
    )


def _client_id(request: Request) -> Optional[str]:
    return request.client.host if request.client else None


# ============================================================
# SCAN ROUTES
# ============================================================

@app.post("/scan/message", response_model=MessageScanResponse)
async def scan_message(body: ScanRequest, request: Request):
    """Score a message for misinformation patterns."""
    check_rate_limit(_client_id(request))
    result = engine.score_message(body.text)
    return {
        **result.to_dict(),
        "recommendations": message_recommendations(result),
    }


@app.post("/scan/fraud", response_model=FraudScanResponse)
async def scan_fraud(body: ScanRequest, request: Request):
    """Score an email or message for scam indicators."""
    check_rate_limit(_client_id(request))
    result = engine.score_fraud(body.text)
    return {
        **result.to_dict(),
        "risk_level": fraud_risk_level(result.score),
        "safeguards": fraud_safeguards(result),
    }


@app.post("/scan/audio", response_model=AudioScanResponse)
async def scan_audio(body: AudioScanRequest, request: Request):
    """
    Score an audio sample.

    The default analyzer is a simulation: its output is illustrative,
    not evidence. Pass a seed for a reproducible result.
    """
    check_rate_limit(_client_id(request))
    rng = random.Random(body.seed) if body.seed is not None else None
    result = engine.score_audio(body.has_audio, rng=rng)
    return {
        **result.to_dict(),
        "characteristics": [c.to_dict() for c in audio_characteristics(result)],
        "recommendations": audio_recommendations(result),
        "simulated": settings.AUDIO_MODE == "simulated",
    }


@app.post("/scan/image", response_model=ImageClaimResponse)
async def scan_image(body: ImageClaimRequest, request: Request):
    """Verification suggestions for a described image. No pixels are analyzed."""
    check_rate_limit(_client_id(request))
    return analyze_image_claims(body.description).to_dict()


@app.get("/patterns")
async def get_patterns(
    request: Request,
    domain: str = Query("all", pattern="^(all|message|fraud)$"),
):
    """Return the active detection rules for a domain."""
    check_rate_limit(_client_id(request))
    patterns = engine.get_patterns(domain=domain)
    return {
        "domain": domain,
        "core_version": CORE_VERSION,
        "total_patterns": len(patterns),
        "patterns": patterns,
    }


# ============================================================
# CHALLENGE + BOARD ROUTES
# ============================================================

@app.get("/challenges", response_model=ChallengeListResponse)
async def list_challenges(
    request: Request,
    difficulty: Optional[str] = Query(None, pattern=DIFFICULTY_PATTERN),
):
    check_rate_limit(_client_id(request))
    challenges = by_difficulty(difficulty) if difficulty is not None else all_challenges()
    return {
        "total": len(challenges),
        "challenges": [c.to_dict() for c in challenges],
    }


@app.get("/challenges/random", response_model=ChallengeResponse)
async def get_random_challenge(
    request: Request,
    difficulty: Optional[str] = Query(None, pattern=DIFFICULTY_PATTERN),
):
    check_rate_limit(_client_id(request))
    return random_challenge(difficulty).to_dict()


@app.get("/challenges/{challenge_id}", response_model=ChallengeResponse)
async def get_challenge(challenge_id: str, request: Request):
    check_rate_limit(_client_id(request))
    return find_challenge(challenge_id).to_dict()


@app.post("/board/answer", response_model=AnswerResponse)
async def board_answer(body: AnswerRequest, request: Request):
    """Apply one answer. The caller keeps the returned player and streak."""
    check_rate_limit(_client_id(request))
    challenge = find_challenge(body.challenge_id)
    player = Player(**body.player.model_dump())
    outcome = answer_challenge(player, challenge, body.selected, body.streak)
    return {
        **outcome.to_dict(),
        "winner": winner([outcome.player]) is not None,
    }


@app.get("/health", response_model=HealthResponse)
async def health():
    """Health check — no rate limit."""
    return {
        "status": "operational",
        "version": __version__,
        "core_version": CORE_VERSION,
        "audio_mode": settings.AUDIO_MODE,
        "challenges": len(CHALLENGES),
    }


# --- Security + Version Headers Middleware ---
@app.middleware("http")
async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-TruthShield-Version"] = __version__
    response.headers["X-Core-Version"] = CORE_VERSION
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    response.headers["Permissions-Policy"] = "camera=(), microphone=(), geolocation=()"
    return response


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every API request with method, path, status, duration."""
    path = request.url.path
    if path == "/health":
        return await call_next(request)

    start = time.time()
    response = await call_next(request)
    duration_ms = round((time.time() - start) * 1000, 1)

    logger.info(
        f"{request.method} {path} → {response.status_code} ({duration_ms}ms)",
        extra={
            "method": request.method,
            "path": path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response
