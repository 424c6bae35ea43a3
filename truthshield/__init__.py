"""
TruthShield — Rule-Based Credibility and Fraud Scoring

Deterministic phrase-table scoring for messages and scam content, a
simulated audio analyzer behind a swappable interface, and the
media-literacy challenge catalog used by the quiz board.

Public API:
  - score_message:    Credibility score for a message or post
  - score_fraud:      Scam / phishing score for an email or message
  - score_audio:      Audio authenticity via the configured analyzer
  - engine:           The ScoringEngine singleton
  - list_challenges:  Full challenge catalog
  - random_challenge: One random challenge, optionally by difficulty
  - find_challenge:   One challenge by id
  - answer_challenge: Board movement and scoring for one answer

Usage:
    from truthshield import score_message, random_challenge
"""

__version__ = "1.0.0"

from truthshield.models import DetectionResult, Flag
from truthshield.detector import ScoringEngine, engine, score_message, score_fraud, score_audio
from truthshield.audio import AudioAnalyzer, SimulatedAudioAnalyzer, get_audio_analyzer
from truthshield.challenges import (
    Challenge,
    all_challenges,
    list_challenges,
    by_difficulty,
    random_challenge,
    find_challenge,
)
from truthshield.board import Player, AnswerOutcome, answer_challenge, leaderboard, winner
from truthshield.image_claims import ImageClaimReport, analyze_image_claims
from truthshield.errors import (
    TruthShieldError,
    EmptyPoolError,
    ChallengeNotFoundError,
    InvalidAnswerError,
    AudioAnalysisUnavailableError,
)

__all__ = [
    "DetectionResult",
    "Flag",
    "ScoringEngine",
    "engine",
    "score_message",
    "score_fraud",
    "score_audio",
    "AudioAnalyzer",
    "SimulatedAudioAnalyzer",
    "get_audio_analyzer",
    "Challenge",
    "all_challenges",
    "list_challenges",
    "by_difficulty",
    "random_challenge",
    "find_challenge",
    "Player",
    "AnswerOutcome",
    "answer_challenge",
    "leaderboard",
    "winner",
    "ImageClaimReport",
    "analyze_image_claims",
    "TruthShieldError",
    "EmptyPoolError",
    "ChallengeNotFoundError",
    "InvalidAnswerError",
    "AudioAnalysisUnavailableError",
]
