"""
API Schemas — Challenge and Board Models
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ChallengeResponse(BaseModel):
    id: str
    type: str
    question: str
    options: list[str]
    correct_answer: int
    explanation: str
    category: str
    difficulty: str
    points: int


class ChallengeListResponse(BaseModel):
    total: int
    challenges: list[ChallengeResponse]


class PlayerState(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    position: int = Field(0, ge=0, le=100)
    score: int = Field(0, ge=0)
    correct_answers: int = Field(0, ge=0)
    total_questions: int = Field(0, ge=0)


class PlayerResponse(PlayerState):
    accuracy: int


class AnswerRequest(BaseModel):
    """POST /board/answer request body. The caller owns player and streak state."""
    player: PlayerState
    challenge_id: str
    selected: int
    streak: int = Field(0, ge=0)


class AnswerResponse(BaseModel):
    player: PlayerResponse
    correct: bool
    streak: int
    move: int
    points: int
    streak_bonus: int
    difficulty_bonus: int
    explanation: str
    winner: bool
