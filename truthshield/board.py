"""
Board Rules — Gamified Media-Literacy Ladder

Pure movement and scoring rules for the quiz board. The engine holds no
session state: the caller owns the players and the streak counter, and
gets a new Player back after every answer.

  Correct answer:  move 3 + streak bonus + difficulty bonus
                   score += points + 5 * streak bonus, streak + 1
  Wrong answer:    slide back 2 (never below square 0), streak reset
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from truthshield.challenges import Challenge
from truthshield.errors import InvalidAnswerError
from truthshield.logging import get_logger

logger = get_logger("board")

BOARD_SIZE = 100
BASE_MOVE = 3
WRONG_ANSWER_PENALTY = 2
STREAK_POINTS = 5

DIFFICULTY_BONUS = {
    "beginner": 0,
    "intermediate": 1,
    "advanced": 2,
}


@dataclass(frozen=True)
class Player:
    name: str
    position: int = 0
    score: int = 0
    correct_answers: int = 0
    total_questions: int = 0

    @property
    def accuracy(self) -> int:
        """Percentage of answered questions that were correct, rounded."""
        if self.total_questions == 0:
            return 0
        return int(self.correct_answers / self.total_questions * 100 + 0.5)

    @property
    def finished(self) -> bool:
        return self.position >= BOARD_SIZE

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "position": self.position,
            "score": self.score,
            "correct_answers": self.correct_answers,
            "total_questions": self.total_questions,
            "accuracy": self.accuracy,
        }


@dataclass(frozen=True)
class AnswerOutcome:
    """Result of one submitted answer."""
    player: Player
    correct: bool
    streak: int           # Streak after this answer
    move: int             # Signed: positive climbs, negative slides
    points: int
    streak_bonus: int
    difficulty_bonus: int
    explanation: str

    def to_dict(self) -> dict:
        return {
            "player": self.player.to_dict(),
            "correct": self.correct,
            "streak": self.streak,
            "move": self.move,
            "points": self.points,
            "streak_bonus": self.streak_bonus,
            "difficulty_bonus": self.difficulty_bonus,
            "explanation": self.explanation,
        }


def streak_bonus(streak: int) -> int:
    """Extra squares for the streak held before this answer."""
    if streak >= 3:
        return 2
    if streak >= 2:
        return 1
    return 0


def answer_challenge(
    player: Player,
    challenge: Challenge,
    selected: int,
    streak: int = 0,
) -> AnswerOutcome:
    """
    Apply one answer to a player.

    Args:
        player: The player answering. Not modified.
        challenge: The challenge that was shown.
        selected: Index of the chosen option.
        streak: Consecutive correct answers before this one.

    Returns:
        AnswerOutcome carrying the updated player and the new streak.

    Raises:
        InvalidAnswerError if selected is not an index into challenge.options.
    """
    if not 0 <= selected < len(challenge.options):
        raise InvalidAnswerError(
            f"Answer {selected} out of range for challenge {challenge.id} "
            f"({len(challenge.options)} options)"
        )

    correct = challenge.is_correct(selected)

    if correct:
        s_bonus = streak_bonus(streak)
        d_bonus = DIFFICULTY_BONUS.get(challenge.difficulty, 0)
        move = BASE_MOVE + s_bonus + d_bonus
        points = challenge.points + s_bonus * STREAK_POINTS
        updated = replace(
            player,
            position=min(BOARD_SIZE, player.position + move),
            score=player.score + points,
            correct_answers=player.correct_answers + 1,
            total_questions=player.total_questions + 1,
        )
        new_streak = streak + 1
    else:
        s_bonus = d_bonus = points = 0
        move = -WRONG_ANSWER_PENALTY
        updated = replace(
            player,
            position=max(0, player.position - WRONG_ANSWER_PENALTY),
            total_questions=player.total_questions + 1,
        )
        new_streak = 0

    logger.debug(
        f"Answer {'correct' if correct else 'wrong'}: {player.name} -> {updated.position}",
        extra={"challenge_id": challenge.id, "difficulty": challenge.difficulty},
    )

    return AnswerOutcome(
        player=updated,
        correct=correct,
        streak=new_streak,
        move=move,
        points=points,
        streak_bonus=s_bonus,
        difficulty_bonus=d_bonus,
        explanation=challenge.explanation,
    )


def leaderboard(players: list[Player]) -> list[Player]:
    """Players ordered by position, then score, highest first."""
    return sorted(players, key=lambda p: (p.position, p.score), reverse=True)


def winner(players: list[Player]) -> Optional[Player]:
    """The leader, if the leader has reached the final square."""
    if not players:
        return None
    leader = leaderboard(players)[0]
    return leader if leader.finished else None
