"""
Scoring Engine — Rule-Based Credibility and Fraud Detection

Deterministic. No I/O. No state between calls.

Every detector starts at 100, subtracts the weight of each flag it
raises, applies any bounded positive credits, and clamps to [0, 100].
The flag order is detection order; the score never depends on it.

  - score_message: general misinformation (phrase tables + structural checks)
  - score_fraud:   scam / phishing content (fraud phrase tables only)
  - score_audio:   delegated to the configured AudioAnalyzer

The engine is instantiated once as a singleton. The tables it reads
live in patterns.py and are never changed at runtime.
"""

from __future__ import annotations

import random
from typing import Optional

from truthshield.audio import get_audio_analyzer
from truthshield.config import settings
from truthshield.logging import get_logger
from truthshield.models import (
    BASELINE_SCORE,
    DetectionResult,
    Flag,
    SEVERITY_LOW,
    clamp,
    round_half_up,
)
from truthshield.narrative import (
    INSUFFICIENT_CONTENT_ANALYSIS,
    compose_fraud_analysis,
    compose_message_analysis,
)
from truthshield.patterns import (
    FRAUD_CATEGORIES,
    MESSAGE_CATEGORIES,
    MESSAGE_CHECKS,
    POSITIVE_INDICATORS,
    PhraseCategory,
    PositiveIndicator,
    StructuralCheck,
    TextContext,
)

logger = get_logger("detector")

# Inputs shorter than this return the degraded "insufficient content" result
MIN_MESSAGE_LENGTH = 10


class ScoringEngine:
    """
    Stateless evaluation engine for free-text input.

    Holds references to the pattern tables only. Each call builds its
    own running score, flag list and hit counts.
    """

    def __init__(
        self,
        message_categories: tuple[PhraseCategory, ...] = MESSAGE_CATEGORIES,
        message_checks: tuple[StructuralCheck, ...] = MESSAGE_CHECKS,
        positive_indicators: tuple[PositiveIndicator, ...] = POSITIVE_INDICATORS,
        fraud_categories: tuple[PhraseCategory, ...] = FRAUD_CATEGORIES,
    ):
        self._message_categories = message_categories
        self._message_checks = message_checks
        self._positive_indicators = positive_indicators
        self._fraud_categories = fraud_categories

    # ------------------------------------------------------------
    # General message
    # ------------------------------------------------------------

    def score_message(self, text: str) -> DetectionResult:
        """Score a chat message or post for misinformation patterns."""
        if len(text) < MIN_MESSAGE_LENGTH:
            return self._insufficient_content()

        ctx = TextContext.build(text)
        flags, hits = self._run_categories(self._message_categories, ctx)

        for check in self._message_checks:
            flag = check.detect(ctx)
            if flag is not None:
                flags.append(flag)

        score, breakdown = self._apply_weights(flags)

        # Positive credits: each capped so the running score never exceeds 100
        for indicator in self._positive_indicators:
            if indicator.applies(ctx):
                score = min(BASELINE_SCORE, score + indicator.bonus)
                breakdown["positive_adjustments"].append({
                    "indicator": indicator.key,
                    "bonus": indicator.bonus,
                })

        final = round_half_up(clamp(score))
        breakdown["final_score"] = final

        distinct_types = len({f.type for f in flags})
        depth = min(30, ctx.length / 10)
        confidence = round_half_up(min(95, 50 + depth + distinct_types * 3))

        result = DetectionResult(
            score=final,
            confidence=confidence,
            flags=flags,
            analysis=compose_message_analysis(final, flags, hits),
            score_breakdown=breakdown,
        )
        self._log(result, "message")
        return result

    # ------------------------------------------------------------
    # Fraud
    # ------------------------------------------------------------

    def score_fraud(self, text: str) -> DetectionResult:
        """Score an email or message body for scam indicators. No short-text guard."""
        ctx = TextContext.build(text)
        flags, hits = self._run_categories(self._fraud_categories, ctx)

        score, breakdown = self._apply_weights(flags)
        final = round_half_up(clamp(score))
        breakdown["final_score"] = final

        confidence = round_half_up(min(95, 65 + ctx.length / 25 + len(flags) * 4))

        result = DetectionResult(
            score=final,
            confidence=confidence,
            flags=flags,
            analysis=compose_fraud_analysis(final, flags, hits),
            score_breakdown=breakdown,
        )
        self._log(result, "fraud")
        return result

    # ------------------------------------------------------------
    # Audio (simulated unless a real analyzer is configured)
    # ------------------------------------------------------------

    def score_audio(
        self,
        has_audio: bool,
        rng: Optional[random.Random] = None,
        mode: Optional[str] = None,
    ) -> DetectionResult:
        """
        Score an audio sample via the configured analyzer.

        The simulated analyzer is non-deterministic unless an rng is
        supplied; its output is illustrative, not evidence.
        """
        analyzer = get_audio_analyzer(mode or settings.AUDIO_MODE, rng=rng)
        result = analyzer.analyze(has_audio)
        self._log(result, "audio")
        return result

    # ------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------

    def get_patterns(self, domain: str = "all") -> list[dict]:
        """
        Return the active detection rules for a domain.

        Used by the GET /patterns endpoint to expose the detection surface.
        """
        patterns: list[dict] = []
        if domain in ("message", "all"):
            patterns += [{**c.to_dict(), "domain": "message"} for c in self._message_categories]
            patterns += [{**c.to_dict(), "domain": "message"} for c in self._message_checks]
        if domain in ("fraud", "all"):
            patterns += [{**c.to_dict(), "domain": "fraud"} for c in self._fraud_categories]
        return patterns

    # ------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------

    def _run_categories(
        self,
        categories: tuple[PhraseCategory, ...],
        ctx: TextContext,
    ) -> tuple[list[Flag], dict[str, int]]:
        """Match every category in order; return raised flags and raw hit counts."""
        flags: list[Flag] = []
        hits: dict[str, int] = {}
        examples: dict[str, list[str]] = {}

        for category in categories:
            matched = category.matches(ctx.lower)
            hits[category.key] = len(matched)
            examples[category.key] = matched

        for category in categories:
            count = hits[category.key]
            if count < category.min_hits:
                continue
            if category.suppressed_by_source and ctx.has_specific_source:
                continue
            if category.requires_any and not any(
                hits.get(k, 0) > 0 for k in category.requires_any
            ):
                continue
            flags.append(Flag(
                type=category.flag_type,
                description=category.description.format(
                    count=count, example=examples[category.key][0],
                ),
                severity=category.severity_for(count),
                weight=category.weight_for(count),
            ))
        return flags, hits

    @staticmethod
    def _apply_weights(flags: list[Flag]) -> tuple[int, dict]:
        """Subtract every flag weight from the baseline; record each deduction."""
        score = BASELINE_SCORE
        breakdown: dict = {
            "starting_score": BASELINE_SCORE,
            "deductions": [],
            "positive_adjustments": [],
        }
        for flag in flags:
            score -= flag.weight
            breakdown["deductions"].append({
                "flag": flag.type,
                "severity": flag.severity,
                "penalty": -flag.weight,
            })
        return score, breakdown

    @staticmethod
    def _insufficient_content() -> DetectionResult:
        return DetectionResult(
            score=50,
            confidence=30,
            flags=[Flag(
                type="Insufficient Content",
                description="Message too short for reliable analysis",
                severity=SEVERITY_LOW,
                weight=0,
            )],
            analysis=INSUFFICIENT_CONTENT_ANALYSIS,
            score_breakdown={
                "starting_score": 50,
                "deductions": [],
                "positive_adjustments": [],
                "final_score": 50,
            },
        )

    @staticmethod
    def _log(result: DetectionResult, detector: str) -> None:
        logger.debug(
            f"{detector} scored: score={result.score}",
            extra={
                "detector": detector,
                "score": result.score,
                "confidence": result.confidence,
                "flags_count": len(result.flags),
            },
        )


# ============================================================
# SINGLETON — instantiated once, never mutated
# ============================================================

engine = ScoringEngine()


def score_message(text: str) -> DetectionResult:
    return engine.score_message(text)


def score_fraud(text: str) -> DetectionResult:
    return engine.score_fraud(text)


def score_audio(
    has_audio: bool,
    rng: Optional[random.Random] = None,
    mode: Optional[str] = None,
) -> DetectionResult:
    return engine.score_audio(has_audio, rng=rng, mode=mode)
