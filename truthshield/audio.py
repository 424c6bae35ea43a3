"""
Audio Analyzer — Abstract Interface

All audio scoring goes through this interface. The only implementation
today is a simulation: it performs no signal processing and exists so
the voice module has a result to render. A real feature-extraction
pipeline replaces it by implementing AudioAnalyzer and registering in
get_audio_analyzer(); callers do not change.

Swap implementations by changing TRUTHSHIELD_AUDIO_MODE in env.
"""

from __future__ import annotations

import math
import random
from abc import ABC, abstractmethod
from typing import Optional

from truthshield.errors import AudioAnalysisUnavailableError
from truthshield.models import (
    DetectionResult,
    Flag,
    SEVERITY_HIGH,
    SEVERITY_LOW,
    SEVERITY_MEDIUM,
    clamp,
    round_half_up,
)
from truthshield.narrative import compose_audio_analysis

# Simulated analysis assumes authenticity and deducts from here
AUDIO_START_SCORE = 85


class AudioAnalyzer(ABC):
    """Abstract base for audio analyzers."""

    @abstractmethod
    def analyze(self, has_audio: bool) -> DetectionResult:
        """Score an audio sample."""
        ...

    @staticmethod
    def no_audio_result() -> DetectionResult:
        """Degraded result when no sample was captured."""
        return DetectionResult(
            score=50,
            confidence=30,
            flags=[Flag(
                type="No Audio Provided",
                description="No audio sample was supplied for analysis",
                severity=SEVERITY_LOW,
                weight=0,
            )],
            analysis="No audio sample to analyze. Record or upload audio first.",
            score_breakdown={
                "starting_score": 50,
                "deductions": [],
                "positive_adjustments": [],
                "final_score": 50,
            },
        )


class SimulatedAudioAnalyzer(AudioAnalyzer):
    """
    Demo-mode analyzer driven by a single uniform draw.

    The draw r in [0, 1) decides which flags appear:
      r < 0.3         background noise   (8)
      r > 0.7         frequency anomaly  (15)
      0.5 < r < 0.6   prosody            (5)
      r < 0.2         digital artifacts  (12)
    Confidence is 78 + floor(r * 17).
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def analyze(self, has_audio: bool) -> DetectionResult:
        if not has_audio:
            return self.no_audio_result()

        r = self._rng.random()
        flags: list[Flag] = []

        if r < 0.3:
            flags.append(Flag(
                type="Unnatural Background Noise",
                description="Background noise pattern inconsistent with claimed environment",
                severity=SEVERITY_MEDIUM,
                weight=8,
            ))
        if r > 0.7:
            flags.append(Flag(
                type="Frequency Anomalies",
                description="Detected unusual frequency patterns that may indicate synthesis",
                severity=SEVERITY_HIGH,
                weight=15,
            ))
        if 0.5 < r < 0.6:
            flags.append(Flag(
                type="Prosody Inconsistencies",
                description="Speech rhythm and intonation show minor irregularities",
                severity=SEVERITY_LOW,
                weight=5,
            ))
        if r < 0.2:
            flags.append(Flag(
                type="Digital Artifacts Detected",
                description="Found traces of digital manipulation or compression artifacts",
                severity=SEVERITY_HIGH,
                weight=12,
            ))

        score = AUDIO_START_SCORE - sum(f.weight for f in flags)
        final = round_half_up(clamp(score))
        confidence = 78 + math.floor(r * 17)

        return DetectionResult(
            score=final,
            confidence=confidence,
            flags=flags,
            analysis=compose_audio_analysis(final),
            score_breakdown={
                "starting_score": AUDIO_START_SCORE,
                "deductions": [
                    {"flag": f.type, "severity": f.severity, "penalty": -f.weight}
                    for f in flags
                ],
                "positive_adjustments": [],
                "final_score": final,
                "simulated": True,
            },
        )


class DisabledAudioAnalyzer(AudioAnalyzer):
    """Used when the deployment turns simulated audio scoring off."""

    def analyze(self, has_audio: bool) -> DetectionResult:
        raise AudioAnalysisUnavailableError(
            "Audio analysis is disabled (TRUTHSHIELD_AUDIO_MODE=disabled)"
        )


def get_audio_analyzer(
    mode: str = "simulated",
    rng: Optional[random.Random] = None,
) -> AudioAnalyzer:
    """Factory — returns the configured audio analyzer."""
    if mode == "simulated":
        return SimulatedAudioAnalyzer(rng=rng)
    elif mode == "disabled":
        return DisabledAudioAnalyzer()
    else:
        raise ValueError(f"Unknown audio mode: {mode}")
