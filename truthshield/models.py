"""
Detection data structures.

Every detector returns a DetectionResult: a 0-100 credibility score, a
confidence figure describing the strength of the analysis itself, the
flags raised in detection order, and a composed narrative.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

# --- Severity scale (ordinal, display and narrative only) ---
SEVERITY_LOW = "low"
SEVERITY_MEDIUM = "medium"
SEVERITY_HIGH = "high"
SEVERITY_CRITICAL = "critical"

SEVERITIES = (SEVERITY_LOW, SEVERITY_MEDIUM, SEVERITY_HIGH, SEVERITY_CRITICAL)

BASELINE_SCORE = 100


@dataclass(frozen=True)
class Flag:
    """A single concern raised by one detection rule."""
    type: str              # e.g., "Fabricated Claims Pattern"
    description: str       # Human-readable, may embed counts/examples
    severity: str          # "low", "medium", "high", "critical"
    weight: int            # Score deduction attributed to this flag

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class DetectionResult:
    """Output contract shared by the message, fraud and audio detectors."""
    score: int
    confidence: int
    flags: list[Flag]
    analysis: str
    score_breakdown: dict = field(default_factory=dict)

    def count_severity(self, severity: str) -> int:
        return sum(1 for f in self.flags if f.severity == severity)

    def has_severity(self, severity: str) -> bool:
        return any(f.severity == severity for f in self.flags)

    def has_flag(self, flag_type: str) -> bool:
        """True if any flag's type contains the given label."""
        return any(flag_type in f.type for f in self.flags)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "confidence": self.confidence,
            "flags": [f.to_dict() for f in self.flags],
            "analysis": self.analysis,
            "score_breakdown": self.score_breakdown,
        }


def clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (not banker's rounding)."""
    return int(value + 0.5) if value >= 0 else -int(-value + 0.5)
