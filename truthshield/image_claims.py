"""
Image Claims — Verification Suggestions for Described Images

No image analysis is performed. The caller supplies a free-text
description of an image (caption, claim, context) and gets back the
verification steps worth taking plus a coarse risk level.

Triggers are checked in table order; each matching trigger adds its
suggestions and sets the risk level, so a later match overrides an
earlier one.
"""

from __future__ import annotations

from dataclasses import dataclass, field

RISK_LOW = "low"
RISK_MEDIUM = "medium"
RISK_HIGH = "high"

# (keywords, suggestions, risk level)
IMAGE_CLAIM_TRIGGERS: tuple[tuple[tuple[str, ...], tuple[str, ...], str], ...] = (
    (
        ("disaster", "emergency", "breaking"),
        (
            "Use reverse image search (Google, TinEye) to verify when/where photo was taken",
            "Check if major news outlets are reporting the same event",
        ),
        RISK_HIGH,
    ),
    (
        ("politician", "president", "government"),
        (
            "Verify with official government or news sources",
            "Check for image manipulation or out-of-context usage",
        ),
        RISK_HIGH,
    ),
    (
        ("viral", "trending", "share"),
        (
            "Verify the original source before sharing",
            "Check fact-checking websites for debunking",
        ),
        RISK_MEDIUM,
    ),
)

GENERIC_SUGGESTIONS = (
    "Always verify image sources and context",
    "Look for original publication date and location",
)


@dataclass
class ImageClaimReport:
    suggestions: list[str] = field(default_factory=list)
    risk_level: str = RISK_LOW

    def to_dict(self) -> dict:
        return {"suggestions": list(self.suggestions), "risk_level": self.risk_level}


def analyze_image_claims(description: str) -> ImageClaimReport:
    lower = description.lower()
    report = ImageClaimReport()

    for keywords, suggestions, level in IMAGE_CLAIM_TRIGGERS:
        if any(k in lower for k in keywords):
            report.suggestions.extend(suggestions)
            report.risk_level = level

    if not report.suggestions:
        report.suggestions.extend(GENERIC_SUGGESTIONS)
    return report
