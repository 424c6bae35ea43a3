"""
Narrative — Analysis Text and Display Helpers

Builds the natural-language analysis attached to every DetectionResult,
plus the display-only derivations (recommendations, risk labels,
safeguards, audio characteristics) that the UI modules render next to a
score. Nothing here changes a score.
"""

from __future__ import annotations

from dataclasses import dataclass

from truthshield.models import DetectionResult, Flag, SEVERITY_CRITICAL, SEVERITY_HIGH


# ============================================================
# MESSAGE ANALYSIS
# ============================================================

# (minimum score, opening line), checked top to bottom
MESSAGE_OPENERS: tuple[tuple[int, str], ...] = (
    (90, "✅ HIGHLY CREDIBLE: This message appears trustworthy with minimal red flags detected. "),
    (80, "✅ GENERALLY CREDIBLE: This message is largely trustworthy with only minor concerns. "),
    (70, "⚠️ MODERATELY TRUSTWORTHY: This message has some concerns but isn't necessarily false. "
         "Verify key claims before sharing. "),
    (60, "⚠️ MULTIPLE CONCERNS: This message exhibits several warning signs. "
         "Exercise significant caution. "),
    (50, "🚨 HIGH RISK: This message shows multiple misinformation indicators. "
         "High skepticism advised. "),
    (30, "🛑 VERY HIGH RISK: This message shows extensive misinformation patterns. "
         "Likely false or manipulated content. "),
    (0, "🛑 CRITICAL ALERT: This message is almost certainly misinformation. "
        "Do NOT share or act on this content. "),
)

HEALTH_WARNING = (
    "⚕️ HEALTH WARNING: Never make medical decisions based on unverified online "
    "content. Consult qualified healthcare professionals. "
)
POLITICAL_NOTE = (
    "🗳️ POLITICAL CONTENT: Verify with multiple reputable news sources and "
    "official government channels. "
)
CONSPIRACY_CAVEAT = (
    "This content uses conspiracy theory rhetoric. Extraordinary claims "
    "require extraordinary evidence. "
)

INSUFFICIENT_CONTENT_ANALYSIS = (
    "Message is too brief for comprehensive analysis. Please provide more context."
)


def _opener(score: int, openers: tuple[tuple[int, str], ...]) -> str:
    for threshold, line in openers:
        if score >= threshold:
            return line
    return openers[-1][1]


def compose_message_analysis(
    score: int,
    flags: list[Flag],
    hits: dict[str, int],
) -> str:
    """
    Compose the credibility narrative.

    Order: score-banded opener, critical/high warning clause,
    domain addenda (health, political, conspiracy), closing recommendation.
    """
    parts = [_opener(score, MESSAGE_OPENERS)]

    critical = sum(1 for f in flags if f.severity == SEVERITY_CRITICAL)
    high = sum(1 for f in flags if f.severity == SEVERITY_HIGH)
    if critical > 0:
        parts.append(
            f"CRITICAL ISSUES DETECTED ({critical}): This content may be dangerous. "
        )
    elif high >= 2:
        parts.append("Multiple high-priority concerns identified. ")

    if hits.get("healthDisinfo", 0) > 0:
        parts.append(HEALTH_WARNING)
    if hits.get("politicalDisinfo", 0) > 0:
        parts.append(POLITICAL_NOTE)
    if hits.get("conspiracyLanguage", 0) > 0:
        parts.append(CONSPIRACY_CAVEAT)

    if score < 60:
        parts.append(
            "⛔ Recommendation: DO NOT SHARE this content without verification "
            "from credible sources."
        )
    elif score < 80:
        parts.append(
            "⚠️ Recommendation: Cross-reference with established fact-checking "
            "organizations before sharing."
        )
    else:
        parts.append(
            "ℹ️ Recommendation: Still verify important claims through multiple "
            "independent sources."
        )
    return "".join(parts)


# ============================================================
# FRAUD ANALYSIS
# ============================================================

FRAUD_OPENERS: tuple[tuple[int, str], ...] = (
    (85, "✅ APPEARS SAFE: This content shows minimal fraud indicators. "
         "Standard caution advised. "),
    (70, "⚠️ SOME CONCERNS: This content has some suspicious characteristics. "
         "Exercise caution. "),
    (50, "🚨 HIGH RISK: Multiple fraud indicators detected. Very likely a scam attempt. "),
    (30, "🛑 EXTREME DANGER: Strong fraud pattern match. Almost certainly a scam. "),
    (0, "🛑 CONFIRMED SCAM PATTERN: This is definitely a fraud attempt. DO NOT ENGAGE. "),
)

SENSITIVE_INFO_CAUTION = (
    "🔐 Legitimate organizations NEVER ask for passwords, PINs, or full "
    "account numbers via message. "
)


def compose_fraud_analysis(
    score: int,
    flags: list[Flag],
    hits: dict[str, int],
) -> str:
    """Compose the fraud narrative: opener, critical warning, sensitive-info line, action."""
    parts = [_opener(score, FRAUD_OPENERS)]

    critical = sum(1 for f in flags if f.severity == SEVERITY_CRITICAL)
    if critical > 0:
        parts.append(
            f"⛔ CRITICAL WARNING: {critical} critical threat(s) detected. "
            "NEVER share personal/financial information. "
        )

    if hits.get("sensitiveRequests", 0) > 0:
        parts.append(SENSITIVE_INFO_CAUTION)

    if score < 60:
        parts.append(
            "📞 ACTION: Block sender, delete message, and report to authorities "
            "if you've shared any information."
        )
    else:
        parts.append(
            "⚠️ Verify sender identity through official channels before responding."
        )
    return "".join(parts)


# ============================================================
# AUDIO ANALYSIS
# ============================================================

AUDIO_OPENERS: tuple[tuple[int, str], ...] = (
    (80, "Audio analysis indicates authentic speech with natural characteristics. "),
    (60, "Some irregularities detected that warrant further verification. "),
    (0, "Multiple indicators suggest potential audio manipulation or synthesis. "),
)


def compose_audio_analysis(score: int) -> str:
    return (
        _opener(score, AUDIO_OPENERS)
        + "Consider the context and source when evaluating authenticity."
    )


# ============================================================
# DISPLAY HELPERS (derived, never fed back into scoring)
# ============================================================

def message_recommendations(result: DetectionResult, limit: int = 5) -> list[str]:
    """Recommendation lines shown under a message score."""
    score = result.score
    recs: list[str] = []
    if score >= 90:
        recs += [
            "This message appears highly credible",
            "Still verify important claims before making decisions",
        ]
    elif score >= 80:
        recs += [
            "Generally trustworthy but verify any important claims",
            "Check for original sources if sharing widely",
        ]
    elif score >= 70:
        recs += [
            "Moderately trustworthy - verify key claims before sharing",
            "Cross-check important facts with reputable sources",
        ]
    elif score >= 60:
        recs += [
            "Several concerns detected - exercise caution",
            "Cross-reference claims with established fact-checking sources",
        ]
    elif score < 50:
        recs += [
            "🚨 DO NOT share this message - high risk of misinformation",
            "Report to platform moderators if received as spam",
        ]
    else:
        recs += [
            "⚠️ High risk - verify before trusting or sharing",
            "Be very cautious about sharing until verification is complete",
        ]

    recs += [
        "Look for original sources and primary documentation",
        "Check reputable news outlets for similar stories",
        "Consider the sender's credibility and track record",
    ]

    if result.has_severity(SEVERITY_CRITICAL):
        recs.insert(0, "⚠️ CRITICAL: This content may be dangerous - verify before acting")

    return recs[:limit]


FRAUD_RISK_LEVELS: tuple[tuple[int, str], ...] = (
    (85, "Appears Safe"),
    (70, "Some Concerns"),
    (50, "High Risk"),
    (30, "Very High Risk"),
    (0, "CRITICAL RISK"),
)


def fraud_risk_level(score: int) -> str:
    return _opener(score, FRAUD_RISK_LEVELS)


def fraud_safeguards(result: DetectionResult, limit: int = 6) -> list[str]:
    """Safeguard lines shown under a fraud score."""
    score = result.score
    if score >= 85:
        lines = [
            "✅ Minimal fraud indicators detected",
            "Still verify sender through official channels if requesting action",
            "Never share sensitive information via unsolicited messages",
        ]
    elif score >= 70:
        lines = [
            "⚠️ Some concerns detected - proceed with caution",
            "Independently verify sender identity before responding",
            "Never share sensitive information via email or messages",
        ]
    elif score >= 50:
        lines = [
            "🚨 HIGH RISK - Exercise extreme caution",
            "Do NOT share any personal or financial information",
            "Verify through official channels only",
        ]
    else:
        lines = [
            "🛑 STOP - This is almost certainly a scam",
            "Do NOT respond or engage in any way",
            "Do NOT share ANY personal or financial information",
            "Block sender immediately and report as fraud",
        ]

    lines += [
        "Consult with trusted advisors before taking action",
        "Report suspicious content to FTC.gov or IC3.gov",
        "Check with the real company through official contacts",
    ]
    return lines[:limit]


@dataclass(frozen=True)
class AudioCharacteristic:
    label: str
    value: str
    status: str  # "pass", "warning", "fail"

    def to_dict(self) -> dict:
        return {"label": self.label, "value": self.value, "status": self.status}


def audio_characteristics(result: DetectionResult) -> list[AudioCharacteristic]:
    """Per-factor readout for the voice module."""
    score = result.score
    if score >= 80:
        authenticity = AudioCharacteristic("Voice Authenticity", "Genuine", "pass")
    elif score >= 60:
        authenticity = AudioCharacteristic("Voice Authenticity", "Uncertain", "warning")
    else:
        authenticity = AudioCharacteristic("Voice Authenticity", "Suspicious", "fail")

    def factor(label, marker, hit_value, clean_value, hit_status="warning"):
        if result.has_flag(marker):
            return AudioCharacteristic(label, hit_value, hit_status)
        return AudioCharacteristic(label, clean_value, "pass")

    return [
        authenticity,
        factor("Background Noise", "Background", "Anomalies Detected", "Natural"),
        factor("Frequency Analysis", "Frequency", "Irregular Patterns", "Normal Range"),
        factor("Speech Prosody", "Prosody", "Minor Inconsistencies", "Consistent"),
        factor("Digital Artifacts", "Artifact", "Detected", "None Found", hit_status="fail"),
    ]


def audio_recommendations(result: DetectionResult, limit: int = 5) -> list[str]:
    score = result.score
    if score >= 80:
        recs = [
            "✓ Audio appears authentic based on analysis factors",
            "✓ No evidence of voice cloning or deepfake detected",
            "✓ Natural speech patterns verified",
        ]
    elif score >= 60:
        recs = [
            "⚠ Some irregularities detected - verify source",
            "Cross-reference with known authentic recordings",
            "Consider context and whether claims are realistic",
        ]
    else:
        recs = [
            "🚨 Multiple manipulation indicators detected",
            "HIGH RISK - Potential deepfake or voice cloning",
            "Do NOT act on information without verification",
        ]
    recs += [
        "Always consider context in addition to audio analysis",
        "Verify important claims through multiple channels",
    ]
    return recs[:limit]
