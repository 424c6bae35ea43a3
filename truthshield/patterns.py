"""
Pattern Tables — Fixed Detection Vocabulary

The credibility and fraud detectors are driven entirely by the tables in
this module. Each phrase category is a tagged variant carrying its own
phrase list, weight rule and severity rule, so the scoring loop in
detector.py never needs to change when a category is added or retuned.

Tables are module-level constants built from immutable tuples. They are
not modified at runtime.

Structural checks (capitalization, punctuation, citations, numbers) are
expressed the same way: a named variant with a detect() callable that
either returns a Flag or None.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional

from truthshield.models import (
    Flag,
    SEVERITY_CRITICAL,
    SEVERITY_HIGH,
    SEVERITY_LOW,
    SEVERITY_MEDIUM,
)

# --- Core Version (stamped on /health and /patterns) ---
CORE_VERSION = "1.0.0"


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class PhraseCategory:
    """
    A named list of literal phrases matched case-insensitively.

    The hit count is the number of distinct phrases contained in the
    text. Weight is either per-hit (scaled by the hit count) or flat
    (applied once regardless of hits).

    severity_tiers is an ordered sequence of (min_hits, severity); the
    first tier whose threshold is met wins.
    """
    key: str
    flag_type: str
    phrases: tuple[str, ...]
    description: str                    # str.format with {count} and {example}
    severity_tiers: tuple[tuple[int, str], ...]
    per_hit_weight: int = 0
    flat_weight: int = 0
    # Minimum number of hits before a flag is raised at all
    min_hits: int = 1
    # Suppress entirely when the text carries a specific source marker
    suppressed_by_source: bool = False
    # Only flag when at least one of these categories also had hits
    requires_any: tuple[str, ...] = ()

    def matches(self, lower_text: str) -> list[str]:
        """Return the phrases of this table found in already-lowered text."""
        return [p for p in self.phrases if p in lower_text]

    def weight_for(self, hits: int) -> int:
        if self.flat_weight:
            return self.flat_weight
        return hits * self.per_hit_weight

    def severity_for(self, hits: int) -> str:
        for threshold, severity in self.severity_tiers:
            if hits >= threshold:
                return severity
        return self.severity_tiers[-1][1]

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "type": self.flag_type,
            "phrases": list(self.phrases),
            "weight_rule": "flat" if self.flat_weight else "per_hit",
            "weight": self.flat_weight or self.per_hit_weight,
            "min_hits": self.min_hits,
            "severities": sorted({s for _, s in self.severity_tiers}),
        }


@dataclass(frozen=True)
class TextContext:
    """Precomputed views of one input, shared by every structural check."""
    text: str
    lower: str
    length: int
    has_specific_source: bool

    @classmethod
    def build(cls, text: str) -> "TextContext":
        return cls(
            text=text,
            lower=text.lower(),
            length=len(text),
            has_specific_source=has_specific_source(text),
        )


@dataclass(frozen=True)
class StructuralCheck:
    """A non-phrase rule: detect() returns a Flag or None."""
    key: str
    flag_type: str
    detect: Callable[[TextContext], Optional[Flag]]

    def to_dict(self) -> dict:
        return {"key": self.key, "type": self.flag_type, "weight_rule": "flat"}


# ============================================================
# GENERAL MISINFORMATION TABLES
# ============================================================

MESSAGE_CATEGORIES: tuple[PhraseCategory, ...] = (
    PhraseCategory(
        key="fabricatedClaims",
        flag_type="Fabricated Claims Pattern",
        phrases=(
            "government hiding", "government is hiding", "secret cure",
            "they discovered", "scientists discovered", "new study reveals",
            "recent research shows", "experts confirm", "leaked document",
            "insider reveals", "confidential report", "banned in",
            "suppressed by", "censored information",
        ),
        description=(
            'Contains {count} phrase(s) commonly found in fabricated news '
            '(e.g., "{example}")'
        ),
        severity_tiers=((3, SEVERITY_CRITICAL), (2, SEVERITY_HIGH), (1, SEVERITY_MEDIUM)),
        per_hit_weight=12,
    ),
    PhraseCategory(
        key="extremeEmotions",
        flag_type="Extreme Emotional Manipulation",
        phrases=(
            "horrifying truth", "shocking revelation", "you won't believe",
            "mind-blowing", "jaw-dropping", "absolutely devastating",
            "miracle breakthrough", "game-changing", "life-changing",
            "terrifying reality", "scary truth", "frightening discovery",
        ),
        description=(
            "Uses {count} sensationalist phrase(s) designed to bypass "
            "critical thinking"
        ),
        severity_tiers=((3, SEVERITY_HIGH), (1, SEVERITY_MEDIUM)),
        per_hit_weight=10,
    ),
    PhraseCategory(
        key="urgencyTactics",
        flag_type="Urgency & Fear Tactics",
        phrases=(
            "act now", "share immediately", "before it's deleted",
            "being removed", "they're hiding this", "won't see this again",
            "limited time", "urgent warning", "breaking news", "just in",
            "developing story", "share before", "hurry", "don't wait",
            "time sensitive",
        ),
        description=(
            "Pressures immediate action with {count} urgency phrase(s) - "
            "common manipulation technique"
        ),
        severity_tiers=((3, SEVERITY_CRITICAL), (2, SEVERITY_HIGH), (1, SEVERITY_MEDIUM)),
        per_hit_weight=9,
    ),
    PhraseCategory(
        key="conspiracyLanguage",
        flag_type="Conspiracy Theory Rhetoric",
        phrases=(
            "wake up", "sheeple", "open your eyes", "think for yourself",
            "mainstream media lies", "fake news media", "deep state",
            "new world order", "illuminati", "they don't want you to know",
            "cover up", "conspiracy", "hidden agenda", "puppet masters",
            "controlled by", "brainwashed",
        ),
        description=(
            "Contains {count} conspiracy theory indicator(s) - highly "
            "unreliable pattern"
        ),
        severity_tiers=((2, SEVERITY_CRITICAL), (1, SEVERITY_HIGH)),
        per_hit_weight=14,
    ),
    PhraseCategory(
        key="vagueAuthority",
        flag_type="Vague Authority Claims",
        phrases=(
            "experts say", "studies show", "research proves",
            "scientists warn", "doctors recommend", "they say",
            "some people", "many believe", "it is said", "rumor has it",
            "word on the street", "sources say", "anonymous source",
            "undisclosed", "confidential source",
        ),
        description=(
            "Makes {count} unverifiable claim(s) without citing specific "
            "sources or studies"
        ),
        severity_tiers=((1, SEVERITY_HIGH),),
        per_hit_weight=11,
        min_hits=2,
        suppressed_by_source=True,
    ),
    PhraseCategory(
        key="politicalDisinfo",
        flag_type="Political Disinformation Markers",
        phrases=(
            "rigged election", "voter fraud", "stolen votes", "fake ballots",
            "deep state operative", "crisis actor", "false flag",
            "government experiment", "controlled opposition",
        ),
        description=(
            "Contains {count} phrase(s) associated with documented "
            "disinformation campaigns"
        ),
        severity_tiers=((1, SEVERITY_CRITICAL),),
        per_hit_weight=18,
    ),
    PhraseCategory(
        key="healthDisinfo",
        flag_type="CRITICAL: Health Misinformation",
        phrases=(
            "miracle cure", "doctors hate this", "big pharma hiding",
            "natural remedy cures", "pharmaceutical conspiracy",
            "vaccine injury", "toxins in", "chemical in", "causes cancer",
            "prevents all diseases", "100% effective",
            "government poisoning", "deadly ingredient",
        ),
        description=(
            "Contains {count} medically dangerous claim(s) - could cause "
            "serious harm"
        ),
        severity_tiers=((1, SEVERITY_CRITICAL),),
        per_hit_weight=20,
    ),
    PhraseCategory(
        key="clickbait",
        flag_type="Clickbait Patterns",
        phrases=(
            "you won't believe", "what happened next", "number 7 will",
            "this one trick", "hate him", "one simple trick",
            "doctors hate", "trainers hate", "this weird trick",
            "shocking result", "incredible transformation",
        ),
        description="Uses {count} clickbait phrase(s) - reduces credibility",
        severity_tiers=((1, SEVERITY_MEDIUM),),
        per_hit_weight=8,
    ),
)


# ============================================================
# FRAUD TABLES
# ============================================================

FRAUD_CATEGORIES: tuple[PhraseCategory, ...] = (
    PhraseCategory(
        key="investmentScams",
        flag_type="Investment Scam Indicators",
        phrases=(
            "guaranteed returns", "risk-free", "double your money",
            "get rich quick", "financial freedom", "passive income",
            "limited spots", "exclusive opportunity", "insider trading",
            "secret formula", "tested strategy", "autopilot income",
        ),
        description=(
            "Contains {count} phrase(s) promising unrealistic returns - "
            "major red flag"
        ),
        severity_tiers=((1, SEVERITY_CRITICAL),),
        per_hit_weight=20,
    ),
    PhraseCategory(
        key="phishingPhrases",
        flag_type="Phishing Attack Detected",
        phrases=(
            "verify your account", "suspended account", "unusual activity",
            "confirm your identity", "update your information",
            "click here immediately", "your account will be closed",
            "security alert", "unauthorized access", "verify now",
            "action required", "confirm payment",
        ),
        description=(
            "{count} phishing tactic(s) detected - attempting to steal "
            "credentials"
        ),
        severity_tiers=((1, SEVERITY_CRITICAL),),
        per_hit_weight=18,
    ),
    PhraseCategory(
        key="sensitiveRequests",
        flag_type="🚨 REQUESTS SENSITIVE INFORMATION",
        phrases=(
            "social security", "ssn", "credit card", "bank account",
            "routing number", "password", "pin number", "cvv",
            "card number", "security code", "mother's maiden",
            "date of birth",
        ),
        description=(
            "Asks for {count} type(s) of personal/financial data - NEVER "
            "share this info"
        ),
        severity_tiers=((1, SEVERITY_CRITICAL),),
        flat_weight=25,
    ),
    PhraseCategory(
        key="romanceScams",
        flag_type="Romance Scam Pattern",
        phrases=(
            "my love", "my dear", "stranded", "hospital emergency",
            "wire transfer", "western union", "gift card", "help me please",
            "send money", "financial emergency", "visa problems",
        ),
        description="{count} indicators of romance/relationship scam tactics",
        severity_tiers=((1, SEVERITY_HIGH),),
        per_hit_weight=12,
        min_hits=2,
    ),
    PhraseCategory(
        key="prizeScams",
        flag_type="Prize/Lottery Scam",
        phrases=(
            "you've won", "claim your prize", "lottery winner",
            "congratulations you", "selected winner", "tax fee",
            "processing fee", "claim fee", "transfer fee", "you're a winner",
        ),
        description=(
            "{count} lottery scam marker(s) - you can't win what you didn't "
            "enter"
        ),
        severity_tiers=((1, SEVERITY_HIGH),),
        per_hit_weight=15,
    ),
    PhraseCategory(
        key="techSupportScams",
        flag_type="Tech Support Scam",
        phrases=(
            "virus detected", "computer infected", "microsoft support",
            "apple support", "refund owed", "call immediately",
            "tech support", "system alert", "infected device",
        ),
        description=(
            "{count} tech support scam indicator(s) - legitimate companies "
            "don't contact you this way"
        ),
        severity_tiers=((1, SEVERITY_HIGH),),
        per_hit_weight=14,
    ),
    PhraseCategory(
        key="cryptoScams",
        flag_type="Cryptocurrency Scam",
        phrases=(
            "crypto giveaway", "send bitcoin", "double your crypto",
            "elon musk", "free bitcoin", "cryptocurrency investment",
            "send eth", "wallet address", "guaranteed crypto",
            "bitcoin doubler",
        ),
        description=(
            "{count} crypto scam pattern(s) - never send crypto to strangers"
        ),
        severity_tiers=((1, SEVERITY_CRITICAL),),
        per_hit_weight=16,
    ),
    PhraseCategory(
        key="suspiciousGrammar",
        flag_type="Suspicious Language Patterns",
        phrases=(
            "kindly", "do the needful", "revert back", "prepone",
            "regards to", "looking forward for", "same will be",
        ),
        description="{count} unusual phrase(s) common in scam communications",
        severity_tiers=((1, SEVERITY_MEDIUM),),
        per_hit_weight=8,
    ),
    PhraseCategory(
        key="impersonation",
        flag_type="🚨 IMPERSONATION ATTEMPT",
        phrases=(
            "irs", "social security administration", "amazon customer",
            "paypal security", "bank of america", "wells fargo", "federal",
            "government agency",
        ),
        description="Impersonating legitimate organization - report immediately",
        severity_tiers=((1, SEVERITY_CRITICAL),),
        flat_weight=20,
        requires_any=("phishingPhrases", "sensitiveRequests"),
    ),
)


# ============================================================
# SOURCE AND STRUCTURE MARKERS
# ============================================================

SPECIFIC_SOURCE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"https?://[^\s]+"),                                 # URLs
    re.compile(r"doi:\s*10\.\d+", re.IGNORECASE),                   # DOI numbers
    re.compile(r"according to (dr\.|professor|the|a specific)", re.IGNORECASE),
    re.compile(r"(university of|institute of|journal of)", re.IGNORECASE),
    re.compile(r"published in", re.IGNORECASE),
    re.compile(r"\b\d{4}\b.*study", re.IGNORECASE),                 # Year + study
)

FACTUAL_CLAIM_INDICATORS: tuple[str, ...] = (
    "fact", "proven", "research", "study", "evidence", "data shows",
    "statistics", "according to", "found that", "demonstrates",
)

ABSOLUTE_PAIRS: tuple[tuple[str, str], ...] = (
    ("always", "never"),
    ("everyone", "no one"),
    ("100%", "guaranteed"),
    ("all", "none"),
    ("every", "any"),
)

SENSATIONAL_NUMBER_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\d+0{2,}%"),                                       # 1000%, 10000%
    re.compile(r"\d{4,}x"),                                         # 1000x
    re.compile(r"millions? of people", re.IGNORECASE),
    re.compile(r"billions? of", re.IGNORECASE),
    re.compile(r"100% (effective|proven|guaranteed)", re.IGNORECASE),
)

BALANCED_PHRASES: tuple[str, ...] = (
    "however", "although", "on the other hand", "conversely", "while",
)

UNCERTAINTY_PHRASES: tuple[str, ...] = (
    "may", "might", "could", "possibly", "potentially", "suggests",
)

_UPPER = re.compile(r"[A-Z]")
_LETTER = re.compile(r"[a-zA-Z]")


def has_specific_source(text: str) -> bool:
    """True if the text carries a URL, DOI, named institution or similar citation."""
    return any(p.search(text) for p in SPECIFIC_SOURCE_PATTERNS)


# ============================================================
# STRUCTURAL CHECKS (message detector)
# ============================================================

def _check_capitalization(ctx: TextContext) -> Optional[Flag]:
    caps = len(_UPPER.findall(ctx.text))
    letters = len(_LETTER.findall(ctx.text))
    ratio = caps / letters if letters else 0.0
    if ratio > 0.3 and ctx.length > 30:
        return Flag(
            type="Excessive Capitalization",
            description=(
                f"{round(ratio * 100)}% capitalization - manipulative "
                "formatting tactic"
            ),
            severity=SEVERITY_MEDIUM,
            weight=10,
        )
    return None


def _check_punctuation(ctx: TextContext) -> Optional[Flag]:
    exclamations = ctx.text.count("!")
    questions = ctx.text.count("?")
    if exclamations > 4 or exclamations + questions > 8:
        return Flag(
            type="Excessive Punctuation",
            description=(
                "Overuse of exclamation marks/questions creates false urgency"
            ),
            severity=SEVERITY_MEDIUM if exclamations > 6 else SEVERITY_LOW,
            weight=7,
        )
    return None


def _check_unsupported_claims(ctx: TextContext) -> Optional[Flag]:
    has_claim = any(ind in ctx.lower for ind in FACTUAL_CLAIM_INDICATORS)
    if has_claim and not ctx.has_specific_source and ctx.length > 100:
        return Flag(
            type="Unsupported Factual Claims",
            description=(
                "Makes factual claims without providing verifiable sources "
                "or citations"
            ),
            severity=SEVERITY_HIGH,
            weight=16,
        )
    return None


def _check_absolutes(ctx: TextContext) -> Optional[Flag]:
    pairs_hit = sum(
        1 for first, second in ABSOLUTE_PAIRS
        if first in ctx.lower or second in ctx.lower
    )
    if pairs_hit >= 3:
        return Flag(
            type="Absolute Statements",
            description=(
                "Uses absolute language (always/never/everyone) - "
                "oversimplification red flag"
            ),
            severity=SEVERITY_MEDIUM,
            weight=8,
        )
    return None


def _check_sensational_numbers(ctx: TextContext) -> Optional[Flag]:
    if any(p.search(ctx.text) for p in SENSATIONAL_NUMBER_PATTERNS):
        return Flag(
            type="Sensationalist Statistics",
            description=(
                "Uses exaggerated or unverifiable statistics for shock value"
            ),
            severity=SEVERITY_MEDIUM,
            weight=9,
        )
    return None


MESSAGE_CHECKS: tuple[StructuralCheck, ...] = (
    StructuralCheck("capitalization", "Excessive Capitalization", _check_capitalization),
    StructuralCheck("punctuation", "Excessive Punctuation", _check_punctuation),
    StructuralCheck("unsupportedClaims", "Unsupported Factual Claims", _check_unsupported_claims),
    StructuralCheck("absoluteStatements", "Absolute Statements", _check_absolutes),
    StructuralCheck("sensationalNumbers", "Sensationalist Statistics", _check_sensational_numbers),
)


# ============================================================
# POSITIVE INDICATORS (message detector only)
# ============================================================

@dataclass(frozen=True)
class PositiveIndicator:
    """A bounded credit applied after all deductions."""
    key: str
    bonus: int
    applies: Callable[[TextContext], bool]


POSITIVE_INDICATORS: tuple[PositiveIndicator, ...] = (
    PositiveIndicator("specificSource", 8, lambda ctx: ctx.has_specific_source),
    PositiveIndicator(
        "balancedLanguage", 5,
        lambda ctx: any(p in ctx.lower for p in BALANCED_PHRASES),
    ),
    PositiveIndicator(
        "acknowledgesUncertainty", 5,
        lambda ctx: sum(1 for p in UNCERTAINTY_PHRASES if p in ctx.lower) >= 2,
    ),
)
