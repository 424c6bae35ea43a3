"""
Tests for the message detector — the credibility scoring path.

Every expected score below is 100 minus the weights of the flags the
input is built to trigger, plus any positive credits.
"""

import pytest
from truthshield.detector import engine, score_message, MIN_MESSAGE_LENGTH
from truthshield.models import SEVERITY_CRITICAL, SEVERITY_HIGH, SEVERITY_LOW, SEVERITY_MEDIUM


BREAKING_EXAMPLE = (
    "BREAKING: scientists discovered a secret cure the government is hiding! "
    "Share immediately before it's deleted!!!"
)


class TestInsufficientContent:
    """Text under 10 characters degrades to a fixed result."""

    @pytest.mark.parametrize("text", ["", "short", "123456789"])
    def test_short_text_fixed_result(self, text):
        result = score_message(text)
        assert result.score == 50
        assert result.confidence == 30
        assert len(result.flags) == 1
        assert result.flags[0].type == "Insufficient Content"
        assert result.flags[0].severity == SEVERITY_LOW
        assert result.flags[0].weight == 0

    def test_exactly_min_length_is_scored(self):
        text = "a" * MIN_MESSAGE_LENGTH
        result = score_message(text)
        assert result.score == 100
        assert result.flags == []


class TestCleanText:
    def test_neutral_statement(self):
        result = score_message(
            "The city council meets on Tuesday to discuss the new library budget."
        )
        assert result.score == 100
        assert result.flags == []
        assert result.confidence == 57
        assert result.analysis.startswith("✅ HIGHLY CREDIBLE")
        assert "Still verify" in result.analysis


class TestEndToEnd:
    """The canonical breaking-news example."""

    def test_flags(self):
        result = score_message(BREAKING_EXAMPLE)
        types = [f.type for f in result.flags]
        assert types == ["Fabricated Claims Pattern", "Urgency & Fear Tactics"]

    def test_fabricated_claims_three_hits(self):
        result = score_message(BREAKING_EXAMPLE)
        fabricated = result.flags[0]
        assert fabricated.weight == 36
        assert fabricated.severity == SEVERITY_CRITICAL
        assert "Contains 3 phrase(s)" in fabricated.description

    def test_urgency_two_hits(self):
        result = score_message(BREAKING_EXAMPLE)
        urgency = result.flags[1]
        assert urgency.weight == 18
        assert urgency.severity == SEVERITY_HIGH

    def test_three_exclamations_no_punctuation_flag(self):
        result = score_message(BREAKING_EXAMPLE)
        assert not result.has_flag("Excessive Punctuation")

    def test_score_and_banner(self):
        result = score_message(BREAKING_EXAMPLE)
        assert result.score == 46
        assert result.score < 50
        assert result.analysis.startswith("🛑 VERY HIGH RISK")
        assert "CRITICAL ISSUES DETECTED (1)" in result.analysis
        assert "DO NOT SHARE" in result.analysis

    def test_confidence(self):
        # 50 + min(30, 112/10) + 3 * 2 distinct flag types
        result = score_message(BREAKING_EXAMPLE)
        assert result.confidence == 67

    def test_breakdown_accounts_for_score(self):
        result = score_message(BREAKING_EXAMPLE)
        b = result.score_breakdown
        assert b["starting_score"] == 100
        assert sum(d["penalty"] for d in b["deductions"]) == -54
        assert b["final_score"] == result.score


class TestExtremeEmotions:
    """10 per hit; high severity from three hits."""

    def test_two_hits_medium(self):
        result = score_message("A shocking revelation and a mind-blowing story about the town garden.")
        flag = next(f for f in result.flags if f.type == "Extreme Emotional Manipulation")
        assert flag.weight == 20
        assert flag.severity == SEVERITY_MEDIUM

    def test_three_hits_high(self):
        result = score_message(
            "A shocking revelation, a mind-blowing and jaw-dropping story about the town garden."
        )
        flag = next(f for f in result.flags if f.type == "Extreme Emotional Manipulation")
        assert flag.weight == 30
        assert flag.severity == SEVERITY_HIGH


class TestVagueAuthority:
    """Flags only with 2+ hits and no specific source."""

    TWO_HITS = "Experts say this diet works and studies show it helps people lose weight quickly."

    def test_two_hits_without_source_flags(self):
        result = score_message(self.TWO_HITS)
        flag = next(f for f in result.flags if f.type == "Vague Authority Claims")
        assert flag.weight == 22
        assert flag.severity == SEVERITY_HIGH

    def test_two_hits_with_url_suppressed(self):
        result = score_message(
            "Experts say this diet works and studies show it helps. "
            "See https://example.org/report for details."
        )
        assert not result.has_flag("Vague Authority Claims")

    def test_single_hit_not_flagged(self):
        result = score_message("Experts say this diet works for weight loss.")
        assert not result.has_flag("Vague Authority Claims")


class TestHealthMisinformation:
    def test_miracle_cure_is_critical(self):
        result = score_message("This miracle cure works wonders for everybody.")
        flag = next(f for f in result.flags if "Health Misinformation" in f.type)
        assert flag.severity == SEVERITY_CRITICAL
        assert flag.weight == 20
        assert result.score == 80

    def test_health_warning_in_analysis(self):
        result = score_message("This miracle cure works wonders for everybody.")
        assert "HEALTH WARNING" in result.analysis


class TestConspiracyAndPolitical:
    TEXT = "Wake up sheeple, the rigged election was a false flag."

    def test_score(self):
        # conspiracy 2 x 14 + political 2 x 18
        result = score_message(self.TEXT)
        assert result.score == 36

    def test_conspiracy_two_hits_critical(self):
        result = score_message(self.TEXT)
        flag = next(f for f in result.flags if f.type == "Conspiracy Theory Rhetoric")
        assert flag.severity == SEVERITY_CRITICAL

    def test_analysis_addenda(self):
        result = score_message(self.TEXT)
        assert "CRITICAL ISSUES DETECTED (2)" in result.analysis
        assert "POLITICAL CONTENT" in result.analysis
        assert "conspiracy theory rhetoric" in result.analysis


class TestStructuralChecks:
    def test_capitalization(self):
        result = score_message("THIS IS ABSOLUTELY OUTRAGEOUS AND NOBODY IS TALKING ABOUT IT")
        flag = next(f for f in result.flags if f.type == "Excessive Capitalization")
        assert flag.weight == 10
        assert flag.severity == SEVERITY_MEDIUM

    def test_short_caps_not_flagged(self):
        # Ratio is high but length is under 31
        result = score_message("STOP RIGHT THERE NOW")
        assert not result.has_flag("Excessive Capitalization")

    def test_five_exclamations_low(self):
        result = score_message("Look at this now!!!!! Unbelievable")
        flag = next(f for f in result.flags if f.type == "Excessive Punctuation")
        assert flag.weight == 7
        assert flag.severity == SEVERITY_LOW

    def test_seven_exclamations_medium(self):
        result = score_message("Look at this now!!!!!!! Unbelievable")
        flag = next(f for f in result.flags if f.type == "Excessive Punctuation")
        assert flag.severity == SEVERITY_MEDIUM

    def test_question_marks_count(self):
        result = score_message("Is it real??? Is it fake??? Who knows???")
        assert result.has_flag("Excessive Punctuation")

    def test_unsupported_claims(self):
        result = score_message(
            "Research has found that drinking water in the morning improves memory, "
            "and this fact is now well known among health enthusiasts."
        )
        flag = next(f for f in result.flags if f.type == "Unsupported Factual Claims")
        assert flag.weight == 16
        assert flag.severity == SEVERITY_HIGH
        assert result.score == 84

    def test_unsupported_claims_suppressed_by_citation(self):
        result = score_message(
            "Research published in the Journal of Nutrition found that drinking water "
            "in the morning improves memory in adults over sixty."
        )
        assert not result.has_flag("Unsupported Factual Claims")
        assert result.score == 100

    def test_absolute_statements(self):
        result = score_message(
            "You always say never, everyone knows all of it, and every time it happens."
        )
        flag = next(f for f in result.flags if f.type == "Absolute Statements")
        assert flag.weight == 8

    def test_sensational_numbers(self):
        result = score_message("This product improved results by 1000% for our customers.")
        flag = next(f for f in result.flags if f.type == "Sensationalist Statistics")
        assert flag.weight == 9


class TestPositiveIndicators:
    def test_credits_capped_at_100(self):
        # clickbait -8, then +5 balanced, +5 uncertainty (capped)
        result = score_message(
            "This one trick might help, although results could vary from person to person."
        )
        assert len(result.flags) == 1
        assert result.flags[0].type == "Clickbait Patterns"
        assert result.score == 100
        indicators = [a["indicator"] for a in result.score_breakdown["positive_adjustments"]]
        assert indicators == ["balancedLanguage", "acknowledgesUncertainty"]

    def test_source_credit_recovers_deduction(self):
        # capitalization -10, source +8
        result = score_message(
            "READ THE FULL REPORT HERE: https://example.org/annual-report"
        )
        assert result.has_flag("Excessive Capitalization")
        assert result.score == 98


class TestInvariants:
    INPUTS = [
        "",
        "hello",
        BREAKING_EXAMPLE,
        "A calm, sourced note: https://example.org, however results may vary and could change.",
        (
            "WAKE UP SHEEPLE!!!!!!! The deep state and illuminati cover up the miracle cure, "
            "big pharma hiding the truth! Rigged election, voter fraud, crisis actor, false flag! "
            "Share immediately before it's deleted, act now, urgent warning! "
            "Scientists discovered a secret cure, leaked document, insider reveals! "
            "Doctors hate this one simple trick, you won't believe what happened next. "
            "Experts say, studies show, sources say. 100% effective, causes cancer. "
            "Millions of people always know, never forget, everyone, all, every."
        ),
    ]

    @pytest.mark.parametrize("text", INPUTS)
    def test_score_and_confidence_in_range(self, text):
        result = score_message(text)
        assert 0 <= result.score <= 100
        assert 0 <= result.confidence <= 100

    def test_heavy_input_floors_at_zero(self):
        result = score_message(self.INPUTS[-1])
        assert result.score == 0
        assert result.confidence == 95
        assert result.analysis.startswith("🛑 CRITICAL ALERT")

    @pytest.mark.parametrize("text", INPUTS)
    def test_idempotent(self, text):
        assert score_message(text).to_dict() == score_message(text).to_dict()

    def test_flag_order_is_detection_order(self):
        result = score_message(self.INPUTS[-1])
        types = [f.type for f in result.flags]
        assert types.index("Fabricated Claims Pattern") < types.index("Urgency & Fear Tactics")
        assert types.index("CRITICAL: Health Misinformation") < types.index("Clickbait Patterns")
        assert types.index("Clickbait Patterns") < types.index("Excessive Punctuation")


class TestPatternIntrospection:
    def test_message_domain(self):
        patterns = engine.get_patterns("message")
        keys = [p["key"] for p in patterns]
        assert keys[:8] == [
            "fabricatedClaims", "extremeEmotions", "urgencyTactics",
            "conspiracyLanguage", "vagueAuthority", "politicalDisinfo",
            "healthDisinfo", "clickbait",
        ]
        assert all(p["domain"] == "message" for p in patterns)

    def test_all_domain_covers_both(self):
        domains = {p["domain"] for p in engine.get_patterns("all")}
        assert domains == {"message", "fraud"}
