"""
API Integration Tests — Endpoint Verification

Tests every public API endpoint using FastAPI's TestClient.

These tests catch:
  - Schema mismatches (response model vs actual data)
  - Route registration issues (e.g. /challenges/random vs /challenges/{id})
  - Error mapping regressions (404 / 422)
  - Response format regressions
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient


# --- Fixtures ---

@pytest.fixture(scope="module")
def client():
    """Create a test client for the TruthShield API."""
    from api.main import app
    with TestClient(app) as c:
        yield c


BREAKING_EXAMPLE = (
    "BREAKING: scientists discovered a secret cure the government is hiding! "
    "Share immediately before it's deleted!!!"
)


# ============================================================
# HEALTH & META
# ============================================================

class TestHealth:
    def test_health_returns_200(self, client):
        r = client.get("/health")
        assert r.status_code == 200

    def test_health_fields(self, client):
        data = client.get("/health").json()
        assert data["status"] == "operational"
        assert data["challenges"] == 20
        assert "core_version" in data
        assert "audio_mode" in data

    def test_core_version_from_pattern_tables(self, client):
        from truthshield.patterns import CORE_VERSION

        r = client.get("/health")
        assert r.json()["core_version"] == CORE_VERSION
        assert r.headers["X-Core-Version"] == CORE_VERSION

    def test_security_headers(self, client):
        r = client.get("/health")
        assert r.headers["X-Content-Type-Options"] == "nosniff"
        assert r.headers["X-Frame-Options"] == "DENY"
        assert "X-Core-Version" in r.headers


class TestPatterns:
    def test_all(self, client):
        data = client.get("/patterns").json()
        assert data["domain"] == "all"
        assert data["total_patterns"] == len(data["patterns"])

    def test_fraud_only(self, client):
        data = client.get("/patterns", params={"domain": "fraud"}).json()
        assert {p["domain"] for p in data["patterns"]} == {"fraud"}
        assert len(data["patterns"]) == 9

    def test_invalid_domain(self, client):
        r = client.get("/patterns", params={"domain": "legal"})
        assert r.status_code == 422


# ============================================================
# SCAN
# ============================================================

class TestScanMessage:
    def test_breaking_example(self, client):
        r = client.post("/scan/message", json={"text": BREAKING_EXAMPLE})
        assert r.status_code == 200
        data = r.json()
        assert data["score"] == 46
        assert data["analysis"].startswith("🛑 VERY HIGH RISK")
        assert len(data["flags"]) == 2
        assert data["flags"][0]["severity"] == "critical"
        assert len(data["recommendations"]) == 5

    def test_short_text_degrades(self, client):
        data = client.post("/scan/message", json={"text": "hi"}).json()
        assert data["score"] == 50
        assert data["flags"][0]["type"] == "Insufficient Content"

    def test_missing_text(self, client):
        r = client.post("/scan/message", json={})
        assert r.status_code == 422


class TestScanFraud:
    def test_sensitive_request(self, client):
        data = client.post("/scan/fraud", json={"text": "Please send your ssn today."}).json()
        assert data["score"] == 75
        assert data["risk_level"] == "Some Concerns"
        assert data["flags"][0]["weight"] == 25
        assert 1 <= len(data["safeguards"]) <= 6


class TestScanAudio:
    def test_seeded_is_reproducible(self, client):
        a = client.post("/scan/audio", json={"has_audio": True, "seed": 3}).json()
        b = client.post("/scan/audio", json={"has_audio": True, "seed": 3}).json()
        assert a["score"] == b["score"]
        assert a["confidence"] == b["confidence"]
        assert len(a["characteristics"]) == 5

    def test_no_audio(self, client):
        data = client.post("/scan/audio", json={"has_audio": False}).json()
        assert data["score"] == 50
        assert data["confidence"] == 30


class TestScanImage:
    def test_disaster(self, client):
        data = client.post("/scan/image", json={"description": "Breaking disaster photo"}).json()
        assert data["risk_level"] == "high"
        assert len(data["suggestions"]) == 2

    def test_empty_description(self, client):
        r = client.post("/scan/image", json={"description": ""})
        assert r.status_code == 422


# ============================================================
# CHALLENGES
# ============================================================

class TestChallenges:
    def test_list_all(self, client):
        data = client.get("/challenges").json()
        assert data["total"] == 20
        assert data["challenges"][0]["id"] == "b1"

    def test_list_by_difficulty(self, client):
        data = client.get("/challenges", params={"difficulty": "intermediate"}).json()
        assert data["total"] == 6
        assert all(c["difficulty"] == "intermediate" for c in data["challenges"])

    def test_random_by_difficulty(self, client):
        r = client.get("/challenges/random", params={"difficulty": "beginner"})
        assert r.status_code == 200
        assert r.json()["difficulty"] == "beginner"

    def test_random_invalid_difficulty(self, client):
        r = client.get("/challenges/random", params={"difficulty": "expert"})
        assert r.status_code == 422

    def test_get_by_id(self, client):
        data = client.get("/challenges/b1").json()
        assert data["category"] == "Source Verification"
        assert data["points"] == 10

    def test_get_missing(self, client):
        r = client.get("/challenges/does-not-exist")
        assert r.status_code == 404
        assert "does-not-exist" in r.json()["detail"]


# ============================================================
# BOARD
# ============================================================

class TestBoardAnswer:
    def test_correct_answer(self, client):
        r = client.post("/board/answer", json={
            "player": {"name": "You"},
            "challenge_id": "i2",
            "selected": 1,
            "streak": 2,
        })
        assert r.status_code == 200
        data = r.json()
        assert data["correct"] is True
        assert data["move"] == 5
        assert data["player"]["position"] == 5
        assert data["player"]["score"] == 20
        assert data["streak"] == 3
        assert data["winner"] is False

    def test_winning_answer(self, client):
        data = client.post("/board/answer", json={
            "player": {"name": "You", "position": 98},
            "challenge_id": "b1",
            "selected": 1,
        }).json()
        assert data["player"]["position"] == 100
        assert data["winner"] is True

    def test_wrong_answer(self, client):
        data = client.post("/board/answer", json={
            "player": {"name": "You", "position": 1},
            "challenge_id": "b1",
            "selected": 0,
            "streak": 4,
        }).json()
        assert data["correct"] is False
        assert data["player"]["position"] == 0
        assert data["streak"] == 0

    def test_out_of_range_answer(self, client):
        r = client.post("/board/answer", json={
            "player": {"name": "You"},
            "challenge_id": "b2",
            "selected": 7,
        })
        assert r.status_code == 422

    def test_unknown_challenge(self, client):
        r = client.post("/board/answer", json={
            "player": {"name": "You"},
            "challenge_id": "nope",
            "selected": 0,
        })
        assert r.status_code == 404


# ============================================================
# RATE LIMITING
# ============================================================

class TestRateLimitedRoutes:
    """Swap in a one-request limiter; the second call from the same client is refused."""

    @pytest.fixture
    def tight_limiter(self, monkeypatch):
        from truthshield import rate_limit

        limiter = rate_limit.RateLimiter(rate_limit.RateLimits(per_minute=1, per_hour=100))
        monkeypatch.setattr(rate_limit, "rate_limiter", limiter)
        return limiter

    @pytest.mark.parametrize("path", [
        "/challenges",
        "/challenges/random",
        "/challenges/b1",
        "/patterns",
    ])
    def test_second_request_refused(self, client, tight_limiter, path):
        assert client.get(path).status_code == 200
        r = client.get(path)
        assert r.status_code == 429
        assert "Retry-After" in r.headers

    def test_health_not_limited(self, client, tight_limiter):
        assert client.get("/health").status_code == 200
        assert client.get("/health").status_code == 200
