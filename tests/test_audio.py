"""
Tests for the audio analyzer interface and the simulated analyzer.

The simulated analyzer makes exactly one draw; a fixed-draw stub makes
every branch deterministic.
"""

import random

import pytest
from truthshield.audio import (
    AUDIO_START_SCORE,
    AudioAnalyzer,
    DisabledAudioAnalyzer,
    SimulatedAudioAnalyzer,
    get_audio_analyzer,
)
from truthshield.detector import engine, score_audio
from truthshield.errors import AudioAnalysisUnavailableError


class FixedDraw:
    """Stands in for random.Random; always returns the same draw."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value


def analyze(r: float):
    return SimulatedAudioAnalyzer(rng=FixedDraw(r)).analyze(True)


class TestDrawPartitions:
    def test_low_draw_noise_and_artifacts(self):
        result = analyze(0.1)
        assert [f.type for f in result.flags] == [
            "Unnatural Background Noise", "Digital Artifacts Detected",
        ]
        assert result.score == 65
        assert result.confidence == 79

    def test_noise_only(self):
        result = analyze(0.25)
        assert [f.weight for f in result.flags] == [8]
        assert result.score == 77
        assert result.confidence == 82

    def test_clean_band(self):
        result = analyze(0.4)
        assert result.flags == []
        assert result.score == AUDIO_START_SCORE
        assert result.confidence == 84
        assert result.analysis.startswith("Audio analysis indicates authentic speech")

    def test_prosody_band(self):
        result = analyze(0.55)
        assert [f.type for f in result.flags] == ["Prosody Inconsistencies"]
        assert result.flags[0].severity == "low"
        assert result.score == 80
        assert result.confidence == 87

    def test_frequency_band(self):
        result = analyze(0.8)
        assert [f.type for f in result.flags] == ["Frequency Anomalies"]
        assert result.score == 70
        assert result.confidence == 91
        assert result.analysis.startswith("Some irregularities detected")

    def test_confidence_upper_bound(self):
        result = analyze(0.999)
        assert result.confidence == 94

    def test_analysis_context_sentence(self):
        assert analyze(0.4).analysis.endswith(
            "Consider the context and source when evaluating authenticity."
        )

    def test_breakdown_marks_simulation(self):
        assert analyze(0.4).score_breakdown["simulated"] is True


class TestSeededRandom:
    def test_same_seed_same_result(self):
        a = score_audio(True, rng=random.Random(42), mode="simulated")
        b = score_audio(True, rng=random.Random(42), mode="simulated")
        assert a.to_dict() == b.to_dict()

    @pytest.mark.parametrize("seed", range(20))
    def test_bounds(self, seed):
        result = score_audio(True, rng=random.Random(seed), mode="simulated")
        assert 50 <= result.score <= AUDIO_START_SCORE
        assert 78 <= result.confidence <= 94


class TestNoAudio:
    def test_degraded_result(self):
        result = SimulatedAudioAnalyzer().analyze(False)
        assert result.score == 50
        assert result.confidence == 30
        assert len(result.flags) == 1
        assert result.flags[0].type == "No Audio Provided"
        assert result.flags[0].weight == 0

    def test_engine_path(self):
        result = engine.score_audio(False, mode="simulated")
        assert result.score == 50


class TestFactory:
    def test_simulated(self):
        analyzer = get_audio_analyzer("simulated")
        assert isinstance(analyzer, SimulatedAudioAnalyzer)
        assert isinstance(analyzer, AudioAnalyzer)

    def test_disabled_raises_on_use(self):
        analyzer = get_audio_analyzer("disabled")
        assert isinstance(analyzer, DisabledAudioAnalyzer)
        with pytest.raises(AudioAnalysisUnavailableError):
            analyzer.analyze(True)

    def test_disabled_through_engine(self):
        with pytest.raises(AudioAnalysisUnavailableError):
            score_audio(True, mode="disabled")

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown audio mode"):
            get_audio_analyzer("neural")
