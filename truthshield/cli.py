"""
truthshield — command-line scoring.

Usage:
    truthshield message "Text to score"          # Credibility report
    echo "Text" | truthshield fraud              # Reads stdin when no text given
    truthshield audio --seed 7                   # Simulated audio analysis
    truthshield audio --no-audio                 # Degraded no-sample result
    truthshield challenge --difficulty beginner  # One random challenge
    truthshield challenge --id b1 --json         # JSON output (for scripts)
"""

from __future__ import annotations

import argparse
import json
import random
import sys

from truthshield.challenges import DIFFICULTIES, find_challenge, random_challenge
from truthshield.detector import engine
from truthshield.errors import TruthShieldError
from truthshield.models import DetectionResult
from truthshield.narrative import (
    audio_recommendations,
    fraud_risk_level,
    fraud_safeguards,
    message_recommendations,
)


def _read_text(args) -> str:
    if args.text:
        return " ".join(args.text)
    return sys.stdin.read()


def format_result(result: DetectionResult, title: str, extra_lines: list[str]) -> str:
    lines = [
        "=" * 60,
        f"  {title}",
        "=" * 60,
        f"  Score:       {result.score}/100",
        f"  Confidence:  {result.confidence}%",
        "",
    ]
    if result.flags:
        lines.append(f"  Flags ({len(result.flags)}):")
        for f in result.flags:
            lines.append(f"    [{f.severity.upper():8}] {f.type} (-{f.weight})")
            lines.append(f"               {f.description}")
        lines.append("")
    lines.append(f"  {result.analysis}")
    lines.append("")
    for line in extra_lines:
        lines.append(f"  • {line}")
    return "\n".join(lines)


def _cmd_message(args) -> int:
    result = engine.score_message(_read_text(args))
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_result(result, "Message Credibility", message_recommendations(result)))
    return 0


def _cmd_fraud(args) -> int:
    result = engine.score_fraud(_read_text(args))
    if args.json:
        payload = {**result.to_dict(), "risk_level": fraud_risk_level(result.score)}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        title = f"Fraud Risk: {fraud_risk_level(result.score)}"
        print(format_result(result, title, fraud_safeguards(result)))
    return 0


def _cmd_audio(args) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    result = engine.score_audio(not args.no_audio, rng=rng)
    if args.json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
    else:
        print(format_result(result, "Audio Authenticity (simulated)", audio_recommendations(result)))
    return 0


def _cmd_challenge(args) -> int:
    if args.id:
        challenge = find_challenge(args.id)
    else:
        challenge = random_challenge(args.difficulty)

    if args.json:
        print(json.dumps(challenge.to_dict(), indent=2, ensure_ascii=False))
        return 0

    print(f"[{challenge.id}] {challenge.category} — {challenge.difficulty}, {challenge.points} pts")
    print(challenge.question)
    for i, option in enumerate(challenge.options):
        print(f"  {i}. {option}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="truthshield", description="TruthShield scoring CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, handler, help_text in (
        ("message", _cmd_message, "Score a message for misinformation patterns"),
        ("fraud", _cmd_fraud, "Score an email or message for scam indicators"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("text", nargs="*", help="Text to score (default: read stdin)")
        p.add_argument("--json", action="store_true", help="Output JSON only")
        p.set_defaults(func=handler)

    p = sub.add_parser("audio", help="Run the simulated audio analyzer")
    p.add_argument("--seed", type=int, default=None, help="Seed for a reproducible result")
    p.add_argument("--no-audio", action="store_true", help="Score with no sample captured")
    p.add_argument("--json", action="store_true", help="Output JSON only")
    p.set_defaults(func=_cmd_audio)

    p = sub.add_parser("challenge", help="Show a media-literacy challenge")
    p.add_argument("--difficulty", choices=DIFFICULTIES, default=None)
    p.add_argument("--id", default=None, help="Challenge id (e.g. b1)")
    p.add_argument("--json", action="store_true", help="Output JSON only")
    p.set_defaults(func=_cmd_challenge)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except TruthShieldError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
