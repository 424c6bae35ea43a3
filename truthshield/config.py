"""
TruthShield Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Audio ---
    # "simulated" keeps the randomized demo analyzer, "disabled" turns it off
    AUDIO_MODE: str = os.getenv("TRUTHSHIELD_AUDIO_MODE", "simulated")

    # --- Input limits ---
    MAX_TEXT_LENGTH: int = int(os.getenv("TRUTHSHIELD_MAX_TEXT_LENGTH", "50000"))

    # --- CORS ---
    CORS_ORIGINS: str = os.getenv("TRUTHSHIELD_CORS_ORIGINS", "*")


settings = Settings()
