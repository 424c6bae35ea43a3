"""TruthShield HTTP API."""
