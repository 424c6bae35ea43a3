"""Pydantic request/response models for the TruthShield API."""
