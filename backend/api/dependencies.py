"""Shared dependencies for API routes."""

from services.oracle_client import GeminiOracle, Oracle


def get_oracle() -> Oracle:
    return GeminiOracle()
