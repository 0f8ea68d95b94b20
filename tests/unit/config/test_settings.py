"""Tests for environment-driven settings."""

import pytest
from pydantic import ValidationError

from contador.config import Settings


def test_log_level_is_normalized_to_upper_case():
    assert Settings(LOG_LEVEL="debug").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError, match="LOG_LEVEL"):
        Settings(LOG_LEVEL="verbose")


def test_unknown_backend_rejected():
    with pytest.raises(ValidationError):
        Settings(KV_BACKEND="redis")
