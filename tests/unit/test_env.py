"""Unit tests for environment helpers."""

import os
from datetime import datetime, timezone
from unittest.mock import patch

from anyconv.utils.env import get_env_float, get_env_int, get_env_typed


class TestTypedEnvironment:
    """Test typed environment lookups."""

    def test_get_env_typed(self):
        """Test conversion by type name."""
        with patch.dict(os.environ, {
            "TEST_START": "Jan 2, 2024",
            "TEST_BATCH": "500",
            "TEST_RATE": "0.25",
        }):
            assert get_env_typed("TEST_START", "time.Time") == datetime(2024, 1, 2, tzinfo=timezone.utc)
            assert get_env_typed("TEST_BATCH", "int32") == 500
            assert get_env_typed("TEST_RATE", "float64") == 0.25
            assert get_env_typed("TEST_RATE", "string") == "0.25"

    def test_get_env_typed_fallback(self):
        """Test the default is used for unset or unconvertible values."""
        with patch.dict(os.environ, {"TEST_BATCH": "5000000000", "TEST_KIND": "x"}):
            assert get_env_typed("TEST_BATCH", "int32", 10) == 10
            assert get_env_typed("TEST_KIND", "bool", False) is False
            assert get_env_typed("NONEXISTENT_TEST_VAR", "int", 3) == 3

    def test_get_env_int(self):
        """Test integer parsing."""
        with patch.dict(os.environ, {"TEST_INT": "42"}):
            assert get_env_int("TEST_INT") == 42

        with patch.dict(os.environ, {"TEST_INT": "not_a_number"}):
            assert get_env_int("TEST_INT", default=99) == 99

        with patch.dict(os.environ, {"TEST_INT": "4.5"}):
            assert get_env_int("TEST_INT", default=1) == 1

    def test_get_env_float(self):
        """Test float parsing."""
        with patch.dict(os.environ, {"TEST_FLOAT": "1e-3"}):
            assert get_env_float("TEST_FLOAT") == 0.001

        with patch.dict(os.environ, {"TEST_FLOAT": "abc"}):
            assert get_env_float("TEST_FLOAT", default=2.0) == 2.0
