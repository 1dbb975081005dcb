"""Tests for environment configuration."""

import logging
import os

import pytest

from ipv6calc.config import (
    get_allocation_prefix_length,
    get_cors_origins,
    get_log_level,
    get_max_batch_addresses,
    get_max_subnets,
    validate_configuration,
)


class TestCORSConfiguration:
    """Test CORS configuration function"""

    def test_cors_origins_defaults_to_localhost_for_dev(self):
        """CORS should have sensible defaults for development"""
        os.environ.pop("CORS_ORIGINS", None)
        origins = get_cors_origins()
        assert origins
        assert "*" not in origins

    def test_cors_origins_from_environment(self):
        """CORS should parse comma-separated origins from environment"""
        os.environ["CORS_ORIGINS"] = "https://app.example.com, https://custom.example.com,"
        assert get_cors_origins() == ["https://app.example.com", "https://custom.example.com"]


class TestEngineLimits:
    """Tests for engine limit settings."""

    def test_defaults(self):
        for name in ("PLAN_MAX_SUBNETS", "BATCH_MAX_ADDRESSES", "ALLOCATION_PREFIX_LENGTH"):
            os.environ.pop(name, None)
        assert get_max_subnets() == 4096
        assert get_max_batch_addresses() == 1000
        assert get_allocation_prefix_length() == 48

    def test_max_subnets_from_environment(self):
        os.environ["PLAN_MAX_SUBNETS"] = "256"
        assert get_max_subnets() == 256

    def test_max_subnets_not_a_number(self):
        os.environ["PLAN_MAX_SUBNETS"] = "lots"
        with pytest.raises(ValueError, match="PLAN_MAX_SUBNETS must be an integer"):
            get_max_subnets()

    def test_max_subnets_must_be_positive(self):
        os.environ["PLAN_MAX_SUBNETS"] = "0"
        with pytest.raises(ValueError, match="at least 1"):
            get_max_subnets()

    def test_allocation_prefix_length_range(self):
        os.environ["ALLOCATION_PREFIX_LENGTH"] = "56"
        assert get_allocation_prefix_length() == 56

        os.environ["ALLOCATION_PREFIX_LENGTH"] = "129"
        with pytest.raises(ValueError, match="between 0 and 128"):
            get_allocation_prefix_length()


class TestLogLevel:
    """Tests for LOG_LEVEL."""

    def test_default(self):
        os.environ.pop("LOG_LEVEL", None)
        assert get_log_level() == logging.INFO

    def test_case_insensitive(self):
        os.environ["LOG_LEVEL"] = "debug"
        assert get_log_level() == logging.DEBUG

    def test_invalid(self):
        os.environ["LOG_LEVEL"] = "LOUD"
        with pytest.raises(ValueError, match="Invalid LOG_LEVEL"):
            get_log_level()


def test_validate_configuration_reports_bad_values():
    """Startup validation surfaces any invalid setting."""
    os.environ["BATCH_MAX_ADDRESSES"] = "-5"
    with pytest.raises(ValueError):
        validate_configuration()
