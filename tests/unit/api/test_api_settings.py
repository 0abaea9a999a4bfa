"""Tests for api/settings module."""

from __future__ import annotations

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from api.settings import Settings


class TestAllowedOrigins:
    def test_default_origins(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.allowed_origins == ["http://localhost:3000", "http://localhost:5173"]

    def test_comma_separated_env_var(self):
        with patch.dict("os.environ", {"ALLOWED_ORIGINS": "https://a.example, https://b.example,"}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.allowed_origins == ["https://a.example", "https://b.example"]


class TestGroupingDefaults:
    def test_defaults_match_form(self):
        with patch.dict("os.environ", {}, clear=True):
            config = Settings(_env_file=None).grouping_config()
        assert (config.min_group_size, config.max_group_size, config.max_groups) == (3, 5, 3)

    def test_env_overrides(self):
        env = {"DEFAULT_MIN_GROUP_SIZE": "2", "DEFAULT_MAX_GROUP_SIZE": "6", "DEFAULT_MAX_GROUPS": "4"}
        with patch.dict("os.environ", env, clear=True):
            config = Settings(_env_file=None).grouping_config()
        assert (config.min_group_size, config.max_group_size, config.max_groups) == (2, 6, 4)

    def test_explicit_values_win(self):
        with patch.dict("os.environ", {}, clear=True):
            config = Settings(_env_file=None).grouping_config(min_group_size=1, max_groups=7)
        assert (config.min_group_size, config.max_group_size, config.max_groups) == (1, 5, 7)

    def test_non_positive_default_rejected(self):
        with patch.dict("os.environ", {"DEFAULT_MAX_GROUPS": "0"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)


class TestServer:
    def test_defaults(self):
        with patch.dict("os.environ", {}, clear=True):
            settings = Settings(_env_file=None)
        assert (settings.host, settings.port) == ("127.0.0.1", 8000)

    def test_env_overrides(self):
        with patch.dict("os.environ", {"HOST": "0.0.0.0", "PORT": "9000"}, clear=True):
            settings = Settings(_env_file=None)
        assert (settings.host, settings.port) == ("0.0.0.0", 9000)
