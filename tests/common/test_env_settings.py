"""Tests for src/common/env_settings.py"""

import pytest

from src.common.env_settings import settings_from_mapping


class TestSettingsFromMapping:
    def test_reads_supabase_names(self):
        env = settings_from_mapping({"SUPABASE_URL": "https://abcd.supabase.co", "SUPABASE_KEY": "k"})
        assert "abcd.supabase.co" in str(env.supabase_url)
        assert env.supabase_key.get_secret_value() == "k"

    def test_reads_vite_names(self):
        env = settings_from_mapping({
            "VITE_SUPABASE_URL": "https://abcd.supabase.co",
            "VITE_SUPABASE_ANON_KEY": "anon",
        })
        assert env.supabase_key.get_secret_value() == "anon"

    def test_ignores_unrelated_variables(self):
        env = settings_from_mapping({
            "SUPABASE_URL": "https://abcd.supabase.co",
            "SUPABASE_KEY": "k",
            "PATH": "/usr/bin",
        })
        assert env.supabase_key.get_secret_value() == "k"

    def test_missing_variables_raise_runtime_error(self):
        with pytest.raises(RuntimeError, match="Missing required environment variables"):
            settings_from_mapping({})

    def test_invalid_url_raises_runtime_error(self):
        with pytest.raises(RuntimeError):
            settings_from_mapping({"SUPABASE_URL": "not a url", "SUPABASE_KEY": "k"})

    def test_key_not_in_repr(self):
        env = settings_from_mapping({"SUPABASE_URL": "https://abcd.supabase.co", "SUPABASE_KEY": "top-secret"})
        assert "top-secret" not in repr(env)
        assert "top-secret" not in str(env)
