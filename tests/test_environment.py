"""
Tests for the read-only environment view.
"""

import pytest

from common.environment import Environment, get_environment


@pytest.mark.parametrize(
    "value, expected",
    [("sk_test_123", True), ("", False), (None, False)],
)
def test_has_value(value, expected):
    """Test presence is true only for non-empty strings"""
    values = {} if value is None else {"STRIPE_SECRET_KEY": value}
    assert Environment(values).has_value("STRIPE_SECRET_KEY") is expected


def test_get_with_default():
    """Test unset variables return the default"""
    env = Environment({"NODE_ENV": "production"})
    assert env.get("NODE_ENV") == "production"
    assert env.get("MISSING_VAR") is None
    assert env.get("MISSING_VAR", "fallback") == "fallback"


def test_get_keeps_empty_string():
    """Test an empty value is passed through, not defaulted"""
    assert Environment({"NODE_ENV": ""}).get("NODE_ENV", "x") == ""


def test_get_or_missing():
    """Test the missing sentinel"""
    env = Environment({"NEXT_PUBLIC_SUPABASE_URL": "https://abc.supabase.co"})
    assert env.get_or_missing("NEXT_PUBLIC_SUPABASE_URL") == "https://abc.supabase.co"
    assert env.get_or_missing("UNSET") == "missing"
    assert Environment({"EMPTY": ""}).get_or_missing("EMPTY") == "missing"


def test_set_or_missing():
    """Test secret flags never expose the value"""
    env = Environment({"SUPABASE_SERVICE_ROLE_KEY": "secret"})
    assert env.set_or_missing("SUPABASE_SERVICE_ROLE_KEY") == "SET"
    assert env.set_or_missing("NEXT_PUBLIC_SUPABASE_ANON_KEY") == "MISSING"


def test_injected_mapping_is_copied():
    """Test later changes to the source mapping are not visible"""
    values = {"NODE_ENV": "test"}
    env = Environment(values)
    values["NODE_ENV"] = "production"
    assert env.get("NODE_ENV") == "test"


def test_get_environment_reads_process_environment(monkeypatch):
    """Test the default environment reflects os.environ"""
    monkeypatch.setenv("NODE_ENV", "staging")
    env = get_environment()
    assert env.get("NODE_ENV") == "staging"
    assert "NODE_ENV" in env
