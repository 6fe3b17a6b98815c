"""Tests for redaction of debug output."""

from servicestack._internal.redaction import REDACTED_VALUE, SENSITIVE_KEYS, redact


class TestRedact:
    """Tests for redact()."""

    def test_top_level_keys(self):
        """Should mask sensitive top-level keys."""
        result = redact({"username": "alice", "password": "hunter2"})
        assert result == {"username": "alice", "password": REDACTED_VALUE}

    def test_case_insensitive(self):
        """Should match keys regardless of case."""
        result = redact({"Authorization": "Bearer abc", "API_KEY": "xyz"})
        assert result == {"Authorization": REDACTED_VALUE, "API_KEY": REDACTED_VALUE}

    def test_nested_dicts_and_lists(self):
        """Should recurse into nested containers."""
        payload = {
            "user": {"name": "bob", "token": "t-1"},
            "keys": [{"secret": "s-1"}, {"label": "visible"}],
        }
        assert redact(payload) == {
            "user": {"name": "bob", "token": REDACTED_VALUE},
            "keys": [{"secret": REDACTED_VALUE}, {"label": "visible"}],
        }

    def test_does_not_mutate_input(self):
        """Original payload should be left untouched."""
        payload = {"password": "hunter2", "nested": {"token": "abc"}}
        redact(payload)
        assert payload == {"password": "hunter2", "nested": {"token": "abc"}}

    def test_scalars_pass_through(self):
        """Non-container values should be returned as-is."""
        assert redact("plain") == "plain"
        assert redact(42) == 42
        assert redact(None) is None

    def test_non_string_keys(self):
        """Non-string keys should never be treated as sensitive."""
        assert redact({1: "one"}) == {1: "one"}

    def test_known_keys(self):
        """Common credential keys should be covered."""
        for key in ("password", "token", "api_key", "authorization", "refresh_token"):
            assert key in SENSITIVE_KEYS
