"""Tests for environment-driven configuration."""

from sessiongate.config import Config
from sessiongate.utils import is_sub_path


class TestConfig:
    def test_defaults(self):
        config = Config(_env_file=None)
        assert config.users == {"alice": "1234", "bob": "abcd"}
        assert config.protected_paths == ["/benvenuto", "/logout"]
        assert config.session_cookie_name == "session_id"
        assert config.remember_cookie_name == "utente"
        assert config.remember_cookie_max_age == 30 * 24 * 60 * 60

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("SESSIONGATE_PORT", "9000")
        monkeypatch.setenv("SESSIONGATE_PROTECTED_PATHS", '["/private"]')
        config = Config(_env_file=None)
        assert config.port == 9000
        assert config.protected_paths == ["/private"]


class TestIsSubPath:
    def test_exact_and_nested(self):
        assert is_sub_path("/private", "/private")
        assert is_sub_path("/private/page", "/private/")
        assert not is_sub_path("/privateer", "/private")

    def test_root_prefix_matches_everything(self):
        assert is_sub_path("/anything", "/")
