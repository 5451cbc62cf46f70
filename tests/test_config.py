# Area: Shared Tests
"""Tests for config loading and validation."""

import json

import pytest
from cup_game._config import DEFAULTS, ENV_MAPPINGS, load_config, validate_config


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Clear config variables; returns a .env path that does not exist."""
    for key in list(ENV_MAPPINGS) + ["DEMO_MODE"]:
        monkeypatch.delenv(key, raising=False)
    return str(tmp_path / "missing.env")


class TestLoadConfig:
    """Tests for load_config()."""

    def test_defaults_only(self, clean_env):
        """Test that an empty environment yields the defaults."""
        config = load_config(env_file=clean_env)
        assert config == DEFAULTS
        assert config is not DEFAULTS

    def test_json_file_overrides_defaults(self, clean_env, tmp_path):
        """Test that JSON file values override defaults."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"rgs_url": "https://rgs.test", "container_count": 4}))

        config = load_config(str(path), env_file=clean_env)

        assert config["rgs_url"] == "https://rgs.test"
        assert config["container_count"] == 4
        assert config["currency"] == "USD"

    def test_missing_json_file_keeps_defaults(self, clean_env, tmp_path):
        """Test that a missing config file is tolerated."""
        config = load_config(str(tmp_path / "nope.json"), env_file=clean_env)
        assert config == DEFAULTS

    def test_environment_overrides_file(self, clean_env, tmp_path, monkeypatch):
        """Test that environment variables win over the file."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"session_id": "from-file"}))
        monkeypatch.setenv("RGS_SESSION_ID", "from-env")
        monkeypatch.setenv("RGS_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("CONTAINER_COUNT", "5")

        config = load_config(str(path), env_file=clean_env)

        assert config["session_id"] == "from-env"
        assert config["request_timeout_seconds"] == 2.5
        assert config["container_count"] == 5

    @pytest.mark.parametrize("value,expected", [
        ("true", True), ("1", True), ("YES", True), ("false", False), ("", False),
    ])
    def test_demo_mode_env(self, clean_env, monkeypatch, value, expected):
        """Test DEMO_MODE parsing."""
        monkeypatch.setenv("DEMO_MODE", value)
        assert load_config(env_file=clean_env)["demo_mode"] is expected

    def test_env_file_is_loaded(self, clean_env, tmp_path, monkeypatch):
        """Test that variables from the .env file are applied."""
        # Registered with monkeypatch so the variable is removed afterwards
        monkeypatch.setenv("RGS_URL", "placeholder")
        monkeypatch.delenv("RGS_URL")
        env_file = tmp_path / ".env"
        env_file.write_text("RGS_URL=https://from-dotenv.test\n")

        config = load_config(env_file=str(env_file))

        assert config["rgs_url"] == "https://from-dotenv.test"


class TestValidateConfig:
    """Tests for validate_config()."""

    def test_valid_real_config(self):
        """Test that a complete real-RGS config validates."""
        validate_config({"rgs_url": "https://rgs.test", "session_id": "abc"})

    def test_missing_keys_reported(self):
        """Test that missing required keys are named in the error."""
        with pytest.raises(ValueError, match="session_id"):
            validate_config({"rgs_url": "https://rgs.test"})

    def test_demo_mode_needs_nothing(self):
        """Test that demo mode needs no RGS keys."""
        validate_config({"demo_mode": True})

    def test_container_count_below_two(self):
        """Test that fewer than two containers is rejected."""
        with pytest.raises(ValueError, match="container_count"):
            validate_config({"demo_mode": True, "container_count": 1})

    def test_default_holds_are_valid(self):
        """Test that the default loss hold is shorter than the win hold."""
        assert DEFAULTS["loss_hold_seconds"] < DEFAULTS["win_hold_seconds"]
        validate_config(dict(DEFAULTS, demo_mode=True))

    @pytest.mark.parametrize("win_hold,loss_hold", [(0.6, 0.6), (0.5, 0.8), (0.8, -0.1)])
    def test_loss_hold_must_be_shorter_than_win_hold(self, win_hold, loss_hold):
        """Test that a loss hold not shorter than the win hold is rejected."""
        config = {"demo_mode": True, "win_hold_seconds": win_hold, "loss_hold_seconds": loss_hold}
        with pytest.raises(ValueError, match="loss_hold_seconds"):
            validate_config(config)
