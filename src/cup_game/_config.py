# Area: Shared
"""
cup_game._config — Runner Configuration
========================================

Config loading (JSON file + environment + .env), defaults and
validation for GameRunner and the CLI.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger("cup_game")

DEFAULTS: Dict[str, Any] = {
    "currency": "USD",
    "mode": "BASE",
    "language": "en",
    "request_timeout_seconds": 10.0,
    "container_count": 3,
    "win_hold_seconds": 0.8,
    "loss_hold_seconds": 0.6,
    "log_file": "cup_game.log",
    "demo_mode": False,
}

# Required config keys when talking to a real RGS
REQUIRED_CONFIG_KEYS = [
    "rgs_url",
    "session_id",
]

# Environment variable -> (config key, converter)
ENV_MAPPINGS = {
    "RGS_URL": ("rgs_url", str),
    "RGS_SESSION_ID": ("session_id", str),
    "RGS_CURRENCY": ("currency", str),
    "RGS_MODE": ("mode", str),
    "RGS_LANGUAGE": ("language", str),
    "RGS_TIMEOUT_SECONDS": ("request_timeout_seconds", float),
    "CONTAINER_COUNT": ("container_count", int),
    "LOG_FILE": ("log_file", str),
}

TRUE_VALUES = ("true", "1", "yes")


def load_config(config_path: Optional[str] = None, env_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Build the config dict: defaults, then JSON file, then environment.

    Args:
        config_path: Optional path to a JSON config file
        env_file: Optional .env path; defaults to searching from cwd

    Returns:
        The merged config dict
    """
    load_dotenv(env_file)
    config: Dict[str, Any] = dict(DEFAULTS)

    if config_path:
        path = Path(config_path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                config.update(json.load(f))
        else:
            logger.warning(f"Config file not found: {config_path}")

    for env_key, (config_key, convert) in ENV_MAPPINGS.items():
        if env_key in os.environ:
            config[config_key] = convert(os.environ[env_key])

    if os.environ.get("DEMO_MODE", "").lower() in TRUE_VALUES:
        config["demo_mode"] = True

    return config


def validate_config(config: dict) -> None:
    """
    Validate required configuration keys.

    Demo mode needs no RGS endpoint, so nothing is required there.

    Raises:
        ValueError: If required keys are missing, values are out of range,
            or the loss hold is not shorter than the win hold
    """
    if not config.get("demo_mode"):
        missing = [k for k in REQUIRED_CONFIG_KEYS if not config.get(k)]
        if missing:
            raise ValueError(f"Missing required config keys: {missing}")
    if int(config.get("container_count", 3)) < 2:
        raise ValueError("container_count must be at least 2")
    win_hold = float(config.get("win_hold_seconds", DEFAULTS["win_hold_seconds"]))
    loss_hold = float(config.get("loss_hold_seconds", DEFAULTS["loss_hold_seconds"]))
    if loss_hold < 0 or loss_hold >= win_hold:
        raise ValueError(
            f"loss_hold_seconds ({loss_hold}) must be >= 0 and shorter than "
            f"win_hold_seconds ({win_hold})"
        )
