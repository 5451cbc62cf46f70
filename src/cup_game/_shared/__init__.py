# Area: Shared
"""
Shared utilities used by the round and RGS layers.

This package contains:
- Logging configuration
- Structured RGS error logging
"""

from .logging_config import setup_logging, log_round_error

__all__ = [
    "setup_logging",
    "log_round_error",
]
