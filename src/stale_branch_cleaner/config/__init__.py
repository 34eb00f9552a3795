"""Configuration management for stale-branch-cleaner."""

from stale_branch_cleaner.config.exceptions import (
    ConfigurationError,
    InvalidConfigurationError,
)
from stale_branch_cleaner.config.models import CleanerConfig

__all__ = [
    "CleanerConfig",
    "ConfigurationError",
    "InvalidConfigurationError",
]
