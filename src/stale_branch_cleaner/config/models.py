"""Configuration models."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from stale_branch_cleaner.config.exceptions import InvalidConfigurationError

ENV_PREFIX = "STALE_BRANCH_CLEANER_"
DISABLED_TIMEOUT_VALUES = {"", "none", "off"}


class CleanerConfig(BaseSettings):
    """Configuration for stale-branch-cleaner.

    Values come from keyword arguments and STALE_BRANCH_CLEANER_* environment
    variables only; there is no configuration file.
    """

    git_executable: str = Field(
        default="git",
        description="Name or path of the git executable",
    )
    command_timeout: float | None = Field(
        default=120.0,
        description="Seconds before a git command is killed (0 or 'none' disables)",
    )
    dry_run: bool = Field(
        default=False,
        description="Report stale branches without deleting them",
    )

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("git_executable")
    @classmethod
    def validate_git_executable(cls, v: str) -> str:
        """Ensure the git executable is not blank.

        Args:
            v: Executable name or path

        Returns:
            Executable with surrounding whitespace removed

        Raises:
            InvalidConfigurationError: If the value is blank
        """
        v = v.strip()
        if not v:
            raise InvalidConfigurationError("git executable must not be empty")
        return v

    @field_validator("command_timeout", mode="before")
    @classmethod
    def parse_timeout(cls, v: str | float | None) -> float | None:
        """Parse the command timeout.

        Args:
            v: Timeout in seconds, or a value disabling the timeout

        Returns:
            Timeout in seconds, or None when disabled

        Raises:
            InvalidConfigurationError: If the timeout is not a non-negative number
        """
        if v is None:
            return None
        if isinstance(v, str):
            if v.strip().lower() in DISABLED_TIMEOUT_VALUES:
                return None
            try:
                v = float(v)
            except ValueError as e:
                raise InvalidConfigurationError(f"Invalid command timeout: {v!r}") from e
        if isinstance(v, bool) or not isinstance(v, int | float):
            raise InvalidConfigurationError(f"Invalid command timeout type: {type(v)}")
        if v < 0:
            raise InvalidConfigurationError(f"Command timeout must not be negative: {v}")
        return float(v) or None
