"""Tests for configuration models."""

from pathlib import Path

import pytest

from stale_branch_cleaner.config import CleanerConfig, ConfigurationError, InvalidConfigurationError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove configuration variables inherited from the outer environment."""
    for name in ("GIT_EXECUTABLE", "COMMAND_TIMEOUT", "DRY_RUN"):
        monkeypatch.delenv(f"STALE_BRANCH_CLEANER_{name}", raising=False)


class TestCleanerConfig:
    """Tests for CleanerConfig model."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = CleanerConfig()

        assert config.git_executable == "git"
        assert config.command_timeout == 120.0
        assert config.dry_run is False

    def test_explicit_values(self) -> None:
        """Test keyword arguments are used."""
        config = CleanerConfig(git_executable="/usr/local/bin/git", command_timeout=15, dry_run=True)

        assert config.git_executable == "/usr/local/bin/git"
        assert config.command_timeout == 15.0
        assert config.dry_run is True

    def test_git_executable_is_stripped(self) -> None:
        """Test surrounding whitespace is removed from the executable."""
        assert CleanerConfig(git_executable="  git  ").git_executable == "git"

    def test_blank_git_executable(self) -> None:
        """Test a blank executable is rejected."""
        with pytest.raises(InvalidConfigurationError, match="must not be empty"):
            CleanerConfig(git_executable="   ")

    @pytest.mark.parametrize("value", [0, 0.0, "0", None, "none", "OFF", ""])
    def test_timeout_disabled(self, value: object) -> None:
        """Test values that disable the timeout."""
        assert CleanerConfig(command_timeout=value).command_timeout is None

    def test_timeout_from_string(self) -> None:
        """Test a numeric string is parsed."""
        assert CleanerConfig(command_timeout="2.5").command_timeout == 2.5

    def test_negative_timeout(self) -> None:
        """Test a negative timeout is rejected."""
        with pytest.raises(InvalidConfigurationError, match="must not be negative"):
            CleanerConfig(command_timeout=-1)

    def test_invalid_timeout_string(self) -> None:
        """Test a non-numeric timeout is rejected."""
        with pytest.raises(InvalidConfigurationError, match="Invalid command timeout"):
            CleanerConfig(command_timeout="soon")

    def test_invalid_timeout_type(self) -> None:
        """Test a boolean timeout is rejected."""
        with pytest.raises(InvalidConfigurationError, match="Invalid command timeout type"):
            CleanerConfig(command_timeout=True)

    def test_errors_are_configuration_errors(self) -> None:
        """Test invalid values can be handled as ConfigurationError."""
        with pytest.raises(ConfigurationError):
            CleanerConfig(command_timeout=-5)


class TestConfigLoading:
    """Tests for loading configuration from the environment."""

    def test_load_from_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test loading config from environment variables."""
        monkeypatch.setenv("STALE_BRANCH_CLEANER_GIT_EXECUTABLE", "/opt/git")
        monkeypatch.setenv("STALE_BRANCH_CLEANER_COMMAND_TIMEOUT", "45")
        monkeypatch.setenv("STALE_BRANCH_CLEANER_DRY_RUN", "true")

        config = CleanerConfig()

        assert config.git_executable == "/opt/git"
        assert config.command_timeout == 45.0
        assert config.dry_run is True

    def test_lowercase_environment_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test variable names are case insensitive."""
        monkeypatch.setenv("stale_branch_cleaner_command_timeout", "none")

        assert CleanerConfig().command_timeout is None

    def test_arguments_override_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test keyword arguments take precedence over environment variables."""
        monkeypatch.setenv("STALE_BRANCH_CLEANER_COMMAND_TIMEOUT", "45")

        assert CleanerConfig(command_timeout=5).command_timeout == 5.0

    def test_env_files_are_ignored(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test no configuration file is read."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / ".env").write_text("STALE_BRANCH_CLEANER_GIT_EXECUTABLE=/from/dotenv\n")

        assert CleanerConfig().git_executable == "git"

    def test_unrelated_variables_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test unrelated variables do not break loading."""
        monkeypatch.setenv("STALE_BRANCH_CLEANER_UNKNOWN", "x")

        assert CleanerConfig().git_executable == "git"
