"""
Configuration management for the workflow replicator.
"""

import os
import yaml
import logging
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, asdict, fields

from ..error_handling import ConfigurationError

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class GitHubConfig:
    """GitHub API configuration."""
    access_token: Optional[str] = None
    api_base_url: str = "https://api.github.com"
    timeout: int = 30
    max_retries: int = 3


@dataclass
class ReplicationConfig:
    """Inputs of the replication workflow, kept as the raw comma-separated strings."""
    files_to_ignore: Optional[str] = None
    files_to_include: Optional[str] = None
    repos_to_ignore: Optional[str] = None
    topics_to_include: Optional[str] = None
    exclude_forked: bool = False
    exclude_private: bool = False
    workflows_dir: str = ".github/workflows"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    file: Optional[str] = None
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    max_file_size: int = 10  # MB
    backup_count: int = 5
    structured: bool = False


@dataclass
class AppConfig:
    """Complete application configuration."""
    github: GitHubConfig
    replication: ReplicationConfig
    logging: LoggingConfig

    def to_dict(self, mask_secrets: bool = True) -> Dict[str, Any]:
        data = asdict(self)
        if mask_secrets and data["github"]["access_token"]:
            data["github"]["access_token"] = "*" * 8
        return data


_SECTIONS = {
    "github": GitHubConfig,
    "replication": ReplicationConfig,
    "logging": LoggingConfig,
}


class ConfigManager:
    """
    Manages application configuration from multiple sources.

    Configuration is loaded in the following order (later sources override earlier):
    1. Default configuration
    2. Configuration file
    3. Environment variables
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Path to configuration file
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Optional[AppConfig] = None
        self._env_var_mapping = self._create_env_var_mapping()

    def _create_env_var_mapping(self) -> Dict[str, str]:
        """Create mapping of environment variables to config paths."""
        return {
            # GitHub configuration
            "GITHUB_TOKEN": "github.access_token",
            "GITHUB_API_URL": "github.api_base_url",
            "GITHUB_TIMEOUT": "github.timeout",
            "GITHUB_MAX_RETRIES": "github.max_retries",

            # Action inputs, as exposed to the runner
            "INPUT_FILES_TO_IGNORE": "replication.files_to_ignore",
            "INPUT_FILES_TO_INCLUDE": "replication.files_to_include",
            "INPUT_REPOS_TO_IGNORE": "replication.repos_to_ignore",
            "INPUT_TOPICS_TO_INCLUDE": "replication.topics_to_include",
            "INPUT_EXCLUDE_FORKED": "replication.exclude_forked",
            "INPUT_EXCLUDE_PRIVATE": "replication.exclude_private",

            # Logging configuration
            "LOG_LEVEL": "logging.level",
            "LOG_FILE": "logging.file",
            "LOG_FORMAT": "logging.format",
            "LOG_MAX_SIZE": "logging.max_file_size",
            "LOG_BACKUP_COUNT": "logging.backup_count",
            "LOG_STRUCTURED": "logging.structured",
        }

    def load_config(self) -> AppConfig:
        """
        Load configuration from all sources.

        Returns:
            Complete application configuration

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        if self._config is not None:
            return self._config

        config_dict = self._get_default_config()

        if self.config_file and self.config_file.exists():
            file_config = self._load_config_file(self.config_file)
            config_dict = self._merge_configs(config_dict, file_config)

        env_config = self._load_env_config()
        config_dict = self._merge_configs(config_dict, env_config)

        self._validate_config(config_dict)

        self._config = self._dict_to_config(config_dict)
        return self._config

    def _get_default_config(self) -> Dict[str, Dict[str, Any]]:
        return {name: asdict(section()) for name, section in _SECTIONS.items()}

    def _load_config_file(self, config_path: Path) -> Dict[str, Any]:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to configuration file

        Returns:
            Configuration dictionary
        """
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to load config file {config_path}",
                setting="config_file",
                cause=e
            )

        if config is None:
            return {}
        if not isinstance(config, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping", setting="config_file")

        logger.info(f"Loaded configuration from {config_path}")
        return config

    def _load_env_config(self) -> Dict[str, Any]:
        """
        Load configuration from environment variables.

        Empty variables are skipped, as the runner exports unset action
        inputs as empty strings.
        """
        env_config: Dict[str, Any] = {}

        for env_var, config_path in self._env_var_mapping.items():
            value = os.getenv(env_var)
            if value:
                value = self._convert_env_value(config_path, value)
                self._set_nested_value(env_config, config_path, value)

        return env_config

    def _convert_env_value(self, config_path: str, value: str) -> Any:
        """
        Convert an environment variable to the type of the field it sets.

        List inputs stay strings; they are parsed where they are used.
        """
        section_name, key = config_path.split('.')
        field_type = {f.name: f.type for f in fields(_SECTIONS[section_name])}[key]

        if field_type in (bool, 'bool'):
            lowered = value.lower()
            if lowered in ('true', 'yes', '1', 'on'):
                return True
            if lowered in ('false', 'no', '0', 'off'):
                return False
            raise ConfigurationError(f"Invalid boolean value: {value}", setting=config_path)

        if field_type in (int, 'int'):
            try:
                return int(value)
            except ValueError:
                raise ConfigurationError(f"Invalid integer value: {value}", setting=config_path)

        return value

    def _set_nested_value(self, config: Dict[str, Any], path: str, value: Any) -> None:
        """
        Set a nested configuration value using dot notation.

        Args:
            config: Configuration dictionary
            path: Dot-separated path (e.g., 'github.access_token')
            value: Value to set
        """
        keys = path.split('.')
        current = config

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def _merge_configs(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively merge ``override`` into a copy of ``base``."""
        result = dict(base)

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value

        return result

    def _validate_config(self, config: Dict[str, Any]) -> None:
        """
        Validate configuration values.

        Raises:
            ConfigurationError: On unknown sections or keys and invalid values
        """
        for section_name, values in config.items():
            section = _SECTIONS.get(section_name)
            if section is None:
                raise ConfigurationError(f"Unknown configuration section: {section_name}", setting=section_name)
            if not isinstance(values, dict):
                raise ConfigurationError(f"Section {section_name} must be a mapping", setting=section_name)

            known = {f.name for f in fields(section)}
            for key in values:
                if key not in known:
                    raise ConfigurationError(
                        f"Unknown configuration key: {section_name}.{key}",
                        setting=f"{section_name}.{key}"
                    )

        if not config["github"].get("access_token"):
            logger.warning("GitHub access token not configured - API calls will be unauthenticated")

        timeout = config["github"].get("timeout")
        if not isinstance(timeout, int) or timeout <= 0:
            raise ConfigurationError(f"Invalid timeout: {timeout}", setting="github.timeout")

        log_level = str(config["logging"].get("level", "INFO")).upper()
        if log_level not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {log_level}. Valid levels: {sorted(VALID_LOG_LEVELS)}",
                setting="logging.level"
            )
        config["logging"]["level"] = log_level

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> AppConfig:
        return AppConfig(
            github=GitHubConfig(**config_dict["github"]),
            replication=ReplicationConfig(**config_dict["replication"]),
            logging=LoggingConfig(**config_dict["logging"])
        )

    def get_config(self) -> AppConfig:
        """
        Get the current configuration.

        Returns:
            Application configuration
        """
        if self._config is None:
            return self.load_config()
        return self._config

    def save_config(self, config_path: Optional[Path] = None) -> None:
        """
        Save current configuration to file, without the access token.

        Args:
            config_path: Path to save configuration file
        """
        if config_path is None:
            config_path = self.config_file or Path("replicator.yaml")

        config_dict = self.get_config().to_dict()
        del config_dict["github"]["access_token"]

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config_dict, f, default_flow_style=False, indent=2)

        logger.info(f"Configuration saved to {config_path}")


# Global configuration manager instance
_config_manager: Optional[ConfigManager] = None


def get_config_manager(config_file: Optional[Union[str, Path]] = None) -> ConfigManager:
    """
    Get the global configuration manager instance.

    Args:
        config_file: Path to configuration file (only used on first call)

    Returns:
        ConfigManager instance
    """
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager(config_file)
    return _config_manager


def get_config() -> AppConfig:
    """Get the current application configuration."""
    return get_config_manager().get_config()


def reset_config_manager() -> None:
    """Drop the global configuration manager so the next call rebuilds it."""
    global _config_manager
    _config_manager = None
