"""
Configuration management for the workflow replicator.
"""

from .config_manager import (
    ConfigManager, AppConfig, GitHubConfig, ReplicationConfig, LoggingConfig,
    get_config_manager, get_config, reset_config_manager
)

__all__ = [
    "ConfigManager",
    "AppConfig",
    "GitHubConfig",
    "ReplicationConfig",
    "LoggingConfig",
    "get_config_manager",
    "get_config",
    "reset_config_manager"
]
