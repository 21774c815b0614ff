"""
Error types raised by the workflow replicator.
"""

from .exceptions import (
    ReplicationError, ConfigurationError, RepositoryDataError,
    UnsupportedTriggerError, FileCopyError, GitHubAPIError, GitRepositoryError
)

__all__ = [
    "ReplicationError",
    "ConfigurationError",
    "RepositoryDataError",
    "UnsupportedTriggerError",
    "FileCopyError",
    "GitHubAPIError",
    "GitRepositoryError"
]
