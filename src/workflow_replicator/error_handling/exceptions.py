"""
Custom exceptions for the workflow replicator.
"""

from typing import Optional, Dict, Any


class ReplicationError(Exception):
    """
    Base exception for all workflow replicator errors.

    Every error raised by this package derives from this class so the
    command-line layer can report failures uniformly.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None
    ):
        """
        Initialize replication error.

        Args:
            message: Error message
            error_code: Optional error code for categorization
            context: Additional context information
            cause: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}
        self.cause = cause

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "cause": str(self.cause) if self.cause else None
        }

    def __str__(self) -> str:
        parts = [self.message]

        if self.error_code:
            parts.append(f"Code: {self.error_code}")

        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"Context: {context_str}")

        if self.cause:
            parts.append(f"Caused by: {self.cause}")

        return " | ".join(parts)


class ConfigurationError(ReplicationError):
    """Raised when configuration values are missing or invalid."""

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if setting:
            context['setting'] = setting

        kwargs['context'] = context
        kwargs.setdefault('error_code', 'CONFIG_INVALID')
        super().__init__(message, **kwargs)

        self.setting = setting


class RepositoryDataError(ReplicationError):
    """
    Exception for malformed repository records.

    Raised when a repository payload from the hosting API lacks a field the
    filters rely on, or carries it with the wrong shape.
    """

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if field_name:
            context['field'] = field_name

        kwargs['context'] = context
        kwargs.setdefault('error_code', 'REPOSITORY_DATA')
        super().__init__(message, **kwargs)

        self.field_name = field_name


class UnsupportedTriggerError(ReplicationError):
    """Raised when candidate files are requested for an unknown trigger event."""

    def __init__(self, trigger_event: str, **kwargs):
        context = kwargs.get('context', {})
        context['trigger_event'] = trigger_event

        kwargs['context'] = context
        kwargs.setdefault('error_code', 'TRIGGER_UNSUPPORTED')
        super().__init__(f"Unsupported trigger event: {trigger_event}", **kwargs)

        self.trigger_event = trigger_event


class FileCopyError(ReplicationError):
    """
    Exception for file staging errors.

    Wraps the filesystem error that stopped a copy. Copies that had already
    completed are left in place.
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        destination: Optional[str] = None,
        **kwargs
    ):
        context = kwargs.get('context', {})
        if source:
            context['source'] = source
        if destination:
            context['destination'] = destination

        kwargs['context'] = context
        kwargs.setdefault('error_code', 'COPY_FAILED')
        super().__init__(message, **kwargs)

        self.source = source
        self.destination = destination


class GitHubAPIError(ReplicationError):
    """Custom exception for GitHub API errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Dict] = None,
        **kwargs
    ):
        context = kwargs.get('context', {})
        if status_code is not None:
            context['status_code'] = status_code

        kwargs['context'] = context
        kwargs.setdefault('error_code', 'GITHUB_API')
        super().__init__(message, **kwargs)

        self.status_code = status_code
        self.response_data = response_data


class GitRepositoryError(ReplicationError):
    """Raised when a local working copy cannot be inspected."""

    def __init__(self, message: str, repo_path: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if repo_path:
            context['repo_path'] = repo_path

        kwargs['context'] = context
        kwargs.setdefault('error_code', 'GIT_REPOSITORY')
        super().__init__(message, **kwargs)

        self.repo_path = repo_path
