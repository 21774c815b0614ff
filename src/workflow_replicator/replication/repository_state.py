"""
Checks on the state of a cloned target repository.
"""

import logging
from typing import Mapping, Any

logger = logging.getLogger(__name__)


def is_initialized(branches: Mapping[str, Any], default_branch: str) -> bool:
    """
    Check whether a repository has been initialized.

    A freshly created repository has a default branch name configured but no
    such branch yet, and must be skipped.

    Args:
        branches: Local branch names mapped to their details
        default_branch: Name of the repository's default branch

    Returns:
        True if the default branch exists locally
    """
    logger.debug(f"List of local branches: {list(branches)}")
    return default_branch in branches
