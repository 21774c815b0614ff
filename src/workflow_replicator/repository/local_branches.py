"""
Reading local branches of a cloned target repository.
"""

import logging
from pathlib import Path
from typing import Dict, Union

from git import Repo, GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from ..error_handling import GitRepositoryError

logger = logging.getLogger(__name__)


def local_branches(repo_path: Union[str, Path]) -> Dict[str, str]:
    """
    Map the local branches of a working copy to their head commit SHA.

    A clone of an empty repository has no branches at all and yields an
    empty mapping.

    Args:
        repo_path: Path to the working copy

    Returns:
        Branch name to commit SHA

    Raises:
        GitRepositoryError: If the path is not a readable git repository
    """
    try:
        git_repo = Repo(str(repo_path))
        branches = {head.name: head.commit.hexsha for head in git_repo.heads}
    except (InvalidGitRepositoryError, NoSuchPathError, GitCommandError) as e:
        raise GitRepositoryError(f"Cannot read branches of {repo_path}", repo_path=str(repo_path), cause=e)

    logger.debug(f"Local branches in {repo_path}: {sorted(branches)}")
    return branches
