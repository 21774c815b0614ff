"""
Selection of organization repositories that must not receive replicated files.
"""

import logging
from typing import Iterable, List, Sequence

from ..models import Repository, FilterCriteria

logger = logging.getLogger(__name__)


def archived_repositories(repositories: Iterable[Repository]) -> List[str]:
    """Return the names of archived repositories."""
    return [repo.name for repo in repositories if repo.archived]


def forked_repositories(repositories: Iterable[Repository]) -> List[str]:
    """Return the names of forked repositories."""
    return [repo.name for repo in repositories if repo.fork]


def private_repositories(repositories: Iterable[Repository]) -> List[str]:
    """Return the names of private repositories."""
    return [repo.name for repo in repositories if repo.private]


def ignored_by_topics(topics_to_include: Sequence[str], repositories: Iterable[Repository]) -> List[str]:
    """
    Return the names of repositories carrying none of ``topics_to_include``.

    An empty topic list selects nothing: topic filtering is then disabled
    rather than excluding every repository.

    Args:
        topics_to_include: Topics a repository needs at least one of
        repositories: All the repositories

    Returns:
        Names of repositories to exclude
    """
    if not topics_to_include:
        return []

    included = set(topics_to_include)
    return [repo.name for repo in repositories if not repo.has_any_topic(included)]


def compute_ignore_list(
    self_repo_name: str,
    repositories: Sequence[Repository],
    criteria: FilterCriteria
) -> List[str]:
    """
    Assemble the names of repositories that should be ignored.

    Archived repositories and the repository running the workflow are always
    ignored; the remaining exclusions depend on ``criteria``. The result may
    hold duplicates and must only be used for membership tests.

    Args:
        self_repo_name: Name of the repository the workflow runs in
        repositories: All the repositories of the organization
        criteria: Exclusion settings

    Returns:
        Names of repositories to ignore
    """
    ignored = list(criteria.repos_to_ignore)

    # Pushing to an archived repository fails, so they are never targets.
    ignored.extend(archived_repositories(repositories))

    ignored.append(self_repo_name)

    if criteria.topics_to_include:
        ignored.extend(ignored_by_topics(criteria.topics_to_include, repositories))

    if criteria.exclude_forked:
        ignored.extend(forked_repositories(repositories))

    if criteria.exclude_private:
        ignored.extend(private_repositories(repositories))

    logger.debug(f"Repositories to ignore: {ignored}")
    return ignored


def repositories_to_replicate(
    self_repo_name: str,
    repositories: Sequence[Repository],
    criteria: FilterCriteria
) -> List[Repository]:
    """
    Return the repositories that should receive replicated files.

    Args:
        self_repo_name: Name of the repository the workflow runs in
        repositories: All the repositories of the organization
        criteria: Exclusion settings

    Returns:
        Surviving repositories in their original order
    """
    ignored = set(compute_ignore_list(self_repo_name, repositories, criteria))
    targets = [repo for repo in repositories if repo.name not in ignored]

    logger.info(f"{len(targets)} of {len(repositories)} repositories selected for replication")
    return targets
