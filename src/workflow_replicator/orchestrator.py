"""
Planning of a replication run: which files go to which repositories, on which branch.
"""

import logging
import random
from pathlib import Path
from typing import List, Optional, Union

from .models import Repository, FilterCriteria, ReplicationTarget, ReplicationPlan
from .config import get_config, AppConfig
from .repository import GitHubClient, local_branches
from .replication import (
    TriggerEvent, get_files_to_replicate, repositories_to_replicate,
    get_branch_name, get_authenticated_url, is_initialized, copy_changed_files
)

logger = logging.getLogger(__name__)

GITHUB_WEB_URL = "https://github.com"


class ReplicationPlanner:
    """
    Coordinates file selection, repository filtering and push target preparation.

    Nothing is pushed here; the planner hands the driver everything it needs
    to clone, commit and push.
    """

    def __init__(
        self,
        github_client: Optional[GitHubClient] = None,
        config: Optional[AppConfig] = None,
        rng: Optional[random.Random] = None
    ):
        self.config = config or get_config()
        self.github_client = github_client or GitHubClient(
            access_token=self.config.github.access_token,
            base_url=self.config.github.api_base_url,
            timeout=self.config.github.timeout,
            max_retries=self.config.github.max_retries
        )
        self.rng = rng

    def criteria(self) -> FilterCriteria:
        settings = self.config.replication
        return FilterCriteria.from_inputs(
            repos_to_ignore=settings.repos_to_ignore,
            topics_to_include=settings.topics_to_include,
            exclude_forked=settings.exclude_forked,
            exclude_private=settings.exclude_private
        )

    def files_to_replicate(
        self,
        trigger_event: Union[str, TriggerEvent],
        commit_id: Optional[str] = None,
        owner: Optional[str] = None,
        repo: Optional[str] = None,
        workspace: Optional[Union[str, Path]] = None
    ) -> List[str]:
        settings = self.config.replication
        return get_files_to_replicate(
            trigger_event,
            files_to_ignore=settings.files_to_ignore,
            files_to_include=settings.files_to_include,
            commit_lookup=self.github_client,
            commit_id=commit_id,
            owner=owner,
            repo=repo,
            workspace=workspace,
            workflows_dir=settings.workflows_dir
        )

    def target_repositories(self, org: str, self_repo_name: str) -> List[Repository]:
        repositories = self.github_client.list_organization_repositories(org)
        return repositories_to_replicate(self_repo_name, repositories, self.criteria())

    def remote_url(self, repository: Repository, org: str) -> str:
        """Authenticated push URL for ``repository``, owned by ``org`` unless its full name says otherwise."""
        full_name = repository.full_name or f"{org}/{repository.name}"
        url = repository.html_url or f"{GITHUB_WEB_URL}/{full_name}"
        return get_authenticated_url(self.github_client.access_token or "", url)

    def plan(
        self,
        org: str,
        self_repo_name: str,
        trigger_event: Union[str, TriggerEvent],
        commit_id: Optional[str] = None,
        workspace: Optional[Union[str, Path]] = None
    ) -> ReplicationPlan:
        """
        Build the full replication plan for a run.

        Repositories are only listed when at least one file qualifies.

        Args:
            org: Organization owning the repositories
            self_repo_name: Repository the workflow runs in
            trigger_event: Event that triggered the workflow
            commit_id: Commit that triggered a push run
            workspace: Checked-out source repository

        Returns:
            Replication plan
        """
        branch_name = get_branch_name(commit_id if trigger_event == TriggerEvent.PUSH else None, self.rng)
        files = self.files_to_replicate(
            trigger_event,
            commit_id=commit_id,
            owner=org,
            repo=self_repo_name,
            workspace=workspace
        )

        plan = ReplicationPlan(branch_name=branch_name, files=files)
        if not files:
            logger.info("No files qualify for replication")
            return plan

        for repository in self.target_repositories(org, self_repo_name):
            plan.targets.append(ReplicationTarget(
                repository=repository,
                branch_name=branch_name,
                remote_url=self.remote_url(repository, org)
            ))
            logger.debug(f"Prepared push target {repository.full_name or repository.name} on {branch_name}")

        logger.info(f"Planned replication of {len(files)} files to {len(plan.targets)} repositories")
        return plan

    def stage(
        self,
        files: List[str],
        destination: Union[str, Path],
        workspace: Optional[Union[str, Path]] = None
    ) -> None:
        copy_changed_files(files, destination, source_root=workspace)

    def is_ready(self, repo_path: Union[str, Path], default_branch: str) -> bool:
        """Check that a cloned target has its default branch, i.e. is not empty."""
        ready = is_initialized(local_branches(repo_path), default_branch)
        if not ready:
            logger.info(f"Repository at {repo_path} is not initialized, skipping")
        return ready
