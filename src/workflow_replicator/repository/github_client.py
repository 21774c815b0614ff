"""
GitHub API client for the reads the replicator needs.
"""

import requests
import time
import logging
from typing import Dict, Any, Optional, List

from ..models import Repository
from ..config import get_config
from ..error_handling import GitHubAPIError

logger = logging.getLogger(__name__)

PER_PAGE = 100


class GitHubClient:
    """
    GitHub REST client with token authentication and retries.

    Server errors and network failures are retried with exponential
    backoff; client errors are raised immediately as ``GitHubAPIError``.
    """

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        max_retries: Optional[int] = None,
        session: Optional[requests.Session] = None
    ):
        """
        Initialize GitHub API client.

        Args:
            access_token: GitHub access token, defaults to configuration
            base_url: GitHub API base URL, defaults to configuration
            timeout: Request timeout in seconds, defaults to configuration
            max_retries: Retries for server and network errors, defaults to configuration
            session: Pre-built session, mainly for tests
        """
        config = get_config()

        self.access_token = access_token or config.github.access_token
        self.base_url = base_url or config.github.api_base_url
        self.timeout = timeout if timeout is not None else config.github.timeout
        self.max_retries = max_retries if max_retries is not None else config.github.max_retries

        self.session = session or requests.Session()
        self._setup_session()

    def _setup_session(self) -> None:
        headers = {
            "Accept": "application/vnd.github+json",
            "User-Agent": "workflow-replicator/1.0"
        }

        if self.access_token:
            headers["Authorization"] = f"token {self.access_token}"

        self.session.headers.update(headers)

    def _make_request(self, method: str, endpoint: str, **kwargs) -> requests.Response:
        """
        Make a request to the GitHub API with retry logic.

        Args:
            method: HTTP method (GET, POST, etc.)
            endpoint: API endpoint (without base URL)
            **kwargs: Additional arguments for requests

        Returns:
            Response object

        Raises:
            GitHubAPIError: If the request fails after retries
        """
        url = f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

        for attempt in range(self.max_retries + 1):
            try:
                response = self.session.request(
                    method=method,
                    url=url,
                    timeout=self.timeout,
                    **kwargs
                )
            except requests.exceptions.RequestException as e:
                if attempt < self.max_retries:
                    wait_time = 2 ** attempt
                    logger.warning(f"Request failed: {e}. Retrying in {wait_time} seconds")
                    time.sleep(wait_time)
                    continue
                raise GitHubAPIError(f"Request to {endpoint} failed after {self.max_retries} retries", cause=e)

            if response.ok:
                return response

            error_data = None
            try:
                error_data = response.json()
            except ValueError:
                pass

            error_message = f"GitHub API request failed: {response.status_code}"
            if isinstance(error_data, dict) and "message" in error_data:
                error_message += f" - {error_data['message']}"

            if attempt < self.max_retries and response.status_code >= 500:
                wait_time = 2 ** attempt
                logger.warning(f"Server error {response.status_code}. Retrying in {wait_time} seconds")
                time.sleep(wait_time)
                continue

            raise GitHubAPIError(
                error_message,
                status_code=response.status_code,
                response_data=error_data
            )

        raise GitHubAPIError("Unexpected error in request retry logic")

    def get_commit_files(self, owner: str, repo: str, commit_id: str) -> List[Dict[str, Any]]:
        """
        List the files changed by a commit.

        Args:
            owner: Organization or user name
            repo: Repository name
            commit_id: Commit SHA

        Returns:
            File entries, each holding at least ``filename``
        """
        files: List[Dict[str, Any]] = []
        page = 1

        while True:
            response = self._make_request(
                "GET",
                f"/repos/{owner}/{repo}/commits/{commit_id}",
                params={"per_page": PER_PAGE, "page": page}
            )
            batch = response.json().get("files", [])
            files.extend(batch)

            if len(batch) < PER_PAGE:
                break
            page += 1

        logger.debug(f"Commit {commit_id} in {owner}/{repo} changed {len(files)} files")
        return files

    def list_organization_repositories(self, org: str) -> List[Repository]:
        """
        List every repository of an organization.

        Args:
            org: Organization name

        Returns:
            Repository snapshots

        Raises:
            GitHubAPIError: If the listing fails
            RepositoryDataError: If a returned repository is malformed
        """
        repositories: List[Repository] = []
        page = 1

        while True:
            response = self._make_request(
                "GET",
                f"/orgs/{org}/repos",
                params={"type": "all", "per_page": PER_PAGE, "page": page}
            )
            batch = response.json()
            repositories.extend(Repository.from_dict(item) for item in batch)

            if len(batch) < PER_PAGE:
                break
            page += 1

        logger.info(f"Retrieved {len(repositories)} repositories for organization {org}")
        return repositories
