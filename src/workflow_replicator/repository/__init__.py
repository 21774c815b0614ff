"""
Collaborators reaching outside the process: the GitHub API and local clones.
"""

from .github_client import GitHubClient
from .local_branches import local_branches

__all__ = [
    "GitHubClient",
    "local_branches"
]
