"""
Push targets and replication plans produced by the planner.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Any

from .repository import Repository


@dataclass(frozen=True)
class ReplicationTarget:
    """A repository prepared to receive the replicated files."""

    repository: Repository
    branch_name: str
    remote_url: str

    def __repr__(self) -> str:
        # remote_url embeds the access token
        return f"ReplicationTarget(repository={self.repository.name!r}, branch_name={self.branch_name!r})"


@dataclass
class ReplicationPlan:
    """Files to replicate together with every repository that should receive them."""

    branch_name: str
    files: List[str] = field(default_factory=list)
    targets: List[ReplicationTarget] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.files or not self.targets

    def to_dict(self) -> Dict[str, Any]:
        return {
            "branch_name": self.branch_name,
            "files": list(self.files),
            "repositories": [target.repository.name for target in self.targets]
        }
