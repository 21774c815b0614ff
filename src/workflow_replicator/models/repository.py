"""
Repository data model for organization repositories considered for replication.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any, FrozenSet
import json

from ..error_handling import RepositoryDataError


@dataclass(frozen=True)
class Repository:
    """
    Snapshot of a hosted repository as returned by the organization listing.

    Only ``name``, ``archived``, ``private``, ``fork`` and ``topics`` take part
    in filtering. The remaining fields are carried along so a push target can
    be prepared without a second API call.
    """

    name: str
    archived: bool = False
    private: bool = False
    fork: bool = False
    topics: FrozenSet[str] = field(default_factory=frozenset)
    full_name: Optional[str] = None
    html_url: Optional[str] = None
    default_branch: Optional[str] = None

    def has_any_topic(self, topics) -> bool:
        """Check whether the repository carries at least one of ``topics``."""
        return not self.topics.isdisjoint(topics)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert repository to dictionary for serialization.

        Returns:
            Dictionary representation of the repository
        """
        return {
            "name": self.name,
            "full_name": self.full_name,
            "archived": self.archived,
            "private": self.private,
            "fork": self.fork,
            "topics": sorted(self.topics),
            "html_url": self.html_url,
            "default_branch": self.default_branch
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Repository':
        """
        Create repository from an API payload.

        Missing flags default to ``False`` and missing topics to an empty set.
        A missing name or a topics value that is not a list is rejected.

        Args:
            data: Dictionary containing repository data

        Returns:
            Repository instance

        Raises:
            RepositoryDataError: If the payload cannot describe a repository
        """
        name = data.get("name")
        if not name or not isinstance(name, str):
            raise RepositoryDataError("Repository payload has no name", field_name="name")

        topics = data.get("topics")
        if topics is None:
            topics = []
        elif not isinstance(topics, (list, tuple, set, frozenset)):
            raise RepositoryDataError(
                f"Repository {name} has malformed topics: {topics!r}",
                field_name="topics"
            )

        return cls(
            name=name,
            archived=bool(data.get("archived", False)),
            private=bool(data.get("private", False)),
            fork=bool(data.get("fork", False)),
            topics=frozenset(topics),
            full_name=data.get("full_name"),
            html_url=data.get("html_url"),
            default_branch=data.get("default_branch")
        )
