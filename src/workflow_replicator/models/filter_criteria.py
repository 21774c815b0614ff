"""
Per-invocation criteria deciding which repositories are skipped.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..parsing import parse_comma_list


@dataclass(frozen=True)
class FilterCriteria:
    """Exclusion settings supplied by the workflow inputs."""

    repos_to_ignore: Tuple[str, ...] = ()
    topics_to_include: Tuple[str, ...] = ()
    exclude_forked: bool = False
    exclude_private: bool = False

    @classmethod
    def from_inputs(
        cls,
        repos_to_ignore: Optional[str] = None,
        topics_to_include: Optional[str] = None,
        exclude_forked: bool = False,
        exclude_private: bool = False
    ) -> 'FilterCriteria':
        """
        Build criteria from raw comma-separated inputs.

        Empty or missing list inputs become empty tuples instead of being
        parsed, so ``""`` never turns into a single empty entry.
        """
        return cls(
            repos_to_ignore=tuple(parse_comma_list(repos_to_ignore)) if repos_to_ignore else (),
            topics_to_include=tuple(parse_comma_list(topics_to_include)) if topics_to_include else (),
            exclude_forked=exclude_forked,
            exclude_private=exclude_private
        )
