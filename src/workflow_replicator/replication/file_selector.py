"""
Selection of changed files that qualify for replication.
"""

import os
import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Union, Dict, Any, Protocol

from ..parsing import parse_comma_list
from ..error_handling import UnsupportedTriggerError

logger = logging.getLogger(__name__)

DEFAULT_WORKFLOWS_DIR = ".github/workflows"


class TriggerEvent(str, Enum):
    """Workflow events that decide where candidate files come from."""
    PUSH = "push"
    WORKFLOW_DISPATCH = "workflow_dispatch"


class CommitFilesLookup(Protocol):
    """Anything able to list the files touched by a commit."""

    def get_commit_files(self, owner: str, repo: str, commit_id: str) -> List[Dict[str, Any]]:
        ...


def select_files(
    candidate_paths: Sequence[str],
    files_to_ignore: Optional[str] = None,
    files_to_include: Optional[str] = None,
    workflows_dir: str = DEFAULT_WORKFLOWS_DIR
) -> List[str]:
    """
    Decide which candidate paths should be replicated.

    A path qualifies when it lies in the workflows directory or is listed in
    ``files_to_include``, unless its file name is listed in ``files_to_ignore``.
    Ignore entries match the base name only while include entries must match
    the full path.

    Args:
        candidate_paths: Relative POSIX paths to check
        files_to_ignore: Comma-separated file names to skip
        files_to_include: Comma-separated paths to replicate in addition to workflows
        workflows_dir: Path fragment identifying workflow files

    Returns:
        Accepted paths in input order
    """
    ignore_list = parse_comma_list(files_to_ignore) if files_to_ignore else []
    include_list = parse_comma_list(files_to_include) if files_to_include else []

    logger.info(f"List of files that should be ignored: {ignore_list}")
    logger.info(f"List of files that should be included: {include_list}")

    selected = []
    for path in candidate_paths:
        file_name = path.split('/')[-1]
        is_ignored = file_name in ignore_list
        is_included = path in include_list
        is_workflow_file = workflows_dir in path

        logger.info(
            f"Checking if {path} is located in workflows directory ({is_workflow_file}) "
            f"or is included ({is_included}) and if {file_name} should be ignored ({is_ignored})"
        )

        if (is_workflow_file or is_included) and not is_ignored:
            selected.append(path)

    return selected


def list_workspace_files(root: Union[str, Path]) -> List[str]:
    """
    Walk ``root`` recursively and list every file relative to it.

    Symbolic links to directories are listed as entries and not followed.

    Args:
        root: Directory to scan

    Returns:
        Sorted relative paths using ``/`` separators
    """
    root_path = Path(root)
    files = []

    for dirpath, dirnames, filenames in os.walk(root_path):
        linked_dirs = [name for name in dirnames if os.path.islink(os.path.join(dirpath, name))]
        for filename in filenames + linked_dirs:
            relative = Path(dirpath, filename).relative_to(root_path)
            files.append(relative.as_posix())

    files.sort()
    return files


def collect_candidate_paths(
    trigger_event: Union[str, TriggerEvent],
    commit_lookup: Optional[CommitFilesLookup] = None,
    commit_id: Optional[str] = None,
    owner: Optional[str] = None,
    repo: Optional[str] = None,
    workspace: Optional[Union[str, Path]] = None
) -> List[str]:
    """
    Gather the paths to check for replication.

    A push lists the files changed by ``commit_id``; a manual dispatch lists
    the whole workspace.

    Args:
        trigger_event: Name of the event that triggered the workflow
        commit_lookup: Source of commit file lists (push only)
        commit_id: Commit to inspect (push only)
        owner: Organization or user owning the repository (push only)
        repo: Repository name (push only)
        workspace: Directory to scan (dispatch only), defaults to the current directory

    Returns:
        Candidate relative paths

    Raises:
        UnsupportedTriggerError: If the event is neither push nor workflow_dispatch
        ValueError: If a push is requested without a lookup, commit, owner or repository
    """
    try:
        event = TriggerEvent(trigger_event)
    except ValueError:
        raise UnsupportedTriggerError(str(trigger_event))

    if event is TriggerEvent.PUSH:
        if commit_lookup is None or not commit_id:
            raise ValueError("A commit lookup and commit id are required for push events")
        if not owner or not repo:
            raise ValueError("The repository owner and name are required for push events")

        commit_files = commit_lookup.get_commit_files(owner, repo, commit_id)
        paths = [item["filename"] for item in commit_files]
        logger.debug(f"Files changed in commit {commit_id}: {paths}")
        return paths

    workspace_path = Path(workspace) if workspace else Path.cwd()
    paths = list_workspace_files(workspace_path)
    logger.debug(f"Files found in {workspace_path}: {paths}")
    return paths


def get_files_to_replicate(
    trigger_event: Union[str, TriggerEvent],
    files_to_ignore: Optional[str] = None,
    files_to_include: Optional[str] = None,
    commit_lookup: Optional[CommitFilesLookup] = None,
    commit_id: Optional[str] = None,
    owner: Optional[str] = None,
    repo: Optional[str] = None,
    workspace: Optional[Union[str, Path]] = None,
    workflows_dir: str = DEFAULT_WORKFLOWS_DIR
) -> List[str]:
    """Collect candidate paths for ``trigger_event`` and keep those that qualify."""
    candidates = collect_candidate_paths(
        trigger_event,
        commit_lookup=commit_lookup,
        commit_id=commit_id,
        owner=owner,
        repo=repo,
        workspace=workspace
    )
    return select_files(candidates, files_to_ignore, files_to_include, workflows_dir)
