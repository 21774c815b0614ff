"""
File and repository selection for workflow replication.
"""

from .repository_filter import (
    archived_repositories, forked_repositories, private_repositories,
    ignored_by_topics, compute_ignore_list, repositories_to_replicate
)
from .file_selector import (
    TriggerEvent, CommitFilesLookup, DEFAULT_WORKFLOWS_DIR, select_files,
    list_workspace_files, collect_candidate_paths, get_files_to_replicate
)
from .branch import get_branch_name
from .remote import get_authenticated_url
from .repository_state import is_initialized
from .file_copier import copy_changed_files

__all__ = [
    "archived_repositories",
    "forked_repositories",
    "private_repositories",
    "ignored_by_topics",
    "compute_ignore_list",
    "repositories_to_replicate",
    "TriggerEvent",
    "CommitFilesLookup",
    "DEFAULT_WORKFLOWS_DIR",
    "select_files",
    "list_workspace_files",
    "collect_candidate_paths",
    "get_files_to_replicate",
    "get_branch_name",
    "get_authenticated_url",
    "is_initialized",
    "copy_changed_files"
]
