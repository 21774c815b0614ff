"""Tests for reading local branches with GitPython mocked."""

from unittest.mock import MagicMock, patch

import pytest
from git import InvalidGitRepositoryError

from workflow_replicator.error_handling import GitRepositoryError
from workflow_replicator.replication import is_initialized
from workflow_replicator.repository import local_branches


def make_head(name, sha):
    head = MagicMock()
    head.name = name
    head.commit.hexsha = sha
    return head


class TestLocalBranches:
    @patch("workflow_replicator.repository.local_branches.Repo")
    def test_maps_heads_to_commits(self, repo_cls, tmp_path):
        repo_cls.return_value.heads = [make_head("main", "abc"), make_head("develop", "def")]

        branches = local_branches(tmp_path)

        assert branches == {"main": "abc", "develop": "def"}
        repo_cls.assert_called_once_with(str(tmp_path))
        assert is_initialized(branches, "main")

    @patch("workflow_replicator.repository.local_branches.Repo")
    def test_empty_clone_has_no_branches(self, repo_cls, tmp_path):
        repo_cls.return_value.heads = []

        assert is_initialized(local_branches(tmp_path), "main") is False

    @patch("workflow_replicator.repository.local_branches.Repo")
    def test_not_a_repository(self, repo_cls, tmp_path):
        repo_cls.side_effect = InvalidGitRepositoryError(str(tmp_path))

        with pytest.raises(GitRepositoryError) as excinfo:
            local_branches(tmp_path)

        assert excinfo.value.repo_path == str(tmp_path)
