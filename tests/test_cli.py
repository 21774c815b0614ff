"""Tests for the command-line interface."""

import json
import re
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from workflow_replicator.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def patched_client(github_client):
    with patch("workflow_replicator.orchestrator.GitHubClient", return_value=github_client):
        yield github_client


class TestFilesCommand:
    def test_dispatch(self, runner, workspace):
        result = runner.invoke(cli, [
            "files", "-e", "workflow_dispatch", "-w", str(workspace),
            "--files-to-ignore", "release.yml", "--files-to-include", "docs/readme.md",
        ])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [".github/workflows/ci.yml", "docs/readme.md"]

    def test_inputs_from_environment(self, runner, workspace, monkeypatch):
        monkeypatch.setenv("INPUT_FILES_TO_IGNORE", "ci.yml,release.yml")

        result = runner.invoke(cli, ["files", "-e", "workflow_dispatch", "-w", str(workspace)])

        assert result.exit_code == 0, result.output
        assert result.output == ""

    def test_push(self, runner, patched_client):
        result = runner.invoke(cli, [
            "files", "-e", "push", "--owner", "org", "--repo", "source", "--commit-id", "abc",
        ])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [".github/workflows/ci.yml"]

    def test_push_without_repository(self, runner, patched_client):
        result = runner.invoke(cli, ["files", "-e", "push", "--commit-id", "abc"])

        assert result.exit_code == 1
        assert "owner and name are required" in result.output
        patched_client.get_commit_files.assert_not_called()

    def test_unknown_trigger(self, runner, workspace):
        result = runner.invoke(cli, ["files", "-e", "schedule", "-w", str(workspace)])

        assert result.exit_code == 1
        assert "Unsupported trigger event: schedule" in result.output


class TestReposCommand:
    def test_lists_targets(self, runner, patched_client):
        result = runner.invoke(cli, [
            "repos", "--org", "org", "--self-repo", "source", "--exclude-forked", "--exclude-private",
        ])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["api", "docs"]

    def test_topics(self, runner, patched_client):
        result = runner.invoke(cli, [
            "repos", "--org", "org", "--self-repo", "source", "--topics-to-include", "python",
        ])

        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == ["api", "fork-of-lib"]


class TestBranchNameCommand:
    def test_with_commit(self, runner):
        result = runner.invoke(cli, ["branch-name", "--commit-id", "abc123"])

        assert result.output.strip() == "bot/update-global-workflow-abc123"

    def test_manual(self, runner):
        result = runner.invoke(cli, ["branch-name"])

        assert re.match(r"^bot/manual-update-global-workflow-[0-9a-z]+$", result.output.strip())


class TestCopyCommand:
    def test_copies(self, runner, workspace, tmp_path):
        destination = tmp_path / "clone"

        result = runner.invoke(cli, ["copy", str(destination), ".github/workflows/ci.yml", "-w", str(workspace)])

        assert result.exit_code == 0, result.output
        assert (destination / ".github" / "workflows" / "ci.yml").exists()

    def test_missing_file(self, runner, workspace, tmp_path):
        result = runner.invoke(cli, ["copy", str(tmp_path / "clone"), "nope.yml", "-w", str(workspace)])

        assert result.exit_code == 1
        assert "Failed to copy nope.yml" in result.output


class TestPlanCommand:
    def test_json_plan(self, runner, patched_client):
        result = runner.invoke(cli, [
            "plan", "--org", "org", "--self-repo", "source", "-e", "push", "--commit-id", "abc", "--json",
        ])

        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {
            "branch_name": "bot/update-global-workflow-abc",
            "files": [".github/workflows/ci.yml"],
            "repositories": ["api", "fork-of-lib", "secret", "docs"],
        }

    def test_text_plan_hides_token(self, runner, patched_client):
        result = runner.invoke(cli, ["plan", "--org", "org", "--self-repo", "source", "-e", "push", "--commit-id", "abc"])

        assert result.exit_code == 0, result.output
        assert "Branch: bot/update-global-workflow-abc" in result.output
        assert "tok@" not in result.output


class TestConfigCommand:
    def test_json_masks_token(self, runner):
        result = runner.invoke(cli, ["config", "--format", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["github"]["access_token"] == "********"

    def test_invalid_configuration(self, runner, monkeypatch):
        monkeypatch.setenv("GITHUB_TIMEOUT", "-1")

        result = runner.invoke(cli, ["config"])

        assert result.exit_code == 1
        assert "Invalid timeout" in result.output
