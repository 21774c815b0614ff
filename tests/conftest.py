"""Shared fixtures for workflow replicator tests."""

from unittest.mock import MagicMock

import pytest

from workflow_replicator.config import ConfigManager, reset_config_manager
from workflow_replicator.logging import close_logging
from workflow_replicator.models import Repository


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Start every test from a clean environment and fresh global state."""
    for env_var in ConfigManager()._create_env_var_mapping():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setenv("GITHUB_TOKEN", "test-token")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")

    reset_config_manager()
    yield
    reset_config_manager()
    close_logging()


@pytest.fixture
def repositories():
    return [
        Repository(name="source", topics=frozenset({"ci"})),
        Repository(name="api", topics=frozenset({"ci", "python"})),
        Repository(name="legacy", archived=True, topics=frozenset({"ci"})),
        Repository(name="fork-of-lib", fork=True, topics=frozenset({"python"})),
        Repository(name="secret", private=True),
        Repository(name="docs", topics=frozenset({"website"})),
    ]


@pytest.fixture
def app_config():
    return ConfigManager().load_config()


@pytest.fixture
def github_client(repositories):
    client = MagicMock()
    client.access_token = "tok"
    client.list_organization_repositories.return_value = repositories
    client.get_commit_files.return_value = [
        {"filename": ".github/workflows/ci.yml", "status": "modified"},
        {"filename": "src/app.py", "status": "modified"},
    ]
    return client


@pytest.fixture
def workspace(tmp_path):
    root = tmp_path / "workspace"
    (root / ".github" / "workflows").mkdir(parents=True)
    (root / ".github" / "workflows" / "ci.yml").write_text("name: ci\n")
    (root / ".github" / "workflows" / "release.yml").write_text("name: release\n")
    (root / "docs").mkdir()
    (root / "docs" / "readme.md").write_text("# docs\n")
    (root / "setup.cfg").write_text("[metadata]\n")
    return root
