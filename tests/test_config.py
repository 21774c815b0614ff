"""Tests for configuration loading."""

import pytest
import yaml

from workflow_replicator.config import ConfigManager, get_config, get_config_manager
from workflow_replicator.error_handling import ConfigurationError


class TestConfigManager:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL")

        config = ConfigManager().load_config()

        assert config.github.api_base_url == "https://api.github.com"
        assert config.replication.workflows_dir == ".github/workflows"
        assert config.replication.exclude_forked is False
        assert config.logging.level == "INFO"

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("INPUT_FILES_TO_IGNORE", "a.yml, b.yml")
        monkeypatch.setenv("INPUT_EXCLUDE_FORKED", "true")
        monkeypatch.setenv("INPUT_EXCLUDE_PRIVATE", "no")
        monkeypatch.setenv("GITHUB_TIMEOUT", "5")

        config = ConfigManager().load_config()

        assert config.github.access_token == "test-token"
        assert config.replication.files_to_ignore == "a.yml, b.yml"
        assert config.replication.exclude_forked is True
        assert config.replication.exclude_private is False
        assert config.github.timeout == 5

    def test_empty_environment_values_are_skipped(self, monkeypatch):
        monkeypatch.setenv("INPUT_REPOS_TO_IGNORE", "")

        assert ConfigManager().load_config().replication.repos_to_ignore is None

    def test_file_then_environment(self, tmp_path, monkeypatch):
        config_file = tmp_path / "replicator.yaml"
        config_file.write_text(yaml.safe_dump({
            "replication": {"topics_to_include": "ci", "repos_to_ignore": "docs"},
            "github": {"timeout": 10},
        }))
        monkeypatch.setenv("INPUT_REPOS_TO_IGNORE", "website")

        config = ConfigManager(config_file).load_config()

        assert config.replication.topics_to_include == "ci"
        assert config.replication.repos_to_ignore == "website"
        assert config.github.timeout == 10

    def test_empty_file(self, tmp_path):
        config_file = tmp_path / "replicator.yaml"
        config_file.write_text("")

        assert ConfigManager(config_file).load_config().github.timeout == 30

    def test_unknown_key_is_rejected(self, tmp_path):
        config_file = tmp_path / "replicator.yaml"
        config_file.write_text(yaml.safe_dump({"replication": {"files_to_ignor": "x"}}))

        with pytest.raises(ConfigurationError) as excinfo:
            ConfigManager(config_file).load_config()

        assert excinfo.value.setting == "replication.files_to_ignor"

    def test_replication_settings_are_the_action_inputs(self):
        replication = ConfigManager().load_config().replication

        assert set(vars(replication)) == {
            "files_to_ignore", "files_to_include", "repos_to_ignore", "topics_to_include",
            "exclude_forked", "exclude_private", "workflows_dir"
        }

    def test_invalid_yaml_is_rejected(self, tmp_path):
        config_file = tmp_path / "replicator.yaml"
        config_file.write_text("github: [unclosed")

        with pytest.raises(ConfigurationError):
            ConfigManager(config_file).load_config()

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ConfigurationError):
            ConfigManager().load_config()

    def test_log_level_is_normalized(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert ConfigManager().load_config().logging.level == "DEBUG"

    def test_invalid_boolean(self, monkeypatch):
        monkeypatch.setenv("INPUT_EXCLUDE_FORKED", "maybe")

        with pytest.raises(ConfigurationError):
            ConfigManager().load_config()

    def test_non_positive_timeout(self, monkeypatch):
        monkeypatch.setenv("GITHUB_TIMEOUT", "0")

        with pytest.raises(ConfigurationError):
            ConfigManager().load_config()

    def test_to_dict_masks_token(self):
        data = ConfigManager().load_config().to_dict()

        assert data["github"]["access_token"] == "********"

    def test_save_config_omits_token(self, tmp_path):
        target = tmp_path / "saved.yaml"

        ConfigManager().save_config(target)

        saved = yaml.safe_load(target.read_text())
        assert "access_token" not in saved["github"]
        assert saved["replication"]["workflows_dir"] == ".github/workflows"


class TestGlobalConfig:
    def test_manager_is_shared(self):
        assert get_config_manager() is get_config_manager()

    def test_get_config_caches(self):
        assert get_config() is get_config()
