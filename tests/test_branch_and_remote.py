"""Tests for branch naming, remote URLs and initialization checks."""

import logging
import random
import re

from workflow_replicator.replication import get_branch_name, get_authenticated_url, is_initialized

MANUAL_BRANCH = re.compile(r"^bot/manual-update-global-workflow-[0-9a-z]+$")


class TestGetBranchName:
    def test_commit_branch(self):
        assert get_branch_name("abc123") == "bot/update-global-workflow-abc123"

    def test_manual_branch_without_commit(self):
        assert MANUAL_BRANCH.match(get_branch_name(None))

    def test_empty_commit_is_manual(self):
        assert MANUAL_BRANCH.match(get_branch_name(""))

    def test_suffix_length(self):
        name = get_branch_name(rng=random.Random(7))

        assert len(name.rsplit("-", 1)[1]) == 6

    def test_random_source_is_injectable(self):
        assert get_branch_name(rng=random.Random(42)) == get_branch_name(rng=random.Random(42))

    def test_different_draws_differ(self):
        rng = random.Random(1)

        assert get_branch_name(rng=rng) != get_branch_name(rng=rng)


class TestGetAuthenticatedUrl:
    def test_embeds_token(self):
        assert get_authenticated_url("tok", "https://github.com/org/repo") == "https://tok@github.com/org/repo.git"

    def test_uses_text_after_last_double_slash(self):
        assert get_authenticated_url("tok", "git+https://github.com/org/repo") == "https://tok@github.com/org/repo.git"

    def test_url_without_scheme(self):
        assert get_authenticated_url("tok", "github.com/org/repo") == "https://tok@github.com/org/repo.git"

    def test_existing_suffix_is_kept_and_reported(self, caplog):
        with caplog.at_level(logging.WARNING):
            url = get_authenticated_url("tok", "https://github.com/org/repo.git")

        assert url == "https://tok@github.com/org/repo.git.git"
        assert ".git.git" in caplog.text


class TestIsInitialized:
    def test_default_branch_present(self):
        assert is_initialized({"main": {"commit": "abc"}}, "main") is True

    def test_no_branches(self):
        assert is_initialized({}, "main") is False

    def test_other_branches_only(self):
        assert is_initialized({"develop": "abc"}, "main") is False
