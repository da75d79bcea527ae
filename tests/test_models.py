"""Tests for gitpick.models."""

from gitpick.models.core import Candidate, Command, Ordering, Selection
from gitpick.models.state import CommandConfig, Settings


class TestCommand:
    def test_from_name_known(self):
        assert Command.from_name("checkout-branch") is Command.CHECKOUT_BRANCH

    def test_from_name_unknown(self):
        assert Command.from_name("push") is None

    def test_from_name_none(self):
        assert Command.from_name(None) is None

    def test_env_prefix(self):
        assert Command.CHECKOUT_BRANCH.env_prefix == "GITPICK_CHECKOUT_BRANCH"
        assert Command.LOG.env_prefix == "GITPICK_LOG"

    def test_complete_set(self):
        assert [c.value for c in Command] == [
            "log",
            "diff",
            "add",
            "reset",
            "stash-show",
            "stash-push",
            "clean",
            "cherry-pick",
            "cherry-pick-from-branch",
            "rebase",
            "fixup",
            "checkout-file",
            "checkout-branch",
            "checkout-tag",
            "checkout-commit",
            "branch-delete",
            "revert-commit",
            "blame",
            "ignore",
        ]


class TestCandidate:
    def test_tagged(self):
        assert Candidate(3, "abc1234 fix").tagged == "3\tabc1234 fix"

    def test_parse_tagged(self):
        assert Candidate.parse_tagged("12\t[ M]  src/app.py") == 12

    def test_parse_untagged(self):
        assert Candidate.parse_tagged("abc1234 fix") is None

    def test_parse_non_numeric_tag(self):
        assert Candidate.parse_tagged("x\tline") is None

    def test_text_with_tabs_survives(self):
        c = Candidate(0, "a\tb")
        assert Candidate.parse_tagged(c.tagged) == 0


class TestSelection:
    def test_defaults(self):
        s = Selection()
        assert s.candidates == []
        assert s.returncode == 0
        assert s.cancelled is False


class TestConfigValues:
    def test_command_config_defaults(self):
        config = CommandConfig(command=Command.ADD)
        assert config.lister == ()
        assert config.action == ()
        assert config.git_opts == ()

    def test_templates_dir_default(self, tmp_path):
        settings = Settings(gi_repo_local=tmp_path)
        assert settings.templates_dir == tmp_path / "templates"

    def test_templates_dir_override(self, tmp_path):
        settings = Settings(gi_repo_local=tmp_path, gi_templates=tmp_path / "t")
        assert settings.templates_dir == tmp_path / "t"

    def test_ordering_members(self):
        assert {o.name for o in Ordering} == {"AS_SELECTED", "OLDEST_FIRST", "NEWEST_FIRST"}
