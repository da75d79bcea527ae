"""Core models: commands, candidates, selections."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional


class Command(Enum):
    """Every command the dispatcher knows. Values are the CLI names."""

    LOG = "log"
    DIFF = "diff"
    ADD = "add"
    RESET = "reset"
    STASH_SHOW = "stash-show"
    STASH_PUSH = "stash-push"
    CLEAN = "clean"
    CHERRY_PICK = "cherry-pick"
    CHERRY_PICK_FROM_BRANCH = "cherry-pick-from-branch"
    REBASE = "rebase"
    FIXUP = "fixup"
    CHECKOUT_FILE = "checkout-file"
    CHECKOUT_BRANCH = "checkout-branch"
    CHECKOUT_TAG = "checkout-tag"
    CHECKOUT_COMMIT = "checkout-commit"
    BRANCH_DELETE = "branch-delete"
    REVERT_COMMIT = "revert-commit"
    BLAME = "blame"
    IGNORE = "ignore"

    @property
    def env_prefix(self) -> str:
        """Environment variable stem, e.g. GITPICK_CHECKOUT_BRANCH."""
        return "GITPICK_" + self.value.upper().replace("-", "_")

    @classmethod
    def from_name(cls, name: Optional[str]) -> Optional["Command"]:
        """Look up a command by CLI name. None if unknown."""
        for command in cls:
            if command.value == name:
                return command
        return None


class Ordering(Enum):
    """How a multi-selection is ordered before the action runs."""

    AS_SELECTED = auto()  # fzf output order
    OLDEST_FIRST = auto()  # ascending list position
    NEWEST_FIRST = auto()  # descending list position


TAG_SEPARATOR = "\t"


@dataclass(frozen=True)
class Candidate:
    """One line of lister output, tagged with its position in that output."""

    position: int
    text: str

    @property
    def tagged(self) -> str:
        """Line as handed to fzf: position, tab, displayed text."""
        return f"{self.position}{TAG_SEPARATOR}{self.text}"

    @staticmethod
    def parse_tagged(line: str) -> Optional[int]:
        """Recover the position from a line fzf printed back. None if untagged."""
        tag, sep, _ = line.partition(TAG_SEPARATOR)
        if not sep or not tag.isdigit():
            return None
        return int(tag)


@dataclass
class Selection:
    """Outcome of one interactive selection."""

    candidates: list[Candidate] = field(default_factory=list)
    returncode: int = 0
    cancelled: bool = False
