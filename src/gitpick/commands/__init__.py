"""Per-command picker instantiations and the dispatch table."""

from gitpick.commands.blame import BlamePicker
from gitpick.commands.checkout import (
    BranchDeletePicker,
    CheckoutBranchPicker,
    CheckoutCommitPicker,
    CheckoutTagPicker,
)
from gitpick.commands.history import (
    CherryPickFromBranchPicker,
    CherryPickPicker,
    FixupPicker,
    RebasePicker,
    RevertCommitPicker,
)
from gitpick.commands.ignore import IgnorePicker
from gitpick.commands.log import DiffPicker, LogPicker
from gitpick.commands.staging import AddPicker, CheckoutFilePicker, CleanPicker, ResetPicker
from gitpick.commands.stash import StashPushPicker, StashShowPicker
from gitpick.models.core import Command
from gitpick.picker.pipeline import Picker

PICKERS: dict[Command, type[Picker]] = {
    Command.LOG: LogPicker,
    Command.DIFF: DiffPicker,
    Command.ADD: AddPicker,
    Command.RESET: ResetPicker,
    Command.STASH_SHOW: StashShowPicker,
    Command.STASH_PUSH: StashPushPicker,
    Command.CLEAN: CleanPicker,
    Command.CHERRY_PICK: CherryPickPicker,
    Command.CHERRY_PICK_FROM_BRANCH: CherryPickFromBranchPicker,
    Command.REBASE: RebasePicker,
    Command.FIXUP: FixupPicker,
    Command.CHECKOUT_FILE: CheckoutFilePicker,
    Command.CHECKOUT_BRANCH: CheckoutBranchPicker,
    Command.CHECKOUT_TAG: CheckoutTagPicker,
    Command.CHECKOUT_COMMIT: CheckoutCommitPicker,
    Command.BRANCH_DELETE: BranchDeletePicker,
    Command.REVERT_COMMIT: RevertCommitPicker,
    Command.BLAME: BlamePicker,
    Command.IGNORE: IgnorePicker,
}

__all__ = ["PICKERS"]
