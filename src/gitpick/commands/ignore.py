"""Ignore-template picker over a local clone of a gitignore template collection.

Template contents go to stdout so the result can be redirected:

    gitpick ignore python node >> .gitignore
"""

import argparse
import shutil
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from gitpick.git.repo import run_git
from gitpick.models.core import Command
from gitpick.models.state import Settings
from gitpick.picker.pipeline import Picker
from gitpick.picker.process import page_text
from gitpick.ui.output import error, log, success, warn
from gitpick.utils.formatting import strip_ansi

SUFFIX = ".gitignore"


def template_name(path: Path) -> str:
    """'Python.gitignore' -> 'Python'; other files keep their full name."""
    name = path.name
    return name[: -len(SUFFIX)] if name.endswith(SUFFIX) else name


def _template_files(templates_dir: Path) -> list[Path]:
    if not templates_dir.is_dir():
        return []
    return sorted((p for p in templates_dir.rglob("*") if p.is_file()), key=str)


def list_templates(templates_dir: Path) -> list[str]:
    """Template names, unique ignoring case, sorted ignoring case."""
    names: dict[str, str] = {}
    for path in _template_files(templates_dir):
        names.setdefault(template_name(path).lower(), template_name(path))
    return sorted(names.values(), key=str.lower)


def find_template(templates_dir: Path, name: str) -> Optional[Path]:
    """File for a template name, matching '<name>.gitignore' or '<name>' ignoring case.

    Several matches (same name in different folders) resolve to the
    lexically smallest path.
    """
    wanted = (f"{name}{SUFFIX}".lower(), name.lower())
    for path in _template_files(templates_dir):
        if path.name.lower() in wanted:
            return path
    return None


def render_templates(
    templates_dir: Path, names: Sequence[str], out: Optional[TextIO] = None
) -> int:
    """Write each named template with a '### <name>' header (to stdout by default).

    Unknown names are warned about and skipped. Returns 1 only when every
    name missed.
    """
    if out is None:
        out = sys.stdout
    found = 0
    for name in names:
        path = find_template(templates_dir, name)
        if path is None:
            warn(f"No gitignore template found for '{name}'.")
            continue
        found += 1
        content = path.read_text(errors="replace")
        if not content.endswith("\n"):
            content += "\n"
        out.write(f"### {template_name(path)}\n{content}\n")
    out.flush()
    return 0 if found or not names else 1


def update_templates(settings: Settings) -> int:
    """Clone the template collection, or pull it when already cloned."""
    local = settings.gi_repo_local
    if local.is_dir():
        log(f"Updating ignore templates in {local}")
        result = run_git(["-C", str(local), "pull", "--no-rebase", "--ff"])
    else:
        log(f"Cloning ignore templates from {settings.gi_repo_remote}")
        local.parent.mkdir(parents=True, exist_ok=True)
        result = run_git(["clone", "--depth=1", settings.gi_repo_remote, str(local)])
    if result.returncode != 0:
        error(f"Failed to update ignore templates: {result.stderr.strip()}")
        return result.returncode
    success("Ignore templates up to date")
    return 0


def clean_templates(settings: Settings) -> int:
    """Remove the local template clone."""
    local = settings.gi_repo_local
    if local.is_dir():
        shutil.rmtree(local)
        success(f"Removed {local}")
    else:
        log(f"Nothing to remove at {local}")
    return 0


def parse_ignore_args(args: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gitpick ignore",
        description="Print gitignore templates. Without names, pick them interactively.",
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument("--update", action="store_true", help="Clone or pull the template cache")
    group.add_argument("--clean", action="store_true", help="Remove the template cache")
    group.add_argument("--list", action="store_true", help="List available template names")
    parser.add_argument("names", nargs="*", metavar="TEMPLATE", help="Template names to print")
    return parser.parse_args(list(args))


class IgnorePicker(Picker):
    """Pick gitignore templates and print their contents."""

    command = Command.IGNORE
    summary = "print gitignore templates"
    multi = True
    requires_repo = False
    empty_message = "No ignore templates found."

    def __init__(self, settings, config, args=()):
        super().__init__(settings, config, args)
        self.options = parse_ignore_args(self.args)

    @property
    def templates_dir(self) -> Path:
        return self.settings.templates_dir

    def direct(self) -> Optional[int]:
        if self.options.clean:
            return clean_templates(self.settings)
        if self.options.update:
            return update_templates(self.settings)
        if not self.settings.gi_repo_local.is_dir():
            code = update_templates(self.settings)
            if code != 0:
                return code
        if self.options.list:
            for name in list_templates(self.templates_dir):
                print(name)
            return 0
        if self.options.names:
            return render_templates(self.templates_dir, self.options.names)
        return None

    def list_candidates(self) -> list[str]:
        return list_templates(self.templates_dir)

    def target(self, line: str) -> str:
        return strip_ansi(line).strip()

    def preview(self, line: str, full: bool = False) -> int:
        if self.config.preview:
            return super().preview(line, full)
        path = find_template(self.templates_dir, self.target(line))
        if path is None:
            return 0
        enter = self.settings.enter_pager if full else ()
        return page_text(path.read_text(errors="replace"), self.settings.ignore_pager, enter)

    def act(self, targets: list[str]) -> int:
        return render_templates(self.templates_dir, targets)
