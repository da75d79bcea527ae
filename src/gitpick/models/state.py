"""Configuration values built once per invocation."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from gitpick.models.core import Command

GI_CACHE = Path.home() / ".cache" / "gitpick" / "gi"


@dataclass(frozen=True)
class Settings:
    """Global settings shared by every picker."""

    fzf_default_opts: tuple[str, ...] = ()
    pager: tuple[str, ...] = ("cat",)
    show_pager: tuple[str, ...] = ("cat",)
    diff_pager: tuple[str, ...] = ("cat",)
    blame_pager: tuple[str, ...] = ("cat",)
    ignore_pager: tuple[str, ...] = ("cat",)
    enter_pager: tuple[str, ...] = ("less", "-r")
    log_format: str = "%C(auto)%h%d %s %C(black)%C(bold)%cr%Creset"
    log_graph: bool = True
    copy_cmd: tuple[str, ...] = ("pbcopy",)
    preview_context: int = 3
    fullscreen_context: int = 10
    gi_repo_remote: str = "https://github.com/dvcs/gitignore"
    gi_repo_local: Path = field(default_factory=lambda: GI_CACHE / "repos" / "dvcs" / "gitignore")
    gi_templates: Optional[Path] = None  # defaults to <gi_repo_local>/templates
    debug: bool = False

    @property
    def templates_dir(self) -> Path:
        return self.gi_templates or self.gi_repo_local / "templates"


@dataclass(frozen=True)
class CommandConfig:
    """Per-command overrides. Empty tuples mean built-in behavior."""

    command: Command
    lister: tuple[str, ...] = ()
    preview: tuple[str, ...] = ()
    action: tuple[str, ...] = ()
    git_opts: tuple[str, ...] = ()
    fzf_opts: tuple[str, ...] = ()
