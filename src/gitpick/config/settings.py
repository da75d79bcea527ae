"""Settings loading with layered overrides.

Priority chain: bundled defaults < ~/.config/gitpick/config.yaml
< .gitpick/config.yaml < GITPICK_* environment variables.
Deep merge: dicts merge recursively, lists/scalars replace.
"""

import importlib.resources
import os
import subprocess
import sys
from pathlib import Path
from typing import Mapping, Optional

import yaml

from gitpick.config.utils import deep_merge, load_yaml, split_words
from gitpick.models.core import Command
from gitpick.models.state import CommandConfig, Settings

_config: Optional[dict] = None
_loaded_sources: list[str] = []

GLOBAL_CONFIG = Path.home() / ".config" / "gitpick" / "config.yaml"
PROJECT_CONFIG = Path(".gitpick") / "config.yaml"

TRUTHY = ("1", "true", "yes", "on")


def _load_defaults() -> dict:
    """Load bundled default config."""
    try:
        files = importlib.resources.files("gitpick")
        config_path = files / "defaults" / "config.yaml"
        content = config_path.read_text()
        return yaml.safe_load(content)
    except (FileNotFoundError, TypeError):
        dev_path = Path(__file__).parent.parent / "defaults" / "config.yaml"
        if dev_path.exists():
            with open(dev_path) as f:
                return yaml.safe_load(f)
        raise FileNotFoundError("Could not find defaults/config.yaml")


def load_config() -> dict:
    """Load config with layered overrides: defaults < global < project."""
    global _loaded_sources
    _loaded_sources = []

    result = _load_defaults()
    _loaded_sources.append("defaults")

    global_overrides = load_yaml(GLOBAL_CONFIG)
    if global_overrides:
        result = deep_merge(result, global_overrides)
        _loaded_sources.append(str(GLOBAL_CONFIG))

    project_overrides = load_yaml(PROJECT_CONFIG)
    if project_overrides:
        result = deep_merge(result, project_overrides)
        _loaded_sources.append(str(PROJECT_CONFIG))

    return result


def get_config() -> dict:
    """Get cached config (loads on first access)."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config() -> dict:
    """Force reload config."""
    global _config
    _config = load_config()
    return _config


def get_config_loaded_sources() -> list[str]:
    """Return list of config sources that were loaded (for logging)."""
    return _loaded_sources


def _git_core_pager() -> str:
    result = subprocess.run(["git", "config", "core.pager"], capture_output=True, text=True)
    return result.stdout.strip() if result.returncode == 0 else ""


def _default_copy_cmd() -> str:
    return "pbcopy" if sys.platform == "darwin" else "xclip -selection clipboard"


def _int(value, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def build_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Resolve global settings from config layers and environment."""
    env = os.environ if env is None else env
    config = get_config()

    pager = env.get("GITPICK_PAGER") or config.get("pager") or _git_core_pager() or "cat"
    pagers = config.get("pagers") or {}

    def kind_pager(kind: str) -> tuple[str, ...]:
        value = env.get(f"GITPICK_{kind.upper()}_PAGER") or pagers.get(kind) or pager
        return split_words(value)

    log_cfg = config.get("log") or {}
    graph = env.get("GITPICK_LOG_GRAPH_ENABLE")
    context = config.get("context") or {}
    ignore = config.get("ignore") or {}

    fzf_opts = split_words((config.get("fzf") or {}).get("default_opts"))
    fzf_opts += split_words(env.get("GITPICK_FZF_DEFAULT_OPTS"))

    enter_pager = env.get("GITPICK_ENTER_PAGER") or pagers.get("enter") or "less -r"
    log_format = env.get("GITPICK_LOG_FORMAT") or log_cfg.get("format") or Settings.log_format
    copy_cmd = env.get("GITPICK_COPY_CMD") or config.get("copy_cmd") or _default_copy_cmd()
    preview_context = env.get("GITPICK_PREVIEW_CONTEXT", context.get("preview"))
    fullscreen_context = env.get("GITPICK_FULLSCREEN_CONTEXT", context.get("fullscreen"))
    gi_remote = env.get("GITPICK_GI_REPO_REMOTE") or ignore.get("remote")
    gi_local = env.get("GITPICK_GI_REPO_LOCAL") or ignore.get("local")
    gi_templates = env.get("GITPICK_GI_TEMPLATES") or ignore.get("templates")
    debug = env.get("GITPICK_DEBUG")

    return Settings(
        fzf_default_opts=fzf_opts,
        pager=split_words(pager),
        show_pager=kind_pager("show"),
        diff_pager=kind_pager("diff"),
        blame_pager=kind_pager("blame"),
        ignore_pager=kind_pager("ignore"),
        enter_pager=split_words(enter_pager),
        log_format=log_format,
        log_graph=graph.lower() in TRUTHY if graph else bool(log_cfg.get("graph", True)),
        copy_cmd=split_words(copy_cmd),
        preview_context=_int(preview_context, 3),
        fullscreen_context=_int(fullscreen_context, 10),
        gi_repo_remote=gi_remote or Settings.gi_repo_remote,
        gi_repo_local=Path(gi_local).expanduser() if gi_local else Settings().gi_repo_local,
        gi_templates=Path(gi_templates).expanduser() if gi_templates else None,
        debug=debug.lower() in TRUTHY if debug else bool(config.get("debug")),
    )


def build_command_config(
    command: Command, env: Optional[Mapping[str, str]] = None
) -> CommandConfig:
    """Resolve one command's overrides. Environment wins over config files."""
    env = os.environ if env is None else env
    section = (get_config().get("commands") or {}).get(command.value) or {}
    prefix = command.env_prefix

    def pick(key: str) -> tuple[str, ...]:
        value = env.get(f"{prefix}_{key.upper()}")
        return split_words(value if value is not None else section.get(key))

    return CommandConfig(
        command=command,
        lister=pick("lister"),
        preview=pick("preview"),
        action=pick("action"),
        git_opts=pick("git_opts"),
        fzf_opts=pick("fzf_opts"),
    )
