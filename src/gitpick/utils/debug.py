"""Debug logging utilities."""

import json
import os
import time
from pathlib import Path

from gitpick.models.state import Settings

DEBUG_LOG = Path.home() / ".cache" / "gitpick" / "debug.log"


def debug_enabled() -> bool:
    """True when GITPICK_DEBUG is set to a truthy value."""
    return os.environ.get("GITPICK_DEBUG", "").lower() in ("1", "true", "yes", "on")


def debug_log(settings_or_debug: Settings | bool, label: str, data) -> None:
    """Append debug info to log file if debug mode enabled."""
    enabled = (
        settings_or_debug.debug if isinstance(settings_or_debug, Settings) else settings_or_debug
    )
    if not enabled:
        return

    DEBUG_LOG.parent.mkdir(parents=True, exist_ok=True)
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
    with open(DEBUG_LOG, "a") as f:
        f.write(f"[{timestamp}] {label}: ")
        if isinstance(data, str):
            f.write(data)
        else:
            f.write(json.dumps(data))
        f.write("\n")
