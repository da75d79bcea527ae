#!/usr/bin/env python3

"""Generate coverage-badge.json for shields.io and list gitpick's least-covered modules."""

import json
import subprocess
import sys
from pathlib import Path

BUILD_DIR = Path("build")
BADGE = Path("coverage-badge.json")
WEAKEST = 5


def badge_color(pct: int) -> str:
    if pct >= 80:
        return "green"
    if pct >= 60:
        return "yellow"
    return "red"


def weakest_modules(data: dict, count: int = WEAKEST) -> list[tuple[str, float]]:
    """Lowest-covered gitpick source files, package-relative."""
    modules = []
    for path, info in data.get("files", {}).items():
        _, sep, rel = path.replace("\\", "/").rpartition("gitpick/")
        if not sep:
            continue
        modules.append((rel, info["summary"]["percent_covered"]))
    return sorted(modules, key=lambda item: item[1])[:count]


def main() -> int:
    # Keep coverage output out of the repo root
    BUILD_DIR.mkdir(exist_ok=True)
    coverage_json = BUILD_DIR / "coverage.json"

    result = subprocess.run(
        [
            sys.executable,
            "-m",
            "pytest",
            "tests/",
            "--cov=gitpick",
            f"--cov-report=json:{coverage_json}",
            "-q",
        ],
        capture_output=True,
        text=True,
    )

    try:
        with open(coverage_json) as f:
            data = json.load(f)
        pct = round(data["totals"]["percent_covered"])
    except (FileNotFoundError, KeyError, json.JSONDecodeError):
        print(f"Could not read {coverage_json}")
        print(result.stdout[-2000:])
        return 1

    color = badge_color(pct)
    badge = {
        "schemaVersion": 1,
        "label": "gitpick coverage",
        "message": f"{pct}%",
        "color": color,
    }
    with open(BADGE, "w") as f:
        json.dump(badge, f, indent=2)
        f.write("\n")

    print(f"Coverage badge updated: {pct}% ({color})")
    for module, module_pct in weakest_modules(data):
        print(f"  {module_pct:5.1f}%  {module}")
    return result.returncode


if __name__ == "__main__":
    sys.exit(main())
