"""Text helpers for picking identifiers out of displayed lines."""

import re

ANSI_RE = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
SHA_RE = re.compile(r"\b[0-9a-f]{7,40}\b")


def strip_ansi(text: str) -> str:
    """Remove ANSI color sequences."""
    return ANSI_RE.sub("", text)


def extract_sha(line: str) -> str:
    """First abbreviated or full commit hash in a log line, '' if none.

    Graph prefixes ('* | /') and decorations are skipped.
    """
    match = SHA_RE.search(strip_ansi(line))
    return match.group(0) if match else ""


def extract_bracketed_path(line: str) -> str:
    """Path from a '[XY]  path' status line; renames yield the new path."""
    text = strip_ansi(line)
    if text.startswith("["):
        _, _, text = text.partition("]")
    path = text.strip()
    if " -> " in path:
        path = path.split(" -> ")[-1]
    if "\t" in path:
        path = path.split("\t")[-1]
    return path.strip()


def first_field(line: str) -> str:
    """First whitespace-separated field of a line ('' for blank lines)."""
    fields = strip_ansi(line).split()
    return fields[0] if fields else ""
