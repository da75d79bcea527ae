"""Position tagging and selection ordering.

fzf reports multi-selections in click order. History actions need
chronological order instead, so every candidate carries the position it had
in the lister output and the selection is sorted by that tag afterwards.
"""

from typing import Iterable, Sequence

from gitpick.models.core import Candidate, Ordering


def tag_positions(lines: Iterable[str]) -> list[Candidate]:
    """Tag each lister line with its index."""
    return [Candidate(position=i, text=line) for i, line in enumerate(lines)]


def resolve_selection(
    output_lines: Iterable[str], candidates: Sequence[Candidate]
) -> list[Candidate]:
    """Map fzf output back to the candidates it came from.

    Lines whose tag does not name one of the current candidates are dropped,
    as are repeats.
    """
    by_position = {c.position: c for c in candidates}
    picked: list[Candidate] = []
    seen: set[int] = set()
    for line in output_lines:
        position = Candidate.parse_tagged(line)
        if position is None or position in seen or position not in by_position:
            continue
        seen.add(position)
        picked.append(by_position[position])
    return picked


def order_selection(selected: Sequence[Candidate], ordering: Ordering) -> list[Candidate]:
    """Apply the picker's ordering policy to a selection."""
    if ordering is Ordering.OLDEST_FIRST:
        return sorted(selected, key=lambda c: c.position)
    if ordering is Ordering.NEWEST_FIRST:
        return sorted(selected, key=lambda c: c.position, reverse=True)
    return list(selected)
