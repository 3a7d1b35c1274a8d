"""Inflection pattern parsing and interpolation.

A pattern is a translated string containing markers such as::

    Dear @{f:Lady|m:Sir|n:You|All}!

Each marker lists branches separated by ``|``. A branch is either
``token:text`` (``token`` may be a comma separated list such as
``f,m:text``) or a bare ``text`` used when no token branch applies.

Branch selection for a marker:

1. For each ``kind -> value`` pair of the options, in iteration order, the
   value is resolved within its kind; the first resolved token that a
   branch lists selects that branch.
2. Otherwise, for each kind owning one of the marker's tokens, the kind's
   default token selects a branch if one lists it.
3. Otherwise the first bare branch is used.
4. Otherwise the marker renders as an empty string.

Unterminated markers and ``@{}`` are copied to the output unchanged.
"""

import re
from typing import Any, Iterator, List, Mapping, NamedTuple, Optional, Tuple

from infrastructure.inflection.kinds import InflectionRegistry, normalize_token

MARKER_START = "@{"
MARKER_END = "}"
BRANCH_SEPARATOR = "|"
TOKEN_SEPARATOR = ":"

_TOKEN_LIST = re.compile(r"^\s*[\w-]+(\s*,\s*[\w-]+)*\s*$")


class Branch(NamedTuple):
    """One ``token:text`` or bare ``text`` alternative of a marker."""

    tokens: Tuple[str, ...]
    text: str

    @property
    def is_default(self) -> bool:
        return not self.tokens


class Marker(NamedTuple):
    """A parsed ``@{...}`` marker and its position in the pattern."""

    start: int
    end: int
    branches: Tuple[Branch, ...]


def parse_branch(raw: str) -> Branch:
    """Split a raw branch into its token list and text."""
    head, sep, text = raw.partition(TOKEN_SEPARATOR)
    if sep and _TOKEN_LIST.match(head):
        return Branch(tuple(t.strip() for t in head.split(",")), text)
    return Branch((), raw)


def _split_branches(body: str) -> List[str]:
    """Split a marker body on separators outside nested braces."""
    parts = []
    depth = 0
    current = []
    for char in body:
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
        elif char == BRANCH_SEPARATOR and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return parts


def _find_marker_end(pattern: str, body_start: int) -> int:
    """Index of the brace closing a marker body, or -1 if unterminated."""
    depth = 0
    for index in range(body_start, len(pattern)):
        char = pattern[index]
        if char == "{":
            depth += 1
        elif char == "}":
            if depth == 0:
                return index
            depth -= 1
    return -1


def iter_markers(pattern: str) -> Iterator[Marker]:
    """Yield the well-formed markers of ``pattern`` from left to right."""
    position = 0
    while True:
        start = pattern.find(MARKER_START, position)
        if start < 0:
            return
        body_start = start + len(MARKER_START)
        end = _find_marker_end(pattern, body_start)
        if end < 0:
            # Unclosed "@{" stays literal; later markers still apply
            position = body_start
            continue
        body = pattern[body_start:end]
        if not body:
            position = end + 1
            continue
        branches = tuple(parse_branch(raw) for raw in _split_branches(body))
        yield Marker(start, end + 1, branches)
        position = end + 1


def parse_markers(pattern: str) -> List[Marker]:
    """Parse every well-formed marker of ``pattern``."""
    return list(iter_markers(pattern))


def _branch_key(
    token: str, registry: Optional[InflectionRegistry]
) -> Tuple[Optional[str], str]:
    """Kind and canonical token of a branch token."""
    if registry is None:
        return None, token
    kind = registry.kind_of(token)
    if kind is None:
        return None, token
    return kind, registry.resolve(kind, token) or token


def select_branch(
    marker: Marker,
    options: Mapping[str, Any],
    registry: Optional[InflectionRegistry] = None,
) -> Optional[Branch]:
    """Pick the branch of ``marker`` that applies to ``options``.

    Args:
        marker: Parsed marker.
        options: Kind -> supplied value.
        registry: Token and alias data of the locale; without one, supplied
            values are compared with branch tokens literally.

    Returns:
        The selected branch, or None when nothing applies.
    """
    keyed = [
        (branch, [_branch_key(token, registry) for token in branch.tokens])
        for branch in marker.branches
    ]

    for kind, value in options.items():
        if registry is None:
            resolved = normalize_token(value)
        else:
            resolved = registry.resolve(kind, value)
        if not resolved:
            continue
        for branch, keys in keyed:
            for branch_kind, token in keys:
                if token == resolved and branch_kind in (None, kind):
                    return branch

    if registry is not None:
        seen = set()
        for _, keys in keyed:
            for branch_kind, _ in keys:
                if branch_kind is None or branch_kind in seen:
                    continue
                seen.add(branch_kind)
                default = registry.default_token(branch_kind)
                if default is None:
                    continue
                for branch, branch_keys in keyed:
                    if (branch_kind, default) in branch_keys:
                        return branch

    for branch in marker.branches:
        if branch.is_default:
            return branch
    return None


def interpolate(
    pattern: str,
    options: Optional[Mapping[str, Any]] = None,
    registry: Optional[InflectionRegistry] = None,
) -> str:
    """Replace every inflection marker of ``pattern``.

    Args:
        pattern: Translated string possibly containing markers.
        options: Kind -> supplied value.
        registry: Token and alias data of the pattern's locale.

    Returns:
        The pattern with each marker replaced by its selected branch text.
    """
    if MARKER_START not in pattern:
        return pattern

    options = options or {}
    pieces = []
    position = 0
    for marker in iter_markers(pattern):
        pieces.append(pattern[position : marker.start])
        branch = select_branch(marker, options, registry)
        pieces.append(branch.text if branch else "")
        position = marker.end
    pieces.append(pattern[position:])
    return "".join(pieces)
