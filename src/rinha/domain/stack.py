"""Stack tag list parsing.

Parsing is all-or-nothing: a non-list value, or any element that is not a
string, fails the whole list. Order and duplicates are preserved.
"""

from __future__ import annotations

import json

from rinha.domain.values import Stack, make_stack


def parse_stack(value: object, *, max_length: int | None = None) -> list[Stack] | None:
    """Parse a decoded JSON array of strings into a list of Stack.

    Examples:
        >>> [s.data for s in parse_stack(["C#", "Node", "C#"])]
        ['C#', 'Node', 'C#']
        >>> parse_stack(["C#", 1]) is None
        True
        >>> parse_stack("C#") is None
        True
    """
    if not isinstance(value, list):
        return None
    tags: list[Stack] = []
    for item in value:
        tag = make_stack(item, max_length=max_length)
        if tag is None:
            return None
        tags.append(tag)
    return tags


def parse_stack_text(text: str | None, *, max_length: int | None = None) -> list[Stack] | None:
    """Parse the JSON-encoded stack column format. Invalid JSON yields None."""
    if text is None:
        return None
    try:
        value = json.loads(text)
    except (TypeError, ValueError):
        return None
    return parse_stack(value, max_length=max_length)


def dump_stack(tags: list[Stack]) -> str:
    """Serialize tags to the JSON text stored in the ``stack`` column."""
    return json.dumps([tag.data for tag in tags], ensure_ascii=False)
