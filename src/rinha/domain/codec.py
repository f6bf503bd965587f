"""Person codec — wire (JSON) and storage (row) adapters.

Both adapters share the bounded constructors from :mod:`rinha.domain.values`
and the stack parser from :mod:`rinha.domain.stack`, so the two decode paths
enforce the same invariants.

Wire format (Portuguese keys)::

    {"apelido": str, "nome": str, "nascimento": str, "stack": [str] | absent}

Storage format (``users`` row)::

    id, username, name, birth_date, stack (JSON text), search

Decoding never raises for bad input: any missing or invalid required field
yields None. The optional ``stack`` field degrades to "no stack" when it
cannot be parsed, unless :attr:`CodecOptions.strict_stack` is set.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from rinha.domain.person import Person
from rinha.domain.stack import dump_stack, parse_stack, parse_stack_text
from rinha.domain.values import Stack, make_name, make_username

# Sentinel distinguishing "field missing" from a null value.
_MISSING = object()


class CodecOptions(BaseModel):
    """Decode policy for the optional stack field."""

    model_config = {"frozen": True}

    strict_stack: bool = False
    max_stack_length: int | None = None


_DEFAULT_OPTIONS = CodecOptions()


def _decode_stack(
    raw: object, options: CodecOptions, *, from_text: bool
) -> tuple[bool, list[Stack] | None]:
    """Return ``(accepted, tags)`` for a raw stack value.

    With *from_text*, strings are JSON text (the storage column format).
    ``accepted`` is False only when the value is unparseable and the
    options demand strictness.
    """
    if raw is _MISSING or raw is None:
        return True, None
    if from_text and isinstance(raw, str):
        tags = parse_stack_text(raw, max_length=options.max_stack_length)
    else:
        tags = parse_stack(raw, max_length=options.max_stack_length)
    if tags is None and options.strict_stack:
        return False, None
    return True, tags


# ---------------------------------------------------------------------------
# Wire format
# ---------------------------------------------------------------------------


def person_from_json(doc: object, options: CodecOptions | None = None) -> Person | None:
    """Decode an inbound JSON document (already parsed) into a Person.

    ``id`` is never read from the document.
    """
    options = options or _DEFAULT_OPTIONS
    if not isinstance(doc, Mapping):
        return None

    username = make_username(doc.get("apelido"))
    name = make_name(doc.get("nome"))
    birthdate = doc.get("nascimento")
    if username is None or name is None or not isinstance(birthdate, str):
        return None

    accepted, stack = _decode_stack(doc.get("stack", _MISSING), options, from_text=False)
    if not accepted:
        return None
    return Person(username=username, name=name, birthdate=birthdate, stack=stack)


def person_from_json_text(raw: str | bytes, options: CodecOptions | None = None) -> Person | None:
    """Parse JSON text and decode it. Malformed JSON yields None."""
    try:
        doc = json.loads(raw)
    except (TypeError, ValueError):
        return None
    return person_from_json(doc, options)


def person_to_json(person: Person) -> dict[str, Any]:
    """Encode a Person as an outbound JSON document.

    A missing id becomes null; a missing stack becomes ``[]``.
    """
    return {
        "id": person.id,
        "apelido": person.username.data,
        "nome": person.name.data,
        "nascimento": person.birthdate,
        "stack": person.tags,
    }


# ---------------------------------------------------------------------------
# Storage format
# ---------------------------------------------------------------------------


def person_from_row(row: Mapping[str, Any], options: CodecOptions | None = None) -> Person | None:
    """Decode a ``users`` row, re-validating username and name bounds."""
    options = options or _DEFAULT_OPTIONS
    person_id = row.get("id")
    birthdate = row.get("birth_date")
    if person_id is None or birthdate is None:
        return None

    username = make_username(row.get("username"))
    name = make_name(row.get("name"))
    if username is None or name is None:
        return None

    accepted, stack = _decode_stack(row.get("stack", _MISSING), options, from_text=True)
    if not accepted:
        return None
    return Person(
        id=str(person_id),
        username=username,
        name=name,
        birthdate=str(birthdate),
        stack=stack,
    )


def search_text(person: Person) -> str:
    """Derived search column: username, name and comma-joined stack tags.

    Examples:
        >>> from rinha.domain.values import Name, Username
        >>> p = Person(
        ...     username=Username(data="zeh"),
        ...     name=Name(data="Jose"),
        ...     birthdate="2000-01-01",
        ...     stack=[Stack(data="C#"), Stack(data="Node")],
        ... )
        >>> search_text(p)
        'zeh Jose C#,Node'
    """
    return f"{person.username.data} {person.name.data} {','.join(person.tags)}"


def person_to_row(person: Person) -> dict[str, Any]:
    """Column values for inserting *person*. ``id`` is left to the store."""
    return {
        "username": person.username.data,
        "name": person.name.data,
        "birth_date": person.birthdate,
        "stack": dump_stack(person.stack) if person.stack is not None else None,
        "search": search_text(person),
    }
