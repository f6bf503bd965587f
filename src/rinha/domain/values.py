"""Bounded value types — strings that exist only when a length bound holds.

``make_username`` and ``make_name`` are the single enforcement point for the
two size invariants. The models are frozen and validate on every
construction path, so an out-of-bounds Username or Name cannot exist in
memory. Lengths are counted in code points; no trimming, case folding, or
charset restriction is applied.

Examples:
    >>> make_username("zeh")
    Username(data='zeh')
    >>> make_username("x" * 33) is None
    True
"""

from __future__ import annotations

from pydantic import BaseModel, Field, ValidationError

USERNAME_MAX_LENGTH = 32
NAME_MAX_LENGTH = 100
# Documented bound for stack tags; only enforced when a caller opts in.
STACK_MAX_LENGTH = 32


class Username(BaseModel):
    """Public handle of a person (``apelido``), at most 32 characters."""

    model_config = {"frozen": True, "strict": True}

    data: str = Field(max_length=USERNAME_MAX_LENGTH)


class Name(BaseModel):
    """Full name of a person (``nome``), at most 100 characters."""

    model_config = {"frozen": True, "strict": True}

    data: str = Field(max_length=NAME_MAX_LENGTH)


class Stack(BaseModel):
    """Free-form skill tag."""

    model_config = {"frozen": True, "strict": True}

    data: str


def make_username(value: object) -> Username | None:
    """Return a Username for *value*, or None if it is not a str of ≤32 chars."""
    try:
        return Username(data=value)
    except ValidationError:
        return None


def make_name(value: object) -> Name | None:
    """Return a Name for *value*, or None if it is not a str of ≤100 chars."""
    try:
        return Name(data=value)
    except ValidationError:
        return None


def make_stack(value: object, *, max_length: int | None = None) -> Stack | None:
    """Return a Stack for *value*, or None if it is not a str.

    When *max_length* is given, tags longer than it are rejected too.
    """
    if not isinstance(value, str):
        return None
    if max_length is not None and len(value) > max_length:
        return None
    return Stack(data=value)
