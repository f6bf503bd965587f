"""Person aggregate.

A Person owns its Username, Name, and Stack values. ``id`` is absent until
the store assigns one; ``stack`` distinguishes "no stack" (None) from an
empty list.
"""

from __future__ import annotations

from pydantic import BaseModel

from rinha.domain.values import Name, Stack, Username


class Person(BaseModel):
    """A person record, valid by construction."""

    model_config = {"frozen": True}

    id: str | None = None
    username: Username
    name: Name
    birthdate: str
    stack: list[Stack] | None = None

    @property
    def tags(self) -> list[str]:
        """Raw stack tag strings; empty when the person has no stack."""
        return [tag.data for tag in self.stack or []]
