"""RepoResult and RepoError — outcome of a repository operation.

A store failure, a missing row, and an undecodable row are distinct
statuses here, so callers that care can tell "not found" from "store
broken". The collapsing accessors on :class:`PeopleRepository` map every
non-success status to an empty value.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ResultStatus(StrEnum):
    """Terminal outcome of one repository call."""

    OK = "ok"
    NOT_FOUND = "not_found"
    STORE_ERROR = "store_error"
    INVALID_ROW = "invalid_row"


class RepoError(BaseModel):
    """Structured error payload within a RepoResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class RepoResult(BaseModel):
    """Return type of the result-preserving repository operations.

    Attributes:
        status: Outcome of the call.
        op: Name of the operation (e.g. ``"get"``).
        value: Payload when ``status`` is ``ok``.
        error: Structured error for ``store_error`` and ``invalid_row``.
    """

    model_config = {"frozen": True}

    status: ResultStatus
    op: str
    value: Any = None
    error: RepoError | None = None

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK

    @classmethod
    def success(cls, op: str, value: Any) -> RepoResult:
        return cls(status=ResultStatus.OK, op=op, value=value)

    @classmethod
    def not_found(cls, op: str) -> RepoResult:
        return cls(status=ResultStatus.NOT_FOUND, op=op)

    @classmethod
    def failure(
        cls,
        op: str,
        status: ResultStatus,
        *,
        code: str,
        message: str,
        detail: dict[str, Any] | None = None,
    ) -> RepoResult:
        error = RepoError(code=code, message=message, detail=detail or {})
        return cls(status=status, op=op, error=error)

    def unwrap_or(self, default: Any) -> Any:
        """Return the payload on success, otherwise *default*."""
        return self.value if self.ok else default
