"""Plain/JSON output helpers.

The CLI renders a RepoResult either as the bare outbound Person document(s)
or, with ``--json``, as an envelope that also carries the status and any
structured error.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rinha.domain.codec import person_to_json
from rinha.domain.person import Person

if TYPE_CHECKING:
    from rinha.infrastructure.repositories.result import RepoResult


def encode_value(value: Any) -> Any:
    """Encode a repository payload with the outbound Person format."""
    if isinstance(value, Person):
        return person_to_json(value)
    if isinstance(value, list):
        return [encode_value(item) for item in value]
    return value


def error_message(result: RepoResult) -> str:
    """Human-readable reason for a non-success result."""
    if result.error is not None:
        return result.error.message
    return result.status.value.replace("_", " ")


def format_result(result: RepoResult, *, json_output: bool = False) -> str:
    """Format a RepoResult for display.

    Args:
        result: The repository result to format.
        json_output: If True, return the JSON envelope; otherwise the bare
            payload on success or an ``ERROR:`` line on failure.
    """
    if json_output:
        envelope = {
            "ok": result.ok,
            "op": result.op,
            "status": result.status.value,
            "data": encode_value(result.value),
            "error": result.error.model_dump() if result.error else None,
        }
        return _json.dumps(envelope, indent=2, ensure_ascii=False)
    if result.ok:
        return _json.dumps(encode_value(result.value), ensure_ascii=False)
    return f"ERROR: {result.op} - {error_message(result)}"
