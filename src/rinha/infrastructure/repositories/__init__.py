"""Repositories translating Person operations into SQL and back."""

from rinha.infrastructure.repositories.people import SEARCH_LIMIT, PeopleRepository
from rinha.infrastructure.repositories.result import RepoError, RepoResult, ResultStatus

__all__ = [
    "SEARCH_LIMIT",
    "PeopleRepository",
    "RepoError",
    "RepoResult",
    "ResultStatus",
]
