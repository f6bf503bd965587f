"""Person repository — one SQL statement per call on a caller-owned connection.

Two surfaces share one implementation:

- ``search`` / ``get`` / ``count`` / ``insert`` return :class:`RepoResult`
  and keep store errors distinguishable from empty results.
- ``find_like`` / ``find_by_id`` / ``count_people`` / ``create`` collapse every
  non-success outcome to ``[]``, ``None`` or ``0``.

The repository never opens or closes the connection. Each call behaves like
an autocommit statement: a successful insert is committed, and any
``SQLAlchemyError`` rolls the connection back so it stays usable (for
example after a duplicate username).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import func, insert, select
from sqlalchemy.exc import SQLAlchemyError

from rinha.domain.codec import CodecOptions, person_from_row, person_to_row
from rinha.infrastructure.database.schema import users
from rinha.infrastructure.repositories.result import RepoResult, ResultStatus

if TYPE_CHECKING:
    from sqlalchemy import Connection

    from rinha.domain.person import Person

logger = logging.getLogger(__name__)

SEARCH_LIMIT = 50

_PERSON_COLUMNS = (
    users.c.id,
    users.c.username,
    users.c.name,
    users.c.birth_date,
    users.c.stack,
)


class PeopleRepository:
    """Find, count, and create Person rows in the ``users`` table.

    The caller owns *conn*, but not its transaction boundaries: a successful
    ``insert``/``create`` commits, and a store error rolls back. Either one
    ends any transaction the caller already had open on the connection, so
    do not share a connection that holds uncommitted work of its own.
    """

    def __init__(
        self,
        conn: Connection,
        *,
        options: CodecOptions | None = None,
        search_limit: int = SEARCH_LIMIT,
    ) -> None:
        self._conn = conn
        self._options = options or CodecOptions()
        self._search_limit = search_limit

    # ------------------------------------------------------------------
    # Result-preserving operations
    # ------------------------------------------------------------------

    def search(self, term: str) -> RepoResult:
        """Substring match on the search column, capped at the search limit.

        LIKE wildcards inside *term* match literally. Rows that fail to
        decode are dropped. No ordering is applied.
        """
        stmt = (
            select(*_PERSON_COLUMNS)
            .where(users.c.search.contains(term, autoescape=True))
            .limit(self._search_limit)
        )
        try:
            rows = self._conn.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            return self._store_error("search", exc)

        people: list[Person] = []
        for row in rows:
            person = person_from_row(row, self._options)
            if person is None:
                logger.warning("Dropping undecodable users row %s", row["id"])
                continue
            people.append(person)
        return RepoResult.success("search", people)

    def get(self, person_id: str) -> RepoResult:
        """Exact lookup by id."""
        stmt = select(*_PERSON_COLUMNS).where(users.c.id == person_id)
        try:
            row = self._conn.execute(stmt).mappings().first()
        except SQLAlchemyError as exc:
            return self._store_error("get", exc)

        if row is None:
            return RepoResult.not_found("get")
        person = person_from_row(row, self._options)
        if person is None:
            return self._invalid_row("get", row["id"])
        return RepoResult.success("get", person)

    def count(self) -> RepoResult:
        """Number of rows in the ``users`` table."""
        stmt = select(func.count()).select_from(users)
        try:
            total = self._conn.execute(stmt).scalar_one()
        except SQLAlchemyError as exc:
            return self._store_error("count", exc)
        return RepoResult.success("count", int(total or 0))

    def insert(self, person: Person) -> RepoResult:
        """Insert *person* and decode the stored row.

        The store assigns the id. A returned row that fails to decode is
        rolled back, so nothing is persisted on any non-success outcome.
        """
        stmt = insert(users).values(**person_to_row(person)).returning(*_PERSON_COLUMNS)
        try:
            row = self._conn.execute(stmt).mappings().one()
            created = person_from_row(row, self._options)
            if created is None:
                self._rollback()
                return self._invalid_row("insert", row["id"])
            self._conn.commit()
        except SQLAlchemyError as exc:
            return self._store_error("insert", exc)

        logger.debug("Created person %s (%s)", created.id, created.username.data)
        return RepoResult.success("insert", created)

    # ------------------------------------------------------------------
    # Collapsing operations
    # ------------------------------------------------------------------

    def find_like(self, term: str) -> list[Person]:
        """People whose search text contains *term*; ``[]`` on any failure."""
        people: list[Person] = self.search(term).unwrap_or([])
        return people

    def find_by_id(self, person_id: str) -> Person | None:
        """The person with *person_id*, or None if missing or on any failure."""
        person: Person | None = self.get(person_id).unwrap_or(None)
        return person

    def count_people(self) -> int:
        """Row count; 0 for an empty table and on store failure alike."""
        total: int = self.count().unwrap_or(0)
        return total

    def create(self, person: Person) -> Person | None:
        """Persist *person* and return it with its new id, or None on failure."""
        created: Person | None = self.insert(person).unwrap_or(None)
        return created

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _rollback(self) -> None:
        if not self._conn.in_transaction():
            return
        try:
            self._conn.rollback()
        except SQLAlchemyError:
            logger.debug("Rollback failed after store error", exc_info=True)

    def _store_error(self, op: str, exc: SQLAlchemyError) -> RepoResult:
        logger.warning("Store error during %s: %s", op, exc, exc_info=True)
        self._rollback()
        cause = getattr(exc, "orig", None) or exc
        return RepoResult.failure(
            op,
            ResultStatus.STORE_ERROR,
            code=type(exc).__name__,
            message=str(cause),
        )

    def _invalid_row(self, op: str, row_id: object) -> RepoResult:
        logger.warning("Row %s in users violates Person invariants", row_id)
        return RepoResult.failure(
            op,
            ResultStatus.INVALID_ROW,
            code="INVALID_ROW",
            message=f"Row {row_id} could not be decoded as a person",
            detail={"id": str(row_id)},
        )
