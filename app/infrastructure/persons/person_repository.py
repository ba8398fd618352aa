"""
Adapter: Person repository.

Implements PersonRepository port.
Responsible for persisting and retrieving persons via SQLAlchemy Core.
"""

import logging
from typing import Optional

from sqlalchemy import func, insert, select
from sqlalchemy.engine import Engine, Row
from sqlalchemy.exc import IntegrityError

from app.domain.persons.entities import MAX_PERSON_ID, Color, Person, PersonCandidate
from app.domain.persons.errors import PersonAlreadyExistsError
from app.domain.persons.ports import PersonRepository
from app.infrastructure.persons.database import persons_table

logger = logging.getLogger(__name__)


class SqlPersonRepositoryAdapter(PersonRepository):
    """SQL implementation of the person repository.

    Stores persons in the ``persons`` table. Every call opens its own
    connection; writes run in a single transaction per call.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_by_id(self, person_id: int) -> Optional[Person]:
        """Return the person with the given id, or None if absent.

        Ids outside the storable range cannot exist and are never queried.
        """
        if not 1 <= person_id <= MAX_PERSON_ID:
            return None
        query = select(persons_table).where(persons_table.c.id == person_id)
        with self._engine.connect() as conn:
            row = conn.execute(query).fetchone()
        return _row_to_person(row) if row is not None else None

    def get_by_color(self, color: Color) -> list[Person]:
        """Return every person with the given color, ordered by id."""
        query = (
            select(persons_table)
            .where(persons_table.c.color == color.label)
            .order_by(persons_table.c.id)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_row_to_person(row) for row in rows]

    def list_page(self, offset: int, limit: int) -> list[Person]:
        """Return a page of persons ordered by id ascending."""
        query = (
            select(persons_table)
            .order_by(persons_table.c.id)
            .offset(offset)
            .limit(limit)
        )
        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()
        return [_row_to_person(row) for row in rows]

    def exists_by_key(self, business_key: str) -> bool:
        """Return True if a person with this business key is stored."""
        query = select(func.count()).where(
            persons_table.c.business_key == business_key
        )
        with self._engine.connect() as conn:
            count = conn.execute(query).scalar_one()
        return count > 0

    def save(self, candidate: PersonCandidate) -> Person:
        """Persist a candidate and return it with its assigned id.

        Raises:
            PersonAlreadyExistsError: If the business key is already taken.
        """
        return self.save_batch([candidate])[0]

    def save_batch(self, candidates: list[PersonCandidate]) -> list[Person]:
        """Persist several candidates in a single transaction.

        The whole batch is rolled back if any insert violates the
        business key constraint.

        Raises:
            PersonAlreadyExistsError: If a business key is already taken.
        """
        stored: list[Person] = []
        current: Optional[PersonCandidate] = None
        try:
            with self._engine.begin() as conn:
                for current in candidates:
                    result = conn.execute(
                        insert(persons_table).values(
                            first_name=current.first_name,
                            last_name=current.last_name,
                            address=current.address,
                            color=current.color.label,
                            business_key=current.business_key,
                        )
                    )
                    stored.append(
                        Person(
                            id=result.inserted_primary_key[0],
                            first_name=current.first_name,
                            last_name=current.last_name,
                            address=current.address,
                            color=current.color,
                        )
                    )
        except IntegrityError as exc:
            key = current.business_key if current is not None else ""
            logger.warning("Rejected duplicate person insert: %s", type(exc).__name__)
            raise PersonAlreadyExistsError(key) from exc

        logger.debug("Inserted %d persons", len(stored))
        return stored


def _row_to_person(row: Row) -> Person:
    return Person(
        id=row.id,
        first_name=row.first_name,
        last_name=row.last_name,
        address=row.address,
        color=Color.from_label(row.color),
    )
