"""
Port interfaces (ABCs) for the persons bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.persons.entities import Color, Person, PersonCandidate


class PersonRepository(ABC):
    """Port for persisting and retrieving person records."""

    @abstractmethod
    def get_by_id(self, person_id: int) -> Optional[Person]:
        """Return the person with the given id, or None if absent."""
        raise NotImplementedError

    @abstractmethod
    def get_by_color(self, color: Color) -> list[Person]:
        """Return every person with the given color, ordered by id."""
        raise NotImplementedError

    @abstractmethod
    def list_page(self, offset: int, limit: int) -> list[Person]:
        """Return a page of persons ordered by id ascending.

        Args:
            offset: Number of records to skip.
            limit: Maximum number of records to return.
        """
        raise NotImplementedError

    @abstractmethod
    def exists_by_key(self, business_key: str) -> bool:
        """Return True if a person with this business key is stored."""
        raise NotImplementedError

    @abstractmethod
    def save(self, candidate: PersonCandidate) -> Person:
        """Persist a candidate and return it with its assigned id.

        Raises:
            PersonAlreadyExistsError: If the business key is already taken.
        """
        raise NotImplementedError

    @abstractmethod
    def save_batch(self, candidates: list[PersonCandidate]) -> list[Person]:
        """Persist several candidates in a single transaction.

        Returns:
            The stored persons, in input order.
        """
        raise NotImplementedError
