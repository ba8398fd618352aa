"""
Use case: Retrieve a person by id.

Input: GetPersonQuery (person_id)
Output: PersonResult
Side effects: None (read-only query).
Failure cases: PersonNotFoundError.
"""

import logging

from app.application.persons.dtos import GetPersonQuery, PersonResult
from app.domain.persons.errors import PersonNotFoundError
from app.domain.persons.ports import PersonRepository

logger = logging.getLogger(__name__)


class GetPersonUseCase:
    """Fetches a single person from the repository."""

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def execute(self, query: GetPersonQuery) -> PersonResult:
        """Run the get person use case.

        Raises:
            PersonNotFoundError: If no person has the requested id.
        """
        logger.info("Retrieving person id=%d", query.person_id)

        person = self._person_repo.get_by_id(query.person_id)
        if person is None:
            raise PersonNotFoundError(query.person_id)

        return PersonResult.from_entity(person)
