"""
Use case: Create a person.

Input: CreatePersonCommand (first_name, last_name, address, color)
Output: PersonResult
Side effects: Inserts one row in persons.
Failure cases: PersonAlreadyExistsError, InvalidColorError, InvalidPersonError.
"""

import logging

from app.application.persons.dtos import CreatePersonCommand, PersonResult
from app.domain.persons.entities import PersonCandidate
from app.domain.persons.errors import PersonAlreadyExistsError
from app.domain.persons.ports import PersonRepository

logger = logging.getLogger(__name__)


class CreatePersonUseCase:
    """Orchestrates creation of a single person.

    Rejects the request when a person with the same business key
    (first name, last name and address) is already stored.
    """

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def execute(self, command: CreatePersonCommand) -> PersonResult:
        """Run the create person use case.

        Args:
            command: The person fields to store.

        Returns:
            The stored person with its assigned id.

        Raises:
            PersonAlreadyExistsError: If the business key is already taken.
            InvalidColorError: If the color token is not recognised.
            InvalidPersonError: If first or last name is blank.
        """
        candidate = PersonCandidate(
            first_name=command.first_name,
            last_name=command.last_name,
            address=command.address,
            color=command.color,
        )

        if self._person_repo.exists_by_key(candidate.business_key):
            raise PersonAlreadyExistsError(candidate.business_key)

        person = self._person_repo.save(candidate)
        logger.info("Created person id=%d color=%s", person.id, person.color.label)
        return PersonResult.from_entity(person)
