"""
Use case: Retrieve all persons with a given color.

Input: GetPersonsByColorQuery (color token)
Output: list[PersonResult]
Side effects: None (read-only query).
Failure cases: InvalidColorError, NoPersonsWithColorError.
"""

import logging

from app.application.persons.dtos import GetPersonsByColorQuery, PersonResult
from app.domain.persons.entities import Color
from app.domain.persons.errors import NoPersonsWithColorError
from app.domain.persons.ports import PersonRepository

logger = logging.getLogger(__name__)


class GetPersonsByColorUseCase:
    """Looks up persons by favourite color.

    An empty match is reported as a no-result error rather than
    an empty list.
    """

    def __init__(self, person_repo: PersonRepository) -> None:
        self._person_repo = person_repo

    def execute(self, query: GetPersonsByColorQuery) -> list[PersonResult]:
        """Run the get persons by color use case.

        Returns:
            Matching persons ordered by id.

        Raises:
            InvalidColorError: If the color token is not recognised.
            NoPersonsWithColorError: If nobody has the color.
        """
        color = Color.parse(query.color)
        logger.info("Retrieving persons with color=%s", color.label)

        persons = self._person_repo.get_by_color(color)
        if not persons:
            raise NoPersonsWithColorError(color.label)

        return [PersonResult.from_entity(p) for p in persons]
