"""
Use case: List persons page by page.

Input: ListPersonsQuery (offset, limit)
Output: list[PersonResult]
Side effects: None (read-only query).
Failure cases: InvalidPageError.
"""

import logging

from app.application.persons.dtos import ListPersonsQuery, PersonResult
from app.domain.persons.entities import MAX_PERSON_ID
from app.domain.persons.errors import InvalidPageError
from app.domain.persons.ports import PersonRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_LIMIT = 100
MAX_OFFSET = MAX_PERSON_ID


class ListPersonsUseCase:
    """Returns a stable (id-ordered) page of persons.

    An empty page is a normal result, not an error.
    """

    def __init__(
        self, person_repo: PersonRepository, max_limit: int = DEFAULT_MAX_LIMIT
    ) -> None:
        self._person_repo = person_repo
        self._max_limit = max_limit

    def execute(self, query: ListPersonsQuery) -> list[PersonResult]:
        """Run the list persons use case.

        Raises:
            InvalidPageError: If offset or limit is out of range.
        """
        offset_ok = 0 <= query.offset <= MAX_OFFSET
        if not offset_ok or not (1 <= query.limit <= self._max_limit):
            raise InvalidPageError(query.offset, query.limit, self._max_limit)

        persons = self._person_repo.list_page(offset=query.offset, limit=query.limit)
        logger.info(
            "Listed persons offset=%d limit=%d returned=%d",
            query.offset,
            query.limit,
            len(persons),
        )
        return [PersonResult.from_entity(p) for p in persons]
