"""
Data Transfer Objects for the persons application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from app.domain.persons.entities import Person


@dataclass(frozen=True)
class CreatePersonCommand:
    """Input DTO for creating a person.

    Attributes:
        first_name: Given name, must not be blank.
        last_name: Family name, must not be blank.
        address: Free-form postal address.
        color: Color token (label, English alias or numeric code).
    """

    first_name: str
    last_name: str
    address: str
    color: str


@dataclass(frozen=True)
class GetPersonQuery:
    """Input DTO for retrieving a person by id."""

    person_id: int


@dataclass(frozen=True)
class GetPersonsByColorQuery:
    """Input DTO for retrieving persons by color token."""

    color: str


@dataclass(frozen=True)
class ListPersonsQuery:
    """Input DTO for a page of persons.

    Attributes:
        offset: Number of records to skip (>= 0).
        limit: Maximum number of records to return (>= 1).
    """

    offset: int = 0
    limit: int = 20


@dataclass(frozen=True)
class ImportPersonsCommand:
    """Input DTO for a CSV bulk import.

    Attributes:
        content: Raw bytes of the uploaded file.
        filename: Original file name, used for logging only.
    """

    content: bytes
    filename: Optional[str] = None


@dataclass(frozen=True)
class PersonResult:
    """Output DTO for a single stored person."""

    id: int
    first_name: str
    last_name: str
    address: str
    color: str

    @classmethod
    def from_entity(cls, person: Person) -> "PersonResult":
        return cls(
            id=person.id,
            first_name=person.first_name,
            last_name=person.last_name,
            address=person.address,
            color=person.color.label,
        )


class ImportLineStatus(Enum):
    """What happened to one line of an import file."""

    IMPORTED = "imported"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ImportLineResult:
    """Output DTO for one data line of an import file."""

    line_number: int
    status: ImportLineStatus
    reason: Optional[str] = None
    person: Optional[PersonResult] = None


@dataclass(frozen=True)
class ImportPersonsResult:
    """Output DTO summarising an import run."""

    lines: list[ImportLineResult] = field(default_factory=list)

    @property
    def imported(self) -> int:
        return sum(1 for r in self.lines if r.status is ImportLineStatus.IMPORTED)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.lines if r.status is ImportLineStatus.SKIPPED)
