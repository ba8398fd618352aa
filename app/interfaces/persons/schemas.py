"""
Pydantic schemas for person API request/response validation.

These schemas enforce input validation and define the API contract.
JSON field names are camelCase; Python attributes stay snake_case.
No business logic belongs here.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic.alias_generators import to_camel

from app.domain.persons.entities import ADDRESS_MAX_LEN, NAME_MAX_LEN

COLOR_DESCRIPTION = "Color label (e.g. 'rot'), English alias ('red') or code (4)"


class CamelModel(BaseModel):
    """Base schema serialising field names as camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonCreateRequest(CamelModel):
    """Request schema for creating a person.

    Attributes:
        first_name: Given name (1-255 chars).
        last_name: Family name (1-255 chars).
        address: Postal address, may be empty.
        color: Color token, see COLOR_DESCRIPTION.
    """

    first_name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    last_name: str = Field(..., min_length=1, max_length=NAME_MAX_LEN)
    address: str = Field(default="", max_length=ADDRESS_MAX_LEN)
    color: Union[StrictStr, StrictInt] = Field(..., description=COLOR_DESCRIPTION)


class PersonResponse(CamelModel):
    """A stored person."""

    id: int
    first_name: str
    last_name: str
    address: str
    color: str


class ImportLineItem(CamelModel):
    """Outcome of one data line of an import file."""

    line_number: int
    status: str = Field(..., description="'imported' or 'skipped'")
    reason: Optional[str] = None
    person: Optional[PersonResponse] = None


class ImportPersonsResponse(CamelModel):
    """Response schema for the CSV import endpoint."""

    imported: int
    skipped: int
    lines: list[ImportLineItem]


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str = Field(..., description="'ok' or 'unavailable'")


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
