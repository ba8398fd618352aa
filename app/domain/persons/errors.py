"""
Domain-specific errors for the persons bounded context.

All errors raised from the domain layer must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class PersonDomainError(Exception):
    """Base error for all persons domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class NoResultError(PersonDomainError):
    """Raised when a query has no matching record."""


class PersonNotFoundError(NoResultError):
    """Raised when no person exists with the requested id."""

    def __init__(self, person_id: int) -> None:
        super().__init__(f"Person not found: {person_id}")
        self.person_id = person_id


class NoPersonsWithColorError(NoResultError):
    """Raised when no person has the requested color."""

    def __init__(self, color: str) -> None:
        super().__init__(f"No persons found with color: {color}")
        self.color = color


class PersonAlreadyExistsError(PersonDomainError):
    """Raised when a person with the same business key is already stored."""

    def __init__(self, business_key: str) -> None:
        super().__init__(f"Person already exists: {business_key}")
        self.business_key = business_key


class PersonValidationError(PersonDomainError):
    """Base error for invalid person input."""


class InvalidColorError(PersonValidationError):
    """Raised when a color token matches no recognised color."""

    def __init__(self, token: str) -> None:
        super().__init__(f"Unknown color: {token!r}")
        self.token = token


class InvalidPersonError(PersonValidationError):
    """Raised when person fields violate the entity invariants."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid person: {reason}")
        self.reason = reason


class InvalidImportFileError(PersonValidationError):
    """Raised when an uploaded import file cannot be read at all."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Invalid import file: {reason}")
        self.reason = reason


class InvalidPageError(PersonValidationError):
    """Raised when offset or limit fall outside the allowed range."""

    def __init__(self, offset: int, limit: int, max_limit: int) -> None:
        super().__init__(
            f"Invalid page: offset={offset}, limit={limit}. "
            f"Offset must be >= 0 and limit between 1 and {max_limit}."
        )
        self.offset = offset
        self.limit = limit
