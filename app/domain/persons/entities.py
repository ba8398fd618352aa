"""
Domain entities for the persons bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

import hashlib
import json
from dataclasses import dataclass
from enum import Enum

from app.domain.persons.errors import InvalidColorError, InvalidPersonError

NAME_MAX_LEN = 255
ADDRESS_MAX_LEN = 512
BUSINESS_KEY_LEN = 64

# largest id a signed 64-bit INTEGER column can hold
MAX_PERSON_ID = 2**63 - 1


class Color(Enum):
    """Favourite color classification.

    Each member carries its numeric code, the German label used on the
    wire and in storage, and an English alias.
    """

    BLUE = (1, "blau", "blue")
    GREEN = (2, "grün", "green")
    VIOLET = (3, "violett", "violet")
    RED = (4, "rot", "red")
    YELLOW = (5, "gelb", "yellow")
    TURQUOISE = (6, "türkis", "turquoise")
    WHITE = (7, "weiß", "white")

    def __init__(self, code: int, label: str, alias: str) -> None:
        self.code = code
        self.label = label
        self.alias = alias

    @classmethod
    def parse(cls, token: str) -> "Color":
        """Resolve a color token to a member.

        Accepts the numeric code, the label or the alias. Text matching
        uses casefold, so ``WEISS`` resolves to ``weiß``.

        Raises:
            InvalidColorError: If the token matches no member.
        """
        normalized = str(token).strip().casefold()
        if normalized:
            for color in cls:
                if normalized in (
                    str(color.code),
                    color.label.casefold(),
                    color.alias.casefold(),
                ):
                    return color
        raise InvalidColorError(str(token))

    @classmethod
    def from_label(cls, label: str) -> "Color":
        """Return the member stored under ``label``."""
        for color in cls:
            if color.label == label:
                return color
        raise InvalidColorError(label)


def make_business_key(first_name: str, last_name: str, address: str) -> str:
    """Build the uniqueness key of a person.

    The trimmed, casefolded names and address are JSON-encoded as a list,
    so no field content can be mistaken for a separator, and hashed to a
    fixed-length hex digest.
    """
    parts = [part.strip().casefold() for part in (first_name, last_name, address)]
    encoded = json.dumps(parts, ensure_ascii=False)
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


def _check_length(field: str, value: str, max_len: int) -> None:
    if len(value) > max_len:
        raise InvalidPersonError(f"{field} exceeds {max_len} characters")


@dataclass(frozen=True)
class PersonCandidate:
    """A person that has not been persisted yet (no id).

    Text fields are trimmed on construction. The color may be given as a
    Color or as any token accepted by ``Color.parse``.

    Raises:
        InvalidPersonError: If first or last name is blank, or a field
            is longer than its column.
        InvalidColorError: If the color token is not recognised.
    """

    first_name: str
    last_name: str
    address: str
    color: Color

    def __post_init__(self) -> None:
        object.__setattr__(self, "first_name", (self.first_name or "").strip())
        object.__setattr__(self, "last_name", (self.last_name or "").strip())
        object.__setattr__(self, "address", (self.address or "").strip())
        if not isinstance(self.color, Color):
            object.__setattr__(self, "color", Color.parse(self.color))

        if not self.first_name:
            raise InvalidPersonError("first name is required")
        if not self.last_name:
            raise InvalidPersonError("last name is required")
        _check_length("first name", self.first_name, NAME_MAX_LEN)
        _check_length("last name", self.last_name, NAME_MAX_LEN)
        _check_length("address", self.address, ADDRESS_MAX_LEN)

    @property
    def business_key(self) -> str:
        return make_business_key(self.first_name, self.last_name, self.address)


@dataclass(frozen=True)
class Person:
    """A stored person record. The id is assigned by the persistence layer."""

    id: int
    first_name: str
    last_name: str
    address: str
    color: Color

    @property
    def business_key(self) -> str:
        return make_business_key(self.first_name, self.last_name, self.address)
