"""
Domain service: CSV import parsing.

Turns the lines of an uploaded person file into candidates or
rejection reasons. Pure business logic, no IO, no frameworks.

Expected layout (header optional):

    firstName,lastName,address,color
    Hans,Müller,67742 Lauterecken,blau
    Peter,Petersen,"18439 Stralsund, Am Hafen",2
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from app.domain.persons.entities import Color, PersonCandidate
from app.domain.persons.errors import InvalidColorError, InvalidPersonError

logger = logging.getLogger(__name__)

HEADER_FIELDS = ("firstname", "lastname", "address", "color")
FIELD_COUNT = len(HEADER_FIELDS)


@dataclass(frozen=True)
class ParsedLine:
    """Outcome of parsing one data line.

    Exactly one of ``candidate`` and ``reason`` is set.
    """

    line_number: int
    candidate: Optional[PersonCandidate] = None
    reason: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return self.candidate is not None


class PersonCsvParser:
    """Parses person CSV lines, validating column count and color.

    Invalid lines never abort the batch: they are returned with a
    reason and the caller decides what to do with them.
    """

    def __init__(self, delimiter: str = ",") -> None:
        self._delimiter = delimiter

    def parse(self, lines: Iterable[str]) -> list[ParsedLine]:
        """Parse every non-blank, non-header line.

        Args:
            lines: Raw text lines, numbered from 1 in iteration order.

        Returns:
            One ParsedLine per data line, in input order.
        """
        results: list[ParsedLine] = []
        seen_content = False

        for line_number, raw in enumerate(lines, start=1):
            line = raw.strip("\r\n")
            if not line.strip():
                continue

            try:
                fields = self._split(line)
            except csv.Error as exc:
                seen_content = True
                results.append(
                    ParsedLine(line_number=line_number, reason=f"malformed line: {exc}")
                )
                continue

            if not seen_content:
                seen_content = True
                if self.is_header(fields):
                    logger.debug("Skipping header on line %d", line_number)
                    continue

            results.append(self.parse_fields(line_number, fields))

        return results

    def parse_fields(self, line_number: int, fields: list[str]) -> ParsedLine:
        """Validate one split line and build its candidate."""
        if len(fields) != FIELD_COUNT:
            return ParsedLine(
                line_number=line_number,
                reason=f"expected {FIELD_COUNT} fields, got {len(fields)}",
            )

        first_name, last_name, address, color_token = fields
        try:
            color = Color.parse(color_token)
        except InvalidColorError:
            return ParsedLine(
                line_number=line_number,
                reason=f"unknown color '{color_token}'",
            )

        try:
            candidate = PersonCandidate(
                first_name=first_name,
                last_name=last_name,
                address=address,
                color=color,
            )
        except InvalidPersonError as exc:
            return ParsedLine(line_number=line_number, reason=exc.reason)

        return ParsedLine(line_number=line_number, candidate=candidate)

    @staticmethod
    def is_header(fields: list[str]) -> bool:
        return tuple(f.casefold() for f in fields) == HEADER_FIELDS

    def _split(self, line: str) -> list[str]:
        reader = csv.reader(
            [line], delimiter=self._delimiter, skipinitialspace=True
        )
        return [field.strip() for field in next(reader, [])]
