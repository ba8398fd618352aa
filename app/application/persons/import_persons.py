"""
Use case: Bulk import persons from a CSV file.

Input:  ImportPersonsCommand (raw file bytes)
Output: ImportPersonsResult (per-line outcome and counts)
Side effects: Inserts one row in persons per imported line.
Failure cases: InvalidImportFileError (undecodable or oversized file).
    Invalid lines are skipped and reported, never raised.
"""

import logging
from typing import Optional

from app.application.persons.dtos import (
    ImportLineResult,
    ImportLineStatus,
    ImportPersonsCommand,
    ImportPersonsResult,
    PersonResult,
)
from app.domain.persons.csv_parser import ParsedLine, PersonCsvParser
from app.domain.persons.errors import InvalidImportFileError
from app.domain.persons.ports import PersonRepository

logger = logging.getLogger(__name__)

DUPLICATE_REASON = "person already exists"


class ImportPersonsUseCase:
    """Orchestrates parsing, de-duplication and persistence of a CSV file.

    Lines with a wrong field count, an unknown color or blank names are
    skipped. So are lines whose business key is already stored or
    appeared earlier in the same file. Everything else is saved in one
    batch.
    """

    def __init__(
        self,
        person_repo: PersonRepository,
        parser: PersonCsvParser | None = None,
        max_bytes: Optional[int] = None,
    ) -> None:
        self._person_repo = person_repo
        self._parser = parser or PersonCsvParser()
        self._max_bytes = max_bytes

    def execute(self, command: ImportPersonsCommand) -> ImportPersonsResult:
        """Run a CSV import.

        Args:
            command: The uploaded file content.

        Returns:
            One ImportLineResult per data line, ordered by line number.

        Raises:
            InvalidImportFileError: If the file is too large or not UTF-8.
        """
        text = self._decode(command.content)
        # split on "\n" only: fields may contain \x0c or \u2028
        parsed = self._parser.parse(text.split("\n"))

        outcomes: dict[int, ImportLineResult] = {}
        pending: list[ParsedLine] = []
        seen_keys: set[str] = set()

        for line in parsed:
            if not line.is_valid:
                outcomes[line.line_number] = _skipped(line.line_number, line.reason)
                continue

            key = line.candidate.business_key
            if key in seen_keys or self._person_repo.exists_by_key(key):
                outcomes[line.line_number] = _skipped(line.line_number, DUPLICATE_REASON)
                continue

            seen_keys.add(key)
            pending.append(line)

        if pending:
            stored = self._person_repo.save_batch([l.candidate for l in pending])
            for line, person in zip(pending, stored):
                outcomes[line.line_number] = ImportLineResult(
                    line_number=line.line_number,
                    status=ImportLineStatus.IMPORTED,
                    person=PersonResult.from_entity(person),
                )

        result = ImportPersonsResult(
            lines=[outcomes[n] for n in sorted(outcomes)]
        )
        logger.info(
            "Imported file=%s imported=%d skipped=%d",
            command.filename or "<upload>",
            result.imported,
            result.skipped,
        )
        for line in result.lines:
            if line.status is ImportLineStatus.SKIPPED:
                logger.debug("Skipped line %d: %s", line.line_number, line.reason)
        return result

    def _decode(self, content: bytes) -> str:
        if self._max_bytes is not None and len(content) > self._max_bytes:
            raise InvalidImportFileError(
                f"file exceeds the maximum size of {self._max_bytes} bytes"
            )
        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError:
            raise InvalidImportFileError("file is not valid UTF-8 text") from None


def _skipped(line_number: int, reason: Optional[str]) -> ImportLineResult:
    return ImportLineResult(
        line_number=line_number,
        status=ImportLineStatus.SKIPPED,
        reason=reason,
    )
