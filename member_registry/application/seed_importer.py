"""One-time bulk load of members from a CSV file into an empty member table."""

import asyncio
import csv
import logging
from dataclasses import dataclass
from pathlib import Path

from member_registry.application.member_repository import MemberRepository
from member_registry.domain.validators.member_validator import MemberFields, normalize

# Positional columns; header names in the file are ignored.
COL_MEMBERSHIP_NUMBER = 0
COL_FULL_NAME = 1
COL_NATIONAL_ID = 2


@dataclass(frozen=True)
class SeedReport:
    """Outcome of a seed run. skipped_existing is True when the table already had data."""

    rows_read: int = 0
    rows_valid: int = 0
    rows_inserted: int = 0
    skipped_existing: bool = False
    source_missing: bool = False


def _cell(row: list[str], index: int) -> str:
    if index >= len(row):
        return ""
    return normalize(row[index])


def read_member_rows(path: Path) -> tuple[int, list[MemberFields]]:
    """
    Parse the CSV at path. The first row is a header and is skipped.
    Returns (data rows read, rows with all three values present after trimming).
    """
    rows: list[MemberFields] = []
    read = 0
    with path.open(newline="", encoding="utf-8-sig") as fh:
        reader = csv.reader(fh)
        next(reader, None)
        for row in reader:
            read += 1
            fields = MemberFields(
                membership_number=_cell(row, COL_MEMBERSHIP_NUMBER),
                full_name=_cell(row, COL_FULL_NAME),
                national_id=_cell(row, COL_NATIONAL_ID),
            )
            if fields.membership_number and fields.full_name and fields.national_id:
                rows.append(fields)
    return read, rows


class SeedImporter:
    """
    Populates the member table from CSV only when it is empty. Duplicate rows are
    skipped silently and no audit entries are written. A missing or unreadable
    file is reported and leaves the table empty.
    """

    def __init__(self, repository: MemberRepository, logger: logging.Logger) -> None:
        self._repository = repository
        self._logger = logger

    async def run(self, source: str | Path) -> SeedReport:
        existing = await self._repository.count()
        if existing > 0:
            self._logger.info("seed_import_skipped", extra={"existing_members": existing})
            return SeedReport(skipped_existing=True)

        path = Path(source)
        self._logger.info("seed_import_started", extra={"source": str(path)})
        if not path.is_file():
            self._logger.warning("seed_source_missing", extra={"source": str(path)})
            return SeedReport(source_missing=True)

        try:
            read, rows = await asyncio.to_thread(read_member_rows, path)
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            self._logger.error(
                "seed_source_unreadable",
                extra={"source": str(path), "error": str(e)},
            )
            return SeedReport(source_missing=True)

        inserted = 0
        if rows:
            inserted = await self._repository.add_many_ignoring_conflicts(rows)

        report = SeedReport(rows_read=read, rows_valid=len(rows), rows_inserted=inserted)
        self._logger.info(
            "seed_import_completed",
            extra={
                "source": str(path),
                "rows_read": report.rows_read,
                "rows_valid": report.rows_valid,
                "rows_inserted": report.rows_inserted,
            },
        )
        return report
