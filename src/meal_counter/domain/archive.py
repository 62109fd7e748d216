"""Domain models for the archive sweep."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class ArchiveResult:
    """Outcome of an archive sweep."""

    success: bool
    archived: int
    archive_date: date | None = None
    skipped: bool = False
    error: str | None = None
