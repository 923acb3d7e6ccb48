"""Read-only accessors over a live :class:`~papersize.database.PaperDatabase`."""
from __future__ import annotations

from papersize.database import PaperDatabase, PaperRecord
from papersize.units import from_points


def paper_name(record: PaperRecord) -> str:
    return record.name


def paper_width(record: PaperRecord) -> float:
    return record.width


def paper_height(record: PaperRecord) -> float:
    return record.height


def paper_dimensions(record: PaperRecord, unit: str = "pt") -> tuple[float, float]:
    """Return ``(width, height)`` converted from points to ``unit``."""
    return from_points(record.width, unit), from_points(record.height, unit)


def first(database: PaperDatabase) -> PaperRecord | None:
    return next(database.iterate(), None)


def next_paper(database: PaperDatabase, record: PaperRecord) -> PaperRecord | None:
    """Return the record after ``record`` in table order, or None after the last one.

    Raises KeyError when ``record`` is not part of the live table.
    """
    return database.next_after(record)


def paper_info(database: PaperDatabase, name: str) -> PaperRecord | None:
    return database.lookup(name)


def paper_with_size(database: PaperDatabase, width: float, height: float) -> PaperRecord | None:
    return database.lookup_by_dimensions(width, height)
