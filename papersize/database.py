from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator

from papersize.constants import DEFAULT_PAPERSPECS_PATH
from papersize.errors import (
    DatabaseStateError,
    MalformedLineError,
    PaperDatabaseError,
    SpecsFileError,
    UnknownUnitError,
)
from papersize.events import log_event
from papersize.tokens import iter_significant_lines, iter_tokens
from papersize.units import points_to_mm, to_points

_LOGGER = logging.getLogger("papersize.database")


@dataclass(frozen=True)
class PaperRecord:
    name: str
    width: float
    height: float

    @property
    def key(self) -> str:
        return paper_key(self.name)


class DatabaseState(Enum):
    UNLOADED = "unloaded"
    LIVE = "live"
    TORN_DOWN = "torn_down"


def paper_key(name: str) -> str:
    return name.casefold()


def _parse_dimension(token: str, *, label: str, path: Path, line_number: int) -> float:
    # float() also accepts digit separators, which the specs format does not.
    if "_" in token:
        raise MalformedLineError(f"invalid {label} '{token}'", path=path, line_number=line_number)
    try:
        value = float(token)
    except ValueError as exc:
        raise MalformedLineError(f"invalid {label} '{token}'", path=path, line_number=line_number) from exc

    if not math.isfinite(value):
        raise MalformedLineError(f"{label} '{token}' is out of range", path=path, line_number=line_number)
    return value


def parse_specs_line(line: str, *, path: Path, line_number: int) -> PaperRecord:
    """Parse one ``<name> <width> <height> [<unit>]`` line into a record in points.

    Values without a unit are taken as points. Tokens after the unit are ignored.
    """
    tokens = iter_tokens(line)
    name = next(tokens, None)
    width_token = next(tokens, None)
    height_token = next(tokens, None)
    unit = next(tokens, None)

    if name is None or width_token is None or height_token is None:
        raise MalformedLineError(
            "expected '<name> <width> <height> [<unit>]'",
            path=path,
            line_number=line_number,
        )

    width = _parse_dimension(width_token, label="width", path=path, line_number=line_number)
    height = _parse_dimension(height_token, label="height", path=path, line_number=line_number)

    if unit is not None:
        try:
            width = to_points(width, unit)
            height = to_points(height, unit)
        except UnknownUnitError as exc:
            raise UnknownUnitError(unit, path=path, line_number=line_number) from exc

    return PaperRecord(name=name, width=width, height=height)


def load_paper_specs(specs_path: Path | str) -> dict[str, PaperRecord]:
    """Read a specification file into a dict keyed by case-folded paper name.

    A name defined twice keeps its last definition, moved to the end of the
    iteration order.
    """
    path = Path(specs_path)
    papers: dict[str, PaperRecord] = {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            for line_number, line in iter_significant_lines(handle):
                record = parse_specs_line(line, path=path, line_number=line_number)
                previous = papers.pop(record.key, None)
                if previous is not None:
                    log_event(
                        _LOGGER,
                        logging.DEBUG,
                        "database.load.duplicate_name",
                        path=str(path),
                        line_number=line_number,
                        name=record.name,
                        previous_name=previous.name,
                    )
                papers[record.key] = record
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecsFileError(f"cannot read paper specifications: {exc}", path=path) from exc

    return papers


class PaperDatabase:
    """Named paper sizes loaded from a specification file.

    A database must be initialised with :meth:`init` before it is queried, and
    is unusable again after :meth:`teardown` until the next :meth:`init`.
    Records are never mutated once loaded, so a live database may be shared by
    concurrent readers.
    """

    def __init__(self) -> None:
        self._papers: dict[str, PaperRecord] = {}
        self._state = DatabaseState.UNLOADED
        self._specs_path: Path | None = None

    @classmethod
    def open(cls, specs_path: Path | str | None = None) -> PaperDatabase:
        database = cls()
        database.init(specs_path)
        return database

    def __enter__(self) -> PaperDatabase:
        self._require_live()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._state is DatabaseState.LIVE:
            self.teardown()

    @property
    def state(self) -> DatabaseState:
        return self._state

    @property
    def is_live(self) -> bool:
        return self._state is DatabaseState.LIVE

    @property
    def specs_path(self) -> Path | None:
        return self._specs_path

    def _require_live(self) -> None:
        if self._state is not DatabaseState.LIVE:
            raise DatabaseStateError(f"paper database is {self._state.value}; call init() first")

    def init(self, specs_path: Path | str | None = None) -> None:
        if self._state is DatabaseState.LIVE:
            raise DatabaseStateError("paper database is already initialised; call teardown() first")

        path = Path(specs_path) if specs_path is not None else DEFAULT_PAPERSPECS_PATH
        log_event(_LOGGER, logging.DEBUG, "database.load.started", path=str(path))
        try:
            papers = load_paper_specs(path)
        except PaperDatabaseError as exc:
            log_event(
                _LOGGER,
                logging.WARNING,
                "database.load.failed",
                path=str(path),
                line_number=exc.line_number,
                error=str(exc),
            )
            raise

        self._papers = papers
        self._specs_path = path
        self._state = DatabaseState.LIVE
        log_event(_LOGGER, logging.INFO, "database.load.completed", path=str(path), papers=len(papers))

    def teardown(self) -> None:
        self._require_live()
        self._papers = {}
        self._state = DatabaseState.TORN_DOWN
        log_event(_LOGGER, logging.DEBUG, "database.teardown", path=str(self._specs_path))

    def __len__(self) -> int:
        self._require_live()
        return len(self._papers)

    def __contains__(self, name: object) -> bool:
        self._require_live()
        return isinstance(name, str) and paper_key(name) in self._papers

    def __iter__(self) -> Iterator[PaperRecord]:
        return self.iterate()

    def lookup(self, name: str) -> PaperRecord | None:
        self._require_live()
        return self._papers.get(paper_key(name))

    def lookup_by_dimensions(self, width: float, height: float) -> PaperRecord | None:
        """Return the first record, in iteration order, with exactly these dimensions in points.

        Several papers can share a size (``tabloid`` and ``11x17``); the one
        defined first wins.
        """
        for record in self.iterate():
            if record.width == width and record.height == height:
                return record
        return None

    def lookup_by_millimetres(self, width_mm: int, height_mm: int) -> PaperRecord | None:
        """Like :meth:`lookup_by_dimensions`, comparing sizes rounded to whole millimetres."""
        for record in self.iterate():
            if points_to_mm(record.width) == width_mm and points_to_mm(record.height) == height_mm:
                return record
        return None

    def iterate(self) -> Iterator[PaperRecord]:
        self._require_live()
        # Iterates a snapshot of the table.
        return iter(tuple(self._papers.values()))

    def next_after(self, record: PaperRecord) -> PaperRecord | None:
        self._require_live()
        keys = list(self._papers)
        try:
            index = keys.index(record.key)
        except ValueError as exc:
            raise KeyError(record.name) from exc
        if self._papers[keys[index]] != record:
            raise KeyError(record.name)
        if index + 1 == len(keys):
            return None
        return self._papers[keys[index + 1]]
