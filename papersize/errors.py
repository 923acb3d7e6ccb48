from __future__ import annotations

from pathlib import Path


class PaperError(Exception):
    """Base class for every error raised by papersize."""


class PaperDatabaseError(PaperError):
    """Loading the paper specification file failed."""

    def __init__(self, message: str, *, path: Path | str | None = None, line_number: int | None = None) -> None:
        self.path = None if path is None else Path(path)
        self.line_number = line_number
        location = ""
        if self.path is not None:
            location = f"{self.path}"
            if line_number is not None:
                location = f"{location}:{line_number}"
            location = f"{location}: "
        super().__init__(f"{location}{message}")


class SpecsFileError(PaperDatabaseError):
    pass


class MalformedLineError(PaperDatabaseError, ValueError):
    pass


class UnknownUnitError(PaperDatabaseError, ValueError):
    def __init__(self, unit: str, *, path: Path | str | None = None, line_number: int | None = None) -> None:
        self.unit = unit
        super().__init__(f"unknown unit '{unit}'", path=path, line_number=line_number)


class DatabaseStateError(PaperError, RuntimeError):
    """The database was used outside its live state (before init or after teardown)."""
