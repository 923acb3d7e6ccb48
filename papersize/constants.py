from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Final, Mapping

PAPERSIZE_ENV_VAR: Final[str] = "PAPERSIZE"
PAPERCONF_ENV_VAR: Final[str] = "PAPERCONF"
PAPERSPECS_ENV_VAR: Final[str] = "PAPERSPECS"

DEFAULT_PAPERCONF_PATH: Final[str] = "/etc/papersize"
DEFAULT_PAPERSPECS_PATH: Final[Path] = Path(__file__).resolve().parent / "data" / "paperspecs"
DEFAULT_PAPER_NAME: Final[str] = "letter"

POINTS_PER_INCH: Final[float] = 72.0
MM_PER_INCH: Final[float] = 25.4

# Factors convert a value in the named unit to inches.
UNIT_FACTORS: Final[Mapping[str, float]] = MappingProxyType(
    {
        "in": 1.0,
        "ft": 12.0,
        "pt": 1.0 / 72.0,
        "m": 100.0 / 2.54,
        "dm": 10.0 / 2.54,
        "cm": 1.0 / 2.54,
        "mm": 0.1 / 2.54,
    }
)
