from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from papersize.constants import (
    DEFAULT_PAPER_NAME,
    DEFAULT_PAPERCONF_PATH,
    DEFAULT_PAPERSPECS_PATH,
    PAPERCONF_ENV_VAR,
    PAPERSIZE_ENV_VAR,
    PAPERSPECS_ENV_VAR,
)


@dataclass(frozen=True)
class PaperConfig:
    specs_path: Path = DEFAULT_PAPERSPECS_PATH
    paperconf_path: Path = Path(DEFAULT_PAPERCONF_PATH)
    fallback_name: str = DEFAULT_PAPER_NAME
    papersize_env_var: str = PAPERSIZE_ENV_VAR
    paperconf_env_var: str = PAPERCONF_ENV_VAR

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> PaperConfig:
        """Build a config, relocating the specification file when ``PAPERSPECS`` is set."""
        env = os.environ if environ is None else environ
        specs_override = env.get(PAPERSPECS_ENV_VAR, "").strip()
        if specs_override:
            return cls(specs_path=Path(specs_override))
        return cls()
