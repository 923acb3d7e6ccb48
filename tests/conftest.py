from __future__ import annotations

import importlib
import sys
import textwrap
from pathlib import Path
from typing import Callable

import pytest

# Import the package from this checkout rather than a stale editable install.
ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from papersize.constants import PAPERCONF_ENV_VAR, PAPERSIZE_ENV_VAR, PAPERSPECS_ENV_VAR  # noqa: E402
from papersize.database import PaperDatabase  # noqa: E402

SpecsWriter = Callable[..., Path]


def pytest_sessionstart(session) -> None:  # type: ignore[no-untyped-def]
    module = importlib.import_module("papersize")
    module_path = Path(module.__file__ or "").resolve()
    if ROOT not in module_path.parents:
        raise RuntimeError(
            f"Expected 'papersize' under '{ROOT}', got '{module_path}'. "
            "Remediation: run `python -m pip install -e '.[test]'` from this checkout and re-run pytest."
        )


@pytest.fixture(autouse=True)
def clean_paper_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (PAPERSIZE_ENV_VAR, PAPERCONF_ENV_VAR, PAPERSPECS_ENV_VAR):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def write_text(tmp_path: Path) -> SpecsWriter:
    def _write(text: str, name: str = "paperspecs") -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_specs(write_text: SpecsWriter) -> Path:
    return write_text(
        """\
        # name width height unit
        a4 210 297 mm
        letter 8.5 11 in

        legal 8.5 14 in
        tabloid 11 17 in
        11x17 11 17 in
        """
    )


@pytest.fixture
def sample_db(sample_specs: Path):  # type: ignore[no-untyped-def]
    database = PaperDatabase.open(sample_specs)
    yield database
    if database.is_live:
        database.teardown()
