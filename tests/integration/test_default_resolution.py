from __future__ import annotations

from pathlib import Path

import pytest

from papersize import PaperConfig, PaperDatabase, system_default_name
from papersize.constants import PAPERCONF_ENV_VAR, PAPERSIZE_ENV_VAR, PAPERSPECS_ENV_VAR

pytestmark = pytest.mark.integration


def test_priority_environment_then_file_then_fallback(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    sample_specs: Path,
) -> None:
    paperconf = tmp_path / "papersize"
    paperconf.write_text("a4\n", encoding="utf-8")
    monkeypatch.setenv(PAPERCONF_ENV_VAR, str(paperconf))
    monkeypatch.setenv(PAPERSIZE_ENV_VAR, "legal")
    config = PaperConfig(fallback_name="letter", paperconf_path=tmp_path / "unused")

    with PaperDatabase.open(sample_specs) as database:
        assert system_default_name(database, config) == "legal"

        monkeypatch.delenv(PAPERSIZE_ENV_VAR)
        assert system_default_name(database, config) == "a4"

        paperconf.write_text("", encoding="utf-8")
        assert system_default_name(database, config) == "letter"

        paperconf.unlink()
        assert system_default_name(database, config) == "letter"


def test_config_path_default_used_without_override(tmp_path: Path, sample_specs: Path) -> None:
    paperconf = tmp_path / "etc-papersize"
    paperconf.write_text("# generated\nA4\n", encoding="utf-8")
    config = PaperConfig(paperconf_path=paperconf)

    with PaperDatabase.open(sample_specs) as database:
        assert system_default_name(database, config) == "a4"


def test_config_from_env_relocates_specs(monkeypatch: pytest.MonkeyPatch, write_text) -> None:  # type: ignore[no-untyped-def]
    specs = write_text("huge 1 2 m\n", name="custom-specs")
    monkeypatch.setenv(PAPERSPECS_ENV_VAR, str(specs))
    monkeypatch.setenv(PAPERSIZE_ENV_VAR, "HUGE")

    config = PaperConfig.from_env()
    assert config.specs_path == specs

    with PaperDatabase.open(config.specs_path) as database:
        assert system_default_name(database, config) == "huge"
        record = database.lookup("huge")
        assert record is not None
        assert record.width == pytest.approx(100 / 2.54 * 72)


def test_config_from_env_defaults() -> None:
    assert PaperConfig.from_env({}) == PaperConfig()
    assert PaperConfig.from_env({PAPERSPECS_ENV_VAR: "  "}) == PaperConfig()
