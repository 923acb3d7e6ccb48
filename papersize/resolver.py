"""Resolution of the paper size a host should use when the user has not chosen one.

The system default is taken, in order, from the ``PAPERSIZE`` environment
variable, the first token of the paper configuration file (``PAPERCONF`` or
``/etc/papersize``), and finally the configured fallback name. The locale
default instead matches the LC_PAPER measurements of the running locale
against the database.

None of the resolvers raise for environment or file problems: every branch
ends at the fallback name.
"""
from __future__ import annotations

import ctypes
import ctypes.util
import functools
import logging
import os
import sys
from pathlib import Path
from typing import Callable, Mapping

from papersize.config import PaperConfig
from papersize.database import PaperDatabase
from papersize.events import log_event
from papersize.tokens import next_token, read_significant_line

_LOGGER = logging.getLogger("papersize.resolver")

LocaleProbe = Callable[[], tuple[int, int] | None]

# glibc <langinfo.h>: _NL_ITEM(__LC_PAPER, 0) and the item after it.
_LC_PAPER_CATEGORY = 7
_NL_PAPER_HEIGHT = _LC_PAPER_CATEGORY << 16
_NL_PAPER_WIDTH = _NL_PAPER_HEIGHT + 1


def paper_config_path(config: PaperConfig | None = None, environ: Mapping[str, str] | None = None) -> Path:
    settings = config or PaperConfig()
    env = os.environ if environ is None else environ
    override = env.get(settings.paperconf_env_var)
    if override:
        return Path(override)
    return settings.paperconf_path


def _read_paper_config(path: Path) -> str | None:
    try:
        with path.open("r", encoding="utf-8") as handle:
            line = read_significant_line(handle)
    except FileNotFoundError:
        log_event(_LOGGER, logging.DEBUG, "resolver.config_file.missing", path=str(path))
        return None
    except (OSError, UnicodeDecodeError) as exc:
        log_event(_LOGGER, logging.WARNING, "resolver.config_file.unreadable", path=str(path), error=str(exc))
        return None

    if line is None:
        return None
    split = next_token(line)
    return None if split is None else split[0]


def _configured_paper_name(settings: PaperConfig, env: Mapping[str, str]) -> str | None:
    from_env = env.get(settings.papersize_env_var)
    if from_env:
        log_event(_LOGGER, logging.DEBUG, "resolver.default.env_override", name=from_env)
        return from_env

    path = paper_config_path(settings, env)
    from_file = _read_paper_config(path)
    if from_file is not None:
        log_event(_LOGGER, logging.DEBUG, "resolver.default.config_file", path=str(path), name=from_file)
    return from_file


def _canonical_name(database: PaperDatabase, name: str) -> str:
    record = database.lookup(name)
    return name if record is None else record.name


def system_default_name(
    database: PaperDatabase,
    config: PaperConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Return the system paper name: environment, then configuration file, then fallback.

    Names known to the database come back with the database's spelling
    (``A4`` becomes ``a4``); unknown names are returned unchanged.
    """
    settings = config or PaperConfig()
    env = os.environ if environ is None else environ

    name = _configured_paper_name(settings, env)
    if name is None:
        log_event(_LOGGER, logging.DEBUG, "resolver.default.fallback", name=settings.fallback_name)
        name = settings.fallback_name
    return _canonical_name(database, name)


@functools.lru_cache(maxsize=1)
def _nl_langinfo() -> Callable[[int], int | None] | None:
    if not sys.platform.startswith("linux"):
        return None

    try:
        libc = ctypes.CDLL(ctypes.util.find_library("c"))
    except OSError:
        return None
    # LC_PAPER is a glibc extension; musl and friends lack it.
    if not hasattr(libc, "gnu_get_libc_version") or not hasattr(libc, "nl_langinfo"):
        return None

    function = libc.nl_langinfo
    function.argtypes = [ctypes.c_int]
    function.restype = ctypes.c_void_p
    return function


def _langinfo_word(raw: int | None) -> int:
    # nl_langinfo returns the word through a pointer-sized union.
    if raw is None:
        return 0
    if sys.byteorder == "little":
        return raw & 0xFFFFFFFF
    return (raw >> (8 * (ctypes.sizeof(ctypes.c_void_p) - 4))) & 0xFFFFFFFF


def locale_paper_supported() -> bool:
    return _nl_langinfo() is not None


def system_locale_paper_size() -> tuple[int, int] | None:
    """Return ``(width_mm, height_mm)`` from the LC_PAPER locale, or None when unavailable.

    The values come from the process locale, so hosts should call
    ``locale.setlocale(locale.LC_ALL, "")`` first to pick up the user's settings.
    """
    langinfo = _nl_langinfo()
    if langinfo is None:
        return None

    width = _langinfo_word(langinfo(_NL_PAPER_WIDTH))
    height = _langinfo_word(langinfo(_NL_PAPER_HEIGHT))
    if width == 0 or height == 0:
        return None
    return width, height


def locale_default_name(
    database: PaperDatabase,
    config: PaperConfig | None = None,
    probe: LocaleProbe | None = None,
) -> str:
    """Return the first paper whose millimetre size matches the locale, else the fallback name."""
    settings = config or PaperConfig()
    locale_size = (probe or system_locale_paper_size)()
    if locale_size is None:
        log_event(_LOGGER, logging.DEBUG, "resolver.locale.unsupported", fallback=settings.fallback_name)
        return settings.fallback_name

    width_mm, height_mm = locale_size
    record = database.lookup_by_millimetres(width_mm, height_mm)
    if record is None:
        log_event(
            _LOGGER,
            logging.DEBUG,
            "resolver.locale.unmatched",
            width_mm=width_mm,
            height_mm=height_mm,
            fallback=settings.fallback_name,
        )
        return settings.fallback_name

    log_event(_LOGGER, logging.DEBUG, "resolver.locale.matched", width_mm=width_mm, height_mm=height_mm, name=record.name)
    return record.name


def default_paper_name(
    database: PaperDatabase,
    config: PaperConfig | None = None,
    environ: Mapping[str, str] | None = None,
    probe: LocaleProbe | None = None,
) -> str:
    """Full chain: environment, configuration file, locale, then fallback."""
    settings = config or PaperConfig()
    env = os.environ if environ is None else environ

    name = _configured_paper_name(settings, env)
    if name is None:
        return locale_default_name(database, settings, probe)
    return _canonical_name(database, name)
