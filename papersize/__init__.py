from papersize.config import PaperConfig
from papersize.database import DatabaseState, PaperDatabase, PaperRecord
from papersize.errors import (
    DatabaseStateError,
    MalformedLineError,
    PaperDatabaseError,
    PaperError,
    SpecsFileError,
    UnknownUnitError,
)
from papersize.query import (
    first,
    next_paper,
    paper_dimensions,
    paper_height,
    paper_info,
    paper_name,
    paper_width,
    paper_with_size,
)
from papersize.resolver import (
    default_paper_name,
    locale_default_name,
    locale_paper_supported,
    paper_config_path,
    system_default_name,
    system_locale_paper_size,
)

__all__ = [
    "DatabaseState",
    "DatabaseStateError",
    "MalformedLineError",
    "PaperConfig",
    "PaperDatabase",
    "PaperDatabaseError",
    "PaperError",
    "PaperRecord",
    "SpecsFileError",
    "UnknownUnitError",
    "default_paper_name",
    "first",
    "locale_default_name",
    "locale_paper_supported",
    "next_paper",
    "paper_config_path",
    "paper_dimensions",
    "paper_height",
    "paper_info",
    "paper_name",
    "paper_width",
    "paper_with_size",
    "system_default_name",
    "system_locale_paper_size",
]
