from importlib.resources import files

from .clock import ClockType, Time
from .config import CivilTimeConfig, get_config, reset_config
from .date import Date, StringLabel, Weekday
from .date_time import DateTime
from .duration import (
    ColonSeparated,
    Duration,
    LabelType,
    StringFormat,
    Textual,
    TimeUnit,
    TotalValue,
)
from .util import DAY, HOUR, MINUTE, SECOND

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Duration",
    "TimeUnit",
    "LabelType",
    "StringFormat",
    "TotalValue",
    "ColonSeparated",
    "Textual",
    "Time",
    "ClockType",
    "Date",
    "Weekday",
    "StringLabel",
    "DateTime",
    "CivilTimeConfig",
    "get_config",
    "reset_config",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "docs",
]
