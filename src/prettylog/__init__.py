"""prettylog - colorized, human-readable rendering of structured log records."""

from prettylog.adapters.logging import PrettyLogHandler, install
from prettylog.adapters.sink import OutputSink, new_handler
from prettylog.core.attrs import (
    any_,
    boolean,
    duration,
    float64,
    group,
    int64,
    string,
    time,
    uint64,
)
from prettylog.core.chain import ContextChain, GroupOrAttrs, elide_empty_groups
from prettylog.core.colors import DEFAULT_THEME, Color, ColorTheme
from prettylog.core.handler import PrettyHandler
from prettylog.core.logger import Logger
from prettylog.core.models import Attr, Kind, Level, LogValuer, Record, Source, Value
from prettylog.core.options import DEFAULT_TIME_FORMAT, Options, parse_level

__all__ = [
    "DEFAULT_THEME",
    "DEFAULT_TIME_FORMAT",
    "Attr",
    "Color",
    "ColorTheme",
    "ContextChain",
    "GroupOrAttrs",
    "Kind",
    "Level",
    "LogValuer",
    "Logger",
    "Options",
    "OutputSink",
    "PrettyHandler",
    "PrettyLogHandler",
    "Record",
    "Source",
    "Value",
    "any_",
    "boolean",
    "duration",
    "elide_empty_groups",
    "float64",
    "group",
    "install",
    "int64",
    "new_handler",
    "parse_level",
    "string",
    "time",
    "uint64",
]
