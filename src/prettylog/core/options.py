"""Handler options and their parsing from plain mappings or the environment."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

from prettylog.core.models import Level

DEFAULT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S.%3f"

# Level names accepted in configuration (case-insensitive)
LEVEL_NAMES = {
    "DEBUG": Level.DEBUG,
    "INFO": Level.INFO,
    "WARN": Level.WARN,
    "WARNING": Level.WARN,
    "ERROR": Level.ERROR,
    "CRITICAL": 50,
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_level(value: int | str) -> int:
    """Parse a level given as an integer or a level name.

    Args:
        value: An int, a numeric string, or a name such as "debug" or "WARN".

    Returns:
        The level as an integer.

    Raises:
        ValueError: If the value is not a known level name or integer.
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"invalid level: {value!r}")
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.upper() in LEVEL_NAMES:
        return int(LEVEL_NAMES[text.upper()])
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"invalid level: {value!r}") from None


def _parse_bool(name: str, value: bool | str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"invalid boolean for {name}: {value!r}")


@dataclass(frozen=True)
class Options:
    """Rendering options, fixed once the handler is built.

    Attributes:
        level: Minimum level a record needs to be emitted.
        add_source: Append ``source: file:line`` to the header.
        colorful: Wrap output pieces in ANSI color sequences.
        multiline: One attribute per indented line instead of key=value.
        time_format: strftime pattern; ``%3f`` expands to milliseconds.

    Raises:
        ValueError: If the level is not a known level, or a flag is not a bool.
    """

    level: int = Level.INFO
    add_source: bool = False
    colorful: bool = True
    multiline: bool = False
    time_format: str = DEFAULT_TIME_FORMAT

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", parse_level(self.level))
        for name in ("add_source", "colorful", "multiline"):
            flag = getattr(self, name)
            if not isinstance(flag, bool):
                raise ValueError(f"invalid boolean for {name}: {flag!r}")
        if not self.time_format:
            object.__setattr__(self, "time_format", DEFAULT_TIME_FORMAT)
        elif not isinstance(self.time_format, str):
            raise ValueError(f"invalid time format: {self.time_format!r}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Options":
        """Build Options from a plain dict.

        Args:
            mapping: Keys are option names (level, add_source, colorful,
                multiline, time_format). Values may be strings.

        Returns:
            Options with unspecified keys left at their defaults.

        Raises:
            ValueError: On unknown keys or unparseable values.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            raise ValueError(f"unknown options: {', '.join(sorted(unknown))}")

        kwargs: dict[str, Any] = {}
        for name, value in mapping.items():
            if name == "level":
                kwargs[name] = parse_level(value)
            elif name == "time_format":
                kwargs[name] = str(value)
            else:
                kwargs[name] = _parse_bool(name, value)
        return cls(**kwargs)

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        prefix: str = "PRETTYLOG_",
    ) -> "Options":
        """Build Options from environment variables.

        Reads ``<prefix>LEVEL``, ``<prefix>ADD_SOURCE``, ``<prefix>COLORFUL``,
        ``<prefix>MULTILINE`` and ``<prefix>TIME_FORMAT``. When ``NO_COLOR``
        is set, colors are turned off regardless of ``<prefix>COLORFUL``.

        Args:
            environ: Variables to read (defaults to ``os.environ``).
            prefix: Variable name prefix.

        Returns:
            Options built from the variables that are set.
        """
        env = os.environ if environ is None else environ
        mapping: dict[str, str] = {}
        for f in fields(cls):
            raw = env.get(prefix + f.name.upper())
            if raw is not None and raw != "":
                mapping[f.name] = raw
        if env.get("NO_COLOR") is not None:
            mapping["colorful"] = "false"
        return cls.from_mapping(mapping)
