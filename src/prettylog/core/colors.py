"""ANSI color codes and the read-only theme used by the renderer."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType

RESET = "\033[0m"


class Color(IntEnum):
    """SGR foreground color codes."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    MAGENTA = 35
    CYAN = 36
    LIGHT_GRAY = 37
    DARK_GRAY = 90
    LIGHT_RED = 91
    LIGHT_GREEN = 92
    LIGHT_YELLOW = 93
    LIGHT_BLUE = 94
    LIGHT_MAGENTA = 95
    LIGHT_CYAN = 96
    WHITE = 97


def colorize(color: int | None, text: str) -> str:
    """Wrap text in an SGR color sequence.

    Args:
        color: SGR code, or None to leave the text untouched.
        text: Text to wrap.

    Returns:
        The wrapped text.
    """
    if color is None:
        return text
    return f"\033[{int(color)}m{text}{RESET}"


def _default_levels() -> Mapping[int, int]:
    return MappingProxyType(
        {
            10: Color.LIGHT_MAGENTA,
            20: Color.LIGHT_CYAN,
            30: Color.LIGHT_YELLOW,
            40: Color.LIGHT_RED,
        }
    )


@dataclass(frozen=True)
class ColorTheme:
    """Role to color mapping.

    Attributes:
        timestamp: Header timestamp.
        message: Header message.
        source: ``source: file:line`` suffix.
        key: Attribute keys and group attribute labels.
        value: Attribute values.
        group: Bound group labels in multiline mode.
        group_inline: Bound group labels in inline mode.
        levels: Level number to color for the named levels.
    """

    timestamp: int = Color.LIGHT_GRAY
    message: int = Color.WHITE
    source: int = Color.DARK_GRAY
    key: int = Color.LIGHT_MAGENTA
    value: int = Color.LIGHT_BLUE
    group: int = Color.MAGENTA
    group_inline: int = Color.CYAN
    levels: Mapping[int, int] = field(default_factory=_default_levels)

    def level(self, level: int) -> int | None:
        """Return the color for a level, or None for off-grid levels."""
        return self.levels.get(level)


DEFAULT_THEME = ColorTheme()
