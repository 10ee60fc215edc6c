"""Shared constants and helpers for test modules."""

import re
from datetime import datetime

ANSI_ESCAPE = re.compile(r"\033\[[0-9;]*m")

FIXED_TIME = datetime(2024, 1, 15, 10, 30, 45, 123456)
FIXED_STAMP = "2024-01-15 10:30:45.123"


def strip_ansi(text: str) -> str:
    """Remove SGR escape sequences from text."""
    return ANSI_ESCAPE.sub("", text)
