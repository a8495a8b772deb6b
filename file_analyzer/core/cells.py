# file_analyzer/core/cells.py
import math
import re
from typing import Iterable, NamedTuple, Optional

from file_analyzer import config

_INTEGER = re.compile(r"-?\d+", re.ASCII)
_FLOAT = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?", re.ASCII)


class Cell(NamedTuple):
    """A normalized cell. ``value`` is the raw string, or None when missing."""

    value: Optional[str]

    @property
    def missing(self) -> bool:
        return self.value is None


MISSING = Cell(None)


def is_missing(raw: Optional[str], tokens: Iterable[str] = None) -> bool:
    if raw is None:
        return True
    tokens = config.MISSING_TOKENS if tokens is None else tokens
    stripped = raw.strip().casefold()
    return any(stripped == token.casefold() for token in tokens)


def normalize(raw: Optional[str], tokens: Iterable[str] = None) -> Cell:
    if is_missing(raw, tokens):
        return MISSING
    return Cell(raw)


def present_values(cells: Iterable[Cell]) -> list:
    return [cell.value for cell in cells if not cell.missing]


def parse_integer(text: str) -> Optional[int]:
    text = text.strip()
    if not _INTEGER.fullmatch(text):
        return None
    try:
        value = int(text)
        # must still widen to a float for summarizing
        float(value)
    except (ValueError, OverflowError):
        return None
    return value


def parse_float(text: str) -> Optional[float]:
    text = text.strip()
    if not _FLOAT.fullmatch(text):
        return None
    value = float(text)
    # overflowing literals such as 1e999 become inf
    return value if math.isfinite(value) else None


def parse_number(text: str):
    """Return an int, a float, or None when the text is not numeric.

    Integers are tried first so callers can tell the two apart. Surrounding
    whitespace is ignored; signs other than a leading ``-``, thousands
    separators, underscores, ``inf``/``nan`` and values outside the float
    range are rejected.
    """
    value = parse_integer(text)
    if value is not None:
        return value
    return parse_float(text)
