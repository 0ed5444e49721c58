# bitdist/validation.py
from __future__ import annotations
import re
from typing import Callable, List, TypeVar

from .errors import BitmapError, InvalidDimensionError, InvalidInputError

T = TypeVar("T")

_SPLIT = re.compile(r"[\s,;]+")


def parse_positive_int(text: str, name: str = "value") -> int:
    s = str(text).strip()
    try:
        v = int(s)
    except ValueError:
        raise InvalidDimensionError(f"{name} must be a number, got {s!r}") from None
    if v < 1:
        raise InvalidDimensionError(f"{name} must be >= 1, got {v}")
    return v


def parse_bit(text: str) -> int:
    s = str(text).strip()
    if s not in ("0", "1"):
        raise InvalidInputError(f"the value must be either 0 or 1, got {s!r}")
    return int(s)


def parse_bits(text: str) -> List[int]:
    """'1 0 1', '1,0,1' or '101' -> [1, 0, 1]"""
    s = str(text).strip()
    if not s:
        return []
    tokens = []
    for t in _SPLIT.split(s):
        if t:
            tokens.extend(t if t.isdigit() else [t])
    return [parse_bit(t) for t in tokens]


def ask_until_valid(
    question: str,
    parse: Callable[[str], T],
    *,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
    error_msg: str | None = None,
) -> T:
    """
    Re-asks 'question' until 'parse' accepts the answer.
    Only BitmapError is treated as a bad answer; EOF and anything else propagate.
    """
    while True:
        answer = read(question)
        try:
            return parse(answer)
        except BitmapError as e:
            write(error_msg or f"Incorrect answer. {e}")
