"""
 *values.py*
 converts raw argument tokens into typed values.

 Fixed-width numeric types come from numpy; ``int`` and ``float`` keep
 Python semantics (``int`` is unbounded, ``float`` is a 64-bit double).
"""
import math
import re
from typing import Any, Callable, Dict

import numpy as np

from .errors import InvalidArgumentFormatError

_INT_RE = re.compile(r"[+-]?[0-9]+")
_NONFINITE = ("inf", "infinity", "nan")

_BOOL_WORDS: Dict[str, bool] = {
    "true": True, "yes": True, "on": True, "1": True,
    "false": False, "no": False, "off": False, "0": False,
}


def _is_numpy(value_type: type, base: type) -> bool:
    return isinstance(value_type, type) and issubclass(value_type, base)


def _parse_str(text: str, value_type: type) -> str:
    return text


def _parse_bool(text: str, value_type: type) -> bool:
    try:
        return _BOOL_WORDS[text.lower()]
    except KeyError:
        raise InvalidArgumentFormatError(text)


def _parse_int(text: str, value_type: type) -> Any:
    if not _INT_RE.fullmatch(text):
        raise InvalidArgumentFormatError(text)
    value = int(text)
    if value_type is int:
        return value

    info = np.iinfo(value_type)
    if not info.min <= value <= info.max:
        raise InvalidArgumentFormatError(text)
    return value_type(value)


def _parse_float(text: str, value_type: type) -> Any:
    if not text or text != text.strip() or "_" in text:
        raise InvalidArgumentFormatError(text)
    try:
        value = float(text)
    except ValueError:
        raise InvalidArgumentFormatError(text)

    if math.isfinite(value):
        if abs(value) > np.finfo(value_type).max:
            raise InvalidArgumentFormatError(text)
    elif text.lstrip("+-").lower() not in _NONFINITE:
        raise InvalidArgumentFormatError(text)

    return value if value_type is float else value_type(value)


def _parse_other(text: str, value_type: type) -> Any:
    if text != text.strip():
        raise InvalidArgumentFormatError(text)
    try:
        return value_type(text)
    except (ValueError, TypeError, ArithmeticError):
        raise InvalidArgumentFormatError(text)


def converter_for(value_type: type) -> Callable[[str, type], Any]:
    if value_type is str:
        return _parse_str
    if value_type is bool:
        return _parse_bool
    if value_type is int or _is_numpy(value_type, np.integer):
        return _parse_int
    if value_type is float or _is_numpy(value_type, np.floating):
        return _parse_float
    return _parse_other


def coerce(value_type: type, text: str) -> Any:
    """Convert ``text`` to ``value_type`` or raise InvalidArgumentFormatError."""
    return converter_for(value_type)(text, value_type)
