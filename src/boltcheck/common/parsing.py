"""Numeric parsing of raw form input.

The presentation layer hands over strings. Parsing follows the browser
behaviour the forms were built against: ``parseFloat(raw) || default``
for real values and ``Number(raw)`` for counts. A value that cannot be read
falls back to the field default instead of raising, unless ``strict`` is
set, in which case :class:`~boltcheck.common.errors.InvalidInput` is raised.
"""

from __future__ import annotations

import logging
import math
import re
from numbers import Real

from .errors import InvalidInput

logger = logging.getLogger(__name__)

# Leading numeric prefix, as read by parseFloat.
_FLOAT_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _leading_float(text: str) -> float | None:
    text = text.strip()
    if text.lstrip("+-").startswith("Infinity"):
        return None
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(0))


def _full_float(text: str) -> float | None:
    text = text.strip()
    if not text:
        return 0.0
    try:
        value = float(text)
    except ValueError:
        return None
    return value


def _fallback(raw: object, default, *, strict: bool, field: str | None):
    if strict:
        raise InvalidInput(field, raw)
    logger.warning("Could not parse %s=%r; using default %r", field or "value", raw, default)
    return default


def parse_float(
    raw: object,
    default: float = 0.0,
    *,
    strict: bool = False,
    field: str | None = None,
) -> float:
    """Parse a real value from form input.

    Empty, non-numeric, non-finite and zero inputs all resolve to ``default``.
    Zero is not a parse failure, so it never raises in strict mode.
    """
    if isinstance(raw, Real):
        value: float | None = float(raw)
    elif isinstance(raw, str):
        value = _leading_float(raw)
    else:
        value = None

    if value is None or not math.isfinite(value):
        return float(_fallback(raw, default, strict=strict, field=field))
    if value == 0.0:
        # parseFloat(x) || default treats 0 as missing
        return float(default)
    return value


def parse_int(
    raw: object,
    default: int = 0,
    *,
    strict: bool = False,
    field: str | None = None,
) -> int:
    """Parse a count from form input; the whole string must be numeric."""
    if isinstance(raw, Real):
        value: float | None = float(raw)
    elif isinstance(raw, str):
        value = _full_float(raw)
    else:
        value = None

    if value is None or not math.isfinite(value):
        return int(_fallback(raw, default, strict=strict, field=field))
    if strict and not float(value).is_integer():
        raise InvalidInput(field, raw)
    return int(value)


def as_number(value: object, default: float = 0.0) -> float:
    """Coerce a calculator argument to float; anything unreadable becomes ``default``."""
    if isinstance(value, Real):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            return default
    else:
        return default
    if not math.isfinite(result):
        return default
    return result


__all__ = ["parse_float", "parse_int", "as_number"]
