"""Field value normalization.

Every field value stored on a Metric is either a float or None. ``normalize``
maps a raw input to that form, one conversion function per supported kind:

- floats and other ``numbers.Real`` values are widened to float
- integers of any width become float (None if too large for a double)
- booleans (including numpy.bool_) become 1.0 / 0.0
- text and byte strings are parsed as a base-10 float literal
- None and every other type are unconvertible (None)
"""

import math
import numbers
from functools import singledispatch

_INFINITY_LITERALS = frozenset({"inf", "infinity"})


@singledispatch
def normalize(value: object) -> float | None:
    """Convert a raw field value to its canonical float form.

    Args:
        value: Raw input value.

    Returns:
        The value as a float, or None when it has no numeric representation.
    """
    # numpy scalars outside the numbers tower, such as numpy.bool_
    if type(value).__module__ == "numpy" and getattr(value, "ndim", None) == 0:
        return normalize(value.item())
    return None


@normalize.register(bool)
def _normalize_bool(value: bool) -> float | None:
    return 1.0 if value else 0.0


@normalize.register(numbers.Integral)
def _normalize_integral(value: numbers.Integral) -> float | None:
    try:
        return float(int(value))
    except OverflowError:
        return None


@normalize.register(numbers.Real)
def _normalize_real(value: numbers.Real) -> float | None:
    try:
        return float(value)
    except OverflowError:
        return None


@normalize.register(str)
def _normalize_str(value: str) -> float | None:
    return parse_float(value)


@normalize.register(bytes)
@normalize.register(bytearray)
@normalize.register(memoryview)
def _normalize_bytes(value: bytes | bytearray | memoryview) -> float | None:
    try:
        text = bytes(value).decode("utf-8")
    except UnicodeDecodeError:
        return None
    return parse_float(text)


def parse_float(text: str) -> float | None:
    """Parse a strict floating-point literal.

    Accepts decimal literals with optional sign and exponent, the special
    values ``inf`` and ``infinity`` (any case, optional sign) and ``nan``
    (any case, unsigned), and hexadecimal literals with a binary exponent
    such as ``0x1p-2``. Surrounding whitespace, ``_`` separators and
    non-ASCII digits are rejected, and a finite literal that overflows a
    double is rejected rather than rounded to infinity.

    Args:
        text: Literal to parse.

    Returns:
        Parsed float, or None if the text is not a valid literal.
    """
    if not text or not text.isascii() or "_" in text or text != text.strip():
        return None

    try:
        result = float(text)
    except ValueError:
        return _parse_hex_float(text)

    if math.isinf(result) and text.lstrip("+-").lower() not in _INFINITY_LITERALS:
        return None
    if math.isnan(result) and text[0] in "+-":
        return None
    return result


def _parse_hex_float(text: str) -> float | None:
    unsigned = text.lstrip("+-").lower()
    # Hex mantissas require a binary exponent
    if len(text) - len(unsigned) > 1 or not unsigned.startswith("0x") or "p" not in unsigned:
        return None
    try:
        return float.fromhex(text)
    except (ValueError, OverflowError):
        return None
