"""
Length units.

Everything inside the generator is expressed in millimetres. Presets and
config files may use inches, which is how the enclosure was originally
drawn.
"""

import re
from fractions import Fraction
from typing import Union

MM_PER_INCH = 25.4

_UNIT_FACTORS = {
    '': 1.0,
    'mm': 1.0,
    'cm': 10.0,
    'in': MM_PER_INCH,
    'inch': MM_PER_INCH,
    'inches': MM_PER_INCH,
    '"': MM_PER_INCH,
}

_LENGTH_RE = re.compile(
    r'^\s*(?P<value>[-+]?\d+(?:\.\d+)?(?:\s+\d+/\d+|/\d+)?)\s*(?P<unit>[a-z"]*)\s*$'
)


def inch(value: float) -> float:
    """Inches -> millimetres."""
    return value * MM_PER_INCH


def mm(value: float) -> float:
    return float(value)


def to_inches(value: float) -> float:
    """Millimetres -> inches."""
    return value / MM_PER_INCH


def parse_length(text: Union[str, int, float]) -> float:
    """
    Parse a length into millimetres.

    Bare numbers are millimetres. Strings may carry a unit suffix and a
    fraction, e.g. "23 in", "1/4in", "1 1/2 in", "5.2mm", '6"'.
    """
    if isinstance(text, (int, float)):
        return float(text)

    match = _LENGTH_RE.match(text.lower())
    if not match:
        raise ValueError(f"Cannot parse length: {text!r}")

    unit = match.group('unit')
    if unit not in _UNIT_FACTORS:
        raise ValueError(f"Unknown length unit {unit!r} in {text!r}")

    # "1 1/2" is a mixed number; the sign covers both parts
    text_value = match.group('value')
    sign = -1 if text_value.startswith('-') else 1
    value = sum(Fraction(part) for part in text_value.lstrip('+-').split())
    return sign * float(value) * _UNIT_FACTORS[unit]
