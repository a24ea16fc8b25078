"""Signalling Point Code formatting in the common dotted variants."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

_UINT32_MASK = 0xFFFFFFFF
_DIGIT = re.compile(r"[+-]?\d+")


class Variant(str, Enum):
    """Point code variants, named by the bit width of each field."""

    NONE = ""
    V383 = "3-8-3"
    V437 = "4-3-7"
    V4343 = "4-3-4-3"
    V446 = "4-4-6"
    V545 = "5-4-5"
    V662 = "6-6-2"
    V68 = "6-8"
    V745 = "7-4-5"
    V77 = "7-7"
    V888 = "8-8-8"

    def __str__(self) -> str:
        return self.value

    def bit_length(self) -> int:
        """Total bit length defined for the variant, 0 when undefined."""
        return _BIT_LENGTHS.get(self, 0)

    def _widths(self) -> list[int]:
        if self is Variant.NONE:
            return []
        return [int(part) for part in self.value.split("-")]


_BIT_LENGTHS = {
    Variant.V383: 14,
    Variant.V437: 14,
    Variant.V4343: 14,
    Variant.V545: 14,
    Variant.V662: 14,
    Variant.V68: 14,
    Variant.V77: 14,
    Variant.V745: 16,
    Variant.V888: 24,
}


def _raw_to_str(raw: int, variant: Variant) -> str:
    if variant is Variant.NONE:
        raise ValueError("invalid Variant given")
    remaining = variant.bit_length()
    raw &= (1 << remaining) - 1
    digits = []
    for width in variant._widths():
        remaining -= width
        value = (raw >> remaining) & ((1 << width) - 1) if remaining >= 0 else 0
        digits.append(str(value))
    return "-".join(digits)


def _str_to_raw(formatted: str, variant: Variant) -> int:
    if variant is Variant.NONE:
        raise ValueError("invalid Variant given")
    parts = formatted.split("-")
    widths = variant._widths()
    if len(parts) != len(widths):
        raise ValueError(f"PC: {formatted} and Variant: {variant} doesn't match")
    remaining = variant.bit_length()
    raw = 0
    for part, width in zip(parts, widths):
        if not _DIGIT.fullmatch(part):
            raise ValueError(f"failed to convert PC: invalid digit {part!r}")
        remaining -= width
        if remaining >= 0:
            raw |= ((int(part) & _UINT32_MASK) << remaining) & _UINT32_MASK
    return raw


@dataclass
class PointCode:
    """A point code with its raw value, variant and formatted text."""

    raw: int
    variant: Variant
    formatted: str = ""

    def __int__(self) -> int:
        return self.raw

    def __str__(self) -> str:
        if self.variant is Variant.NONE:
            return ""
        return self.formatted

    def convert_to(self, variant: Variant | str) -> str:
        """Format the raw value in ``variant`` and remember the result."""
        text = _raw_to_str(self.raw, Variant(variant))
        self.formatted = text
        return text


def new_point_code(raw: int, variant: Variant | str) -> PointCode:
    """Create a point code from its raw value, masked to the variant's width."""
    variant = Variant(variant)
    raw = int(raw) & _UINT32_MASK & ((1 << variant.bit_length()) - 1)
    point_code = PointCode(raw=raw, variant=variant)
    point_code.convert_to(variant)
    return point_code


def new_point_code_from(formatted: str, variant: Variant | str) -> PointCode:
    """Create a point code from its formatted text in ``variant``."""
    variant = Variant(variant)
    raw = _str_to_raw(formatted, variant)
    return PointCode(raw=raw, variant=variant, formatted=formatted)