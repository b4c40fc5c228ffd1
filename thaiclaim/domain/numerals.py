"""Pure functions for Thai numerals and monetary wording.

This module contains the functional core for number display:
- No I/O operations
- No side effects
- Lookup tables are immutable tuples

Amounts are whole Baht; satang are dropped before wording.
"""

import math

from thaiclaim.domain.models import Baht

THAI_DIGITS = ("๐", "๑", "๒", "๓", "๔", "๕", "๖", "๗", "๘", "๙")

DIGIT_WORDS = ("ศูนย์", "หนึ่ง", "สอง", "สาม", "สี่", "ห้า", "หก", "เจ็ด", "แปด", "เก้า")

# Place words inside a six digit segment, units first
PLACE_WORDS = ("", "สิบ", "ร้อย", "พัน", "หมื่น", "แสน")

MILLION_WORD = "ล้าน"
BAHT_EXACT_SUFFIX = "บาทถ้วน"
ZERO_BAHT_TEXT = "ศูนย์บาทถ้วน"

SEGMENT_SIZE = 6

_ASCII_TO_THAI = str.maketrans("0123456789", "".join(THAI_DIGITS))


def to_thai_digits(value: str | int | float) -> str:
    """Replace ASCII digits with Thai digit glyphs.

    Args:
        value: Any string or number.

    Returns:
        The string form of value with 0-9 mapped to ๐-๙. Other characters are kept.
    """
    return str(value).translate(_ASCII_TO_THAI)


def split_segments(integer: Baht) -> list[str]:
    """Split a non-negative integer into six digit segments, most significant first.

    Args:
        integer: Non-negative integer.

    Returns:
        List of digit strings. Only the first segment may be shorter than six digits.
    """
    remaining = str(integer)
    segments: list[str] = []
    while remaining:
        segments.insert(0, remaining[-SEGMENT_SIZE:])
        remaining = remaining[:-SEGMENT_SIZE]
    return segments


def segment_to_thai_text(segment: str) -> str:
    """Spell out one segment of up to six digits.

    Args:
        segment: Digit string, may contain leading zeros.

    Returns:
        Thai words for the segment, or "" when every digit is zero.
    """
    length = len(segment)
    words = []

    for index, char in enumerate(segment):
        digit = int(char)
        if digit == 0:
            continue

        position = length - index - 1
        if position == 0:
            words.append("เอ็ด" if digit == 1 and length > 1 else DIGIT_WORDS[digit])
        elif position == 1 and digit == 1:
            words.append("สิบ")
        elif position == 1 and digit == 2:
            words.append("ยี่สิบ")
        else:
            words.append(DIGIT_WORDS[digit] + PLACE_WORDS[position])

    return "".join(words)


def amount_to_thai_text(amount: float) -> str:
    """Spell out a Baht amount in Thai words.

    Args:
        amount: Amount in Baht. Fractions are floored away.

    Returns:
        Thai words ending in "บาทถ้วน", the zero phrase for 0, or "" when the
        amount is negative or not finite.
    """
    # ints may be too large to convert to float but are always finite
    if not isinstance(amount, int) and not math.isfinite(amount):
        return ""
    if amount < 0:
        return ""

    integer = Baht(math.floor(amount))
    if integer == 0:
        return ZERO_BAHT_TEXT

    segments = split_segments(integer)
    result = ""
    for index, segment in enumerate(segments):
        segment_text = segment_to_thai_text(segment)
        result += segment_text
        if index < len(segments) - 1 and result:
            result += MILLION_WORD

    return result + BAHT_EXACT_SUFFIX
