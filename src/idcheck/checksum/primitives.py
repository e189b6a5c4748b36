"""
Numeric building blocks shared by every check-digit scheme.

Why this file exists
--------------------
Most identifier schemes are a thin layer over the same handful of operations:
a modulo over a number too long to treat casually, the Luhn sum, a digit sum
and the IBAN letter-to-number substitution. Keeping them here means each scheme
in `validators.py` reads as "format check, transform, primitive, compare".

Contract
--------
The primitives assume well-formed input (callers check lengths and characters
first). They never look at types; validators do that.
"""

from __future__ import annotations

from typing import Optional, Sequence

_ZERO = ord("0")
_LETTER_OFFSET = ord("A") - 10  # 'A' -> 10 ... 'Z' -> 35


def is_digits(value: str) -> bool:
    """
    True if `value` is non-empty and made of ASCII digits only.

    `str.isdigit` alone also accepts characters like '²' or Arabic-Indic digits,
    which `int()` rejects or reads differently.
    """
    return bool(value) and value.isascii() and value.isdigit()


def mod97(digits: str) -> int:
    """
    Compute `int(digits) % 97` piecewise (ISO 7064 MOD 97-10).

    The first 9 digits are reduced, then the remainder is prefixed to the next
    chunk of 7 digits (two-digit remainder) or 8 digits (one-digit remainder) so
    every intermediate number stays at 9 digits or fewer.

    Args:
        digits: Non-empty string of ASCII digits, any length.

    Returns:
        The remainder, 0..96.
    """
    remainder = int(digits[:9]) % 97
    pos = 9
    while pos < len(digits):
        step = 7 if remainder > 9 else 8
        remainder = int(f"{remainder}{digits[pos:pos + step]}") % 97
        pos += step
    return remainder


def luhn(digits: str) -> bool:
    """
    Validate a digit string with the Luhn checksum (a.k.a. "mod 10").

    Every second digit from the right, starting left of the last one, is
    doubled; two-digit products contribute the sum of their digits.

    Args:
        digits: String of ASCII digits. No length policy is applied here.

    Returns:
        True if the weighted total is a multiple of 10.
    """
    total = 0
    for i, ch in enumerate(reversed(digits)):
        d = ord(ch) - _ZERO
        if i % 2 == 1:
            d *= 2
        total += d // 10 + d % 10
    return total % 10 == 0


def luhn_check_digit(payload: str) -> int:
    """Return the digit that makes `payload + digit` pass `luhn`."""
    total = 0
    # The check digit takes position 0 from the right, so payload digits shift by one.
    for i, ch in enumerate(reversed(payload)):
        d = ord(ch) - _ZERO
        if i % 2 == 0:
            d *= 2
        total += d // 10 + d % 10
    return (10 - total % 10) % 10


def digit_sum(value: int) -> int:
    """Sum of the decimal digits of a non-negative integer."""
    total = 0
    while value:
        value, d = divmod(value, 10)
        total += d
    return total


def transliterate(value: str) -> Optional[str]:
    """
    Replace letters A..Z with 10..35 and keep digits, in a single pass.

    Returns:
        The all-digit string, or None if `value` holds anything other than
        ASCII digits and upper-case ASCII letters.
    """
    out = []
    for ch in value:
        if "0" <= ch <= "9":
            out.append(ch)
        elif "A" <= ch <= "Z":
            out.append(str(ord(ch) - _LETTER_OFFSET))
        else:
            return None
    return "".join(out)


def weighted_sum(digits: str, weights: Sequence[int]) -> int:
    """Sum of digit * weight, pairing positions from the left."""
    return sum((ord(ch) - _ZERO) * w for ch, w in zip(digits, weights))


def weighted_digit_sum(digits: str, weights: Sequence[int]) -> int:
    """
    Like `weighted_sum`, but each product contributes its digit sum
    ("modified double-add-double": 2 * 8 = 16 counts as 7).
    """
    return sum(digit_sum((ord(ch) - _ZERO) * w) for ch, w in zip(digits, weights))
