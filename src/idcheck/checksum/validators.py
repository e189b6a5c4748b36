"""
One validator per identifier scheme.

Every function has the same contract:

- takes the raw value and returns a bool;
- anything that is not a `str` is invalid;
- a wrong length, a character out of place, or an unknown registry key is
  invalid, never an exception.

Bounds and character checks always run before a primitive is called, so nothing
needs to be caught afterwards.
"""

from __future__ import annotations

import math
import re

from .primitives import (
    is_digits,
    luhn,
    mod97,
    transliterate,
    weighted_digit_sum,
    weighted_sum,
)
from .registries import (
    BBNR_WEIGHTS,
    CF_CHECK_ALPHABET,
    CF_EVEN_VALUES,
    CF_ODD_VALUES,
    DNI_CHECK_ALPHABET,
    EAN_WEIGHTS,
    IBAN_LENGTHS,
    ISBN13_WEIGHTS,
    NHS_WEIGHTS,
    VSNR_WEIGHTS,
)

_NINO_SHAPE = re.compile(r"[A-Z]{2}[0-9]{6}[A-Z]")


# ---- Bank accounts ---------------------------------------------------------------------

def iban(value: object) -> bool:
    """
    International Bank Account Number (ISO 13616).

    Steps:
      1) Drop all whitespace (print format -> electronic format).
      2) The length must match the registry entry for the country prefix.
      3) Move the first four characters to the end.
      4) Replace letters A..Z with 10..35.
      5) The resulting number mod 97 must be 1.
    """
    if not isinstance(value, str):
        return False

    compact = "".join(value.split())
    expected = IBAN_LENGTHS.get(compact[:2])
    if expected is None or expected != len(compact):
        return False

    number = transliterate(compact[4:] + compact[:4])
    if number is None:
        return False
    return mod97(number) == 1


# ---- Books and trade items -------------------------------------------------------------

def isbn10(value: object) -> bool:
    """ISBN-10: weights 1..10, a trailing 'X' stands for 10, sum divisible by 11."""
    if not isinstance(value, str) or len(value) != 10:
        return False
    body, check = value[:9], value[9]
    if not is_digits(body):
        return False
    if check == "X":
        check_value = 10
    elif is_digits(check):
        check_value = int(check)
    else:
        return False

    total = weighted_sum(body, range(1, 10)) + check_value * 10
    return total % 11 == 0


def isbn13(value: object) -> bool:
    """ISBN-13: alternating weights 1 and 3, check = (10 - sum % 10) % 10."""
    if not isinstance(value, str) or len(value) != 13 or not is_digits(value):
        return False
    total = weighted_sum(value[:12], ISBN13_WEIGHTS)
    return int(value[12]) == (10 - total % 10) % 10


def isbn(value: object) -> bool:
    """ISBN of either length."""
    if not isinstance(value, str):
        return False
    if len(value) == 10:
        return isbn10(value)
    if len(value) == 13:
        return isbn13(value)
    return False


def ean(value: object) -> bool:
    """
    International Article Number (EAN-8, EAN-13, 18-digit SSCC/GTIN shape).

    The weights depend on the total length; the check digit is the distance from
    the weighted sum up to the next multiple of ten.
    """
    if not isinstance(value, str):
        return False
    weights = EAN_WEIGHTS.get(len(value))
    if weights is None or not is_digits(value):
        return False

    total = weighted_sum(value[:-1], weights)
    return int(value[-1]) == math.ceil(total / 10) * 10 - total


# ---- Luhn-based numbers ----------------------------------------------------------------

def pan(value: object) -> bool:
    """Payment card number (Visa, Mastercard, ...): digits only, Luhn valid."""
    return isinstance(value, str) and is_digits(value) and luhn(value)


def imei(value: object) -> bool:
    """International Mobile Equipment Identity: 15 digits, Luhn valid."""
    return isinstance(value, str) and len(value) == 15 and is_digits(value) and luhn(value)


def sin(value: object) -> bool:
    """Canadian Social Insurance Number: 9 digits, Luhn valid."""
    return isinstance(value, str) and len(value) == 9 and is_digits(value) and luhn(value)


# ---- German social insurance -----------------------------------------------------------

def vsnr(value: object) -> bool:
    """
    Rentenversicherungsnummer (German pension insurance number).

    Layout: 8 digits, one letter, 2 digits, check digit. The letter is replaced
    with its position in the alphabet as two digits (A -> 01, W -> 23), each
    digit is multiplied by its weight, the digit sums of the products are added
    and the total mod 10 must equal the check digit.
    """
    if not isinstance(value, str) or len(value) != 12:
        return False
    letter = value[8]
    if not ("A" <= letter <= "Z"):
        return False
    digits_part = value[:8] + value[9:]
    if not is_digits(digits_part):
        return False

    number = f"{value[:8]}{ord(letter) - 64:02d}{value[9:11]}"
    total = weighted_digit_sum(number, VSNR_WEIGHTS)
    return total % 10 == int(value[11])


def bbnr(value: object) -> bool:
    """
    Betriebsnummer (German establishment number used in social insurance reporting).

    8 digits; the first three must read 010..099 or above 110.
    """
    if not isinstance(value, str) or len(value) != 8 or not is_digits(value):
        return False
    prefix = int(value[:3])
    if not (10 <= prefix <= 99 or prefix > 110):
        return False

    total = weighted_digit_sum(value[:7], BBNR_WEIGHTS)
    return total % 10 == int(value[7])


def kvnr(value: object) -> bool:
    """
    Krankenversichertennummer (German health insurance number, long form).

    Unsupported: there is no check-digit rule implemented for this scheme, so
    every value is rejected. The scheme catalogue flags it as unsupported.
    """
    return False


def pid(value: object) -> bool:
    """
    Personalausweisnummer (German identity card number).

    Unsupported: every value is rejected. The scheme catalogue flags it as
    unsupported.
    """
    return False


# ---- Other national numbers ------------------------------------------------------------

def nir(value: object) -> bool:
    """French NIR: 13-digit number followed by its key, 97 - (number % 97)."""
    if not isinstance(value, str) or len(value) != 15 or not is_digits(value):
        return False
    number = int(value[:13])
    return int(value[13:]) == 97 - number % 97


def cf(value: object) -> bool:
    """
    Italian codice fiscale.

    The first 15 characters alternate between the odd-position and the
    even-position value tables (starting with odd); the total mod 26 indexes
    the check letter.
    """
    if not isinstance(value, str) or len(value) != 16:
        return False

    total = 0
    for i, ch in enumerate(value[:15]):
        table = CF_ODD_VALUES if i % 2 == 0 else CF_EVEN_VALUES
        v = table.get(ch)
        if v is None:
            return False
        total += v
    return value[15] == CF_CHECK_ALPHABET[total % 26]


def dni(value: object) -> bool:
    """Spanish DNI: 8 digits and a check letter indexed by number % 23."""
    if not isinstance(value, str) or len(value) != 9 or not is_digits(value[:8]):
        return False
    return value[8] == DNI_CHECK_ALPHABET[int(value[:8]) % 23]


def nhs(value: object) -> bool:
    """
    UK NHS number: 10 digits, weights 10..2 over the first nine.

    The check value is 11 - (sum % 11), where 11 maps to 0. A check value of 10
    can never be written as a single digit, so such numbers are never issued.
    """
    if not isinstance(value, str) or len(value) != 10 or not is_digits(value):
        return False

    check = 11 - weighted_sum(value[:9], NHS_WEIGHTS) % 11
    if check == 10:
        return False
    if check == 11:
        check = 0
    return int(value[9]) == check


def nino(value: object) -> bool:
    """
    UK National Insurance number, shape only: two letters, six digits, one letter.

    There is no published check character, so no checksum is applied.
    """
    return isinstance(value, str) and len(value) == 9 and _NINO_SHAPE.fullmatch(value) is not None
