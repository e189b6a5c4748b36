"""
Static per-scheme parameters.

Everything here is built once at import time and exposed read-only
(`MappingProxyType`, tuples, strings). Lookups use `.get()`; a miss means the
format is unsupported and the calling validator answers False.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

# ---- IBAN ------------------------------------------------------------------------------

# Country code -> total IBAN length. IBAN registry release 95 (July 2023).
IBAN_LENGTHS: Mapping[str, int] = MappingProxyType({
    "AD": 24, "AE": 23, "AL": 28, "AT": 20, "AZ": 28, "BA": 20, "BE": 16, "BG": 22, "BH": 22,
    "BI": 27, "BR": 29, "BY": 28, "CH": 21, "CR": 22, "CY": 28, "CZ": 24, "DE": 22, "DJ": 27,
    "DK": 18, "DO": 28, "EE": 20, "EG": 29, "ES": 24, "FI": 18, "FK": 18, "FO": 18, "FR": 27,
    "GB": 22, "GE": 22, "GI": 23, "GL": 18, "GR": 27, "GT": 28, "HR": 21, "HU": 28, "IE": 22,
    "IL": 23, "IQ": 23, "IS": 26, "IT": 27, "JO": 30, "KW": 30, "KZ": 20, "LB": 28, "LC": 32,
    "LI": 21, "LT": 20, "LU": 20, "LV": 21, "LY": 25, "MC": 27, "MD": 24, "ME": 22, "MK": 19,
    "MN": 20, "MR": 27, "MT": 31, "MU": 30, "NI": 28, "NL": 18, "NO": 15, "PK": 24, "PL": 28,
    "PS": 29, "PT": 25, "QA": 29, "RO": 24, "RS": 22, "RU": 33, "SA": 24, "SC": 31, "SD": 18,
    "SE": 24, "SI": 19, "SK": 24, "SM": 27, "SO": 23, "ST": 25, "SV": 28, "TL": 23, "TN": 24,
    "TR": 26, "UA": 29, "VA": 22, "VG": 24, "XK": 20,
})

# ---- Article numbers (EAN / GTIN) ------------------------------------------------------

# Total length -> weights for every position except the trailing check digit.
EAN_WEIGHTS: Mapping[int, Tuple[int, ...]] = MappingProxyType({
    8: (3, 1) * 3 + (3,),
    13: (1, 3) * 6,
    18: (3, 1) * 8 + (3,),
})

ISBN13_WEIGHTS: Tuple[int, ...] = (1, 3) * 6

# ---- German social insurance -----------------------------------------------------------

# Rentenversicherungsnummer, after the letter is expanded to two digits.
VSNR_WEIGHTS: Tuple[int, ...] = (2, 1, 2, 5, 7, 1, 2, 1, 2, 1, 2, 1)

# Betriebsnummer, first seven digits.
BBNR_WEIGHTS: Tuple[int, ...] = (1, 2, 1, 2, 1, 2, 1)

# ---- UK NHS number ---------------------------------------------------------------------

NHS_WEIGHTS: Tuple[int, ...] = tuple(range(10, 1, -1))

# ---- Italian codice fiscale ------------------------------------------------------------

# Values for characters at odd positions (1st, 3rd, ...), i.e. even 0-based indices.
CF_ODD_VALUES: Mapping[str, int] = MappingProxyType({
    "0": 1, "1": 0, "2": 5, "3": 7, "4": 9, "5": 13, "6": 15, "7": 17, "8": 19,
    "9": 21, "A": 1, "B": 0, "C": 5, "D": 7, "E": 9, "F": 13, "G": 15, "H": 17,
    "I": 19, "J": 21, "K": 2, "L": 4, "M": 18, "N": 20, "O": 11, "P": 3, "Q": 6,
    "R": 8, "S": 12, "T": 14, "U": 16, "V": 10, "W": 22, "X": 25, "Y": 24, "Z": 23,
})

# Values for characters at even positions (2nd, 4th, ...), i.e. odd 0-based indices.
CF_EVEN_VALUES: Mapping[str, int] = MappingProxyType({
    **{str(d): d for d in range(10)},
    **{chr(ord("A") + i): i for i in range(26)},
})

CF_CHECK_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# ---- Spanish DNI -----------------------------------------------------------------------

DNI_CHECK_ALPHABET = "TRWAGMYFPDXBNJZSQVHLCKE"
