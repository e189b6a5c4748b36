"""Check-digit primitives, scheme registries and per-scheme validators."""

from .validators import (
    bbnr,
    cf,
    dni,
    ean,
    iban,
    imei,
    isbn,
    isbn10,
    isbn13,
    kvnr,
    nhs,
    nino,
    nir,
    pan,
    pid,
    sin,
    vsnr,
)

__all__ = [
    "bbnr",
    "cf",
    "dni",
    "ean",
    "iban",
    "imei",
    "isbn",
    "isbn10",
    "isbn13",
    "kvnr",
    "nhs",
    "nino",
    "nir",
    "pan",
    "pid",
    "sin",
    "vsnr",
]
