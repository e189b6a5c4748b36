"""idcheck: check-digit validation for bank, book, trade-item and national ID numbers."""

from .checksum import (
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

__version__ = "0.1.0"

__all__ = [
    "__version__",
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
