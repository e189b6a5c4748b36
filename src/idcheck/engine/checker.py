"""
Scheme catalogue and the checker that runs validators by name.

The validators themselves only answer True/False. This layer adds what callers
around them need: a name -> validator lookup, a three-way status that keeps
"not implemented" apart from "invalid", and batch checks over files.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterable, List, Mapping, Tuple

import structlog

from ..checksum import validators as v
from ..checksum.registries import IBAN_LENGTHS
from ..config import IdcheckConfig
from ..exceptions import UnknownSchemeError

log = structlog.get_logger()


@dataclass(frozen=True)
class Scheme:
    """
    Catalogue entry for one identifier scheme.

    Attributes:
        name:      Short name used on the command line and in config files.
        title:     Human-readable description.
        validate:  The validator function.
        lengths:   Allowed lengths; empty when the length is variable.
        supported: False for schemes that are named but have no check rule.
    """
    name: str
    title: str
    validate: Callable[[object], bool]
    lengths: Tuple[int, ...] = ()
    supported: bool = True


_IBAN_LENGTH_SET = tuple(sorted(set(IBAN_LENGTHS.values())))

_CATALOGUE: List[Scheme] = [
    Scheme("iban", "International Bank Account Number", v.iban, _IBAN_LENGTH_SET),
    Scheme("isbn", "International Standard Book Number", v.isbn, (10, 13)),
    Scheme("isbn10", "ISBN-10", v.isbn10, (10,)),
    Scheme("isbn13", "ISBN-13", v.isbn13, (13,)),
    Scheme("ean", "International Article Number (EAN/GTIN)", v.ean, (8, 13, 18)),
    Scheme("pan", "Payment card number", v.pan),
    Scheme("imei", "International Mobile Equipment Identity", v.imei, (15,)),
    Scheme("sin", "Canadian Social Insurance Number", v.sin, (9,)),
    Scheme("vsnr", "German pension insurance number", v.vsnr, (12,)),
    Scheme("bbnr", "German establishment number (Betriebsnummer)", v.bbnr, (8,)),
    Scheme("nir", "French personal registry number (NIR)", v.nir, (15,)),
    Scheme("cf", "Italian tax code (codice fiscale)", v.cf, (16,)),
    Scheme("dni", "Spanish national identity number (DNI)", v.dni, (9,)),
    Scheme("nhs", "UK NHS number", v.nhs, (10,)),
    Scheme("nino", "UK National Insurance number", v.nino, (9,)),
    Scheme("kvnr", "German health insurance number", v.kvnr, supported=False),
    Scheme("pid", "German identity card number", v.pid, supported=False),
]

SCHEMES: Mapping[str, Scheme] = MappingProxyType({s.name: s for s in _CATALOGUE})


def get_scheme(name: str) -> Scheme:
    scheme = SCHEMES.get(name)
    if scheme is None:
        log.warning("scheme_unknown", scheme=name)
        raise UnknownSchemeError(name)
    return scheme


class Status(str, Enum):
    valid = "valid"
    invalid = "invalid"
    unsupported = "unsupported"


@dataclass
class CheckResult:
    scheme: str
    value: str
    status: Status
    line: int = 0  # 1-based source line in batch checks, 0 otherwise

    @property
    def ok(self) -> bool:
        return self.status is Status.valid


@dataclass
class BatchResult:
    scheme: str
    results: List[CheckResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def valid(self) -> int:
        return sum(1 for r in self.results if r.ok)

    @property
    def invalid(self) -> int:
        return self.total - self.valid


class Checker:
    """
    Run validators by scheme name, honouring the config.

    The checker holds no per-call state; the same instance can be shared.
    """

    def __init__(self, cfg: IdcheckConfig | None = None) -> None:
        self.cfg = cfg or IdcheckConfig()

    # ---------------- Public API ----------------

    def check(self, scheme: str, value: str) -> CheckResult:
        """Validate one value. Unknown names raise `UnknownSchemeError`."""
        s = get_scheme(scheme)
        if not s.supported:
            return CheckResult(s.name, value, Status.unsupported)
        status = Status.valid if s.validate(value) else Status.invalid
        return CheckResult(s.name, value, status)

    def identify(self, value: str) -> List[str]:
        """Names of the enabled schemes that accept `value`, in catalogue order."""
        enabled = set(self.cfg.schemes.enabled)
        return [
            s.name for s in _CATALOGUE
            if s.supported and s.name in enabled and s.validate(value)
        ]

    def check_lines(self, scheme: str, lines: Iterable[str]) -> BatchResult:
        """Check one identifier per line."""
        s = get_scheme(scheme)
        batch = BatchResult(scheme=s.name)
        for lineno, line in enumerate(lines, 1):
            value = line.rstrip("\r\n")
            if self.cfg.batch.strip:
                value = value.strip()
            if self.cfg.batch.skip_blank and not value.strip():
                continue
            result = self.check(s.name, value)
            result.line = lineno
            batch.results.append(result)
        log.info("batch_checked", scheme=s.name, total=batch.total, valid=batch.valid)
        return batch

    def check_path(self, scheme: str, path: Path) -> BatchResult:
        """Check a UTF-8 text file with one identifier per line."""
        with Path(path).open(encoding="utf-8") as fh:
            return self.check_lines(scheme, fh)
