from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError

# Kept in sync with the catalogue in engine/checker.py (tests assert it).
SUPPORTED_SCHEMES: List[str] = [
    "iban", "isbn", "isbn10", "isbn13", "ean", "pan", "imei", "sin",
    "vsnr", "bbnr", "nir", "cf", "dni", "nhs", "nino",
]


# ---- Which schemes `identify` tries ----
class SchemesConfig(BaseModel):
    enabled: List[str] = Field(default_factory=lambda: list(SUPPORTED_SCHEMES))

    @field_validator("enabled")
    @classmethod
    def _known(cls, v: List[str]) -> List[str]:
        unknown = [name for name in v if name not in SUPPORTED_SCHEMES]
        if unknown:
            raise ValueError(f"unknown or unsupported schemes: {', '.join(unknown)}")
        return v


# ---- Line handling for batch files ----
class BatchConfig(BaseModel):
    strip: bool = True       # trim surrounding whitespace from every line
    skip_blank: bool = True  # ignore empty lines instead of reporting them invalid


# ---- HTML report ----
class ReportConfig(BaseModel):
    show_valid: bool = True  # list valid rows too, not only the failures


# ---- Root config ----
class IdcheckConfig(BaseModel):
    schemes: SchemesConfig = Field(default_factory=SchemesConfig)
    batch: BatchConfig = Field(default_factory=BatchConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)


# ---- Loader ----
def load_config(path: Optional[Path]) -> IdcheckConfig:
    if not path:
        return IdcheckConfig()
    try:
        data = yaml.safe_load(Path(path).read_text()) or {}
        return IdcheckConfig(**data)
    except (OSError, yaml.YAMLError, ValidationError, TypeError) as e:
        raise ConfigError(f"Invalid config {path}: {e}") from e
