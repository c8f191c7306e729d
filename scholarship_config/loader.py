"""
Configuration Loader (``scholarship_config.loader``).

Responsibility
--------------
Loads fund definition YAML files and parses them into
``scholarship_config.schema.FundConfig``.  Runtime callers go through
``scholarship_config.get_active_config()``.

Failure modes
-------------
* Missing YAML file  -> ``FundConfigNotFoundError``.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Missing or blank required field  -> ``InvalidFundConfigError``.
* Unknown currency code  -> ``InvalidFundConfigError``.
"""

from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any

import yaml

from scholarship_config.schema import FundConfig
from scholarship_kernel.domain.currency import CurrencyRegistry
from scholarship_kernel.exceptions import FundConfigNotFoundError, InvalidFundConfigError

_REQUIRED_FIELDS = ("fund_id", "owner")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def compute_checksum(data: dict[str, Any]) -> str:
    """SHA-256 over the canonical JSON form of a parsed fund definition."""
    canonical = json.dumps(data, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


def parse_fund_config(data: dict[str, Any]) -> FundConfig:
    """
    Parse a ``FundConfig`` from a dict.

    Postconditions:
        - ``currency`` is a normalized ISO 4217 code.
        - ``checksum`` identifies the source dict.
    """
    if not isinstance(data, dict):
        raise InvalidFundConfigError("<root>", f"expected a mapping, got {type(data).__name__}")

    for name in _REQUIRED_FIELDS:
        value = data.get(name)
        if not isinstance(value, str) or not value.strip():
            raise InvalidFundConfigError(name, "required non-empty string")

    try:
        currency = CurrencyRegistry.validate(data.get("currency", "USD"))
    except ValueError as e:
        raise InvalidFundConfigError("currency", str(e)) from e

    return FundConfig(
        fund_id=data["fund_id"].strip(),
        owner=data["owner"].strip(),
        currency=currency,
        name=str(data.get("name", "")),
        checksum=compute_checksum(data),
    )


def load_fund_config(fund_id: str, config_dir: Path) -> FundConfig:
    """Load ``<config_dir>/<fund_id>.yaml``."""
    path = config_dir / f"{fund_id}.yaml"
    if not path.is_file():
        raise FundConfigNotFoundError(fund_id, str(config_dir))
    config = parse_fund_config(load_yaml_file(path))
    if config.fund_id != fund_id:
        raise InvalidFundConfigError(
            "fund_id", f"file {path.name} declares fund_id {config.fund_id!r}"
        )
    return config
