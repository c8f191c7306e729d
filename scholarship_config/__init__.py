"""
scholarship_config -- single public entrypoint for fund configuration.

Responsibility:
    Provides the way to obtain a fund's configuration at runtime through
    ``get_active_config()``.  Fund definitions live as YAML files in
    ``scholarship_config/sets/`` (or a caller-supplied directory), one file
    per fund, named ``<fund_id>.yaml``.

Architecture position:
    This package sits above ``scholarship_kernel``.  The kernel MUST NEVER
    import from ``scholarship_config``; ``bridges`` translates a FundConfig
    into kernel objects.

Failure modes:
    - ``FundConfigNotFoundError`` -- no file for the requested fund_id.
    - ``InvalidFundConfigError`` -- missing or malformed fields.

Audit relevance:
    Every successful ``get_active_config()`` call emits a
    ``fund_config_loaded`` log entry with fund_id, owner, currency and
    checksum.
"""

from __future__ import annotations

from pathlib import Path

from scholarship_config.bridges import build_fund_state, build_ledger_mock
from scholarship_config.loader import load_fund_config
from scholarship_config.schema import FundConfig
from scholarship_kernel.logging_config import LogContext, get_logger

_logger = get_logger("config")

_DEFAULT_CONFIG_DIR = Path(__file__).parent / "sets"


def get_active_config(
    fund_id: str = "default",
    config_dir: Path | None = None,
) -> FundConfig:
    """Load and return the configuration for ``fund_id``."""
    directory = config_dir if config_dir is not None else _DEFAULT_CONFIG_DIR
    config = load_fund_config(fund_id, directory)

    with LogContext.bind(fund_id=config.fund_id):
        _logger.info(
            "fund_config_loaded",
            extra={
                "owner": config.owner,
                "currency": config.currency,
                "checksum": config.checksum,
            },
        )
    return config


__all__ = [
    "FundConfig",
    "build_fund_state",
    "build_ledger_mock",
    "get_active_config",
]
