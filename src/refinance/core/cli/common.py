"""Shared setup logic for CLI commands."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import click

REFINANCE_DIR = Path.home() / ".refinance"
CONFIG_PATH = REFINANCE_DIR / "config.yaml"


def load_config(config_file: str | None = None):
    """Load config from ``config_file`` or ~/.refinance/config.yaml."""
    from refinance.core.config import Config

    return Config(config_file=config_file or str(CONFIG_PATH))


def get_store(config):
    """SnapshotStore at the configured location."""
    from refinance.financial.snapshot import SnapshotStore

    return SnapshotStore(config.get_snapshot_path())


def parse_date(value: str | None) -> date | None:
    """Parse an ISO date option, or None when not given."""
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"Expected YYYY-MM-DD, got {value!r}")
