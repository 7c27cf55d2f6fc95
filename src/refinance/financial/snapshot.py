"""Persistence of the two loan inputs as a single JSON snapshot.

One file, one logical key. The calculators never read or write it; the
CLI loads the snapshot, runs the comparison and saves edits back.
"""

from __future__ import annotations

import json
import os

from loguru import logger

from refinance.core.exceptions import FileIOError, SnapshotError
from refinance.core.utils.file_io import read_json, safe_write

from .models import LoanSnapshot


class SnapshotStore:
    """Save and load the existing/proposed loan pair."""

    def __init__(self, path: str):
        self.path = os.path.expanduser(path)

    def exists(self) -> bool:
        return os.path.exists(self.path)

    def save(self, snapshot: LoanSnapshot) -> None:
        try:
            safe_write(self.path, json.dumps(snapshot.to_dict(), indent=2))
        except FileIOError as e:
            raise SnapshotError(f"Cannot save loan snapshot to {self.path}: {e}") from e
        logger.debug(f"Saved loan snapshot to {self.path}")

    def load(self) -> LoanSnapshot | None:
        """Load the snapshot, or None when missing or unreadable."""
        data = read_json(self.path)
        if data is None:
            return None
        try:
            return LoanSnapshot.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            logger.error(f"Error parsing stored data in {self.path}: {e}")
            return None

    def clear(self) -> bool:
        """Delete the snapshot. Returns True if deleted, False if it didn't exist."""
        if not self.exists():
            return False
        try:
            os.remove(self.path)
        except OSError as e:
            raise SnapshotError(f"Cannot remove {self.path}: {e}") from e
        return True
