"""File-drop legacy store manager.

The legacy system picks up store changes from a drop directory. Each call
appends one JSON line to `stores.jsonl` in that directory.
"""

import json
from dataclasses import asdict
from datetime import UTC, datetime
from pathlib import Path

from fulfilment.stores.legacy.port import LegacyStoreManager, LegacyStoreRecord


class FileLegacyStoreManager(LegacyStoreManager):
    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
        self.path = self.directory / "stores.jsonl"

    def create_store(self, store: LegacyStoreRecord) -> None:
        self._write("create", store)

    def update_store(self, store: LegacyStoreRecord) -> None:
        self._write("update", store)

    def _write(self, action: str, store: LegacyStoreRecord) -> None:
        line = json.dumps({"action": action, "at": datetime.now(UTC).isoformat(), **asdict(store)})
        with self.path.open("a", encoding="utf-8") as fh:
            fh.write(line + "\n")
