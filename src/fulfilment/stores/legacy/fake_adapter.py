"""Fake legacy store manager — records calls for testing and development.

Configurable success/failure behaviour for integration testing.
"""

from fulfilment.stores.legacy.port import LegacyStoreManager, LegacyStoreRecord


class LegacySyncError(Exception):
    """The legacy store manager refused or failed a call."""


class FakeLegacyStoreManager(LegacyStoreManager):
    """Fake legacy store manager that always succeeds by default."""

    def __init__(self):
        self.should_succeed = True
        self.failure_reason = "Legacy store manager unavailable"
        self.created: list[LegacyStoreRecord] = []
        self.updated: list[LegacyStoreRecord] = []

    def configure(self, should_succeed: bool = True, failure_reason: str = "Legacy store manager unavailable"):
        """Configure the fake behaviour for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def create_store(self, store: LegacyStoreRecord) -> None:
        if not self.should_succeed:
            raise LegacySyncError(self.failure_reason)
        self.created.append(store)

    def update_store(self, store: LegacyStoreRecord) -> None:
        if not self.should_succeed:
            raise LegacySyncError(self.failure_reason)
        self.updated.append(store)
