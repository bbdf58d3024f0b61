"""Legacy store manager factory.

Provides get_legacy_store_manager() / set_legacy_store_manager() to swap implementations:
- FakeLegacyStoreManager for development and testing (default)
- FileLegacyStoreManager writing to the drop directory in LEGACY_STORE_DIR
"""

import os

from fulfilment.stores.legacy.port import LegacyStoreManager, LegacyStoreRecord

_current_manager: LegacyStoreManager | None = None


def get_legacy_store_manager() -> LegacyStoreManager:
    """Return the configured legacy store manager (singleton).

    Selected via the LEGACY_STORE_MANAGER environment variable: "fake" or "file".
    """
    global _current_manager
    if _current_manager is None:
        adapter = os.environ.get("LEGACY_STORE_MANAGER", "fake")
        if adapter == "fake":
            from fulfilment.stores.legacy.fake_adapter import FakeLegacyStoreManager

            _current_manager = FakeLegacyStoreManager()
        elif adapter == "file":
            from fulfilment.stores.legacy.file_adapter import FileLegacyStoreManager

            _current_manager = FileLegacyStoreManager(os.environ.get("LEGACY_STORE_DIR", "legacy-stores"))
        else:
            raise ValueError(f"Unknown legacy store manager: {adapter}")
    return _current_manager


def set_legacy_store_manager(manager: LegacyStoreManager) -> None:
    """Override the active legacy store manager (useful for tests)."""
    global _current_manager
    _current_manager = manager


def reset_legacy_store_manager() -> None:
    """Reset to the default legacy store manager."""
    global _current_manager
    _current_manager = None


__all__ = [
    "LegacyStoreManager",
    "LegacyStoreRecord",
    "get_legacy_store_manager",
    "reset_legacy_store_manager",
    "set_legacy_store_manager",
]
