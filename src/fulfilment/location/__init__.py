"""Location directory factory.

Provides get_location_directory() / set_location_directory() to swap implementations:
- StaticLocationDirectory with the built-in catalogue (default)
- any LocationDirectory injected by tests or tooling
"""

import os

from fulfilment.location.port import Location, LocationDirectory

_current_directory: LocationDirectory | None = None


def get_location_directory() -> LocationDirectory:
    """Return the configured location directory (singleton).

    Uses the static catalogue by default. Select another adapter via the
    LOCATION_DIRECTORY environment variable.
    """
    global _current_directory
    if _current_directory is None:
        adapter = os.environ.get("LOCATION_DIRECTORY", "static")
        if adapter == "static":
            from fulfilment.location.static_adapter import StaticLocationDirectory

            _current_directory = StaticLocationDirectory()
        else:
            raise ValueError(f"Unknown location directory: {adapter}")
    return _current_directory


def set_location_directory(directory: LocationDirectory) -> None:
    """Override the active location directory (useful for tests)."""
    global _current_directory
    _current_directory = directory


def reset_location_directory() -> None:
    """Reset to the default location directory."""
    global _current_directory
    _current_directory = None


__all__ = [
    "Location",
    "LocationDirectory",
    "get_location_directory",
    "reset_location_directory",
    "set_location_directory",
]
