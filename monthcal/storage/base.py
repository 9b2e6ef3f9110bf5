"""Base protocol for key-value storage backends."""

from typing import Protocol


class KeyValueStorage(Protocol):
    """Protocol for string key-value storage (localStorage-like)."""

    def get_item(self, key: str) -> str | None:
        """Return the stored string, or None when the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a string under key. Raises StorageError on failure."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        ...
