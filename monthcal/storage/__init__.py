"""Key-value storage backends for the event store."""

from monthcal.storage.base import KeyValueStorage
from monthcal.storage.file_storage import FileStorage
from monthcal.storage.memory_storage import MemoryStorage

__all__ = ["FileStorage", "KeyValueStorage", "MemoryStorage"]
