"""In-memory key-value storage."""

from monthcal.exceptions import StorageQuotaError


class MemoryStorage:
    """Dict-backed storage with an optional size quota.

    The quota counts the UTF-8 bytes of all keys and values, which is
    enough to exercise the quota-exceeded path of the event store.
    """

    def __init__(self, quota_bytes: int | None = None):
        self._items: dict[str, str] = {}
        self.quota_bytes = quota_bytes

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self.quota_bytes is not None:
            others = sum(
                len(k.encode("utf-8")) + len(v.encode("utf-8"))
                for k, v in self._items.items()
                if k != key
            )
            needed = others + len(key.encode("utf-8")) + len(value.encode("utf-8"))
            if needed > self.quota_bytes:
                raise StorageQuotaError(
                    f"Storage quota exceeded ({needed} > {self.quota_bytes} bytes)"
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def __len__(self) -> int:
        return len(self._items)
