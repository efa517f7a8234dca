"""In-memory key/value settings store shared by all instances."""

from __future__ import annotations


def _to_int32(value: int) -> int:
    return ((value + 0x80000000) & 0xFFFFFFFF) - 0x80000000


class Preferences:
    """Persistent-settings store kept in memory.

    Storage is shared by every instance; each instance may be opened read-only,
    in which case writes store nothing and report zero bytes written.
    """

    _map1: dict[str, int] = {}
    _map2: dict[str, int] = {}
    _map4: dict[str, int] = {}
    _map_bytes: dict[str, bytes] = {}

    def __init__(self) -> None:
        self._read_only = False
        self.namespace: str | None = None

    def begin(self, name: str, read_only: bool = False, partition_label: str | None = None) -> bool:
        """Open a namespace. Always succeeds."""
        self._read_only = read_only
        self.namespace = name
        return True

    def end(self) -> None:
        """Close the namespace."""
        self.namespace = None

    def __enter__(self) -> "Preferences":
        return self

    def __exit__(self, *exc_info) -> None:
        self.end()

    def clear(self) -> bool:
        """Remove every key."""
        for store in self._stores():
            store.clear()
        return True

    def remove(self, key: str) -> bool:
        """Remove a key from every value type."""
        for store in self._stores():
            store.pop(key, None)
        return True

    def _stores(self) -> tuple[dict, ...]:
        cls = Preferences
        return (cls._map1, cls._map2, cls._map4, cls._map_bytes)

    def put_uchar(self, key: str, value: int) -> int:
        if self._read_only:
            return 0
        Preferences._map1[key] = value & 0xFF
        return 1

    def put_ushort(self, key: str, value: int) -> int:
        if self._read_only:
            return 0
        Preferences._map2[key] = value & 0xFFFF
        return 2

    def put_int(self, key: str, value: int) -> int:
        if self._read_only:
            return 0
        Preferences._map4[key] = _to_int32(value)
        return 4

    def put_bool(self, key: str, value: bool) -> int:
        if self._read_only:
            return 0
        Preferences._map1[key] = 1 if value else 0
        return 1

    def put_bytes(self, key: str, value: bytes) -> int:
        if self._read_only:
            return 0
        data = bytes(value)
        Preferences._map_bytes[key] = data
        return len(data)

    def is_key(self, key: str) -> bool:
        return any(key in store for store in self._stores())

    def get_uchar(self, key: str, default: int = 0) -> int:
        return Preferences._map1.get(key, default)

    def get_ushort(self, key: str, default: int = 0) -> int:
        return Preferences._map2.get(key, default)

    def get_int(self, key: str, default: int = 0) -> int:
        return Preferences._map4.get(key, default)

    def get_bool(self, key: str, default: bool = False) -> bool:
        if key in Preferences._map1:
            return Preferences._map1[key] != 0
        return default

    def get_bytes_length(self, key: str) -> int:
        return len(Preferences._map_bytes.get(key, b""))

    def get_bytes(self, key: str, max_len: int | None = None) -> bytes:
        """Return at most ``max_len`` stored bytes (all if ``None``), or empty."""
        data = Preferences._map_bytes.get(key, b"")
        return data if max_len is None else data[:max_len]