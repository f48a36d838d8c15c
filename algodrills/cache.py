"""Least-recently-used cache with a fixed capacity."""

from collections import OrderedDict


class LRUCache:
    """Maps keys to values, evicting the least recently used entry when full."""

    def __init__(self, capacity):
        self.capacity = capacity
        self._entries = OrderedDict()

    def get(self, key):
        """Return the value for ``key`` and mark it most recently used, or -1 if absent."""
        try:
            self._entries.move_to_end(key)
        except KeyError:
            return -1
        return self._entries[key]

    def put(self, key, value):
        """Store ``value`` under ``key``, evicting the least recently used entry if full."""
        if key in self._entries:
            self._entries[key] = value
            self._entries.move_to_end(key)
            return
        if len(self._entries) == self.capacity:
            if not self._entries:
                raise ValueError("cache has no capacity")
            self._entries.popitem(last=False)
        self._entries[key] = value