# imageset/core/string_cache.py
from threading import Lock
from typing import Dict


class StringCache:
    """Thread-safe interner mapping string content to one shared instance.

    Metadata values such as URLs and series numbers repeat across thousands
    of planes, so extractors hand them to a cache created once per pipeline.
    Entries are never evicted.
    """

    def __init__(self):
        self._lock = Lock()
        self._cache: Dict[str, str] = {}

    def intern(self, value: str) -> str:
        """
        Return the canonical instance for ``value``.

        Args:
            value: Any string

        Returns:
            A string equal to ``value``; equal inputs always yield the
            identical object once the first insertion has completed.
        """
        canonical = self._cache.get(value)
        if canonical is not None:
            return canonical
        with self._lock:
            return self._cache.setdefault(value, value)

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, value: object) -> bool:
        return value in self._cache
