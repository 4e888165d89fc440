import threading


class FileIDGenerator:
    """Hands out 1, 2, 3, ... exactly once each, safe across threads."""

    def __init__(self):
        self._lock = threading.Lock()
        self._last_id = 0

    def next_id(self) -> int:
        with self._lock:
            self._last_id += 1
            return self._last_id
