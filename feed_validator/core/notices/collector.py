"""
Notice collector: the output stream every builder and rule emits into.
"""

import threading
from collections import Counter
from collections.abc import Iterable

from .base_notice import Notice, Severity


class NoticeCollector:
    """
    Thread-safe, append-only sequence of notices in discovery order.

    Notices are never deduplicated or rewritten; each add() appends one
    immutable notice under the lock.
    """

    def __init__(self):
        self._notices: list[Notice] = []
        self._lock = threading.Lock()

    def add(self, notice: Notice) -> None:
        with self._lock:
            self._notices.append(notice)

    def extend(self, notices: Iterable[Notice]) -> None:
        """Append several notices, keeping their relative order."""
        batch = list(notices)
        with self._lock:
            self._notices.extend(batch)

    @property
    def notices(self) -> tuple[Notice, ...]:
        with self._lock:
            return tuple(self._notices)

    def has_errors(self) -> bool:
        return any(n.severity is Severity.ERROR for n in self.notices)

    def by_severity(self, severity: Severity) -> list[Notice]:
        return [n for n in self.notices if n.severity is severity]

    def count_by_code(self) -> dict[str, int]:
        return dict(Counter(n.code for n in self.notices))

    def count_by_severity(self) -> dict[str, int]:
        return dict(Counter(n.severity.value for n in self.notices))

    def __len__(self) -> int:
        with self._lock:
            return len(self._notices)
