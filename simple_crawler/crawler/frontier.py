"""FIFO frontier with the visited set it deduplicates against."""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Set


class Frontier:
    """Breadth-first queue of URLs awaiting fetch.

    - URLs are marked visited when they are enqueued, not when fetched.
    - The visited set only grows; nothing is ever removed from it.
    - ``push`` does the membership check and the insert in one step.
    """

    def __init__(self, seeds: Iterable[str] = ()) -> None:
        self._queue: Deque[str] = deque()
        self._visited: Set[str] = set()
        for url in seeds:
            self.push(url)

    def push(self, url: str) -> bool:
        """Append *url* unless it was seen before. Returns True if added."""
        if url in self._visited:
            return False
        self._visited.add(url)
        self._queue.append(url)
        return True

    def mark_visited(self, url: str) -> None:
        self._visited.add(url)

    def pop(self) -> str:
        return self._queue.popleft()

    @property
    def visited(self) -> frozenset[str]:
        return frozenset(self._visited)

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)
