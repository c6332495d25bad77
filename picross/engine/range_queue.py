"""Bookkeeping of filled runs met while splitting a window."""

from __future__ import annotations

import heapq
from collections import deque
from typing import Deque, Iterator, List, Optional, Tuple

from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Capture = Tuple[int, int]


class RangeQueue:
    """FIFO of maximal ``(start, end)`` runs of filled indices.

    Indices are relative to the slice being scanned and arrive in strictly
    increasing order, so the records stay sorted and disjoint.
    """

    def __init__(self) -> None:
        self._queue: Deque[Tuple[int, int]] = deque()

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        return iter(self._queue)

    def front(self) -> Optional[Tuple[int, int]]:
        return self._queue[0] if self._queue else None

    def back(self) -> Optional[Tuple[int, int]]:
        return self._queue[-1] if self._queue else None

    def pop(self) -> Tuple[int, int]:
        return self._queue.popleft()

    def clear(self) -> None:
        self._queue.clear()

    def extend(self, index: int) -> None:
        """Record a filled index, growing the last run when contiguous."""

        if self._queue:
            start, end = self._queue[-1]
            if index == end + 1:
                self._queue[-1] = (start, index)
                return
            if index <= end:
                raise ValueError(
                    f"Filled index {index} does not follow the last run ending at {end}"
                )
        self._queue.append((index, index))

    def blocked_starts(self, hint: int) -> Iterator[Tuple[int, int]]:
        """Yield the run starts ruled out by the queued runs, ordered by start.

        A run of length ``hint`` cannot start right after a filled cell, nor
        end right before one, without merging into it. Each record therefore
        rules out two start ranges.
        """

        ending_before = ((start - hint, end - hint) for start, end in self._queue)
        starting_after = ((start + 1, end + 1) for start, end in self._queue)
        return heapq.merge(ending_before, starting_after)

    def harvest(
        self,
        hint: int,
        current_min: int,
        boundary: int,
        pop_all: bool,
    ) -> Tuple[List[Capture], int]:
        """Emit the sub-windows settled once the scan reaches ``boundary``.

        Args:
            hint: Length of the run being placed.
            current_min: First run start that has not been decided yet.
            boundary: Index of the cell that closes the open span. With
                ``pop_all`` it is a wall (an empty cell or the end of the
                slice); otherwise it is a filled cell that is about to be
                recorded.
            pop_all: Drop every record once harvested.

        Returns:
            The captured ``(offset, length)`` pairs, relative to the scanned
            slice and in scan order, plus the updated ``current_min``.
        """

        limit = boundary - hint if pop_all else boundary - hint - 1
        captures: List[Capture] = []
        cursor = current_min
        for low, high in self.blocked_starts(hint):
            if low > limit:
                break
            if low > cursor:
                captures.append((cursor, low - 1 - cursor + hint))
            cursor = max(cursor, high + 1)
        if cursor <= limit:
            captures.append((cursor, limit - cursor + hint))

        if pop_all:
            self._queue.clear()
            new_min = boundary + 1
        else:
            new_min = max(current_min, boundary - hint + 1)
            while self._queue and self._queue[0][1] + 1 < new_min:
                self._queue.popleft()

        LOGGER.debug(
            "harvest hint=%d min=%d boundary=%d pop_all=%s -> %s, min=%d",
            hint,
            current_min,
            boundary,
            pop_all,
            captures,
            new_min,
        )
        return captures, new_min
