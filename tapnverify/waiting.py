"""Waiting lists that order the markings still to be explored."""

from __future__ import annotations

import heapq
import itertools
import random
from abc import ABC, abstractmethod
from collections import deque
from typing import (
    Any,
    Callable,
    Deque,
    Generic,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

from .expressions import Query
from .normalization import normalize

T = TypeVar("T")

QueryWeight = Callable[[Query, Any], int]
"""Scores a marking against a (normalized) query; lower is explored first."""

_RAND_MAX = 2**31 - 1


class WaitingList(ABC, Generic[T]):
    """A collection of payloads waiting to be explored.

    ``add`` takes the marking a payload stands for, which some lists use
    to weigh the payload, and the payload itself.
    """

    @abstractmethod
    def add(self, marking: Any, payload: T) -> None:
        """Put ``payload`` on the list."""

    @abstractmethod
    def peek(self) -> T:
        """The payload ``pop`` would return, left in place."""

    @abstractmethod
    def pop(self) -> T:
        """Remove and return the next payload."""

    def flush_buffer(self) -> int:
        """Move buffered payloads onto the list proper; return how many moved."""
        moved = 0
        for payload in self._drain_buffer():
            self._push(payload)
            moved += 1
        return moved

    def _drain_buffer(self) -> Iterator[T]:
        """Yield buffered payloads in the order they go onto the list."""
        return iter(())

    def _push(self, payload: T) -> None:
        """Put a payload taken from the buffer onto the list proper."""
        self.add(None, payload)

    @abstractmethod
    def __len__(self) -> int:
        """Number of payloads waiting, buffered ones included."""

    def __str__(self) -> str:
        return str(len(self))


def _empty(kind: str) -> IndexError:
    return IndexError(f"{kind} from an empty waiting list")


class _WeightHeap(Generic[T]):
    """A min-heap on weight; equal weights come out in insertion order."""

    def __init__(self) -> None:
        self._heap: List[Tuple[int, int, T]] = []
        self._counter = itertools.count()

    def push(self, weight: int, item: T) -> None:
        heapq.heappush(self._heap, (weight, next(self._counter), item))

    def top(self) -> T:
        return self._heap[0][2]

    def pop(self) -> T:
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)


class StackWaitingList(WaitingList[T]):
    """Last in, first out: a depth-first order."""

    def __init__(self) -> None:
        self._stack: List[T] = []

    def add(self, marking: Any, payload: T) -> None:
        self._stack.append(payload)

    def peek(self) -> T:
        if not self._stack:
            raise _empty("peek")
        return self._stack[-1]

    def pop(self) -> T:
        if not self._stack:
            raise _empty("pop")
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)


class _BufferedStackWaitingList(StackWaitingList[T]):
    """A stack fed through a weighted buffer.

    On flushing, the buffered payloads are pushed lightest first, so among
    one batch the heaviest ends on top of the stack.
    """

    def __init__(self) -> None:
        super().__init__()
        self._buffer: _WeightHeap[T] = _WeightHeap()

    @abstractmethod
    def _weight(self, marking: Any) -> int:
        """Weight of a payload given the marking it stands for."""

    def add(self, marking: Any, payload: T) -> None:
        self._buffer.push(self._weight(marking), payload)

    def _drain_buffer(self) -> Iterator[T]:
        while len(self._buffer):
            yield self._buffer.pop()

    def _push(self, payload: T) -> None:
        self._stack.append(payload)

    def peek(self) -> T:
        self.flush_buffer()
        return super().peek()

    def pop(self) -> T:
        self.flush_buffer()
        return super().pop()

    def __len__(self) -> int:
        return len(self._stack) + len(self._buffer)


class _PriorityWaitingList(WaitingList[T]):
    """Lightest payload first."""

    def __init__(self) -> None:
        self._queue: _WeightHeap[T] = _WeightHeap()

    @abstractmethod
    def _weight(self, marking: Any, payload: T) -> int:
        """Weight of a payload."""

    def add(self, marking: Any, payload: T) -> None:
        self._queue.push(self._weight(marking, payload), payload)

    def peek(self) -> T:
        if not len(self._queue):
            raise _empty("peek")
        return self._queue.top()

    def pop(self) -> T:
        if not len(self._queue):
            raise _empty("pop")
        return self._queue.pop()

    def __len__(self) -> int:
        return len(self._queue)


class QueueWaitingList(WaitingList[T]):
    """First in, first out: a breadth-first order."""

    def __init__(self) -> None:
        self._queue: Deque[T] = deque()

    def add(self, marking: Any, payload: T) -> None:
        self._queue.append(payload)

    def peek(self) -> T:
        if not self._queue:
            raise _empty("peek")
        return self._queue[0]

    def pop(self) -> T:
        if not self._queue:
            raise _empty("pop")
        return self._queue.popleft()

    def __len__(self) -> int:
        return len(self._queue)


class HeuristicWaitingList(_PriorityWaitingList[T]):
    """Best-first: the marking with the lowest query weight comes out first."""

    def __init__(self, query: Query, weight: QueryWeight) -> None:
        super().__init__()
        self.query = normalize(query)
        self._query_weight = weight

    def _weight(self, marking: Any, payload: T) -> int:
        return self._query_weight(self.query, marking)


class HeuristicStackWaitingList(_BufferedStackWaitingList[T]):
    """Depth-first, with each batch of successors ordered by query weight."""

    def __init__(self, query: Query, weight: QueryWeight) -> None:
        super().__init__()
        self.query = normalize(query)
        self._query_weight = weight

    def _weight(self, marking: Any) -> int:
        return self._query_weight(self.query, marking)


class MinFirstWaitingList(_PriorityWaitingList[T]):
    """The payload with the smallest weight, e.g. total delay, comes out first."""

    def __init__(self, weight: Callable[[T], int], query: Optional[Query] = None):
        super().__init__()
        self.query = query
        self._payload_weight = weight

    def _weight(self, marking: Any, payload: T) -> int:
        return self._payload_weight(payload)


class RandomWaitingList(_PriorityWaitingList[T]):
    """Payloads come out in a random order."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__()
        self._rng = rng or random.Random()

    def _weight(self, marking: Any, payload: T) -> int:
        return self._rng.randint(0, _RAND_MAX)


class RandomStackWaitingList(_BufferedStackWaitingList[T]):
    """Depth-first, with each batch of successors shuffled."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        super().__init__()
        self._rng = rng or random.Random()

    def _weight(self, marking: Any) -> int:
        return self._rng.randint(0, _RAND_MAX)