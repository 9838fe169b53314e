# sinks.py
# Solution sinks: callables handed each solution (a tuple of row names)

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

from dlx import StopSearch

Solution = Tuple[str, ...]


class PrintSink:
    def __init__(self, sort: bool = True):
        self.sort = sort

    def __call__(self, solution: Solution) -> None:
        names = sorted(solution) if self.sort else list(solution)
        print(names)


class CollectSink:
    def __init__(self):
        self.solutions: List[Solution] = []

    def __call__(self, solution: Solution) -> None:
        self.solutions.append(solution)


class CountSink:
    def __init__(self):
        self.count = 0

    def __call__(self, solution: Solution) -> None:
        self.count += 1


class CallbackSink:
    def __init__(self, fn: Callable[[Solution], object]):
        self.fn = fn

    def __call__(self, solution: Solution) -> None:
        self.fn(solution)


class LimitSink:
    """Forward to `inner` and stop the search once `limit` solutions were seen."""

    def __init__(self, limit: int, inner: Optional[Callable[[Solution], object]] = None):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self.inner = inner
        self.seen = 0

    def __call__(self, solution: Solution) -> None:
        self.seen += 1
        if self.inner is not None:
            self.inner(solution)
        if self.seen >= self.limit:
            raise StopSearch()
