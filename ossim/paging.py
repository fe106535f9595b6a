"""Page replacement simulations: FIFO, least recently used and the future-frequency policy."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "PageEvent",
    "PagingResult",
    "fifo_replacement",
    "lru_replacement",
    "optimal_replacement",
]


@dataclass(frozen=True)
class PageEvent:
    """One page reference: whether it hit, the frames afterwards, and the page evicted."""

    page: int
    hit: bool
    frames: tuple[int, ...]
    evicted: Optional[int] = None


@dataclass(frozen=True)
class PagingResult:
    """The full trace of a page replacement run."""

    frame_count: int
    events: tuple[PageEvent, ...]

    @property
    def faults(self) -> int:
        return sum(not event.hit for event in self.events)

    @property
    def hits(self) -> int:
        return sum(event.hit for event in self.events)

    @property
    def frames(self) -> tuple[int, ...]:
        return self.events[-1].frames if self.events else ()


_Victim = Callable[[Sequence[int], int, Sequence[int]], int]


def _simulate(references: Iterable[int], frame_count: int, victim: _Victim) -> PagingResult:
    refs = list(references)
    if frame_count < 1:
        raise ValueError(f"frame count must be positive: {frame_count}")
    if frame_count > len(refs):
        raise ValueError(
            f"need at least {frame_count} references to fill the frames, got {len(refs)}"
        )
    frames: list[int] = []
    events = []
    for page in refs[:frame_count]:
        frames.append(page)
        events.append(PageEvent(page, False, tuple(frames)))
    for position, page in enumerate(refs[frame_count:], start=frame_count):
        if page in frames:
            events.append(PageEvent(page, True, tuple(frames)))
            continue
        slot = victim(frames, position, refs)
        evicted = frames[slot]
        frames[slot] = page
        events.append(PageEvent(page, False, tuple(frames), evicted))
    return PagingResult(frame_count, tuple(events))


def fifo_replacement(references: Iterable[int], frame_count: int) -> PagingResult:
    """First in, first out: frames are replaced in turn.

    The first ``frame_count`` references are loaded as faults without checking
    for repeats.
    """
    slots = itertools.cycle(range(max(frame_count, 1)))
    return _simulate(references, frame_count, lambda frames, position, refs: next(slots))


def _least_recent(frames: Sequence[int], position: int, refs: Sequence[int]) -> int:
    history = list(reversed(refs[:position]))

    def last_use(slot: int) -> int:
        return position - 1 - history.index(frames[slot])

    return min(reversed(range(len(frames))), key=last_use)


def _least_needed(frames: Sequence[int], position: int, refs: Sequence[int]) -> int:
    future = list(refs[position + 1 :])
    return min(reversed(range(len(frames))), key=lambda slot: future.count(frames[slot]))


def lru_replacement(references: Iterable[int], frame_count: int) -> PagingResult:
    """Least recently used: evict the page whose last reference is oldest."""
    return _simulate(references, frame_count, _least_recent)


def optimal_replacement(references: Iterable[int], frame_count: int) -> PagingResult:
    """Evict the page referenced the fewest times in the rest of the string.

    Ties go to the last frame.
    """
    return _simulate(references, frame_count, _least_needed)