"""CPU scheduling simulations: FCFS, SJF, SRTF, round robin and a priority queue scheduler."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Optional

__all__ = [
    "Process",
    "ProcessResult",
    "random_workload",
    "random_fifo_workload",
    "fcfs",
    "sjf",
    "srtf",
    "round_robin",
    "mlq",
]


@dataclass(frozen=True)
class Process:
    """A process with its arrival time, CPU burst and priority level."""

    pid: int
    arrival: int
    burst: int
    priority: int = 1

    def __post_init__(self) -> None:
        if self.arrival < 0:
            raise ValueError(f"arrival time must not be negative: {self.arrival}")
        if self.burst < 0:
            raise ValueError(f"burst time must not be negative: {self.burst}")
        if self.priority < 0:
            raise ValueError(f"priority must not be negative: {self.priority}")


@dataclass(frozen=True)
class ProcessResult:
    """The outcome of scheduling one process."""

    process: Process
    completion: int

    @property
    def turnaround(self) -> int:
        return self.completion - self.process.arrival

    @property
    def waiting(self) -> int:
        return self.turnaround - self.process.burst


def _rng_or_default(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def random_workload(
    count: int,
    max_arrival: int = 17,
    max_burst: int = 97,
    rng: Optional[random.Random] = None,
) -> list[Process]:
    """Draw ``count`` processes; the first arrives at time 0.

    Arrivals lie in ``[0, max_arrival)``, bursts in ``[0, max_burst)`` and
    priorities in ``1..3``.
    """
    if count < 0:
        raise ValueError(f"process count must not be negative: {count}")
    if max_arrival <= 0 or max_burst <= 0:
        raise ValueError("max_arrival and max_burst must be positive")
    rng = _rng_or_default(rng)
    processes = []
    for pid in range(1, count + 1):
        arrival = 0 if pid == 1 else rng.randrange(max_arrival)
        burst = rng.randrange(max_burst)
        processes.append(Process(pid, arrival, burst, rng.randint(1, 3)))
    return processes


def random_fifo_workload(
    count: int,
    max_value: int = 97,
    rng: Optional[random.Random] = None,
) -> list[Process]:
    """Draw ``count`` processes with strictly increasing arrival times.

    The first arrives at time 0; later arrivals and all bursts lie in
    ``[0, max_value)``. Raises ``ValueError`` when no larger arrival is left.
    """
    if count < 0:
        raise ValueError(f"process count must not be negative: {count}")
    if max_value <= 0:
        raise ValueError("max_value must be positive")
    rng = _rng_or_default(rng)
    processes: list[Process] = []
    for pid in range(1, count + 1):
        if not processes:
            arrival = 0
        else:
            previous = processes[-1].arrival
            if previous + 1 >= max_value:
                raise ValueError(
                    f"cannot draw {count} strictly increasing arrivals below {max_value}"
                )
            arrival = rng.randrange(previous + 1, max_value)
        processes.append(Process(pid, arrival, rng.randrange(max_value)))
    return processes


def _collect(processes: Sequence[Process], completion: dict[int, int]) -> list[ProcessResult]:
    return [ProcessResult(p, completion[i]) for i, p in enumerate(processes)]


def fcfs(processes: Iterable[Process]) -> list[ProcessResult]:
    """Run processes to completion in the order given."""
    results = []
    clock = 0
    for process in processes:
        clock = max(clock, process.arrival) + process.burst
        results.append(ProcessResult(process, clock))
    return results


def sjf(processes: Iterable[Process]) -> list[ProcessResult]:
    """Non-preemptive shortest job first.

    The first process runs first; afterwards the ready process with the
    shortest burst runs, the later one in the list winning a tie.
    """
    procs = list(processes)
    if not procs:
        return []
    first = procs[0]
    clock = first.arrival + first.burst
    completion = {0: clock}
    pending = set(range(1, len(procs)))
    while pending:
        ready = [i for i in sorted(pending) if procs[i].arrival <= clock]
        if not ready:
            clock = min(procs[i].arrival for i in pending)
            continue
        chosen = min(reversed(ready), key=lambda i: procs[i].burst)
        clock += procs[chosen].burst
        completion[chosen] = clock
        pending.remove(chosen)
    return _collect(procs, completion)


_Picker = Callable[[Sequence[Process], Sequence[int], int], Optional[int]]


def _run_ticks(
    procs: Sequence[Process],
    pick: _Picker,
    warm_start: bool,
) -> list[ProcessResult]:
    """Drive a one-unit-per-tick preemptive scheduler."""
    remaining = [p.burst for p in procs]
    completion = {i: p.arrival for i, p in enumerate(procs) if p.burst == 0}
    clock = 0
    if warm_start and procs and procs[0].burst > 0:
        clock = procs[0].arrival + 1
        remaining[0] -= 1
        if remaining[0] == 0:
            completion[0] = clock
    while len(completion) < len(procs):
        chosen = pick(procs, remaining, clock)
        if chosen is None:
            clock = max(
                clock + 1,
                min(p.arrival for i, p in enumerate(procs) if remaining[i] > 0),
            )
            continue
        remaining[chosen] -= 1
        clock += 1
        if remaining[chosen] == 0:
            completion[chosen] = clock
    return _collect(procs, completion)


def _shortest_remaining(
    procs: Sequence[Process], remaining: Sequence[int], clock: int
) -> Optional[int]:
    ready = [i for i, p in enumerate(procs) if p.arrival <= clock and remaining[i] > 0]
    return min(ready, key=lambda i: remaining[i]) if ready else None


def _priority_shortest(
    procs: Sequence[Process], remaining: Sequence[int], clock: int
) -> Optional[int]:
    chosen: Optional[int] = None
    best = float("inf")
    level = 0
    for i, process in enumerate(procs):
        if process.priority >= level and process.arrival <= clock and 0 < remaining[i] < best:
            chosen, best, level = i, remaining[i], process.priority
    return chosen


def srtf(processes: Iterable[Process]) -> list[ProcessResult]:
    """Preemptive shortest remaining time first, one time unit per tick.

    The first process always gets the first tick; afterwards the ready process
    with the least remaining time runs, the earlier one in the list winning a tie.
    """
    return _run_ticks(list(processes), _shortest_remaining, warm_start=True)


def round_robin(processes: Iterable[Process], quantum: int = 20) -> list[ProcessResult]:
    """Round robin: sweep the list, giving each ready process up to ``quantum`` units."""
    if quantum <= 0:
        raise ValueError(f"quantum must be positive: {quantum}")
    procs = list(processes)
    remaining = [p.burst for p in procs]
    completion: dict[int, int] = {}
    clock = 0
    while len(completion) < len(procs):
        progressed = False
        for i, process in enumerate(procs):
            if i in completion or process.arrival > clock:
                continue
            progressed = True
            if remaining[i] > quantum:
                remaining[i] -= quantum
                clock += quantum
            else:
                clock += remaining[i]
                remaining[i] = 0
                completion[i] = clock
        if not progressed:
            clock = min(p.arrival for i, p in enumerate(procs) if i not in completion)
    return _collect(procs, completion)


def mlq(processes: Iterable[Process]) -> list[ProcessResult]:
    """Priority-level scheduler, one time unit per tick.

    Each tick scans the list in order and takes a ready process when its
    priority is at least that of the current pick and its remaining time is
    strictly shorter.
    """
    return _run_ticks(list(processes), _priority_shortest, warm_start=False)