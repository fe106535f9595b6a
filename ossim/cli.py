"""Command line front end for the scheduling and page replacement simulations."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Callable, Iterable, Sequence
from typing import Optional

from ossim.paging import (
    PagingResult,
    fifo_replacement,
    lru_replacement,
    optimal_replacement,
)
from ossim.scheduling import (
    Process,
    ProcessResult,
    fcfs,
    mlq,
    random_fifo_workload,
    random_workload,
    round_robin,
    sjf,
    srtf,
)

__all__ = ["format_schedule", "format_paging", "main"]

_DEFAULT_REFERENCES = (7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 3)

_PAGING: dict[str, Callable[[Iterable[int], int], PagingResult]] = {
    "fifo": fifo_replacement,
    "lru": lru_replacement,
    "optimal": optimal_replacement,
}

_SCHEDULERS = ("fcfs", "sjf", "srtf", "rr", "mlq")


def _format_process(index: int, result: ProcessResult, with_priority: bool) -> str:
    process = result.process
    lines = [
        f"process : {index}",
        f" ARRIVAL TIME: {process.arrival}",
        f" BURST TIME: {process.burst}",
        f" COMPLETING TIME: {result.completion}",
        f" TURNAROUND TIME: {result.turnaround}",
        f" WAITING TIME: {result.waiting}",
    ]
    if with_priority:
        lines.append(f" PRIORITY: {process.priority}")
    return "\n".join(lines)


def _render_schedule(results: Iterable[ProcessResult], with_priority: bool) -> str:
    return "\n".join(
        _format_process(index, result, with_priority)
        for index, result in enumerate(results, start=1)
    )


def format_schedule(results: Iterable[ProcessResult]) -> str:
    """Render one block of times per process, numbered from 1."""
    return _render_schedule(results, with_priority=False)


def format_paging(result: PagingResult) -> str:
    """Render the hit/fault trace of a paging run and the total fault count."""
    lines = []
    for position, event in enumerate(result.events):
        lines.append(f"{event.page}: {'HIT' if event.hit else 'FAULT'}")
        if position < result.frame_count:
            continue
        if event.evicted is not None:
            lines.append(f"the page being replaced is: {event.evicted}")
        lines.append("the new frame is " + " ".join(str(page) for page in event.frames))
    lines.append(f"The total number of page faults : {result.faults}")
    return "\n".join(lines)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ossim", description="Simulate CPU scheduling and page replacement."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    schedule = commands.add_parser("schedule", help="schedule a random workload")
    schedule.add_argument("algorithm", choices=_SCHEDULERS)
    schedule.add_argument("count", type=int, help="number of processes")
    schedule.add_argument("--seed", type=int, default=None, help="random seed")
    schedule.add_argument(
        "--quantum", type=int, default=20, help="time quantum for round robin"
    )

    page = commands.add_parser("page", help="replay a page reference string")
    page.add_argument("algorithm", choices=sorted(_PAGING))
    page.add_argument("--frames", type=int, required=True, help="number of page frames")
    page.add_argument(
        "references",
        type=int,
        nargs="*",
        help="page references (a built-in string is used when none are given)",
    )
    return parser


def _run_schedule(args: argparse.Namespace) -> str:
    rng = random.Random(args.seed)
    algorithm = args.algorithm
    workload: list[Process]
    if algorithm == "fcfs":
        workload = random_fifo_workload(args.count, 97, rng)
        return format_schedule(fcfs(workload))
    if algorithm == "sjf":
        workload = random_workload(args.count, 17, 97, rng)
        return format_schedule(sjf(workload))
    if algorithm == "srtf":
        workload = random_workload(args.count, 17, 17, rng)
        return format_schedule(srtf(workload))
    if algorithm == "rr":
        if args.quantum <= 0:
            raise ValueError(f"quantum must be positive: {args.quantum}")
        workload = random_workload(args.count, 17, 97, rng)
        body = format_schedule(round_robin(workload, args.quantum))
        header = f"the quantum time is {args.quantum}"
        return f"{header}\n{body}" if body else header
    workload = random_workload(args.count, 17, 17, rng)
    return _render_schedule(mlq(workload), with_priority=True)


def _run_paging(args: argparse.Namespace) -> str:
    references = args.references or list(_DEFAULT_REFERENCES)
    return format_paging(_PAGING[args.algorithm](references, args.frames))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command line; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "schedule":
            output = _run_schedule(args)
        else:
            output = _run_paging(args)
    except ValueError as error:
        print(f"ossim: {error}", file=sys.stderr)
        return 1
    if output:
        print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())