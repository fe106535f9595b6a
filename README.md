# ossim

`ossim` simulates the classic operating-system algorithms taught in a
first course on the subject:

* **CPU scheduling** (`ossim.scheduling`): first-come first-served
  (`fcfs`), shortest job first (`sjf`), shortest remaining time first
  (`srtf`), round robin (`round_robin`) and a priority-aware scheduler
  (`mlq`).
* **Page replacement** (`ossim.paging`): FIFO (`fifo_replacement`),
  least recently used (`lru_replacement`) and a future-frequency policy
  (`optimal_replacement`).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `ossim` command. It has two
subcommands.

### `ossim schedule`

```
ossim schedule {fcfs,sjf,srtf,rr,mlq} COUNT [--seed N] [--quantum Q]
```

This draws a random workload of `COUNT` processes and schedules it. For
each process it prints the arrival, burst, completion, turnaround and
waiting times. `--seed` makes the workload reproducible. `--quantum`
sets the round robin time quantum, which defaults to 20.

Each algorithm draws its workload as follows:

| algorithm | workload                                                     |
|-----------|--------------------------------------------------------------|
| `fcfs`    | strictly increasing arrivals and bursts, both below 97       |
| `sjf`     | arrivals below 17, bursts below 97                           |
| `srtf`    | arrivals below 17, bursts below 17                           |
| `rr`      | arrivals below 17, bursts below 97; prints the quantum first |
| `mlq`     | arrivals below 17, bursts below 17; also prints priorities   |

### `ossim page`

```
ossim page {fifo,lru,optimal} --frames M [REFERENCE ...]
```

This replays a page reference string through `M` frames. When no
references are given it uses `7 0 1 2 0 3 0 4 2 3 0 3 2 3`. It prints
`HIT` or `FAULT` for every reference. Once the frames are filled, it also
prints the page that was replaced, if any, and the frame contents. It
ends with the total number of page faults.

Invalid input, such as more frames than references or a quantum that is
not positive, is reported on standard error as `ossim: <message>`. The
exit status is then 1.

## Library use

### Scheduling

```python
import random

from ossim.scheduling import Process, random_workload, sjf, round_robin
from ossim.cli import format_schedule

rng = random.Random(42)
processes = random_workload(5, 17, 97, rng)

print(format_schedule(sjf(processes)))
print(format_schedule(round_robin(processes, 20)))

custom = [Process(1, 0, 8), Process(2, 1, 4), Process(3, 2, 9)]
for result in sjf(custom):
    print(result.process.pid, result.completion, result.turnaround, result.waiting)
```

* `Process(pid, arrival, burst, priority=1)` is a frozen record. It
  raises `ValueError` if any of the three times is negative.
* `random_workload(count, max_arrival=17, max_burst=97, rng=None)` builds
  processes whose arrivals lie in `[0, max_arrival)`, whose bursts lie in
  `[0, max_burst)` and whose priorities lie in `1..3`. The first process
  always arrives at time 0.
* `random_fifo_workload(count, max_value=97, rng=None)` builds processes
  with strictly increasing arrivals below `max_value`. It raises
  `ValueError` when no larger arrival is left.

Every scheduler returns one `ProcessResult` per process, in input order.
A `ProcessResult` holds `process` and `completion` and derives
`turnaround` and `waiting` from them.

* `fcfs` runs the processes in the order given.
* `sjf` runs the first process first. After that it picks the ready
  process with the shortest burst and runs it to completion. On a tie the
  later process in the list wins.
* `srtf` gives the first tick to the first process. After that it runs,
  one unit at a time, the ready process with the least remaining time.
  On a tie the earlier process in the list wins.
* `round_robin(processes, quantum=20)` sweeps the list repeatedly. It
  gives each ready process up to `quantum` units per pass. A quantum that
  is not positive raises `ValueError`.
* `mlq` scans the list on each tick. It moves its pick to a ready process
  whose priority is at least that of the current pick and whose remaining
  time is strictly shorter.

### Page replacement

```python
from ossim.paging import fifo_replacement, lru_replacement, optimal_replacement
from ossim.cli import format_paging

references = [7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2, 3]

for simulate in (fifo_replacement, lru_replacement, optimal_replacement):
    result = simulate(references, 3)
    print(result.faults, result.hits, result.frames)
    print(format_paging(result))
```

Each simulator takes the reference string and the number of frames. It
returns a `PagingResult` with `frame_count` and `events`, one `PageEvent`
per reference. Each event has `page`, `hit`, `frames` (the frame contents
afterwards) and `evicted`. The result also offers the `faults`, `hits`
and final `frames` properties.

The first `frame_count` references are always loaded as faults, without
checking whether any of them repeat. A frame count below 1, or one larger
than the number of references, raises `ValueError`.

* `fifo_replacement` replaces the frames in turn.
* `lru_replacement` evicts the page whose most recent reference is oldest.
* `optimal_replacement` evicts the page that is referenced the fewest
  times in the rest of the string. On a tie it evicts the page in the
  last such frame.

## What it does not do

The `schedule` command only draws random workloads. It cannot read
process lists from the user or from a file; to schedule your own
processes, build `Process` records and call the scheduler functions
directly. Nothing is stored between runs.