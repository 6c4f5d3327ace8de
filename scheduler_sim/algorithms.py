from __future__ import annotations

import logging
from collections import deque
from enum import Enum
from typing import Callable, Deque, Dict, List, Optional, Union

from .errors import InvalidQuantum, UnknownDiscipline
from .metrics import compute_system_metrics
from .models import BusyBlock, IdleBlock, Process, ScheduleBlock, ScheduleResult
from .workload import Job, working_copies

logger = logging.getLogger(__name__)


class Discipline(Enum):
    FCFS = "fcfs"
    SJF = "sjf"
    SRTF = "srtf"
    RR = "rr"
    PRIORITY = "priority"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, name: Union[str, "Discipline"]) -> "Discipline":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise UnknownDiscipline(f"Unknown discipline '{name}' (choose from {choices})") from None


_LABELS = {
    Discipline.FCFS: "FCFS",
    Discipline.SJF: "SJF (non-preemptive)",
    Discipline.SRTF: "SRTF",
    Discipline.RR: "Round Robin",
    Discipline.PRIORITY: "Priority (non-preemptive)",
}


def _finish(
    discipline: Discipline,
    quantum: Optional[int],
    schedule: List[ScheduleBlock],
    jobs: List[Job],
) -> ScheduleResult:
    solved = sorted((job.solve() for job in jobs), key=lambda p: p.id)
    result = ScheduleResult(discipline=discipline, quantum=quantum, schedule=schedule, solved=solved)
    compute_system_metrics(result)
    logger.debug(
        "%s finished %d processes at t=%d in %d blocks",
        discipline.label,
        len(solved),
        result.system.makespan,
        len(schedule),
    )
    return result


def schedule_fcfs(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Processes run in arrival order; ties keep their input order.
    """
    jobs = working_copies(processes)
    # sorted() is stable, so simultaneous arrivals keep input order
    jobs_sorted = sorted(jobs, key=lambda j: j.arrival_time)

    time = 0
    schedule: List[ScheduleBlock] = []

    for job in jobs_sorted:
        if time < job.arrival_time:
            schedule.append(IdleBlock(start=time, end=job.arrival_time))
            time = job.arrival_time

        job.mark_started(time)
        schedule.append(BusyBlock(process_id=job.id, start=time, end=time + job.burst_time))
        time += job.burst_time
        job.remaining = 0
        job.completion_time = time

    return _finish(Discipline.FCFS, quantum, schedule, jobs)


def _schedule_non_preemptive(
    discipline: Discipline,
    processes: List[Process],
    quantum: Optional[int],
    key: Callable[[Job], tuple],
) -> ScheduleResult:
    jobs = working_copies(processes)

    time = 0
    schedule: List[ScheduleBlock] = []
    completed = 0

    while completed < len(jobs):
        ready = [j for j in jobs if not j.done and j.arrival_time <= time]

        if not ready:
            next_arrival = min(j.arrival_time for j in jobs if not j.done)
            schedule.append(IdleBlock(start=time, end=next_arrival))
            time = next_arrival
            continue

        # min() returns the first minimum, so input order breaks remaining ties.
        job = min(ready, key=key)
        logger.debug("%s: t=%d dispatch P%d", discipline.value, time, job.id)

        job.mark_started(time)
        schedule.append(BusyBlock(process_id=job.id, start=time, end=time + job.burst_time))
        time += job.burst_time
        job.remaining = 0
        job.completion_time = time
        completed += 1

    return _finish(discipline, quantum, schedule, jobs)


def schedule_sjf(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Job First (non-preemptive).

    At each decision point, among processes that have arrived and are not yet
    completed, choose the one with the smallest burst time (tie-breaker:
    earlier arrival, then input order).
    """
    return _schedule_non_preemptive(
        Discipline.SJF, processes, quantum, key=lambda j: (j.burst_time, j.arrival_time)
    )


def schedule_priority(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Static Priority scheduling (non-preemptive).

    Lower numeric priority value means higher priority. A dispatched process
    runs to completion even if a more urgent one arrives meanwhile.
    """
    return _schedule_non_preemptive(
        Discipline.PRIORITY, processes, quantum, key=lambda j: (j.priority, j.arrival_time)
    )


def schedule_srtf(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Remaining Time First (preemptive SJF).

    Steps one time unit at a time. Consecutive units on the same process are
    merged into a single block; idle gaps are skipped in one jump.
    """
    jobs = working_copies(processes)

    time = 0
    schedule: List[ScheduleBlock] = []
    completed = 0

    # Open block: the process currently on the CPU and when it got there.
    running: Optional[Job] = None
    block_start = 0

    def close_block() -> None:
        if running is not None and time > block_start:
            schedule.append(BusyBlock(process_id=running.id, start=block_start, end=time))

    while completed < len(jobs):
        ready = [j for j in jobs if not j.done and j.arrival_time <= time]

        if not ready:
            close_block()
            running = None
            next_arrival = min(j.arrival_time for j in jobs if not j.done)
            schedule.append(IdleBlock(start=time, end=next_arrival))
            time = next_arrival
            continue

        job = min(ready, key=lambda j: (j.remaining, j.arrival_time))
        if job is not running:
            close_block()
            if running is not None:
                logger.debug("srtf: t=%d P%d preempts P%d", time, job.id, running.id)
            running = job
            block_start = time
            job.mark_started(time)

        job.remaining -= 1
        time += 1

        if job.remaining == 0:
            job.completion_time = time
            completed += 1

    close_block()
    return _finish(Discipline.SRTF, quantum, schedule, jobs)


def _check_quantum(quantum: Optional[int]) -> int:
    if quantum is None or isinstance(quantum, bool) or not isinstance(quantum, int) or quantum <= 0:
        raise InvalidQuantum(f"Round Robin requires a positive integer quantum, got {quantum!r}")
    return quantum


def schedule_rr(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    After every slice, processes that arrived up to the end of the slice are
    queued first and only then is the preempted process put back at the tail.
    Each slice is its own block, even when the same process runs again next.
    """
    quantum = _check_quantum(quantum)
    jobs = working_copies(processes)

    time = 0
    schedule: List[ScheduleBlock] = []
    ready: Deque[Job] = deque()
    admitted: set[int] = set()
    completed = 0

    def enqueue_new_arrivals(current_time: int) -> None:
        for j in jobs:
            if j.arrival_time <= current_time and j.id not in admitted:
                ready.append(j)
                admitted.add(j.id)

    enqueue_new_arrivals(time)

    while completed < len(jobs):
        if not ready:
            next_arrival = min(j.arrival_time for j in jobs if j.id not in admitted)
            schedule.append(IdleBlock(start=time, end=next_arrival))
            time = next_arrival
            enqueue_new_arrivals(time)

        job = ready.popleft()
        job.mark_started(time)

        run_time = min(quantum, job.remaining)
        schedule.append(BusyBlock(process_id=job.id, start=time, end=time + run_time))
        time += run_time
        job.remaining -= run_time

        enqueue_new_arrivals(time)

        if job.remaining > 0:
            ready.append(job)
        else:
            job.completion_time = time
            completed += 1

    return _finish(Discipline.RR, quantum, schedule, jobs)


SchedulerFn = Callable[[List[Process], Optional[int]], ScheduleResult]

DISCIPLINES: Dict[Discipline, SchedulerFn] = {
    Discipline.FCFS: schedule_fcfs,
    Discipline.SJF: schedule_sjf,
    Discipline.SRTF: schedule_srtf,
    Discipline.RR: schedule_rr,
    Discipline.PRIORITY: schedule_priority,
}


def run_discipline(
    name: Union[str, Discipline],
    processes: List[Process],
    quantum: Optional[int] = None,
) -> ScheduleResult:
    """
    Dispatch to the requested discipline. Quantum is only used by round-robin.
    """
    discipline = Discipline.parse(name)
    func = DISCIPLINES[discipline]
    return func(processes, quantum=quantum)
