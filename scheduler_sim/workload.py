from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .errors import (
    DuplicateId,
    EmptyWorkload,
    InvalidArrivalTime,
    InvalidBurstTime,
    InvalidProcess,
)
from .models import Process, SolvedProcess


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_workload(processes: Iterable[Process]) -> Tuple[Process, ...]:
    """
    Check the workload invariants and return it as an immutable tuple.

    Raises before any simulation work is done, so callers never see a
    partial schedule for a bad workload.
    """
    workload = tuple(processes)
    if not workload:
        raise EmptyWorkload("Workload contains no processes")

    seen: set[int] = set()
    for p in workload:
        if not _is_int(p.id) or p.id <= 0:
            raise InvalidProcess(f"Process id must be a positive integer, got {p.id!r}")
        if p.id in seen:
            raise DuplicateId(f"Duplicate process id {p.id}")
        seen.add(p.id)

        if not _is_int(p.burst_time) or p.burst_time <= 0:
            raise InvalidBurstTime(f"Process {p.id}: burst time must be a positive integer, got {p.burst_time!r}")
        if not _is_int(p.arrival_time) or p.arrival_time < 0:
            raise InvalidArrivalTime(
                f"Process {p.id}: arrival time must be a non-negative integer, got {p.arrival_time!r}"
            )
        if not _is_int(p.priority):
            raise InvalidProcess(f"Process {p.id}: priority must be an integer, got {p.priority!r}")

    return workload


@dataclass
class Job:
    """
    Mutable per-run state for one process. Never handed back to callers.
    """

    process: Process
    remaining: int
    start_time: Optional[int] = None
    completion_time: Optional[int] = None

    @property
    def id(self) -> int:
        return self.process.id

    @property
    def arrival_time(self) -> int:
        return self.process.arrival_time

    @property
    def burst_time(self) -> int:
        return self.process.burst_time

    @property
    def priority(self) -> int:
        return self.process.priority

    @property
    def done(self) -> bool:
        return self.completion_time is not None

    def mark_started(self, time: int) -> None:
        if self.start_time is None:
            self.start_time = time

    def solve(self) -> SolvedProcess:
        assert self.start_time is not None and self.completion_time is not None
        return SolvedProcess.from_process(self.process, self.start_time, self.completion_time)


def working_copies(processes: Iterable[Process]) -> List[Job]:
    """
    Validate ``processes`` and build fresh Job records in input order.
    """
    return [Job(process=p, remaining=p.burst_time) for p in validate_workload(processes)]
