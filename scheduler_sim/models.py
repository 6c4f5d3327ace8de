from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Union

if TYPE_CHECKING:
    from .algorithms import Discipline


@dataclass(frozen=True)
class Process:
    id: int
    arrival_time: int
    burst_time: int
    priority: int = 0


@dataclass(frozen=True)
class IdleBlock:
    """
    A stretch of the timeline where no process was eligible to run.
    """

    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {"type": "idle", "start": self.start, "end": self.end, "duration": self.duration}


@dataclass(frozen=True)
class BusyBlock:
    """
    One contiguous slice of execution for a process in the Gantt schedule.
    """

    process_id: int
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start

    def to_dict(self) -> dict:
        return {
            "type": "process",
            "processId": self.process_id,
            "start": self.start,
            "end": self.end,
            "duration": self.duration,
        }


ScheduleBlock = Union[IdleBlock, BusyBlock]


@dataclass(frozen=True)
class SolvedProcess:
    id: int
    arrival_time: int
    burst_time: int
    priority: int
    start_time: int
    completion_time: int
    turnaround_time: int
    waiting_time: int
    response_time: int

    @classmethod
    def from_process(cls, process: Process, start_time: int, completion_time: int) -> "SolvedProcess":
        turnaround_time = completion_time - process.arrival_time
        return cls(
            id=process.id,
            arrival_time=process.arrival_time,
            burst_time=process.burst_time,
            priority=process.priority,
            start_time=start_time,
            completion_time=completion_time,
            turnaround_time=turnaround_time,
            waiting_time=turnaround_time - process.burst_time,
            response_time=start_time - process.arrival_time,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "arrivalTime": self.arrival_time,
            "burstTime": self.burst_time,
            "priority": self.priority,
            "startTime": self.start_time,
            "completionTime": self.completion_time,
            "turnaroundTime": self.turnaround_time,
            "waitingTime": self.waiting_time,
            "responseTime": self.response_time,
        }


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    idle_time: int
    makespan: int
    throughput: float
    cpu_utilization: float
    starvation_count: int = 0


@dataclass
class ScheduleResult:
    discipline: "Discipline"
    quantum: Optional[int]
    schedule: List[ScheduleBlock] = field(default_factory=list)
    solved: List[SolvedProcess] = field(default_factory=list)
    system: Optional[SystemMetrics] = None

    def busy_blocks(self) -> List[BusyBlock]:
        return [b for b in self.schedule if isinstance(b, BusyBlock)]

    def to_dict(self) -> dict:
        return {
            "discipline": self.discipline.value,
            "quantum": self.quantum,
            "schedule": [b.to_dict() for b in self.schedule],
            "solvedProcesses": [p.to_dict() for p in self.solved],
        }


@dataclass(frozen=True)
class ComparisonResult:
    discipline: "Discipline"
    avg_turnaround_time: float
    avg_waiting_time: float
    rank: int = 0

    def to_dict(self) -> dict:
        return {
            "name": self.discipline.value,
            "avgTat": self.avg_turnaround_time,
            "avgWt": self.avg_waiting_time,
            "rank": self.rank,
        }
