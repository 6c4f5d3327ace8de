"""
Scheduler simulation package.

Simulates classical CPU scheduling disciplines over a fixed workload,
producing a Gantt schedule and per-process metrics, and ranks the
disciplines against each other.
"""

from .algorithms import (
    DISCIPLINES,
    Discipline,
    run_discipline,
    schedule_fcfs,
    schedule_priority,
    schedule_rr,
    schedule_sjf,
    schedule_srtf,
)
from .compare import compare_disciplines, rank_results, recommended
from .errors import (
    DuplicateId,
    EmptyWorkload,
    InvalidArrivalTime,
    InvalidBurstTime,
    InvalidProcess,
    InvalidQuantum,
    SchedulerError,
    UnknownDiscipline,
    WorkloadFormatError,
)
from .models import (
    BusyBlock,
    ComparisonResult,
    IdleBlock,
    Process,
    ScheduleBlock,
    ScheduleResult,
    SolvedProcess,
    SystemMetrics,
)

__all__ = [
    "DISCIPLINES",
    "BusyBlock",
    "ComparisonResult",
    "Discipline",
    "DuplicateId",
    "EmptyWorkload",
    "IdleBlock",
    "InvalidArrivalTime",
    "InvalidBurstTime",
    "InvalidProcess",
    "InvalidQuantum",
    "Process",
    "ScheduleBlock",
    "ScheduleResult",
    "SchedulerError",
    "SolvedProcess",
    "SystemMetrics",
    "UnknownDiscipline",
    "WorkloadFormatError",
    "compare_disciplines",
    "rank_results",
    "recommended",
    "run_discipline",
    "schedule_fcfs",
    "schedule_priority",
    "schedule_rr",
    "schedule_sjf",
    "schedule_srtf",
]
