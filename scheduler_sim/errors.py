from __future__ import annotations


class SchedulerError(ValueError):
    """Base class for every error raised by the simulation engine."""


class EmptyWorkload(SchedulerError):
    pass


class InvalidQuantum(SchedulerError):
    pass


class InvalidProcess(SchedulerError):
    """A process record violates the workload invariants."""


class DuplicateId(InvalidProcess):
    pass


class InvalidBurstTime(InvalidProcess):
    pass


class InvalidArrivalTime(InvalidProcess):
    pass


class UnknownDiscipline(SchedulerError):
    pass


class WorkloadFormatError(SchedulerError):
    pass
