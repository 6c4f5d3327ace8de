import pytest

from scheduler_sim.algorithms import Discipline, run_discipline, schedule_rr
from scheduler_sim.compare import compare_disciplines
from scheduler_sim.errors import (
    DuplicateId,
    EmptyWorkload,
    InvalidArrivalTime,
    InvalidBurstTime,
    InvalidProcess,
    InvalidQuantum,
    SchedulerError,
)
from scheduler_sim.models import Process
from scheduler_sim.workload import validate_workload, working_copies


@pytest.mark.parametrize("discipline", list(Discipline))
def test_empty_workload_rejected(discipline):
    with pytest.raises(EmptyWorkload):
        run_discipline(discipline, [], quantum=2)


@pytest.mark.parametrize(
    "procs, error",
    [
        ([Process(1, 0, 3), Process(1, 2, 4)], DuplicateId),
        ([Process(1, 0, 0)], InvalidBurstTime),
        ([Process(1, 0, -2)], InvalidBurstTime),
        ([Process(1, -1, 3)], InvalidArrivalTime),
        ([Process(0, 0, 3)], InvalidProcess),
        ([Process(-4, 0, 3)], InvalidProcess),
        ([Process(1, 0, 3, priority=None)], InvalidProcess),
    ],
)
def test_invalid_processes_rejected(procs, error):
    with pytest.raises(error):
        validate_workload(procs)


def test_invalid_process_subclasses():
    assert issubclass(DuplicateId, InvalidProcess)
    assert issubclass(InvalidBurstTime, InvalidProcess)
    # callers that only know about ValueError still catch engine errors
    assert issubclass(SchedulerError, ValueError)


@pytest.mark.parametrize("quantum", [None, 0, -3, 1.5, True])
def test_rr_rejects_unusable_quantum(quantum):
    with pytest.raises(InvalidQuantum):
        schedule_rr([Process(1, 0, 3)], quantum=quantum)


def test_run_discipline_rr_needs_quantum():
    with pytest.raises(InvalidQuantum):
        run_discipline("rr", [Process(1, 0, 3)])


@pytest.mark.parametrize("discipline", [d for d in Discipline if d is not Discipline.RR])
def test_quantum_ignored_elsewhere(discipline):
    res = run_discipline(discipline, [Process(1, 0, 3)], quantum=None)
    assert res.solved[0].completion_time == 3


def test_compare_propagates_errors():
    with pytest.raises(InvalidQuantum):
        compare_disciplines([Process(1, 0, 3)], quantum=0)
    with pytest.raises(EmptyWorkload):
        compare_disciplines([], quantum=2)
    with pytest.raises(DuplicateId):
        compare_disciplines([Process(1, 0, 3), Process(1, 1, 1)], quantum=2)


def test_working_copies_are_fresh():
    procs = [Process(1, 0, 3), Process(2, 1, 2)]
    first = working_copies(procs)
    second = working_copies(procs)
    first[0].remaining = 0
    assert second[0].remaining == 3
    assert first[0].process is procs[0]
