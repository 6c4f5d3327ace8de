from __future__ import annotations

import logging
from functools import cmp_to_key
from typing import List, Optional

from .algorithms import DISCIPLINES, Discipline
from .metrics import summarize_solved
from .models import ComparisonResult, Process
from .workload import validate_workload

logger = logging.getLogger(__name__)

# Turnaround averages closer than this are treated as equal.
TURNAROUND_TOLERANCE = 0.01


def _by_efficiency(a: ComparisonResult, b: ComparisonResult) -> int:
    if abs(a.avg_turnaround_time - b.avg_turnaround_time) > TURNAROUND_TOLERANCE:
        return -1 if a.avg_turnaround_time < b.avg_turnaround_time else 1
    if a.avg_waiting_time != b.avg_waiting_time:
        return -1 if a.avg_waiting_time < b.avg_waiting_time else 1
    return 0


def rank_results(results: List[ComparisonResult]) -> List[ComparisonResult]:
    """
    Order results by average turnaround, then average waiting time, and
    assign 1-based ranks. Full ties keep their incoming order.
    """
    ordered = sorted(results, key=cmp_to_key(_by_efficiency))
    return [
        ComparisonResult(
            discipline=r.discipline,
            avg_turnaround_time=r.avg_turnaround_time,
            avg_waiting_time=r.avg_waiting_time,
            rank=idx,
        )
        for idx, r in enumerate(ordered, start=1)
    ]


def compare_disciplines(processes: List[Process], quantum: Optional[int] = None) -> List[ComparisonResult]:
    """
    Run every discipline on the same workload and rank them by efficiency.

    Each discipline builds its own working copies, so no run can observe
    another's state. The first entry of the returned list is the recommended
    discipline.
    """
    workload = validate_workload(processes)

    results: List[ComparisonResult] = []
    for discipline in Discipline:
        result = DISCIPLINES[discipline](list(workload), quantum=quantum)
        summary = summarize_solved(result.solved)
        results.append(
            ComparisonResult(
                discipline=discipline,
                avg_turnaround_time=summary["avg_turnaround"],
                avg_waiting_time=summary["avg_waiting"],
            )
        )

    ranked = rank_results(results)
    logger.info(
        "Recommended discipline for %d processes: %s (avg turnaround %.2f)",
        len(workload),
        ranked[0].discipline.label,
        ranked[0].avg_turnaround_time,
    )
    return ranked


def recommended(results: List[ComparisonResult]) -> Discipline:
    if not results:
        raise ValueError("No comparison results to recommend from")
    return min(results, key=lambda r: r.rank).discipline
