from __future__ import annotations

from typing import List

from .models import BusyBlock, ScheduleResult, SolvedProcess, SystemMetrics


def compute_system_metrics(result: ScheduleResult) -> SystemMetrics:
    """
    Compute throughput and CPU utilization given populated per-process metrics
    and schedule blocks.
    """
    if not result.solved:
        system = SystemMetrics(cpu_busy_time=0, idle_time=0, makespan=0, throughput=0.0, cpu_utilization=0.0)
        result.system = system
        return system

    makespan = result.schedule[-1].end if result.schedule else 0
    cpu_busy_time = sum(b.duration for b in result.schedule if isinstance(b, BusyBlock))
    idle_time = makespan - cpu_busy_time

    throughput = len(result.solved) / makespan if makespan > 0 else 0.0
    cpu_utilization = cpu_busy_time / makespan if makespan > 0 else 0.0

    # Starving: waited more than twice the average wait.
    avg_wait = sum(p.waiting_time for p in result.solved) / len(result.solved)
    starvation_count = sum(1 for p in result.solved if p.waiting_time > 2 * avg_wait)

    system = SystemMetrics(
        cpu_busy_time=cpu_busy_time,
        idle_time=idle_time,
        makespan=makespan,
        throughput=throughput,
        cpu_utilization=cpu_utilization,
        starvation_count=starvation_count,
    )
    result.system = system
    return system


def summarize_solved(processes: List[SolvedProcess]) -> dict:
    """
    Return averages of the key per-process metrics for quick comparison.
    """
    if not processes:
        return {"avg_waiting": 0.0, "avg_turnaround": 0.0, "avg_response": 0.0}

    n = len(processes)
    return {
        "avg_waiting": sum(p.waiting_time for p in processes) / n,
        "avg_turnaround": sum(p.turnaround_time for p in processes) / n,
        "avg_response": sum(p.response_time for p in processes) / n,
    }
