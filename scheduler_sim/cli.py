from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .algorithms import Discipline, run_discipline
from .compare import compare_disciplines
from .errors import SchedulerError
from .metrics import summarize_solved
from .models import BusyBlock, ComparisonResult, ScheduleResult
from .workload_io import load_workload

logger = logging.getLogger(__name__)

EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="scheduler-sim",
        description="CPU scheduling simulator (FCFS, SJF, SRTF, RR, Priority).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR; default: WARNING).",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    choices = ", ".join(d.value for d in Discipline)
    run_parser = subparsers.add_parser("run", help="Run one scheduling discipline on a workload file.")
    run_parser.add_argument(
        "--discipline",
        "-a",
        required=True,
        help=f"Discipline to use ({choices}).",
    )
    run_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    run_parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=None,
        help="Time quantum for round-robin (ignored by the other disciplines).",
    )
    run_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of tables.",
    )

    compare_parser = subparsers.add_parser(
        "compare",
        help="Run every discipline on the same workload and rank them.",
    )
    compare_parser.add_argument(
        "--workload",
        "-w",
        required=True,
        help="Path to JSON or CSV workload file.",
    )
    compare_parser.add_argument(
        "--quantum",
        "-q",
        type=int,
        default=2,
        help="Time quantum used for round-robin (default: 2).",
    )
    compare_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the ranking as JSON instead of a table.",
    )

    return parser


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def _print_result(result: ScheduleResult, console: Console) -> None:
    console.print(f"[bold]Discipline:[/bold] {result.discipline.label}")
    if result.quantum is not None:
        console.print(f"[bold]Quantum:[/bold] {result.quantum}")

    console.print()

    schedule_table = Table(title="Schedule", box=box.SIMPLE_HEAVY)
    schedule_table.add_column("Block", justify="center")
    for h in ("Start", "End", "Duration"):
        schedule_table.add_column(h, justify="right")

    for block in result.schedule:
        label = f"P{block.process_id}" if isinstance(block, BusyBlock) else "[dim]idle[/dim]"
        schedule_table.add_row(label, str(block.start), str(block.end), str(block.duration))

    console.print(schedule_table)
    console.print()

    headers = [
        "PID",
        "Arrive",
        "Burst",
        "Priority",
        "Start",
        "Complete",
        "Wait",
        "Turnaround",
        "Response",
    ]

    proc_table = Table(title="Per-process metrics", box=box.SIMPLE_HEAVY)
    for h in headers:
        justify = "center" if h in {"PID", "Priority"} else "right"
        proc_table.add_column(h, justify=justify)

    for p in result.solved:
        proc_table.add_row(
            f"P{p.id}",
            str(p.arrival_time),
            str(p.burst_time),
            str(p.priority),
            str(p.start_time),
            str(p.completion_time),
            str(p.waiting_time),
            str(p.turnaround_time),
            str(p.response_time),
        )

    console.print(proc_table)
    console.print()

    summary = summarize_solved(result.solved)
    if result.system:
        sys = result.system
        sys_table = Table(title="System metrics", box=box.SIMPLE_HEAVY)
        sys_table.add_column("Metric")
        sys_table.add_column("Value", justify="right")

        sys_table.add_row("Avg waiting", f"{summary['avg_waiting']:.2f}")
        sys_table.add_row("Avg turnaround", f"{summary['avg_turnaround']:.2f}")
        sys_table.add_row("Avg response", f"{summary['avg_response']:.2f}")
        sys_table.add_row("Makespan", str(sys.makespan))
        sys_table.add_row("Idle time", str(sys.idle_time))
        sys_table.add_row("Throughput (proc/time)", f"{sys.throughput:.3f}")
        sys_table.add_row("CPU utilization", f"{sys.cpu_utilization*100:.1f}%")
        sys_table.add_row("Starvation count", str(sys.starvation_count))

        console.print(sys_table)


def _print_ranking(results: List[ComparisonResult], workload_path: Path, quantum: int, console: Console) -> None:
    summary_table = Table(title=f"Discipline comparison: {escape(str(workload_path))}", box=box.SIMPLE_HEAVY)
    summary_table.add_column("Rank", justify="right")
    summary_table.add_column("Discipline")
    summary_table.add_column("Avg turnaround", justify="right")
    summary_table.add_column("Avg waiting", justify="right")

    for r in results:
        summary_table.add_row(
            str(r.rank),
            r.discipline.label,
            f"{r.avg_turnaround_time:.2f}",
            f"{r.avg_waiting_time:.2f}",
        )

    console.print(summary_table)
    console.print(f"[dim]Round Robin quantum: {quantum}[/dim]")
    console.print(f"[bold green]Recommended:[/bold green] {results[0].discipline.label}")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    console = Console()

    try:
        workload_path = Path(args.workload)
        processes = load_workload(workload_path)
        logger.info("Loaded %d processes from %s", len(processes), workload_path)

        if args.command == "run":
            result = run_discipline(args.discipline, processes, quantum=args.quantum)
            if args.json:
                console.print_json(json.dumps(result.to_dict()))
            else:
                _print_result(result, console)
            return 0

        if args.command == "compare":
            results = compare_disciplines(processes, quantum=args.quantum)
            if args.json:
                console.print_json(json.dumps([r.to_dict() for r in results]))
            else:
                _print_ranking(results, workload_path, args.quantum, console)
            return 0
    except (SchedulerError, OSError) as exc:
        console.print(f"[red]Error: {escape(str(exc))}[/red]")
        return EXIT_ERROR

    parser.error(f"Unknown command: {args.command}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
