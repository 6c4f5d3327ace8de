from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import List

from .errors import WorkloadFormatError
from .models import Process

# Accepted column names per field; camelCase matches the web form export.
_FIELD_ALIASES = {
    "id": ("id", "pid"),
    "arrival_time": ("arrival_time", "arrivalTime"),
    "burst_time": ("burst_time", "burstTime"),
    "priority": ("priority",),
}


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.

    Only the file shape is checked here; workload invariants (positive
    bursts, unique ids) are enforced by the engine when it runs.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        return _load_json(path)
    if suffix == ".csv":
        return _load_csv(path)

    raise WorkloadFormatError(f"Unsupported workload format: {suffix} (use .json or .csv)")


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise WorkloadFormatError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(raw, list):
        raise WorkloadFormatError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        for row in reader:
            processes.append(_process_from_mapping(row))
    return processes


def _lookup(mapping, field_name: str):
    for key in _FIELD_ALIASES[field_name]:
        value = mapping.get(key)
        if value not in (None, ""):
            return value
    return None


def _process_from_mapping(mapping) -> Process:
    if not isinstance(mapping, dict):
        raise WorkloadFormatError(f"Invalid process entry: {mapping!r}")

    try:
        pid = int(_lookup(mapping, "id"))
        arrival_time = int(_lookup(mapping, "arrival_time"))
        burst_time = int(_lookup(mapping, "burst_time"))
    except (TypeError, ValueError) as exc:
        raise WorkloadFormatError(f"Invalid process entry: {mapping!r}") from exc

    priority_val = _lookup(mapping, "priority")
    try:
        priority = int(priority_val) if priority_val is not None else 0
    except (TypeError, ValueError) as exc:
        raise WorkloadFormatError(f"Invalid priority in process entry: {mapping!r}") from exc

    return Process(
        id=pid,
        arrival_time=arrival_time,
        burst_time=burst_time,
        priority=priority,
    )
