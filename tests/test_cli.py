import json
from pathlib import Path

import pytest

from scheduler_sim.cli import EXIT_ERROR, main


@pytest.fixture
def workload(tmp_path: Path) -> Path:
    p = tmp_path / "workload.json"
    p.write_text(
        json.dumps(
            [
                {"id": 1, "arrival_time": 0, "burst_time": 5, "priority": 2},
                {"id": 2, "arrival_time": 1, "burst_time": 3, "priority": 1},
                {"id": 3, "arrival_time": 2, "burst_time": 8, "priority": 3},
            ]
        )
    )
    return p


def test_run_json(workload: Path, capsys):
    assert main(["run", "-a", "fcfs", "-w", str(workload), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["discipline"] == "fcfs"
    assert [b["processId"] for b in data["schedule"]] == [1, 2, 3]
    assert [p["waitingTime"] for p in data["solvedProcesses"]] == [0, 4, 6]


def test_run_tables(workload: Path, capsys):
    assert main(["run", "-a", "rr", "-q", "2", "-w", str(workload)]) == 0
    out = capsys.readouterr().out
    assert "Round Robin" in out
    assert "Per-process metrics" in out


def test_compare_json(workload: Path, capsys):
    assert main(["compare", "-w", str(workload), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data[0]["name"] == "srtf"
    assert [d["rank"] for d in data] == [1, 2, 3, 4, 5]


def test_compare_table(workload: Path, capsys):
    assert main(["compare", "-w", str(workload)]) == 0
    assert "Recommended" in capsys.readouterr().out


def test_rr_without_quantum_is_an_error(workload: Path, capsys):
    assert main(["run", "-a", "rr", "-w", str(workload)]) == EXIT_ERROR
    assert "quantum" in capsys.readouterr().out


def test_missing_workload_file(tmp_path: Path, capsys):
    assert main(["run", "-a", "sjf", "-w", str(tmp_path / "nope.json")]) == EXIT_ERROR
    assert "Error" in capsys.readouterr().out
