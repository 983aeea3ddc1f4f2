"""Tests for trajectory export components."""

from __future__ import annotations

import csv
from pathlib import Path

import numpy as np
import pytest

from tensorboard.backend.event_processing import event_file_loader

from boostmon.loggers import (
    CSVExporter,
    InbagRiskLogger,
    IterationLogger,
    LoggedData,
    LoggerRegistry,
    read_logged_data,
)
from boostmon.loggers.tensorboard import TensorBoardExporter


@pytest.fixture
def trained_registry(identity_loss, dummy_step) -> LoggerRegistry:
    registry = LoggerRegistry({
        "iterations": IterationLogger(is_stopper=True, max_iterations=10),
        "inbag": InbagRiskLogger(identity_loss),
    })
    for m, risk in enumerate([0.9, 0.45, 0.3], start=1):
        registry.log_step(*dummy_step(m, prediction=(risk,)))
    return registry


def test_csv_exporter_writes_one_row_per_iteration(tmp_path: Path, trained_registry) -> None:
    csv_path = tmp_path / "nested" / "trajectories.csv"
    written = CSVExporter(csv_path).write(trained_registry)
    assert written == csv_path

    with csv_path.open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        rows = list(reader)

    assert reader.fieldnames == ["iteration", "iterations", "inbag"]
    assert [row["iteration"] for row in rows] == ["1", "2", "3"]
    assert float(rows[1]["inbag"]) == pytest.approx(0.45)


def test_csv_round_trip_is_exact(tmp_path: Path, trained_registry) -> None:
    table = trained_registry.collect_logged_data()
    path = CSVExporter(tmp_path / "t.tsv", delimiter="\t").write(table)

    columns = read_logged_data(path, delimiter="\t")
    for logger_id in table.logger_ids:
        np.testing.assert_array_equal(columns[logger_id], table.column(logger_id))


def test_csv_exporter_empty_table(tmp_path: Path) -> None:
    table = LoggedData(logger_ids=("a",), values=np.empty((0, 1)))
    path = CSVExporter(tmp_path / "empty.csv").write(table)
    assert path.read_text(encoding="utf-8").splitlines() == ["iteration,a"]


def test_tensorboard_exporter_writes_events(tmp_path: Path, trained_registry) -> None:
    logdir = tmp_path / "tb"
    exporter = TensorBoardExporter(logdir)
    exporter.write(trained_registry)
    exporter.flush()
    exporter.close()

    event_files = list(logdir.glob("events.*"))
    assert event_files, "Expected TensorBoard event file to be created"

    loader = event_file_loader.EventFileLoader(str(event_files[0]))
    scalars: dict[tuple[str, int], float] = {}
    for event in loader.Load():
        if not event.summary.value:
            continue
        for value in event.summary.value:
            if value.HasField("simple_value"):
                scalars[(value.tag, event.step)] = value.simple_value
            elif value.HasField("tensor") and value.tensor.float_val:
                scalars[(value.tag, event.step)] = value.tensor.float_val[0]

    assert scalars[("boosting/inbag", 2)] == pytest.approx(0.45)
    assert scalars[("boosting/iterations", 3)] == pytest.approx(3.0)
    assert len(scalars) == 6
