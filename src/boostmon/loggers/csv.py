"""CSV export of logged trajectories for boostmon."""

from __future__ import annotations

import csv
from pathlib import Path

from .registry import LoggedData, LoggerRegistry


class CSVExporter:
    """Write the trajectories of a registry to a CSV file.

    One row per iteration, numbered from 1, one column per logger.
    """

    def __init__(self, path: str | Path, *, delimiter: str = ",") -> None:
        self.path = Path(path)
        self.delimiter = delimiter

    def write(self, data: LoggedData | LoggerRegistry) -> Path:
        """Write a table (or a registry's collected table) and return the path."""
        if isinstance(data, LoggerRegistry):
            data = data.collect_logged_data()

        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", newline="", encoding="utf-8") as handle:
            writer = csv.writer(handle, delimiter=self.delimiter)
            writer.writerow(["iteration", *data.logger_ids])
            for row_number, row in enumerate(data.values, start=1):
                writer.writerow([row_number, *(repr(float(value)) for value in row)])
        return self.path


def read_logged_data(path: str | Path, *, delimiter: str = ",") -> dict[str, list[float]]:
    """Read a file written by ``CSVExporter`` back into columns."""
    with Path(path).open(newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle, delimiter=delimiter)
        fieldnames = [name for name in (reader.fieldnames or []) if name != "iteration"]
        columns: dict[str, list[float]] = {name: [] for name in fieldnames}
        for row in reader:
            for name in fieldnames:
                columns[name].append(float(row[name]))
    return columns


__all__ = ["CSVExporter", "read_logged_data"]
