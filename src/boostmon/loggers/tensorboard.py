"""TensorBoard export of logged trajectories for boostmon."""

from __future__ import annotations

import time
from pathlib import Path

import numpy as np
from tensorboard.compat.proto import event_pb2, summary_pb2  # type: ignore
from tensorboard.summary.writer.event_file_writer import EventFileWriter  # type: ignore

from .registry import LoggedData, LoggerRegistry


class TensorBoardExporter:
    """Write every logged trajectory as a TensorBoard scalar series.

    The step of each scalar is its iteration number, starting at 1.
    """

    def __init__(
        self,
        logdir: str | Path,
        *,
        tag_prefix: str = "boosting/",
        flush_secs: float = 2.0,
        filename_suffix: str = "",
        max_queue: int = 10,
    ) -> None:
        self.logdir = Path(logdir)
        self.logdir.mkdir(parents=True, exist_ok=True)
        self.tag_prefix = tag_prefix
        self._writer = EventFileWriter(
            str(self.logdir),
            max_queue_size=max_queue,
            flush_secs=flush_secs,
            filename_suffix=filename_suffix,
        )

    def write(self, data: LoggedData | LoggerRegistry) -> None:
        """Export a table (or a registry's collected table)."""
        if isinstance(data, LoggerRegistry):
            data = data.collect_logged_data()

        for column, logger_id in enumerate(data.logger_ids):
            tag = f"{self.tag_prefix}{logger_id}"
            for row, value in enumerate(data.values[:, column], start=1):
                if np.isfinite(value):
                    self._add_event(tag, float(value), row)

    def _add_event(self, tag: str, value: float, step: int) -> None:
        summary = summary_pb2.Summary(
            value=[summary_pb2.Summary.Value(tag=tag, simple_value=value)]
        )
        event = event_pb2.Event(wall_time=time.time(), step=step, summary=summary)
        self._writer.add_event(event)

    def flush(self) -> None:
        self._writer.flush()

    def close(self) -> None:
        try:
            self._writer.flush()
        finally:
            self._writer.close()


__all__ = ["TensorBoardExporter"]
