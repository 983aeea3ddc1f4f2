"""Console trace for boostmon.

This module provides a simple printer that writes the registry's status
line to stdout every few iterations, with a header aligned to the fields.
"""

import sys
import time
from typing import Optional, TextIO

from .registry import LoggerRegistry
from ..exceptions import ConfigurationError


class TracePrinter:
    """Print registry status lines while a boosting loop is running.

    Example:
        >>> printer = TracePrinter(registry, trace=50)
        >>> printer.print_header()
           iter |             inbag
        >>> printer.print_status(50)
         50/500 |              1.23
    """

    def __init__(
        self,
        registry: LoggerRegistry,
        trace: int = 1,
        output: Optional[TextIO] = None,
        show_timestamp: bool = False,
    ):
        """Initialize the printer.

        Args:
            registry: Registry whose loggers are rendered
            trace: Print every ``trace`` iterations; 0 disables printing
            output: Output stream (defaults to sys.stdout)
            show_timestamp: Whether to prefix status lines with a timestamp
        """
        if trace < 0:
            raise ConfigurationError(f"trace must be non-negative, got {trace}")
        self.registry = registry
        self.trace = trace
        self.output = output or sys.stdout
        self.show_timestamp = show_timestamp

    @property
    def enabled(self) -> bool:
        return self.trace > 0 and len(self.registry) > 0

    def should_print(self, iteration: int) -> bool:
        """The first iteration and every ``trace``-th one are printed."""
        if not self.enabled:
            return False
        return iteration == 1 or iteration % self.trace == 0

    def print_header(self) -> None:
        """Print the column header once, before the first iteration."""
        if not self.enabled:
            return
        header = self.registry.render_header()
        if self.show_timestamp:
            header = " " * len(self._prefix()) + header
        print(header, file=self.output)

    def print_status(self, iteration: int) -> bool:
        """Print the current status line if ``iteration`` is due.

        Returns:
            Whether a line was printed
        """
        if not self.should_print(iteration):
            return False
        line = self.registry.render_status_line()
        if self.show_timestamp:
            line = self._prefix() + line
        print(line, file=self.output)
        return True

    def print_stop_reason(self) -> None:
        """Report which stoppers ended training."""
        if not self.enabled:
            return
        fired = [
            key for key in self.registry.stoppers()
            if self.registry[key].reached_stop_criteria()
        ]
        if fired:
            print(f"Stop criteria reached by: {', '.join(fired)}", file=self.output)

    def _prefix(self) -> str:
        return f"[{time.strftime('%Y-%m-%d %H:%M:%S', time.localtime())}] "

    def flush(self) -> None:
        """Flush the output stream."""
        if hasattr(self.output, "flush"):
            self.output.flush()

    def close(self) -> None:
        """Close the printer.

        Note: Does not close stdout/stderr if they were used as output.
        """
        if self.output not in (sys.stdout, sys.stderr):
            if hasattr(self.output, "close"):
                self.output.close()


__all__ = ["TracePrinter"]
