"""Concurrent resolution of input lines."""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Callable, Iterable
from typing import IO

from rich.console import COLOR_SYSTEMS, Console
from rich.text import Text

from jira_branch.exceptions import InputReadError

logger = logging.getLogger(__name__)

LineResolver = Callable[[str], Text | str]


class LineSink:
    """Shared output stream that writes whole lines, one task at a time."""

    def __init__(self, stream: IO[str], color: bool = True):
        self.console = Console(
            file=stream,
            color_system="auto" if color else None,
            highlight=False,
            markup=False,
            emoji=False,
        )
        self._lock = threading.Lock()
        self.lines_written = 0

    def render(self, text: Text) -> str:
        """
        Apply the styles of ``text`` for this console's color system.

        Segments are rendered one by one rather than through
        ``Console.print`` so tabs and line width are left alone.
        """
        if self.console.color_system is None:
            return text.plain
        color_system = COLOR_SYSTEMS[self.console.color_system]
        return "".join(
            segment.style.render(segment.text, color_system=color_system)
            if segment.style
            else segment.text
            for segment in text.render(self.console, end="")
        )

    def write(self, line: Text | str) -> None:
        """Write one line followed by a newline. Plain strings are written verbatim."""
        output = self.render(line) if isinstance(line, Text) else line
        with self._lock:
            self.console.file.write(output + "\n")
            self.console.file.flush()
            self.lines_written += 1


class Dispatcher:
    """
    Run one resolution task per input line.

    Every line gets its own thread, started as soon as the line is read.
    Results go to the sink in completion order, so output order may differ
    from input order. ``run`` returns only once every task has written.
    """

    def __init__(
        self,
        resolve: LineResolver,
        sink: LineSink,
        max_workers: int | None = None,
    ):
        self.resolve = resolve
        self.sink = sink
        self._slots = threading.BoundedSemaphore(max_workers) if max_workers else None

    def run(self, lines: Iterable[str]) -> int:
        """
        Dispatch every line and wait for all results.

        Args:
            lines: Input lines, e.g. a text stream. A final line without a
                newline is processed like any other.

        Returns:
            Number of lines dispatched.

        Raises:
            InputReadError: If reading ``lines`` fails. Lines already
                dispatched are still written before this is raised.
        """
        tasks: list[threading.Thread] = []
        try:
            for line in lines:
                task = threading.Thread(
                    target=self._run_task,
                    args=(line,),
                    name=f"line-{len(tasks)}",
                )
                task.start()
                tasks.append(task)
        except (OSError, UnicodeDecodeError) as e:
            raise InputReadError(f"error reading input: {e}") from e
        finally:
            for task in tasks:
                task.join()

        logger.debug(f"Resolved {len(tasks)} lines")
        return len(tasks)

    def _run_task(self, line: str) -> None:
        slot = self._slots if self._slots is not None else contextlib.nullcontext()
        try:
            with slot:
                result = self.resolve(line)
        except Exception:
            logger.exception(f"Unexpected error resolving {line.strip()!r}")
            result = line.strip()
        self.sink.write(result)
