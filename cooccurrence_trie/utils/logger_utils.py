# logger_utils.py - levelled logging of messages and timing metrics

from __future__ import annotations
import sys
import time
from datetime import datetime
from typing import Dict, Optional, TextIO

from colorama import Fore, Style

LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARNING": 30, "ERROR": 40}


class Log:
    """Lightweight logger for writing messages and tracking metrics."""
    COLORS = {
        "DEBUG": Style.DIM,
        "INFO": Fore.BLUE,
        "WARNING": Fore.YELLOW,
        "ERROR": Fore.RED,
        "METRIC": Fore.CYAN,
    }

    def __init__(
        self,
        level: str = "WARNING",
        stream: Optional[TextIO] = None,
        path: Optional[str] = None,
        use_color: Optional[bool] = None,
    ) -> None:
        if level.upper() not in LEVELS:
            raise ValueError(f"unknown log level {level!r}, choose from {list(LEVELS)}")
        self.level = level.upper()
        self._stream = stream
        self.path = path
        self.use_color = use_color

    @property
    def stream(self) -> TextIO:
        # resolved late so redirected stderr (tests, pipes) is honoured
        return self._stream if self._stream is not None else sys.stderr

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS[self.level]

    def write(self, level: str, msg: str) -> None:
        """
        Emit one line: [YYYY-MM-DD HH:MM:SS] LEVEL   | message
        to the stream and, if a path is set, append it to the log file.
        """
        ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        line = f"[{ts}] {level:<7} | {msg}"

        if self.path:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")

        if self._colored() and level in self.COLORS:
            self.stream.write(f"{self.COLORS[level]}{line}{Style.RESET_ALL}\n")
        else:
            self.stream.write(line + "\n")

    def _colored(self) -> bool:
        if self.use_color is not None:
            return self.use_color
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    # Public logging methods
    def debug(self, msg: str) -> None:
        if self.enabled("DEBUG"):
            self.write("DEBUG", msg)

    def info(self, msg: str) -> None:
        if self.enabled("INFO"):
            self.write("INFO", msg)

    def warning(self, msg: str) -> None:
        if self.enabled("WARNING"):
            self.write("WARNING", msg)

    def error(self, msg: str) -> None:
        self.write("ERROR", msg)

    def metric(self, tag: str, value, unit: str = "") -> None:
        """
        Record a metric (timings, counts) at INFO verbosity.
        Example: [2026-01-01 12:45:02] METRIC  | build done: 0.123s
        """
        if self.enabled("INFO"):
            self.write("METRIC", f"{tag}: {value}{unit}")

    def time_block(self, label: str) -> "_Timer":
        """
        Helper for measuring execution time of a code block.
        To use:
            with log.time_block("build"):
                do_some_work()
        The elapsed time is logged as a metric and kept on the timer.
        """
        return _Timer(self, label)


class _Timer:
    """Context manager used internally to measure time for a code block."""
    def __init__(self, log: Log, label: str) -> None:
        self.log = log
        self.label = label
        self.start = 0.0
        self.elapsed = 0.0

    def __enter__(self) -> "_Timer":
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.elapsed = time.perf_counter() - self.start
        if exc_type is None:
            self.log.metric(f"{self.label} done", round(self.elapsed, 3), "s")
