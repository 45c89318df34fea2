"""Process-level helpers: engine banner, debug counters, paths and I/O logging."""

from __future__ import annotations

import io
import os
import sys
import threading
from dataclasses import dataclass
from datetime import date
from typing import IO, Optional, Sequence

ENGINE_NAME = "chessbits"
ENGINE_AUTHORS = "the chessbits developers"

# When empty, the banner shows the current date as DDMMYY instead.
VERSION = ""

_PATH_SEPARATOR = "\\" if os.name == "nt" else "/"


def engine_info(to_uci: bool = False) -> str:
    """Name and version of the engine, with an author line for UCI."""
    info = f"{ENGINE_NAME} {VERSION}"
    if not VERSION:
        info += date.today().strftime("%d%m%y")
    info += "\nid author " if to_uci else " by "
    return info + ENGINE_AUTHORS


class DebugStats:
    """Thread-safe hit-rate and mean counters for collecting run-time statistics."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self.hits_total = 0
        self.hits = 0
        self.mean_count = 0
        self.mean_sum = 0

    def hit_on(self, b: bool, condition: bool = True) -> None:
        """Count a trial, and a hit if b is true; skipped when condition is false."""
        if not condition:
            return
        with self._lock:
            self.hits_total += 1
            if b:
                self.hits += 1

    def mean_of(self, v: int) -> None:
        """Add a value to the running mean."""
        with self._lock:
            self.mean_count += 1
            self.mean_sum += v

    def report(self) -> str:
        """Summary lines of the collected statistics, empty if nothing was recorded."""
        with self._lock:
            lines = []
            if self.hits_total:
                rate = 100 * self.hits // self.hits_total
                lines.append(
                    f"Total {self.hits_total} Hits {self.hits} hit rate (%) {rate}"
                )
            if self.mean_count:
                mean = self.mean_sum / self.mean_count
                lines.append(f"Total {self.mean_count} Mean {mean:g}")
        return "".join(line + "\n" for line in lines)


@dataclass(frozen=True)
class CommandLine:
    """Paths derived from the program's command line and environment."""

    argv0: str
    binary_directory: str
    working_directory: str

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> CommandLine:
        if not argv:
            raise ValueError("argv must hold at least the program name")
        argv0 = argv[0]

        try:
            working_directory = os.getcwd()
        except OSError:
            working_directory = ""

        cut = max(argv0.rfind("\\"), argv0.rfind("/"))
        if cut < 0:
            binary_directory = "." + _PATH_SEPARATOR
        else:
            binary_directory = argv0[: cut + 1]

        # A leading "./" stands for the working directory.
        if binary_directory.startswith("." + _PATH_SEPARATOR):
            binary_directory = working_directory + binary_directory[1:]

        return cls(argv0, binary_directory, working_directory)


class _LogSink:
    """Log file shared by the input and output sides, tracking line starts."""

    def __init__(self, file: IO[str]) -> None:
        self.file = file
        self._last = "\n"
        self._lock = threading.Lock()

    def log(self, text: str, prefix: str) -> None:
        if not text:
            return
        with self._lock:
            for piece in text.splitlines(keepends=True):
                if self._last == "\n":
                    self.file.write(prefix)
                self.file.write(piece)
                self._last = piece[-1]


class _TeeOutput(io.TextIOBase):
    """Writes to a stream and copies everything to the log."""

    def __init__(self, stream: IO[str], sink: _LogSink) -> None:
        super().__init__()
        self._stream = stream
        self._sink = sink

    def writable(self) -> bool:
        return True

    def write(self, s: str) -> int:
        self._stream.write(s)
        self._sink.log(s, "<< ")
        return len(s)

    def flush(self) -> None:
        self._sink.file.flush()
        self._stream.flush()


class _TeeInput(io.TextIOBase):
    """Reads from a stream and copies everything read to the log."""

    def __init__(self, stream: IO[str], sink: _LogSink) -> None:
        super().__init__()
        self._stream = stream
        self._sink = sink

    def readable(self) -> bool:
        return True

    def read(self, size: Optional[int] = -1) -> str:
        data = self._stream.read(-1 if size is None else size)
        self._sink.log(data, ">> ")
        return data

    def readline(self, size: Optional[int] = -1) -> str:  # type: ignore[override]
        data = self._stream.readline(-1 if size is None else size)
        self._sink.log(data, ">> ")
        return data


class IOLogger:
    """Copies standard input and output to a log file while it is running.

    Without explicit streams the process's stdin and stdout are replaced while
    logging is active; with explicit streams only the ``input`` and ``output``
    attributes are wrapped.
    """

    def __init__(
        self, stdin: Optional[IO[str]] = None, stdout: Optional[IO[str]] = None
    ) -> None:
        self._install = stdin is None and stdout is None
        self._stdin = stdin
        self._stdout = stdout
        self._sink: Optional[_LogSink] = None
        self._raw_in: Optional[IO[str]] = None
        self._raw_out: Optional[IO[str]] = None
        self._tee_in: Optional[_TeeInput] = None
        self._tee_out: Optional[_TeeOutput] = None

    @property
    def active(self) -> bool:
        return self._sink is not None

    @property
    def input(self) -> IO[str]:
        if self._tee_in is not None:
            return self._tee_in
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def output(self) -> IO[str]:
        if self._tee_out is not None:
            return self._tee_out
        return self._stdout if self._stdout is not None else sys.stdout

    def start(self, fname: str) -> None:
        """Start logging to fname, ending any earlier log; an empty name only stops."""
        self.stop()
        if not fname:
            return
        file = open(fname, "w", encoding="utf-8")
        self._sink = _LogSink(file)
        self._raw_in = self._stdin if self._stdin is not None else sys.stdin
        self._raw_out = self._stdout if self._stdout is not None else sys.stdout
        self._tee_in = _TeeInput(self._raw_in, self._sink)
        self._tee_out = _TeeOutput(self._raw_out, self._sink)
        if self._install:
            sys.stdin = self._tee_in  # type: ignore[assignment]
            sys.stdout = self._tee_out  # type: ignore[assignment]

    def stop(self) -> None:
        """Restore the original streams and close the log file."""
        if self._sink is None:
            return
        if self._install:
            if sys.stdin is self._tee_in:
                sys.stdin = self._raw_in  # type: ignore[assignment]
            if sys.stdout is self._tee_out:
                sys.stdout = self._raw_out  # type: ignore[assignment]
        self._sink.file.close()
        self._sink = None
        self._tee_in = None
        self._tee_out = None
        self._raw_in = None
        self._raw_out = None

    def __enter__(self) -> IOLogger:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()