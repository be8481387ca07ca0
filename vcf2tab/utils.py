"""Console logging and progress helpers shared across the vcf2tab package.

Messages go to stdout with a timestamp and level tag, e.g.
``[14:02:11] [INFO] Converted 1,024 records``. Progress dots are written
to a separate, configurable stream so tests can capture or silence them.
"""
from datetime import datetime
import sys
from typing import Optional, TextIO


def _stamp() -> str:
    return datetime.now().strftime("%H:%M:%S")


def log_info(msg: str) -> None:
    """Print info log message."""
    print(f"[{_stamp()}] [INFO] {msg}")


def log_warn(msg: str) -> None:
    """Print warning log message."""
    print(f"[{_stamp()}] [WARN] {msg}")


def log_error(msg: str, exit_code: Optional[int] = 1) -> None:
    """Print error log message and exit (pass ``exit_code=None`` to only print)."""
    print(f"[{_stamp()}] [ERROR] {msg}", file=sys.stderr)
    if exit_code is not None:
        sys.exit(exit_code)


class ProgressPrinter:
    """Dot-per-``dot_every`` lines, running count every ``count_every`` lines.

    Purely cosmetic; disabled printers still count.
    """

    def __init__(
        self,
        enabled: bool = True,
        stream: Optional[TextIO] = None,
        dot_every: int = 10,
        count_every: int = 1000,
    ):
        self.enabled = enabled
        self.stream = stream
        self.dot_every = dot_every
        self.count_every = count_every
        self.count = 0

    def tick(self) -> None:
        self.count += 1
        if not self.enabled or self.count % self.dot_every:
            return
        out = self.stream or sys.stdout
        out.write(".")
        if self.count % self.count_every == 0:
            out.write(f" {self.count}\n")
        out.flush()

    def finish(self) -> None:
        """Terminate a partially filled row of dots."""
        if self.enabled and self.count >= self.dot_every and self.count % self.count_every:
            (self.stream or sys.stdout).write("\n")


__all__ = [
    "log_info",
    "log_warn",
    "log_error",
    "ProgressPrinter",
]
