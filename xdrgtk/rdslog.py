"""Writing decoded RDS data to dated log files."""

from __future__ import annotations

import os
import time
from pathlib import Path
from typing import TextIO

DEFAULT_LOG_DIR = os.path.join(".", "logs")


def replace_spaces(text: str) -> str:
    """Return text with every space replaced by an underscore."""
    return text.replace(" ", "_")


class RdsLogger:
    """Appends RDS events to a log file created lazily on the first event.

    The file lives in ``<directory>/<YYYY-MM-DD>/<frequency>-<HHMMSS>.txt``.
    """

    def __init__(
        self,
        directory: str | os.PathLike | None,
        frequency: int,
        utc: bool,
        replace_spaces: bool,
        enabled: bool,
    ) -> None:
        self.directory = directory
        self.frequency = frequency
        self.utc = utc
        self.replace_spaces = replace_spaces
        self.enabled = enabled
        self._file: TextIO | None = None
        self.path: Path | None = None
        self._ps_last = ""
        self._ps_last_error = True
        self._rt_last = ["", ""]

    @property
    def is_open(self) -> bool:
        return self._file is not None

    def _time(self, fmt: str) -> str:
        now = time.time()
        parts = time.gmtime(now) if self.utc else time.localtime(now)
        return time.strftime(fmt, parts)

    def _prepare(self) -> bool:
        if not self.enabled:
            self.close()
            return False
        if self._file is not None:
            return True

        directory = Path(self.directory) if self.directory else Path(DEFAULT_LOG_DIR)
        self._ps_last = ""
        self._ps_last_error = True
        self._rt_last = ["", ""]

        day = self._time("%Y-%m-%d")
        clock = self._time("%H%M%SZ" if self.utc else "%H%M%S")
        day_dir = directory / day
        day_dir.mkdir(parents=True, exist_ok=True)
        self.path = day_dir / f"{self.frequency}-{clock}.txt"
        self._file = open(self.path, "w", encoding="utf-8")
        return True

    def _write_line(self, text: str) -> None:
        assert self._file is not None
        stamp = self._time("%Y-%m-%d %H:%M:%SZ" if self.utc else "%Y-%m-%d %H:%M:%S")
        self._file.write(f"{stamp}\t{text}\n")
        self._file.flush()

    def _text(self, text: str) -> str:
        return replace_spaces(text) if self.replace_spaces else text

    def close(self) -> None:
        """Close the current log file, if any."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def log_pi(self, pi: int, err_level: int) -> None:
        if not self._prepare():
            return
        line = f"PI\t{pi:04X}"
        if err_level > 0:
            line += "\t" + "?" * err_level
        self._write_line(line)

    def log_af(self, af: str) -> None:
        if not self._prepare():
            return
        self._write_line(f"AF\t{af}")

    def log_ps(self, ps: str, error: bool) -> None:
        if not self._prepare():
            return
        if ps == self._ps_last and bool(error) == self._ps_last_error:
            return
        self._ps_last = ps
        self._ps_last_error = bool(error)
        line = f"PS\t{self._text(ps)}"
        if error:
            line += "\t?"
        self._write_line(line)

    def log_rt(self, index: int, rt: str) -> None:
        if index not in (0, 1):
            raise ValueError(f"radiotext index must be 0 or 1, not {index}")
        if not self._prepare():
            return
        if rt == self._rt_last[index]:
            return
        self._rt_last[index] = rt
        self._write_line(f"RT{index + 1}\t{self._text(rt)}")

    def log_pty(self, pty: str) -> None:
        if not self._prepare():
            return
        self._write_line(f"PTY\t{pty}")

    def log_ecc(self, ecc: str, ecc_raw: int) -> None:
        if not self._prepare():
            return
        if ecc == "??":
            self._write_line(f"ECC\t?? ({ecc_raw:02X})")
        else:
            self._write_line(f"ECC\t{ecc}")

    def log_ct(self, datetime_text: str) -> None:
        if not self._prepare():
            return
        self._write_line(f"CT\t{datetime_text}")

    def __enter__(self) -> "RdsLogger":
        return self

    def __exit__(self, *args) -> None:
        self.close()