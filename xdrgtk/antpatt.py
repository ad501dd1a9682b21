"""Feeding signal levels to an antenna pattern recorder over a text stream."""

from __future__ import annotations

from typing import TextIO


class AntennaPattern:
    """Speaks the line protocol of the antenna pattern tool over ``stream``.

    Set ``stream`` to None when the other end goes away; every command is
    then ignored.
    """

    def __init__(self, stream: TextIO | None) -> None:
        self.stream = stream
        self._active = False

    @property
    def active(self) -> bool:
        """Whether a measurement is in progress."""
        return self._active and self.stream is not None

    def toggle(self, freq: int) -> bool:
        """Start a measurement at ``freq`` or stop the running one."""
        if self.active:
            self.stop()
        else:
            self.start(freq)
        return self.active

    def start(self, freq: int) -> None:
        """Begin a measurement at the given frequency in kHz."""
        if self.stream is None:
            return
        self._write("START\n", flush=False)
        self._write(f"FREQ {int(freq)}\n", flush=True)
        self._active = True

    def stop(self) -> None:
        """End the current measurement."""
        if self.stream is None:
            return
        self._write("STOP\n", flush=True)
        self._active = False

    def push(self, level: float) -> None:
        """Send one signal level sample while a measurement runs."""
        if self.active:
            self._write(f"PUSH {level:.2f}\n", flush=True)

    def _write(self, text: str, flush: bool) -> None:
        assert self.stream is not None
        self.stream.write(text)
        if flush:
            self.stream.flush()