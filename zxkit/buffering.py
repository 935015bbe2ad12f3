"""Two-stage append buffer: a small RAM area that spills into a larger flash area."""

from __future__ import annotations

from dataclasses import dataclass, field

__all__ = ["BufferState", "Buffering"]


@dataclass
class BufferState:
    """One storage area with its write position and whether it is active."""

    data: bytearray = field(default_factory=bytearray)
    pos: int = 0
    in_use: bool = False

    @property
    def size(self) -> int:
        return len(self.data)

    def remaining(self) -> int:
        """Number of bytes that can still be written."""
        return self.size - self.pos


class Buffering:
    """Appends go to RAM until it overflows, then everything moves to flash."""

    def __init__(self, ram_size: int, flash_size: int) -> None:
        self.ram = BufferState(bytearray(ram_size), 0, True)
        self.flash = BufferState(bytearray(flash_size), 0, False)

    def reset(self) -> None:
        """Empty both areas and make RAM the active one again."""
        self.ram.pos = 0
        self.ram.in_use = True
        self.flash.pos = 0
        self.flash.in_use = False

    @staticmethod
    def _write(state: BufferState, data: bytes) -> None:
        state.data[state.pos:state.pos + len(data)] = data
        state.pos += len(data)

    def append(self, data: bytes) -> int:
        """Append ``data``; returns the number of bytes stored, 0 if it did not fit."""
        chunk = bytes(data)
        if self.ram.in_use:
            if self.ram.remaining() >= len(chunk):
                self._write(self.ram, chunk)
                return len(chunk)
            self.ram.in_use = False
            self.flash.in_use = True
            if self.ram.pos > 0:
                self.append(self.ram.data[:self.ram.pos])
            stored = self.append(chunk)
            self.ram.pos = 0
            return stored
        if self.flash.remaining() >= len(chunk):
            self._write(self.flash, chunk)
            return len(chunk)
        return 0

    def current(self) -> BufferState:
        """The area that is currently receiving data."""
        return self.ram if self.ram.in_use else self.flash