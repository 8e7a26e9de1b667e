from __future__ import annotations

from typing import Tuple

import numpy as np


class Tape:
    """Bit tape, unbounded in both directions.

    Position ``p >= 0`` lives at ``right[p]`` and position ``p < 0`` at
    ``left[-p - 1]``. Both halves are numpy ``uint8`` buffers that double in
    size when the pointer walks past their end, so every operation is
    amortized O(1) and untouched positions read 0.
    """

    def __init__(self, initial_size: int = 64):
        if initial_size < 1:
            raise ValueError("initial_size must be positive")
        self.right = np.zeros(initial_size, dtype=np.uint8)
        self.left = np.zeros(initial_size, dtype=np.uint8)
        self.pointer = 0
        self._low = 0
        self._high = 0

    @staticmethod
    def _grown(buf: np.ndarray, index: int) -> np.ndarray:
        size = len(buf)
        while size <= index:
            size *= 2
        out = np.zeros(size, dtype=np.uint8)
        out[:len(buf)] = buf
        return out

    def _slot(self, position: int) -> Tuple[np.ndarray, int]:
        if position >= 0:
            if position >= len(self.right):
                self.right = self._grown(self.right, position)
            return self.right, position
        index = -position - 1
        if index >= len(self.left):
            self.left = self._grown(self.left, index)
        return self.left, index

    def move(self, delta: int) -> None:
        self.pointer += delta
        if self.pointer < self._low:
            self._low = self.pointer
        elif self.pointer > self._high:
            self._high = self.pointer

    def read_current(self) -> int:
        return self.bit_at(self.pointer)

    def write_current(self, bit: int) -> None:
        buf, index = self._slot(self.pointer)
        buf[index] = 1 if bit else 0

    def toggle(self) -> None:
        buf, index = self._slot(self.pointer)
        buf[index] ^= 1

    def bit_at(self, position: int) -> int:
        if position >= 0:
            if position >= len(self.right):
                return 0
            return int(self.right[position])
        index = -position - 1
        if index >= len(self.left):
            return 0
        return int(self.left[index])

    def bounds(self) -> Tuple[int, int]:
        """Lowest and highest position the pointer has visited."""
        return self._low, self._high

    def window(self, start: int, stop: int) -> np.ndarray:
        """Copy of the bits at positions ``start`` up to (excluding) ``stop``."""
        if stop < start:
            raise ValueError("stop must not be lower than start")
        out = np.zeros(stop - start, dtype=np.uint8)
        # negative half, stored in reverse order
        if start < 0:
            lo = max(start, -len(self.left))
            hi = min(stop, 0)
            if hi > lo:
                out[lo - start:hi - start] = self.left[-hi:-lo][::-1]
        if stop > 0:
            lo = max(start, 0)
            hi = min(stop, len(self.right))
            if hi > lo:
                out[lo - start:hi - start] = self.right[lo:hi]
        return out

    def __repr__(self) -> str:
        return f"Tape(pointer={self.pointer}, bounds={self.bounds()})"
