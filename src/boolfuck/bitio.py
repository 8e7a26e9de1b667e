"""
Bit-level adapters between the interpreter and byte streams.

Bits are packed least-significant first: the first bit read from an input
byte is ``byte & 1`` and the first bit written becomes bit 0 of the next
output byte.

>>> r = BitReader(bytes([0b10100011]))
>>> [r.read_bit() for _ in range(8)]
[1, 1, 0, 0, 0, 1, 0, 1]
>>> w = BitWriter()
>>> for bit in [1, 0, 0, 0, 1, 0, 1, 0]:
...     w.write_bit(bit)
>>> w.getvalue() == bytes([0b01010001])
True
"""

from __future__ import annotations

import io
from typing import BinaryIO, Optional, Union

from .errors import InputExhausted, OutputFault

ByteSource = Union[bytes, bytearray, memoryview, BinaryIO]


class BitReader:
    def __init__(self, source: Optional[ByteSource] = None, eof_bit: Optional[int] = 0):
        if eof_bit not in (0, 1, None):
            raise ValueError(f"eof_bit must be 0, 1 or None, not {eof_bit!r}")
        if source is None:
            source = b''
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(bytes(source))
        elif not hasattr(source, 'read'):
            raise TypeError(f"Incompatible input source: {source!r}")
        self.source = source
        self.eof_bit = eof_bit
        self.bits_read = 0
        self.at_eof = False
        self._byte = 0
        self._remaining = 0

    def _next_byte(self) -> bool:
        if self.at_eof:
            return False
        chunk = self.source.read(1)
        if not chunk:
            self.at_eof = True
            return False
        self._byte = chunk[0]
        self._remaining = 8
        return True

    def read_bit(self) -> int:
        if self._remaining == 0 and not self._next_byte():
            if self.eof_bit is None:
                raise InputExhausted(message=f"Input exhausted after {self.bits_read} bits")
            return self.eof_bit
        bit = self._byte & 1
        self._byte >>= 1
        self._remaining -= 1
        self.bits_read += 1
        return bit


class BitWriter:
    def __init__(self, sink: Optional[BinaryIO] = None, pad_partial_byte: bool = False):
        self.sink = sink
        self.pad_partial_byte = pad_partial_byte
        self.bits_written = 0
        self.closed = False
        self._buffer = bytearray()
        self._byte = 0
        self._pending = 0

    @property
    def pending_bits(self) -> int:
        return self._pending

    def write_bit(self, bit: int) -> None:
        if self.closed:
            raise OutputFault(message="write to a closed output channel")
        if bit:
            self._byte |= 1 << self._pending
        self._pending += 1
        self.bits_written += 1
        if self._pending == 8:
            self._emit()

    def _emit(self) -> None:
        value = self._byte
        self._byte = 0
        self._pending = 0
        if self.sink is not None:
            try:
                self.sink.write(bytes((value,)))
                flush = getattr(self.sink, 'flush', None)
                if flush is not None:
                    flush()
            except (OSError, ValueError) as e:
                raise OutputFault(message=f"Output stream unwritable: {e}") from e
        # only bytes the sink accepted count as output
        self._buffer.append(value)

    def close(self) -> None:
        """Finish the stream. A partial byte is dropped unless padding was requested."""
        if self.closed:
            return
        if self._pending and self.pad_partial_byte:
            self._emit()
        self._byte = 0
        self._pending = 0
        self.closed = True

    def getvalue(self) -> bytes:
        return bytes(self._buffer)
