#!/usr/bin/env python3
"""
Tests for LSB-first bit packing on input and output.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import io

import pytest

from boolfuck import BitReader, BitWriter, InputExhausted, OutputFault


class BrokenSink:
    def __init__(self, fail_after):
        self.written = []
        self.fail_after = fail_after

    def write(self, data):
        if len(self.written) >= self.fail_after:
            raise OSError("disk full")
        self.written.append(bytes(data))


def test_read_order_is_lsb_first():
    reader = BitReader(bytes([0b10100011]))
    assert [reader.read_bit() for _ in range(8)] == [1, 1, 0, 0, 0, 1, 0, 1]
    assert reader.bits_read == 8


def test_write_order_is_lsb_first():
    writer = BitWriter()
    for bit in [1, 0, 0, 0, 1, 0, 1, 0]:
        writer.write_bit(bit)
    assert writer.getvalue() == bytes([0b01010001])
    assert writer.pending_bits == 0


def test_reads_from_file_objects_lazily():
    stream = io.BytesIO(b'\x01\x80')
    reader = BitReader(stream)
    assert reader.read_bit() == 1
    assert stream.tell() == 1
    for _ in range(7):
        assert reader.read_bit() == 0
    assert stream.tell() == 1
    bits = [reader.read_bit() for _ in range(8)]
    assert bits == [0] * 7 + [1]


@pytest.mark.parametrize("eof_bit", [0, 1])
def test_eof_sentinel(eof_bit):
    reader = BitReader(b'', eof_bit=eof_bit)
    assert [reader.read_bit() for _ in range(10)] == [eof_bit] * 10
    assert reader.at_eof
    assert reader.bits_read == 0


def test_eof_error_policy():
    reader = BitReader(b'\xff', eof_bit=None)
    for _ in range(8):
        reader.read_bit()
    with pytest.raises(InputExhausted):
        reader.read_bit()


def test_invalid_eof_bit():
    with pytest.raises(ValueError):
        BitReader(b'', eof_bit=2)


def test_partial_byte_discarded_on_close():
    writer = BitWriter()
    for bit in [1, 1, 1]:
        writer.write_bit(bit)
    assert writer.pending_bits == 3
    writer.close()
    assert writer.getvalue() == b''


def test_partial_byte_padded_on_close():
    writer = BitWriter(pad_partial_byte=True)
    for bit in [0, 1, 0, 1]:
        writer.write_bit(bit)
    writer.close()
    assert writer.getvalue() == b'\x0a'


def test_bytes_reach_sink_as_completed():
    sink = io.BytesIO()
    writer = BitWriter(sink)
    for _ in range(8):
        writer.write_bit(1)
    assert sink.getvalue() == b'\xff'
    writer.write_bit(1)
    assert sink.getvalue() == b'\xff'


def test_unwritable_sink_faults():
    sink = BrokenSink(fail_after=1)
    writer = BitWriter(sink)
    for _ in range(8):
        writer.write_bit(1)
    with pytest.raises(OutputFault):
        for _ in range(8):
            writer.write_bit(0)
    assert sink.written == [b'\xff']
    assert writer.getvalue() == b'\xff'


def test_write_after_close_faults():
    writer = BitWriter()
    writer.close()
    with pytest.raises(OutputFault):
        writer.write_bit(1)
