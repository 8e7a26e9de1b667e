#!/usr/bin/env python3
"""
Tests for the unbounded bit tape.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

import pytest

from boolfuck import Tape


def test_untouched_reads_zero():
    tape = Tape()
    assert tape.read_current() == 0
    assert tape.bit_at(10_000) == 0
    assert tape.bit_at(-10_000) == 0


def test_toggle_parity():
    tape = Tape()
    for count in range(1, 8):
        before = tape.read_current()
        for _ in range(count):
            tape.toggle()
        expected = before if count % 2 == 0 else 1 - before
        assert tape.read_current() == expected


def test_values_survive_moves():
    tape = Tape(initial_size=1)
    tape.move(17)
    tape.toggle()
    tape.move(-18)
    tape.toggle()
    tape.move(1)
    assert tape.read_current() == 0
    assert tape.bit_at(17) == 1
    assert tape.bit_at(-1) == 1
    assert tape.bit_at(0) == 0


def test_grows_far_in_both_directions():
    tape = Tape(initial_size=4)
    for _ in range(50_000):
        tape.move(1)
    tape.toggle()
    for _ in range(100_000):
        tape.move(-1)
    tape.toggle()
    assert tape.pointer == -50_000
    assert tape.bit_at(50_000) == 1
    assert tape.bit_at(-50_000) == 1
    assert tape.bounds() == (-50_000, 50_000)


def test_write_current():
    tape = Tape()
    tape.write_current(1)
    assert tape.read_current() == 1
    tape.write_current(0)
    assert tape.read_current() == 0


def test_window_spans_origin():
    tape = Tape()
    for pos in (-3, -1, 0, 2):
        tape.move(pos - tape.pointer)
        tape.toggle()
    assert tape.window(-4, 4).tolist() == [0, 1, 0, 1, 1, 0, 1, 0]
    assert tape.window(100, 103).tolist() == [0, 0, 0]
    assert tape.window(-200, -198).tolist() == [0, 0]
    with pytest.raises(ValueError):
        tape.window(3, 1)


def test_initial_size_must_be_positive():
    with pytest.raises(ValueError):
        Tape(initial_size=0)
