#!/usr/bin/env python3
"""
Tests for the command line entry point.
"""

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from boolfuck.cli import main


class BrokenPipeBuffer:
    def write(self, data):
        raise BrokenPipeError(32, "Broken pipe")

    def flush(self):
        raise BrokenPipeError(32, "Broken pipe")


class BrokenStdout:
    def __init__(self):
        self.buffer = BrokenPipeBuffer()


def _write(tmp_path, name, code):
    path = tmp_path / name
    path.write_text(code, encoding="utf-8")
    return str(path)


def test_echo_text_input(tmp_path, capsysbinary):
    program = _write(tmp_path, "echo.bf", ",;" * 16)
    assert main([program, "-t", "ok"]) == 0
    assert capsysbinary.readouterr().out == b'ok'


def test_input_file(tmp_path, capsysbinary):
    program = _write(tmp_path, "echo.bf", ",;" * 8)
    data = tmp_path / "in.bin"
    data.write_bytes(b'\xfe')
    assert main([program, "-i", str(data)]) == 0
    assert capsysbinary.readouterr().out == b'\xfe'


def test_structural_error_exit_code(tmp_path, capsysbinary):
    program = _write(tmp_path, "bad.bf", "+[;")
    assert main([program, "-t", ""]) == 1
    err = capsysbinary.readouterr().err
    assert b"unmatched '['" in err


def test_step_budget_exit_code(tmp_path, capsysbinary):
    program = _write(tmp_path, "loop.bf", "+[]")
    assert main([program, "-t", "", "--max-steps", "500"]) == 2
    assert b"Step budget" in capsysbinary.readouterr().err


def test_eof_error_policy(tmp_path, capsysbinary):
    program = _write(tmp_path, "read.bf", ",")
    assert main([program, "-t", "", "--eof", "error"]) == 2
    assert main([program, "-t", "", "--eof", "1"]) == 0


def test_pad_output(tmp_path, capsysbinary):
    program = _write(tmp_path, "bit.bf", "+;")
    assert main([program, "-t", "", "--pad-output"]) == 0
    assert capsysbinary.readouterr().out == b'\x01'


def test_unreadable_files_are_runtime_faults(tmp_path, capsysbinary):
    assert main([str(tmp_path / "nope.bf"), "-t", ""]) == 2
    program = _write(tmp_path, "echo.bf", ",;" * 8)
    assert main([program, "-i", str(tmp_path / "missing.bin")]) == 2


def test_dump_tape(tmp_path, capsysbinary):
    program = _write(tmp_path, "t.bf", "+>+>+")
    image = tmp_path / "tape.png"
    assert main([program, "-t", "", "--dump-tape", str(image)]) == 0
    assert image.exists()
    assert image.read_bytes()[:8] == b'\x89PNG\r\n\x1a\n'


def test_broken_pipe_exits_with_runtime_fault(tmp_path, capsys, monkeypatch):
    program = _write(tmp_path, "bytes.bf", "+" + ";" * 8)
    monkeypatch.setattr(sys, "stdout", BrokenStdout())
    assert main([program, "-t", ""]) == 2
    assert "unwritable" in capsys.readouterr().err
