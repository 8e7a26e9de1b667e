from __future__ import annotations

import logging

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any, BinaryIO, Optional, Tuple

from .bitio import ByteSource
from .errors import BoolfuckError, RuntimeFault, StructuralError
from .interpreter import Interpreter
from .program import Program
from .tape import Tape

logger = logging.getLogger(__name__)


class ExitStatus(IntEnum):
    HALTED = 0
    STRUCTURAL_ERROR = 1
    RUNTIME_FAULT = 2


@dataclass(frozen=True)
class RunOptions:
    eof_bit: Optional[int] = 0
    max_steps: Optional[int] = None
    pad_partial_byte: bool = False
    trace: bool = False
    cancel: Any = None


@dataclass(frozen=True)
class RunResult:
    output: bytes
    status: ExitStatus
    steps: int = 0
    error: Optional[BoolfuckError] = None
    tape: Optional[Tape] = None
    trace: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.status is ExitStatus.HALTED


def run_string(
    source: str,
    input: Optional[ByteSource] = b'',
    *,
    options: Optional[RunOptions] = None,
    output: Optional[BinaryIO] = None,
) -> RunResult:
    opts = options or RunOptions()
    try:
        program = Program.from_source(source)
    except StructuralError as e:
        logger.warning("%s", e)
        return RunResult(output=b'', status=ExitStatus.STRUCTURAL_ERROR, error=e)

    interp = Interpreter(
        program,
        input,
        output,
        eof_bit=opts.eof_bit,
        pad_partial_byte=opts.pad_partial_byte,
        max_steps=opts.max_steps,
        cancel=opts.cancel,
        trace=opts.trace,
    )
    status = ExitStatus.HALTED
    error: Optional[BoolfuckError] = None
    try:
        interp.run()
    except RuntimeFault as e:
        logger.warning("Runtime fault: %s", e)
        status = ExitStatus.RUNTIME_FAULT
        error = e

    return RunResult(
        output=interp.output,
        status=status,
        steps=interp.steps,
        error=error,
        tape=interp.tape,
        trace=tuple(interp.state.trace),
    )


def run_file(
    path: str | Path,
    input: Optional[ByteSource] = b'',
    *,
    options: Optional[RunOptions] = None,
    output: Optional[BinaryIO] = None,
    encoding: str = "utf-8",
) -> RunResult:
    p = Path(path)
    return run_string(p.read_text(encoding=encoding), input, options=options, output=output)


def boolfuck(code: str, input: str = "") -> str:
    """Run ``code`` on text input and return text output.

    Characters map one-to-one onto bytes (latin-1). A trailing partial byte
    is padded with zero bits and reading past the input yields 0 bits.
    """
    result = run_string(code, input.encode('latin-1'), options=RunOptions(eof_bit=0, pad_partial_byte=True))
    if result.error is not None:
        raise result.error
    return result.output.decode('latin-1')
