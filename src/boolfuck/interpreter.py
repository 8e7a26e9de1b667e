from __future__ import annotations

import logging
import time

from typing import BinaryIO, Optional, Union

from .bitio import BitReader, BitWriter, ByteSource
from .errors import Cancelled, RuntimeFault, StepBudgetExceeded
from .lexer import Instruction
from .program import Program
from .state import ExecutionState, RunState
from .tape import Tape

logger = logging.getLogger(__name__)


class Interpreter:
    """Runs one Boolfuck program against one input stream.

    The interpreter owns its tape and I/O channels for the whole run. Before
    each instruction it checks ``max_steps`` and the ``cancel`` token (any
    object with an ``is_set()`` method, such as ``threading.Event``) so a
    host can stop runaway programs; both end the run with a ``RuntimeFault``.
    """

    def __init__(
        self,
        program: Union[Program, str],
        input: Optional[ByteSource] = None,
        output: Optional[BinaryIO] = None,
        *,
        eof_bit: Optional[int] = 0,
        pad_partial_byte: bool = False,
        max_steps: Optional[int] = None,
        cancel=None,
        trace: bool = False,
    ):
        if isinstance(program, str):
            program = Program.from_source(program)
        if max_steps is not None and max_steps < 0:
            raise ValueError("max_steps must not be negative")
        self.program = program
        self.tape = Tape()
        self.reader = BitReader(input, eof_bit=eof_bit)
        self.writer = BitWriter(output, pad_partial_byte=pad_partial_byte)
        self.max_steps = max_steps
        self.cancel = cancel
        self.state = ExecutionState(is_tracing=trace)

    @property
    def ip(self) -> int:
        return self.state.ip

    @property
    def steps(self) -> int:
        return self.state.steps

    @property
    def run_state(self) -> RunState:
        return self.state.run_state

    @property
    def output(self) -> bytes:
        return self.writer.getvalue()

    def _halt(self) -> None:
        self.state.run_state = RunState.HALTED
        self.writer.close()

    def _fault(self, fault: RuntimeFault) -> None:
        ip = self.state.ip
        fault.ip = ip
        fault.steps = self.state.steps
        if ip < len(self.program):
            token = self.program.positions[ip]
            fault.line = token.line
            fault.column = token.column
            fault.message = f"{fault.message} (line {token.line}, column {token.column})"
        self.state.run_state = RunState.FAULTED

    def _check_limits(self) -> None:
        state = self.state
        if self.max_steps is not None and state.steps >= self.max_steps:
            raise StepBudgetExceeded(message=f"Step budget of {self.max_steps} exceeded at instruction {state.ip}")
        if self.cancel is not None and self.cancel.is_set():
            raise Cancelled(message=f"Run cancelled at instruction {state.ip}")

    def step(self) -> bool:
        """Execute one instruction. Returns True while the program keeps running."""
        state = self.state
        if state.run_state is not RunState.RUNNING:
            return False
        program = self.program
        if state.ip >= len(program):
            self._halt()
            return False

        try:
            self._check_limits()
            tape = self.tape
            ip = state.ip
            command = program[ip]

            if command is Instruction.TOGGLE:
                tape.toggle()
                ip += 1
            elif command is Instruction.RIGHT:
                tape.move(1)
                ip += 1
            elif command is Instruction.LEFT:
                tape.move(-1)
                ip += 1
            elif command is Instruction.READ:
                tape.write_current(self.reader.read_bit())
                ip += 1
            elif command is Instruction.WRITE:
                self.writer.write_bit(tape.read_current())
                ip += 1
            elif command is Instruction.JUMP_FORWARD:
                if tape.read_current() == 0:
                    ip = program.match(ip) + 1
                else:
                    ip += 1
            elif command is Instruction.JUMP_BACKWARD:
                if tape.read_current() != 0:
                    ip = program.match(ip) + 1
                else:
                    ip += 1
        except RuntimeFault as e:
            self._fault(e)
            raise

        if state.is_tracing:
            line = f"{state.steps:8d} ip={state.ip:<6d} {command.symbol} ptr={tape.pointer:<6d} bit={tape.read_current()}"
            state.add_trace(line)
            logger.debug(line)

        state.ip = ip
        state.steps += 1
        if ip >= len(program):
            self._halt()
            return False
        return True

    def run(self) -> bytes:
        """Run until the program halts and return every byte written.

        Raises ``RuntimeFault`` if the run faults; bytes written before the
        fault stay available through ``output``.
        """
        logger.info("Running %d instructions", len(self.program))
        start = time.perf_counter()
        while self.step():
            pass
        elapsed = (time.perf_counter() - start) * 1000
        logger.info("Halted after %d steps in %.2f ms, %d bytes out", self.state.steps, elapsed, len(self.output))
        return self.output
