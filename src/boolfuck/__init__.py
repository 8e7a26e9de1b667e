from .api import ExitStatus, RunOptions, RunResult, boolfuck, run_file, run_string
from .bitio import BitReader, BitWriter
from .errors import (
    BoolfuckError,
    Cancelled,
    InputExhausted,
    OutputFault,
    RuntimeFault,
    StepBudgetExceeded,
    StructuralError,
)
from .interpreter import Interpreter
from .lexer import Instruction, tokenize
from .program import Program, parse
from .state import RunState
from .tape import Tape

__all__ = [
    'Interpreter',
    'Program',
    'parse',
    'tokenize',
    'Instruction',
    'Tape',
    'BitReader',
    'BitWriter',
    'RunState',
    'RunOptions',
    'RunResult',
    'ExitStatus',
    'run_string',
    'run_file',
    'boolfuck',
    'BoolfuckError',
    'StructuralError',
    'RuntimeFault',
    'StepBudgetExceeded',
    'Cancelled',
    'InputExhausted',
    'OutputFault',
]
