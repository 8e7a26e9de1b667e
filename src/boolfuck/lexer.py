from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class Instruction(Enum):
    TOGGLE = 'toggle'
    LEFT = 'left'
    RIGHT = 'right'
    READ = 'read'
    WRITE = 'write'
    JUMP_FORWARD = 'jump_forward'
    JUMP_BACKWARD = 'jump_backward'

    @property
    def symbol(self) -> str:
        return _CANONICAL_SYMBOLS[self]


# '-' is a second spelling of '+' (flipping a bit is its own inverse) and
# '.' a second spelling of ';'.
SYMBOLS: Dict[str, Instruction] = {
    '+': Instruction.TOGGLE,
    '-': Instruction.TOGGLE,
    '<': Instruction.LEFT,
    '>': Instruction.RIGHT,
    ',': Instruction.READ,
    ';': Instruction.WRITE,
    '.': Instruction.WRITE,
    '[': Instruction.JUMP_FORWARD,
    ']': Instruction.JUMP_BACKWARD,
}

_CANONICAL_SYMBOLS: Dict[Instruction, str] = {
    Instruction.TOGGLE: '+',
    Instruction.LEFT: '<',
    Instruction.RIGHT: '>',
    Instruction.READ: ',',
    Instruction.WRITE: ';',
    Instruction.JUMP_FORWARD: '[',
    Instruction.JUMP_BACKWARD: ']',
}


@dataclass(frozen=True)
class Token:
    instruction: Instruction
    offset: int
    line: int
    column: int

    @property
    def symbol(self) -> str:
        return self.instruction.symbol


def tokenize(source: str) -> List[Token]:
    """Return the instruction tokens of ``source``.

    Any character outside the command symbols is a comment and is
    skipped. Lines and columns are 1-based.
    """
    tokens: List[Token] = []
    line = 1
    line_start = 0
    for offset, ch in enumerate(source):
        if ch == '\n':
            line += 1
            line_start = offset + 1
            continue
        instruction = SYMBOLS.get(ch)
        if instruction is None:
            continue
        tokens.append(Token(instruction, offset, line, offset - line_start + 1))
    return tokens
