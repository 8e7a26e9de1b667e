from __future__ import annotations

import logging

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, List, Mapping, Tuple

from .errors import make_structural_error
from .lexer import Instruction, Token, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Program:
    instructions: Tuple[Instruction, ...]
    positions: Tuple[Token, ...]
    jump_table: Mapping[int, int]

    @classmethod
    def from_source(cls, source: str) -> "Program":
        tokens = tokenize(source)
        jump_table = _build_jump_table(tokens, source)
        program = cls(
            instructions=tuple(t.instruction for t in tokens),
            positions=tuple(tokens),
            jump_table=MappingProxyType(jump_table),
        )
        logger.debug("Parsed %d instructions, %d loops", len(program), len(jump_table) // 2)
        return program

    def __len__(self) -> int:
        return len(self.instructions)

    def __getitem__(self, index: int) -> Instruction:
        return self.instructions[index]

    def __iter__(self) -> Iterator[Instruction]:
        return iter(self.instructions)

    def match(self, index: int) -> int:
        """Index of the bracket paired with the bracket at ``index``."""
        try:
            return self.jump_table[index]
        except KeyError:
            raise ValueError(f"No bracket at instruction {index}") from None

    def to_source(self) -> str:
        return ''.join(i.symbol for i in self.instructions)


def _build_jump_table(tokens: List[Token], source: str) -> dict:
    jump_table = {}
    stack: List[int] = []
    for index, token in enumerate(tokens):
        if token.instruction is Instruction.JUMP_FORWARD:
            stack.append(index)
        elif token.instruction is Instruction.JUMP_BACKWARD:
            if not stack:
                raise make_structural_error(
                    message="unmatched ']'",
                    source=source,
                    offset=token.offset,
                    line=token.line,
                    column=token.column,
                )
            start = stack.pop()
            jump_table[start] = index
            jump_table[index] = start

    if stack:
        token = tokens[stack[-1]]
        raise make_structural_error(
            message="unmatched '['",
            source=source,
            offset=token.offset,
            line=token.line,
            column=token.column,
        )
    return jump_table


def parse(source: str) -> Program:
    return Program.from_source(source)
