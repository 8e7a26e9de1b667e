from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional


def _build_context(lines: List[str], line_no_1: int, column_1: int, *, context: int = 2) -> str:
    idx = max(1, min(line_no_1, len(lines)))
    start = max(1, idx - context)
    end = min(len(lines), idx + context)

    out: List[str] = []
    for i in range(start, end + 1):
        prefix = '>' if i == idx else ' '
        out.append(f"{prefix} {i:4d} | {lines[i - 1]}")
        if i == idx:
            out.append(f"       | {' ' * max(0, column_1 - 1)}^")
    return "\n".join(out)


def _hint_for(message: str) -> Optional[str]:
    msg = message.lower()
    if "unmatched ']'" in msg:
        return "Remove the extra ']' or add the missing '[' before it."
    if "unmatched '['" in msg:
        return "Add the missing ']' that closes this loop."
    return None


@dataclass
class BoolfuckError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class StructuralError(BoolfuckError):
    offset: int
    line: int
    column: int
    context: str


@dataclass
class RuntimeFault(BoolfuckError):
    ip: int = 0
    steps: int = 0
    line: Optional[int] = None
    column: Optional[int] = None


@dataclass
class StepBudgetExceeded(RuntimeFault):
    pass


@dataclass
class Cancelled(RuntimeFault):
    pass


@dataclass
class InputExhausted(RuntimeFault):
    pass


@dataclass
class OutputFault(RuntimeFault):
    pass


def make_structural_error(*, message: str, source: str, offset: int, line: int, column: int) -> StructuralError:
    lines = source.split('\n')
    ctx = _build_context(lines, line, column)
    hint = _hint_for(message)
    hint_block = f"\nHint: {hint}" if hint else ""
    return StructuralError(
        message=f"StructuralError: {message} (line {line}, column {column})\n{ctx}{hint_block}",
        offset=offset,
        line=line,
        column=column,
        context=ctx,
    )
