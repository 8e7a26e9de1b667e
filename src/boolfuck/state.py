from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List


class RunState(Enum):
    RUNNING = 'running'
    HALTED = 'halted'
    FAULTED = 'faulted'


@dataclass
class ExecutionState:
    ip: int = 0
    steps: int = 0
    run_state: RunState = RunState.RUNNING
    trace: List[str] = field(default_factory=list)
    is_tracing: bool = False

    def add_trace(self, message: str) -> None:
        if self.is_tracing:
            self.trace.append(message)
