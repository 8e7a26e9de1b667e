#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from boolfuck.api import ExitStatus, RunOptions, run_file


def main():
    path = os.path.join(os.path.dirname(__file__), "programs", "spin.bf")
    result = run_file(path, options=RunOptions(max_steps=100_000))

    if result.status is ExitStatus.RUNTIME_FAULT:
        print(f"Stopped: {result.error}")
        return 0
    print("Program halted on its own?")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
