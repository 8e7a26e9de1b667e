#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from boolfuck.api import run_file


def main():
    path = os.path.join(os.path.dirname(__file__), "programs", "reverse_bits.bf")

    # Type a character then press enter
    data = sys.stdin.buffer.read(1)
    result = run_file(path, data)
    for before, after in zip(data, result.output):
        print(f"{before:08b} -> {after:08b}")
    return int(result.status)


if __name__ == "__main__":
    raise SystemExit(main())
