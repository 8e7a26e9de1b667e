#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from boolfuck.api import RunOptions, run_file


def main():
    path = os.path.join(os.path.dirname(__file__), "programs", "hello.bf")
    # The program emits 108 bits; padding turns the last 4 into a newline.
    result = run_file(path, options=RunOptions(pad_partial_byte=True))
    sys.stdout.write(result.output.decode('ascii'))
    return int(result.status)


if __name__ == "__main__":
    raise SystemExit(main())
