#!/usr/bin/env python3

import os
import subprocess
import sys


ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

EXAMPLES = [
    # (script, stdin, text the output must contain)
    ("examples/00_hello_world.py", None, "Hello, world!\n"),
    ("examples/01_reverse_bits.py", "A", "01000001 -> 10000010"),
    ("examples/02_step_budget.py", None, "Step budget of 100000 exceeded"),
    ("examples/03_tape_snapshot.py", None, "Tape image written"),
]


def main() -> int:
    print("=== Boolfuck Examples Verification ===")

    failed = 0
    for script, stdin, expected in EXAMPLES:
        try:
            p = subprocess.run([sys.executable, script], input=stdin, text=True,
                               capture_output=True, cwd=ROOT, timeout=30)
        except subprocess.TimeoutExpired:
            print(f"[FAIL] {script}: timed out")
            failed += 1
            continue

        if p.returncode == 0 and expected in p.stdout:
            print(f"[PASS] {script}")
            continue

        failed += 1
        print(f"[FAIL] {script}: expected output containing {expected!r}, return code {p.returncode}")
        print(p.stdout[-2000:])
        print(p.stderr[-2000:])

    if failed:
        print(f"\n{failed} example(s) FAILED.")
        return 1
    print("\nAll examples passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
