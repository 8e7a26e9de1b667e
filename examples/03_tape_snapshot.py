#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from boolfuck import Interpreter
from boolfuck.render import save_tape_image


def main():
    # Checkerboard of 16 bits to the left of the origin, then back to 0.
    code = "<+<<+<<+<<+<<+<<+<<+<<+" + ">" * 15
    interp = Interpreter(code)
    interp.run()

    out_path = os.path.join(os.path.dirname(__file__), "_tape.png")
    save_tape_image(interp.tape, out_path, radius=24, steps=interp.steps)
    print(f"Tape image written to {out_path}")


if __name__ == "__main__":
    main()
