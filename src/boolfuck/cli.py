from __future__ import annotations

import argparse
import logging
import sys

from typing import List, Optional

from .api import ExitStatus, RunOptions, run_string
from .render import save_tape_image

logger = logging.getLogger('boolfuck')


def _eof_policy(value: str) -> Optional[int]:
    if value == 'error':
        return None
    if value in ('0', '1'):
        return int(value)
    raise argparse.ArgumentTypeError("expected 0, 1 or error")


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="boolfuck",
        description="Run a Boolfuck program. Program output is written to stdout as raw bytes.",
    )
    parser.add_argument("program", help="Program file, or - to read the program from stdin")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("-i", "--input", metavar="FILE", help="Read program input from FILE")
    source.add_argument("-t", "--input-text", metavar="TEXT", help="Use TEXT (UTF-8) as program input")
    parser.add_argument("--eof", type=_eof_policy, default=0, metavar="{0,1,error}",
                        help="Bit read past the end of input, or error to fault (default 0)")
    parser.add_argument("--max-steps", type=int, default=None, help="Fault after this many instructions")
    parser.add_argument("--pad-output", action="store_true", help="Emit a trailing partial byte zero-padded")
    parser.add_argument("--trace", action="store_true", help="Log every executed instruction")
    parser.add_argument("--dump-tape", metavar="PNG", help="Save an image of the tape around the pointer")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More diagnostics on stderr")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(2 if args.trace else args.verbose)

    if args.program == '-':
        if args.input is None and args.input_text is None:
            parser.error("reading the program from stdin requires --input or --input-text")
        code = sys.stdin.read()
    else:
        try:
            with open(args.program, 'r', encoding='utf-8') as f:
                code = f.read()
        except OSError as e:
            logger.error("Couldn't read program %s: %s", args.program, e)
            return int(ExitStatus.RUNTIME_FAULT)

    if args.input_text is not None:
        data = args.input_text.encode('utf-8')
    elif args.input is not None:
        try:
            with open(args.input, 'rb') as f:
                data = f.read()
        except OSError as e:
            logger.error("Couldn't read input %s: %s", args.input, e)
            return int(ExitStatus.RUNTIME_FAULT)
    else:
        data = sys.stdin.buffer

    options = RunOptions(
        eof_bit=args.eof,
        max_steps=args.max_steps,
        pad_partial_byte=args.pad_output,
        trace=args.trace,
    )
    result = run_string(code, data, options=options, output=sys.stdout.buffer)
    status = result.status
    try:
        sys.stdout.buffer.flush()
    except (OSError, ValueError) as e:
        logger.warning("Output stream unwritable: %s", e)
        status = ExitStatus.RUNTIME_FAULT

    if args.dump_tape and result.tape is not None:
        path = save_tape_image(result.tape, args.dump_tape, steps=result.steps)
        logger.info("Tape image written to %s", path)

    return int(status)


if __name__ == "__main__":
    raise SystemExit(main())
