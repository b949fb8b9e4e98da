"""Runs ListScript files, or the interactive shell when no file is given."""

import argparse
import logging
import sys

from listscript import __version__, config
from listscript.interpreter import Interpreter
from listscript.printer import to_display
from listscript import repl


def build_parser():
    parser = argparse.ArgumentParser(prog="listscript", description="ListScript interpreter")
    parser.add_argument("file", help="file to interpret and run (if empty, goes to interactive mode)", nargs="?")
    parser.add_argument("--max-depth", type=int, default=None,
                        help=f"maximum nested function calls (default {config.DEFAULT_MAX_DEPTH})")
    parser.add_argument("--max-token-length", type=int, default=None,
                        help=f"longest accepted token (default {config.DEFAULT_MAX_TOKEN_LENGTH})")
    parser.add_argument("--no-color", action="store_true", help="do not colour errors")
    parser.add_argument("-q", "--quiet", action="store_true", help="with a file, print only what write prints")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    interp = Interpreter(max_depth=args.max_depth, max_token_length=args.max_token_length)

    if args.file is None:
        repl.run(interp, color=False if args.no_color else None)
        return 0

    try:
        results = interp.run_file(args.file)
    except OSError as ex:
        print(f"listscript: cannot read {args.file}: {ex.strerror}", file=sys.stderr)
        return 1
    if not args.quiet:
        for value in results:
            print(to_display(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
