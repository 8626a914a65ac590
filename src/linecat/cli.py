"""Command-line interface for linecat.

- parses flags into a FlagSet
- resolves them into OutputOptions
- concatenates the named files, or standard input if none are named
"""

from __future__ import annotations
import argparse
import logging
import os
import sys

from . import __version__
from .errors import LinecatError
from .options import FlagSet, resolve
from .transform import cat

log = logging.getLogger(__name__)

PROG = "linecat"

EXIT_ERROR = 1
EXIT_BROKEN_PIPE = 141
EXIT_INTERRUPT = 130


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=PROG,
        description="Concatenate files to standard output, optionally showing tabs and line ends.",
    )
    p.add_argument("-A", "--show-all", dest="all", action="store_true", help="Show tabs and line ends.")
    p.add_argument("-e", dest="show_end", action="store_true", help="Show $ at the end of each line.")
    p.add_argument("-t", dest="show_tab", action="store_true", help="Show TAB characters as ^I.")
    p.add_argument("-E", "--show-ends", dest="show_end_partial", action="store_true",
                   help="Show $ at line ends (needs -v).")
    p.add_argument("-T", "--show-tabs", dest="show_tab_partial", action="store_true",
                   help="Show TAB characters as ^I (needs -v).")
    p.add_argument("-v", "--show-nonprinting", dest="show_non_printing", action="store_true",
                   help="Enable -E and -T.")
    p.add_argument("--verbose", action="store_true", help="Log debug output to stderr.")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("files", nargs="*", help="Input files. Reads standard input if none are given.")
    return p


def _setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(name)s: %(levelname)s: %(message)s"))
    root = logging.getLogger(PROG)
    root.handlers[:] = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _silence_stdout() -> None:
    # Point stdout at devnull so the flush at interpreter exit stays quiet.
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    options = resolve(FlagSet.from_namespace(args))
    log.debug("inputs: %s", args.files or "<stdin>")

    try:
        cat(args.files, options)
    except LinecatError as ex:
        sys.stderr.write(f"{PROG}: {ex}\n")
        return EXIT_ERROR
    except BrokenPipeError:
        log.debug("output closed by reader")
        _silence_stdout()
        return EXIT_BROKEN_PIPE
    except KeyboardInterrupt:
        sys.stderr.write("\n")
        return EXIT_INTERRUPT
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
