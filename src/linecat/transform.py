"""Stream transformation.

Two input modes:
- standard input is read lazily, one line at a time, flushed per line
- named files are read whole and written as one block each

Both apply transform_text and let the sink add the final newline.
"""

from __future__ import annotations
import logging
import sys
from typing import Iterator, Sequence, TextIO

from .errors import InputFileError, StdinReadError
from .options import OutputOptions

log = logging.getLogger(__name__)

TAB_MARK = "^I"
END_MARK = "$"

# Unicode White_Space. Unlike str.isspace, \x1c-\x1f are not included.
WHITESPACE = (
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def transform_text(text: str, options: OutputOptions) -> str:
    """Apply the enabled substitutions, then trim trailing whitespace.

    Tabs and line feeds are disjoint, so the order of the two
    substitutions does not matter.
    """
    if options.show_tabs:
        text = text.replace("\t", TAB_MARK)
    if options.show_ends:
        text = text.replace("\n", END_MARK + "\n")
    return text.rstrip(WHITESPACE)


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield lines from `stream` until it reports end of stream.

    Raises:
        StdinReadError: if a read fails.
    """
    while True:
        try:
            line = stream.readline()
        except (OSError, UnicodeDecodeError) as ex:
            raise StdinReadError(f"error reading standard input: {ex}") from ex
        if not line:
            log.debug("end of standard input")
            return
        yield line


def cat_stdin(
    options: OutputOptions,
    source: TextIO | None = None,
    sink: TextIO | None = None,
) -> int:
    """Copy `source` to `sink` line by line. Returns the number of lines written."""
    source = sys.stdin if source is None else source
    sink = sys.stdout if sink is None else sink
    count = 0
    for line in iter_lines(source):
        sink.write(transform_text(line, options) + "\n")
        sink.flush()
        count += 1
    return count


def _read_file(path: str) -> str:
    try:
        with open(path, "r", encoding="utf-8", newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as ex:
        raise InputFileError(path, ex) from ex


def cat_files(
    paths: Sequence[str],
    options: OutputOptions,
    sink: TextIO | None = None,
) -> int:
    """Write each file in order, one transformed block per file.

    The first unreadable file stops the run; blocks already written stay.

    Raises:
        InputFileError
    """
    sink = sys.stdout if sink is None else sink
    for path in paths:
        log.debug("reading %s", path)
        content = _read_file(path)
        sink.write(transform_text(content, options) + "\n")
        sink.flush()
    return len(paths)


def cat(
    paths: Sequence[str],
    options: OutputOptions,
    source: TextIO | None = None,
    sink: TextIO | None = None,
) -> int:
    """Read `paths`, or `source` (standard input) when there are none."""
    if paths:
        return cat_files(paths, options, sink)
    return cat_stdin(options, source, sink)
