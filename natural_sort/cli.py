"""Sort lines of text in natural order.

Reads files (or stdin), sorts lines so that numbers inside them
compare numerically and writes the result to stdout:

    $ ls | natsort-lines
    file1.txt
    file2.txt
    file11.txt
"""

import argparse
import logging
import sys

from typing import IO, Any, Callable, List, Optional, Sequence

from natural_sort.slicesort import (
    natural_sort, natural_sort_by_cached_key,
    natural_sort_unstable, natural_sort_unstable_by_key,
)
from natural_sort.sortable import ASCII, STR, NaturalSortable

__all__ = ['main', 'sort_lines', 'read_lines']

PROG = "natsort-lines"

log = logging.getLogger(__name__)


def eprintf(msg: str, *args: Any) -> None:
    if args:
        msg = msg % args
    sys.stderr.write(PROG + ": " + msg + "\n")
    sys.stderr.flush()


def read_lines(fd: IO[bytes]) -> List[bytes]:
    """Read all lines, without line terminators."""
    lines = fd.read().split(b"\n")
    if lines and lines[-1] == b"":
        lines.pop()
    return [ln[:-1] if ln.endswith(b"\r") else ln for ln in lines]


def _field_key(field: int) -> Callable[[Any], Any]:
    """Return key func that picks 1-based whitespace-separated field."""
    idx = field - 1

    def key(ln: Any) -> Any:
        parts = ln.split()
        if idx < len(parts):
            return parts[idx]
        return ln[:0]
    return key


def sort_lines(lines: List[Any], view: NaturalSortable = STR, reverse: bool = False,
               unstable: bool = False, field: Optional[int] = None) -> None:
    """Sort lines in-place.

    @param lines: list of str for STR view, bytes for ASCII
    @param field: sort by this field (1-based) instead of whole line
    """
    if field:
        key = _field_key(field)
        if unstable:
            natural_sort_unstable_by_key(lines, key, view)
        else:
            natural_sort_by_cached_key(lines, key, view, reverse=reverse)
    elif unstable:
        natural_sort_unstable(lines, view)
    else:
        natural_sort(lines, view, reverse=reverse)

    if unstable and reverse:
        lines.reverse()


def _setup_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, stream=sys.stderr,
                        format=PROG + ": %(levelname)s %(name)s: %(message)s")


def _load(files: Sequence[str]) -> List[bytes]:
    lines: List[bytes] = []
    for fn in files:
        if fn == "-":
            chunk = read_lines(sys.stdin.buffer)
        else:
            with open(fn, "rb") as f:
                chunk = read_lines(f)
        log.info("%s: %d lines", fn, len(chunk))
        lines.extend(chunk)
    return lines


def _store(lines: Sequence[bytes], fd: IO[bytes]) -> None:
    for ln in lines:
        fd.write(ln)
        fd.write(b"\n")
    fd.flush()


def _positive(val: str) -> int:
    n = int(val)
    if n < 1:
        raise argparse.ArgumentTypeError("must be >= 1: %r" % val)
    return n


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort lines in natural order.
    """
    p = argparse.ArgumentParser(
        prog=PROG,
        description=main.__doc__,
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    p.add_argument("files", metavar="FILE", nargs="*", help="input files, - for stdin")
    p.add_argument("-b", "--bytes", dest="ascii", action="store_true",
                   help="compare raw bytes instead of UTF-8 text")
    p.add_argument("-r", "--reverse", action="store_true", help="reverse the result")
    p.add_argument("-u", "--unstable", action="store_true", help="use unstable in-place sort")
    p.add_argument("-f", "--field", type=_positive, help="sort by N-th whitespace-separated field")
    p.add_argument("-o", "--output", help="write result to file instead of stdout")
    p.add_argument("-v", dest="verbose", action="count", default=0, help="more messages")
    p.add_argument("-q", dest="quiet", action="store_true", help="errors only")
    args = p.parse_args(sys.argv[1:] if argv is None else argv)

    _setup_logging(args.verbose, args.quiet)

    try:
        raw = _load(args.files or ["-"])
    except OSError as ex:
        eprintf("%s", ex)
        return 1

    view = ASCII if args.ascii else STR
    log.debug("sorting %d lines as %s", len(raw), view.name)
    if view is ASCII:
        sort_lines(raw, view, args.reverse, args.unstable, args.field)
        result = raw
    else:
        # surrogateescape keeps invalid UTF-8 intact on output
        text = [ln.decode("utf8", "surrogateescape") for ln in raw]
        sort_lines(text, view, args.reverse, args.unstable, args.field)
        result = [ln.encode("utf8", "surrogateescape") for ln in text]

    try:
        if args.output:
            with open(args.output, "wb") as f:
                _store(result, f)
        else:
            _store(result, sys.stdout.buffer)
    except OSError as ex:
        eprintf("%s", ex)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
