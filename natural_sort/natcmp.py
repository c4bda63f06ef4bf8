"""Natural compare of byte strings.

Compares numeric parts numerically.

Rules:

* Both strings are scanned left to right in lock-step.
* If both current bytes are ASCII digits, the digit runs starting there
  are compared numerically.  Leading zeros are skipped, then the run
  with more digits is larger, equal-length runs compare bytewise.
* Otherwise single bytes are compared by value.  A digit against
  a non-digit is a plain byte comparison.
* When one string runs out, the one with fewer bytes left is smaller.

Runs are never converted to integers, so any run length works.

>>> cmp_ascii(b'file2.txt', b'file11.txt')
-1
>>> cmp_ascii(b'file0002.txt', b'file1B.txt')
1
>>> cmp_ascii(b'a007', b'a7')
0
"""

from typing import Tuple

from natural_sort.basetypes import ByteSpan

__all__ = ['cmp_ascii']

_ZERO = 0x30
_NINE = 0x39


def _read_digits(s: ByteSpan, pos: int, end: int) -> Tuple[int, int]:
    """Skip zeros at pos, return bounds of significant digits after them."""
    while pos < end and s[pos] == _ZERO:
        pos += 1
    start = pos
    while pos < end and _ZERO <= s[pos] <= _NINE:
        pos += 1
    return start, pos


def _cmp_digits(a: ByteSpan, a1: int, a2: int, b: ByteSpan, b1: int, b2: int) -> int:
    """Compare significant digits a[a1:a2] against b[b1:b2]."""
    alen = a2 - a1
    blen = b2 - b1
    if alen != blen:
        return -1 if alen < blen else 1
    while a1 < a2:
        ca = a[a1]
        cb = b[b1]
        if ca != cb:
            return -1 if ca < cb else 1
        a1 += 1
        b1 += 1
    return 0


def cmp_ascii(a: ByteSpan, b: ByteSpan) -> int:
    """Compare two byte spans in natural order.

    Spans are anything indexable that returns byte values as ints,
    usually bytes or a memoryview with format 'B'.

    @param a: left byte span
    @param b: right byte span
    @return: -1, 0 or 1
    """
    alen = len(a)
    blen = len(b)
    i = j = 0
    while i < alen and j < blen:
        ca = a[i]
        cb = b[j]
        if _ZERO <= ca <= _NINE and _ZERO <= cb <= _NINE:
            a1, i = _read_digits(a, i, alen)
            b1, j = _read_digits(b, j, blen)
            res = _cmp_digits(a, a1, i, b, b1, j)
            if res:
                return res
        else:
            i += 1
            j += 1
            if ca != cb:
                return -1 if ca < cb else 1

    # fewer remaining bytes sorts first
    arest = alen - i
    brest = blen - j
    if arest == brest:
        return 0
    return -1 if arest < brest else 1
