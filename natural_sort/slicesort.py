"""Sort sequences in natural order.

In-place variants of the usual sort operations:

* natural_sort_unstable - introsort, no extra memory.
* natural_sort_unstable_by_key - same, key is computed on each compare.
* natural_sort - stable.
* natural_sort_by_key - stable, key is computed on each compare.
* natural_sort_by_cached_key - stable, key is computed once per element.

Each takes view=STR or view=ASCII (or their names) to pick how
elements or keys are turned into bytes.

>>> files = ['file0002.txt', 'file1.txt']
>>> natural_sort(files)
>>> files
['file1.txt', 'file0002.txt']
>>> nums = [4, 2, 3, 1]
>>> natural_sort_by_cached_key(nums, str)
>>> nums
[1, 2, 3, 4]
"""

import logging

from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, MutableSequence, Optional, TypeVar

from natural_sort.basetypes import KeyFunc
from natural_sort.sortable import STR, Natural, NaturalSortable, ViewKind, view_for

__all__ = (
    'natural_sort_unstable', 'natural_sort_unstable_by_key',
    'natural_sort', 'natural_sort_by_key', 'natural_sort_by_cached_key',
    'natsorted',
)

log = logging.getLogger(__name__)

T = TypeVar('T')
CmpFunc = Callable[[Any, Any], int]

# ranges up to this size use insertion sort
_INSERTION_MAX = 16


#
# unstable in-place sort
#

def _insertion_sort(seq: MutableSequence[T], lo: int, hi: int, cmp: CmpFunc) -> None:
    for i in range(lo + 1, hi):
        item = seq[i]
        j = i
        try:
            while j > lo and cmp(item, seq[j - 1]) < 0:
                seq[j] = seq[j - 1]
                j -= 1
        finally:
            # put item back into the hole even if cmp fails
            seq[j] = item


def _sift_down(seq: MutableSequence[T], lo: int, root: int, n: int, cmp: CmpFunc) -> None:
    while True:
        child = 2 * root + 1
        if child >= n:
            break
        if child + 1 < n and cmp(seq[lo + child], seq[lo + child + 1]) < 0:
            child += 1
        if cmp(seq[lo + root], seq[lo + child]) >= 0:
            break
        seq[lo + root], seq[lo + child] = seq[lo + child], seq[lo + root]
        root = child


def _heap_sort(seq: MutableSequence[T], lo: int, hi: int, cmp: CmpFunc) -> None:
    n = hi - lo
    for root in range(n // 2 - 1, -1, -1):
        _sift_down(seq, lo, root, n, cmp)
    for end in range(n - 1, 0, -1):
        seq[lo], seq[lo + end] = seq[lo + end], seq[lo]
        _sift_down(seq, lo, 0, end, cmp)


def _partition(seq: MutableSequence[T], lo: int, hi: int, cmp: CmpFunc) -> int:
    """Partition seq[lo:hi] around median of three, return pivot position.

    Needs at least 3 elements.
    """
    mid = lo + (hi - lo) // 2
    last = hi - 1

    # order lo <= mid <= last, these become sentinels for the scans
    if cmp(seq[mid], seq[lo]) < 0:
        seq[lo], seq[mid] = seq[mid], seq[lo]
    if cmp(seq[last], seq[mid]) < 0:
        seq[mid], seq[last] = seq[last], seq[mid]
        if cmp(seq[mid], seq[lo]) < 0:
            seq[lo], seq[mid] = seq[mid], seq[lo]

    # park pivot next to last
    ppos = last - 1
    seq[mid], seq[ppos] = seq[ppos], seq[mid]
    pivot = seq[ppos]

    i = lo
    j = ppos
    while True:
        i += 1
        while cmp(seq[i], pivot) < 0:
            i += 1
        j -= 1
        while cmp(pivot, seq[j]) < 0:
            j -= 1
        if i >= j:
            break
        seq[i], seq[j] = seq[j], seq[i]

    seq[i], seq[ppos] = seq[ppos], seq[i]
    return i


def _intro_sort(seq: MutableSequence[T], lo: int, hi: int, cmp: CmpFunc, depth: int) -> None:
    while hi - lo > _INSERTION_MAX:
        if depth == 0:
            _heap_sort(seq, lo, hi, cmp)
            return
        depth -= 1
        p = _partition(seq, lo, hi, cmp)
        # recurse into smaller side, loop on larger
        if p - lo < hi - p - 1:
            _intro_sort(seq, lo, p, cmp, depth)
            lo = p + 1
        else:
            _intro_sort(seq, p + 1, hi, cmp, depth)
            hi = p
    _insertion_sort(seq, lo, hi, cmp)


def _sort_unstable(seq: MutableSequence[T], cmp: CmpFunc) -> None:
    n = len(seq)
    if n > 1:
        _intro_sort(seq, 0, n, cmp, 2 * n.bit_length())


#
# stable sort
#

def _sort_stable(seq: MutableSequence[T], key: KeyFunc, reverse: bool) -> None:
    if isinstance(seq, list):
        seq.sort(key=key, reverse=reverse)
        return
    items = sorted(seq, key=key, reverse=reverse)
    for i, item in enumerate(items):
        seq[i] = item


def _key_cmp(key: KeyFunc, view: NaturalSortable) -> CmpFunc:
    vcmp = view.natural_cmp

    def cmp(a: Any, b: Any) -> int:
        return vcmp(key(a), key(b))
    return cmp


def _get_view(func: str, seq: Any, view: ViewKind) -> NaturalSortable:
    v = view_for(view)
    log.debug("%s: %d items, view=%s", func, len(seq), v.name)
    return v


#
# public api
#

def natural_sort_unstable(seq: MutableSequence[T], view: ViewKind = STR) -> None:
    """Like list.sort() but natural order and not stable.
    """
    v = _get_view("natural_sort_unstable", seq, view)
    _sort_unstable(seq, v.natural_cmp)


def natural_sort_unstable_by_key(seq: MutableSequence[T], key: KeyFunc, view: ViewKind = STR) -> None:
    """Unstable natural sort by key(item).

    Key is computed again on each comparison, so it should be cheap.
    """
    v = _get_view("natural_sort_unstable_by_key", seq, view)
    _sort_unstable(seq, _key_cmp(key, v))


def natural_sort(seq: MutableSequence[T], view: ViewKind = STR, reverse: bool = False) -> None:
    """Natural in-place sort, stable."""
    v = _get_view("natural_sort", seq, view)
    _sort_stable(seq, cmp_to_key(v.natural_cmp), reverse)


def natural_sort_by_key(seq: MutableSequence[T], key: KeyFunc, view: ViewKind = STR,
                        reverse: bool = False) -> None:
    """Stable natural sort by key(item).

    Key is computed again on each comparison, so it should be cheap.
    """
    v = _get_view("natural_sort_by_key", seq, view)
    _sort_stable(seq, cmp_to_key(_key_cmp(key, v)), reverse)


def natural_sort_by_cached_key(seq: MutableSequence[T], key: KeyFunc, view: ViewKind = STR,
                               reverse: bool = False) -> None:
    """Stable natural sort by key(item), key called once per item.

    Use this when key is expensive, eg. builds new strings.
    """
    v = _get_view("natural_sort_by_cached_key", seq, view)
    _sort_stable(seq, lambda x: Natural(key(x), v), reverse)


def natsorted(items: Iterable[T], key: Optional[KeyFunc] = None, view: ViewKind = STR,
              reverse: bool = False) -> List[T]:
    """Return new list, sorted in natural order.
    """
    v = view_for(view)
    if key is None:
        return sorted(items, key=lambda x: Natural(x, v), reverse=reverse)
    return sorted(items, key=lambda x: Natural(key(x), v), reverse=reverse)
