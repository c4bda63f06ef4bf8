"""Utilities for tests.
"""

import random

from typing import Any, List, Sequence

from natural_sort.sortable import STR, ViewKind, view_for

__all__ = ['random_names', 'assert_sorted', 'assert_total_order']

# few letters, many digits and zeros, to get interesting runs
_NAME_CHARS = "ab.Z~00001279"


def random_names(rnd: random.Random, count: int, maxlen: int = 8) -> List[str]:
    """Return list of short random names heavy on digit runs.
    """
    return [
        "".join(rnd.choice(_NAME_CHARS) for _ in range(rnd.randint(0, maxlen)))
        for _ in range(count)
    ]


def assert_sorted(values: Sequence[Any], view: ViewKind = STR) -> None:
    """Check that neighbours are in natural order."""
    v = view_for(view)
    for a, b in zip(values, values[1:]):
        assert v.natural_cmp(a, b) <= 0, "%r > %r" % (a, b)


def assert_total_order(values: Sequence[Any], view: ViewKind = STR) -> None:
    """Check that natural compare is a total order over values.

    Tests all pairs for antisymmetry and all triples for transitivity.
    """
    v = view_for(view)
    n = len(values)
    res = [[v.natural_cmp(a, b) for b in values] for a in values]
    for i in range(n):
        assert res[i][i] == 0, "%r != itself" % (values[i],)
        for j in range(n):
            assert res[i][j] in (-1, 0, 1)
            assert res[i][j] == -res[j][i], "%r vs %r" % (values[i], values[j])
            if res[i][j] > 0:
                continue
            for k in range(n):
                if res[j][k] <= 0:
                    assert res[i][k] <= 0, "%r <= %r <= %r" % (values[i], values[j], values[k])
                    if res[i][j] == 0 and res[j][k] == 0:
                        assert res[i][k] == 0
