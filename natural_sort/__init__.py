"""Natural sort order for text and byte strings.
"""

from natural_sort.natcmp import cmp_ascii
from natural_sort.sortable import (
    ASCII, STR, Natural, NaturalAscii, NaturalSortable,
    natural_cmp, natural_cmp_ascii, view_for,
)
from natural_sort.slicesort import (
    natsorted, natural_sort, natural_sort_by_cached_key, natural_sort_by_key,
    natural_sort_unstable, natural_sort_unstable_by_key,
)

__version__ = "1.0.0"

__all__ = (
    "cmp_ascii",
    "NaturalSortable", "STR", "ASCII", "view_for",
    "natural_cmp", "natural_cmp_ascii",
    "Natural", "NaturalAscii",
    "natural_sort_unstable", "natural_sort_unstable_by_key",
    "natural_sort", "natural_sort_by_key", "natural_sort_by_cached_key",
    "natsorted",
    "__version__",
)
