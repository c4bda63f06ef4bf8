"""Types for natural compare.
"""

import os

from typing import Any, Callable, TypeVar, Union

from typing_extensions import Buffer, Protocol

__all__ = (
    "ByteSpan", "Buffer",
    "TextLike", "AsciiLike", "Viewable",
    "KeyFunc",
)


class ByteSpan(Protocol):
    """Indexable run of byte values.

    Both bytes and memoryview with format 'B' support this.
    """
    def __len__(self) -> int: raise NotImplementedError
    def __getitem__(self, idx: int) -> int: raise NotImplementedError


TextLike = Union[str, "os.PathLike[str]"]
AsciiLike = Union[Buffer, str, "os.PathLike[str]", "os.PathLike[bytes]"]
Viewable = Union[TextLike, AsciiLike]

T = TypeVar("T")
KeyFunc = Callable[[T], Any]
