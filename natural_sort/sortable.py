"""Natural-order views and sort key wrapper.

A view turns a value into bytes that natural compare works on.
There are exactly two of them:

* STR - text, compared as its UTF-8 bytes.
* ASCII - bytes-like objects, compared as raw bytes.

UTF-8 keeps code point order and digits are ASCII, so both views
order ASCII text the same way.

>>> natural_cmp('file2.txt', 'file11.txt')
-1
>>> sorted(['x10', 'x9', 'x100'], key=Natural.str)
['x9', 'x10', 'x100']
>>> Natural.ascii(b'v007') == Natural.ascii(b'v7')
True
"""

import abc
import os
import re

from typing import Any, Generic, Optional, TypeVar, Union

from natural_sort.basetypes import AsciiLike, ByteSpan, Viewable
from natural_sort.natcmp import cmp_ascii

__all__ = (
    'NaturalSortable', 'STR', 'ASCII', 'ViewKind',
    'view_for', 'natural_cmp', 'natural_cmp_ascii',
    'Natural', 'NaturalAscii',
)

T = TypeVar('T')

# leading zeros of each digit run
_rc_lead_zeros = re.compile(rb'(?<![0-9])0+')


class NaturalSortable(abc.ABC):
    """Byte view that can be compared in natural order.

    Sealed: only the views defined in this module exist,
    so other types cannot claim natural ordering.
    """
    __slots__ = ('name',)

    def __init_subclass__(cls, **kwargs: Any) -> None:
        if cls.__module__ != __name__:
            raise TypeError("NaturalSortable cannot be subclassed: %s.%s"
                            % (cls.__module__, cls.__qualname__))
        super().__init_subclass__(**kwargs)

    def __init__(self, name: str) -> None:
        self.name = name

    def __repr__(self) -> str:
        return "<NaturalSortable %s>" % self.name

    def __reduce__(self) -> Any:
        # keep views singletons over copy and pickle
        return (view_for, (self.name,))

    def _fail(self, value: Any) -> TypeError:
        return TypeError("natural_sort: cannot view %s as %s" % (type(value).__name__, self.name))

    @abc.abstractmethod
    def as_bytes(self, value: Viewable) -> ByteSpan:
        """Return byte span for value, TypeError if it has no such view."""
        raise NotImplementedError

    def natural_cmp(self, a: Viewable, b: Viewable) -> int:
        """Compare two values in natural order.

        @return: -1, 0 or 1
        """
        return cmp_ascii(self.as_bytes(a), self.as_bytes(b))

    def hash_key(self, value: Viewable) -> bytes:
        """Bytes that are same for values that compare equal."""
        return _rc_lead_zeros.sub(b'', bytes(self.as_bytes(value)))


class _StrView(NaturalSortable):
    __slots__ = ()

    def as_bytes(self, value: Viewable) -> ByteSpan:
        if isinstance(value, Natural):
            value = value.value
        if not isinstance(value, str):
            if not isinstance(value, os.PathLike):
                raise self._fail(value)
            value = os.fspath(value)
            if not isinstance(value, str):
                raise self._fail(value)
        # surrogatepass: lone surrogates are valid in python str
        return value.encode('utf8', 'surrogatepass')


class _AsciiView(NaturalSortable):
    __slots__ = ()

    def as_bytes(self, value: Viewable) -> ByteSpan:
        if isinstance(value, Natural):
            value = value.value
        if isinstance(value, (bytes, bytearray)):
            return value
        if isinstance(value, str):
            return value.encode('utf8', 'surrogatepass')
        if isinstance(value, os.PathLike):
            return os.fsencode(value)
        try:
            mv = memoryview(value)
        except TypeError:
            raise self._fail(value) from None
        if mv.format != 'B' or mv.ndim != 1:
            # raises TypeError on non-contiguous buffers
            mv = mv.cast('B')
        return mv


STR = _StrView('str')
ASCII = _AsciiView('ascii')

_view_names = {
    'str': STR,
    'ascii': ASCII,
    'bytes': ASCII,
}

ViewKind = Union[NaturalSortable, str]


def view_for(kind: ViewKind) -> NaturalSortable:
    """Resolve view from NaturalSortable or its name.
    """
    if isinstance(kind, NaturalSortable):
        return kind
    try:
        return _view_names[kind]
    except (KeyError, TypeError):
        raise ValueError("unknown view kind: %r" % (kind,)) from None


def natural_cmp(a: Viewable, b: Viewable, view: ViewKind = STR) -> int:
    """Compare a and b in natural order, as text by default.

    @param view: STR or ASCII, or their names
    @return: -1, 0 or 1
    """
    return view_for(view).natural_cmp(a, b)


def natural_cmp_ascii(a: AsciiLike, b: AsciiLike) -> int:
    """Compare a and b in natural order as raw bytes."""
    return ASCII.natural_cmp(a, b)


class Natural(Generic[T]):
    """Wrap value so that it compares in natural order.

    Ordering and equality come only from the view, never from
    the wrapped value:

        sorted(files, key=Natural.str)

    Two wrappers compare only when they use the same view.
    """
    __slots__ = ('value', 'view')

    default_view = STR

    def __init__(self, value: T, view: Optional[ViewKind] = None) -> None:
        self.value = value
        self.view = self.default_view if view is None else view_for(view)

    def __repr__(self) -> str:
        return "%s(%r, view=%r)" % (type(self).__name__, self.value, self.view.name)

    def _cmp(self, other: Any) -> Any:
        if not isinstance(other, Natural) or other.view is not self.view:
            return NotImplemented
        return self.view.natural_cmp(self.value, other.value)

    def __eq__(self, other: Any) -> Any:
        res = self._cmp(other)
        return res if res is NotImplemented else res == 0

    def __ne__(self, other: Any) -> Any:
        res = self._cmp(other)
        return res if res is NotImplemented else res != 0

    def __lt__(self, other: Any) -> Any:
        res = self._cmp(other)
        return res if res is NotImplemented else res < 0

    def __le__(self, other: Any) -> Any:
        res = self._cmp(other)
        return res if res is NotImplemented else res <= 0

    def __gt__(self, other: Any) -> Any:
        res = self._cmp(other)
        return res if res is NotImplemented else res > 0

    def __ge__(self, other: Any) -> Any:
        res = self._cmp(other)
        return res if res is NotImplemented else res >= 0

    def __hash__(self) -> int:
        return hash(self.view.hash_key(self.value))

    # these shadow builtins in class body, keep them last

    @classmethod
    def str(cls, value: T) -> "Natural[T]":
        """Wrap value for comparing as text."""
        return cls(value, STR)

    @classmethod
    def ascii(cls, value: T) -> "Natural[T]":
        """Wrap value for comparing as raw bytes."""
        return cls(value, ASCII)


class NaturalAscii(Natural[T]):
    """Natural wrapper that compares as raw bytes by default."""
    __slots__ = ()

    default_view = ASCII
