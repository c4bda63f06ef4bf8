
import array
import copy
import pathlib
import pickle

import pytest

from natural_sort.sortable import (
    ASCII, STR, Natural, NaturalAscii, NaturalSortable,
    natural_cmp, natural_cmp_ascii, view_for,
)


def test_natural_cmp_str() -> None:
    assert natural_cmp("file2.txt", "file11.txt") == -1
    assert natural_cmp("file0002.txt", "file1B.txt") == 1
    assert natural_cmp("file0002.txt", "file11.txt") == -1
    assert natural_cmp("a07b", "a7b") == 0


def test_natural_cmp_ascii() -> None:
    assert natural_cmp_ascii(b"file2.txt", b"file11.txt") == -1
    assert natural_cmp(b"x10", b"x9", view=ASCII) == 1
    assert natural_cmp(bytearray(b"x10"), b"x9", view="bytes") == 1
    assert natural_cmp_ascii("x10", b"x9") == 1


def test_str_non_ascii() -> None:
    # compared by UTF-8 bytes, same as code point order
    assert natural_cmp("é1", "é2") == -1
    assert natural_cmp("a", "é") == -1
    assert natural_cmp("\U0001F600", "\uffff") == 1
    assert natural_cmp("x\udc80", "x\udc81") == -1


def test_str_view_rejects_bytes() -> None:
    with pytest.raises(TypeError):
        natural_cmp(b"a", b"b")
    with pytest.raises(TypeError):
        natural_cmp(1, 2)


def test_ascii_view_rejects_int() -> None:
    with pytest.raises(TypeError):
        natural_cmp_ascii(1, 2)


def test_ascii_view_buffers() -> None:
    arr = array.array("B", b"v10")
    assert natural_cmp_ascii(arr, b"v9") == 1
    assert natural_cmp_ascii(memoryview(b"v10"), b"v10") == 0
    wide = array.array("H", [0x3031])
    assert bytes(ASCII.as_bytes(wide)) == wide.tobytes()


def test_path_views() -> None:
    p1 = pathlib.PurePosixPath("dir/file9")
    p2 = pathlib.PurePosixPath("dir/file10")
    assert natural_cmp(p1, p2) == -1
    assert natural_cmp(p1, p2, view=ASCII) == -1


def test_view_for() -> None:
    assert view_for("str") is STR
    assert view_for("ascii") is ASCII
    assert view_for("bytes") is ASCII
    assert view_for(STR) is STR
    with pytest.raises(ValueError):
        view_for("utf16")
    with pytest.raises(ValueError):
        view_for([])    # type: ignore[arg-type]


def test_sealed() -> None:
    with pytest.raises(TypeError):
        class MyView(NaturalSortable):
            pass


def test_base_view_not_instantiable() -> None:
    with pytest.raises(TypeError):
        NaturalSortable("utf16")    # type: ignore[abstract]
    assert not hasattr(STR, "__dict__")


def test_view_singletons() -> None:
    assert copy.deepcopy(STR) is STR
    assert pickle.loads(pickle.dumps(ASCII)) is ASCII
    assert repr(STR) == "<NaturalSortable str>"


def test_natural_ordering() -> None:
    assert Natural.str("file0002.txt") > Natural.str("file1B.txt")
    assert Natural.str("file0002.txt") < Natural.str("file11.txt")
    assert Natural.str("file1.txt") <= Natural.str("file01.txt")
    assert Natural.str("file1.txt") >= Natural.str("file01.txt")
    assert Natural("a") != Natural("b")


def test_natural_equality_is_natural() -> None:
    assert Natural.str("007") == Natural.str("7")
    assert Natural.ascii(b"v007") == Natural.ascii(b"v7")
    assert NaturalAscii(b"v007") == NaturalAscii(b"v7")
    assert hash(Natural.str("v007.1")) == hash(Natural.str("v7.01"))
    assert len({Natural.str("x1"), Natural.str("x01"), Natural.str("x001")}) == 1
    assert len({Natural.str("x1"), Natural.str("x10")}) == 2


def test_natural_views_do_not_mix() -> None:
    assert Natural.str("a") != Natural.ascii("a")
    assert Natural.str("a") != "a"
    with pytest.raises(TypeError):
        Natural.str("a") < Natural.ascii("b")    # noqa: B015
    with pytest.raises(TypeError):
        Natural.str("a") < "b"    # noqa: B015


def test_natural_attrs() -> None:
    n = Natural(4)
    assert n.value == 4
    assert n.view is STR
    assert NaturalAscii(b"x").view is ASCII
    assert Natural("x", "ascii").view is ASCII
    assert repr(Natural.str("x1")) == "Natural('x1', view='str')"
    assert repr(NaturalAscii(b"x1")) == "NaturalAscii(b'x1', view='ascii')"


def test_natural_copy() -> None:
    n = Natural.ascii(bytearray(b"x1"))
    n2 = copy.copy(n)
    assert n2.value is n.value
    assert n2.view is ASCII
    n3 = copy.deepcopy(n)
    assert n3.value is not n.value
    assert n3.value == n.value
    assert n3.view is ASCII
    assert n3 == n


def test_natural_as_sort_key() -> None:
    files = ["file2.txt", "file11.txt", "file1.txt"]
    assert sorted(files) == ["file1.txt", "file11.txt", "file2.txt"]
    assert sorted(files, key=Natural.str) == ["file1.txt", "file2.txt", "file11.txt"]
    assert max(files, key=Natural.str) == "file11.txt"
    assert sorted([b"x10", b"x9"], key=NaturalAscii) == [b"x9", b"x10"]


def test_nested_natural() -> None:
    assert Natural.str(Natural.str("x10")) > Natural.str("x9")
