
import natural_sort


def test_version() -> None:
    a = natural_sort.Natural.str(getattr(natural_sort, "__version__"))
    b = natural_sort.Natural.str("0.9")
    assert a > b
    assert natural_sort.natural_cmp(natural_sort.__version__, "1.0.0") >= 0


def test_exports() -> None:
    for name in natural_sort.__all__:
        assert hasattr(natural_sort, name), name
