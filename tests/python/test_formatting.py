import numpy as np
import pytest

import cachematrix


def test_str_small_matrix():
    cache = cachematrix.make_cache_matrix([[2.0, 0.0], [0.0, 0.5]])
    assert str(cache) == (
        "CacheMatrix(shape=(2, 2), dtype=float64, cached=no)\n"
        "[\n"
        " [2 0]\n"
        " [0 0.5]\n"
        "]"
    )


def test_str_reports_cached_state():
    cache = cachematrix.make_cache_matrix(np.eye(2))
    cachematrix.cache_solve(cache)
    assert str(cache).splitlines()[0].endswith("cached=yes)")


def test_str_truncates_large_matrix():
    cache = cachematrix.make_cache_matrix(np.eye(10))
    lines = str(cache).splitlines()
    # header, "[", 4 head rows, " ...", 4 tail rows, "]"
    assert len(lines) == 12
    assert lines[6] == " ..."
    assert lines[2] == " [1 0 0 0 ... 0 0 0 0]"


def test_edge_items_configurable():
    cachematrix.set_print_edge_items(1)
    try:
        cache = cachematrix.make_cache_matrix(np.eye(3))
        lines = str(cache).splitlines()
        assert lines[2] == " [1 ... 0]"
        assert lines[3] == " ..."
    finally:
        cachematrix.set_print_edge_items(4)


def test_repr():
    cache = cachematrix.make_cache_matrix(np.eye(3))
    assert repr(cache) == "<CacheMatrix shape=(3, 3) cached=False>"


def test_edge_items_must_be_positive():
    for bad in (0, -2):
        with pytest.raises(ValueError, match="at least 1"):
            cachematrix.set_print_edge_items(bad)

    cache = cachematrix.make_cache_matrix(np.eye(3))
    assert str(cache).splitlines()[2] == " [1 0 0]"
