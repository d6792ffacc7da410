# -*- coding: utf-8 -*-
import numpy as np
import pytest

from geometry.errors import InvalidIndex
from geometry.topology import IdGrid


def make_grid():
    return IdGrid(np.arange(12).reshape(3, 4), name="upper_nodes")


def test_shape_and_trailing_edge_row():
    g = make_grid()
    assert g.shape == (3, 4)
    assert g.n_rows == 3 and g.n_cols == 4
    assert g.last_row == 2
    assert [g.trailing_edge(c) for c in range(4)] == [8, 9, 10, 11]
    assert g[0, 1] == 1
    assert g.row(2).tolist() == [8, 9, 10, 11]
    assert g.column(3).tolist() == [3, 7, 11]


@pytest.mark.parametrize("key", [(3, 0), (0, 4), (-1, 0), (0, -1)])
def test_out_of_range_lookups_raise(key):
    g = make_grid()
    with pytest.raises(InvalidIndex):
        g[key]


def test_invalid_index_is_an_index_error_with_context():
    g = make_grid()
    with pytest.raises(IndexError) as info:
        g.trailing_edge(7)
    assert "index=7" in str(info.value)
    assert info.value.context["size"] == 4


def test_non_integer_index_rejected():
    g = make_grid()
    with pytest.raises(InvalidIndex):
        g.trailing_edge(1.0)
    with pytest.raises(InvalidIndex):
        g.trailing_edge(True)
    with pytest.raises(InvalidIndex):
        g[1]
    assert g.trailing_edge(np.int64(1)) == 9


def test_backing_array_is_not_exposed():
    g = make_grid()
    arr = g.to_array()
    arr[2, 0] = 99
    assert g.trailing_edge(0) == 8
    row = g.row(2)
    row[:] = -5
    assert g.trailing_edge(0) == 8


def test_bad_inputs():
    with pytest.raises(ValueError):
        IdGrid([1, 2, 3])
    with pytest.raises(ValueError):
        IdGrid([[0.5, 1.0]])
    with pytest.raises(ValueError):
        IdGrid([[0, -1]])


def test_empty_grid_has_no_trailing_edge():
    g = IdGrid(np.zeros((0, 2), dtype=int), name="upper_panels")
    assert g.shape == (0, 2)
    assert g.max_id() == -1
    with pytest.raises(InvalidIndex):
        g.last_row
    with pytest.raises(InvalidIndex):
        g.trailing_edge(0)
