# -*- coding: utf-8 -*-
# Panelwake/geometry/topology/grid.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
`IdGrid` stores node or panel ids of one lifting-surface half, indexed by
(chordwise row, spanwise column).

Conventions:
------------
   - Row 0 is the leading edge; the LAST row is the trailing edge. This is exposed
     explicitly via `last_row` / `trailing_edge(col)` so call sites never do the
     length arithmetic themselves.
   - All lookups are bounds-checked; negative indices raise instead of wrapping.
   - Backing storage is a read-only int64 array; grids are immutable once built.
"""

from typing import Tuple
import numpy as np
from ..errors import InvalidIndex
from ._validation import _check_index, _assert_id_array


class IdGrid:
    """
    Immutable, bounds-checked 2D grid of integer ids.

    Parameters
    ----------
    ids : array-like
        (rows, cols) integer ids. Zero rows/cols are allowed (e.g. the panel grid of
        a surface with a single chordwise node row).
    name : str
        Label used in error messages ("upper_nodes", "lower_panels", ...).
    """

    def __init__(self, ids, *, name: str = "grid"):
        arr = _assert_id_array(ids, name)
        arr.setflags(write=False)
        self._ids = arr
        self.name = name

    def __repr__(self):
        return "IdGrid(name={!r}, shape={})".format(self.name, self.shape)

    @property
    def shape(self) -> Tuple[int, int]:
        return int(self._ids.shape[0]), int(self._ids.shape[1])

    @property
    def n_rows(self) -> int:
        return self.shape[0]

    @property
    def n_cols(self) -> int:
        return self.shape[1]

    @property
    def last_row(self) -> int:
        """Index of the trailing-edge row."""
        if self.n_rows == 0:
            raise InvalidIndex("{} has no rows; trailing edge undefined.".format(self.name),
                               {"grid": self.name})
        return self.n_rows - 1

    def __getitem__(self, key) -> int:
        try:
            row, col = key
        except (TypeError, ValueError):
            raise InvalidIndex("{} expects a (row, col) pair, got {!r}.".format(self.name, key),
                               {"grid": self.name})
        r = _check_index(row, self.n_rows, "{} row".format(self.name))
        c = _check_index(col, self.n_cols, "{} column".format(self.name))
        return int(self._ids[r, c])

    def trailing_edge(self, col) -> int:
        """Id at the trailing-edge row, spanwise column `col`."""
        return self[self.last_row, col]

    def row(self, row) -> np.ndarray:
        r = _check_index(row, self.n_rows, "{} row".format(self.name))
        return self._ids[r].copy()

    def column(self, col) -> np.ndarray:
        c = _check_index(col, self.n_cols, "{} column".format(self.name))
        return self._ids[:, c].copy()

    def to_array(self) -> np.ndarray:
        return self._ids.copy()

    def max_id(self) -> int:
        return int(self._ids.max()) if self._ids.size else -1
