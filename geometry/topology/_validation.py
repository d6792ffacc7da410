# -*- coding: utf-8 -*-
# Panelwake/geometry/topology/_validation.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
Centralized validation utilities for topology lookups so that every grid, mesh-store
and trailing-edge accessor rejects bad indices the same way.

Main Tasks:
   1. Validate integer-ness and range of an index (no negative wraparound).
   2. Validate 2D integer id arrays handed over by mesh-construction code.
"""

import numbers
import numpy as np
from ..errors import InvalidIndex


def _check_index(index, size: int, what: str = "index") -> int:
    """
    Validate `0 <= index < size` and return it as a plain int.

    Parameters
    ----------
    index : int
        Candidate index (numpy integers accepted; bools and floats rejected).
    size : int
        Number of valid entries.
    what : str
        Name of the index, used in the error message.

    Raises
    ------
    InvalidIndex
        If index is not an integer or lies outside [0, size).
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise InvalidIndex("{} must be an integer, got {!r}.".format(what, index),
                           {"what": what})
    i = int(index)
    if i < 0 or i >= size:
        raise InvalidIndex("{} {} out of range [0, {}).".format(what, i, size),
                           {"what": what, "index": i, "size": int(size)})
    return i


def _assert_id_array(ids, name: str = "ids") -> np.ndarray:
    """
    Return `ids` as a 2D int64 array (rows may be zero for empty panel grids).

    Raises
    ------
    ValueError
        If ids is not 2D, not integer-valued, or contains negative ids.
    """
    arr = np.asarray(ids)
    if arr.ndim != 2:
        raise ValueError("Expected 2D array for {}, got shape {}.".format(name, arr.shape))
    if arr.size and not np.issubdtype(arr.dtype, np.integer):
        raise ValueError("{} must hold integer ids, got dtype {}.".format(name, arr.dtype))
    arr = arr.astype(np.int64)
    if arr.size and int(arr.min()) < 0:
        raise ValueError("Negative ids found in {}.".format(name))
    return arr
