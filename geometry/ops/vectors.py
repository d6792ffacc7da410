# -*- coding: utf-8 -*-
# Panelwake/geometry/ops/vectors.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
Small 3D vector helpers used by the trailing-edge geometry and the wake-emission policy.

Main Tasks:
-----------
    1. Coerce/validate single vectors (3,) and point arrays (N,3).
    2. Guarded normalization: a (near) zero-length operand raises DegenerateGeometry
       instead of silently returning NaNs.
    3. Projections onto a unit direction and onto the plane orthogonal to it.

Notes:
------
   - Pure NumPy; no logging, plotting, or file I/O.
"""

from typing import Optional
import numpy as np
from ..errors import DegenerateGeometry

# Lengths at or below this are treated as zero by `normalize`.
DEFAULT_TOL = 1e-12


def as_vector3(v, name: str = "vector") -> np.ndarray:
    """
    Return `v` as a finite float array of shape (3,).

    Raises
    ------
    ValueError
        If `v` cannot be read as 3 finite floats.
    """
    try:
        arr = np.asarray(v, dtype=float)
    except (TypeError, ValueError):
        raise ValueError("{} must be numeric, got {!r}".format(name, v))
    if arr.shape != (3,):
        raise ValueError("Expected {} of shape (3,), got shape {}.".format(name, arr.shape))
    if not np.isfinite(arr).all():
        raise ValueError("Non-finite components in {}: {}".format(name, arr.tolist()))
    return arr


def as_points3(points, name: str = "points") -> np.ndarray:
    """
    Return `points` as a finite float array of shape (N,3).
    """
    arr = np.asarray(points, dtype=float)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError("Expected (N, 3) array for {}, got shape {}.".format(name, arr.shape))
    if not np.isfinite(arr).all():
        bad_rows = np.unique(np.argwhere(~np.isfinite(arr))[:, 0])
        raise ValueError("Non-finite coordinates in {} at rows: {}".format(name, bad_rows.tolist()))
    return arr


def norm(v: np.ndarray) -> float:
    return float(np.linalg.norm(v))


def normalize(v: np.ndarray, *, tol: float = DEFAULT_TOL, what: str = "vector",
              context: Optional[dict] = None) -> np.ndarray:
    """
    Return the unit vector in the direction of `v`.

    Parameters
    ----------
    v : np.ndarray
        Vector to normalize.
    tol : float
        Lengths <= tol are considered zero.
    what : str
        Name of the operand, used in the error message.
    context : dict, optional
        Extra fields attached to the raised error (e.g. the station index).

    Raises
    ------
    DegenerateGeometry
        If ||v|| <= tol (normalization undefined).
    """
    n = norm(v)
    if not n > tol:
        ctx = dict(context or {})
        ctx["length"] = n
        raise DegenerateGeometry("Cannot normalize zero-length {}.".format(what), ctx)
    return v / n


def project_onto(v: np.ndarray, unit_dir: np.ndarray) -> np.ndarray:
    """Component of `v` along the unit direction `unit_dir`."""
    return float(np.dot(v, unit_dir)) * unit_dir


def project_off(v: np.ndarray, unit_normal: np.ndarray) -> np.ndarray:
    """Component of `v` in the plane orthogonal to the unit vector `unit_normal`."""
    return v - float(np.dot(v, unit_normal)) * unit_normal
