# -*- coding: utf-8 -*-
# Panelwake/tests/conftest.py

"""
Shared lifting-surface fixtures. Surfaces are built from (rows, cols, 3) position
arrays: rows chordwise (last row = trailing edge), cols spanwise.
"""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from surface.lifting import LiftingSurface


def _add_grid(surface, xyz):
    R, C = xyz.shape[:2]
    ids = np.zeros((R, C), dtype=int)
    for r in range(R):
        for c in range(C):
            ids[r, c] = surface.add_node(xyz[r, c])
    return ids


def _add_panels(surface, ids):
    R, C = ids.shape
    panels = np.zeros((max(R - 1, 0), max(C - 1, 0)), dtype=int)
    for r in range(R - 1):
        for c in range(C - 1):
            panels[r, c] = surface.add_quadrangle(ids[r, c], ids[r + 1, c], ids[r + 1, c + 1], ids[r, c + 1])
    return panels


def build_surface(upper_xyz, lower_xyz=None, *, name="test_surface", share_trailing_edge=False):
    """
    Build a LiftingSurface. Without `lower_xyz` both halves share the upper nodes
    (zero-thickness plate). With `share_trailing_edge` the lower trailing-edge row
    reuses the upper trailing-edge node ids.
    """
    upper_xyz = np.asarray(upper_xyz, dtype=float)
    s = LiftingSurface(name)
    upper = _add_grid(s, upper_xyz)
    if lower_xyz is None:
        lower = upper.copy()
    else:
        lower_xyz = np.asarray(lower_xyz, dtype=float)
        if share_trailing_edge:
            lower = np.zeros(upper.shape, dtype=int)
            lower[:-1] = _add_grid(s, lower_xyz[:-1])
            lower[-1] = upper[-1]
        else:
            lower = _add_grid(s, lower_xyz)
    s.set_topology(upper, lower, _add_panels(s, upper), _add_panels(s, lower))
    return s


def plate_xyz(n_chord=2, n_span=3):
    """Flat plate in z=0, x chordwise (0..1), y spanwise (0, 1, 2, ...)."""
    xs = np.linspace(0.0, 1.0, n_chord) if n_chord > 1 else np.array([1.0])
    ys = np.arange(n_span, dtype=float)
    return np.array([[(x, y, 0.0) for y in ys] for x in xs])


@pytest.fixture
def flat_plate():
    """2 chordwise rows x 3 spanwise stations, zero thickness."""
    return build_surface(plate_xyz(2, 3), name="flat_plate")


@pytest.fixture
def single_station():
    """2 chordwise rows x 1 spanwise station."""
    return build_surface(plate_xyz(2, 1), name="single_station")


@pytest.fixture
def single_row():
    """1 chordwise row x 3 spanwise stations (no panels)."""
    return build_surface(plate_xyz(1, 3), name="single_row")


@pytest.fixture
def wedge():
    """
    Thick, cambered and swept section: 3 chordwise rows x 4 stations with a closed
    trailing edge; the trailing-edge line is swept and slightly dihedral.
    """
    upper, lower = [], []
    for x in (0.0, 0.6, 1.0):
        up_row, lo_row = [], []
        for c in range(4):
            y = 0.8 * c
            sweep = 0.3 * c
            dihedral = 0.05 * c
            up_row.append((x + sweep, y, 0.12 * (1.0 - x) + 0.04 * x * (1.0 - x) + dihedral))
            lo_row.append((x + sweep, y, -0.08 * (1.0 - x) + 0.04 * x * (1.0 - x) + dihedral))
        upper.append(up_row)
        lower.append(lo_row)
    return build_surface(upper, lower, name="wedge", share_trailing_edge=True)


@pytest.fixture
def open_trailing_edge():
    """Finite-thickness trailing edge: distinct upper/lower trailing-edge nodes."""
    upper = plate_xyz(2, 3) + np.array([0.0, 0.0, 0.01])
    lower = plate_xyz(2, 3) - np.array([0.0, 0.0, 0.01])
    return build_surface(upper, lower, name="open_te")


@pytest.fixture
def anti_parallel():
    """Lower half folds back on itself: unit tangents (1,0,0) and (-1,0,0)."""
    upper = plate_xyz(2, 3)
    lower = plate_xyz(2, 3).copy()
    lower[0, :, 0] = 2.0
    return build_surface(upper, lower, name="anti_parallel", share_trailing_edge=True)


@pytest.fixture
def collinear_span():
    """Trailing-edge stations laid out along x, the same direction as the bisector."""
    xyz = np.array([[(float(c), 0.0, 0.0) for c in range(3)],
                    [(float(c) + 1.0, 0.0, 0.0) for c in range(3)]])
    return build_surface(xyz, name="collinear_span")


@pytest.fixture
def surface_builder():
    return build_surface
