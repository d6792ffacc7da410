# -*- coding: utf-8 -*-
# Panelwake/geometry/shapes/ellipse.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
Sample points on an ellipse in the XY plane. Mesh-construction code uses these rings
to seed rounded cross-sections (wingtip caps, fuselage stations).

Conventions:
------------
   - Counter-clockwise, starting on the +x semi-axis at (a, 0, 0).
   - Uniform in the parametric angle: theta_k = 2*pi*k/n, k = 0..n-1.
   - Open ring by default; `closed=True` repeats the first point at the end.
"""

import math
import numpy as np


def generate_ellipse(a: float, b: float, n_points: int, *, closed: bool = False) -> np.ndarray:
    """
    Return points approximating the ellipse x^2/a^2 + y^2/b^2 = 1 at z = 0.

    Parameters
    ----------
    a : float
        Semi-axis along x (> 0).
    b : float
        Semi-axis along y (> 0).
    n_points : int
        Number of distinct samples (>= 3).
    closed : bool
        If True, append a copy of the first point (shape becomes (n_points+1, 3)).

    Returns
    -------
    np.ndarray
        (n_points, 3) or (n_points+1, 3) array of points.

    Raises
    ------
    ValueError
        If a semi-axis is not a positive finite number or n_points < 3.
    """
    a = float(a)
    b = float(b)
    if not (math.isfinite(a) and a > 0.0):
        raise ValueError("Semi-axis a must be > 0 (got {})".format(a))
    if not (math.isfinite(b) and b > 0.0):
        raise ValueError("Semi-axis b must be > 0 (got {})".format(b))
    n = int(n_points)
    if n != n_points or n < 3:
        raise ValueError("n_points must be an integer >= 3 (got {})".format(n_points))

    theta = 2.0 * math.pi * np.arange(n) / n
    pts = np.column_stack((a * np.cos(theta), b * np.sin(theta), np.zeros(n)))
    if closed:
        pts = np.vstack((pts, pts[:1]))
    return pts
