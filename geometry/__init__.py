# -*- coding: utf-8 -*-
# Panelwake/geometry/__init__.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Geometry Package:
-----------------
NumPy-level building blocks shared by the surface and wake layers.

Subpackages / Modules:
----------------------
- errors:    Typed geometry errors (InvalidIndex, DegenerateGeometry) with context.
- ops:       Small 3D vector helpers (validation, guarded normalization).
- topology:  Bounds-checked 2D id grids with an explicit trailing-edge row.
- shapes:    Curve samplers used to seed rounded cross-sections (ellipse).
"""

__all__ = ["errors", "ops", "topology", "shapes"]
