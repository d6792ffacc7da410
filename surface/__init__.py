# -*- coding: utf-8 -*-
# Panelwake/surface/__init__.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Surface Package:
----------------
- mesh:     `SurfaceMesh`, the node/panel store with per-panel geometry.
- lifting:  `LiftingSurface`, a surface with structured upper/lower topology that
            answers trailing-edge topology and bisector queries.
"""

from .mesh import SurfaceMesh
from .lifting import LiftingSurface

__all__ = ["SurfaceMesh", "LiftingSurface"]
