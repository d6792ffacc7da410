# -*- coding: utf-8 -*-
# Panelwake/boundary_layer/__init__.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Boundary-Layer Package:
-----------------------
- base:      `BoundaryLayer`, the three-operation contract consumed by solver/force code.
- dummy:     `DummyBoundaryLayer`, the "no boundary layer" strategy.
- registry:  Name -> strategy lookup for configuration-driven selection.
"""

from .base import BoundaryLayer
from .dummy import DummyBoundaryLayer
from .registry import REGISTRY, make_boundary_layer

__all__ = ["BoundaryLayer", "DummyBoundaryLayer", "REGISTRY", "make_boundary_layer"]
