# -*- coding: utf-8 -*-
# Panelwake/boundary_layer/dummy.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
"No boundary layer" strategy: no state, zero blowing, zero friction on every panel.
"""

import numpy as np
from .base import BoundaryLayer


class DummyBoundaryLayer(BoundaryLayer):
    """
    Boundary layer that does nothing. Default strategy for inviscid runs.
    """

    def recalculate(self, surface_velocities) -> None:
        # Normally this solves the boundary-layer equations.
        return None

    def blowing_velocity(self, panel: int) -> float:
        return 0.0

    def friction(self, panel: int) -> np.ndarray:
        return np.zeros(3)
