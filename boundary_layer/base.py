# -*- coding: utf-8 -*-
# Panelwake/boundary_layer/base.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
Abstract boundary-layer interface. Solver and force-integration code only talk to this
contract, so boundary-layer models can be swapped without touching them.

Notes:
------
- `recalculate` is called once per solve with the (n_panels, 3) surface velocities;
  the per-panel queries are then read-only.
"""

from abc import ABC, abstractmethod
import numpy as np


class BoundaryLayer(ABC):
    """
    Abstract base class for boundary-layer strategies.
    """

    @abstractmethod
    def recalculate(self, surface_velocities: np.ndarray) -> None:
        """
        Update the boundary-layer state from the surface velocities.

        Parameters
        ----------
        surface_velocities : np.ndarray
            (n_panels, 3) surface velocity per panel.
        """
        pass

    @abstractmethod
    def blowing_velocity(self, panel: int) -> float:
        """
        Transpiration (blowing) velocity for the given panel.
        """
        pass

    @abstractmethod
    def friction(self, panel: int) -> np.ndarray:
        """
        Friction force (3,) acting on the given panel.
        """
        pass
