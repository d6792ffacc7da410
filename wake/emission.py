# -*- coding: utf-8 -*-
# Panelwake/wake/emission.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
Wake-emission velocity policy: the velocity with which the newly shed wake row leaves
each trailing-edge station. The time-stepping code places the new node at
`te_position + velocity * dt`; this module only supplies `velocity`.

Policies:
---------
- "bisector" (config.follow_bisector and more than one chordwise node row):
    With span neighbours available, the apparent velocity is projected onto the plane
    spanned by the local span direction and the trailing-edge bisector, then negated.
    At a single-station surface there is no span direction and the apparent velocity is
    projected onto the bisector line instead.
- "direct" (otherwise):
    The negated apparent velocity.

Neighbour lookup clamps at the tips (no wraparound): station 0 uses itself as its
previous neighbour, the last station uses itself as its next one.

Degeneracies:
-------------
An undefined bisector or a span direction collinear with the bisector raises
DegenerateGeometry (config.on_degenerate == "raise"), or logs a warning and falls back
to the direct policy (config.on_degenerate == "fallback"). Index errors always raise.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence
import numpy as np
from geometry.errors import DegenerateGeometry, GeometryError
from geometry.ops.vectors import as_vector3, as_points3, normalize, project_off, project_onto
from geometry.topology._validation import _check_index
from surface.lifting import LiftingSurface
from .config import EmissionConfig

logger = logging.getLogger(__name__)

MODE_BISECTOR = "bisector"
MODE_DIRECT = "direct"


@dataclass(frozen=True)
class StationEmission:
    """
    Emission result for one trailing-edge station.

    `velocity` is None when `error` is set; the caller skips or defers that station.
    """
    index: int
    velocity: Optional[np.ndarray]
    mode: str
    error: Optional[GeometryError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class WakeEmission:
    """
    Wake-emission policy bound to one lifting surface and one configuration.

    Parameters
    ----------
    surface : LiftingSurface
        Surface with topology installed.
    config : EmissionConfig, optional
        Defaults to `EmissionConfig()` (bisector-following, raise on degeneracy).
    """

    def __init__(self, surface: LiftingSurface, config: Optional[EmissionConfig] = None):
        self.surface = surface
        self.config = config if config is not None else EmissionConfig()

    def mode(self) -> str:
        """Name of the active policy branch for this surface and configuration."""
        if self.config.follow_bisector and self.surface.n_chordwise_nodes() > 1:
            return MODE_BISECTOR
        return MODE_DIRECT

    def _neighbours(self, i: int):
        s = self.surface
        prev_node = s.trailing_edge_node(i - 1) if i > 0 else s.trailing_edge_node(i)
        if i < s.n_spanwise_nodes() - 1:
            next_node = s.trailing_edge_node(i + 1)
        else:
            next_node = s.trailing_edge_node(i)
        return prev_node, next_node

    def _bisector_velocity(self, v: np.ndarray, i: int) -> np.ndarray:
        s = self.surface
        prev_node, next_node = self._neighbours(i)
        bisector = s.trailing_edge_bisector(i)

        if prev_node != next_node:
            # Project onto the plane spanned by the span direction and the bisector
            span_direction = s.node(next_node) - s.node(prev_node)
            wake_normal = normalize(np.cross(span_direction, bisector), tol=self.config.degenerate_tol,
                                    what="wake normal (span direction collinear with bisector)",
                                    context={"surface": s.name, "index": i})
            return -project_off(v, wake_normal)

        # No span direction available
        return -project_onto(v, bisector)

    def velocity(self, apparent_velocity, node_index) -> np.ndarray:
        """
        Wake emission velocity at the node_index'th trailing-edge node.

        Parameters
        ----------
        apparent_velocity : array-like
            (3,) flow velocity relative to the surface at that node.
        node_index : int
            Trailing-edge (spanwise) station index.

        Returns
        -------
        np.ndarray
            (3,) emission velocity (not normalized).

        Raises
        ------
        ValueError
            If apparent_velocity is not 3 finite floats.
        InvalidIndex
            If node_index is out of range.
        DegenerateGeometry
            Bisector policy with undefined geometry and on_degenerate == "raise".
        """
        v = as_vector3(apparent_velocity, "apparent_velocity")
        i = _check_index(node_index, self.surface.n_spanwise_nodes(), "trailing edge node index")
        return self._evaluate(v, i)[0]

    def _evaluate(self, v: np.ndarray, i: int):
        if self.mode() == MODE_DIRECT:
            return -v, MODE_DIRECT
        try:
            return self._bisector_velocity(v, i), MODE_BISECTOR
        except DegenerateGeometry as exc:
            if self.config.on_degenerate != "fallback":
                raise
            logger.warning("[WakeEmission] %s: station %d falls back to direct emission (%s)",
                           self.surface.name, i, exc)
            return -v, MODE_DIRECT

    def velocities(self, apparent_velocity, indices: Optional[Sequence[int]] = None) -> List[StationEmission]:
        """
        Evaluate the emission velocity station by station.

        Parameters
        ----------
        apparent_velocity : array-like
            Either one (3,) vector applied to every station or an (n_spanwise_nodes, 3)
            array with one row per station.
        indices : sequence of int, optional
            Stations to evaluate (default: all, in spanwise order).

        Returns
        -------
        list of StationEmission
            One record per requested station. Geometry errors are captured per station;
            invalid input shapes raise immediately.
        """
        n = self.surface.n_spanwise_nodes()
        arr = np.asarray(apparent_velocity, dtype=float)
        if arr.ndim == 1:
            per_station = np.tile(as_vector3(arr, "apparent_velocity"), (n, 1))
        else:
            per_station = as_points3(arr, "apparent_velocity")
            if per_station.shape[0] != n:
                raise ValueError("Expected {} apparent velocities (one per station), got {}.".format(
                    n, per_station.shape[0]))

        mode = self.mode()
        out = []  # type: List[StationEmission]
        for i in (range(n) if indices is None else indices):
            try:
                j = _check_index(i, n, "trailing edge node index")
                velocity, used = self._evaluate(per_station[j], j)
                out.append(StationEmission(j, velocity, used))
            except GeometryError as exc:
                logger.debug("[WakeEmission] %s: station %r skipped: %s", self.surface.name, i, exc)
                index = int(i) if isinstance(i, (int, np.integer)) else -1
                out.append(StationEmission(index, None, mode, exc))
        return out
