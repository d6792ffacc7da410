# -*- coding: utf-8 -*-
# Panelwake/surface/lifting.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
`LiftingSurface` extends the mesh store with the structured topology of a lifting
surface: four (chordwise x spanwise) id grids, one node grid and one panel grid per
surface half. From these it answers the two trailing-edge questions asked every time
step: which nodes/panels form the trailing edge, and which way does the trailing edge
point locally (the bisector of the upper and lower chordwise tangents).

Main Tasks:
-----------
    1. Install and validate the topology grids once (`set_topology`).
    2. Grid dimensions and trailing-edge node/panel lookup.
    3. Trailing-edge tangents and bisector, recomputed from current node positions.

Conventions:
------------
   - Row 0 of every grid is the leading edge; the last row is the trailing edge.
   - Dimensions are read from the upper grids (equal across halves by construction,
     which `set_topology` enforces).
   - `trailing_edge_node(i)` returns the UPPER trailing-edge node. Upper and lower
     trailing-edge ids may coincide (closed trailing edge) or not (finite-thickness
     gap); both are accepted and `trailing_edge_closed()` reports which.

Notes:
------
   - No caching: positions may move between time steps, so every geometric query is
     evaluated on demand.
   - Degenerate tangents raise DegenerateGeometry instead of returning NaNs.
"""

import logging
from typing import Optional, Tuple
import numpy as np
from geometry.ops.vectors import DEFAULT_TOL, normalize
from geometry.topology import IdGrid
from geometry.errors import DegenerateGeometry
from geometry.topology._validation import _check_index
from .mesh import SurfaceMesh

logger = logging.getLogger(__name__)


class LiftingSurface(SurfaceMesh):
    """
    Surface with upper/lower structured topology and a trailing edge.

    Attributes
    ----------
    upper_nodes, lower_nodes : IdGrid or None
        (n_chordwise_nodes, n_spanwise_nodes) node ids.
    upper_panels, lower_panels : IdGrid or None
        (n_chordwise_nodes-1, n_spanwise_nodes-1) panel ids.
    tol : float
        Zero-length tolerance for tangent/bisector normalization.
    """

    def __init__(self, name: str = "lifting_surface", *, tol: float = DEFAULT_TOL):
        super(LiftingSurface, self).__init__(name)
        self.tol = float(tol)
        self.upper_nodes = None  # type: Optional[IdGrid]
        self.lower_nodes = None  # type: Optional[IdGrid]
        self.upper_panels = None  # type: Optional[IdGrid]
        self.lower_panels = None  # type: Optional[IdGrid]

    # ---------- topology setup ----------

    def set_topology(self, upper_nodes, lower_nodes, upper_panels, lower_panels) -> None:
        """
        Install the four topology grids.

        Parameters
        ----------
        upper_nodes, lower_nodes : array-like
            (R, C) node ids with R >= 1, C >= 1 and identical shapes.
        upper_panels, lower_panels : array-like
            (R-1, C-1) panel ids.

        Raises
        ------
        ValueError
            On malformed or mismatched grid shapes.
        InvalidIndex
            If a grid references a node or panel id missing from the mesh.
        """
        un = IdGrid(upper_nodes, name="upper_nodes")
        ln = IdGrid(lower_nodes, name="lower_nodes")
        up = IdGrid(upper_panels, name="upper_panels")
        lp = IdGrid(lower_panels, name="lower_panels")

        if un.n_rows < 1 or un.n_cols < 1:
            raise ValueError("Node grids need at least one row and one column, got {}.".format(un.shape))
        if ln.shape != un.shape:
            raise ValueError("upper_nodes {} and lower_nodes {} differ in shape.".format(un.shape, ln.shape))
        expected = (un.n_rows - 1, max(un.n_cols - 1, 0))
        if expected[0] == 0 and up.n_rows == 0 and lp.n_rows == 0:
            # Single chordwise row: no panels, whatever empty shape was handed over.
            up = IdGrid(np.zeros(expected, dtype=np.int64), name="upper_panels")
            lp = IdGrid(np.zeros(expected, dtype=np.int64), name="lower_panels")
        for grid in (up, lp):
            if grid.shape != expected:
                raise ValueError("{} has shape {}, expected {}.".format(grid.name, grid.shape, expected))

        self._require_ids(max(un.max_id(), ln.max_id()), max(up.max_id(), lp.max_id()))

        self.upper_nodes, self.lower_nodes = un, ln
        self.upper_panels, self.lower_panels = up, lp
        logger.info(
            "[LiftingSurface] %s: topology set (%d chordwise x %d spanwise nodes, trailing edge %s)",
            self.name, un.n_rows, un.n_cols, "closed" if self.trailing_edge_closed() else "open",
        )

    def _topology(self) -> Tuple[IdGrid, IdGrid, IdGrid, IdGrid]:
        if self.upper_nodes is None:
            raise RuntimeError("LiftingSurface '{}' has no topology; call set_topology() first.".format(self.name))
        return self.upper_nodes, self.lower_nodes, self.upper_panels, self.lower_panels

    # ---------- dimensions ----------

    def n_chordwise_nodes(self) -> int:
        return self._topology()[0].n_rows

    def n_chordwise_panels(self) -> int:
        return self._topology()[2].n_rows

    def n_spanwise_nodes(self) -> int:
        return self._topology()[0].n_cols

    def n_spanwise_panels(self) -> int:
        return self._topology()[2].n_cols

    # ---------- trailing-edge topology ----------

    def trailing_edge_node(self, index) -> int:
        """Node id of the index'th trailing-edge node (upper half)."""
        return self._topology()[0].trailing_edge(index)

    def trailing_edge_upper_panel(self, index) -> int:
        return self._topology()[2].trailing_edge(index)

    def trailing_edge_lower_panel(self, index) -> int:
        return self._topology()[3].trailing_edge(index)

    def trailing_edge_nodes(self) -> np.ndarray:
        """All trailing-edge node ids in spanwise order."""
        un = self._topology()[0]
        return un.row(un.last_row)

    def trailing_edge_closed(self) -> bool:
        """True if the upper and lower trailing-edge node ids coincide at every station."""
        un, ln = self._topology()[:2]
        return bool(np.array_equal(un.row(un.last_row), ln.row(ln.last_row)))

    # ---------- trailing-edge geometry ----------

    def trailing_edge_tangents(self, node_index) -> Tuple[np.ndarray, np.ndarray]:
        """
        Raw chordwise tangents (upper, lower) at the node_index'th trailing-edge station,
        each pointing from the last-but-one node to the trailing-edge node.

        Raises
        ------
        InvalidIndex
            If node_index is out of range.
        DegenerateGeometry
            If the surface has fewer than two chordwise nodes.
        """
        un, ln = self._topology()[:2]
        i = _check_index(node_index, un.n_cols, "trailing edge node index")
        if un.n_rows < 2:
            raise DegenerateGeometry("Trailing-edge tangents need at least two chordwise nodes.",
                                     {"surface": self.name, "n_chordwise_nodes": un.n_rows})
        last = un.last_row
        upper = self._nodes[un[last, i]] - self._nodes[un[last - 1, i]]
        lower = self._nodes[ln[last, i]] - self._nodes[ln[last - 1, i]]
        return upper, lower

    def trailing_edge_bisector(self, node_index) -> np.ndarray:
        """
        Unit vector bisecting the trailing edge at the node_index'th trailing-edge node.

        Raises
        ------
        InvalidIndex
            If node_index is out of range.
        DegenerateGeometry
            If a tangent has zero length or the unit tangents are anti-parallel.
        """
        upper, lower = self.trailing_edge_tangents(node_index)
        ctx = {"surface": self.name, "index": int(node_index)}
        upper = normalize(upper, tol=self.tol, what="upper trailing-edge tangent", context=ctx)
        lower = normalize(lower, tol=self.tol, what="lower trailing-edge tangent", context=ctx)
        return normalize(upper + lower, tol=self.tol,
                         what="bisector (upper and lower tangents are anti-parallel)", context=ctx)
