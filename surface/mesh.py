# -*- coding: utf-8 -*-
# Panelwake/surface/mesh.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
Minimal mesh store for panel-method surfaces: 3D nodes and planar panels (triangles
or quadrangles), both addressed by 0-based integer ids.

Main Tasks:
-----------
    1. Append nodes and panels; panel vertices must reference existing nodes.
    2. Id-indexed, bounds-checked lookups (`node`, `panel_nodes`).
    3. Per-panel geometry: collocation point, unit normal, area.

Notes:
------
   - Lookups return copies; callers cannot mutate the store through them.
   - Quadrangle normal/area use the diagonals, which is exact for planar panels and
     the usual averaged approximation for slightly warped ones.
"""

from typing import List, Tuple
import numpy as np
from geometry.errors import InvalidIndex
from geometry.ops.vectors import as_vector3, norm, normalize
from geometry.topology._validation import _check_index


class SurfaceMesh:
    """
    Node/panel store.

    Attributes
    ----------
    name : str
        Label used in log messages and plots.
    """

    def __init__(self, name: str = "surface"):
        self.name = name
        self._nodes = []  # type: List[np.ndarray]
        self._panels = []  # type: List[Tuple[int, ...]]

    def __repr__(self):
        return "{}(name={!r}, n_nodes={}, n_panels={})".format(
            type(self).__name__, self.name, self.n_nodes, self.n_panels)

    # ---------- construction ----------

    def add_node(self, point) -> int:
        """Append a node and return its id."""
        self._nodes.append(as_vector3(point, "node position"))
        return len(self._nodes) - 1

    def add_triangle(self, n0: int, n1: int, n2: int) -> int:
        return self._add_panel((n0, n1, n2))

    def add_quadrangle(self, n0: int, n1: int, n2: int, n3: int) -> int:
        return self._add_panel((n0, n1, n2, n3))

    def _add_panel(self, node_ids) -> int:
        ids = tuple(_check_index(n, self.n_nodes, "panel node id") for n in node_ids)
        if len(set(ids)) != len(ids):
            raise ValueError("Panel repeats a node id: {}".format(ids))
        self._panels.append(ids)
        return len(self._panels) - 1

    # ---------- lookups ----------

    @property
    def n_nodes(self) -> int:
        return len(self._nodes)

    @property
    def n_panels(self) -> int:
        return len(self._panels)

    @property
    def nodes(self) -> np.ndarray:
        """(N,3) copy of all node positions."""
        if not self._nodes:
            return np.zeros((0, 3))
        return np.vstack(self._nodes)

    def node(self, node_id) -> np.ndarray:
        return self._nodes[_check_index(node_id, self.n_nodes, "node id")].copy()

    def panel_nodes(self, panel_id) -> Tuple[int, ...]:
        return self._panels[_check_index(panel_id, self.n_panels, "panel id")]

    def _panel_vertices(self, panel_id) -> np.ndarray:
        return np.vstack([self._nodes[n] for n in self.panel_nodes(panel_id)])

    # ---------- panel geometry ----------

    def _panel_cross(self, panel_id) -> np.ndarray:
        v = self._panel_vertices(panel_id)
        if v.shape[0] == 3:
            return np.cross(v[1] - v[0], v[2] - v[0])
        return np.cross(v[2] - v[0], v[3] - v[1])

    def panel_collocation_point(self, panel_id) -> np.ndarray:
        """Vertex average of the panel."""
        return self._panel_vertices(panel_id).mean(axis=0)

    def panel_normal(self, panel_id) -> np.ndarray:
        """
        Unit normal following the right-hand rule over the vertex order.

        Raises
        ------
        DegenerateGeometry
            If the panel has zero area.
        """
        return normalize(self._panel_cross(panel_id), what="panel normal",
                         context={"panel": int(panel_id)})

    def panel_area(self, panel_id) -> float:
        return 0.5 * norm(self._panel_cross(panel_id))

    def _require_ids(self, max_node_id: int, max_panel_id: int) -> None:
        """Raise InvalidIndex if the given maximum ids are not present in the store."""
        if max_node_id >= self.n_nodes:
            raise InvalidIndex("Topology references node {} but the mesh has {} nodes.".format(
                max_node_id, self.n_nodes), {"node": max_node_id, "n_nodes": self.n_nodes})
        if max_panel_id >= self.n_panels:
            raise InvalidIndex("Topology references panel {} but the mesh has {} panels.".format(
                max_panel_id, self.n_panels), {"panel": max_panel_id, "n_panels": self.n_panels})
