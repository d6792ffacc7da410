# -*- coding: utf-8 -*-
# Panelwake/main.py

"""
End-to-end driver:
  1) Build a rectangular wing with a thin symmetric section (closed trailing edge)
  2) Configure the wake-emission policy
  3) Query trailing-edge topology, bisectors and emission velocities
  4) Place the next wake row for one time step
  5) Boundary-layer strategy + elliptic tip ring
  6) QA plot of the trailing edge
"""

import logging
import numpy as np

from surface.lifting import LiftingSurface
from wake.config import build_config
from wake.emission import WakeEmission
from boundary_layer.registry import make_boundary_layer
from geometry.shapes.ellipse import generate_ellipse
from post.plot_wake import plot_trailing_edge


def build_wing(chord=1.0, span=4.0, n_chord=9, n_span=7, thickness=0.12):
    """
    Rectangular wing, x chordwise, y spanwise. Upper and lower halves share the
    leading- and trailing-edge nodes.
    """
    wing = LiftingSurface("wing")
    xs = chord * 0.5 * (1.0 - np.cos(np.linspace(0.0, np.pi, n_chord)))
    ys = np.linspace(-0.5 * span, 0.5 * span, n_span)
    half = 0.5 * thickness * chord * np.sin(np.pi * xs / chord)

    upper = np.zeros((n_chord, n_span), dtype=int)
    lower = np.zeros((n_chord, n_span), dtype=int)
    for r in range(n_chord):
        for c in range(n_span):
            upper[r, c] = wing.add_node((xs[r], ys[c], half[r]))
            if r in (0, n_chord - 1):
                lower[r, c] = upper[r, c]
            else:
                lower[r, c] = wing.add_node((xs[r], ys[c], -half[r]))

    upper_panels = np.zeros((n_chord - 1, n_span - 1), dtype=int)
    lower_panels = np.zeros((n_chord - 1, n_span - 1), dtype=int)
    for r in range(n_chord - 1):
        for c in range(n_span - 1):
            upper_panels[r, c] = wing.add_quadrangle(upper[r, c], upper[r + 1, c],
                                                     upper[r + 1, c + 1], upper[r, c + 1])
            lower_panels[r, c] = wing.add_quadrangle(lower[r, c], lower[r, c + 1],
                                                     lower[r + 1, c + 1], lower[r + 1, c])
    wing.set_topology(upper, lower, upper_panels, lower_panels)
    return wing


if __name__ == "__main__":
    # ------------------------------------------------------------------
    # 0) Logging
    # ------------------------------------------------------------------
    logging.basicConfig(level=logging.INFO, format="%(levelname)s:%(name)s:%(message)s")
    log = logging.getLogger("Panelwake")

    # ------------------------------------------------------------------
    # 1) Geometry
    # ------------------------------------------------------------------
    wing = build_wing()
    log.info("%r, %d x %d panels per half", wing, wing.n_chordwise_panels(), wing.n_spanwise_panels())

    # ------------------------------------------------------------------
    # 2) Emission policy (bisector-following, fall back on degenerate stations)
    # ------------------------------------------------------------------
    config = build_config({"wake_emission_follow_bisector": "YES", "degenerate_policy": "fallback"})
    emission = WakeEmission(wing, config)
    log.info("Emission mode: %s (%s)", emission.mode(), config.as_dict())

    # ------------------------------------------------------------------
    # 3) Per-station queries; stationary wing in a freestream at 5 deg AoA
    # ------------------------------------------------------------------
    aoa = np.radians(5.0)
    freestream = 10.0 * np.array([np.cos(aoa), 0.0, np.sin(aoa)])
    apparent = -freestream

    for i in range(wing.n_spanwise_nodes()):
        log.info(
            "station %d: node=%d upper_panel=%d lower_panel=%d bisector=%s",
            i, wing.trailing_edge_node(i),
            wing.trailing_edge_upper_panel(min(i, wing.n_spanwise_panels() - 1)),
            wing.trailing_edge_lower_panel(min(i, wing.n_spanwise_panels() - 1)),
            np.round(wing.trailing_edge_bisector(i), 4).tolist(),
        )

    # ------------------------------------------------------------------
    # 4) Next wake row after one time step
    # ------------------------------------------------------------------
    dt = 0.01
    for res in emission.velocities(apparent):
        if not res.ok:
            log.warning("station %d skipped: %s", res.index, res.error)
            continue
        te = wing.node(wing.trailing_edge_node(res.index))
        log.info("station %d: emission=%s new wake node=%s", res.index,
                 np.round(res.velocity, 4).tolist(), np.round(te + res.velocity * dt, 4).tolist())

    # ------------------------------------------------------------------
    # 5) Boundary layer + tip ring
    # ------------------------------------------------------------------
    bl = make_boundary_layer("none")
    bl.recalculate(np.tile(freestream, (wing.n_panels, 1)))
    log.info("BL panel 0: blowing=%.3f friction=%s", bl.blowing_velocity(0), bl.friction(0).tolist())

    tip = generate_ellipse(0.5, 0.06, 24, closed=True)
    log.info("Tip ring: %d points, first=%s", tip.shape[0], tip[0].tolist())

    # ------------------------------------------------------------------
    # 6) QA plot
    # ------------------------------------------------------------------
    plot_trailing_edge(wing, emission=emission, apparent_velocity=apparent,
                       show=True, save_path="trailing_edge.png")
