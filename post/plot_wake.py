# -*- coding: utf-8 -*-
# Panelwake/post/plot_wake.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
QA plot of a lifting surface's trailing edge in 3D: surface nodes, the trailing-edge
line, the local bisectors and, optionally, the wake-emission velocities. Handy to
eyeball the emission direction before a long unsteady run.
"""

from typing import Optional
import numpy as np
import matplotlib.pyplot as plt
from geometry.errors import GeometryError


def plot_trailing_edge(surface,
                       *,
                       emission=None,
                       apparent_velocity=None,
                       scale: float = 0.25,
                       show: bool = True,
                       save_path: Optional[str] = None,
                       ax=None):
    """
    Plot trailing-edge nodes, bisectors and emission vectors.

    Parameters
    ----------
    surface : LiftingSurface
        Surface with topology installed.
    emission : WakeEmission, optional
        If given together with `apparent_velocity`, emission vectors are drawn.
    apparent_velocity : array-like, optional
        (3,) or (n_spanwise_nodes, 3) apparent velocity.
    scale : float
        Arrow length factor for bisectors; emission arrows are scaled to the same
        maximum length.
    show, save_path, ax
        If `ax` is None a 3D figure is created; it is shown if `show`, else closed.

    Returns
    -------
    Axes
        The 3D axes drawn on.
    """
    created_fig = False
    if ax is None:
        fig = plt.figure(figsize=(8, 5))
        ax = fig.add_subplot(111, projection="3d")
        created_fig = True

    pts = surface.nodes
    if pts.shape[0]:
        ax.scatter(pts[:, 0], pts[:, 1], pts[:, 2], s=4, color=(0.6, 0.6, 0.6), label="nodes")

    te = np.vstack([surface.node(n) for n in surface.trailing_edge_nodes()])
    ax.plot(te[:, 0], te[:, 1], te[:, 2], "k-", lw=1.5, label="trailing edge")

    # Skip stations whose bisector is undefined
    bis_pts, bis_vec = [], []
    for i in range(surface.n_spanwise_nodes()):
        try:
            bis_vec.append(surface.trailing_edge_bisector(i))
            bis_pts.append(te[i])
        except GeometryError:
            continue
    if bis_vec:
        P, V = np.vstack(bis_pts), scale * np.vstack(bis_vec)
        ax.quiver(P[:, 0], P[:, 1], P[:, 2], V[:, 0], V[:, 1], V[:, 2], color="b", label="bisector")

    if emission is not None and apparent_velocity is not None:
        results = [r for r in emission.velocities(apparent_velocity) if r.ok]
        if results:
            P = te[[r.index for r in results]]
            V = np.vstack([r.velocity for r in results])
            vmax = float(np.max(np.linalg.norm(V, axis=1)))
            if vmax > 0.0:
                V = V * (scale / vmax)
            ax.quiver(P[:, 0], P[:, 1], P[:, 2], V[:, 0], V[:, 1], V[:, 2], color="r", label="emission")

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_zlabel("z")
    ax.set_title("Trailing edge: {}".format(surface.name))
    ax.legend()

    if save_path:
        ax.figure.savefig(save_path, dpi=300)
    if show and created_fig:
        plt.show()
    elif created_fig:
        plt.close(ax.figure)
    return ax
