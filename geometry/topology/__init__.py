# -*- coding: utf-8 -*-
# Panelwake/geometry/topology/__init__.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Topology Subfolder:
-------------------
Structured id bookkeeping for lifting-surface meshes.

Modules:
--------
- grid:        `IdGrid`, a bounds-checked (chordwise x spanwise) container of node or
               panel ids whose last chordwise row is the trailing edge.

- _validation: Shared index/shape validation utilities raising `InvalidIndex`.
"""

from .grid import IdGrid

__all__ = ["IdGrid", "grid"]
