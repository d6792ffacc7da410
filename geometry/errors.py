# -*- coding: utf-8 -*-
# Panelwake/geometry/errors.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose
-------
Typed exceptions for geometry and topology queries. Every degenerate input that
would otherwise produce NaNs or an unchecked array access is reported through
one of these, with a compact context suffix for faster debugging.

Main Tasks
----------
    1. Define GeometryError(message, context) with a compact context suffix in __str__.
    2. Provide typed subclasses: InvalidIndex, DegenerateGeometry.
    3. Supply the _format_context helper (reused by the wake configuration errors).

Notes
-----
- InvalidIndex is also an IndexError and DegenerateGeometry an ArithmeticError, so
  callers that only know the builtin hierarchy still catch them.
"""

__all__ = [
    "GeometryError",
    "InvalidIndex",
    "DegenerateGeometry",
]


def _format_context(ctx):
    """Return a compact ' | key1=val1, key2=val2' string or '' if no context."""
    if not ctx:
        return ""
    try:
        parts = []
        for k in sorted(ctx.keys()):
            sv = repr(ctx[k])
            if len(sv) > 120:
                sv = sv[:117] + "..."
            parts.append("{}={}".format(k, sv))
        return " | " + ", ".join(parts)
    except Exception:
        # Context should never break error rendering
        return ""


class GeometryError(Exception):
    """
    Base class for geometry/topology query errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields appended in the string form (e.g., {"index": 7, "n_spanwise_nodes": 5}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(GeometryError, self).__init__(message)

    def __str__(self):
        base = super(GeometryError, self).__str__()
        return base + _format_context(self.context)


class InvalidIndex(GeometryError, IndexError):
    """
    An index or id outside the valid range of a grid or of the mesh store:
      - negative indices (no wraparound is ever applied)
      - spanwise/chordwise indices past the grid dimensions
      - node/panel ids not present in the mesh
    """


class DegenerateGeometry(GeometryError, ArithmeticError):
    """
    A normalization operand with (near) zero length:
      - zero-length chordwise tangent at the trailing edge
      - exactly anti-parallel upper/lower tangents (bisector sum is zero)
      - span direction collinear with the bisector (wake normal undefined)
      - zero-area panel (panel normal undefined)
    """
