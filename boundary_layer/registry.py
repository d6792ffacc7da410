# -*- coding: utf-8 -*-
# Panelwake/boundary_layer/registry.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose:
--------
Central registry of boundary-layer strategies, so run configuration can select one by
name ("none", "dummy", ...).

Notes:
------
   - Duplicates are disallowed: registering an existing name raises ValueError.
   - Names are matched case-insensitively.
"""

import logging
from typing import Dict, Type
from .base import BoundaryLayer
from .dummy import DummyBoundaryLayer

logger = logging.getLogger(__name__)

REGISTRY: Dict[str, Type[BoundaryLayer]] = {}


def register(name: str, cls: Type[BoundaryLayer]) -> None:
    key = name.strip().lower()
    if key in REGISTRY:
        raise ValueError(f"Duplicate boundary layer name in registry: {key}")
    if not (isinstance(cls, type) and issubclass(cls, BoundaryLayer)):
        raise ValueError(f"{cls!r} does not implement BoundaryLayer")
    REGISTRY[key] = cls


register("none", DummyBoundaryLayer)
register("dummy", DummyBoundaryLayer)


def make_boundary_layer(name: str = "none") -> BoundaryLayer:
    """
    Instantiate the boundary-layer strategy registered under `name`.

    Raises
    ------
    KeyError
        If no strategy is registered under that name.
    """
    key = str(name).strip().lower()
    if key not in REGISTRY:
        raise KeyError(f"Unknown boundary layer '{name}'; available: {sorted(REGISTRY)}")
    logger.debug("[make_boundary_layer] using %s for '%s'", REGISTRY[key].__name__, key)
    return REGISTRY[key]()
