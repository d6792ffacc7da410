# -*- coding: utf-8 -*-
# Panelwake/geometry/shapes/__init__.py

from .ellipse import generate_ellipse

__all__ = ["generate_ellipse"]
