# -*- coding: utf-8 -*-
# Panelwake/geometry/ops/__init__.py

from .vectors import as_vector3, as_points3, norm, normalize, project_off, project_onto

__all__ = ["as_vector3", "as_points3", "norm", "normalize", "project_off", "project_onto"]
