# -*- coding: utf-8 -*-
# Panelwake/post/__init__.py

from .plot_wake import plot_trailing_edge

__all__ = ["plot_trailing_edge"]
