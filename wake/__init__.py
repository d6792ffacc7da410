# -*- coding: utf-8 -*-
# Panelwake/wake/__init__.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Wake Package:
-------------
- config:    Emission configuration (defaults, aliases, schema) -> frozen `EmissionConfig`.
- emission:  `WakeEmission`, the per-station wake-emission velocity policy.
- errors:    Configuration errors.
"""

from .config import EmissionConfig, build_config
from .emission import WakeEmission, StationEmission

__all__ = ["EmissionConfig", "build_config", "WakeEmission", "StationEmission"]
