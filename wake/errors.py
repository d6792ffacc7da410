# -*- coding: utf-8 -*-
# Panelwake/wake/errors.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose
-------
Typed exceptions for the wake configuration layer, sharing the compact context
rendering of `geometry.errors`.
"""

from geometry.errors import _format_context

__all__ = ["ConfigError", "SchemaError"]


class ConfigError(ValueError):
    """
    Base class for emission configuration errors.

    Parameters
    ----------
    message : str
        Human-readable error.
    context : dict, optional
        Extra fields to append in the string form (e.g., {"key": "on_degenerate"}).
    """
    def __init__(self, message, context=None):
        self.context = dict(context) if context else None
        super(ConfigError, self).__init__(message)

    def __str__(self):
        base = super(ConfigError, self).__str__()
        return base + _format_context(self.context)


class SchemaError(ConfigError):
    """
    Per-key issues detected by the schema:
      - unknown keys
      - invalid enum values or non-boolean flags
      - non-numeric or out-of-range scalars
    """
