# -*- coding: utf-8 -*-
# Panelwake/wake/config.py

"""
Project: Panelwake
Author: Erfan Vaezi
Date: 10/17/2026

Purpose
-------
Build the wake-emission configuration from defaults and user overrides. Keys are
canonicalized through `ALIASES`, checked against `ENUMS`/`RANGES`, and frozen into an
`EmissionConfig` that is handed to `WakeEmission` at construction time, so separate
runs (or tests) never share mutable settings.

Main Tasks
----------
    1. Canonicalize params via `normalize_keys` (case-insensitive, aliases).
    2. Validate: unknown keys, boolean flags, enums, numeric ranges.
    3. Merge over `DEFAULTS` and return a frozen `EmissionConfig`.

Keys
----
- follow_bisector : bool   (default True)
    Constrain emission to the trailing-edge bisector plane.
- on_degenerate   : str    (default "raise")
    "raise" propagates DegenerateGeometry; "fallback" emits with the apparent velocity.
- degenerate_tol  : float  (default 1e-12)
    Zero-length tolerance for wake-normal normalization.
"""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Mapping, Optional
from .errors import SchemaError

__all__ = ["EmissionConfig", "build_config", "normalize_keys", "validate",
           "DEFAULTS", "ALIASES", "ENUMS", "RANGES"]

DEFAULTS = {
    "follow_bisector": True,
    "on_degenerate": "raise",
    "degenerate_tol": 1e-12,
}

ALIASES = {
    "wake_emission_follow_bisector": "follow_bisector",
    "bisector": "follow_bisector",
    "degenerate_policy": "on_degenerate",
    "tol": "degenerate_tol",
}

ENUMS = {
    "on_degenerate": {"raise", "fallback"},
}

# key -> (min, max), inclusive
RANGES = {
    "degenerate_tol": (0.0, 1e-3),
}

_BOOL_KEYS = ("follow_bisector",)
_TRUE = {"yes", "true", "on", "1"}
_FALSE = {"no", "false", "off", "0"}


@dataclass(frozen=True)
class EmissionConfig:
    follow_bisector: bool = True
    on_degenerate: str = "raise"
    degenerate_tol: float = 1e-12

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


def normalize_keys(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Map user keys to canonical keys (lower-cased, aliases resolved). No value coercion.
    """
    out = {}  # type: Dict[str, Any]
    for k, v in params.items():
        key = str(k).strip().lower()
        out[ALIASES.get(key, key)] = v
    return out


def _as_bool(key, value):
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        s = value.strip().lower()
        if s in _TRUE:
            return True
        if s in _FALSE:
            return False
    raise SchemaError("Expected a boolean for {}".format(key), {"key": key, "value": value})


def validate(params: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate canonical params and return them with coerced values.

    Raises
    ------
    SchemaError
        Unknown key, non-boolean flag, invalid enum, or out-of-range/non-numeric scalar.
    """
    out = {}  # type: Dict[str, Any]
    for key, value in params.items():
        if key not in DEFAULTS:
            raise SchemaError("Unknown emission config key: {}".format(key),
                              {"key": key, "allowed": sorted(DEFAULTS)})
        if key in _BOOL_KEYS:
            out[key] = _as_bool(key, value)
        elif key in ENUMS:
            s = str(value).strip().lower()
            if s not in ENUMS[key]:
                raise SchemaError("Invalid value for {}".format(key),
                                  {"key": key, "value": value, "allowed": sorted(ENUMS[key])})
            out[key] = s
        elif key in RANGES:
            lo, hi = RANGES[key]
            if isinstance(value, bool):
                raise SchemaError("Expected a number for {}".format(key), {"key": key, "value": value})
            try:
                x = float(value)
            except (TypeError, ValueError):
                raise SchemaError("Expected a number for {}".format(key), {"key": key, "value": value})
            if not (lo <= x <= hi):
                raise SchemaError("{} out of range [{}, {}]".format(key, lo, hi), {"key": key, "value": x})
            out[key] = x
    return out


def build_config(params: Optional[Mapping[str, Any]] = None, **overrides: Any) -> EmissionConfig:
    """
    Merge user params (then keyword overrides) over `DEFAULTS`.

    Examples
    --------
    >>> build_config({"wake_emission_follow_bisector": "NO"}).follow_bisector
    False
    >>> build_config(on_degenerate="fallback").on_degenerate
    'fallback'
    """
    cfg = dict(DEFAULTS)
    if params:
        cfg.update(validate(normalize_keys(params)))
    if overrides:
        cfg.update(validate(normalize_keys(overrides)))
    return EmissionConfig(**cfg)
