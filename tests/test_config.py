# -*- coding: utf-8 -*-
import dataclasses

import pytest

from wake.config import DEFAULTS, EmissionConfig, build_config, normalize_keys
from wake.errors import ConfigError, SchemaError


def test_defaults():
    cfg = build_config()
    assert cfg == EmissionConfig()
    assert cfg.as_dict() == DEFAULTS


def test_aliases_and_case():
    assert normalize_keys({"Wake_Emission_Follow_Bisector": 1, "TOL": 2}) == {
        "follow_bisector": 1, "degenerate_tol": 2}
    cfg = build_config({"wake_emission_follow_bisector": "NO", "degenerate_policy": "Fallback"})
    assert cfg.follow_bisector is False
    assert cfg.on_degenerate == "fallback"


@pytest.mark.parametrize("value, expected", [(True, True), ("yes", True), ("off", False), (False, False)])
def test_boolean_flag(value, expected):
    assert build_config(follow_bisector=value).follow_bisector is expected


def test_keyword_overrides_win():
    cfg = build_config({"follow_bisector": False, "tol": 1e-9}, follow_bisector=True)
    assert cfg.follow_bisector is True
    assert cfg.degenerate_tol == 1e-9


@pytest.mark.parametrize("params", [
    {"follow": True},
    {"follow_bisector": "maybe"},
    {"follow_bisector": 1},
    {"on_degenerate": "ignore"},
    {"degenerate_tol": -1.0},
    {"degenerate_tol": 1.0},
    {"degenerate_tol": "small"},
    {"degenerate_tol": True},
])
def test_schema_errors(params):
    with pytest.raises(SchemaError):
        build_config(params)


def test_schema_error_context():
    with pytest.raises(ValueError) as info:
        build_config({"on_degenerate": "ignore"})
    assert isinstance(info.value, ConfigError)
    assert "key='on_degenerate'" in str(info.value)


def test_config_is_frozen():
    cfg = build_config()
    with pytest.raises(dataclasses.FrozenInstanceError):
        cfg.follow_bisector = False
