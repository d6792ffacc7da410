# -*- coding: utf-8 -*-
import logging

import numpy as np
import pytest

from geometry.errors import DegenerateGeometry, InvalidIndex
from wake.config import EmissionConfig, build_config
from wake.emission import MODE_BISECTOR, MODE_DIRECT, WakeEmission

DIRECT = EmissionConfig(follow_bisector=False)
FALLBACK = EmissionConfig(on_degenerate="fallback")


def wake_normal(surface, i):
    prev_i = max(i - 1, 0)
    next_i = min(i + 1, surface.n_spanwise_nodes() - 1)
    span = surface.node(surface.trailing_edge_node(next_i)) - surface.node(surface.trailing_edge_node(prev_i))
    n = np.cross(span, surface.trailing_edge_bisector(i))
    return n / np.linalg.norm(n)


def test_default_config_follows_bisector(flat_plate):
    emission = WakeEmission(flat_plate)
    assert emission.config == EmissionConfig()
    assert emission.mode() == MODE_BISECTOR


def test_direct_mode_flat_plate(flat_plate):
    emission = WakeEmission(flat_plate, DIRECT)
    assert emission.mode() == MODE_DIRECT
    for i in range(3):
        out = emission.velocity((0.0, 0.0, -5.0), i)
        assert np.array_equal(out, [0.0, 0.0, 5.0])


@pytest.mark.parametrize("fixture", ["wedge", "anti_parallel", "collinear_span", "single_station"])
def test_direct_mode_ignores_geometry(request, fixture):
    surface = request.getfixturevalue(fixture)
    emission = WakeEmission(surface, DIRECT)
    v = np.array([0.3, -1.7, 2.9])
    for i in range(surface.n_spanwise_nodes()):
        assert np.array_equal(emission.velocity(v, i), -v)


def test_single_chordwise_row_uses_direct_mode(single_row):
    emission = WakeEmission(single_row)
    assert emission.config.follow_bisector
    assert emission.mode() == MODE_DIRECT
    assert np.array_equal(emission.velocity([1.0, 2.0, 3.0], 1), [-1.0, -2.0, -3.0])


def test_bisector_mode_middle_station(flat_plate):
    emission = WakeEmission(flat_plate)
    out = emission.velocity((2.0, 0.0, -5.0), 1)
    assert np.allclose(out, [-2.0, 0.0, 0.0])
    assert np.allclose(wake_normal(flat_plate, 1), [0.0, 0.0, -1.0])


@pytest.mark.parametrize("index", [0, 2])
def test_bisector_mode_tip_stations_use_clamped_neighbour(flat_plate, index):
    s = flat_plate
    emission = WakeEmission(s)
    assert s.trailing_edge_node(max(index - 1, 0)) != s.trailing_edge_node(min(index + 1, 2))
    out = emission.velocity((2.0, 0.0, -5.0), index)
    assert np.allclose(out, [-2.0, 0.0, 0.0])


def test_bisector_mode_orthogonal_to_wake_normal(wedge):
    emission = WakeEmission(wedge)
    v = np.array([-9.5, 0.7, -1.3])
    for i in range(wedge.n_spanwise_nodes()):
        n = wake_normal(wedge, i)
        out = emission.velocity(v, i)
        assert np.dot(out, n) == pytest.approx(0.0, abs=1e-12)
        assert np.allclose(out, -(v - np.dot(v, n) * n))


def test_single_station_projects_onto_bisector(single_station):
    s = single_station
    assert s.n_spanwise_nodes() == 1
    emission = WakeEmission(s)
    b = s.trailing_edge_bisector(0)
    out = emission.velocity((3.0, 1.0, -2.0), 0)
    assert np.allclose(out, [-3.0, 0.0, 0.0])
    assert np.allclose(np.cross(out, b), 0.0)


def test_anti_parallel_raises_by_default(anti_parallel):
    emission = WakeEmission(anti_parallel)
    with pytest.raises(DegenerateGeometry):
        emission.velocity((1.0, 0.0, 0.0), 1)


def test_collinear_span_raises_by_default(collinear_span):
    emission = WakeEmission(collinear_span)
    with pytest.raises(DegenerateGeometry) as info:
        emission.velocity((1.0, 0.0, 1.0), 1)
    assert "wake normal" in str(info.value)


@pytest.mark.parametrize("fixture", ["anti_parallel", "collinear_span"])
def test_fallback_emits_direct(request, fixture, caplog):
    surface = request.getfixturevalue(fixture)
    emission = WakeEmission(surface, FALLBACK)
    v = np.array([1.0, 0.5, -2.0])
    with caplog.at_level(logging.WARNING, logger="wake.emission"):
        out = emission.velocity(v, 1)
    assert np.array_equal(out, -v)
    assert "falls back to direct emission" in caplog.text


def test_invalid_index_always_raises(flat_plate):
    for config in (EmissionConfig(), DIRECT, FALLBACK):
        emission = WakeEmission(flat_plate, config)
        with pytest.raises(InvalidIndex):
            emission.velocity((1.0, 0.0, 0.0), 3)
        with pytest.raises(InvalidIndex):
            emission.velocity((1.0, 0.0, 0.0), -1)


@pytest.mark.parametrize("bad", [(1.0, 2.0), (1.0, np.inf, 0.0), "abc", [[1.0, 2.0, 3.0]]])
def test_bad_apparent_velocity(flat_plate, bad):
    with pytest.raises(ValueError):
        WakeEmission(flat_plate).velocity(bad, 0)


def test_configs_are_independent(flat_plate):
    a = WakeEmission(flat_plate, EmissionConfig())
    b = WakeEmission(flat_plate, DIRECT)
    v = (2.0, 0.0, -5.0)
    assert np.allclose(a.velocity(v, 1), [-2.0, 0.0, 0.0])
    assert np.allclose(b.velocity(v, 1), [-2.0, 0.0, 5.0])


def test_velocities_single_vector(flat_plate):
    results = WakeEmission(flat_plate).velocities((2.0, 0.0, -5.0))
    assert [r.index for r in results] == [0, 1, 2]
    assert all(r.ok and r.mode == MODE_BISECTOR for r in results)
    for r in results:
        assert np.allclose(r.velocity, [-2.0, 0.0, 0.0])


def test_velocities_per_station(flat_plate):
    apparent = np.array([[0.0, 0.0, -1.0], [0.0, 0.0, -2.0], [0.0, 0.0, -3.0]])
    results = WakeEmission(flat_plate, DIRECT).velocities(apparent, indices=[2, 0])
    assert [r.index for r in results] == [2, 0]
    assert np.array_equal(results[0].velocity, [0.0, 0.0, 3.0])
    assert np.array_equal(results[1].velocity, [0.0, 0.0, 1.0])
    with pytest.raises(ValueError):
        WakeEmission(flat_plate).velocities(apparent[:2])


def test_velocities_capture_station_errors(anti_parallel, flat_plate):
    results = WakeEmission(anti_parallel).velocities((1.0, 0.0, 0.0))
    assert len(results) == 3
    assert all(not r.ok and r.velocity is None for r in results)
    assert all(isinstance(r.error, DegenerateGeometry) for r in results)

    results = WakeEmission(flat_plate).velocities((1.0, 0.0, 0.0), indices=[0, 5])
    assert results[0].ok
    assert results[1].index == 5
    assert isinstance(results[1].error, InvalidIndex)


def test_velocities_report_fallback_mode(collinear_span):
    results = WakeEmission(collinear_span, build_config(on_degenerate="fallback")).velocities((0.0, 0.0, -1.0))
    assert all(r.ok and r.mode == MODE_DIRECT for r in results)
    assert all(np.array_equal(r.velocity, [0.0, 0.0, 1.0]) for r in results)
