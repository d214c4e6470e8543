"""
Test lifting surface topology, trailing edge bisector and wake emission velocity.
"""

import pytest
import numpy as np
from pathlib import Path

# Add src to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from panelwake.config import Parameters
from panelwake.geometry import LiftingSurface, build_wing
from panelwake.shape_generators import NACA4AirfoilGenerator


FOLLOW = Parameters(wake_emission_follow_bisector=True)
DIRECT = Parameters(wake_emission_follow_bisector=False)


@pytest.fixture
def flat_plate():
    """Flat 2x3-node plate in the XY plane: chord along x, span along y."""
    nodes = np.array([
        [0.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
        [0.0, 2.0, 0.0],
        [1.0, 0.0, 0.0],
        [1.0, 1.0, 0.0],
        [1.0, 2.0, 0.0],
    ])
    panels = np.array([[0, 3, 4, 1], [1, 4, 5, 2]], dtype=np.int32)
    grid = np.array([[0, 1, 2], [3, 4, 5]], dtype=np.int32)

    return LiftingSurface(
        nodes=nodes,
        panels=panels,
        name="plate",
        upper_nodes=grid,
        lower_nodes=grid.copy(),
        upper_panels=np.array([[0, 1]]),
        lower_panels=np.array([[0, 1]]),
    )


@pytest.fixture
def naca_wing():
    points = NACA4AirfoilGenerator.generate("0012", 24)
    return build_wing(points, chord=1.0, span=3.0, n_spanwise_nodes=4, name="naca")


class TestTopology:
    """Test grid extents and trailing edge lookups."""

    def test_flat_plate_counts(self, flat_plate):
        assert flat_plate.n_chordwise_nodes() == 2
        assert flat_plate.n_chordwise_panels() == 1
        assert flat_plate.n_spanwise_nodes() == 3
        assert flat_plate.n_spanwise_panels() == 2

    def test_trailing_edge_nodes_come_from_upper_grid(self, flat_plate):
        assert [flat_plate.trailing_edge_node(i) for i in range(3)] == [3, 4, 5]

    def test_trailing_edge_panels(self, flat_plate):
        assert flat_plate.trailing_edge_upper_panel(0) == 0
        assert flat_plate.trailing_edge_upper_panel(1) == 1
        assert flat_plate.trailing_edge_lower_panel(1) == 1

    def test_built_wing_counts(self, naca_wing):
        assert naca_wing.n_chordwise_nodes() == 13
        assert naca_wing.n_chordwise_panels() == 12
        assert naca_wing.n_spanwise_nodes() == 4
        assert naca_wing.n_spanwise_panels() == 3
        assert naca_wing.num_panels == 2 * 12 * 3

    def test_built_wing_shares_leading_and_trailing_rows(self, naca_wing):
        np.testing.assert_array_equal(naca_wing.upper_nodes[0], naca_wing.lower_nodes[0])
        np.testing.assert_array_equal(naca_wing.upper_nodes[-1], naca_wing.lower_nodes[-1])

    def test_built_wing_trailing_edge_position(self, naca_wing):
        for i in range(naca_wing.n_spanwise_nodes()):
            node = naca_wing.nodes[naca_wing.trailing_edge_node(i)]
            np.testing.assert_array_almost_equal(node[:2], [1.0, 0.0])

    def test_trailing_edge_panels_touch_trailing_edge(self, naca_wing):
        for i in range(naca_wing.n_spanwise_panels()):
            te_nodes = {naca_wing.trailing_edge_node(i), naca_wing.trailing_edge_node(i + 1)}
            upper = set(naca_wing.panels[naca_wing.trailing_edge_upper_panel(i)].tolist())
            lower = set(naca_wing.panels[naca_wing.trailing_edge_lower_panel(i)].tolist())
            assert te_nodes <= upper
            assert te_nodes <= lower

    def test_out_of_range_index_asserts(self, flat_plate):
        with pytest.raises(AssertionError):
            flat_plate.trailing_edge_node(3)


class TestTrailingEdgeBisector:
    """Test trailing edge bisector construction."""

    def test_flat_plate_bisector(self, flat_plate):
        for i in range(3):
            np.testing.assert_array_almost_equal(flat_plate.trailing_edge_bisector(i), [1.0, 0.0, 0.0])

    def test_symmetric_trailing_edge(self):
        nodes = np.array([
            [0.0, 0.0, 0.0],
            [0.9, 0.1, 0.0],
            [0.9, -0.1, 0.0],
            [1.0, 0.0, 0.0],
        ])
        surface = LiftingSurface(
            nodes=nodes,
            upper_nodes=np.array([[0], [1], [3]]),
            lower_nodes=np.array([[0], [2], [3]]),
            upper_panels=np.zeros((2, 0)),
            lower_panels=np.zeros((2, 0)),
        )
        np.testing.assert_array_almost_equal(surface.trailing_edge_bisector(0), [1.0, 0.0, 0.0])

    def test_asymmetric_bisector_is_unit(self):
        nodes = np.array([
            [0.0, 0.0, 0.0],
            [0.8, 0.3, 0.0],
            [0.9, -0.05, 0.0],
            [1.0, 0.0, 0.0],
        ])
        surface = LiftingSurface(
            nodes=nodes,
            upper_nodes=np.array([[0], [1], [3]]),
            lower_nodes=np.array([[0], [2], [3]]),
            upper_panels=np.zeros((2, 0)),
            lower_panels=np.zeros((2, 0)),
        )
        bisector = surface.trailing_edge_bisector(0)

        upper = np.array([0.2, -0.3, 0.0]) / np.linalg.norm([0.2, -0.3, 0.0])
        lower = np.array([0.1, 0.05, 0.0]) / np.linalg.norm([0.1, 0.05, 0.0])
        expected = (upper + lower) / np.linalg.norm(upper + lower)

        assert abs(np.linalg.norm(bisector) - 1.0) < 1e-12
        np.testing.assert_array_almost_equal(bisector, expected)

    def test_folded_back_trailing_edge_asserts(self):
        nodes = np.array([
            [0.5, 0.0, 0.0],
            [0.0, 0.0, 0.0],
            [2.0, 0.0, 0.0],
            [1.0, 0.0, 0.0],
        ])
        surface = LiftingSurface(
            nodes=nodes,
            upper_nodes=np.array([[0], [1], [3]]),
            lower_nodes=np.array([[0], [2], [3]]),
            upper_panels=np.zeros((2, 0)),
            lower_panels=np.zeros((2, 0)),
        )
        # Upper edge runs along +x, lower edge along -x
        with pytest.raises(AssertionError):
            surface.trailing_edge_bisector(0)

    def test_naca_wing_bisectors(self, naca_wing):
        for i in range(naca_wing.n_spanwise_nodes()):
            bisector = naca_wing.trailing_edge_bisector(i)
            assert abs(np.linalg.norm(bisector) - 1.0) < 1e-12
            np.testing.assert_array_almost_equal(bisector, [1.0, 0.0, 0.0])

    def test_bisector_follows_moving_nodes(self, naca_wing):
        before = naca_wing.trailing_edge_bisector(1)
        naca_wing.rotate(rz_deg=30.0)
        after = naca_wing.trailing_edge_bisector(1)

        np.testing.assert_array_almost_equal(before, [1.0, 0.0, 0.0])
        angle = np.deg2rad(30.0)
        np.testing.assert_array_almost_equal(after, [np.cos(angle), np.sin(angle), 0.0])

    def test_repeated_calls_are_identical(self, naca_wing):
        first = naca_wing.trailing_edge_bisector(2)
        second = naca_wing.trailing_edge_bisector(2)
        np.testing.assert_array_equal(first, second)


class TestWakeEmissionVelocity:
    """Test both wake emission modes."""

    def test_direct_mode_reverses_apparent_velocity(self, flat_plate):
        v = np.array([-1.0, 0.0, 0.0])
        for i in range(3):
            np.testing.assert_array_equal(flat_plate.wake_emission_velocity(v, i, DIRECT), [1.0, 0.0, 0.0])

    def test_direct_mode_ignores_geometry(self, naca_wing):
        rng = np.random.default_rng(0)
        for v in rng.normal(size=(5, 3)):
            for i in range(naca_wing.n_spanwise_nodes()):
                np.testing.assert_array_equal(naca_wing.wake_emission_velocity(v, i, DIRECT), -v)

    def test_default_parameters_follow_bisector(self, flat_plate):
        v = np.array([0.0, 0.0, 1.0])
        np.testing.assert_array_equal(
            flat_plate.wake_emission_velocity(v, 1),
            flat_plate.wake_emission_velocity(v, 1, FOLLOW),
        )

    def test_normal_apparent_velocity_projects_to_zero(self, flat_plate):
        # Wake normal is normalize((0, 2, 0) x (1, 0, 0)) = (0, 0, -1)
        result = flat_plate.wake_emission_velocity(np.array([0.0, 0.0, 1.0]), 1, FOLLOW)
        np.testing.assert_allclose(result, [0.0, 0.0, 0.0], atol=1e-15)

    def test_interior_station_removes_wake_normal_component(self, flat_plate):
        v = np.array([-1.0, 0.3, 0.5])
        result = flat_plate.wake_emission_velocity(v, 1, FOLLOW)

        wake_normal = np.array([0.0, 0.0, -1.0])
        assert abs(np.dot(result, wake_normal)) < 1e-15
        np.testing.assert_array_almost_equal(result, -(v - np.dot(v, wake_normal) * wake_normal))
        np.testing.assert_array_almost_equal(result, [1.0, -0.3, 0.0])

    def test_root_station_uses_one_sided_span(self):
        # Trailing edge swept in z between stations 0 and 1 only
        nodes = np.array([
            [0.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 2.0, 0.0],
            [1.0, 0.0, 0.0],
            [1.0, 1.0, 1.0],
            [1.0, 2.0, 1.0],
        ])
        grid = np.array([[0, 1, 2], [3, 4, 5]])
        surface = LiftingSurface(
            nodes=nodes,
            upper_nodes=grid,
            lower_nodes=grid,
            upper_panels=np.zeros((1, 0)),
            lower_panels=np.zeros((1, 0)),
        )
        v = np.array([-1.0, 0.0, 0.4])
        result = surface.wake_emission_velocity(v, 0, FOLLOW)

        bisector = surface.trailing_edge_bisector(0)
        span = nodes[4] - nodes[3]
        wake_normal = np.cross(span, bisector)
        wake_normal /= np.linalg.norm(wake_normal)

        np.testing.assert_array_almost_equal(result, -(v - np.dot(v, wake_normal) * wake_normal))
        assert abs(np.dot(result, wake_normal)) < 1e-12

    def test_tip_station_uses_one_sided_span(self, naca_wing):
        tip = naca_wing.n_spanwise_nodes() - 1
        v = np.array([-1.0, 0.25, 0.5])
        result = naca_wing.wake_emission_velocity(v, tip, FOLLOW)

        # Span along +z, bisector along +x: wake normal is +y
        np.testing.assert_array_almost_equal(result, [1.0, 0.0, -0.5])

    def test_single_span_station_projects_onto_bisector(self):
        nodes = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
        surface = LiftingSurface(
            nodes=nodes,
            upper_nodes=np.array([[0], [1]]),
            lower_nodes=np.array([[0], [1]]),
            upper_panels=np.zeros((1, 0)),
            lower_panels=np.zeros((1, 0)),
        )
        v = np.array([-1.0, 0.5, 2.0])
        result = surface.wake_emission_velocity(v, 0, FOLLOW)

        bisector = surface.trailing_edge_bisector(0)
        np.testing.assert_array_almost_equal(result, -np.dot(v, bisector) * bisector)
        np.testing.assert_array_almost_equal(result, [1.0, 0.0, 0.0])

    def test_single_chordwise_node_falls_back_to_direct(self):
        nodes = np.array([[0.0, 0.0, 0.0], [0.0, 1.0, 0.0], [0.0, 2.0, 0.0]])
        grid = np.array([[0, 1, 2]])
        surface = LiftingSurface(
            nodes=nodes,
            upper_nodes=grid,
            lower_nodes=grid,
            upper_panels=np.zeros((0, 2)),
            lower_panels=np.zeros((0, 2)),
        )
        v = np.array([0.3, -0.2, 0.7])
        for i in range(3):
            np.testing.assert_array_equal(surface.wake_emission_velocity(v, i, FOLLOW), -v)

    def test_symmetric_wing_emits_downstream(self, naca_wing):
        v = np.array([-1.0, 0.2, 0.0])
        for i in range(naca_wing.n_spanwise_nodes()):
            np.testing.assert_array_almost_equal(
                naca_wing.wake_emission_velocity(v, i, FOLLOW), [1.0, 0.0, 0.0]
            )

    def test_emission_follows_moving_nodes(self, naca_wing):
        v = np.array([-1.0, 0.0, 0.0])
        naca_wing.rotate(rz_deg=90.0)
        # Bisector now +y, span +z: wake normal is -x, so the whole velocity is removed
        np.testing.assert_allclose(naca_wing.wake_emission_velocity(v, 1, FOLLOW), 0.0, atol=1e-12)

    def test_repeated_calls_are_identical(self, naca_wing):
        v = np.array([-1.0, 0.1, 0.2])
        first = naca_wing.wake_emission_velocity(v, 2, FOLLOW)
        second = naca_wing.wake_emission_velocity(v, 2, FOLLOW)
        np.testing.assert_array_equal(first, second)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
