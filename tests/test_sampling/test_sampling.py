import numpy as np
import pytest

from dinkuspy.cad_types import P2
from dinkuspy.curve import Curve
from dinkuspy.primitives import A2, C2, L2
from dinkuspy.sampling import (
    distance_grid,
    nearest_sample_parameter,
    sample_parameters,
    sample_points,
    sample_tangents,
)

SHAPES = {
    "line": L2(P2(-1, -2), P2(3, 1)),
    "degenerate_line": L2(P2(1, 1), P2(1, 1)),
    "circle": C2(P2(0.5, -0.5), 2),
    "arc": A2(P2(0, 0), 1.5, 30, 240),
    "clockwise_arc": A2(P2(1, 1), 2, 170, -130),
    "full_arc": A2(P2(0, 0), 1, -45, 360),
    "curve": Curve.create(L2(P2(-3, 0), P2(0, 0)))
    .arc_to(P2(2, 2))
    .line_to(P2(2, 4))
    .arc_to(P2(-1, 3)),
}

PROBES = [P2(x, y) for x in np.linspace(-4, 4, 9) for y in np.linspace(-4, 4, 9)]


class TestSampleParameters:
    """Test parameter generation."""

    def test_open_parameters(self):
        np.testing.assert_allclose(sample_parameters(5), [0, 0.25, 0.5, 0.75, 1])

    def test_closed_parameters(self):
        np.testing.assert_allclose(sample_parameters(5, closed=True), [0, 0.2, 0.4, 0.6, 0.8])

    def test_single_parameter(self):
        np.testing.assert_array_equal(sample_parameters(1), [0.0])

    def test_count_must_be_positive(self):
        with pytest.raises(ValueError):
            sample_parameters(0)


class TestSamplePoints:
    """Test bulk evaluation."""

    def test_line_points(self):
        points = sample_points(L2(P2(0, 0), P2(4, 2)), 3)
        assert points.shape == (3, 2)
        np.testing.assert_allclose(points, [[0, 0], [2, 1], [4, 2]])

    def test_circle_points_lie_on_circle(self):
        circle = C2(P2(1, 2), 3)
        points = sample_points(circle, 50)
        radii = np.linalg.norm(points - np.array([1, 2]), axis=1)
        np.testing.assert_allclose(radii, 3)

    def test_tangents_are_unit_vectors(self):
        tangents = sample_tangents(SHAPES["curve"], 64)
        np.testing.assert_allclose(np.linalg.norm(tangents, axis=1), 1)


class TestNearestParameterProperty:
    """point_at(parameter_near(p)) is never beaten by a brute-force sample."""

    @pytest.mark.parametrize("name", sorted(SHAPES))
    def test_no_sample_is_closer(self, name):
        shape = SHAPES[name]
        samples = sample_points(shape, 4001)
        for point in PROBES:
            nearest = shape.point_at(shape.parameter_near(point))
            exact = nearest.distance_to(point)
            brute = np.min(np.linalg.norm(samples - np.array([point.x, point.y]), axis=1))
            assert exact <= brute + 1e-9

    @pytest.mark.parametrize("name", ["line", "arc", "clockwise_arc"])
    def test_distance_agrees_with_nearest_point(self, name):
        shape = SHAPES[name]
        for point in PROBES:
            nearest = shape.point_at(shape.parameter_near(point))
            assert shape.distance_to(point) == pytest.approx(nearest.distance_to(point))

    def test_nearest_sample_parameter_approximates_parameter_near(self):
        line = SHAPES["line"]
        point = P2(2, -1)
        assert nearest_sample_parameter(line, point, 1001) == pytest.approx(
            line.parameter_near(point), abs=1e-3
        )


class TestDistanceGrid:
    """Test distance field evaluation."""

    def test_circle_distance_grid(self):
        circle = C2(P2(0, 0), 1)
        xs = np.linspace(-2, 2, 5)
        ys = np.linspace(-1, 1, 3)
        grid = distance_grid(circle, xs, ys)
        assert grid.shape == (3, 5)
        expected = np.abs(np.hypot(xs[np.newaxis, :], ys[:, np.newaxis]) - 1)
        np.testing.assert_allclose(grid, expected)

    def test_output_array_is_filled(self):
        out = np.zeros((2, 2))
        result = distance_grid(L2(P2(0, 0), P2(1, 0)), [0, 1], [0, 1], out=out)
        assert result is out
        np.testing.assert_allclose(out, [[0, 0], [1, 1]])

    def test_output_array_shape_is_checked(self):
        with pytest.raises(ValueError):
            distance_grid(L2(P2(0, 0), P2(1, 0)), [0, 1], [0, 1], out=np.zeros((3, 3)))
