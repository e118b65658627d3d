import math

import pytest

from grblscene.drawable import NO_START
from grblscene.tool import ToolDrawer, create_circle, normalize_angle
from grblscene.util import Color, Vector3, color_to_vector


def _xy_distance(a, b):
    return math.hypot(a.x - b.x, a.y - b.y)


@pytest.mark.parametrize("angle", [-725.0, -90.0, 0.0, 45.0, 360.0, 400.0, 1000.0])
def test_normalize_angle_range_and_equivalence(angle):
    result = normalize_angle(angle)
    assert 0 <= result <= 360
    assert math.isclose((angle - result) % 360, 0, abs_tol=1e-9) or math.isclose(
        (angle - result) % 360, 360, abs_tol=1e-9
    )


def test_normalize_angle_rejects_infinity():
    with pytest.raises(ValueError):
        normalize_angle(math.inf)


def test_create_circle_chains_segments():
    center = Vector3(2, 3, 4)
    circle = create_circle(center, 5, 20, Vector3(1, 0, 0))
    assert len(circle) == 40
    for k in range(19):
        assert circle[2 * k + 1].position == circle[2 * k + 2].position
    for v in circle:
        assert math.isclose(_xy_distance(v.position, center), 5)
        assert v.position.z == center.z
        assert v.start == NO_START
    assert math.isclose(circle[0].position.x, circle[-1].position.x)
    assert math.isclose(circle[0].position.y, circle[-1].position.y, abs_tol=1e-9)


def test_create_circle_single_arc_and_invalid():
    circle = create_circle(Vector3(0, 0, 0), 1, 1, Vector3(0, 0, 0))
    assert len(circle) == 3
    assert circle[0].position == circle[1].position
    with pytest.raises(ValueError):
        create_circle(Vector3(0, 0, 0), 1, 0, Vector3(0, 0, 0))


def test_flat_tool_vertex_count_and_colour():
    drawer = ToolDrawer()
    drawer.color = Color(1.0, 0.6, 0.0)
    drawer.update_geometry()
    assert drawer.end_length == 0
    assert len(drawer.lines) == 4 * 8 + 3 * 40
    assert drawer.points == []
    assert all(v.color == color_to_vector(drawer.color) for v in drawer.lines)


def test_side_vertices_lie_on_tool_radius():
    drawer = ToolDrawer()
    drawer.tool_position = Vector3(10, -4, 2)
    drawer.tool_diameter = 6
    drawer.update_geometry()
    side = drawer.lines[:32:8]
    for v in side:
        assert math.isclose(_xy_distance(v.position, drawer.tool_position), 3)
        assert math.isclose(v.position.z, drawer.tool_position.z + drawer.end_length)


def test_tool_angle_sets_end_length_and_stretches_length():
    drawer = ToolDrawer()
    drawer.tool_length = 0.5
    drawer.tool_angle = 90
    assert math.isclose(drawer.end_length, drawer.tool_diameter / 2)
    assert drawer.tool_length >= drawer.end_length
    drawer.update_geometry()
    assert len(drawer.lines) == 4 * 8 + 2 * 40


def test_flat_tool_angle_out_of_range():
    drawer = ToolDrawer()
    drawer.tool_angle = 180
    assert drawer.end_length == 0


def test_setters_only_request_update_on_change():
    drawer = ToolDrawer()
    drawer.update_geometry()
    drawer.tool_diameter = drawer.tool_diameter
    drawer.tool_position = drawer.tool_position
    assert not drawer.needs_update_geometry
    drawer.tool_length = drawer.tool_length + 1
    assert drawer.needs_update_geometry


def test_rotate_wraps_angle():
    drawer = ToolDrawer()
    drawer.rotate(-30)
    assert 0 <= drawer.rotation_angle <= 360
    assert math.isclose((drawer.rotation_angle + 30) % 360, 0, abs_tol=1e-9)
    before = drawer.rotation_angle
    drawer.rotate(360)
    assert math.isclose(drawer.rotation_angle, before) or math.isclose(
        drawer.rotation_angle - before, 360
    )