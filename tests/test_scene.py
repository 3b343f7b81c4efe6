"""
Tests for scene primitives and input coercion.
"""

import pytest

from scenesvg import Point, Line, Rect, Circle, GraphicsScene


def test_collections_default_empty():
    scene = GraphicsScene()
    assert scene.points == []
    assert scene.lines == []
    assert scene.rects == []
    assert scene.circles == []
    assert scene.coordinate_system == 'math'
    assert scene.is_empty()


def test_none_coordinate_system_defaults_to_math():
    assert GraphicsScene(coordinate_system=None).coordinate_system == 'math'


def test_point_moved_is_a_copy():
    p = Point(1, 2, color='red', label='A', stroke=2)
    q = p.moved(10, 20)
    assert q is not p
    assert q == Point(10, 20, color='red', label='A', stroke=2)
    assert p.xy == (1, 2)


def test_line_stroke_resolution():
    assert Line([Point(0, 0), Point(1, 1, stroke=4)]).stroke == 1
    assert Line([Point(0, 0, stroke=3), Point(1, 1)]).stroke == 3
    assert Line([]).stroke == 1


def test_points_from_tuples_and_dicts():
    line = Line([(0, 1), {'x': 2, 'y': 3, 'color': 'blue'}])
    assert [p.xy for p in line.points] == [(0, 1), (2, 3)]
    assert line.points[1].color == 'blue'


def test_bad_point_rejected():
    with pytest.raises(ValueError):
        Line([(1, 2, 3)])


def test_rect_corners():
    rect = Rect((1, 1), width=4, height=2)
    assert sorted(rect.corners()) == [(-1, 0), (-1, 2), (3, 0), (3, 2)]


def test_circle_extremes():
    circle = Circle((0, 0), radius=2)
    assert circle.extremes() == [(-2, 0), (2, 0), (0, -2), (0, 2)]


def test_shapes_from_dicts():
    scene = GraphicsScene(
        rects=[{'center': {'x': 0, 'y': 0}, 'width': 2, 'height': 1, 'fill': 'red'}],
        circles=[{'center': (1, 1), 'radius': 0.5}],
        lines=[[(0, 0), (1, 1)]],
    )
    assert scene.rects[0].fill == 'red'
    assert scene.rects[0].center.xy == (0, 0)
    assert scene.circles[0].radius == 0.5
    assert len(scene.lines[0]) == 2
    assert not scene.is_empty()


def test_from_dict_without_wrapper():
    scene = GraphicsScene.from_dict({'points': [{'x': 1, 'y': 2}]})
    assert scene.points[0].xy == (1, 2)
    assert scene.coordinate_system == 'math'


def test_repr_svg_renders_document():
    markup = GraphicsScene(points=[(0, 0)])._repr_svg_()
    assert markup.startswith('<svg ')


def test_points_are_hashable():
    a = Point(1, 2, label='A')
    assert len({a, Point(1, 2, label='A'), Point(1, 2)}) == 2
    assert {a: 'first'}[Point(1, 2, label='A')] == 'first'
