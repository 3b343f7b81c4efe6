from .scene import Point, Line, Rect, Circle, GraphicsScene

from .project import (
    size_base, padding_base,
    Bounds, get_bounds,
    AffineTransform, translate, scale, compose, get_projection,
    Projector
)

from .elements import (
    rounder, format_value,
    Element, Container, Text, Script, SVG
)

from .render import (
    point_node, line_node, rect_node, circle_node, crosshair_node,
    interaction_script, build_document, render_scene
)
