##
## scene — primitive types
##

import copy

coordinate_systems = ('math', 'screen')

default_stroke = 1

##
## primitives
##

class Point:
    def __init__(self, x=0, y=0, color=None, label=None, stroke=None):
        self.x = x
        self.y = y
        self.color = color
        self.label = label
        self.stroke = stroke

    def __repr__(self):
        return f'Point({self.x}, {self.y})'

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __hash__(self):
        return hash((self.x, self.y, self.color, self.label, self.stroke))

    @property
    def xy(self):
        return self.x, self.y

    # projected copies keep color/label/stroke
    def moved(self, x, y):
        p = copy.copy(self)
        p.x = x
        p.y = y
        return p

class Line:
    def __init__(self, points=None):
        self.points = [pointify(p) for p in (points or [])]

    def __repr__(self):
        return f'Line({self.points})'

    def __len__(self):
        return len(self.points)

    @property
    def stroke(self):
        if len(self.points) == 0 or self.points[0].stroke is None:
            return default_stroke
        return self.points[0].stroke

class Rect:
    def __init__(self, center, width=1, height=1, fill=None, stroke=None):
        self.center = pointify(center)
        self.width = width
        self.height = height
        self.fill = fill
        self.stroke = stroke

    def __repr__(self):
        return f'Rect({self.center}, {self.width}, {self.height})'

    def corners(self):
        cx, cy = self.center.xy
        hw, hh = self.width/2, self.height/2
        return [
            (cx - hw, cy - hh), (cx + hw, cy - hh),
            (cx - hw, cy + hh), (cx + hw, cy + hh),
        ]

class Circle:
    def __init__(self, center, radius=1, fill=None, stroke=None):
        self.center = pointify(center)
        self.radius = radius
        self.fill = fill
        self.stroke = stroke

    def __repr__(self):
        return f'Circle({self.center}, {self.radius})'

    # left, right, top, bottom
    def extremes(self):
        cx, cy = self.center.xy
        r = self.radius
        return [(cx - r, cy), (cx + r, cy), (cx, cy - r), (cx, cy + r)]

##
## coercion
##

def pointify(p):
    if isinstance(p, Point):
        return p
    elif isinstance(p, dict):
        return Point(**p)
    elif type(p) in (tuple, list) and len(p) == 2:
        x, y = p
        return Point(x, y)
    else:
        raise ValueError(f'Cannot interpret {p!r} as a point')

def lineify(l):
    if isinstance(l, Line):
        return l
    elif isinstance(l, dict):
        return Line(l.get('points'))
    else:
        return Line(l)

def shapify(s, cls):
    if isinstance(s, cls):
        return s
    return cls(**s)

##
## scene
##

class GraphicsScene:
    def __init__(self, points=None, lines=None, rects=None, circles=None, coordinate_system='math'):
        if coordinate_system is None:
            coordinate_system = 'math'
        if coordinate_system not in coordinate_systems:
            raise ValueError(
                f'Unknown coordinate system: {coordinate_system}. '
                f'Valid systems: {list(coordinate_systems)}'
            )

        self.points = [pointify(p) for p in (points or [])]
        self.lines = [lineify(l) for l in (lines or [])]
        self.rects = [shapify(r, Rect) for r in (rects or [])]
        self.circles = [shapify(c, Circle) for c in (circles or [])]
        self.coordinate_system = coordinate_system

    def __repr__(self):
        counts = dict(
            points=len(self.points), lines=len(self.lines),
            rects=len(self.rects), circles=len(self.circles)
        )
        return f'GraphicsScene({self.coordinate_system}, {counts})'

    def _repr_svg_(self):
        from .render import render_scene
        return render_scene(self)

    @classmethod
    def from_dict(cls, d):
        if 'graphics' in d:
            d = d['graphics']
        return cls(
            points=d.get('points'),
            lines=d.get('lines'),
            rects=d.get('rects'),
            circles=d.get('circles'),
            coordinate_system=d.get('coordinateSystem', d.get('coordinate_system')),
        )

    def is_empty(self):
        return not (self.points or self.lines or self.rects or self.circles)
