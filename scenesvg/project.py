##
## project — scene space to canvas space
##

import numpy as np

from .scene import coordinate_systems

# sizing
size_base = 640
padding_base = 40

# fallback box and minimum axis extent
bounds_base = (-1, 1, -1, 1)
extent_min = 2

##
## bounds
##

class Bounds:
    def __init__(self, xmin, xmax, ymin, ymax):
        self.xmin = xmin
        self.xmax = xmax
        self.ymin = ymin
        self.ymax = ymax

    def __repr__(self):
        return f'Bounds(x=[{self.xmin}, {self.xmax}], y=[{self.ymin}, {self.ymax}])'

    def __eq__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return self.tuple() == other.tuple()

    def tuple(self):
        return self.xmin, self.xmax, self.ymin, self.ymax

    @property
    def width(self):
        return self.xmax - self.xmin

    @property
    def height(self):
        return self.ymax - self.ymin

    @property
    def center(self):
        return 0.5*(self.xmin + self.xmax), 0.5*(self.ymin + self.ymax)

    def corners(self):
        return [
            (self.xmin, self.ymin), (self.xmax, self.ymin),
            (self.xmin, self.ymax), (self.xmax, self.ymax),
        ]

def widen(lo, hi, extent=extent_min):
    if hi > lo:
        return lo, hi
    mid = 0.5*(lo + hi)
    return mid - 0.5*extent, mid + 0.5*extent

def scene_coords(scene):
    coords = [p.xy for p in scene.points]
    coords += [p.xy for l in scene.lines for p in l.points]
    coords += [c for r in scene.rects for c in r.corners()]
    coords += [c for s in scene.circles for c in s.extremes()]
    return coords

def get_bounds(scene):
    coords = scene_coords(scene)
    if len(coords) == 0:
        return Bounds(*bounds_base)

    xy = np.array(coords, dtype=float)
    xmin, ymin = np.min(xy, axis=0)
    xmax, ymax = np.max(xy, axis=0)

    # zero-extent axes would give an infinite scale
    xmin, xmax = widen(float(xmin), float(xmax))
    ymin, ymax = widen(float(ymin), float(ymax))

    return Bounds(xmin, xmax, ymin, ymax)

##
## affine transforms
##

def translate(tx, ty):
    return np.array([
        [1, 0, tx],
        [0, 1, ty],
        [0, 0, 1],
    ], dtype=float)

def scale(sx, sy):
    return np.array([
        [sx, 0, 0],
        [0, sy, 0],
        [0, 0, 1],
    ], dtype=float)

def compose(*mats):
    out = np.eye(3)
    for m in mats:
        out = out @ m
    return out

class AffineTransform:
    """
    Maps (x, y) to (a*x + c*y + e, b*x + d*y + f).

    Transforms built by get_projection never carry rotation or shear, so
    b = c = 0 and the inverse has a closed form per axis.
    """

    def __init__(self, a=1, b=0, c=0, d=1, e=0, f=0):
        self.a = a
        self.b = b
        self.c = c
        self.d = d
        self.e = e
        self.f = f

    def __repr__(self):
        return f'AffineTransform({self.a}, {self.b}, {self.c}, {self.d}, {self.e}, {self.f})'

    @classmethod
    def from_matrix(cls, m):
        return cls(
            a=float(m[0, 0]), b=float(m[1, 0]), c=float(m[0, 1]),
            d=float(m[1, 1]), e=float(m[0, 2]), f=float(m[1, 2])
        )

    @property
    def matrix(self):
        return np.array([
            [self.a, self.c, self.e],
            [self.b, self.d, self.f],
            [0, 0, 1],
        ], dtype=float)

    def compose(self, other):
        return AffineTransform.from_matrix(self.matrix @ other.matrix)

    def is_axis_aligned(self):
        return self.b == 0 and self.c == 0

    def apply(self, x, y):
        return (
            self.a*x + self.c*y + self.e,
            self.b*x + self.d*y + self.f,
        )

    # xy has shape (n, 2)
    def apply_many(self, xy):
        xy = np.asarray(xy, dtype=float).reshape(-1, 2)
        return xy @ self.matrix[:2, :2].T + self.matrix[:2, 2]

    def invert(self, x, y):
        if not self.is_axis_aligned():
            raise ValueError('Closed-form inverse requires a transform without rotation or shear')
        return (x - self.e)/self.a, (y - self.f)/self.d

    def as_dict(self):
        return dict(a=self.a, b=self.b, c=self.c, d=self.d, e=self.e, f=self.f)

# tiny extents overflow the ratio as surely as zero ones
def fit_scale(inner, extent):
    if extent > 0:
        k = inner/extent
        if np.isfinite(k):
            return k
    return inner/extent_min

def get_projection(bounds, coordinate_system='math', size=size_base, padding=padding_base):
    if coordinate_system not in coordinate_systems:
        raise ValueError(f'Unknown coordinate system: {coordinate_system}')

    inner = size - 2*padding
    if inner <= 0:
        raise ValueError(f'Padding {padding} leaves no room on a canvas of size {size}')

    # uniform fit, never crop
    k = min(fit_scale(inner, bounds.width), fit_scale(inner, bounds.height))
    ky = -k if coordinate_system == 'screen' else k

    cx, cy = bounds.center
    mat = compose(
        translate(size/2, size/2),
        scale(k, ky),
        translate(-cx, -cy),
    )

    transform = AffineTransform.from_matrix(mat)
    assert transform.is_axis_aligned()

    return transform

##
## projector
##

class Projector:
    def __init__(self, transform):
        self.transform = transform

    @property
    def kx(self):
        return abs(self.transform.a)

    @property
    def ky(self):
        return abs(self.transform.d)

    def point(self, p):
        x, y = self.transform.apply(p.x, p.y)
        return p.moved(x, y)

    def points(self, ps):
        if len(ps) == 0:
            return []
        xy = self.transform.apply_many([p.xy for p in ps])
        return [p.moved(float(x), float(y)) for p, (x, y) in zip(ps, xy)]

    def extent_x(self, v):
        return v*self.kx

    def extent_y(self, v):
        return v*self.ky

    def radius(self, r):
        return r*self.kx

    # center anchored, top-left corner plus size
    def rect_box(self, rect):
        c = self.point(rect.center)
        w = self.extent_x(rect.width)
        h = self.extent_y(rect.height)
        return c.x - w/2, c.y - h/2, w, h
