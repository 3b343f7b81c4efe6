##
## render — scene to interactive svg document
##

import json
import logging
from string import Template

from .elements import Element, Container, Text, Script, SVG, format_pair, format_value
from .scene import GraphicsScene
from .project import size_base, padding_base, get_bounds, get_projection, Projector

logger = logging.getLogger(__name__)

# point markers
marker_radius = 3
label_offset = (5, -5)
label_font = dict(font_family='sans-serif', font_size=12)

# crosshair overlay
guide_color = '#666'
guide_width = 0.5
readout_font = dict(font_family='monospace', font_size=12)

##
## interaction script
##

# inverse is per-axis since the transform has no rotation or shear
script_template = Template("""
const svg = document.currentScript.parentElement;
const matrix = $matrix;
svg.addEventListener('mousemove', (e) => {
  const bbox = svg.getBoundingClientRect();
  const x = e.clientX - bbox.left;
  const y = e.clientY - bbox.top;
  const crosshair = svg.getElementById('crosshair');
  const h = svg.getElementById('crosshair-h');
  const v = svg.getElementById('crosshair-v');
  const coords = svg.getElementById('coordinates');

  crosshair.style.display = 'block';
  h.setAttribute('x1', '0');
  h.setAttribute('x2', '$size');
  h.setAttribute('y1', y);
  h.setAttribute('y2', y);
  v.setAttribute('x1', x);
  v.setAttribute('x2', x);
  v.setAttribute('y1', '0');
  v.setAttribute('y2', '$size');

  const real = {
    x: (x - matrix.e) / matrix.a,
    y: (y - matrix.f) / matrix.d,
  };

  coords.textContent = '(' + real.x.toFixed(2) + ', ' + real.y.toFixed(2) + ')';
  coords.setAttribute('x', (x + 5).toString());
  coords.setAttribute('y', (y - 5).toString());
});
svg.addEventListener('mouseleave', () => {
  svg.getElementById('crosshair').style.display = 'none';
});
""")

def interaction_script(transform, size=size_base):
    if not transform.is_axis_aligned():
        raise ValueError('Interaction script only supports transforms without rotation or shear')
    matrix = json.dumps(transform.as_dict())
    source = script_template.substitute(matrix=matrix, size=format_value(size))
    return Script(source)

##
## primitive nodes
##

def point_node(p, proj):
    q = proj.point(p)
    children = [
        Element('circle', cx=q.x, cy=q.y, r=marker_radius, fill=p.color or 'black')
    ]
    if p.label:
        dx, dy = label_offset
        children.append(Text(p.label, x=q.x+dx, y=q.y+dy, **label_font))
    return Container(children)

def line_node(line, proj, scale_strokes=False):
    verts = proj.points(line.points)
    stroke = line.stroke
    if scale_strokes:
        stroke = proj.extent_x(stroke)
    return Element(
        'polyline',
        points=' '.join([format_pair(q.x, q.y) for q in verts]),
        fill='none', stroke='black', stroke_width=stroke
    )

def rect_node(rect, proj):
    x, y, w, h = proj.rect_box(rect)
    return Element(
        'rect', x=x, y=y, width=w, height=h,
        fill=rect.fill or 'none', stroke=rect.stroke or 'black'
    )

def circle_node(circle, proj):
    c = proj.point(circle.center)
    return Element(
        'circle', cx=c.x, cy=c.y, r=proj.radius(circle.radius),
        fill=circle.fill or 'none', stroke=circle.stroke or 'black'
    )

# attributes are filled in by the interaction script
def crosshair_node(size=size_base):
    guide = dict(stroke=guide_color, stroke_width=guide_width)
    children = [
        Element('line', id='crosshair-h', y1=0, y2=size, **guide),
        Element('line', id='crosshair-v', x1=0, x2=size, **guide),
        Text('', id='coordinates', fill=guide_color, **readout_font),
    ]
    return Container(children, id='crosshair', style='display: none')

##
## document
##

def build_document(scene, size=size_base, padding=padding_base, scale_strokes=False):
    bounds = get_bounds(scene)
    transform = get_projection(bounds, scene.coordinate_system, size=size, padding=padding)
    proj = Projector(transform)

    logger.debug('bounds %s', bounds)
    logger.debug('projection %s (%s)', transform, scene.coordinate_system)

    # paint order
    children = []
    children += [point_node(p, proj) for p in scene.points]
    children += [line_node(l, proj, scale_strokes=scale_strokes) for l in scene.lines]
    children += [rect_node(r, proj) for r in scene.rects]
    children += [circle_node(c, proj) for c in scene.circles]
    children += [crosshair_node(size), interaction_script(transform, size)]

    return SVG(children, size=size)

def render_scene(scene, size=size_base, padding=padding_base, scale_strokes=False, pretty=True):
    if isinstance(scene, dict):
        scene = GraphicsScene.from_dict(scene)
    doc = build_document(scene, size=size, padding=padding, scale_strokes=scale_strokes)
    return doc.svg(indent=2 if pretty else None)
