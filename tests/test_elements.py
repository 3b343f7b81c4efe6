"""
Tests for the svg node tree and its serializer.
"""

import pytest

from scenesvg import rounder, format_value, Element, Container, Text, Script, SVG
from scenesvg.elements import props_repr, format_pair


def test_rounder_collapses_integral_floats():
    assert rounder(320.0) == 320
    assert type(rounder(320.0)) is int
    assert rounder(0.5) == 0.5
    assert rounder(180.00000000000003) == 180
    assert rounder('none') == 'none'


def test_format_value_is_plain_decimal():
    assert format_value(640) == '640'
    assert format_value(12.5) == '12.5'
    assert format_value(-0.25) == '-0.25'
    assert format_value('#666') == '#666'


def test_non_finite_values_rejected():
    with pytest.raises(ValueError):
        format_value(float('inf'))
    with pytest.raises(ValueError):
        format_value(float('nan'))


def test_props_repr_demangles_and_skips_none():
    props = props_repr(dict(stroke_width=0.5, fill=None, font_family='monospace'))
    assert props == 'stroke-width="0.5" font-family="monospace"'


def test_format_pair():
    assert format_pair(40.0, 600.0) == '40,600'


def test_unary_element():
    circle = Element('circle', cx=320.0, cy=320.0, r=3, fill='black')
    assert circle.svg() == '<circle cx="320" cy="320" r="3" fill="black" />'


def test_text_is_escaped():
    label = Text('a < b & c', x=1, y=2)
    assert label.svg() == '<text x="1" y="2">a &lt; b &amp; c</text>'


def test_attribute_values_are_quoted():
    elem = Element('g', unary=True, title='say "hi"')
    assert elem.svg() == '<g title=\'say "hi"\' />'


def test_empty_container():
    assert Container().svg() == '<g></g>'
    assert Container().svg(indent=2) == '<g></g>'


def test_compact_nesting():
    group = Container([Element('circle', r=3), Text('A')], id='p')
    assert group.svg() == '<g id="p"><circle r="3" /><text>A</text></g>'


def test_pretty_nesting():
    group = Container([Container([Element('circle', r=3)]), Text('A')])
    expected = '\n'.join([
        '<g>',
        '  <g>',
        '    <circle r="3" />',
        '  </g>',
        '  <text>A</text>',
        '</g>',
    ])
    assert group.svg(indent=2) == expected


def test_script_wrapped_in_cdata():
    script = Script('\n    if (a < b) {\n      go();\n    }\n')
    assert script.svg() == '<script><![CDATA[    if (a < b) {\n      go();\n    }]]></script>'


def test_script_reindented_when_pretty():
    script = Script('\n    if (a < b) {\n      go();\n    }\n')
    expected = '\n'.join([
        '<script>',
        '  <![CDATA[',
        '  if (a < b) {',
        '    go();',
        '  }',
        '  ]]>',
        '</script>',
    ])
    assert script.svg(indent=2) == expected


def test_svg_root_props():
    root = SVG([], size=200)
    assert root.svg() == (
        '<svg width="200" height="200" viewBox="0 0 200 200" '
        'xmlns="http://www.w3.org/2000/svg"></svg>'
    )
