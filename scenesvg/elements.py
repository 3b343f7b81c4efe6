##
## elements — svg node tree and serializer
##

from math import isfinite
from xml.sax.saxutils import escape, quoteattr

# namespace
ns_svg = 'http://www.w3.org/2000/svg'

##
## basic tools
##

def demangle(k):
    return k.replace('_', '-')

def rounder(x, prec=13):
    if type(x) is bool:
        return x
    if isinstance(x, (int, float)):
        x = float(x)
        if not isfinite(x):
            raise ValueError(f'Non-finite attribute value: {x}')
        xr = round(x, ndigits=prec)
        if (xr % 1) == 0:
            return int(xr)
        else:
            return xr
    else:
        return x

def format_value(v):
    return str(rounder(v))

def props_repr(d):
    return ' '.join([
        f'{demangle(k)}={quoteattr(format_value(v))}' for k, v in d.items() if v is not None
    ])

def format_pair(x, y):
    return f'{format_value(x)},{format_value(y)}'

##
## core types
##

class Element:
    def __init__(self, tag, unary=True, **attr):
        self.tag = tag
        self.unary = unary
        self.attr = attr

    def __repr__(self):
        attr = props_repr(self.attr)
        return f'{self.tag}: {attr}'

    def props(self):
        return self.attr

    def inner(self, indent, depth):
        return ''

    def svg(self, indent=None, depth=0):
        props = props_repr(self.props())
        pre = ' ' if len(props) > 0 else ''
        tab = '' if indent is None else (indent*depth)*' '

        if self.unary:
            return f'{tab}<{self.tag}{pre}{props} />'
        else:
            inner = self.inner(indent, depth)
            if indent is not None and inner.startswith('\n'):
                return f'{tab}<{self.tag}{pre}{props}>{inner}{tab}</{self.tag}>'
            return f'{tab}<{self.tag}{pre}{props}>{inner}</{self.tag}>'

class Container(Element):
    def __init__(self, children=None, tag='g', **attr):
        super().__init__(tag=tag, unary=False, **attr)
        if children is None:
            children = []
        if not isinstance(children, list):
            children = [children]
        self.children = children

    def inner(self, indent, depth):
        if len(self.children) == 0:
            return ''
        if indent is None:
            return ''.join([c.svg() for c in self.children])
        inside = '\n'.join([c.svg(indent, depth+1) for c in self.children])
        return f'\n{inside}\n'

# text leaf
class Text(Element):
    def __init__(self, text='', **attr):
        super().__init__(tag='text', unary=False, **attr)
        self.text = text

    def inner(self, indent, depth):
        return escape(self.text)

# script body is emitted verbatim inside cdata
class Script(Element):
    def __init__(self, source='', **attr):
        super().__init__(tag='script', unary=False, **attr)
        self.source = source

    def inner(self, indent, depth):
        body = self.source.strip('\n')
        if indent is None:
            return f'<![CDATA[{body}]]>'
        tab = (indent*(depth+1))*' '
        lines = dedent_lines(body.split('\n'))
        inside = '\n'.join([f'{tab}{l}' if len(l) > 0 else '' for l in lines])
        return f'\n{tab}<![CDATA[\n{inside}\n{tab}]]>\n'

def dedent_lines(lines):
    widths = [len(l) - len(l.lstrip()) for l in lines if len(l.strip()) > 0]
    cut = min(widths) if len(widths) > 0 else 0
    return [l[cut:].rstrip() for l in lines]

class SVG(Container):
    def __init__(self, children=None, size=640, **attr):
        super().__init__(children=children, tag='svg', **attr)
        self.size = size

    def _repr_svg_(self):
        return self.svg()

    def props(self):
        s = self.size
        base = dict(width=s, height=s, viewBox=f'0 0 {format_value(s)} {format_value(s)}', xmlns=ns_svg)
        return {**base, **self.attr}
