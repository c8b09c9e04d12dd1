# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Streaming SVG writer.
Every drawing method formats a single element and writes it to the sink immediately; nothing is buffered.
SVG elements reference: https://developer.mozilla.org/en-US/docs/Web/SVG/Element.
'''

from contextlib import contextmanager
from math import isfinite
from typing import Any, Iterable, Iterator, Sequence, TextIO

from .escape import esc_xml_attr, esc_xml_text
from .fmt import (coord, Dim, dim, end_style, fmt_num, fmt_points, group_open, href, join_transforms, loc, Num, one_zero,
  path_open, rgb, rgba, style_attr)
from .io import writeL, writeZ


svg_prolog = '''\
<?xml version="1.0"?>
<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:xlink="http://www.w3.org/1999/xlink"
     width="{w}" height="{h}">
<!-- Generated by svgpen -->
'''


class Canvas:
  '''
  Canvas writes SVG markup to `file`, which can be any object with a `write(str)` method.
  A document is written by calling `start`, then any sequence of drawing methods, then `end`.
  Output order is call order.

  The canvas does not check its own usage:
  calls before `start` or after `end`, unbalanced groups, and mismatched coordinate sequences
  all produce malformed output rather than exceptions.
  Errors raised by the sink propagate out of the drawing call that triggered them.

  Shape methods take a trailing `*style` sequence of tokens.
  A token containing "=" is an explicit attribute such as `id="a"` and is written verbatim;
  any other token is a CSS declaration list such as `fill:red;stroke:black`, written as a `style` attribute.
  '''

  def __init__(self, file:TextIO) -> None:
    self.file = file


  def __repr__(self) -> str:
    return f'{self.__class__.__name__}({self.file!r})'


  def write(self, *items:Any) -> None:
    writeZ(self.file, *items)


  # Structure, metadata, and links.

  def start(self, w:Dim, h:Dim) -> None:
    '''
    Begin the document with the width `w` and height `h`.
    Reference: http://www.w3.org/TR/SVG11/struct.html#SVGElement
    '''
    self.write(svg_prolog.format(w=fmt_num(w), h=fmt_num(h)))


  def end(self) -> None:
    'End the document.'
    writeL(self.file, '</svg>')


  @contextmanager
  def document(self, w:Dim, h:Dim) -> Iterator['Canvas']:
    '''
    Context manager that writes `start` on entry and `end` on exit.
    If the body raises, the document is still closed, unless the exception is an `OSError`:
    the sink may be broken, so it is not written again and the original error propagates unchanged.
    '''
    self.start(w, h)
    try: yield self
    except OSError: raise
    except BaseException:
      self.end()
      raise
    self.end()


  def group_with_style(self, style:str) -> None:
    '''
    Begin a group with the specified style; must be paired with `group_end`.
    Reference: http://www.w3.org/TR/SVG11/struct.html#GElement
    '''
    self._group('style', style)

  def group_with_transform(self, transform:str|Iterable[str]) -> None:
    'Begin a group with the specified transform, or a sequence of transforms to be joined with spaces.'
    self._group('transform', join_transforms(transform))

  def group_with_id(self, id:str) -> None:
    'Begin a group with the specified id.'
    self._group('id', id)

  def group_end(self) -> None:
    'End a group begun by one of the `group_with_*` methods.'
    writeL(self.file, '</g>')

  def _group(self, name:str, value:str) -> None:
    writeL(self.file, group_open(name, value))


  @contextmanager
  def group(self, *, style:str|None=None, transform:str|Iterable[str]|None=None, id:str|None=None) -> Iterator['Canvas']:
    'Context manager for a group with exactly one of `style`, `transform`, or `id`; closed on exit as in `document`.'
    given = [k for k, v in (('style', style), ('transform', transform), ('id', id)) if v is not None]
    if len(given) != 1:
      raise ValueError(f'group requires exactly one of `style`, `transform`, or `id`; received: {given}')
    if style is not None: self.group_with_style(style)
    elif transform is not None: self.group_with_transform(transform)
    else: self.group_with_id(id) # type: ignore[arg-type]
    try: yield self
    except OSError: raise # Do not write to a failing sink again.
    except BaseException:
      self.group_end()
      raise
    self.group_end()


  def defs_begin(self) -> None:
    '''
    Begin a definition block.
    Reference: http://www.w3.org/TR/SVG11/struct.html#DefsElement
    '''
    writeL(self.file, '<defs>')

  def defs_end(self) -> None:
    writeL(self.file, '</defs>')


  def description(self, text:Any) -> None:
    '''
    Write a `desc` element containing the escaped `text`.
    Reference: http://www.w3.org/TR/SVG11/struct.html#DescElement
    '''
    self._text_tag('desc', '', text)

  def title(self, text:Any) -> None:
    '''
    Write a `title` element containing the escaped `text`.
    Reference: http://www.w3.org/TR/SVG11/struct.html#TitleElement
    '''
    self._text_tag('title', '', text)


  def link_begin(self, href:str, title:str) -> None:
    '''
    Begin a link to `href` with the specified title; must be paired with `link_end`.
    Reference: http://www.w3.org/TR/SVG11/linking.html#Links
    '''
    writeL(self.file, f'<a xlink:href="{esc_xml_attr(href)}" xlink:title="{esc_xml_attr(title)}">')

  def link_end(self) -> None:
    writeL(self.file, '</a>')


  def use(self, x:Dim, y:Dim, link:str, *style:str) -> None:
    '''
    Place the object referenced by `link` at x, y.
    Reference: http://www.w3.org/TR/SVG11/struct.html#UseElement
    '''
    self.write(f'<use {loc(x, y)} {href(link)} ', end_style(style))


  # Shapes.

  def circle(self, cx:Dim, cy:Dim, r:Dim, *style:str) -> None:
    '''
    Circle centered at cx, cy with radius r.
    Reference: http://www.w3.org/TR/SVG11/shapes.html#CircleElement
    '''
    self.write(f'<circle cx="{fmt_num(cx)}" cy="{fmt_num(cy)}" r="{fmt_num(r)}" ', end_style(style))


  def ellipse(self, cx:Dim, cy:Dim, rx:Dim, ry:Dim, *style:str) -> None:
    '''
    Ellipse centered at cx, cy with radii rx and ry.
    Reference: http://www.w3.org/TR/SVG11/shapes.html#EllipseElement
    '''
    self.write(f'<ellipse cx="{fmt_num(cx)}" cy="{fmt_num(cy)}" rx="{fmt_num(rx)}" ry="{fmt_num(ry)}" ', end_style(style))


  def rect(self, x:Dim, y:Dim, w:Dim, h:Dim, *style:str) -> None:
    '''
    Rectangle with upper left corner at x, y.
    Reference: http://www.w3.org/TR/SVG11/shapes.html#RectElement
    '''
    self.write(f'<rect {dim(x, y, w, h)} ', end_style(style))


  def round_rect(self, x:Dim, y:Dim, w:Dim, h:Dim, rx:Dim, ry:Dim, *style:str) -> None:
    'Rectangle with upper left corner at x, y, and corners rounded by radii rx and ry.'
    self.write(f'<rect {dim(x, y, w, h)} rx="{fmt_num(rx)}" ry="{fmt_num(ry)}" ', end_style(style))


  def square(self, x:Dim, y:Dim, side:Dim, *style:str) -> None:
    self.rect(x, y, side, side, *style)


  def polygon(self, xs:Sequence[Dim], ys:Sequence[Dim], *style:str) -> None:
    '''
    Closed shape through the points (xs[i], ys[i]).
    If the sequences differ in length the points attribute is left empty.
    Reference: http://www.w3.org/TR/SVG11/shapes.html#PolygonElement
    '''
    self._poly('polygon', xs, ys, style)


  def polyline(self, xs:Sequence[Dim], ys:Sequence[Dim], *style:str) -> None:
    '''
    Connected line segments through the points (xs[i], ys[i]).
    Reference: http://www.w3.org/TR/SVG11/shapes.html#PolylineElement
    '''
    self._poly('polyline', xs, ys, style)


  def _poly(self, tag:str, xs:Sequence[Dim], ys:Sequence[Dim], style:Sequence[str]) -> None:
    self.write(f'<{tag} points="{fmt_points(xs, ys)}" ', end_style(style))


  def line(self, x1:Dim, y1:Dim, x2:Dim, y2:Dim, *style:str) -> None:
    '''
    Straight line between two points.
    Reference: http://www.w3.org/TR/SVG11/shapes.html#LineElement
    '''
    self.write(f'<line x1="{fmt_num(x1)}" y1="{fmt_num(y1)}" x2="{fmt_num(x2)}" y2="{fmt_num(y2)}" ', end_style(style))


  def image(self, x:Dim, y:Dim, w:Dim, h:Dim, link:str, *style:str) -> None:
    '''
    Place the image referenced by `link` with upper left corner at x, y.
    Reference: http://www.w3.org/TR/SVG11/struct.html#ImageElement
    '''
    self.write(f'<image {dim(x, y, w, h)} {href(link)} ', end_style(style))


  def text(self, x:Dim, y:Dim, text:Any, *style:str) -> None:
    '''
    Place `text` at x, y. Only the first style token is used, and it is always treated as CSS.
    Reference: http://www.w3.org/TR/SVG11/text.html#TextElement
    '''
    attrs = f' {loc(x, y)} '
    if style: attrs += style_attr(style[0])
    self._text_tag('text', attrs, text)


  def _text_tag(self, tag:str, attrs:str, text:Any) -> None:
    writeL(self.file, f'<{tag}{attrs}>', esc_xml_text(text), f'</{tag}>')


  # Paths.

  def arc(self, sx:Dim, sy:Dim, rx:Dim, ry:Dim, rotation:Dim, large:bool, sweep:bool, ex:Dim, ey:Dim, *style:str) -> None:
    '''
    Elliptical arc from sx, sy to ex, ey, with radii rx, ry and x axis rotation `rotation`.
    If `large` is true the arc sweep angle is greater than or equal to 180 degrees.
    If `sweep` is true the arc is drawn in the positive-angle (clockwise) direction.
    Reference: http://www.w3.org/TR/SVG11/paths.html#PathDataEllipticalArcCommands
    '''
    self.write(path_open(sx, sy),
      f' A{coord(rx, ry)} {fmt_num(rotation)} {one_zero(large)} {one_zero(sweep)} {coord(ex, ey)}" ',
      end_style(style))


  def cubic_bezier(self, sx:Dim, sy:Dim, c1x:Dim, c1y:Dim, c2x:Dim, c2y:Dim, ex:Dim, ey:Dim, *style:str) -> None:
    '''
    Cubic Bézier curve from sx, sy to ex, ey with control points c1x, c1y and c2x, c2y.
    Reference: http://www.w3.org/TR/SVG11/paths.html#PathDataCubicBezierCommands
    '''
    self.write(path_open(sx, sy), f' C{coord(c1x, c1y)} {coord(c2x, c2y)} {coord(ex, ey)}" ', end_style(style))


  def quadratic_bezier(self, sx:Dim, sy:Dim, cx:Dim, cy:Dim, ex:Dim, ey:Dim, tx:Dim, ty:Dim, *style:str) -> None:
    '''
    Quadratic Bézier curve from sx, sy to ex, ey with control point cx, cy,
    continued by a smooth quadratic segment to tx, ty.
    Reference: http://www.w3.org/TR/SVG11/paths.html#PathDataQuadraticBezierCommands
    '''
    self.write(path_open(sx, sy), f' Q{coord(cx, cy)} {coord(ex, ey)} T{coord(tx, ty)}" ', end_style(style))


  # Colors.

  def rgb(self, r:int, g:int, b:int) -> str:
    'Return a fill style for a (r)ed, (g)reen, (b)lue triple. Reference: http://www.w3.org/TR/css3-color/'
    return rgb(r, g, b)

  def rgba(self, r:int, g:int, b:int, alpha:float) -> str:
    'Return a fill style for a (r)ed, (g)reen, (b)lue triple and opacity.'
    return rgba(r, g, b, alpha)


  # High level.

  def grid(self, x:Num, y:Num, w:Num, h:Num, spacing:Num, *style:str) -> None:
    '''
    Draw a lattice of lines over the box at x, y with size w, h, every `spacing` units.
    Each axis begins at the box origin and ends with the first line at or past the far edge,
    so the last line overshoots the box when `spacing` does not divide the size.
    If a style is given the lattice is wrapped in a group with the first style token.
    '''
    if not spacing > 0: raise ValueError(f'grid spacing must be positive; received {spacing!r}')
    if not all(isfinite(n) for n in (x, y, w, h, spacing)):
      raise ValueError(f'grid bounds must be finite; received x={x!r}, y={y!r}, w={w!r}, h={h!r}, spacing={spacing!r}')
    if style: self.group_with_style(style[0])
    for ix in _lattice(x, x+w, spacing): self.line(ix, y, ix, y+h) # Vertical lines.
    for iy in _lattice(y, y+h, spacing): self.line(x, iy, x+w, iy) # Horizontal lines.
    if style: self.group_end()


def _lattice(start:Num, end:Num, step:Num) -> Iterator[Num]:
  'Yield `start`, `start+step`, ... up to and including the first value >= `end`.'
  i = start
  while True:
    yield i
    if i >= end: return
    i += step
