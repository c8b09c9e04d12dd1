# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from io import StringIO
from typing import Any, TextIO
from xml.etree import ElementTree

from svgpen import Canvas, EscapedStr, rotate, translate
from utest import utest, utest_exc, utest_out, utest_seq, utest_val


def draw(file:TextIO, method:str, *args:Any) -> None:
  'Call a single Canvas method against `file`.'
  getattr(Canvas(file), method)(*args)


def render(*calls:tuple) -> str:
  'Render a complete document from (method, *args) calls.'
  f = StringIO()
  svg = Canvas(f)
  svg.start(100, 100)
  for method, *args in calls:
    getattr(svg, method)(*args)
  svg.end()
  return f.getvalue()


# Document lifecycle.

utest_out('''\
<?xml version="1.0"?>
<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:xlink="http://www.w3.org/1999/xlink"
     width="640" height="480">
<!-- Generated by svgpen -->
''', draw, 'start', 640, 480)

utest_out('</svg>\n', draw, 'end')

for w, h in [(1, 1), (0, 0), (-5, 7), (1920, 1080)]:
  f = StringIO()
  Canvas(f).start(w, h)
  root = ElementTree.fromstring(f.getvalue() + '</svg>')
  utest_val(str(w), root.get('width'), f'width for {w}')
  utest_val(str(h), root.get('height'), f'height for {h}')


def draw_document(file:TextIO) -> None:
  svg = Canvas(file)
  with svg.document(10, 20):
    svg.rect(0, 0, 10, 20)

utest_out('''\
<?xml version="1.0"?>
<svg xmlns="http://www.w3.org/2000/svg"
     xmlns:xlink="http://www.w3.org/1999/xlink"
     width="10" height="20">
<!-- Generated by svgpen -->
<rect x="0" y="0" width="10" height="20" />
</svg>
''', draw_document)


def draw_document_raising(file:TextIO) -> None:
  svg = Canvas(file)
  try:
    with svg.document(1, 1):
      raise KeyError('body')
  except KeyError: pass

f = StringIO()
draw_document_raising(f)
utest_val(True, f.getvalue().endswith('</svg>\n'), 'document closed after exception')


# Groups and structure.

utest_out('<g style="fill:none">\n', draw, 'group_with_style', 'fill:none')
utest_out('<g transform="translate(1,2)">\n', draw, 'group_with_transform', 'translate(1,2)')
utest_out('<g transform="translate(1,2) rotate(45)">\n', draw, 'group_with_transform', [translate(1, 2), rotate(45)])
utest_out('<g id="layer1">\n', draw, 'group_with_id', 'layer1')
utest_out('</g>\n', draw, 'group_end')
utest_out('<defs>\n', draw, 'defs_begin')
utest_out('</defs>\n', draw, 'defs_end')
utest_out('<desc>A &amp; B</desc>\n', draw, 'description', 'A & B')
utest_out('<title>x &lt; y</title>\n', draw, 'title', 'x < y')
utest_out('<title><tspan>raw</tspan></title>\n', draw, 'title', EscapedStr('<tspan>raw</tspan>'))
utest_out('<a xlink:href="http://example.com/" xlink:title="Example">\n', draw, 'link_begin', 'http://example.com/', 'Example')
utest_out('</a>\n', draw, 'link_end')
utest_out('<use x="5" y="6" xlink:href="#dot" />\n', draw, 'use', 5, 6, '#dot')
utest_out('<use x="5" y="6" xlink:href="#dot" style="fill:red"/>\n', draw, 'use', 5, 6, '#dot', 'fill:red')


def draw_nested_groups(file:TextIO) -> None:
  svg = Canvas(file)
  with svg.group(id='outer'):
    with svg.group(style='stroke:black'):
      svg.line(0, 0, 1, 1)

utest_out('<g id="outer">\n<g style="stroke:black">\n<line x1="0" y1="0" x2="1" y2="1" />\n</g>\n</g>\n', draw_nested_groups)


def enter_group(file:TextIO, **kwargs:Any) -> None:
  with Canvas(file).group(**kwargs): pass

utest_exc(ValueError, enter_group, StringIO())
utest_exc(ValueError, enter_group, StringIO(), style='fill:red', id='a')
utest_out('<g transform="scale(2)">\n</g>\n', enter_group, transform='scale(2)')


# Shapes.

utest_out('<circle cx="1" cy="2" r="3" />\n', draw, 'circle', 1, 2, 3)
utest_out('<circle cx="1" cy="2" r="3" style="stroke:red"/>\n', draw, 'circle', 1, 2, 3, 'stroke:red')
utest_out('<circle cx="1" cy="2" r="3" id=foo />\n', draw, 'circle', 1, 2, 3, 'id=foo')
utest_out('<circle cx="1.5" cy="2" r="3" />\n', draw, 'circle', 1.5, 2.0, 3)
utest_out('<ellipse cx="10" cy="20" rx="30" ry="40" />\n', draw, 'ellipse', 10, 20, 30, 40)
utest_out('<rect x="0" y="1" width="2" height="3" />\n', draw, 'rect', 0, 1, 2, 3)
utest_out('<rect x="0" y="1" width="2" height="3" rx="4" ry="5" style="fill:blue"/>\n',
  draw, 'round_rect', 0, 1, 2, 3, 4, 5, 'fill:blue')
utest_out('<rect x="7" y="8" width="9" height="9" class="sq" />\n', draw, 'square', 7, 8, 9, 'class="sq"')
utest_out('<line x1="0" y1="0" x2="-10" y2="10" />\n', draw, 'line', 0, 0, -10, 10)
utest_out('<image x="0" y="0" width="16" height="16" xlink:href="checker.png" />\n',
  draw, 'image', 0, 0, 16, 16, 'checker.png')

utest_out('<polygon points="0,0 10,0 5,10 " />\n', draw, 'polygon', [0, 10, 5], [0, 0, 10])
utest_out('<polygon points="" />\n', draw, 'polygon', [0, 10], [0, 0, 10])
utest_out('<polyline points="0,0 10,0 5,10 " style="fill:none"/>\n', draw, 'polyline', [0, 10, 5], [0, 0, 10], 'fill:none')
utest_out('<polyline points="" />\n', draw, 'polyline', [1], [])

utest_out('<text x="1" y="2" >hello</text>\n', draw, 'text', 1, 2, 'hello')
utest_out('<text x="1" y="2" style="font-size:12px">hello</text>\n', draw, 'text', 1, 2, 'hello', 'font-size:12px')
utest_out('<text x="1" y="2" style="font-size:12px">hi</text>\n', draw, 'text', 1, 2, 'hi', 'font-size:12px', 'ignored')
utest_out('<text x="0" y="0" >a &lt;b&gt; &amp; &quot;c&quot;</text>\n', draw, 'text', 0, 0, 'a <b> & "c"')

for s in ['<', '&', '"', 'a < b & "c" > \'d\'']:
  root = ElementTree.fromstring(render(('text', 0, 0, s), ('title', s), ('description', s)))
  utest_seq([s, s, s], lambda r: [el.text for el in r], root)


# Paths.

utest_out('<path d="M0,0 A10,20 30 1 0 40,50" />\n', draw, 'arc', 0, 0, 10, 20, 30, True, False, 40, 50)
utest_out('<path d="M0,0 A10,20 30 0 1 40,50" style="fill:none"/>\n',
  draw, 'arc', 0, 0, 10, 20, 30, False, True, 40, 50, 'fill:none')
utest_out('<path d="M0,0 A1,1 0 1 1 2,2" />\n', draw, 'arc', 0, 0, 1, 1, 0, True, True, 2, 2)
utest_out('<path d="M0,0 A1,1 0 0 0 2,2" />\n', draw, 'arc', 0, 0, 1, 1, 0, False, False, 2, 2)
utest_out('<path d="M1,2 C3,4 5,6 7,8" />\n', draw, 'cubic_bezier', 1, 2, 3, 4, 5, 6, 7, 8)
utest_out('<path d="M1,2 Q3,4 5,6 T7,8" style="stroke:green"/>\n',
  draw, 'quadratic_bezier', 1, 2, 3, 4, 5, 6, 7, 8, 'stroke:green')


# Colors.

utest('fill:rgb(255,0,0)', Canvas(StringIO()).rgb, 255, 0, 0)
utest('fill-opacity:0.50; fill:rgb(255,0,0)', Canvas(StringIO()).rgba, 255, 0, 0, 0.5)
utest_out('<circle cx="0" cy="0" r="1" style="fill-opacity:0.25; fill:rgb(0,0,255)"/>\n',
  draw, 'circle', 0, 0, 1, Canvas(StringIO()).rgba(0, 0, 255, 0.25))


# Grid.

def grid_lines(x:int, y:int, w:int, h:int, spacing:int) -> list[tuple[str,...]]:
  root = ElementTree.fromstring(render(('grid', x, y, w, h, spacing)))
  return [tuple(el.get(k) for k in ('x1', 'y1', 'x2', 'y2')) for el in root]

utest_seq([
  ('0', '0', '0', '10'),
  ('3', '0', '3', '10'),
  ('6', '0', '6', '10'),
  ('9', '0', '9', '10'),
  ('12', '0', '12', '10'),
  ('0', '0', '10', '0'),
  ('0', '3', '10', '3'),
  ('0', '6', '10', '6'),
  ('0', '9', '10', '9'),
  ('0', '12', '10', '12'),
], grid_lines, 0, 0, 10, 10, 3)

utest(6, len, grid_lines(0, 0, 10, 10, 5)) # Evenly divided: 0, 5, 10 on each axis.
utest(2, len, grid_lines(5, 5, 0, 0, 1)) # Degenerate box: one line per axis.

utest_out('''\
<g style="stroke:gray">
<line x1="0" y1="0" x2="0" y2="4" />
<line x1="4" y1="0" x2="4" y2="4" />
<line x1="0" y1="0" x2="4" y2="0" />
<line x1="0" y1="4" x2="4" y2="4" />
</g>
''', draw, 'grid', 0, 0, 4, 4, 4, 'stroke:gray')

utest_exc(ValueError('grid spacing must be positive; received 0'), draw, StringIO(), 'grid', 0, 0, 10, 10, 0)
utest_exc(ValueError, draw, StringIO(), 'grid', 0, 0, 10, 10, -2)
utest_exc(ValueError, draw, StringIO(), 'grid', 0, 0, float('inf'), 10, 1)
utest_exc(ValueError, draw, StringIO(), 'grid', 0, 0, 10, float('inf'), 1)
utest_exc(ValueError, draw, StringIO(), 'grid', 0, 0, float('nan'), 10, 1)
utest_exc(ValueError, draw, StringIO(), 'grid', 0, 0, 10, 10, float('nan'))
f = StringIO()
utest_exc(ValueError, draw, f, 'grid', float('-inf'), 0, 10, 10, 1)
utest_val('', f.getvalue(), 'nothing written for non-finite grid')


# Sink failures propagate.

class FailingSink:
  def write(self, s:str) -> int: raise OSError('disk full')

utest_exc(OSError('disk full'), draw, FailingSink(), 'circle', 0, 0, 1)

closed = StringIO()
closed.close()
utest_exc(ValueError, draw, closed, 'start', 1, 1)


class BreakingSink:
  'Accepts writes until `broken` is set, then fails every write.'
  def __init__(self) -> None:
    self.broken = False
    self.parts:list[str] = []

  def write(self, s:str) -> int:
    if self.broken: raise OSError('sink broken')
    self.parts.append(s)
    return len(s)


def draw_document_sink_failure(sink:BreakingSink) -> None:
  svg = Canvas(sink) # type: ignore[arg-type]
  with svg.document(1, 1):
    with svg.group(id='g'):
      sink.broken = True
      raise OSError('boom')

def sink_failure_context() -> Any:
  try: draw_document_sink_failure(BreakingSink())
  except OSError as e: return (e.args, e.__context__)
  return None

sink = BreakingSink()
utest_exc(OSError('boom'), draw_document_sink_failure, sink)
utest_val(False, ''.join(sink.parts).endswith('</svg>\n'), 'document not closed after sink failure')
utest((('boom',), None), sink_failure_context)
