# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Attribute and path formatting shared by the drawing methods of `Canvas`.
Each function returns a fragment of SVG markup; none of them write anything.
'''

from typing import Iterable, Sequence, overload

from .escape import esc_xml_attr


Num = int|float
Dim = int|float|str


@overload
def fmt_num(n:Dim) -> str: ...
@overload
def fmt_num(n:None) -> None: ...

def fmt_num(n:Dim|None) -> str|None:
  'Remove trailing ".0" from floats that can be represented as integers.'
  if n is None: return None
  if isinstance(n, float) and n.is_integer(): return str(int(n))
  return str(n)


def coord(x:Dim, y:Dim) -> str: return f'{fmt_num(x)},{fmt_num(y)}'

def loc(x:Dim, y:Dim) -> str: return f'x="{fmt_num(x)}" y="{fmt_num(y)}"'

def dim(x:Dim, y:Dim, w:Dim, h:Dim) -> str:
  return f'x="{fmt_num(x)}" y="{fmt_num(y)}" width="{fmt_num(w)}" height="{fmt_num(h)}"'

def href(link:str) -> str: return f'xlink:href="{esc_xml_attr(link)}"'

def path_open(x:Dim, y:Dim) -> str: return f'<path d="M{coord(x, y)}'

def group_open(name:str, value:str) -> str: return f'<g {name}="{esc_xml_attr(value)}">'


def one_zero(flag:bool) -> str:
  'SVG path flags are the literal characters "1" and "0".'
  return '1' if flag else '0'


def style_attr(style:str) -> str:
  '''
  Wrap a CSS declaration list as a `style` attribute; an empty string yields no attribute.
  The result has no trailing space; see `end_style` for the consequence when several tokens are combined.
  '''
  if style: return f'style="{esc_xml_attr(style)}"'
  return ''


def end_style(style:Sequence[str]) -> str:
  '''
  Format the style tokens that end a self-closing element, followed by the closing "/>" and a newline.
  A token containing "=" (after its first character) is an explicit `name="value"` attribute and is written verbatim;
  any other token is a CSS declaration list wrapped as `style="..."`.
  Multiple CSS tokens produce multiple `style` attributes; they are not merged.
  Note that `style_attr` emits no trailing space, so two CSS tokens, or a CSS token followed by a `name="value"` token,
  are written with no separating whitespace (`style="a"style="b"`), which is not well-formed XML.
  Callers that need several declarations should join them into a single token.
  '''
  parts:list[str] = []
  for s in style:
    if s.find('=') > 0:
      parts.append(s + ' ')
    else:
      parts.append(style_attr(s))
  parts.append('/>\n')
  return ''.join(parts)


def fmt_points(xs:Sequence[Dim], ys:Sequence[Dim]) -> str:
  'Format paired coordinates as "x,y " items. Mismatched lengths yield an empty string.'
  if len(xs) != len(ys): return ''
  return ''.join(coord(x, y) + ' ' for x, y in zip(xs, ys))


def join_transforms(transform:str|Iterable[str]) -> str:
  if isinstance(transform, str): return transform
  return ' '.join(transform)


# Colors.

def rgb(r:int, g:int, b:int) -> str:
  'Fill color style fragment for a (r)ed, (g)reen, (b)lue triple.'
  return f'fill:rgb({r},{g},{b})'


def rgba(r:int, g:int, b:int, alpha:float) -> str:
  'Fill color style fragment with opacity; `alpha` is always formatted with two decimal places.'
  return f'fill-opacity:{alpha:.2f}; {rgb(r, g, b)}'
