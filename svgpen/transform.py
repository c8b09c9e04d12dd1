# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
SVG transform strings, for use with `Canvas.group_with_transform`.
Note: SVG syntax allows spaces or commas between numbers in transform strings. We use commas exclusively in our output.
'''

from .fmt import fmt_num, Num


def scale(x:Num=1, y:Num|None=None) -> str:
  if y is None:
    return f'scale({fmt_num(x)})'
  return f'scale({fmt_num(x)},{fmt_num(y)})'


def rotate(degrees:Num, x:Num=0, y:Num=0) -> str:
  if x == 0 and y == 0:
    return f'rotate({fmt_num(degrees)})'
  return f'rotate({fmt_num(degrees)},{fmt_num(x)},{fmt_num(y)})'


def translate(x:Num=0, y:Num=0) -> str: return f'translate({fmt_num(x)},{fmt_num(y)})'


def matrix(a:Num, b:Num, c:Num, d:Num, e:Num, f:Num) -> str:
  return f'matrix({fmt_num(a)},{fmt_num(b)},{fmt_num(c)},{fmt_num(d)},{fmt_num(e)},{fmt_num(f)})'
