# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
svgpen writes SVG documents element by element to any text sink.

  from sys import stdout
  from svgpen import Canvas

  svg = Canvas(stdout)
  with svg.document(200, 100):
    svg.circle(50, 50, 40, svg.rgb(255, 0, 0))
    svg.text(100, 50, 'hello', 'font-size:12px')
'''

from .canvas import Canvas
from .escape import EscapedStr
from .fmt import rgb, rgba
from .transform import matrix, rotate, scale, translate
