# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'Write a sample SVG document that exercises every drawing primitive.'

from argparse import ArgumentParser
from sys import stdout
from typing import TextIO

from ..canvas import Canvas
from ..io import errSL
from ..transform import rotate, translate


def main() -> None:
  parser = ArgumentParser(description='Write a sample SVG document.')
  parser.add_argument('-out', default='', help='output path; defaults to std out.')
  parser.add_argument('-width', type=int, default=640, help='document width in pixels.')
  parser.add_argument('-height', type=int, default=480, help='document height in pixels.')
  parser.add_argument('-spacing', type=int, default=20, help='background grid spacing.')
  parser.add_argument('-title', default='svgpen sample', help='document title.')
  args = parser.parse_args()

  if args.spacing <= 0:
    errSL('invalid grid spacing:', args.spacing)
    exit(1)

  if not args.out:
    write_sample(stdout, w=args.width, h=args.height, spacing=args.spacing, title=args.title)
    return

  try: f = open(args.out, 'w')
  except OSError as e:
    errSL('could not open output path:', args.out)
    errSL(e)
    exit(1)
  with f:
    write_sample(f, w=args.width, h=args.height, spacing=args.spacing, title=args.title)


def write_sample(file:TextIO, w:int, h:int, spacing:int, title:str) -> None:
  svg = Canvas(file)
  with svg.document(w, h):
    svg.title(title)
    svg.description(f'{w}x{h} sample; grid spacing {spacing}.')
    svg.grid(0, 0, w, h, spacing, 'stroke:#E0E0E0;stroke-width:0.5')

    svg.defs_begin()
    svg.group_with_id('marker')
    svg.circle(0, 0, 4)
    svg.group_end()
    svg.defs_end()

    with svg.group(transform=translate(20, 20)):
      svg.rect(0, 0, 64, 32, svg.rgb(0, 128, 255))
      svg.round_rect(80, 0, 64, 32, 8, 8, svg.rgba(255, 0, 0, 0.5))
      svg.square(160, 0, 32, 'fill:none;stroke:black')
      svg.circle(232, 16, 16, 'fill:gold')
      svg.ellipse(296, 16, 32, 16, 'fill:teal')

    with svg.group(style='fill:none;stroke:black;stroke-width:2'):
      svg.line(20, 80, 84, 112)
      svg.polyline([100, 132, 164], [112, 80, 112])
      svg.polygon([180, 212, 244], [112, 80, 112], 'fill:lavender')
      svg.arc(260, 112, 32, 32, 0, False, True, 324, 112)
      svg.cubic_bezier(340, 112, 360, 60, 400, 140, 420, 80)
      svg.quadratic_bezier(440, 112, 460, 60, 480, 112, 520, 112)

    svg.use(20, 160, '#marker', 'fill:black')
    svg.use(40, 160, '#marker', 'fill:gray')

    with svg.group(transform=[translate(20, 200), rotate(-5)]):
      svg.link_begin('https://www.w3.org/TR/SVG11/', 'SVG 1.1 specification')
      svg.text(0, 0, 'SVG <1.1> & "friends"', 'font-family:sans-serif;font-size:16px')
      svg.link_end()


if __name__ == '__main__': main()
