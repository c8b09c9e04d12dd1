# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
Print-style output helpers.
The `write*` functions target an arbitrary text sink; `err*` functions target std err.
Failures raised by the sink propagate to the caller.
'''

from sys import stderr
from typing import Any, TextIO


# basic printing.

def writeZ(file:TextIO, *items:Any, sep='', end='', flush=False) -> None:
  "Write `items` to file; default sep='', end=''."
  print(*items, sep=sep, end=end, file=file, flush=flush)

def writeL(file:TextIO, *items:Any, sep='', flush=False) -> None:
  "Write `items` to file; sep='', end='\\n'."
  print(*items, sep=sep, end='\n', file=file, flush=flush)


# std err.

def errSL(*items:Any, flush=False) -> None:
  "Write items to std err; sep=' ', end='\\n'."
  print(*items, sep=' ', end='\n', file=stderr, flush=flush)
