# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

'''
XML escaping utilities.
'''

from html import escape as html_escape
from typing import Any


class EscapedStr:
  'A `str` wrapper class that signifies to the writer that the content has already been properly escaped.'

  def __init__(self, string:str):
    self.string = string

  def __repr__(self) -> str: return f'EscapedStr({self.string!r})'

  def __eq__(self, other:Any) -> bool:
    return isinstance(other, EscapedStr) and self.string == other.string


def esc_xml_text(val:Any) -> str:
  '''
  Escape the string representation of `val` for use as element text.
  All five XML special characters are escaped, so the result can also be placed inside a quoted attribute.
  '''
  return val.string if isinstance(val, EscapedStr) else html_escape(str(val), quote=True)


def esc_xml_attr(val:Any) -> str:
  'Escape the string representation of `val`, including quote characters.'
  return val.string if isinstance(val, EscapedStr) else html_escape(str(val), quote=True)
