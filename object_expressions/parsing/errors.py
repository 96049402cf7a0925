from typing import Optional


class ParseError(Exception):
  """Malformed expression text, optionally located by character offset"""

  def __init__(self, message: str, position: Optional[int] = None):
    self.message = message
    self.position = position
    if position is None:
      super().__init__(message)
    else:
      super().__init__(f"{message} at pos {position}")


class InvalidFormatError(ParseError):
  """Broken structure: empty or unknown token, missing ')', trailing input"""


class InvalidOperationError(ParseError):
  """Well bracketed group with no operation or more than one"""


class InvalidOperationPositionError(InvalidOperationError):
  """Operation symbol is not where the notation expects it"""


class InvalidArgumentCountError(InvalidOperationError):
  """Operand count does not match the operation's arity"""
