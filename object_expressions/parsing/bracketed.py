"""
Recursive-descent parser for fully bracketed prefix and postfix notation.

Every operation is written inside its own parentheses with the operation
symbol either first (prefix, ``(+ x 2)``) or last (postfix, ``(x 2 +)``).
Leaves are variable names and base-10 integer literals.
"""

import re
from typing import List, Mapping, NamedTuple, Tuple, Union

from ..expression_tree.core.node import Node, ConstantNode, VariableNode, OperationNode, VARIABLE_NAMES
from ..expression_tree.core.operators import OPERATIONS, Operation, VARIADIC
from ..logging_system import log_debug
from .errors import (
  InvalidFormatError, InvalidOperationError,
  InvalidOperationPositionError, InvalidArgumentCountError
)

INTEGER_PATTERN = re.compile(r'[+-]?[0-9]+')


class OperatorToken(NamedTuple):
  """Operation symbol met while scanning, not yet attached to its operands"""
  symbol: str
  position: int


ParseToken = Union[Node, OperatorToken]


class _Cursor:
  """Offset into the text of a single parse call"""

  __slots__ = ('text', 'position')

  def __init__(self, text: str):
    self.text = text
    self.position = 0

  def at_end(self) -> bool:
    return self.position >= len(self.text)

  def peek(self) -> str:
    return '' if self.at_end() else self.text[self.position]

  def skip_whitespace(self):
    while not self.at_end() and self.text[self.position].isspace():
      self.position += 1


class BracketedParser:
  """Parser for bracketed notation.

  Args:
      operation_first: True for prefix notation, False for postfix.
      operations: registry used to recognise symbols and check arities.
  """

  def __init__(self, operation_first: bool, operations: Mapping[str, Operation] = OPERATIONS):
    self.operation_first = operation_first
    self.operations = operations

  @property
  def notation(self) -> str:
    return 'prefix' if self.operation_first else 'postfix'

  def parse(self, text: str) -> Node:
    cursor = _Cursor(text)
    cursor.skip_whitespace()
    result = self._parse_token(cursor)
    cursor.skip_whitespace()
    if not cursor.at_end():
      raise InvalidFormatError("Expected end of expression", cursor.position)
    if isinstance(result, OperatorToken):
      raise InvalidFormatError(
        f"Invalid expression which contains only operation {result.symbol}", result.position)
    log_debug(f"Parsed {self.notation} expression {text!r}")
    return result

  def _parse_token(self, cursor: _Cursor) -> ParseToken:
    start = cursor.position
    if cursor.peek() == '(':
      return self._parse_operation(cursor)

    while not cursor.at_end() and not cursor.peek().isspace() and cursor.peek() not in '()':
      cursor.position += 1
    token = cursor.text[start:cursor.position]

    if not token:
      raise InvalidFormatError("Empty token", start)
    if token in VARIABLE_NAMES:
      return VariableNode(token)
    if INTEGER_PATTERN.fullmatch(token):
      return ConstantNode(float(token))
    if token in self.operations:
      return OperatorToken(token, start)
    raise InvalidFormatError(f"Unknown token: {token}", start)

  def _parse_operation(self, cursor: _Cursor) -> Node:
    start = cursor.position
    operands: List[Node] = []
    # Each operator is recorded with the number of operands seen before it
    operators: List[Tuple[OperatorToken, int]] = []

    cursor.position += 1
    cursor.skip_whitespace()
    while not cursor.at_end() and cursor.peek() != ')':
      token = self._parse_token(cursor)
      if isinstance(token, OperatorToken):
        operators.append((token, len(operands)))
      else:
        operands.append(token)
      cursor.skip_whitespace()

    if cursor.at_end():
      raise InvalidFormatError(") expected", cursor.position)
    cursor.position += 1

    if len(operators) != 1:
      raise InvalidOperationError(
        "Invalid expression (expected one operation per (...) block "
        f"but parsed {len(operators)} operations)", start)

    operator, index = operators[0]
    expected_index = 0 if self.operation_first else len(operands)
    if index != expected_index:
      raise InvalidOperationPositionError(
        f"Invalid operation position (operation: {operator.symbol})", start)

    arity = self.operations[operator.symbol].arity
    if not operands or (arity != VARIADIC and arity != len(operands)):
      raise InvalidArgumentCountError(
        f"Invalid amount of arguments ({len(operands)}) for operation {operator.symbol}", start)

    return OperationNode(operator.symbol, *operands)


PREFIX_PARSER = BracketedParser(operation_first=True)
POSTFIX_PARSER = BracketedParser(operation_first=False)


def parse_prefix(text: str) -> Node:
  """Parse fully bracketed prefix notation, e.g. ``(* (+ x 1) y)``"""
  return PREFIX_PARSER.parse(text)


def parse_postfix(text: str) -> Node:
  """Parse fully bracketed postfix notation, e.g. ``((x 1 +) y *)``"""
  return POSTFIX_PARSER.parse(text)
