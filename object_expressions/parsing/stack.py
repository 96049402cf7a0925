"""
Flat postfix parser.

Tokens are separated by whitespace and reduced on an operand stack. The parser
is permissive: unknown tokens are skipped and malformed input yields whatever
the stack holds instead of an error.
"""

from typing import List, Mapping, Optional

from ..expression_tree.core.node import Node, ConstantNode, VariableNode, OperationNode, VARIABLE_NAMES
from ..expression_tree.core.operators import OPERATIONS, Operation, VARIADIC
from ..logging_system import log_debug
from .bracketed import INTEGER_PATTERN


def parse(text: str, operations: Mapping[str, Operation] = OPERATIONS) -> Optional[Node]:
  stack: List[Node] = []
  ignored: List[str] = []
  for token in text.split():
    if token in operations:
      operation = operations[token]
      # A variadic operation takes everything on the stack
      start = 0 if operation.arity == VARIADIC else len(stack) - operation.arity
      operands = stack[start:]
      del stack[start:]
      stack.append(OperationNode(token, *operands))
    elif token in VARIABLE_NAMES:
      stack.append(VariableNode(token))
    elif INTEGER_PATTERN.fullmatch(token):
      stack.append(ConstantNode(float(token)))
    else:
      ignored.append(token)

  if ignored:
    log_debug(f"Flat postfix input {text!r}: ignored tokens {ignored}")
  if len(stack) != 1:
    log_debug(f"Flat postfix input {text!r} left {len(stack)} items on the stack")
  return stack[0] if stack else None
