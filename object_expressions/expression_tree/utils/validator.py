import numpy as np
from typing import List, Mapping, Optional, Sequence

from ..core.node import Node, ConstantNode, VariableNode, OperationNode, VARIABLE_NAMES
from ..core.operators import OPERATIONS, Operation, VARIADIC
from .tree_utils import get_all_nodes


class ExpressionValidator:
  """Checks trees built outside the bracketed parsers, e.g. by the flat parser"""

  @staticmethod
  def is_valid_expression(node: Optional[Node], values: Optional[Sequence] = None,
                          operations: Mapping[str, Operation] = OPERATIONS) -> bool:
    if node is None:
      return False
    if ExpressionValidator.validation_errors(node, operations):
      return False
    if values is not None:
      return ExpressionValidator._test_evaluation(node, values)
    return True

  @staticmethod
  def validation_errors(node: Node, operations: Mapping[str, Operation] = OPERATIONS) -> List[str]:
    """Describe every structural problem in the tree, pre-order"""
    errors = []
    for current in get_all_nodes(node):
      if isinstance(current, ConstantNode):
        if not np.isfinite(current.value):
          errors.append(f"non-finite constant {current.to_string()}")

      elif isinstance(current, VariableNode):
        if current.name not in VARIABLE_NAMES:
          errors.append(f"unknown variable {current.name!r}")

      elif isinstance(current, OperationNode):
        operation = operations.get(current.symbol)
        if operation is None:
          errors.append(f"unknown operation {current.symbol!r}")
          continue
        count = len(current.operands)
        if count == 0 or (operation.arity != VARIADIC and count != operation.arity):
          errors.append(f"operation {current.symbol!r} has {count} operands")

      else:
        errors.append(f"unexpected node {current!r}")
    return errors

  @staticmethod
  def _test_evaluation(node: Node, values: Sequence) -> bool:
    try:
      result = node.evaluate(*values)
    except (IndexError, ValueError, TypeError):
      return False
    return bool(np.all(np.isfinite(result)))
