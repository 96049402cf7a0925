"""Expression Tree Module

Immutable expression trees: evaluation, rendering and differentiation.
"""

from .expression import Expression
from .core.node import (
    Node,
    ConstantNode,
    VariableNode,
    OperationNode,
    VARIABLE_NAMES
)
from .core.operators import (
    Operation,
    OPERATIONS,
    VARIADIC,
    arity_of,
    get_operation
)
from .utils import ExpressionValidator

__all__ = [
    "Expression",
    "Node", "ConstantNode", "VariableNode", "OperationNode", "VARIABLE_NAMES",
    "Operation", "OPERATIONS", "VARIADIC", "arity_of", "get_operation",
    "ExpressionValidator"
]
