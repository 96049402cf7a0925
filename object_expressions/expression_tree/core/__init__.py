"""Core expression tree components."""

from .node import Node, ConstantNode, VariableNode, OperationNode, VARIABLE_NAMES, format_value
from .operators import (
    Operation, OPERATIONS, VARIADIC, arity_of, get_operation,
    evaluate_add, evaluate_subtract, evaluate_negate, evaluate_multiply,
    evaluate_divide, evaluate_pow, evaluate_log, evaluate_mean, evaluate_var
)

__all__ = [
    'Node', 'ConstantNode', 'VariableNode', 'OperationNode', 'VARIABLE_NAMES', 'format_value',
    'Operation', 'OPERATIONS', 'VARIADIC', 'arity_of', 'get_operation',
    'evaluate_add', 'evaluate_subtract', 'evaluate_negate', 'evaluate_multiply',
    'evaluate_divide', 'evaluate_pow', 'evaluate_log', 'evaluate_mean', 'evaluate_var'
]
