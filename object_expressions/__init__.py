"""Object Expressions Package

Parse arithmetic expressions over x, y and z from prefix or postfix notation,
then evaluate, render and symbolically differentiate them.
"""

from .expression_tree import (
  Expression, Node, ConstantNode, VariableNode, OperationNode,
  VARIABLE_NAMES, OPERATIONS, Operation, ExpressionValidator
)
from .parsing import (
  ParseError, InvalidFormatError, InvalidOperationError,
  InvalidOperationPositionError, InvalidArgumentCountError,
  BracketedParser, parse, parse_prefix, parse_postfix
)
from .logging_system import LogLevel, configure_logging, get_logger, set_log_level

__version__ = "0.1.0"
__all__ = [
  "Expression", "Node", "ConstantNode", "VariableNode", "OperationNode",
  "VARIABLE_NAMES", "OPERATIONS", "Operation", "ExpressionValidator",
  "ParseError", "InvalidFormatError", "InvalidOperationError",
  "InvalidOperationPositionError", "InvalidArgumentCountError",
  "BracketedParser", "parse", "parse_prefix", "parse_postfix",
  "LogLevel", "configure_logging", "get_logger", "set_log_level",
]
