"""Derivative rules for registered operations.

Each rule takes the differentiation variable and the operation's own
(undifferentiated) operands and returns a new tree. Rules are expressed in
terms of other registered operations; ln(v) is log(E, v).
"""

from functools import reduce

from .node import Node, ConstantNode, OperationNode


def add(x: Node, y: Node) -> Node:
  return OperationNode('+', x, y)


def subtract(x: Node, y: Node) -> Node:
  return OperationNode('-', x, y)


def negate(x: Node) -> Node:
  return OperationNode('negate', x)


def multiply(x: Node, y: Node) -> Node:
  return OperationNode('*', x, y)


def divide(x: Node, y: Node) -> Node:
  return OperationNode('/', x, y)


def power(x: Node, y: Node) -> Node:
  return OperationNode('pow', x, y)


def log(x: Node, y: Node) -> Node:
  return OperationNode('log', x, y)


def ln(x: Node) -> Node:
  return log(ConstantNode.E, x)


def mean(*args: Node) -> Node:
  return OperationNode('mean', *args)


def square(x: Node) -> Node:
  return multiply(x, x)


def diff_add(variable, x, y):
  return add(x.diff(variable), y.diff(variable))


def diff_subtract(variable, x, y):
  return subtract(x.diff(variable), y.diff(variable))


def diff_negate(variable, x):
  return negate(x.diff(variable))


def diff_multiply(variable, x, y):
  return add(multiply(x.diff(variable), y), multiply(x, y.diff(variable)))


def diff_divide(variable, x, y):
  return divide(
    subtract(multiply(x.diff(variable), y), multiply(x, y.diff(variable))),
    multiply(y, y))


def diff_pow(variable, x, y):
  """(x^y)' = x^(y-1) * (y*x' + x*y'*ln(x))"""
  return multiply(
    power(x, subtract(y, ConstantNode.ONE)),
    add(
      multiply(y, x.diff(variable)),
      multiply(multiply(x, y.diff(variable)), ln(x))))


def diff_log(variable, x, y):
  """(log_x y)' = (ln(x)*y'/y - ln(y)*x'/x) / ln(x)^2"""
  return divide(
    subtract(
      multiply(multiply(ln(x), y.diff(variable)), divide(ConstantNode.ONE, y)),
      multiply(multiply(ln(y), x.diff(variable)), divide(ConstantNode.ONE, x))),
    multiply(ln(x), ln(x)))


def diff_mean(variable, *args):
  # The count is a constant denominator, so only the sum is differentiated
  total = reduce(add, args, ConstantNode.ZERO)
  return divide(total.diff(variable), ConstantNode(len(args)))


def diff_var(variable, *args):
  # var = mean(x_i^2) - mean(x_i)^2, differentiated as a rewritten tree
  rewritten = subtract(mean(*[square(arg) for arg in args]), square(mean(*args)))
  return rewritten.diff(variable)
