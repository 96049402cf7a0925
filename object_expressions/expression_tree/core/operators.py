import inspect
import numpy as np
import sympy as sp
from types import MappingProxyType
from typing import Callable, Mapping, NamedTuple

from . import derivatives

# Arity sentinel for operations accepting any number (>= 1) of operands
VARIADIC = 0


class Operation(NamedTuple):
  symbol: str
  arity: int
  evaluate: Callable
  derivative: Callable
  symbolic: Callable


def arity_of(function: Callable) -> int:
  """Positional parameter count of an evaluator, VARIADIC for *args"""
  count = 0
  for parameter in inspect.signature(function).parameters.values():
    if parameter.kind == inspect.Parameter.VAR_POSITIONAL:
      return VARIADIC
    if parameter.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
      count += 1
  return count


def evaluate_add(x, y):
  return np.add(x, y)


def evaluate_subtract(x, y):
  return np.subtract(x, y)


def evaluate_negate(x):
  return np.negative(x)


def evaluate_multiply(x, y):
  return np.multiply(x, y)


def evaluate_divide(x, y):
  return np.true_divide(x, y)


def evaluate_pow(x, y):
  return np.power(x, y)


def evaluate_log(x, y):
  # log base |x| of |y|
  return np.log(np.abs(y)) / np.log(np.abs(x))


def _stacked(args):
  return np.stack(np.broadcast_arrays(*args))


def evaluate_mean(*args):
  return np.mean(_stacked(args), axis=0)


def evaluate_var(*args):
  stacked = _stacked(args)
  return np.mean(np.square(stacked), axis=0) - np.square(np.mean(stacked, axis=0))


def _symbolic_log(x, y):
  return sp.log(sp.Abs(y)) / sp.log(sp.Abs(x))


def _symbolic_mean(*args):
  return sp.Add(*args) / len(args)


def _symbolic_var(*args):
  return sp.Add(*[arg**2 for arg in args]) / len(args) - (sp.Add(*args) / len(args))**2


def _operation(symbol: str, evaluate: Callable, derivative: Callable, symbolic: Callable) -> Operation:
  return Operation(symbol, arity_of(evaluate), evaluate, derivative, symbolic)


def _build_registry() -> Mapping[str, Operation]:
  operations = [
    _operation('+', evaluate_add, derivatives.diff_add, lambda x, y: x + y),
    _operation('-', evaluate_subtract, derivatives.diff_subtract, lambda x, y: x - y),
    _operation('negate', evaluate_negate, derivatives.diff_negate, lambda x: -x),
    _operation('*', evaluate_multiply, derivatives.diff_multiply, lambda x, y: x * y),
    _operation('/', evaluate_divide, derivatives.diff_divide, lambda x, y: x / y),
    _operation('pow', evaluate_pow, derivatives.diff_pow, lambda x, y: x**y),
    _operation('log', evaluate_log, derivatives.diff_log, _symbolic_log),
    _operation('mean', evaluate_mean, derivatives.diff_mean, _symbolic_mean),
    _operation('var', evaluate_var, derivatives.diff_var, _symbolic_var),
  ]
  return MappingProxyType({operation.symbol: operation for operation in operations})


OPERATIONS: Mapping[str, Operation] = _build_registry()


def get_operation(symbol: str) -> Operation:
  return OPERATIONS[symbol]
