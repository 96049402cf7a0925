import math
import numpy as np
import sympy as sp
from abc import ABC, abstractmethod
from typing import Optional, Tuple

# Variables are positional: the n-th name reads the n-th evaluation argument
VARIABLE_NAMES: Tuple[str, ...] = ('x', 'y', 'z')


def format_value(value: float) -> str:
  """Literal text of a constant: integral values without a fractional part."""
  if math.isfinite(value) and value.is_integer():
    return str(int(value))
  return repr(value)


class Node(ABC):
  """Immutable expression tree node with cached hash and size"""

  __slots__ = ('_hash_cache', '_size_cache')

  operands: Tuple['Node', ...] = ()

  def __init__(self):
    object.__setattr__(self, '_hash_cache', None)
    object.__setattr__(self, '_size_cache', None)

  def __setattr__(self, name, value):
    if name in Node.__slots__:
      object.__setattr__(self, name, value)
      return
    raise AttributeError(f"{type(self).__name__} nodes are immutable")

  def __delattr__(self, name):
    raise AttributeError(f"{type(self).__name__} nodes are immutable")

  @abstractmethod
  def evaluate(self, *values):
    pass

  @abstractmethod
  def to_string(self) -> str:
    pass

  @abstractmethod
  def prefix(self) -> str:
    pass

  @abstractmethod
  def postfix(self) -> str:
    pass

  @abstractmethod
  def diff(self, variable: str) -> 'Node':
    pass

  @abstractmethod
  def to_sympy(self) -> sp.Expr:
    pass

  @abstractmethod
  def _key(self) -> tuple:
    pass

  def size(self) -> int:
    """Node count"""
    if self._size_cache is None:
      self._size_cache = 1 + sum(operand.size() for operand in self.operands)
    return self._size_cache

  def __str__(self) -> str:
    return self.to_string()

  def __eq__(self, other) -> bool:
    if type(self) is not type(other):
      return NotImplemented
    return self._key() == other._key()

  def __hash__(self) -> int:
    if self._hash_cache is None:
      self._hash_cache = hash(self._key())
    return self._hash_cache


class ConstantNode(Node):
  __slots__ = ('value',)

  ZERO: 'ConstantNode'
  ONE: 'ConstantNode'
  TWO: 'ConstantNode'
  E: 'ConstantNode'

  def __init__(self, value: float):
    super().__init__()
    object.__setattr__(self, 'value', float(value))

  def evaluate(self, *values):
    return np.float64(self.value)

  def to_string(self) -> str:
    return format_value(self.value)

  prefix = to_string
  postfix = to_string

  def diff(self, variable: str) -> Node:
    return ConstantNode.ZERO

  def to_sympy(self) -> sp.Expr:
    if self.value == math.e:
      return sp.E
    if math.isfinite(self.value) and self.value.is_integer():
      return sp.Integer(int(self.value))
    return sp.Float(self.value)

  def _key(self) -> tuple:
    return ('constant', self.value)

  def __repr__(self) -> str:
    return f"ConstantNode({self.to_string()})"


ConstantNode.ZERO = ConstantNode(0)
ConstantNode.ONE = ConstantNode(1)
ConstantNode.TWO = ConstantNode(2)
ConstantNode.E = ConstantNode(math.e)


class VariableNode(Node):
  __slots__ = ('name',)

  def __init__(self, name: str):
    super().__init__()
    object.__setattr__(self, 'name', name)

  def evaluate(self, *values):
    # ValueError for a name outside VARIABLE_NAMES, IndexError for a missing value
    index = VARIABLE_NAMES.index(self.name)
    return np.asarray(values[index], dtype=np.float64)[()]

  def to_string(self) -> str:
    return self.name

  prefix = to_string
  postfix = to_string

  def diff(self, variable: str) -> Node:
    return ConstantNode.ONE if variable == self.name else ConstantNode.ZERO

  def to_sympy(self) -> sp.Expr:
    return sp.Symbol(self.name, real=True)

  def _key(self) -> tuple:
    return ('variable', self.name)

  def __repr__(self) -> str:
    return f"VariableNode({self.name!r})"


class OperationNode(Node):
  """Operation applied to an ordered tuple of operands.

  The operand count is not checked here; parsers guarantee it matches the
  registered arity and derivative rules rely on that.
  """

  __slots__ = ('symbol', 'operands')

  def __init__(self, symbol: str, *operands: Node):
    super().__init__()
    object.__setattr__(self, 'symbol', symbol)
    object.__setattr__(self, 'operands', tuple(operands))

  @property
  def operation(self):
    # Import here to avoid circular imports
    from .operators import get_operation
    return get_operation(self.symbol)

  def evaluate(self, *values):
    operation = self.operation
    args = [operand.evaluate(*values) for operand in self.operands]
    with np.errstate(all='ignore'):
      return operation.evaluate(*args)

  def to_string(self) -> str:
    return " ".join([operand.to_string() for operand in self.operands] + [self.symbol])

  def prefix(self) -> str:
    return "(" + " ".join([self.symbol] + [operand.prefix() for operand in self.operands]) + ")"

  def postfix(self) -> str:
    return "(" + " ".join([operand.postfix() for operand in self.operands] + [self.symbol]) + ")"

  def diff(self, variable: str) -> Node:
    return self.operation.derivative(variable, *self.operands)

  def to_sympy(self) -> sp.Expr:
    return self.operation.symbolic(*[operand.to_sympy() for operand in self.operands])

  def _key(self) -> tuple:
    return ('operation', self.symbol, self.operands)

  def __repr__(self) -> str:
    args = ", ".join([repr(self.symbol)] + [repr(operand) for operand in self.operands])
    return f"OperationNode({args})"
