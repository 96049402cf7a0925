import sympy as sp
from typing import Optional
from .core.node import Node


class Expression:
  """Expression tree root with a cached string form"""

  __slots__ = ('root', '_string_cache')

  def __init__(self, root: Node):
    self.root = root
    self._string_cache: Optional[str] = None

  def evaluate(self, *values):
    return self.root.evaluate(*values)

  def to_string(self) -> str:
    if self._string_cache is None:
      self._string_cache = self.root.to_string()
    return self._string_cache

  def prefix(self) -> str:
    return self.root.prefix()

  def postfix(self) -> str:
    return self.root.postfix()

  def diff(self, variable: str) -> 'Expression':
    return Expression(self.root.diff(variable))

  def size(self) -> int:
    """Node count"""
    return self.root.size()

  def to_sympy(self) -> sp.Expr:
    return self.root.to_sympy()

  def latex(self) -> str:
    return sp.latex(self.to_sympy())

  def __str__(self) -> str:
    return self.to_string()

  def __repr__(self) -> str:
    return f"Expression({self.root!r})"

  def __hash__(self) -> int:
    return hash(self.root)

  def __eq__(self, other) -> bool:
    if not isinstance(other, Expression):
      return NotImplemented
    return self.root == other.root

  @classmethod
  def from_prefix(cls, text: str) -> 'Expression':
    from ..parsing import parse_prefix
    return cls(parse_prefix(text))

  @classmethod
  def from_postfix(cls, text: str) -> 'Expression':
    from ..parsing import parse_postfix
    return cls(parse_postfix(text))

  @classmethod
  def from_string(cls, text: str) -> 'Expression':
    """Build from flat postfix text; ValueError when nothing was recognised"""
    from ..parsing import parse
    root = parse(text)
    if root is None:
      raise ValueError(f"No expression found in {text!r}")
    return cls(root)
