import logging

import pytest

from object_expressions import (
  Expression, ExpressionValidator, OPERATIONS, ConstantNode, VariableNode,
  LogLevel, configure_logging, set_log_level, parse, parse_prefix, parse_postfix
)
from object_expressions import logging_system
from object_expressions.expression_tree import VARIADIC, arity_of, get_operation
from object_expressions.expression_tree.utils import (
  get_all_nodes, calculate_tree_depth, find_nodes_by_operator,
  get_variable_usage_counts, get_constants, get_variables, get_operations
)


def test_registry_contents_and_arities():
  arities = {symbol: operation.arity for symbol, operation in OPERATIONS.items()}
  assert arities == {
    '+': 2, '-': 2, 'negate': 1, '*': 2, '/': 2,
    'pow': 2, 'log': 2, 'mean': VARIADIC, 'var': VARIADIC,
  }


def test_registry_is_read_only():
  with pytest.raises(TypeError):
    OPERATIONS['^'] = OPERATIONS['pow']


def test_get_operation():
  assert get_operation('*').symbol == '*'
  with pytest.raises(KeyError):
    get_operation('sin')


def test_arity_of():
  assert arity_of(lambda: 0) == 0
  assert arity_of(lambda a: a) == 1
  assert arity_of(lambda a, b: a) == 2
  assert arity_of(lambda *args: 0) == VARIADIC


def test_expression_wrapper():
  expression = Expression.from_prefix("(* x (+ y 1))")
  assert expression.evaluate(2, 3, 0) == 8
  assert expression.to_string() == "x y 1 + *"
  assert str(expression) == "x y 1 + *"
  assert expression.postfix() == "(x (y 1 +) *)"
  assert expression.size() == 5
  assert expression == Expression.from_postfix("(x (y 1 +) *)")
  assert expression == Expression.from_string("x y 1 + *")
  assert hash(expression) == hash(Expression.from_string("x y 1 + *"))


def test_expression_equality_defers_to_other_types():
  expression = Expression.from_prefix("(+ x 1)")
  assert expression.__eq__(expression.root) is NotImplemented
  assert expression != "x 1 +"
  assert expression != expression.root


def test_expression_diff_and_latex():
  expression = Expression.from_prefix("(* x x)")
  assert isinstance(expression.diff('x'), Expression)
  assert expression.diff('x').evaluate(3, 0, 0) == 6
  assert expression.latex() == "x^{2}"


def test_expression_from_empty_string():
  with pytest.raises(ValueError):
    Expression.from_string("nothing here")


def test_tree_traversal():
  node = parse_prefix("(+ (* 2 x) y)")
  depth_first = [n.to_string() for n in get_all_nodes(node)]
  breadth_first = [n.to_string() for n in get_all_nodes(node, 'breadth_first')]
  assert depth_first == ["2 x * y +", "2 x *", "2", "x", "y"]
  assert breadth_first == ["2 x * y +", "2 x *", "y", "2", "x"]
  with pytest.raises(ValueError):
    get_all_nodes(node, 'sideways')


def test_tree_inspection():
  node = parse_prefix("(+ x (mean (* 2 x) y 3))")
  assert calculate_tree_depth(node) == 4
  assert calculate_tree_depth(VariableNode('x')) == 1
  assert len(find_nodes_by_operator(node, '*')) == 1
  assert get_variable_usage_counts(node) == {'x': 2, 'y': 1}
  assert [c.value for c in get_constants(node)] == [2, 3]
  assert [v.name for v in get_variables(node)] == ['x', 'x', 'y']
  assert [o.symbol for o in get_operations(node)] == ['+', 'mean', '*']


def test_validator():
  assert ExpressionValidator.is_valid_expression(parse_prefix("(/ x y)"))
  assert ExpressionValidator.is_valid_expression(parse_prefix("(/ x y)"), values=(1, 2, 0))
  assert not ExpressionValidator.is_valid_expression(parse_prefix("(/ x y)"), values=(1, 0, 0))
  assert not ExpressionValidator.is_valid_expression(None)
  assert not ExpressionValidator.is_valid_expression(VariableNode('x'), values=())
  assert ExpressionValidator.validation_errors(parse("x +")) == ["operation '+' has 1 operands"]
  assert ExpressionValidator.validation_errors(VariableNode('w')) == ["unknown variable 'w'"]
  assert ExpressionValidator.validation_errors(ConstantNode(float('inf'))) == ["non-finite constant inf"]


@pytest.fixture
def fresh_logging(monkeypatch):
  package_logger = logging.getLogger(logging_system.LOGGER_NAME)
  saved_handlers = list(package_logger.handlers)
  monkeypatch.setattr(logging_system, '_global_logger', None)
  yield package_logger
  for handler in list(package_logger.handlers):
    package_logger.removeHandler(handler)
    handler.close()
  for handler in saved_handlers:
    package_logger.addHandler(handler)


def test_parsing_keeps_application_handlers(fresh_logging):
  handler = logging.NullHandler()
  fresh_logging.addHandler(handler)
  parse_prefix("(+ x 1)")
  parse("x y foo")
  assert handler in fresh_logging.handlers


def test_parsers_log_at_debug_level(fresh_logging, caplog):
  caplog.set_level(logging.DEBUG, logger=logging_system.LOGGER_NAME)
  parse_prefix("(+ x 1)")
  assert not caplog.records

  set_log_level(LogLevel.VERBOSE)
  parse_prefix("(+ x 1)")
  parse("x y foo")
  messages = [record.getMessage() for record in caplog.records]
  assert any("Parsed prefix expression" in message for message in messages)
  assert any("ignored tokens ['foo']" in message for message in messages)
  assert any("left 2 items" in message for message in messages)


def test_configure_logging_writes_to_file(fresh_logging, tmp_path):
  log_file = tmp_path / "parse.log"
  configure_logging(LogLevel.VERBOSE, log_to_file=True, log_file_path=str(log_file))
  parse_postfix("(x 1 +)")
  configure_logging(LogLevel.SILENT)
  assert not fresh_logging.handlers
  assert "Parsed postfix expression '(x 1 +)'" in log_file.read_text()
