import sys
import os
# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from object_expressions import (
  ParseError, LogLevel, configure_logging, parse, parse_prefix, parse_postfix
)

PARSERS = {
  'prefix': parse_prefix,
  'postfix': parse_postfix,
  'flat': parse,
}


def describe(notation, text, values):
  """Parse one expression and print its renderings, value and derivatives"""
  print(f"{notation} input: {text}")
  try:
    node = PARSERS[notation](text)
  except ParseError as e:
    print(f"  rejected: {type(e).__name__}: {e}")
    return
  if node is None:
    print("  no expression found")
    return

  print(f"  to_string: {node.to_string()}")
  print(f"  prefix:    {node.prefix()}")
  print(f"  postfix:   {node.postfix()}")
  print(f"  value at {values}: {node.evaluate(*values)}")
  for variable in ('x', 'y', 'z'):
    print(f"  d/d{variable} at {values}: {node.diff(variable).evaluate(*values)}")


def main():
  configure_logging(LogLevel.VERBOSE if '--verbose' in sys.argv else LogLevel.MINIMAL)
  args = [arg for arg in sys.argv[1:] if arg != '--verbose']

  if len(args) >= 2:
    notation, text = args[0], args[1]
    values = tuple(float(v) for v in args[2:5]) or (1.0, 2.0, 3.0)
    describe(notation, text, values)
    return

  values = (2.0, 3.0, 0.5)
  describe('prefix', "(+ (* x x) (log 2 y))", values)
  describe('postfix', "((x y z mean) (x 1 -) pow)", values)
  describe('flat', "2 5 11 var x *", values)
  describe('prefix', "(x + y)", values)
  describe('postfix', "(x y +", values)


if __name__ == "__main__":
  main()
