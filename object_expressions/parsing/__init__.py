"""Parsers from text to expression trees."""

from .errors import (
    ParseError, InvalidFormatError, InvalidOperationError,
    InvalidOperationPositionError, InvalidArgumentCountError
)
from .bracketed import BracketedParser, OperatorToken, parse_prefix, parse_postfix
from .stack import parse

__all__ = [
    'ParseError', 'InvalidFormatError', 'InvalidOperationError',
    'InvalidOperationPositionError', 'InvalidArgumentCountError',
    'BracketedParser', 'OperatorToken', 'parse_prefix', 'parse_postfix', 'parse'
]
