"""Utilities for expression trees."""

from .tree_utils import (
    get_all_nodes, calculate_tree_depth,
    find_nodes_by_type, find_nodes_by_operator, get_variable_usage_counts,
    get_constants, get_variables, get_operations
)
from .validator import ExpressionValidator

__all__ = [
    'ExpressionValidator',
    'get_all_nodes', 'calculate_tree_depth',
    'find_nodes_by_type', 'find_nodes_by_operator', 'get_variable_usage_counts',
    'get_constants', 'get_variables', 'get_operations'
]
