"""
Tree Utility Functions

Read-only traversal and inspection helpers for expression trees. Trees are
immutable, so nothing here modifies a node.
"""

from typing import List, Dict, TypeVar
from collections import Counter, deque

from ..core.node import Node, ConstantNode, VariableNode, OperationNode

T = TypeVar('T', bound=Node)


def get_all_nodes(node: Node, traversal_order: str = 'depth_first') -> List[Node]:
    """
    Get all nodes in the tree using specified traversal order.

    Args:
        node: Root node of the tree
        traversal_order: 'depth_first' (pre-order, default) or 'breadth_first'

    Returns:
        List of all nodes in the tree
    """
    if traversal_order == 'depth_first':
        return _depth_first_traversal(node)
    elif traversal_order == 'breadth_first':
        return _breadth_first_traversal(node)
    else:
        raise ValueError(f"Invalid traversal_order: {traversal_order}")


def _breadth_first_traversal(node: Node) -> List[Node]:
    """Breadth-first traversal (iterative, non-recursive)"""
    nodes_to_visit = deque([node])
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.popleft()
        all_nodes.append(current_node)
        nodes_to_visit.extend(current_node.operands)

    return all_nodes


def _depth_first_traversal(node: Node) -> List[Node]:
    """Depth-first pre-order traversal (iterative)"""
    nodes_to_visit = [node]
    all_nodes = []

    while nodes_to_visit:
        current_node = nodes_to_visit.pop()
        all_nodes.append(current_node)
        # Reversed so operands come out left to right
        nodes_to_visit.extend(reversed(current_node.operands))

    return all_nodes


def calculate_tree_depth(node: Node) -> int:
    """
    Calculate the maximum depth of the tree.

    Args:
        node: Root node of the tree

    Returns:
        Maximum depth (leaf nodes have depth 1)
    """
    if not node.operands:
        return 1
    return 1 + max(calculate_tree_depth(operand) for operand in node.operands)


def find_nodes_by_type(node: Node, node_class: type) -> List[Node]:
    """Find all nodes that are instances of node_class, in pre-order"""
    return [n for n in get_all_nodes(node) if isinstance(n, node_class)]


def find_nodes_by_operator(node: Node, symbol: str) -> List[OperationNode]:
    """Find all operation nodes with the given symbol, in pre-order"""
    return [n for n in get_all_nodes(node)
            if isinstance(n, OperationNode) and n.symbol == symbol]


def get_variable_usage_counts(node: Node) -> Dict[str, int]:
    """Count how many times each variable name occurs"""
    return dict(Counter(n.name for n in get_variables(node)))


def get_constants(node: Node) -> List[ConstantNode]:
    return find_nodes_by_type(node, ConstantNode)


def get_variables(node: Node) -> List[VariableNode]:
    return find_nodes_by_type(node, VariableNode)


def get_operations(node: Node) -> List[OperationNode]:
    return find_nodes_by_type(node, OperationNode)
