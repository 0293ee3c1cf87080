from .types import ValueKind, widest_kind
from .ops import NodeKind
from .graph import Graph, Link, Node, NodeSpec, Pin, PinDirection, default_graph

__all__ = [
    "ValueKind",
    "widest_kind",
    "NodeKind",
    "Graph",
    "Link",
    "Node",
    "NodeSpec",
    "Pin",
    "PinDirection",
    "default_graph",
]
