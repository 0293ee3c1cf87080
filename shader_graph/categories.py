from typing import List, NamedTuple, Tuple

from .ir.ops import NodeKind
from .nodes import NODE_SPECS


class NodeCategory(NamedTuple):
    id: str
    label: str
    items: Tuple[NodeKind, ...]


CATEGORY_COLORS = {
    "CONSTANT":  (0.28, 0.56, 0.68),
    "INPUT":     (0.35, 0.75, 0.36),
    "MATH":      (0.28, 0.56, 0.68),
    "VECTOR":    (0.75, 0.53, 0.35),
    "PARAMETER": (0.60, 0.45, 0.70),
    "OUTPUT":    (0.75, 0.35, 0.35),
    "DEFAULT":   (0.40, 0.40, 0.40),
}

def get_category_color(category_name: str) -> tuple:
    """Get the header color for a node category."""
    return CATEGORY_COLORS.get(category_name, CATEGORY_COLORS["DEFAULT"])

# Add-node menu structure, in display order
node_categories = [
    NodeCategory("CONSTANT", "Constants", (
        NodeKind.FLOAT,
        NodeKind.COLOR,
    )),
    NodeCategory("INPUT", "Input", (
        NodeKind.TIME,
        NodeKind.POSITION,
        NodeKind.NORMAL,
        NodeKind.FRESNEL,
    )),
    NodeCategory("MATH", "Math", (
        NodeKind.ADD,
        NodeKind.SUBTRACT,
        NodeKind.MULTIPLY,
        NodeKind.DIVIDE,
        NodeKind.SIN,
        NodeKind.COS,
        NodeKind.ABS,
        NodeKind.MIX,
        NodeKind.CLAMP,
    )),
    NodeCategory("VECTOR", "Vector", (
        NodeKind.COMBINE_XYZ,
        NodeKind.SEPARATE_XYZ,
    )),
    NodeCategory("PARAMETER", "Parameters", (
        NodeKind.FLOAT_PARAMETER,
        NodeKind.VECTOR_PARAMETER,
    )),
]
# The Output node is created with the graph and is not offered in the menu


def menu_entries() -> List[Tuple[str, List[Tuple[NodeKind, str]]]]:
    """(category label, [(kind, node label), ...]) for building an add-node menu."""
    return [
        (category.label, [(kind, NODE_SPECS[kind].label) for kind in category.items])
        for category in node_categories
    ]


def category_of(kind: NodeKind) -> str:
    return NODE_SPECS[kind].category

