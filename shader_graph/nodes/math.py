# Math Nodes
# Binary arithmetic, unary functions, mix and clamp over scalars.
# Multiply is the one polymorphic operator: its inputs accept any kind and its
# result widens to the widest vector kind wired into it.

from ..ir.graph import NodeSpec, Pin
from ..ir.ops import NodeKind
from ..ir.types import ValueKind
from ..planner.type_inference import resolve_widest_input


def _binary(kind: NodeKind, label: str, default: str) -> NodeSpec:
    return NodeSpec(
        kind=kind,
        label=label,
        category="MATH",
        inputs=(
            Pin.input("A", ValueKind.SCALAR, default),
            Pin.input("B", ValueKind.SCALAR, default),
        ),
        outputs=(Pin.output("Result", ValueKind.SCALAR),),
    )


def _unary(kind: NodeKind, label: str) -> NodeSpec:
    return NodeSpec(
        kind=kind,
        label=label,
        category="MATH",
        inputs=(Pin.input("X", ValueKind.SCALAR, "0.0"),),
        outputs=(Pin.output("Result", ValueKind.SCALAR),),
    )


ADD = _binary(NodeKind.ADD, "Add", "0.0")
SUBTRACT = _binary(NodeKind.SUBTRACT, "Subtract", "0.0")
DIVIDE = _binary(NodeKind.DIVIDE, "Divide", "1.0")

MULTIPLY = NodeSpec(
    kind=NodeKind.MULTIPLY,
    label="Multiply",
    category="MATH",
    inputs=(
        Pin.input("A", ValueKind.SCALAR, "1.0", accepts_any=True),
        Pin.input("B", ValueKind.SCALAR, "1.0", accepts_any=True),
    ),
    outputs=(
        Pin.output("Result", ValueKind.SCALAR, resolver=resolve_widest_input, polymorphic=True),
    ),
)

SIN = _unary(NodeKind.SIN, "Sin")
COS = _unary(NodeKind.COS, "Cos")
ABS = _unary(NodeKind.ABS, "Abs")

MIX = NodeSpec(
    kind=NodeKind.MIX,
    label="Mix",
    category="MATH",
    inputs=(
        Pin.input("A", ValueKind.SCALAR, "0.0"),
        Pin.input("B", ValueKind.SCALAR, "1.0"),
        Pin.input("T", ValueKind.SCALAR, "0.5"),
    ),
    outputs=(Pin.output("Result", ValueKind.SCALAR),),
)

# Range comes from local settings, not pins
CLAMP = NodeSpec(
    kind=NodeKind.CLAMP,
    label="Clamp",
    category="MATH",
    inputs=(Pin.input("X", ValueKind.SCALAR, "0.0"),),
    outputs=(Pin.output("Result", ValueKind.SCALAR),),
    settings=(("min", 0.0), ("max", 1.0)),
)

node_specs = [ADD, SUBTRACT, MULTIPLY, DIVIDE, SIN, COS, ABS, MIX, CLAMP]
