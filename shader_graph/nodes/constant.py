# Constant Nodes
# Literal values configured on the node itself

from ..ir.graph import NodeSpec, Pin
from ..ir.ops import NodeKind
from ..ir.types import ValueKind


FLOAT = NodeSpec(
    kind=NodeKind.FLOAT,
    label="Float",
    category="CONSTANT",
    outputs=(Pin.output("Value", ValueKind.SCALAR),),
    settings=(("value", 0.0),),
)

COLOR = NodeSpec(
    kind=NodeKind.COLOR,
    label="Color",
    category="CONSTANT",
    outputs=(Pin.output("RGB", ValueKind.VEC3),),
    settings=(("color", (1.0, 0.5, 0.2)),),
)

node_specs = [FLOAT, COLOR]
