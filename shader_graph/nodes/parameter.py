# Parameter Nodes
# User-exposed values bound as uniforms. They reserve a uniform slot whether
# or not they are wired into the output.

from ..ir.graph import NodeSpec, Pin
from ..ir.ops import NodeKind
from ..ir.types import ValueKind
from ..planner.type_inference import resolve_parameter_size


# An empty name is replaced by "param_<id>" when the node is added
FLOAT_PARAMETER = NodeSpec(
    kind=NodeKind.FLOAT_PARAMETER,
    label="Float Parameter",
    category="PARAMETER",
    outputs=(Pin.output("Value", ValueKind.SCALAR),),
    settings=(("name", ""), ("label", "Float Parameter"), ("value", 0.0)),
)

VECTOR_PARAMETER = NodeSpec(
    kind=NodeKind.VECTOR_PARAMETER,
    label="Vector Parameter",
    category="PARAMETER",
    outputs=(Pin.output("Value", ValueKind.VEC3, resolver=resolve_parameter_size),),
    settings=(
        ("name", ""),
        ("label", "Vector Parameter"),
        ("size", 3),
        ("value", (0.0, 0.0, 0.0)),
    ),
)

node_specs = [FLOAT_PARAMETER, VECTOR_PARAMETER]
