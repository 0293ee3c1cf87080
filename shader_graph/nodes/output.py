# Output Node
# The single sink: its resolved Color and Alpha become the fragment color

from ..ir.graph import NodeSpec, Pin
from ..ir.ops import NodeKind
from ..ir.types import ValueKind


OUTPUT = NodeSpec(
    kind=NodeKind.OUTPUT,
    label="Shader Output",
    category="OUTPUT",
    inputs=(
        Pin.input("Color", ValueKind.VEC3, "vec3(1.0, 0.5, 0.2)"),
        Pin.input("Alpha", ValueKind.SCALAR, "1.0"),
    ),
)

node_specs = [OUTPUT]
