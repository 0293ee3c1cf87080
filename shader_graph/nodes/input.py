# Source Input Nodes
# Time, Position, Normal and the Fresnel factor read ambient shader inputs

from ..ir.graph import NodeSpec, Pin
from ..ir.ops import NodeKind
from ..ir.types import ValueKind


TIME = NodeSpec(
    kind=NodeKind.TIME,
    label="Time",
    category="INPUT",
    outputs=(Pin.output("Time", ValueKind.SCALAR),),
)

POSITION = NodeSpec(
    kind=NodeKind.POSITION,
    label="Position",
    category="INPUT",
    outputs=(
        Pin.output("XYZ", ValueKind.VEC3),
        Pin.output("X", ValueKind.SCALAR),
        Pin.output("Y", ValueKind.SCALAR),
        Pin.output("Z", ValueKind.SCALAR),
    ),
)

NORMAL = NodeSpec(
    kind=NodeKind.NORMAL,
    label="Normal",
    category="INPUT",
    outputs=(Pin.output("Normal", ValueKind.VEC3),),
)

# Power is a regular input pin so it can be driven by other nodes
FRESNEL = NodeSpec(
    kind=NodeKind.FRESNEL,
    label="Fresnel",
    category="INPUT",
    inputs=(Pin.input("Power", ValueKind.SCALAR, "2.0"),),
    outputs=(Pin.output("Factor", ValueKind.SCALAR),),
)

node_specs = [TIME, POSITION, NORMAL, FRESNEL]
