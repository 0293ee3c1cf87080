# Vector Nodes
# Compose a vec3 from three scalars, or split one into its components

from ..ir.graph import NodeSpec, Pin
from ..ir.ops import NodeKind
from ..ir.types import ValueKind


COMBINE_XYZ = NodeSpec(
    kind=NodeKind.COMBINE_XYZ,
    label="Make Vec3",
    category="VECTOR",
    inputs=(
        Pin.input("X", ValueKind.SCALAR, "0.0"),
        Pin.input("Y", ValueKind.SCALAR, "0.0"),
        Pin.input("Z", ValueKind.SCALAR, "0.0"),
    ),
    outputs=(Pin.output("Vec3", ValueKind.VEC3),),
)

SEPARATE_XYZ = NodeSpec(
    kind=NodeKind.SEPARATE_XYZ,
    label="Split Vec3",
    category="VECTOR",
    inputs=(Pin.input("Vec3", ValueKind.VEC3, "vec3(0.0)"),),
    outputs=(
        Pin.output("X", ValueKind.SCALAR),
        Pin.output("Y", ValueKind.SCALAR),
        Pin.output("Z", ValueKind.SCALAR),
    ),
)

node_specs = [COMBINE_XYZ, SEPARATE_XYZ]
