# Emitter Registry
# Maps NodeKind -> emitter function

from typing import Callable, Dict

from ...errors import CompilationError
from ...ir.ops import NodeKind
from ..shader_context import ShaderContext

# Emitter signature: (output_pin_name: str, ctx: ShaderContext) -> str
EmitterType = Callable[[str, ShaderContext], str]

from .arithmetic import emit_add, emit_subtract, emit_multiply, emit_divide
from .math_funcs import emit_unary, emit_mix, emit_clamp
from .vector import emit_combine_xyz, emit_separate_xyz
from .const import emit_float, emit_color
from .types import emit_parameter
from .inputs import emit_time, emit_position, emit_normal, emit_fresnel


# Registry mapping NodeKind to emitter function
EMITTER_REGISTRY: Dict[NodeKind, EmitterType] = {
    # Inputs
    NodeKind.TIME: emit_time,
    NodeKind.POSITION: emit_position,
    NodeKind.NORMAL: emit_normal,
    NodeKind.FRESNEL: emit_fresnel,

    # Constants
    NodeKind.FLOAT: emit_float,
    NodeKind.COLOR: emit_color,

    # Arithmetic
    NodeKind.ADD: emit_add,
    NodeKind.SUBTRACT: emit_subtract,
    NodeKind.MULTIPLY: emit_multiply,
    NodeKind.DIVIDE: emit_divide,

    # Math functions
    NodeKind.SIN: lambda pin, ctx: emit_unary('sin', pin, ctx),
    NodeKind.COS: lambda pin, ctx: emit_unary('cos', pin, ctx),
    NodeKind.ABS: lambda pin, ctx: emit_unary('abs', pin, ctx),
    NodeKind.MIX: emit_mix,
    NodeKind.CLAMP: emit_clamp,

    # Vector
    NodeKind.COMBINE_XYZ: emit_combine_xyz,
    NodeKind.SEPARATE_XYZ: emit_separate_xyz,

    # Parameters
    NodeKind.FLOAT_PARAMETER: emit_parameter,
    NodeKind.VECTOR_PARAMETER: emit_parameter,
}


def get_emitter(kind: NodeKind) -> EmitterType:
    """Get emitter function for a NodeKind. The Output node has none; it is finalized by the generator."""
    emitter = EMITTER_REGISTRY.get(kind)
    if emitter is None:
        raise CompilationError(f"No GLSL emitter registered for {kind.name}")
    return emitter


__all__ = ['EMITTER_REGISTRY', 'get_emitter']
