"""
Parameter/uniform collection.

Scans every parameter node in the graph, wired or not, so a parameter keeps
its uniform slot while the user rewires things around it.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import numpy as np

from ..config import BUILTIN_UNIFORMS, DEFAULT_OPTIONS, FRAGMENT_OUTPUT, INTERPOLATED_INPUTS, CompileOptions
from ..diagnostics import Diagnostic, DiagnosticLevel
from ..ir.graph import Graph, Node
from ..ir.types import ValueKind

logger = logging.getLogger(__name__)

# GLSL 330 keywords and words reserved for future use
GLSL_KEYWORDS = frozenset("""
    attribute const uniform varying layout centroid flat smooth noperspective
    break continue do for while switch case default if else
    in out inout float int void bool true false invariant discard return
    mat2 mat3 mat4 mat2x2 mat2x3 mat2x4 mat3x2 mat3x3 mat3x4 mat4x2 mat4x3 mat4x4
    vec2 vec3 vec4 ivec2 ivec3 ivec4 bvec2 bvec3 bvec4 uint uvec2 uvec3 uvec4
    lowp mediump highp precision
    sampler1D sampler2D sampler3D samplerCube sampler1DShadow sampler2DShadow samplerCubeShadow
    sampler1DArray sampler2DArray sampler1DArrayShadow sampler2DArrayShadow
    isampler1D isampler2D isampler3D isamplerCube isampler1DArray isampler2DArray
    usampler1D usampler2D usampler3D usamplerCube usampler1DArray usampler2DArray
    sampler2DRect sampler2DRectShadow isampler2DRect usampler2DRect
    samplerBuffer isamplerBuffer usamplerBuffer
    sampler2DMS isampler2DMS usampler2DMS sampler2DMSArray isampler2DMSArray usampler2DMSArray
    struct
    common partition active asm class union enum typedef template this packed goto
    inline noinline volatile public static extern external interface
    long short double half fixed unsigned superp input output
    hvec2 hvec3 hvec4 dvec2 dvec3 dvec4 fvec2 fvec3 fvec4
    sampler3DRect filter image1D image2D image3D imageCube
    iimage1D iimage2D iimage3D iimageCube uimage1D uimage2D uimage3D uimageCube
    image1DArray image2DArray iimage1DArray iimage2DArray uimage1DArray uimage2DArray
    image1DShadow image2DShadow image1DArrayShadow image2DArrayShadow
    imageBuffer iimageBuffer uimageBuffer sizeof cast namespace using row_major
""".split())

# Built-in functions a global uniform would shadow; the emitters call most of these
GLSL_BUILTIN_FUNCTIONS = frozenset("""
    radians degrees sin cos tan asin acos atan sinh cosh tanh asinh acosh atanh
    pow exp log exp2 log2 sqrt inversesqrt
    abs sign floor trunc round roundEven ceil fract mod modf min max clamp mix step smoothstep
    isnan isinf floatBitsToInt floatBitsToUint intBitsToFloat uintBitsToFloat
    length distance dot cross normalize faceforward reflect refract
    matrixCompMult outerProduct transpose determinant inverse
    lessThan lessThanEqual greaterThan greaterThanEqual equal notEqual any all not
    texture textureSize textureProj textureLod textureOffset texelFetch textureGrad
    dFdx dFdy fwidth noise1 noise2 noise3 noise4
""".split())

# Identifiers already taken in the generated program
RESERVED_NAMES = (
    {name for _, name in BUILTIN_UNIFORMS}
    | {name for _, name in INTERPOLATED_INPUTS}
    | {FRAGMENT_OUTPUT, "finalColor", "finalAlpha", "main"}
    | GLSL_KEYWORDS
    | GLSL_BUILTIN_FUNCTIONS
)


@dataclass(frozen=True)
class UniformParameter:
    """
    A user-exposed value the runtime binds by name.

    Attributes:
        name: GLSL identifier of the uniform
        label: Display label for the host UI
        kind: Value kind of the uniform
        value: Current value (float, or tuple of floats for vectors)
        node_id: Parameter node that declared it
    """
    name: str
    label: str
    kind: ValueKind
    value: Any
    node_id: int = -1

    def declaration(self) -> str:
        return f"uniform {self.kind.glsl_name()} {self.name};"

    def as_array(self) -> np.ndarray:
        """Value packed as float32 components, ready for glUniform*fv."""
        return np.asarray(self.value, dtype=np.float32).reshape(self.kind.component_count())


def sanitize_name(name: str, options: CompileOptions = DEFAULT_OPTIONS) -> str:
    """Turn a user-entered parameter name into a safe GLSL identifier."""
    s = re.sub(r'[^a-zA-Z0-9_]', '_', str(name))
    # Collapse multiple underscores to avoid reserved identifiers
    s = re.sub(r'_+', '_', s)
    if not s or s == "_":
        s = "param"
    if s[0].isdigit():
        s = "_" + s
    if s in RESERVED_NAMES or s.startswith("gl_") or s.startswith(options.temp_prefix):
        s = "u_" + s
    return s


def _normalize_value(node: Node, kind: ValueKind) -> Tuple[Any, bool]:
    """Returns (value, ok). Bad values become zeros so the compile still succeeds."""
    raw = node.config.get("value")
    count = kind.component_count()
    try:
        if count == 1:
            return float(raw), True
        comps = [float(v) for v in raw][:count]
        comps += [0.0] * (count - len(comps))
        return tuple(comps), True
    except (TypeError, ValueError):
        zero = 0.0 if count == 1 else (0.0,) * count
        return zero, False


def _unique_name(base: str, taken: Dict[str, UniformParameter]) -> str:
    suffix = 1
    while f"{base}_{suffix}" in taken:
        suffix += 1
    return f"{base}_{suffix}"


def bind_parameters(graph: Graph, options: CompileOptions = DEFAULT_OPTIONS
                    ) -> Tuple[List[UniformParameter], Dict[int, str], List[Diagnostic]]:
    """
    Returns (uniforms, uniform name per parameter node id, diagnostics).

    Nodes are scanned in id order. When a name is already declared with the
    same kind, the later node reads the existing uniform; with a different
    kind it gets its own uniform under a numbered name (k -> k_1).
    """
    uniforms: List[UniformParameter] = []
    names: Dict[int, str] = {}
    diagnostics: List[Diagnostic] = []
    taken: Dict[str, UniformParameter] = {}

    for node in graph.sorted_nodes():
        if not node.kind.is_parameter():
            continue

        name = sanitize_name(node.config.get("name", ""), options)
        kind = node.declared_kind("Value")
        value, ok = _normalize_value(node, kind)
        if not ok:
            diagnostics.append(Diagnostic(
                DiagnosticLevel.WARNING,
                f"Parameter '{name}' has a non-numeric value {node.config.get('value')!r}; using zero",
                node.id,
            ))

        existing = taken.get(name)
        if existing is not None and existing.kind == kind:
            diagnostics.append(Diagnostic(
                DiagnosticLevel.WARNING,
                f"Parameter name '{name}' is already declared; node shares the existing uniform",
                node.id,
            ))
            names[node.id] = name
            continue
        if existing is not None:
            renamed = _unique_name(name, taken)
            diagnostics.append(Diagnostic(
                DiagnosticLevel.WARNING,
                f"Parameter name '{name}' is already declared as {existing.kind}; "
                f"declaring this {kind} parameter as '{renamed}'",
                node.id,
            ))
            name = renamed

        label = node.config.get("label") or node.label
        uniform = UniformParameter(name, str(label), kind, value, node.id)
        taken[name] = uniform
        names[node.id] = name
        uniforms.append(uniform)

    for diag in diagnostics:
        logger.warning(str(diag))
    return uniforms, names, diagnostics


def collect_uniforms(graph: Graph, options: CompileOptions = DEFAULT_OPTIONS) -> Tuple[List[UniformParameter], List[Diagnostic]]:
    """Returns (uniforms, diagnostics) in node-id order."""
    uniforms, _, diagnostics = bind_parameters(graph, options)
    return uniforms, diagnostics
