import logging
from typing import Dict, List, Optional, Tuple

from ..config import (
    BUILTIN_UNIFORMS,
    DEFAULT_OPTIONS,
    FALLBACK_COLOR,
    FRAGMENT_OUTPUT,
    GLSL_VERSION,
    INTERPOLATED_INPUTS,
    CompileOptions,
)
from ..diagnostics import Diagnostic, DiagnosticLevel
from ..ir.graph import Graph, Node
from ..ir.types import ValueKind
from ..planner.analysis import collect_reachable, count_fanout, topological_sort
from ..planner.type_inference import TypePropagator
from .emitters import get_emitter
from .emitters.const import format_vector
from .result import CompiledShader
from .shader_context import ShaderContext
from .uniforms import UniformParameter, bind_parameters

logger = logging.getLogger(__name__)

# Companion vertex stage: provides FragPos/Normal for the fragment prologue
VERTEX_SHADER_SOURCE = f"""{GLSL_VERSION}
layout (location = 0) in vec3 aPos;
layout (location = 1) in vec3 aNormal;

out vec3 FragPos;
out vec3 Normal;

uniform mat4 model;
uniform mat4 view;
uniform mat4 projection;

void main()
{{
    FragPos = vec3(model * vec4(aPos, 1.0));
    Normal = mat3(transpose(inverse(model))) * aNormal;
    gl_Position = projection * view * model * vec4(aPos, 1.0);
}}
"""


class ShaderGenerator:
    """
    Generates a GLSL fragment shader from a node graph.

    One instance compiles one graph once: temporaries and the resolved
    expression table live on the instance and are discarded with it.
    """
    def __init__(self, graph: Graph, options: CompileOptions = DEFAULT_OPTIONS):
        self.graph = graph
        self.options = options
        self.types = TypePropagator(graph)
        # (node id, output pin) -> (expression or temporary name, kind)
        self._resolved: Dict[Tuple[int, str], Tuple[str, ValueKind]] = {}
        self._next_temp = 0
        # parameter node id -> uniform it reads
        self._uniform_names: Dict[int, str] = {}

    def generate(self) -> CompiledShader:
        uniforms, self._uniform_names, diagnostics = bind_parameters(self.graph, self.options)

        sink = self.graph.output_node
        if sink is None:
            diag = Diagnostic(DiagnosticLevel.ERROR, "No output node; emitting fallback color")
            logger.warning(str(diag))
            statements = [self._fallback_statement()]
            return CompiledShader(
                source=self._assemble(uniforms, statements),
                statements=statements,
                uniforms=uniforms,
                diagnostics=diagnostics + [diag],
            )

        reachable = collect_reachable(self.graph, sink)
        order, broken = topological_sort(self.graph, reachable, sink)
        fanout = count_fanout(self.graph, reachable)

        for link in broken:
            diag = Diagnostic(
                DiagnosticLevel.WARNING,
                f"Cycle: link {link.from_node}.{link.from_pin} -> {link.to_node}.{link.to_pin} "
                f"ignored, input uses its default",
                link.to_node,
            )
            logger.warning(str(diag))
            diagnostics.append(diag)

        statements: List[str] = []
        for node in order:
            if node.id == sink.id:
                continue
            statements.extend(self._emit_node(node, fanout.get(node.id, 0)))

        statements.extend(self._finalize(sink))

        logger.debug(
            f"Compiled {len(reachable)} reachable node(s) of {len(self.graph.nodes)} "
            f"into {len(statements)} statement(s)"
        )
        return CompiledShader(
            source=self._assemble(uniforms, statements),
            statements=statements,
            uniforms=uniforms,
            diagnostics=diagnostics,
        )

    def lookup(self, node_id: int, pin_name: str) -> Optional[Tuple[str, ValueKind]]:
        """Resolved (expression, kind) of an output pin processed earlier in this pass."""
        return self._resolved.get((node_id, pin_name))

    def uniform_name(self, node_id: int) -> str:
        return self._uniform_names[node_id]

    # -------------------------------------------------------------------------
    # Emission
    # -------------------------------------------------------------------------

    def _emit_node(self, node: Node, fanout: int) -> List[str]:
        ctx = ShaderContext(self, node, self.options)
        emitter = get_emitter(node.kind)
        inline = not node.inputs and fanout <= 1

        lines = []
        for pin in node.outputs:
            kind = self.types.resolve(node, pin.name)
            expr = emitter(pin.name, ctx)

            if inline:
                self._resolved[(node.id, pin.name)] = (expr, kind)
                continue

            name = self._fresh_temp()
            lines.append(f"{kind.glsl_name()} {name} = {expr};")
            self._resolved[(node.id, pin.name)] = (name, kind)
        return lines

    def _fresh_temp(self) -> str:
        name = f"{self.options.temp_prefix}{self._next_temp}"
        self._next_temp += 1
        return name

    def _finalize(self, sink: Node) -> List[str]:
        ctx = ShaderContext(self, sink, self.options)
        return [
            f"vec3 finalColor = {ctx.input('Color')};",
            f"float finalAlpha = {ctx.input('Alpha')};",
            f"{FRAGMENT_OUTPUT} = vec4(finalColor, finalAlpha);",
        ]

    def _fallback_statement(self) -> str:
        color = format_vector(FALLBACK_COLOR, ValueKind.VEC4, precision=1)
        return f"{FRAGMENT_OUTPUT} = {color}; // Error: No output node"

    # -------------------------------------------------------------------------
    # Assembly
    # -------------------------------------------------------------------------

    def _generate_header(self, uniforms: List[UniformParameter]) -> str:
        lines = [GLSL_VERSION, f"out vec4 {FRAGMENT_OUTPUT};", ""]
        for type_name, name in INTERPOLATED_INPUTS:
            lines.append(f"in {type_name} {name};")
        lines.append("")
        for type_name, name in BUILTIN_UNIFORMS:
            lines.append(f"uniform {type_name} {name};")
        if uniforms:
            lines.append("")
            lines.append("// Parameters")
            for uniform in uniforms:
                lines.append(uniform.declaration())
        lines.append("")
        return "\n".join(lines)

    def _generate_main(self, statements: List[str]) -> str:
        lines = ["void main()", "{"]
        for statement in statements:
            lines.append(f"{self.options.indent}{statement}")
        lines.append("}")
        return "\n".join(lines)

    def _assemble(self, uniforms: List[UniformParameter], statements: List[str]) -> str:
        return "\n".join([self._generate_header(uniforms), self._generate_main(statements)]) + "\n"


def compile_graph(graph: Graph, options: CompileOptions = DEFAULT_OPTIONS) -> CompiledShader:
    """
    Compile a graph snapshot into a fragment shader.

    Never raises for graph content: missing outputs, cycles and
    unconnected inputs all produce valid text plus diagnostics.
    """
    return ShaderGenerator(graph, options).generate()
