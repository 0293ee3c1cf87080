"""
Shader Graph - compile a node graph of math/vector/input operations into a
GLSL fragment shader.

Usage:
    from shader_graph import default_graph, compile_graph

    graph = default_graph()
    shader = compile_graph(graph)
    print(shader.source)
"""

from .logger import get_logger, setup_logger
from .errors import (
    ShaderGraphError,
    GraphEditError,
    NodeNotFoundError,
    PinNotFoundError,
    IncompatiblePinError,
    DuplicateOutputError,
    CompilationError,
    ShaderCompileError,
)
from .config import CompileOptions, DEFAULT_OPTIONS
from .diagnostics import Diagnostic, DiagnosticLevel
from .ir import Graph, Link, Node, NodeKind, ValueKind, default_graph
from .codegen import (
    CompiledShader,
    ShaderGenerator,
    UniformParameter,
    VERTEX_SHADER_SOURCE,
    compile_graph,
)
from .planner.graph_compiler import GraphCompiler, compile_cached, get_compiler

__version__ = "0.1.0"

__all__ = [
    "get_logger",
    "setup_logger",
    "ShaderGraphError",
    "GraphEditError",
    "NodeNotFoundError",
    "PinNotFoundError",
    "IncompatiblePinError",
    "DuplicateOutputError",
    "CompilationError",
    "ShaderCompileError",
    "CompileOptions",
    "DEFAULT_OPTIONS",
    "Diagnostic",
    "DiagnosticLevel",
    "Graph",
    "Link",
    "Node",
    "NodeKind",
    "ValueKind",
    "default_graph",
    "CompiledShader",
    "ShaderGenerator",
    "UniformParameter",
    "VERTEX_SHADER_SOURCE",
    "compile_graph",
    "GraphCompiler",
    "compile_cached",
    "get_compiler",
]
