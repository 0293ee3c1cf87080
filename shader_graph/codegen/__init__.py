from .glsl import ShaderGenerator, VERTEX_SHADER_SOURCE, compile_graph
from .result import CompiledShader
from .uniforms import UniformParameter, collect_uniforms

__all__ = [
    "ShaderGenerator",
    "VERTEX_SHADER_SOURCE",
    "compile_graph",
    "CompiledShader",
    "UniformParameter",
    "collect_uniforms",
]
