"""
Fixed shader interface and tunable compile options.

The prologue constants describe the contract with the rendering runtime:
the vertex stage must provide the interpolated inputs, and the runtime binds
the built-in uniforms every frame.
"""

from dataclasses import dataclass
from typing import Tuple

GLSL_VERSION = "#version 330 core"

FRAGMENT_OUTPUT = "FragColor"

# (type, name) of interpolated inputs from the vertex stage
INTERPOLATED_INPUTS: Tuple[Tuple[str, str], ...] = (
    ("vec3", "FragPos"),
    ("vec3", "Normal"),
)

# (type, name) of uniforms the runtime always binds
BUILTIN_UNIFORMS: Tuple[Tuple[str, str], ...] = (
    ("float", "time"),
    ("vec3", "lightPos"),
    ("vec3", "viewPos"),
    ("vec3", "lightColor"),
    ("vec3", "objectColor"),
)

# Magenta: visually distinctive "no output node" color
FALLBACK_COLOR = (1.0, 0.0, 1.0, 1.0)

DEFAULT_FLOAT_PRECISION = 3
DEFAULT_TEMP_PREFIX = "tmp_"
DEFAULT_INDENT = "    "


@dataclass(frozen=True)
class CompileOptions:
    """
    Knobs for a single compile.

    Attributes:
        float_precision: Decimal places for configured float literals
        temp_prefix: Prefix of generated temporaries (followed by a counter)
        indent: Indentation of statements inside main()
    """
    float_precision: int = DEFAULT_FLOAT_PRECISION
    temp_prefix: str = DEFAULT_TEMP_PREFIX
    indent: str = DEFAULT_INDENT

    def cache_key(self) -> str:
        return f"p={self.float_precision};t={self.temp_prefix!r};i={self.indent!r}"


DEFAULT_OPTIONS = CompileOptions()
