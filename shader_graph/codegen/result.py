from dataclasses import dataclass, field
from typing import List

from ..diagnostics import Diagnostic, DiagnosticLevel
from ..errors import ShaderCompileError
from .uniforms import UniformParameter


@dataclass
class CompiledShader:
    """
    Output of one compile pass.

    Attributes:
        source: Complete fragment shader text
        statements: Statements of main(), in emission order, without indentation
        uniforms: User uniforms for the runtime to declare and bind
        diagnostics: Non-fatal findings (missing output, broken cycles, ...)
    """
    source: str
    statements: List[str] = field(default_factory=list)
    uniforms: List[UniformParameter] = field(default_factory=list)
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """False when the fallback error color was emitted."""
        return not any(d.level == DiagnosticLevel.ERROR for d in self.diagnostics)

    def compile_error(self, driver_log: str) -> ShaderCompileError:
        """Wrap the runtime's compile/link log for this shader's source."""
        return ShaderCompileError(
            "Fragment shader failed to compile",
            source=self.source,
            error_message=driver_log.strip(),
        )
