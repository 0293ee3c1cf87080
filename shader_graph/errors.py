"""
Custom exceptions for Shader Graph.

Graph edits raise these; compilation does not. A compile over any graph
state returns text plus non-fatal diagnostics instead.

Exception Hierarchy:
    ShaderGraphError (base)
    ├── GraphEditError
    │   ├── NodeNotFoundError
    │   ├── PinNotFoundError
    │   ├── IncompatiblePinError
    │   └── DuplicateOutputError
    └── CompilationError
        └── ShaderCompileError
"""


class ShaderGraphError(Exception):
    """Base exception for all Shader Graph errors."""
    pass


# =============================================================================
# Graph Edit Errors
# =============================================================================

class GraphEditError(ShaderGraphError):
    """Base exception for rejected host edits (add, connect, delete)."""
    pass


class NodeNotFoundError(GraphEditError):
    """Raised when an edit references a node id that is not in the graph."""

    def __init__(self, message: str, node_id: int = None):
        super().__init__(message)
        self.node_id = node_id


class PinNotFoundError(GraphEditError):
    """Raised when a node has no pin of the requested name and direction."""

    def __init__(self, message: str, node_id: int = None, pin_name: str = None):
        super().__init__(message)
        self.node_id = node_id
        self.pin_name = pin_name


class IncompatiblePinError(GraphEditError):
    """
    Raised when a link would violate the input's connection filter.

    Attributes:
        producer_kind: ValueKind offered by the output pin
        consumer_kind: ValueKind expected by the input pin
    """

    def __init__(self, message: str, producer_kind=None, consumer_kind=None):
        super().__init__(message)
        self.producer_kind = producer_kind
        self.consumer_kind = consumer_kind


class DuplicateOutputError(GraphEditError):
    """Raised when adding a second Output node to a graph."""

    def __init__(self, message: str, existing_id: int = None):
        super().__init__(message)
        self.existing_id = existing_id


# =============================================================================
# Compilation Errors
# =============================================================================

class CompilationError(ShaderGraphError):
    """Base exception for compilation/code generation errors."""
    pass


class ShaderCompileError(CompilationError):
    """
    Carries a backend compile/link failure back to the host for display.

    The graph compiler never raises this itself. When the rendering runtime
    rejects a CompiledShader it builds one with CompiledShader.compile_error(log)
    and the host shows format_with_source() next to the graph.

    Attributes:
        source: The GLSL source code that failed to compile
        error_message: The error from the GPU driver
    """

    def __init__(self, message: str, source: str = None, error_message: str = None):
        super().__init__(message)
        self.source = source
        self.error_message = error_message

    def format_with_source(self) -> str:
        """Format error with numbered source lines."""
        if not self.source:
            return str(self)

        lines = []
        lines.append(f"ShaderCompileError: {self}")
        if self.error_message:
            lines.append(f"GPU Error: {self.error_message}")
        lines.append("--- SHADER SOURCE ---")
        for i, line in enumerate(self.source.split('\n')):
            lines.append(f"{i+1:03d}: {line}")
        lines.append("---------------------")
        return '\n'.join(lines)
