from typing import Any, Optional, Tuple

from ..config import CompileOptions
from ..ir.graph import Graph, Node
from ..ir.types import ValueKind

class ShaderContext:
    """
    Context object passed to GLSL emitters.
    Wraps the state required to generate the expression of one node.
    """
    def __init__(self,
                 generator: Any,  # ShaderGenerator instance
                 node: Node,
                 options: CompileOptions):
        self._generator = generator
        self.node = node
        self.options = options

    def resolved(self, pin_name: str) -> Tuple[str, ValueKind]:
        """
        (expression, kind) feeding an input pin.
        Falls back to the pin default when unconnected or not resolved yet.
        """
        pin = self.node.input(pin_name)
        link = self.graph.link_into(self.node.id, pin_name)
        if link is not None:
            entry = self._generator.lookup(link.from_node, link.from_pin)
            if entry is not None:
                return entry
        return pin.default, pin.kind

    def input(self, pin_name: str) -> str:
        """Expression for an input, converted to the kind the pin expects."""
        pin = self.node.input(pin_name)
        expr, kind = self.resolved(pin_name)
        if pin.accepts_any:
            return expr
        return self.coerce(expr, kind, pin.kind)

    def coerce(self, expr: str, source: ValueKind, target: ValueKind) -> str:
        from .emitters.types import coerce
        return coerce(expr, source, target)

    def output_kind(self, pin_name: str) -> Optional[ValueKind]:
        return self._generator.types.kind_of(self.node.id, pin_name)

    def uniform_name(self) -> str:
        """Uniform bound to this parameter node for the current compile."""
        return self._generator.uniform_name(self.node.id)

    def setting(self, key: str, default: Any = None) -> Any:
        return self.node.config.get(key, default)

    def literal(self, value: Any) -> str:
        """Format a configured float with the compile precision."""
        from .emitters.const import format_float
        return format_float(value, self.options.float_precision)

    @property
    def graph(self) -> Graph:
        return self._generator.graph
