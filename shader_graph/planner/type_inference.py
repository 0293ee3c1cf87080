"""
Value-kind propagation.

Every output pin resolves its kind either from a fixed declaration or from a
resolver attached to the node kind. Resolvers only see a one-hop probe: the
kind reported by the producer directly connected to each input. Because nodes
are resolved in topological order and each one records its own result, kind
information still flows along arbitrarily long chains.
"""

from typing import Dict, Optional, Tuple

from ..ir.graph import Graph, KindProbe, Node
from ..ir.types import ValueKind, widest_kind


def resolve_widest_input(node: Node, probe: KindProbe) -> ValueKind:
    """Widest vector kind among the immediate producers, else SCALAR."""
    kinds = []
    for pin in node.inputs:
        kind = probe(pin.name)
        # Unconnected inputs contribute the kind of their default literal
        kinds.append(kind if kind is not None else pin.kind)
    return widest_kind(kinds)


def resolve_parameter_size(node: Node, probe: KindProbe) -> ValueKind:
    """Vector parameters declare their size locally (2, 3 or 4 components)."""
    try:
        size = int(node.config.get("size", 3))
    except (TypeError, ValueError):
        size = 3
    return ValueKind.from_components(min(max(size, 2), 4))


class TypePropagator:
    """
    Records resolved output kinds for one compile pass.

    Usage:
        types = TypePropagator(graph)
        for node in order:
            for pin in node.outputs:
                kind = types.resolve(node, pin.name)
    """

    def __init__(self, graph: Graph):
        self.graph = graph
        self._kinds: Dict[Tuple[int, str], ValueKind] = {}

    def probe_for(self, node: Node) -> KindProbe:
        def probe(pin_name: str) -> Optional[ValueKind]:
            link = self.graph.link_into(node.id, pin_name)
            if link is None:
                return None
            return self._kinds.get((link.from_node, link.from_pin))
        return probe

    def resolve(self, node: Node, pin_name: str) -> ValueKind:
        pin = node.output(pin_name)
        if pin.resolver is None:
            kind = pin.kind
        else:
            kind = pin.resolver(node, self.probe_for(node))
        self._kinds[(node.id, pin_name)] = kind
        return kind

    def kind_of(self, node_id: int, pin_name: str) -> Optional[ValueKind]:
        """Resolved kind of an output pin, or None if not resolved yet."""
        return self._kinds.get((node_id, pin_name))
