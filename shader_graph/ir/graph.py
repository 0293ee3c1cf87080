import logging
from typing import Any, Callable, Dict, List, Optional, Tuple
from enum import Enum, auto
from dataclasses import dataclass, field

from .types import ValueKind
from .ops import NodeKind
from ..errors import (
    DuplicateOutputError,
    GraphEditError,
    IncompatiblePinError,
    NodeNotFoundError,
    PinNotFoundError,
)

logger = logging.getLogger(__name__)

# Resolver signature: (node, probe) -> ValueKind
# probe(input_pin_name) returns the kind reported by the immediate producer
# of that input, or None when the input is unconnected/unresolved.
KindProbe = Callable[[str], Optional[ValueKind]]
KindResolver = Callable[['Node', KindProbe], ValueKind]


class PinDirection(Enum):
    INPUT = auto()
    OUTPUT = auto()


@dataclass(frozen=True)
class Pin:
    """
    A named, typed connection point on a node.

    Input pins carry the literal used while unconnected and their connection
    filter. Output pins may carry a kind resolver when their kind is not fixed.
    """
    name: str
    kind: ValueKind
    direction: PinDirection
    default: str = ""
    accepts_any: bool = False
    resolver: Optional[KindResolver] = None
    polymorphic: bool = False

    @classmethod
    def input(cls, name: str, kind: ValueKind, default: str, accepts_any: bool = False) -> 'Pin':
        return cls(name, kind, PinDirection.INPUT, default=default, accepts_any=accepts_any)

    @classmethod
    def output(cls, name: str, kind: ValueKind, resolver: Optional[KindResolver] = None,
               polymorphic: bool = False) -> 'Pin':
        return cls(name, kind, PinDirection.OUTPUT, resolver=resolver, polymorphic=polymorphic)

    def accepts(self, producer_kind: ValueKind) -> bool:
        """Connection filter: same kind only, unless the input accepts any."""
        return self.accepts_any or producer_kind == self.kind


@dataclass(frozen=True)
class NodeSpec:
    """Static description of a node kind: pins, local settings, menu placement."""
    kind: NodeKind
    label: str
    category: str
    inputs: Tuple[Pin, ...] = ()
    outputs: Tuple[Pin, ...] = ()
    settings: Tuple[Tuple[str, Any], ...] = ()

    def default_config(self) -> Dict[str, Any]:
        return dict(self.settings)


class Node:
    """
    A node instance in the graph arena.
    The id is stable for the node's lifetime and never reused.
    """
    def __init__(self, id: int, spec: NodeSpec, config: Optional[Dict[str, Any]] = None):
        self.id = id
        self.spec = spec
        self.config: Dict[str, Any] = spec.default_config()
        if config:
            self.config.update(config)

    @property
    def kind(self) -> NodeKind:
        return self.spec.kind

    @property
    def label(self) -> str:
        return self.spec.label

    @property
    def inputs(self) -> Tuple[Pin, ...]:
        return self.spec.inputs

    @property
    def outputs(self) -> Tuple[Pin, ...]:
        return self.spec.outputs

    def input(self, name: str) -> Pin:
        for pin in self.spec.inputs:
            if pin.name == name:
                return pin
        raise PinNotFoundError(f"{self} has no input '{name}'", node_id=self.id, pin_name=name)

    def output(self, name: str) -> Pin:
        for pin in self.spec.outputs:
            if pin.name == name:
                return pin
        raise PinNotFoundError(f"{self} has no output '{name}'", node_id=self.id, pin_name=name)

    def declared_kind(self, pin_name: str) -> ValueKind:
        """Output kind from the node alone, without looking at producers."""
        pin = self.output(pin_name)
        if pin.resolver is not None and not pin.polymorphic:
            return pin.resolver(self, lambda _name: None)
        return pin.kind

    def __repr__(self):
        return f"Node({self.kind.name}#{self.id})"


@dataclass(frozen=True)
class Link:
    """Directed edge: output pin of one node -> input pin of another."""
    from_node: int
    from_pin: str
    to_node: int
    to_pin: str


@dataclass
class Graph:
    """
    Arena of nodes indexed by integer id plus a separate link table.

    Links are keyed by their consumer (node id, input pin name), which is
    what enforces "at most one incoming link per input".
    """
    name: str = "Shader Graph"
    nodes: Dict[int, Node] = field(default_factory=dict)
    links: Dict[Tuple[int, str], Link] = field(default_factory=dict)
    output_id: Optional[int] = None
    revision: int = 0
    _next_node_id: int = 0

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def node(self, node_id: int) -> Node:
        node = self.nodes.get(node_id)
        if node is None:
            raise NodeNotFoundError(f"No node with id {node_id}", node_id=node_id)
        return node

    @property
    def output_node(self) -> Optional[Node]:
        if self.output_id is None:
            return None
        return self.nodes.get(self.output_id)

    def link_into(self, node_id: int, pin_name: str) -> Optional[Link]:
        return self.links.get((node_id, pin_name))

    def links_from(self, node_id: int) -> List[Link]:
        return [link for link in self.links.values() if link.from_node == node_id]

    def sorted_nodes(self) -> List[Node]:
        return [self.nodes[i] for i in sorted(self.nodes)]

    # -------------------------------------------------------------------------
    # Edits
    # -------------------------------------------------------------------------

    def add_node(self, kind: NodeKind, **config) -> Node:
        """Create a node of `kind`, optionally overriding its local settings."""
        from ..nodes import get_node_spec

        if kind == NodeKind.OUTPUT and self.output_node is not None:
            raise DuplicateOutputError(
                f"Graph '{self.name}' already has an output node", existing_id=self.output_id
            )

        spec = get_node_spec(kind)
        unknown = set(config) - set(spec.default_config())
        if unknown:
            raise GraphEditError(f"{spec.label} has no settings {sorted(unknown)}")

        node = Node(self._next_node_id, spec, config)
        self._next_node_id += 1

        if kind.is_parameter() and not node.config.get("name"):
            node.config["name"] = f"param_{node.id}"

        self.nodes[node.id] = node
        if kind == NodeKind.OUTPUT:
            self.output_id = node.id
        self.revision += 1
        logger.debug(f"Added {node}")
        return node

    def remove_node(self, node_id: int) -> Node:
        """Delete a node and every link touching it."""
        node = self.node(node_id)
        stale = [key for key, link in self.links.items()
                 if link.from_node == node_id or link.to_node == node_id]
        for key in stale:
            del self.links[key]

        del self.nodes[node_id]
        if self.output_id == node_id:
            self.output_id = None
        self.revision += 1
        logger.debug(f"Removed {node} and {len(stale)} link(s)")
        return node

    def connect(self, from_node: int, from_pin: str, to_node: int, to_pin: str) -> Link:
        """
        Link an output pin to an input pin.

        An existing link on the input is replaced.
        """
        producer = self.node(from_node)
        consumer = self.node(to_node)
        out_pin = producer.output(from_pin)
        in_pin = consumer.input(to_pin)

        if from_node == to_node:
            raise GraphEditError(f"Cannot link {producer} to itself")

        if not out_pin.polymorphic:
            producer_kind = producer.declared_kind(from_pin)
            if not in_pin.accepts(producer_kind):
                raise IncompatiblePinError(
                    f"{producer}.{from_pin} ({producer_kind}) cannot feed "
                    f"{consumer}.{to_pin} ({in_pin.kind})",
                    producer_kind=producer_kind,
                    consumer_kind=in_pin.kind,
                )

        link = Link(from_node, from_pin, to_node, to_pin)
        replaced = self.links.get((to_node, to_pin))
        self.links[(to_node, to_pin)] = link
        self.revision += 1
        if replaced is not None:
            logger.debug(f"Replaced link {replaced} with {link}")
        return link

    def disconnect(self, to_node: int, to_pin: str) -> Optional[Link]:
        """Remove the link feeding an input pin, if any."""
        self.node(to_node).input(to_pin)
        link = self.links.pop((to_node, to_pin), None)
        if link is not None:
            self.revision += 1
        return link

    def set_config(self, node_id: int, key: str, value: Any) -> None:
        """Change a node's local setting (float value, color, clamp range, ...)."""
        node = self.node(node_id)
        if key not in node.spec.default_config():
            raise GraphEditError(f"{node} has no setting '{key}'")
        node.config[key] = value
        self.revision += 1

    # -------------------------------------------------------------------------
    # Debugging
    # -------------------------------------------------------------------------

    def summary(self) -> str:
        lines: List[str] = [f"Graph(name={self.name!r}, nodes={len(self.nodes)}, links={len(self.links)})"]
        for node in self.sorted_nodes():
            ins = ", ".join(
                f"{pin.name}<-{link.from_node}.{link.from_pin}" if link else f"{pin.name}={pin.default}"
                for pin in node.inputs
                for link in [self.link_into(node.id, pin.name)]
            )
            marker = " [output]" if node.id == self.output_id else ""
            lines.append(f"- {node}{marker}({ins})")
        return "\n".join(lines)


def default_graph() -> Graph:
    """Start-up graph: a Color node feeding the Output's color."""
    graph = Graph()
    output = graph.add_node(NodeKind.OUTPUT)
    color = graph.add_node(NodeKind.COLOR)
    graph.connect(color.id, "RGB", output.id, "Color")
    return graph
