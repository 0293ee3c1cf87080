# Node Catalog
# Maps NodeKind -> NodeSpec (pin layout, defaults, local settings)

from typing import Dict

from ..ir.graph import NodeSpec
from ..ir.ops import NodeKind

from . import constant, input, math, output, parameter, vector

NODE_SPECS: Dict[NodeKind, NodeSpec] = {
    spec.kind: spec
    for module in (input, constant, math, vector, parameter, output)
    for spec in module.node_specs
}


def get_node_spec(kind: NodeKind) -> NodeSpec:
    """Get the NodeSpec for a kind; every NodeKind has one."""
    return NODE_SPECS[kind]


__all__ = ['NODE_SPECS', 'get_node_spec']
