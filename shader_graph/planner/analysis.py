import logging
from typing import Dict, Iterator, List, Set, Tuple

from ..ir.graph import Graph, Link, Node

logger = logging.getLogger(__name__)


def _input_links(graph: Graph, node: Node, allowed: Set[int] = None) -> Iterator[Link]:
    """Links feeding `node`, in declared input-pin order."""
    for pin in node.inputs:
        link = graph.link_into(node.id, pin.name)
        if link is None or link.from_node not in graph.nodes:
            continue
        if allowed is not None and link.from_node not in allowed:
            continue
        yield link


def collect_reachable(graph: Graph, sink: Node) -> Set[int]:
    """
    Returns ids of nodes that transitively feed `sink` (sink included).
    Anything else is dead code and must not be emitted.
    """
    seen: Set[int] = {sink.id}
    stack = [sink]
    while stack:
        node = stack.pop()
        for link in _input_links(graph, node):
            if link.from_node in seen:
                continue
            seen.add(link.from_node)
            stack.append(graph.nodes[link.from_node])
    return seen


def topological_sort(graph: Graph, reachable: Set[int], sink: Node) -> Tuple[List[Node], List[Link]]:
    """
    Returns (order, broken_links).

    Post-order DFS with an "on current path" marker. Reaching a node that is
    still on the path means the link closes a cycle: it is recorded in
    `broken_links` and not followed, so its consumer later falls back to the
    pin default. Roots are the sink first, then the remaining reachable nodes
    by id, which keeps the order stable for identical graphs.
    """
    ordered: Set[int] = set()
    on_path: Set[int] = set()
    order: List[Node] = []
    broken: List[Link] = []

    roots = [sink.id] + sorted(reachable - {sink.id})
    for root_id in roots:
        if root_id in ordered:
            continue

        on_path.add(root_id)
        stack = [(root_id, _input_links(graph, graph.nodes[root_id], reachable))]
        while stack:
            node_id, links = stack[-1]
            link = next(links, None)
            if link is None:
                stack.pop()
                on_path.discard(node_id)
                ordered.add(node_id)
                order.append(graph.nodes[node_id])
                continue

            producer_id = link.from_node
            if producer_id in ordered:
                continue
            if producer_id in on_path:
                logger.debug(f"Cycle: ignoring link {link}")
                broken.append(link)
                continue

            on_path.add(producer_id)
            stack.append((producer_id, _input_links(graph, graph.nodes[producer_id], reachable)))

    return order, broken


def count_fanout(graph: Graph, reachable: Set[int]) -> Dict[int, int]:
    """
    Number of input pins on other reachable nodes fed by each reachable node.
    Counts usages, so one producer wired into two pins of a consumer counts 2.
    """
    counts: Dict[int, int] = {node_id: 0 for node_id in reachable}
    for link in graph.links.values():
        if link.from_node == link.to_node:
            continue
        if link.from_node in reachable and link.to_node in reachable:
            counts[link.from_node] += 1
    return counts
