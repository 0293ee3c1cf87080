# Graph analysis: reachability, ordering, fan-out and kind propagation.
# The cached compile front door lives in planner.graph_compiler.

from .analysis import collect_reachable, count_fanout, topological_sort
from .type_inference import TypePropagator

__all__ = ['collect_reachable', 'count_fanout', 'topological_sort', 'TypePropagator']
