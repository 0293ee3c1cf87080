"""
Pytest configuration and shared fixtures for Shader Graph tests.

This file provides:
1. Shared fixtures for graphs in common shapes
2. Helper functions for building and inspecting compiled shaders

Usage:
    pytest tests/ -v
"""

import pytest

from shader_graph.ir.graph import Graph, default_graph
from shader_graph.ir.ops import NodeKind


# =============================================================================
# HELPERS
# =============================================================================

def build_output_graph(name="TestGraph"):
    """Returns (graph, output_node) with nothing connected."""
    graph = Graph(name=name)
    output = graph.add_node(NodeKind.OUTPUT)
    return graph, output


def main_body(shader):
    """Statements of main() as they appear in the source, indentation stripped."""
    body = shader.source.split("{", 1)[1].rsplit("}", 1)[0]
    return [line.strip() for line in body.splitlines() if line.strip()]


def declarations(shader):
    """Temporary declarations only (everything before the finalization)."""
    return [s for s in shader.statements if not s.startswith(("vec3 finalColor", "float finalAlpha", "FragColor"))]


# =============================================================================
# PYTEST FIXTURES
# =============================================================================

@pytest.fixture
def empty_graph():
    """
    Creates an empty Graph for testing.

    Example:
        def test_something(empty_graph):
            empty_graph.add_node(NodeKind.OUTPUT)
    """
    return Graph(name="TestGraph")


@pytest.fixture
def start_graph():
    """The start-up graph: Color -> Output.Color."""
    return default_graph()


@pytest.fixture
def chain_graph():
    """
    Float -> Sin -> Add.A -> Output.Alpha, with Add.B unconnected.

    Node ids:
        0: Output
        1: Float (0.25)
        2: Sin
        3: Add
    """
    graph, output = build_output_graph("ChainGraph")
    value = graph.add_node(NodeKind.FLOAT, value=0.25)
    sin = graph.add_node(NodeKind.SIN)
    add = graph.add_node(NodeKind.ADD)
    graph.connect(value.id, "Value", sin.id, "X")
    graph.connect(sin.id, "Result", add.id, "A")
    graph.connect(add.id, "Result", output.id, "Alpha")
    return graph


@pytest.fixture
def cyclic_graph():
    """
    Add <-> Subtract cycle feeding Output.Alpha.

    Node ids:
        0: Output
        1: Add (A <- Subtract)
        2: Subtract (A <- Add)
    """
    graph, output = build_output_graph("CyclicGraph")
    add = graph.add_node(NodeKind.ADD)
    sub = graph.add_node(NodeKind.SUBTRACT)
    graph.connect(add.id, "Result", sub.id, "A")
    graph.connect(sub.id, "Result", add.id, "A")
    graph.connect(add.id, "Result", output.id, "Alpha")
    return graph
