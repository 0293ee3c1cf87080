import unittest

from conftest import build_output_graph, declarations, main_body

from shader_graph.codegen.glsl import VERTEX_SHADER_SOURCE, compile_graph
from shader_graph.config import CompileOptions
from shader_graph.diagnostics import DiagnosticLevel
from shader_graph.ir.graph import Graph, default_graph
from shader_graph.ir.ops import NodeKind

FALLBACK = "FragColor = vec4(1.0, 0.0, 1.0, 1.0); // Error: No output node"
FINAL = "FragColor = vec4(finalColor, finalAlpha);"


class TestAssembly(unittest.TestCase):
    def test_prologue(self):
        source = compile_graph(default_graph()).source
        lines = source.splitlines()
        self.assertEqual(lines[0], "#version 330 core")
        self.assertIn("out vec4 FragColor;", lines)
        self.assertIn("in vec3 FragPos;", lines)
        self.assertIn("in vec3 Normal;", lines)
        for decl in ("uniform float time;", "uniform vec3 lightPos;", "uniform vec3 viewPos;",
                     "uniform vec3 lightColor;", "uniform vec3 objectColor;"):
            self.assertIn(decl, lines)
        self.assertIn("void main()", lines)
        self.assertTrue(source.endswith("}\n"))

    def test_statements_match_main_body(self):
        graph = default_graph()
        graph.add_node(NodeKind.FLOAT_PARAMETER, name="speed")
        shader = compile_graph(graph)
        self.assertEqual(main_body(shader), shader.statements)

    def test_disconnected_sink_uses_defaults(self):
        graph, _ = build_output_graph()
        shader = compile_graph(graph)
        self.assertEqual(shader.statements, [
            "vec3 finalColor = vec3(1.0, 0.5, 0.2);",
            "float finalAlpha = 1.0;",
            FINAL,
        ])

    def test_missing_sink_emits_only_fallback(self):
        graph = Graph("NoSink")
        value = graph.add_node(NodeKind.FLOAT)
        sin = graph.add_node(NodeKind.SIN)
        graph.connect(value.id, "Value", sin.id, "X")

        shader = compile_graph(graph)
        self.assertEqual(shader.statements, [FALLBACK])
        self.assertEqual(main_body(shader), [FALLBACK])
        self.assertFalse(shader.ok)
        self.assertEqual(shader.diagnostics[0].level, DiagnosticLevel.ERROR)

    def test_deleted_sink_emits_fallback(self):
        graph = default_graph()
        graph.remove_node(graph.output_id)
        self.assertEqual(compile_graph(graph).statements, [FALLBACK])

    def test_vertex_shader_feeds_fragment_inputs(self):
        self.assertTrue(VERTEX_SHADER_SOURCE.startswith("#version 330 core"))
        self.assertIn("out vec3 FragPos;", VERTEX_SHADER_SOURCE)
        self.assertIn("out vec3 Normal;", VERTEX_SHADER_SOURCE)
        self.assertIn("uniform mat4 projection;", VERTEX_SHADER_SOURCE)


class TestEmission(unittest.TestCase):
    def test_dead_code_excluded(self):
        graph = default_graph()
        time = graph.add_node(NodeKind.TIME)
        cos = graph.add_node(NodeKind.COS)
        graph.connect(time.id, "Time", cos.id, "X")

        shader = compile_graph(graph)
        self.assertNotIn("cos(", shader.source)
        self.assertEqual(declarations(shader), [])

    def test_fanout_materializes_once(self):
        graph, output = build_output_graph()
        value = graph.add_node(NodeKind.FLOAT, value=0.5)
        add = graph.add_node(NodeKind.ADD)
        mul = graph.add_node(NodeKind.MULTIPLY)
        graph.connect(value.id, "Value", add.id, "A")
        graph.connect(value.id, "Value", add.id, "B")
        graph.connect(value.id, "Value", mul.id, "A")
        graph.connect(add.id, "Result", mul.id, "B")
        graph.connect(mul.id, "Result", output.id, "Alpha")

        shader = compile_graph(graph)
        self.assertEqual(declarations(shader), [
            "float tmp_0 = 0.500;",
            "float tmp_1 = (tmp_0 + tmp_0);",
            "float tmp_2 = (tmp_0 * tmp_1);",
        ])
        # One declaration, three references
        self.assertEqual(shader.source.count("tmp_0"), 4)
        self.assertEqual(shader.source.count("0.500"), 1)

    def test_single_use_source_is_inlined(self):
        graph, output = build_output_graph()
        time = graph.add_node(NodeKind.TIME)
        sin = graph.add_node(NodeKind.SIN)
        graph.connect(time.id, "Time", sin.id, "X")
        graph.connect(sin.id, "Result", output.id, "Alpha")
        self.assertEqual(declarations(compile_graph(graph)), ["float tmp_0 = sin(time);"])

    def test_shared_source_gets_one_temporary_per_output(self):
        graph, output = build_output_graph()
        pos = graph.add_node(NodeKind.POSITION)
        add = graph.add_node(NodeKind.ADD)
        graph.connect(pos.id, "X", add.id, "A")
        graph.connect(pos.id, "Y", add.id, "B")
        graph.connect(add.id, "Result", output.id, "Alpha")

        self.assertEqual(declarations(compile_graph(graph)), [
            "vec3 tmp_0 = FragPos;",
            "float tmp_1 = FragPos.x;",
            "float tmp_2 = FragPos.y;",
            "float tmp_3 = FragPos.z;",
            "float tmp_4 = (tmp_1 + tmp_2);",
        ])

    def test_separate_xyz(self):
        graph, output = build_output_graph()
        pos = graph.add_node(NodeKind.POSITION)
        split = graph.add_node(NodeKind.SEPARATE_XYZ)
        graph.connect(pos.id, "XYZ", split.id, "Vec3")
        graph.connect(split.id, "Y", output.id, "Alpha")

        shader = compile_graph(graph)
        self.assertEqual(declarations(shader), [
            "float tmp_0 = (FragPos).x;",
            "float tmp_1 = (FragPos).y;",
            "float tmp_2 = (FragPos).z;",
        ])
        self.assertIn("float finalAlpha = tmp_1;", shader.statements)

    def test_combine_xyz(self):
        graph, output = build_output_graph()
        time = graph.add_node(NodeKind.TIME)
        make = graph.add_node(NodeKind.COMBINE_XYZ)
        graph.connect(time.id, "Time", make.id, "X")
        graph.connect(make.id, "Vec3", output.id, "Color")

        shader = compile_graph(graph)
        self.assertEqual(declarations(shader), ["vec3 tmp_0 = vec3(time, 0.0, 0.0);"])
        self.assertIn("vec3 finalColor = tmp_0;", shader.statements)

    def test_fresnel_and_normal(self):
        graph, output = build_output_graph()
        fresnel = graph.add_node(NodeKind.FRESNEL)
        normal = graph.add_node(NodeKind.NORMAL)
        graph.connect(fresnel.id, "Factor", output.id, "Alpha")
        graph.connect(normal.id, "Normal", output.id, "Color")

        shader = compile_graph(graph)
        self.assertEqual(declarations(shader), [
            "float tmp_0 = pow(1.0 - max(dot(normalize(Normal), normalize(viewPos - FragPos)), 0.0), 2.0);",
        ])
        self.assertIn("vec3 finalColor = normalize(Normal);", shader.statements)

    def test_mix_and_clamp(self):
        graph, output = build_output_graph()
        mix = graph.add_node(NodeKind.MIX)
        clamp = graph.add_node(NodeKind.CLAMP, min=-1.0, max=2.0)
        graph.connect(mix.id, "Result", clamp.id, "X")
        graph.connect(clamp.id, "Result", output.id, "Alpha")

        self.assertEqual(declarations(compile_graph(graph)), [
            "float tmp_0 = mix(0.0, 1.0, 0.5);",
            "float tmp_1 = clamp(tmp_0, -1.000, 2.000);",
        ])

    def test_divide_and_subtract_defaults(self):
        graph, output = build_output_graph()
        div = graph.add_node(NodeKind.DIVIDE)
        sub = graph.add_node(NodeKind.SUBTRACT)
        graph.connect(div.id, "Result", sub.id, "A")
        graph.connect(sub.id, "Result", output.id, "Alpha")

        self.assertEqual(declarations(compile_graph(graph)), [
            "float tmp_0 = (1.0 / 1.0);",
            "float tmp_1 = (tmp_0 - 0.0);",
        ])


class TestPolymorphicMultiply(unittest.TestCase):
    def test_vector_operand_widens_result(self):
        graph, output = build_output_graph()
        color = graph.add_node(NodeKind.COLOR)
        mul = graph.add_node(NodeKind.MULTIPLY)
        graph.connect(color.id, "RGB", mul.id, "A")
        graph.connect(mul.id, "Result", output.id, "Color")

        shader = compile_graph(graph)
        self.assertEqual(declarations(shader), ["vec3 tmp_0 = (vec3(1.000, 0.500, 0.200) * 1.0);"])
        self.assertIn("vec3 finalColor = tmp_0;", shader.statements)

    def test_scalar_operands_stay_scalar(self):
        graph, output = build_output_graph()
        time = graph.add_node(NodeKind.TIME)
        mul = graph.add_node(NodeKind.MULTIPLY)
        graph.connect(time.id, "Time", mul.id, "B")
        graph.connect(mul.id, "Result", output.id, "Alpha")
        self.assertEqual(declarations(compile_graph(graph)), ["float tmp_0 = (1.0 * time);"])

    def test_widening_flows_through_chains(self):
        graph, output = build_output_graph()
        color = graph.add_node(NodeKind.COLOR)
        inner = graph.add_node(NodeKind.MULTIPLY)
        outer = graph.add_node(NodeKind.MULTIPLY)
        graph.connect(color.id, "RGB", inner.id, "A")
        graph.connect(inner.id, "Result", outer.id, "B")
        graph.connect(outer.id, "Result", output.id, "Color")

        self.assertEqual(declarations(compile_graph(graph)), [
            "vec3 tmp_0 = (vec3(1.000, 0.500, 0.200) * 1.0);",
            "vec3 tmp_1 = (1.0 * tmp_0);",
        ])

    def test_vector_result_into_scalar_input_is_coerced(self):
        graph, output = build_output_graph()
        color = graph.add_node(NodeKind.COLOR)
        mul = graph.add_node(NodeKind.MULTIPLY)
        graph.connect(color.id, "RGB", mul.id, "A")
        graph.connect(mul.id, "Result", output.id, "Alpha")

        shader = compile_graph(graph)
        self.assertIn("float finalAlpha = dot(tmp_0, vec3(0.33333333));", shader.statements)

    def test_narrower_vector_operand_is_padded(self):
        graph, output = build_output_graph()
        offset = graph.add_node(NodeKind.VECTOR_PARAMETER, name="offset", size=2, value=(1.0, 2.0))
        color = graph.add_node(NodeKind.COLOR)
        mul = graph.add_node(NodeKind.MULTIPLY)
        graph.connect(offset.id, "Value", mul.id, "A")
        graph.connect(color.id, "RGB", mul.id, "B")
        graph.connect(mul.id, "Result", output.id, "Color")

        shader = compile_graph(graph)
        self.assertEqual(declarations(shader), [
            "vec3 tmp_0 = (vec3(offset, 0.0) * vec3(1.000, 0.500, 0.200));",
        ])
        self.assertIn("uniform vec2 offset;", shader.source)

    def test_wider_result_into_vec3_input_is_swizzled(self):
        graph, output = build_output_graph()
        tint = graph.add_node(NodeKind.VECTOR_PARAMETER, name="tint", size=4, value=(1, 1, 1, 1))
        mul = graph.add_node(NodeKind.MULTIPLY)
        graph.connect(tint.id, "Value", mul.id, "A")
        graph.connect(mul.id, "Result", output.id, "Color")

        shader = compile_graph(graph)
        self.assertEqual(declarations(shader), ["vec4 tmp_0 = (tint * 1.0);"])
        self.assertIn("vec3 finalColor = (tmp_0).xyz;", shader.statements)


class TestRobustness(unittest.TestCase):
    def test_cycle_not_reaching_sink_is_ignored(self):
        graph = default_graph()
        add = graph.add_node(NodeKind.ADD)
        sub = graph.add_node(NodeKind.SUBTRACT)
        graph.connect(add.id, "Result", sub.id, "A")
        graph.connect(sub.id, "Result", add.id, "A")

        shader = compile_graph(graph)
        self.assertEqual(shader.diagnostics, [])
        self.assertEqual(declarations(shader), [])

    def test_idempotent(self):
        graph, output = build_output_graph()
        pos = graph.add_node(NodeKind.POSITION)
        mul = graph.add_node(NodeKind.MULTIPLY)
        graph.connect(pos.id, "XYZ", mul.id, "A")
        graph.connect(pos.id, "X", mul.id, "B")
        graph.connect(mul.id, "Result", output.id, "Color")

        first = compile_graph(graph)
        second = compile_graph(graph)
        self.assertEqual(first.source, second.source)

    def test_identical_graphs_identical_text(self):
        def build():
            graph, output = build_output_graph()
            value = graph.add_node(NodeKind.FLOAT, value=3.0)
            cos = graph.add_node(NodeKind.COS)
            graph.connect(value.id, "Value", cos.id, "X")
            graph.connect(cos.id, "Result", output.id, "Alpha")
            return graph

        self.assertEqual(compile_graph(build()).source, compile_graph(build()).source)

    def test_compile_does_not_mutate_graph(self):
        graph = default_graph()
        revision = graph.revision
        links = dict(graph.links)
        compile_graph(graph)
        self.assertEqual(graph.revision, revision)
        self.assertEqual(graph.links, links)

    def test_non_finite_literals_become_zero(self):
        graph, output = build_output_graph()
        value = graph.add_node(NodeKind.FLOAT, value=float("inf"))
        graph.connect(value.id, "Value", output.id, "Alpha")
        self.assertIn("float finalAlpha = 0.000;", compile_graph(graph).statements)


class TestCompileOptions(unittest.TestCase):
    def test_precision_prefix_and_indent(self):
        graph, output = build_output_graph()
        value = graph.add_node(NodeKind.FLOAT, value=0.123456)
        sin = graph.add_node(NodeKind.SIN)
        graph.connect(value.id, "Value", sin.id, "X")
        graph.connect(sin.id, "Result", output.id, "Alpha")

        options = CompileOptions(float_precision=5, temp_prefix="v", indent="\t")
        shader = compile_graph(graph, options)
        self.assertIn("float v0 = sin(0.12346);", shader.statements)
        self.assertIn("\tfloat v0 = sin(0.12346);", shader.source)


if __name__ == '__main__':
    unittest.main()
