"""Tests for dotgraph.parser — statements, blocks, attributes and syntax errors."""

import logging

import pytest

from dotgraph.errors import AttributeNotFoundError, DotSyntaxError
from dotgraph.parser import parse
from dotgraph.types import Bool, Float, Int, Text


def test_parse_end_to_end_example():
    graph = parse("digraph ex { s [h=2] -> a; a -> s; }")
    assert graph.kind == "digraph"
    assert graph.name == "ex"
    assert graph.adjacency["s"] == ["a"]
    assert graph.adjacency["a"] == ["s"]
    assert graph.get_vertex_attribute("s", "h") == Int(2)


def test_parse_fan_out_block_targets():
    graph = parse("digraph g { s -> [k=1] { a b } ; }")
    assert graph.adjacency["s"] == ["a", "b"]
    assert graph.get_edge_attributes("s", "a") == {"k": Int(1)}
    assert graph.get_edge_attributes("s", "b") == {"k": Int(1)}


def test_parse_kind_is_lowercased():
    assert parse("DiGrAph test { a -> b }").kind == "digraph"
    assert parse("GRAPH test { a -- b }").kind == "graph"


def test_parse_alphanumeric_graph_name():
    assert parse("digraph 9name123 { }").name == "9name123"


def test_parse_empty_body():
    graph = parse("digraph g {}")
    assert graph.vertices() == []


class TestEdges:
    def test_undirected_edges_are_mirrored(self):
        graph = parse("graph g { a -- [w=7] b; }")
        assert graph.adjacency == {"a": ["b"], "b": ["a"]}
        assert graph.get_edge_attribute("a", "b", "w") == Int(7)
        assert graph.get_edge_attribute("b", "a", "w") == Int(7)

    def test_operator_decides_mirroring_not_graph_kind(self):
        directed = parse("graph g { a -> b; }")
        assert directed.neighbors("b") == []
        undirected = parse("digraph g { a -- b; }")
        assert undirected.neighbors("b") == ["a"]

    def test_duplicate_edges_preserved(self):
        graph = parse("digraph g { a -> b; a -> b; }")
        assert graph.neighbors("a") == ["b", "b"]

    def test_sink_vertex_has_empty_adjacency(self):
        graph = parse("digraph g { a -> b }")
        assert graph.adjacency["b"] == []

    def test_empty_target_block(self):
        graph = parse("digraph g { a -> { } }")
        assert graph.adjacency == {"a": []}

    def test_statements_without_semicolons(self):
        graph = parse("digraph g {\n  a -> b\n  b -> c\n}")
        assert graph.neighbors("a") == ["b"]
        assert graph.neighbors("b") == ["c"]

    def test_undirected_block_mirrors_each_target(self):
        graph = parse("graph g { hub -- [w=2] { x y } }")
        assert graph.neighbors("hub") == ["x", "y"]
        assert graph.neighbors("x") == ["hub"]
        assert graph.get_edge_attributes("y", "hub") == {"w": Int(2)}

    def test_block_end_with_semicolon(self):
        graph = parse("digraph g { s -> { a b }; t -> a; };")
        assert graph.neighbors("t") == ["a"]

    def test_no_edge_attributes_means_no_entry(self):
        graph = parse("digraph g { a -> b }")
        with pytest.raises(AttributeNotFoundError):
            graph.get_edge_attributes("a", "b")


class TestAttributes:
    def test_value_types(self):
        graph = parse('digraph g { a [i=3, f=0.5, b=true, s=red, q="two words", n=-2] -> b }')
        assert graph.get_vertex_attributes("a") == {
            "i": Int(3),
            "f": Float(0.5),
            "b": Bool(True),
            "s": Text("red"),
            "q": Text("two words"),
            "n": Int(-2),
        }

    def test_whitespace_inside_lists(self):
        graph = parse("digraph g {\n  start [ cost = 3,\n    distance = 7 ] -> [ k = 0.12 ] a1;\n}")
        assert graph.get_vertex_attributes("start") == {"cost": Int(3), "distance": Int(7)}
        assert graph.get_edge_attributes("start", "a1") == {"k": Float(0.12)}

    def test_quoted_number_is_coerced(self):
        graph = parse('digraph g { a [v="1.0"] -> b }')
        assert graph.get_vertex_attribute("a", "v") == Float(1.0)

    def test_inline_target_attributes(self):
        graph = parse("digraph g { a -> b [h=1]; }")
        assert graph.get_vertex_attribute("b", "h") == Int(1)
        assert "a" not in graph.vertex_attributes

    def test_block_target_attributes(self):
        graph = parse("digraph g { a -> { b [h=1] c } }")
        assert graph.get_vertex_attribute("b", "h") == Int(1)
        assert "c" not in graph.vertex_attributes

    def test_repeated_vertex_attributes_merge(self):
        graph = parse("digraph g { a [x=1, y=2] -> b; b -> a [x=3]; }")
        assert graph.get_vertex_attributes("a") == {"x": Int(3), "y": Int(2)}

    def test_empty_attribute_list(self):
        graph = parse("digraph g { a [] -> [] b }")
        assert graph.vertex_attributes == {}
        assert graph.edge_attributes == {}

    def test_underscore_in_attribute_name(self):
        graph = parse("digraph g { a [max_speed=90] -> b }")
        assert graph.get_vertex_attribute("a", "max_speed") == Int(90)


class TestComments:
    def test_comments_anywhere(self):
        src = """// header comment
        digraph g { /* inline */
          a -> b; // trailing
          /* multi
             line */
          b -> c
        }
        /* final comment */"""
        graph = parse(src)
        assert graph.neighbors("a") == ["b"]
        assert graph.neighbors("b") == ["c"]


class TestSyntaxErrors:
    @pytest.mark.parametrize(
        "src,message",
        [
            ("graph {", "GRAPH NAME"),
            ("tree g { a -> b }", "GRAPH TYPE"),
            ("digraph g a -> b }", "BLOCK BEGIN"),
            ("digraph g { a -> ; }", "TARGET NAME"),
            ("digraph g { a b }", "EDGE TYPE"),
            ("digraph g { a -> b", "VERTEX NAME"),
            ("digraph g { a -> { b c }", "VERTEX NAME"),
            ("digraph g { a -> { b ", "TARGET NAME"),
            ("digraph g { a [x] -> b }", "expected attribute name"),
            ("digraph g { a [x=1 y=2] -> b }", "neither ended nor continued"),
            ("digraph g { a [x=1,] -> b }", "expected attribute name"),
        ],
    )
    def test_rejected(self, src, message):
        with pytest.raises(DotSyntaxError, match=message):
            parse(src)

    def test_syntax_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("")

    def test_error_location(self):
        with pytest.raises(DotSyntaxError) as exc_info:
            parse("digraph g {\n  a b\n}")
        assert exc_info.value.line == 2
        assert exc_info.value.column == 5
        assert str(exc_info.value).startswith("line 2, column 5:")


class TestVerbose:
    def test_verbose_traces_tokens(self, caplog):
        caplog.set_level(logging.INFO, logger="dotgraph.parser")
        parse("digraph g { a [h=1] -> b; }", verbose=True)
        assert "[ TYPE digraph ]" in caplog.messages
        assert "[ NAME g ]" in caplog.messages
        assert "[ VERTEX NAME a ]" in caplog.messages
        assert "[ \tATTRIBUTE h ]" in caplog.messages
        assert "[ EDGE TYPE -> ]" in caplog.messages
        assert "[ TARGET VERTEX NAME b ]" in caplog.messages
        assert "[ --- BLOCK END found --- ]" in caplog.messages

    def test_quiet_by_default(self, caplog):
        caplog.set_level(logging.INFO, logger="dotgraph.parser")
        parse("digraph g { a -> b; }")
        assert caplog.messages == []

    def test_verbose_does_not_change_result(self):
        src = "graph g { a [x=1] -- [w=2] { b c } }"
        quiet = parse(src)
        loud = parse(src, verbose=True)
        assert quiet.adjacency == loud.adjacency
        assert quiet.vertex_attributes == loud.vertex_attributes
        assert quiet.edge_attributes == loud.edge_attributes


def test_overflowing_float_attribute_stays_text():
    graph = parse('digraph g { a [w="1.0e999"] -> b }')
    assert graph.get_vertex_attribute("a", "w") == Text("1.0e999")
