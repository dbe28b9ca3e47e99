import io

import pytest

from pathgraph.config import EdgeListConfig
from pathgraph.errors import EdgeListFormatError, UnknownLabel
from pathgraph.graph import IndexedDiGraph
from pathgraph.io import (
    LabeledGraph,
    NodeMap,
    graph_to_edgelist,
    parse_edge_list,
    read_edge_list,
)


class TestNodeMap:
    def test_from_names_creates_bidirectional_mapping(self):
        node_map = NodeMap.from_names(["A", "B", "C"])
        assert node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert node_map.to_name == {0: "A", 1: "B", 2: "C"}
        assert len(node_map) == 3

    def test_from_names_empty_list(self):
        node_map = NodeMap.from_names([])
        assert len(node_map) == 0
        assert node_map.names() == []

    def test_index_and_contains(self):
        node_map = NodeMap.from_names(["A", "B"])
        assert node_map.index("B") == 1
        assert "A" in node_map
        assert "Z" not in node_map
        with pytest.raises(UnknownLabel):
            node_map.index("Z")

    def test_names_in_index_order(self):
        assert NodeMap.from_names(["x", "y"]).names() == ["x", "y"]


class TestParseEdgeList:
    def test_basic(self):
        labeled = parse_edge_list("A B 1\nB C 2\nA C 5")
        assert isinstance(labeled, LabeledGraph)
        g = labeled.graph
        assert isinstance(g, IndexedDiGraph)
        assert g.is_frozen
        assert g.size() == 3
        assert labeled.node_map.to_index == {"A": 0, "B": 1, "C": 2}
        assert sorted(g.edges(data="weight")) == [(0, 1, 1), (0, 2, 5), (1, 2, 2)]

    def test_first_seen_order(self):
        """Source label is indexed before target label within a line."""
        labeled = parse_edge_list("z y 1\nx z 2\ny w 3")
        assert labeled.node_map.names() == ["z", "y", "x", "w"]

    def test_labels_stored_on_nodes(self):
        labeled = parse_edge_list("left right 4")
        assert labeled.graph.label(0) == "left"
        assert labeled.graph.label(1) == "right"

    def test_repeated_pair_overwrites(self):
        labeled = parse_edge_list("A B 1\nA B 9")
        assert labeled.graph.number_of_edges() == 1
        assert labeled.graph.weight(0, 1) == 9

    def test_reverse_pair_is_distinct(self):
        labeled = parse_edge_list("A B 1\nB A 2")
        assert labeled.graph.weight(0, 1) == 1
        assert labeled.graph.weight(1, 0) == 2

    def test_self_loop(self):
        labeled = parse_edge_list("A A 3")
        assert labeled.graph.size() == 1
        assert labeled.graph.has_edge(0, 0)

    def test_surrounding_whitespace_stripped(self):
        labeled = parse_edge_list("\n\n  A B 1\nB C 2\n\n")
        assert labeled.node_map.names() == ["A", "B", "C"]

    def test_crlf_line_endings(self):
        labeled = parse_edge_list("A B 1\r\nB C 2\r\n")
        assert labeled.graph.weight(1, 2) == 2

    def test_signed_weight(self):
        labeled = parse_edge_list("A B +7")
        assert labeled.graph.weight(0, 1) == 7

    def test_zero_weight(self):
        assert parse_edge_list("A B 0").graph.weight(0, 1) == 0

    def test_iterable_of_lines(self):
        labeled = parse_edge_list(["A B 1\n", "B C 2\n"])
        assert labeled.graph.size() == 3

    def test_empty_iterable_gives_empty_graph(self):
        labeled = parse_edge_list([])
        assert labeled.graph.size() == 0
        assert len(labeled.node_map) == 0

    @pytest.mark.parametrize(
        "text,line_no",
        [
            ("A B", 0),
            ("A B 1\nB C", 1),
            ("A B 1\nB  C 2", 1),
            ("A B 1 2", 0),
            ("A B 1\n\nB C 2", 1),
            ("", 0),
            ("A\tB\t1", 0),
        ],
    )
    def test_format_error(self, text, line_no):
        with pytest.raises(EdgeListFormatError) as exc_info:
            parse_edge_list(text)
        err = exc_info.value
        assert err.line_no == line_no
        assert str(err) == (
            f"Format error on line {line_no} of your graph. "
            "Check the format is '{id1} {id2} {weight}'"
        )

    @pytest.mark.parametrize("weight", ["x", "1.5", "1e3", "1_000", "--1", "0x10"])
    def test_non_integer_weight(self, weight):
        with pytest.raises(EdgeListFormatError) as exc_info:
            parse_edge_list(f"A B 1\nB C {weight}")
        assert exc_info.value.line_no == 1
        assert str(exc_info.value) == "Weight value on line 1 is not an integer value"

    @pytest.mark.parametrize(
        "weight", ["2147483648", "-2147483649", "99999999999", "1" * 5000]
    )
    def test_weight_outside_int32(self, weight):
        with pytest.raises(EdgeListFormatError) as exc_info:
            parse_edge_list(f"A B {weight}")
        assert str(exc_info.value) == "Weight value on line 0 is not an integer value"

    def test_int32_bounds_accepted(self):
        labeled = parse_edge_list("A B 2147483647\nB C 00000000000005")
        assert labeled.graph.weight(0, 1) == 2147483647
        assert labeled.graph.weight(1, 2) == 5

    def test_trailing_separator_ignored(self):
        labeled = parse_edge_list("A B 1 \nB C 2  \nC A 3")
        assert labeled.node_map.names() == ["A", "B", "C"]
        assert labeled.graph.weight(0, 1) == 1
        assert labeled.graph.weight(1, 2) == 2

    def test_interior_empty_token_still_rejected(self):
        with pytest.raises(EdgeListFormatError) as exc_info:
            parse_edge_list("A  B 1 ")
        assert exc_info.value.line_no == 0

    def test_negative_weight(self):
        with pytest.raises(EdgeListFormatError, match="line 0 is negative"):
            parse_edge_list("A B -2")

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_edge_list("A B")

    def test_custom_separator(self):
        config = EdgeListConfig(separator=",")
        labeled = parse_edge_list("A,B,1\nB,C,2", config)
        assert labeled.graph.weight(1, 2) == 2

    def test_custom_separator_error_hint(self):
        config = EdgeListConfig(separator=",")
        with pytest.raises(EdgeListFormatError, match=r"'\{id1\},\{id2\},\{weight\}'"):
            parse_edge_list("A B 1", config)

    def test_no_strip(self):
        config = EdgeListConfig(strip_input=False)
        with pytest.raises(EdgeListFormatError) as exc_info:
            parse_edge_list("A B 1\n", config)
        # the trailing newline leaves an empty last line
        assert exc_info.value.line_no == 1


class TestReadEdgeList:
    def test_read_file(self, tmp_path):
        path = tmp_path / "graph.txt"
        path.write_text("A B 1\nB C 2\nA C 5\n", encoding="utf-8")
        labeled = read_edge_list(path)
        assert labeled.graph.size() == 3
        assert read_edge_list(str(path)).node_map.names() == ["A", "B", "C"]

    def test_read_stdin(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("A B 1\n"))
        labeled = read_edge_list("-")
        assert labeled.graph.weight(0, 1) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_edge_list(tmp_path / "missing.txt")


class TestGraphToEdgelist:
    def test_sorted_by_indices(self):
        labeled = parse_edge_list("B C 2\nA C 5\nB A 1\nA B 7")
        # indices: B=0, C=1, A=2
        assert graph_to_edgelist(labeled.graph, labeled.node_map) == [
            "B C 2",
            "B A 1",
            "A B 7",
            "A C 5",
        ]

    def test_round_trip(self):
        text = "A B 1\nB C 2\nA C 5"
        labeled = parse_edge_list(text)
        again = parse_edge_list("\n".join(graph_to_edgelist(labeled.graph)))
        assert sorted(labeled.graph.edges(data="weight")) == sorted(
            again.graph.edges(data="weight")
        )

    def test_unlabeled_graph_uses_indices(self):
        g = IndexedDiGraph.from_edges(2, [(1, 0, 3)])
        assert graph_to_edgelist(g, separator=",") == ["1,0,3"]

    def test_empty_graph(self):
        assert graph_to_edgelist(IndexedDiGraph(3)) == []
