import pytest

from railgraph.domain.errors import ConfigurationError, MalformedEdgeError
from railgraph.domain.models import Edge
from railgraph.graph.model import GraphModel
from railgraph.graph.parse import parse_edges, parse_graph


def test_parse_graph_contains_all_origins(reference_graph):
    assert set(reference_graph.stations) == {"A", "B", "C", "D", "E"}
    assert reference_graph.edge_count == 9


def test_lookup_direct_edge(reference_graph):
    assert reference_graph.lookup("A", "B") == 5
    assert reference_graph.lookup("C", "E") == 2


def test_lookup_missing_edge_returns_none(reference_graph):
    assert reference_graph.lookup("A", "C") is None
    assert reference_graph.lookup("Z", "A") is None


def test_outgoing_edges_lists_every_edge_once(reference_graph):
    edges = reference_graph.outgoing_edges("A")

    assert sorted(edges) == [("B", 5), ("D", 5), ("E", 7)]


def test_outgoing_edges_of_dead_end_is_empty():
    graph = GraphModel.from_edges([("A", "B", 1)])

    assert graph.outgoing_edges("B") == ()
    assert "B" not in graph
    assert len(graph) == 1


def test_duplicate_edge_last_write_wins():
    graph = parse_graph("AB5, AB7")

    assert graph.lookup("A", "B") == 7
    assert graph.edge_count == 1


def test_self_loop_is_allowed():
    graph = GraphModel.from_edges([("A", "A", 2)])

    assert graph.lookup("A", "A") == 2


def test_distance_given_as_digit_string():
    graph = GraphModel.from_edges([("A", "B", "12")])

    assert graph.lookup("A", "B") == 12


def test_stations_are_opaque_tokens():
    graph = GraphModel.from_edges(
        [("Paris", "Lyon", 4), ("Lyon", "Marseille", 3), (1, 2, 9)]
    )

    assert graph.lookup("Paris", "Lyon") == 4
    assert graph.outgoing_edges("Lyon") == (("Marseille", 3),)
    assert graph.lookup(1, 2) == 9


def test_edges_round_out_the_adjacency():
    edges = [Edge("A", "B", 1), Edge("B", "C", 2)]
    graph = GraphModel.from_edges(edges)

    assert sorted(graph.edges(), key=lambda e: e.origin) == edges


def test_graph_is_not_affected_by_later_changes_to_its_source():
    adjacency = {"A": {"B": 1}}
    graph = GraphModel(adjacency)

    adjacency["A"]["C"] = 2
    adjacency["C"] = {"A": 3}

    assert graph.lookup("A", "C") is None
    assert "C" not in graph


def test_adjacency_views_are_read_only():
    graph = GraphModel({"A": {"B": 1}})

    with pytest.raises(TypeError):
        graph._adjacency["A"]["C"] = 2


@pytest.mark.parametrize(
    "edge",
    [
        ("A", "B", "x"),
        ("A", "B", "-1"),
        ("A", "B", -1),
        ("A", "B", 1.5),
        ("A", "B", True),
        ("", "B", 1),
        ("A", None, 1),
        ("A", "B"),
    ],
)
def test_malformed_edges_are_rejected(edge):
    with pytest.raises(MalformedEdgeError):
        GraphModel.from_edges([edge])


def test_malformed_edge_keeps_the_offending_tokens():
    with pytest.raises(MalformedEdgeError) as excinfo:
        GraphModel.from_edges([("A", "B", "far")])

    assert excinfo.value.origin == "A"
    assert excinfo.value.destination == "B"
    assert excinfo.value.distance == "far"


def test_parse_edges_ignores_separators():
    edges = parse_edges("AB5, BC4\nCD8;;  DE12")

    assert edges == [
        Edge("A", "B", 5),
        Edge("B", "C", 4),
        Edge("C", "D", 8),
        Edge("D", "E", 12),
    ]


def test_parse_edges_scans_without_delimiters():
    assert parse_edges("AB5BC4") == [Edge("A", "B", 5), Edge("B", "C", 4)]


def test_parse_edges_without_matches_is_empty():
    assert parse_edges("A B5, hello") == []
    assert len(parse_graph("")) == 0


def test_parse_edges_with_custom_pattern():
    edges = parse_edges("PAR-LYO-4, LYO-MRS-3", r"([A-Z]+)-([A-Z]+)-(\d+)")

    assert edges == [Edge("PAR", "LYO", 4), Edge("LYO", "MRS", 3)]


def test_parse_edges_rejects_pattern_with_wrong_group_count():
    with pytest.raises(ConfigurationError) as excinfo:
        parse_edges("AB5", r"([A-Z])([A-Z])\d+")

    assert excinfo.value.setting_name == "edge_pattern"


def test_parse_edges_rejects_invalid_regex():
    with pytest.raises(ConfigurationError):
        parse_edges("AB5", "(")


def test_parse_edges_rejects_non_numeric_distance_from_custom_pattern():
    with pytest.raises(MalformedEdgeError):
        parse_edges("ABx", r"(\w)(\w)(\w+)")
