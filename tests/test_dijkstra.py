import math

from roadnav.domain.models import Node
from roadnav.graph.dijkstra import shortest_path
from roadnav.graph.store import Graph


def graph_with(edges, nodes=None):
    """Graph with nodes at the origin and the given (u, v, weight, directed) edges."""
    graph = Graph()
    ids = set(nodes or [])
    for u, v, _, _ in edges:
        ids.update((u, v))
    for node_id in sorted(ids):
        graph.add_node(Node(node_id, 0.0, 0.0))
    for u, v, weight, directed in edges:
        graph.add_edge(u, v, weight, directed)
    return graph


def test_dijkstra_finds_direct_edge():
    graph = graph_with([(0, 1, 10.0, True)])

    result = shortest_path(graph, 0, 1)

    assert result.path == (0, 1)
    assert result.cost == 10.0


def test_dijkstra_chooses_shortest_path():
    # 0 can reach 2 directly, but 0->1->2 is shorter
    graph = graph_with([(0, 1, 3.0, True), (0, 2, 10.0, True), (1, 2, 4.0, True)])

    result = shortest_path(graph, 0, 2)

    assert result.path == (0, 1, 2)
    assert result.cost == 7.0


def test_dijkstra_no_path_returns_inf():
    graph = graph_with([], nodes=[0, 1])

    result = shortest_path(graph, 0, 1)

    assert result.path == ()
    assert result.is_empty
    assert math.isinf(result.cost)


def test_dijkstra_invalid_nodes():
    graph = graph_with([(0, 1, 1.0, False)])

    for start, end in [(0, 7), (7, 0)]:
        result = shortest_path(graph, start, end)
        assert result.path == ()
        assert result.cost == float("inf")
        assert result.nodes_explored == 0


def test_same_start_and_end():
    graph = graph_with([(0, 1, 2.0, False)])

    result = shortest_path(graph, 1, 1)

    assert result.path == (1,)
    assert result.cost == 0
    assert result.nodes_explored >= 1


def test_directed_edges_are_not_walked_backwards():
    graph = graph_with([(0, 1, 1.0, True), (1, 2, 1.0, True)])

    assert shortest_path(graph, 0, 2).path == (0, 1, 2)
    assert shortest_path(graph, 2, 0).is_empty


def test_undirected_edges_work_both_ways():
    graph = graph_with([(0, 1, 1.5, False), (1, 2, 2.5, False)])

    result = shortest_path(graph, 2, 0)

    assert result.path == (2, 1, 0)
    assert result.cost == 4.0


def test_stale_queue_entries_are_skipped():
    # 3 is pushed first with cost 10, then improved to 3 via 1 and 2
    graph = graph_with(
        [
            (0, 3, 10.0, True),
            (0, 1, 1.0, True),
            (1, 2, 1.0, True),
            (2, 3, 1.0, True),
            (3, 4, 1.0, True),
        ]
    )

    result = shortest_path(graph, 0, 4)

    assert result.path == (0, 1, 2, 3, 4)
    assert result.cost == 4.0
    assert result.nodes_explored == 5


def test_search_stops_once_target_is_settled():
    graph = graph_with([(0, 1, 1.0, False), (1, 2, 1.0, False), (2, 3, 1.0, False)])

    result = shortest_path(graph, 0, 1)

    assert result.path == (0, 1)
    assert result.nodes_explored == 2
    assert result.elapsed_ms >= 0


def test_unreachable_target_explores_component():
    graph = graph_with([(0, 1, 1.0, False), (2, 3, 1.0, False)])

    result = shortest_path(graph, 0, 3)

    assert result.is_empty
    assert result.nodes_explored == 2
