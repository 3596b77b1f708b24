from algorithms import get_algorithm, is_blocked
from algorithms.graph_edit import graph_add_node, graph_link_last_two
from engine import RunState, start
from structures import Graph


def test_add_node_uses_the_node_count_as_id():
    graph = Graph()
    ids = [list(graph_add_node(graph))[0].result for _ in range(3)]

    assert ids == [0, 1, 2]
    assert graph.nodes == [0, 1, 2]


def test_link_connects_the_two_newest_nodes():
    graph = Graph.from_edges([0, 1, 2], [])
    snaps = list(graph_link_last_two(graph))

    assert len(snaps) == 1
    assert snaps[0].is_final
    assert snaps[0].result == (1, 2)
    assert graph.neighbours(2) == [1]
    assert snaps[0].state == ((0, 1, 2), ((1, 2),))


def test_link_with_fewer_than_two_nodes_does_nothing():
    graph = Graph.from_edges([0], [])
    assert list(graph_link_last_two(graph)) == []
    assert is_blocked(get_algorithm("graph_link_last_two"), graph)
    assert not is_blocked(get_algorithm("graph_add_node"), Graph())


def test_building_a_graph_then_traversing_it():
    graph = Graph()
    for _ in range(3):
        start("graph_add_node", graph, delay_ms=0, background=False)
        start("graph_link_last_two", graph, delay_ms=0, background=False)

    handle = start("bfs", graph, delay_ms=0, target=0, background=False)
    assert handle.state is RunState.COMPLETED
    assert graph.edges == [(0, 1), (1, 2)]
    assert handle.wait().value == (0, 1, 2)
