import builtins
import itertools

import pytest

from dsakit.prim import NO_LINK, BranchNetwork, Connection, main


def example_network():
    network = BranchNetwork(3)
    network.connect(2, 1, 12)
    return network


def test_source_example_render():
    expected = "\nAdjacency matrix:\n999   12   999   \n\n12   999   999   \n\n999   999   999   \n"
    assert example_network().render() == expected


def test_source_example_minimum():
    chosen = example_network().minimum_spanning_tree()
    assert chosen == [Connection(1, 2, 12), Connection(1, 2, 999)]
    assert sum(line.charge for line in chosen) == 1011


def test_connect_is_symmetric():
    network = BranchNetwork(4)
    network.connect(3, 4, 7)
    rows = network.render().split("\n\n")
    assert "7" in rows[2].split() or "7" in rows[3].split()
    text = network.render()
    assert text.count(" 7 ") + text.count("\n7 ") == 2


def triangle_network():
    network = BranchNetwork(3)
    network.connect(1, 2, 1)
    network.connect(1, 3, 2)
    network.connect(2, 3, 3)
    return network


def test_tree_avoids_heaviest_triangle_edge():
    chosen = triangle_network().minimum_spanning_tree()
    pairs = {frozenset((line.first, line.second)) for line in chosen}
    assert frozenset((2, 3)) not in pairs
    assert len(chosen) == 2


def test_connected_graph_spans_every_branch_with_real_lines():
    network = BranchNetwork(5)
    edges = {(1, 2): 4, (2, 3): 8, (3, 4): 7, (4, 5): 9, (1, 5): 10, (2, 4): 2, (3, 5): 5}
    for (a, b), charge in edges.items():
        network.connect(a, b, charge)
    chosen = network.minimum_spanning_tree()
    assert len(chosen) == 4
    touched = set(itertools.chain.from_iterable((c.first, c.second) for c in chosen))
    assert touched == {1, 2, 3, 4, 5}
    for line in chosen:
        key = (min(line.first, line.second), max(line.first, line.second))
        assert edges[key] == line.charge < NO_LINK
    chain_total = edges[(1, 2)] + edges[(2, 3)] + edges[(3, 4)] + edges[(4, 5)]
    assert sum(line.charge for line in chosen) <= chain_total


def test_single_branch_needs_no_lines():
    assert BranchNetwork(1).minimum_spanning_tree() == []


@pytest.mark.parametrize("branches", [-1, 21])
def test_branch_count_limits(branches):
    with pytest.raises(ValueError):
        BranchNetwork(branches)


@pytest.mark.parametrize("pair", [(0, 1), (1, 4)])
def test_connect_out_of_range(pair):
    with pytest.raises(ValueError):
        BranchNetwork(3).connect(*pair, 5)


def test_main_source_session(monkeypatch, capsys):
    answers = iter(["1", "3", "1", "2 1", "12", "3", "4"])
    monkeypatch.setattr(builtins, "input", lambda prompt="": next(answers))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Minimum cost connection is 1 -> 2  with charge : 12" in out
    assert "The minimum total cost of connections of all branches is: 1011" in out