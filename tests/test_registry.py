# tests/test_registry.py
import pytest

from algoviz.core.errors import ConfigError
from algoviz.core.pseudocode import PSEUDOCODE, lines_for
from algoviz.core.registry import (
    ALGORITHM_DISPATCH_TABLE,
    PATHFINDING_ALGORITHMS,
    SORTING_ALGORITHMS,
    Algorithm,
    make_engine,
    parse_algorithm,
)
from algoviz.core.search_base import SearchAlgo
from algoviz.core.sort_base import SortAlgo


def test_every_algorithm_dispatches():
    assert set(ALGORITHM_DISPATCH_TABLE) == set(Algorithm)
    assert set(SORTING_ALGORITHMS) | set(PATHFINDING_ALGORITHMS) == set(Algorithm)
    for algo in Algorithm:
        engine = make_engine(algo)
        assert engine.name == algo.value
        assert isinstance(engine, SortAlgo) == algo.is_sort
        assert isinstance(engine, SearchAlgo) != algo.is_sort


def test_make_engine_returns_fresh_instances():
    assert make_engine(Algorithm.BFS) is not make_engine(Algorithm.BFS)


def test_only_cost_aware_searches_are_weighted():
    assert {a for a in Algorithm if a.is_weighted} == {Algorithm.ASTAR, Algorithm.DIJKSTRA}


@pytest.mark.parametrize("raw, expected", [
    ("Bubble Sort", Algorithm.BUBBLE),
    ("selection", Algorithm.SELECTION),
    ("insertion-sort", Algorithm.INSERTION),
    ("merge_sort", Algorithm.MERGE),
    ("QUICK", Algorithm.QUICK),
    ("bfs", Algorithm.BFS),
    ("DFS", Algorithm.DFS),
    ("A*", Algorithm.ASTAR),
    ("a* search", Algorithm.ASTAR),
    ("astar", Algorithm.ASTAR),
    (" Dijkstra ", Algorithm.DIJKSTRA),
    (Algorithm.QUICK, Algorithm.QUICK),
])
def test_parse_algorithm(raw, expected):
    assert parse_algorithm(raw) is expected


@pytest.mark.parametrize("raw", ["", "heap", "sort bubble"])
def test_parse_algorithm_rejects(raw):
    with pytest.raises(ConfigError):
        parse_algorithm(raw)


def test_pseudocode_for_every_algorithm():
    assert set(PSEUDOCODE) == {a.value for a in Algorithm}
    for algo in Algorithm:
        assert lines_for(algo.value)
    assert lines_for("nope") == []
