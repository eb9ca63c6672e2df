"""Tests for the breadth-first traversal."""

import json
from pathlib import Path

import pytest

from mazegraph.models.errors import TraversalError
from mazegraph.models.grid import Cell, Position
from mazegraph.models.maze_graph import MazeGraph, build_graph
from mazegraph.models.traversal import breadth_first_search

from conftest import BRANCHING_MAZE, INNER_LOOP_MAZE, SAMPLE_MAZE, classified


def reachable_from(graph: MazeGraph, start: Position) -> set[Position]:
    stack = [start]
    seen: set[Position] = set()
    while stack:
        node = stack.pop()
        if node in seen:
            continue
        seen.add(node)
        stack.extend(graph.neighbors(node))
    return seen


class TestSampleTraversal:
    """BFS over SAMPLE_MAZE from its entrance."""

    def test_defaults_to_first_terminal(self, sample_grid) -> None:
        result = breadth_first_search(build_graph(sample_grid))
        assert result.start == (1, 0)

    def test_visit_order(self, sample_grid) -> None:
        result = breadth_first_search(build_graph(sample_grid))
        assert result.order == [(1, 0), (1, 1), (5, 1), (1, 3), (5, 4), (3, 3)]

    def test_depths(self, sample_grid) -> None:
        result = breadth_first_search(build_graph(sample_grid))
        assert result.depths == {
            (1, 0): 0,
            (1, 1): 1,
            (5, 1): 2,
            (1, 3): 2,
            (5, 4): 3,
            (3, 3): 3,
        }
        assert result.max_depth == 3

    def test_complete(self, sample_grid) -> None:
        result = breadth_first_search(build_graph(sample_grid))
        assert result.is_complete
        assert result.unvisited_count == 0
        assert result.visited_count == 6

    def test_explicit_start(self, sample_grid) -> None:
        result = breadth_first_search(build_graph(sample_grid), start=(5, 4))
        assert result.order[0] == (5, 4)
        assert result.depths[(1, 0)] == 3

    def test_graph_is_reusable(self, sample_grid) -> None:
        graph = build_graph(sample_grid)
        first = breadth_first_search(graph)
        second = breadth_first_search(graph)
        assert first.order == second.order


class TestScenarios:
    """Two-node corridor and unreachable nodes."""

    @pytest.mark.parametrize("start", [(0, 0), (4, 0)])
    def test_two_dead_ends_visit_both(self, start: Position) -> None:
        graph = build_graph(classified(["....."]))
        result = breadth_first_search(graph, start=start)
        assert result.visited == {(0, 0), (4, 0)}
        assert result.visited_count == 2

    def test_disconnected_node_stays_unvisited(self) -> None:
        grid = classified(["#####", "#.#..", "#####"])
        grid.set_cell(1, 1, Cell.NODE)
        graph = build_graph(grid)
        result = breadth_first_search(graph, start=(4, 1))
        assert result.visited == {(3, 1), (4, 1)}
        assert result.unvisited == {(1, 1)}
        assert not result.is_complete

    def test_start_on_isolated_node(self) -> None:
        grid = classified(["#####", "#.#..", "#####"])
        grid.set_cell(1, 1, Cell.NODE)
        result = breadth_first_search(build_graph(grid), start=(1, 1))
        assert result.order == [(1, 1)]
        assert result.unvisited == {(3, 1), (4, 1)}

    def test_unknown_start(self, sample_grid) -> None:
        with pytest.raises(TraversalError, match="not a node"):
            breadth_first_search(build_graph(sample_grid), start=(0, 0))

    def test_no_terminal_to_start_from(self) -> None:
        graph = build_graph(classified(INNER_LOOP_MAZE))
        with pytest.raises(TraversalError, match="no terminal"):
            breadth_first_search(graph)

    def test_inner_loop_with_explicit_start(self) -> None:
        graph = build_graph(classified(INNER_LOOP_MAZE))
        result = breadth_first_search(graph, start=(1, 1))
        assert result.visited_count == 4
        assert result.depths[(3, 3)] == 2


class TestProperties:
    """Completeness and breadth-first ordering on every fixture maze."""

    @pytest.mark.parametrize("rows", [SAMPLE_MAZE, BRANCHING_MAZE])
    def test_visited_iff_reachable(self, rows: list[str]) -> None:
        graph = build_graph(classified(rows))
        for start in graph.nodes:
            result = breadth_first_search(graph, start=start)
            expected = reachable_from(graph, start)
            assert result.visited == expected
            assert result.unvisited == set(graph.nodes) - expected

    @pytest.mark.parametrize("rows", [SAMPLE_MAZE, BRANCHING_MAZE])
    def test_each_node_visited_once(self, rows: list[str]) -> None:
        graph = build_graph(classified(rows))
        result = breadth_first_search(graph)
        assert len(result.order) == len(set(result.order))

    @pytest.mark.parametrize("rows", [SAMPLE_MAZE, BRANCHING_MAZE])
    def test_depth_never_decreases(self, rows: list[str]) -> None:
        graph = build_graph(classified(rows))
        result = breadth_first_search(graph)
        depths = [result.depths[pos] for pos in result.order]
        assert depths == sorted(depths)

    @pytest.mark.parametrize("rows", [SAMPLE_MAZE, BRANCHING_MAZE])
    def test_neighbour_depths_differ_by_at_most_one(self, rows: list[str]) -> None:
        graph = build_graph(classified(rows))
        result = breadth_first_search(graph)
        for position in result.order:
            for other in graph.neighbors(position):
                assert abs(result.depths[position] - result.depths[other]) <= 1

    def test_payload(self, sample_grid) -> None:
        payload = breadth_first_search(build_graph(sample_grid)).to_payload()
        assert payload["start"] == [1, 0]
        assert payload["order"][1] == [1, 1]
        assert [5, 4, 3] in payload["depths"]
        assert payload["unvisited"] == []

    def test_save_writes_payload(self, sample_grid, tmp_path: Path) -> None:
        result = breadth_first_search(build_graph(sample_grid))
        target = tmp_path / "nested" / "traversal_sample.json"
        assert result.save(target) == target
        assert json.loads(target.read_text()) == result.to_payload()
