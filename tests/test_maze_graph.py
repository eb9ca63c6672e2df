"""Tests for graph construction: left/up joins, symmetry, terminals."""

import json
from pathlib import Path

import pytest

from mazegraph.models.errors import GraphInvariantError
from mazegraph.models.grid import Cell, Grid
from mazegraph.models.maze_graph import MazeGraph, build_graph

from conftest import BRANCHING_MAZE, INNER_LOOP_MAZE, SAMPLE_MAZE, classified


class ReversedScanGrid(Grid):
    """Grid that yields positions bottom-right first, breaking join order."""

    def positions(self):
        return reversed(list(super().positions()))


class TestSampleGraph:
    """Exact graph of SAMPLE_MAZE (see conftest)."""

    def test_nodes_in_row_major_order(self, sample_grid: Grid) -> None:
        graph = build_graph(sample_grid)
        assert list(graph.nodes) == [(1, 0), (1, 1), (5, 1), (1, 3), (3, 3), (5, 4)]

    def test_relations(self, sample_grid: Grid) -> None:
        graph = build_graph(sample_grid)
        assert graph.neighbors((1, 0)) == [(1, 1)]
        assert graph.neighbors((1, 1)) == [(1, 0), (5, 1), (1, 3)]
        assert graph.neighbors((5, 1)) == [(1, 1), (5, 4)]
        assert graph.neighbors((1, 3)) == [(1, 1), (3, 3)]
        assert graph.neighbors((3, 3)) == [(1, 3)]
        assert graph.neighbors((5, 4)) == [(5, 1)]

    def test_edge_count(self, sample_grid: Grid) -> None:
        graph = build_graph(sample_grid)
        assert graph.edge_count == 5
        assert len(list(graph.edges())) == 5

    def test_terminals(self, sample_grid: Grid) -> None:
        graph = build_graph(sample_grid)
        assert graph.terminal_nodes == [(1, 0), (5, 4)]

    def test_records_dimensions(self, sample_grid: Grid) -> None:
        graph = build_graph(sample_grid)
        assert (graph.width, graph.height) == (7, 5)


class TestScenarios:
    """Corridor and isolation cases."""

    def test_two_dead_ends_share_one_edge(self) -> None:
        graph = build_graph(classified(["....."]))
        assert list(graph.nodes) == [(0, 0), (4, 0)]
        assert graph.neighbors((0, 0)) == [(4, 0)]
        assert graph.neighbors((4, 0)) == [(0, 0)]
        assert graph.edge_count == 1

    def test_nearest_node_wins(self) -> None:
        # Three nodes on one row: the rightmost only links to the middle one.
        grid = classified(["#.#.#", "....."])
        graph = build_graph(grid)
        assert (2, 1) not in graph
        assert graph.neighbors((3, 1)) == [(1, 1), (3, 0), (4, 1)]
        assert graph.neighbors((4, 1)) == [(3, 1)]
        assert (0, 1) not in graph.neighbors((4, 1))

    def test_wall_blocks_join(self) -> None:
        grid = classified(["..#.."])
        graph = build_graph(grid)
        assert graph.edge_count == 2
        assert graph.neighbors((1, 0)) == [(0, 0)]
        assert graph.neighbors((3, 0)) == [(4, 0)]
        assert graph.neighbors((4, 0)) == [(3, 0)]

    def test_isolated_node_has_no_relations(self) -> None:
        grid = classified(["#####", "#.#..", "#####"])
        grid.set_cell(1, 1, Cell.NODE)
        graph = build_graph(grid)
        assert (1, 1) in graph
        assert graph.node((1, 1)).relations == []

    def test_empty_grid_gives_empty_graph(self) -> None:
        graph = build_graph(classified(["###", "###"]))
        assert len(graph) == 0
        assert graph.terminal_nodes == []

    def test_inner_loop_has_no_terminals(self) -> None:
        graph = build_graph(classified(INNER_LOOP_MAZE))
        assert list(graph.nodes) == [(1, 1), (3, 1), (1, 3), (3, 3)]
        assert graph.terminal_nodes == []
        assert graph.edge_count == 4


class TestInvariants:
    """Properties that must hold for any classified grid."""

    @pytest.mark.parametrize("rows", [SAMPLE_MAZE, INNER_LOOP_MAZE, BRANCHING_MAZE])
    def test_edges_are_symmetric(self, rows: list[str]) -> None:
        graph = build_graph(classified(rows))
        for position, node in graph.nodes.items():
            for other in node.relations:
                assert position in graph.node(other).relations

    @pytest.mark.parametrize("rows", [SAMPLE_MAZE, INNER_LOOP_MAZE, BRANCHING_MAZE])
    def test_terminals_are_exactly_border_nodes(self, rows: list[str]) -> None:
        grid = classified(rows)
        graph = build_graph(grid)
        border = [pos for pos in graph.nodes if grid.is_border(*pos)]
        assert graph.terminal_nodes == border

    @pytest.mark.parametrize("rows", [SAMPLE_MAZE, BRANCHING_MAZE])
    def test_one_graph_node_per_node_cell(self, rows: list[str]) -> None:
        grid = classified(rows)
        graph = build_graph(grid)
        assert list(graph.nodes) == grid.positions_of(Cell.NODE)

    def test_join_to_missing_node_is_fatal(self) -> None:
        base = classified(["....."])
        grid = ReversedScanGrid(width=base.width, height=base.height, cells=list(base.cells))
        with pytest.raises(GraphInvariantError, match=r"\(0, 0\)"):
            build_graph(grid)


class TestSerialization:
    """JSON payload for downstream tools."""

    def test_payload_shape(self, sample_grid: Grid) -> None:
        payload = build_graph(sample_grid).to_payload()
        assert payload["width"] == 7
        assert payload["height"] == 5
        assert len(payload["nodes"]) == 6
        assert payload["nodes"][0] == {"x": 1, "y": 0, "relations": [[1, 1]]}
        assert [[1, 0], [1, 1]] in payload["edges"]
        assert payload["terminal_nodes"] == [[1, 0], [5, 4]]

    def test_save_writes_json(self, sample_grid: Grid, tmp_path: Path) -> None:
        destination = build_graph(sample_grid).save(tmp_path / "nested" / "graph.json")
        data = json.loads(destination.read_text())
        assert len(data["edges"]) == 5

    def test_unknown_node_lookup(self) -> None:
        graph = MazeGraph(width=1, height=1)
        with pytest.raises(KeyError):
            graph.node((0, 0))
