"""
Test suite for text map parsing and rendering.

Tests cover:
- Symbol parsing and orientation (x = column, y = row)
- Spaces as absent cells
- Blank line trimming
- Unrecognized symbols
- Rendering terrain and solved routes
- Routing on a parsed map
"""

import pytest

from tick_terrain import (
    GridConfig,
    MapParseError,
    TerrainKind,
    UnknownSymbolError,
    parse_world,
    render,
    route,
)

VALLEY = """
.....
.XXX.
.~M~.
"""


class TestParseWorld:
    """Test building a GridWorld from text."""

    def test_parses_every_symbol(self):
        world = parse_world(VALLEY)
        assert len(world) == 15
        assert world.cell_at(0, 0).kind is TerrainKind.PLAIN
        assert world.cell_at(1, 1).kind is TerrainKind.BLOCKER
        assert world.cell_at(1, 2).kind is TerrainKind.RIVER
        assert world.cell_at(2, 2).kind is TerrainKind.MOUNTAIN

    def test_column_is_x_row_is_y(self):
        world = parse_world("..\nM.")
        assert world.cell_at(0, 1).kind is TerrainKind.MOUNTAIN
        assert world.cell_at(1, 0).kind is TerrainKind.PLAIN

    def test_spaces_are_absent(self):
        world = parse_world(". .")
        assert world.cell_at(1, 0) is None
        assert len(world) == 2

    def test_ragged_rows(self):
        world = parse_world("...\n.")
        assert len(world) == 4
        assert world.cell_at(1, 1) is None

    def test_blank_edges_trimmed(self):
        world = parse_world("\n\n.\n\n")
        assert world.coords() == [(0, 0)]

    def test_config_passed_through(self):
        config = GridConfig(allow_diagonal=False)
        assert parse_world(".", config).config is config

    def test_unknown_symbol(self):
        with pytest.raises(MapParseError) as exc_info:
            parse_world("..\n.#")
        err = exc_info.value
        assert err.symbol == "#"
        assert (err.x, err.y) == (1, 1)

    def test_path_marker_rejected(self):
        with pytest.raises(UnknownSymbolError):
            parse_world(".●.")


class TestRender:
    """Test drawing a GridWorld as text."""

    def test_render_terrain(self):
        world = parse_world(VALLEY)
        assert render(world) == VALLEY.strip()

    def test_render_empty(self):
        assert render(parse_world("")) == ""

    def test_render_absent_as_space(self):
        world = parse_world(". .\n...")
        assert render(world) == ". .\n..."

    def test_render_route(self):
        world = parse_world(VALLEY)
        result = route(world, 0, 1, 4, 1)
        assert result.found
        drawn = render(world, result.path)
        assert drawn.splitlines()[1] == "●XXX●"
        assert drawn.count("●") == len(result.path)

    def test_render_route_beyond_stored_cells(self):
        world = parse_world(" ..")
        result = route(world, 0, 0, 2, 0)
        assert result.found
        assert render(world) == ".."
        assert render(world, result.path) == "●●●"

    def test_render_does_not_modify_world(self):
        world = parse_world(VALLEY)
        before = world.snapshot()
        render(world, route(world, 0, 0, 4, 0).path)
        assert world.snapshot() == before


class TestParsedRouting:
    """Route over maps built from text."""

    def test_route_detours_around_rough_row(self):
        world = parse_world(VALLEY)
        result = route(world, 0, 2, 4, 2)
        assert result.found
        assert all(c.kind is TerrainKind.PLAIN for c in result.path)
        assert result.cost == pytest.approx(2 * 1.414 + 4.0)

    def test_walled_off(self):
        world = parse_world(".X.\nXX.\n...")
        assert not route(world, 0, 0, 2, 2).found
