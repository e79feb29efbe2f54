"""Tests for post-generation validation."""

from procgen.grid import Grid
from procgen.rooms import Room
from procgen.validation import count_components, validate_map


class TestValidateMap:
    """Tests for validate_map."""

    def test_valid_rooms_pass(self) -> None:
        """Separated rooms inside the grid pass."""
        grid = Grid(20, 10)
        rooms = [Room(0, 0, 4, 4), Room(6, 0, 4, 4)]
        result = validate_map(grid, rooms)
        assert result.passed
        assert result.errors == []

    def test_overlap_is_error(self) -> None:
        """Touching rooms fail validation."""
        grid = Grid(20, 10)
        result = validate_map(grid, [Room(0, 0, 4, 4), Room(4, 0, 4, 4)])
        assert not result.passed
        assert len(result.errors) == 1

    def test_outside_grid_is_error(self) -> None:
        """Rooms past the edge fail validation."""
        grid = Grid(10, 10)
        result = validate_map(grid, [Room(8, 8, 4, 4)])
        assert not result.passed

    def test_overwritten_room_warns(self) -> None:
        """Rooms partly overwritten by later layers produce a warning."""
        grid = Grid(10, 10)
        room = Room(1, 1, 3, 3)
        grid.fill_rect(1, 1, 3, 3, 2)
        grid.set(2, 2, 9)
        result = validate_map(grid, [room], {room: 2})
        assert result.passed
        assert len(result.warnings) == 1
        assert "1 overwritten" in result.warnings[0]


class TestCountComponents:
    """Tests for connected component counting."""

    def test_four_connectivity(self) -> None:
        """Diagonal neighbours are separate components."""
        grid = Grid(4, 4)
        grid.set(0, 0, 1)
        grid.set(1, 1, 1)
        assert count_components(grid, 1) == 2
        grid.set(1, 0, 1)
        assert count_components(grid, 1) == 1

    def test_absent_tile(self) -> None:
        """Missing tiles have no components."""
        assert count_components(Grid(3, 3), 5) == 0
