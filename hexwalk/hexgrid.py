"""HexGrid - terrain-bearing hexagonal grid with axial coordinates."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from hexwalk.types import Coord

# Neighbor scan order. Ring walking uses _RING_DIRS instead.
_HEX_DIRS = [(1, 0), (-1, 0), (0, 1), (0, -1), (1, -1), (-1, 1)]
_RING_DIRS = [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]


def hex_distance(a: Coord, b: Coord) -> int:
    dq = a[0] - b[0]
    dr = a[1] - b[1]
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


@dataclass
class TerrainCell:
    """A single hex. Only ``highlighted`` is ever mutated by movement code."""

    terrain: str
    point_of_interest: str | None = None
    highlighted: bool = False


class HexGrid:
    """Axial hex grid covering ``0 <= q < width`` and ``0 <= r < height``.

    Every in-bounds coordinate holds a TerrainCell. Out-of-bounds lookups
    return None rather than raising; mutation out of bounds raises ValueError.
    """

    def __init__(self, width: int, height: int, default_terrain: str = "plains") -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells: dict[Coord, TerrainCell] = {
            (q, r): TerrainCell(default_terrain)
            for q in range(width)
            for r in range(height)
        }
        self._highlight_owner: str | None = None

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[str]]) -> HexGrid:
        """Build a grid from rows of terrain names, ``rows[r][q]``."""
        if not rows or not rows[0]:
            raise ValueError("rows must be non-empty")
        width = len(rows[0])
        for r, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"row {r} has {len(row)} cells, expected {width}")
        grid = cls(width, len(rows))
        for r, row in enumerate(rows):
            for q, terrain in enumerate(row):
                grid._cells[(q, r)].terrain = terrain
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    @property
    def center(self) -> Coord:
        return (self._width // 2, self._height // 2)

    def _check_bounds(self, coord: Coord) -> None:
        if coord not in self._cells:
            raise ValueError(
                f"{coord} out of bounds for {self._width}x{self._height} hex grid"
            )

    def in_bounds(self, coord: Coord) -> bool:
        return coord in self._cells

    # --- Cells ---

    def get_cell(self, coord: Coord) -> TerrainCell | None:
        return self._cells.get(coord)

    def terrain_at(self, coord: Coord) -> str | None:
        cell = self._cells.get(coord)
        return cell.terrain if cell is not None else None

    def set_terrain(self, coord: Coord, terrain: str) -> None:
        self._check_bounds(coord)
        self._cells[coord].terrain = terrain

    def set_point_of_interest(self, coord: Coord, kind: str | None) -> None:
        self._check_bounds(coord)
        self._cells[coord].point_of_interest = kind

    def fill(self, coords: Iterable[Coord], terrain: str) -> None:
        for coord in coords:
            self.set_terrain(coord, terrain)

    def coords(self) -> list[Coord]:
        return list(self._cells)

    def cells(self) -> Iterator[tuple[Coord, TerrainCell]]:
        return iter(self._cells.items())

    def points_of_interest(self, kind: str) -> list[Coord]:
        return [c for c, cell in self._cells.items() if cell.point_of_interest == kind]

    # --- Topology ---

    def neighbors(self, coord: Coord) -> list[Coord]:
        q, r = coord
        result: list[Coord] = []
        for dq, dr in _HEX_DIRS:
            n = (q + dq, r + dr)
            if n in self._cells:
                result.append(n)
        return result

    def ring(self, center: Coord, radius: int) -> list[Coord]:
        """In-bounds hexes at exactly ``radius`` steps from ``center``."""
        if radius < 0:
            raise ValueError(f"radius must be >= 0, got {radius}")
        if radius == 0:
            return [center] if center in self._cells else []
        dq, dr = _RING_DIRS[4]
        q, r = center[0] + dq * radius, center[1] + dr * radius
        result: list[Coord] = []
        for side_q, side_r in _RING_DIRS:
            for _ in range(radius):
                if (q, r) in self._cells:
                    result.append((q, r))
                q, r = q + side_q, r + side_r
        return result

    def distance(self, a: Coord, b: Coord) -> int:
        return hex_distance(a, b)

    def heuristic(self, a: Coord, b: Coord) -> float:
        return float(hex_distance(a, b))

    # --- Highlight ---

    @property
    def highlight_owner(self) -> str | None:
        return self._highlight_owner

    def highlight(self, coords: Iterable[Coord], owner: str) -> None:
        """Highlight ``coords`` on behalf of ``owner``, replacing any prior highlight."""
        self.clear_highlight()
        for coord in coords:
            cell = self._cells.get(coord)
            if cell is not None:
                cell.highlighted = True
        self._highlight_owner = owner

    def clear_highlight(self) -> None:
        for cell in self._cells.values():
            cell.highlighted = False
        self._highlight_owner = None

    def highlighted(self) -> list[Coord]:
        return [c for c, cell in self._cells.items() if cell.highlighted]
