"""Square tiles with four oriented edges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from edge_match.core.edges import EdgeLabel


class Direction(Enum):
    """The four sides of a tile in clockwise order."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def opposite(self) -> Direction:
        """Return the side facing this one on a neighbouring tile."""
        return Direction((self.value + 2) % 4)


@dataclass
class Tile:
    """A square tile carrying one edge label per side.

    The edge content of a tile never changes, only its orientation does.
    ``rotate`` turns the tile a quarter turn clockwise in place, so four
    calls bring it back to where it started.

    Attributes:
        north: Edge label on the top side.
        east: Edge label on the right side.
        south: Edge label on the bottom side.
        west: Edge label on the left side.
    """

    north: EdgeLabel
    east: EdgeLabel
    south: EdgeLabel
    west: EdgeLabel

    def rotate(self) -> None:
        """Turn the tile 90 degrees clockwise in place.

        The west edge moves to the north, north to east, east to south and
        south to west.
        """
        self.north, self.east, self.south, self.west = (
            self.west,
            self.north,
            self.east,
            self.south,
        )

    def edge(self, direction: Direction) -> EdgeLabel:
        """Return the edge label currently facing *direction*.

        Args:
            direction: The side to inspect.

        Returns:
            The EdgeLabel on that side.
        """
        return self.edges()[direction.value]

    def edges(self) -> tuple[EdgeLabel, EdgeLabel, EdgeLabel, EdgeLabel]:
        """Return the four edges in north, east, south, west order."""
        return (self.north, self.east, self.south, self.west)

    def copy(self) -> Tile:
        """Return an independent tile with the same orientation."""
        return Tile(self.north, self.east, self.south, self.west)

    def __str__(self) -> str:
        return "[" + " ".join(str(e) for e in self.edges()) + "]"

    def __repr__(self) -> str:
        return (
            f"Tile(N={self.north}, E={self.east}, "
            f"S={self.south}, W={self.west})"
        )
