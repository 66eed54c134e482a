"""Hexagonal coordinates and the arithmetic movement rules are built on.

The board is a hexagon of side 6 (91 tiles). A tile is addressed by a pair
``(x, y)`` in a non-orthogonal basis where the three neighbour axes are
``(1, 0)``, ``(0, 1)`` and ``(1, 1)``::

    valid  <=>  0 <= x <= MAX  and  0 <= y <= MAX  and  |x - y| <= WIDTH

White starts around ``(0, 0)`` and black around ``(MAX, MAX)``. Derived
per-tile quantities:

    rank        = x + y              (0..20, the analogue of a row)
    file        = 5 + y - x          (0..10, the analogue of a column)
    tile_color  = (x + y) % 3        (neighbouring tiles never share it)
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from typing import ClassVar, Final

MAX: Final = 10
"""Largest value a single coordinate can take."""

WIDTH: Final = 5
"""Largest allowed absolute difference between the two coordinates."""

MAX_RANK: Final = 2 * MAX
MAX_FILE: Final = 2 * WIDTH

NUMBER_OF_TILES: Final = 91
NUMBER_OF_FILES: Final = MAX_FILE + 1
NUMBER_OF_RANKS: Final = MAX_RANK + 1


def is_valid(x: int, y: int) -> bool:
    """Whether ``(x, y)`` is a tile of the board."""
    return 0 <= x <= MAX and 0 <= y <= MAX and abs(x - y) <= WIDTH


def rank_width(rank: int) -> int:
    """Number of tiles on *rank*.

    Ranks grow by one tile per step up to rank 5, then alternate between 5
    and 6 tiles until the symmetric shrink towards rank 20.
    """
    return min(min(rank, MAX_RANK - rank) // 2, 2) * 2 + 1 + rank % 2


def min_valid_coordinate_for_rank(rank: int) -> int:
    """Lowest ``y`` that a tile on *rank* can have.

    From ``x + y == rank`` the bound ``x <= MAX`` gives ``y >= rank - MAX``
    and ``x - y <= WIDTH`` gives ``2y >= rank - WIDTH``.
    """
    return max(rank - MAX, (rank - WIDTH + 1) // 2, 0)


@dataclass(frozen=True, slots=True, order=True)
class Delta:
    """Difference between two positions."""

    x: int
    y: int

    ZERO: ClassVar[Delta]

    @staticmethod
    def is_valid(x: int, y: int) -> bool:
        """Whether ``(x, y)`` is the difference of two board positions."""
        return abs(x) <= MAX and abs(y) <= MAX and abs(x - y) <= MAX_FILE

    def length(self) -> int:
        """Hexagonal distance covered by this delta, in single steps.

        Along a shared sign the ``(1, 1)`` axis is a single step, so the
        longer component dominates; across signs both components count.
        """
        if (self.x >= 0) == (self.y >= 0) or self.x == 0 or self.y == 0:
            return max(abs(self.x), abs(self.y))
        return abs(self.x) + abs(self.y)

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0

    def __mul__(self, factor: int) -> Delta:
        return Delta(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def __floordiv__(self, divisor: int) -> Delta:
        return Delta(self.x // divisor, self.y // divisor)

    def __neg__(self) -> Delta:
        return Delta(-self.x, -self.y)

    def __add__(self, other: Delta) -> Delta:
        return Delta(self.x + other.x, self.y + other.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


ZERO: Final = Delta(0, 0)
Delta.ZERO = ZERO


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable tile address on the hexagonal board."""

    x: int
    y: int

    CENTER: ClassVar[Position]

    def __post_init__(self) -> None:
        if not is_valid(self.x, self.y):
            raise ValueError(f"Invalid hexagonal position: ({self.x}, {self.y})")

    @classmethod
    def new_unchecked(cls, x: int, y: int) -> Position:
        """Build a position without validating it (callers guarantee validity)."""
        position = object.__new__(cls)
        object.__setattr__(position, "x", x)
        object.__setattr__(position, "y", y)
        return position

    @classmethod
    def iter(cls) -> Iterator[Position]:
        """All 91 positions, ``x``-major then ``y``."""
        for x in range(MAX + 1):
            for y in range(MAX + 1):
                if abs(x - y) <= WIDTH:
                    yield cls.new_unchecked(x, y)

    # ── Derived properties ───────────────────────────────────────────────

    @property
    def rank(self) -> int:
        return self.x + self.y

    @property
    def file(self) -> int:
        return WIDTH + self.y - self.x

    @property
    def tile_color(self) -> int:
        """Color class of the tile: 0, 1 or 2."""
        return (self.x + self.y) % 3

    def flipped(self) -> Position:
        """The tile rotated 180 degrees around the centre of the board."""
        return Position(MAX - self.x, MAX - self.y)

    # ── Arithmetic ───────────────────────────────────────────────────────

    def __sub__(self, other: Position) -> Delta:
        return Delta(self.x - other.x, self.y - other.y)

    def __add__(self, delta: Delta) -> Position:
        return Position(self.x + delta.x, self.y + delta.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


CENTER: Final = Position(MAX // 2, MAX // 2)
Position.CENTER = CENTER


def distance(a: Position, b: Position) -> int:
    """Hexagonal distance between two positions."""
    return (b - a).length()


def get_stride(delta: Delta) -> tuple[Delta, int]:
    """Split *delta* into its smallest integer step and the number of steps.

    ``stride * count == delta`` always holds, e.g. ``(-8, 4)`` gives
    ``((-2, 1), 4)``. *delta* must not be zero.
    """
    count = math.gcd(abs(delta.x), abs(delta.y))
    return delta // count, count
