"""Move value objects.

A move is one of three variants:

* :class:`RegularMove`: a piece travels from one tile to another, possibly
  capturing. This is the only kind the rules currently produce.
* :class:`EnPassantMove` and :class:`PromotionMove`: part of the move
  vocabulary, but their geometry and application are not implemented yet.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from chessagon.core.coordinate import Position
from chessagon.core.enums import Color, PieceType, Side
from chessagon.core.layout import pawn_home_tile


@dataclass(frozen=True, slots=True)
class RegularMove:
    """A piece moving from *origin* to *destination*."""

    origin: Position
    destination: Position
    captures: bool = False

    def origin_of(self, color: Color) -> Position:
        return self.origin

    def destination_of(self, color: Color) -> Position:
        return self.destination

    def __str__(self) -> str:
        sep = "x" if self.captures else "-"
        return f"{self.origin}{sep}{self.destination}"


@dataclass(frozen=True, slots=True)
class EnPassantMove:
    """A pawn capturing en passant.

    *file* is the file of the pawn's home tile (1 to 9) and *direction* the
    wing it captures towards.
    """

    file: int
    direction: Side

    def origin_of(self, color: Color) -> Position:
        tile = pawn_home_tile(self.file, color)
        if tile is None:
            raise ValueError(f"No pawn home tile on file {self.file}")
        return tile

    def destination_of(self, color: Color) -> Position:
        raise NotImplementedError("En passant destinations are not implemented")

    def __str__(self) -> str:
        return f"en passant on file {self.file} towards {self.direction} side"


@dataclass(frozen=True, slots=True)
class PromotionMove:
    """A pawn promoting on *file*, optionally capturing towards a side."""

    file: int
    captures: Side | None
    promoting_to: PieceType

    def origin_of(self, color: Color) -> Position:
        raise NotImplementedError("Promotion origins are not implemented")

    def destination_of(self, color: Color) -> Position:
        raise NotImplementedError("Promotion destinations are not implemented")

    def __str__(self) -> str:
        return f"promotion to {self.promoting_to} on file {self.file}"


Move: TypeAlias = RegularMove | EnPassantMove | PromotionMove


@dataclass(frozen=True, slots=True)
class MoveMeta:
    """Facts established while validating a move."""

    color: Color
