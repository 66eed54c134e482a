"""Game management layer: controller, players, clock, state machine.

Quick start::

    from chessagon.core import Color, Position, RegularMove
    from chessagon.game import GameController, HumanPlayer, TimeControl

    ctrl = GameController()
    ctrl.new_game(
        white=HumanPlayer(Color.WHITE, "Alice"),
        black=HumanPlayer(Color.BLACK, "Bob"),
        time_control=TimeControl.blitz(),
    )
    ctrl.submit_move(RegularMove(Position(4, 3), Position(6, 5)))
"""

from chessagon.game.clock import Clock, ClockSnapshot
from chessagon.game.controller import GameController, GameEvents
from chessagon.game.interfaces import (
    DrawOffer,
    GamePhase,
    IClock,
    IGameController,
    IPlayer,
    TimeControl,
)
from chessagon.game.player import EnginePlayer, HumanPlayer, MoveRequest
from chessagon.game.state import (
    DrawNotOffered,
    GameError,
    GameIsFinished,
    GameState,
    MoveRecord,
    NotYourTurn,
)

__all__ = [
    # Interfaces
    "DrawOffer",
    "GamePhase",
    "IClock",
    "IGameController",
    "IPlayer",
    "TimeControl",
    # Concrete
    "Clock",
    "ClockSnapshot",
    "EnginePlayer",
    "GameController",
    "GameEvents",
    "GameState",
    "HumanPlayer",
    "MoveRecord",
    "MoveRequest",
    # Errors
    "DrawNotOffered",
    "GameError",
    "GameIsFinished",
    "NotYourTurn",
]
