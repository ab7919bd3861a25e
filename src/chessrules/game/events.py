"""Derivation of UI-facing events from an applied move.

The controller emits nothing itself. A presentation layer calls
:func:`events_for_move` with the annotated move it just applied and the new
snapshot, then dispatches the result however it likes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chessrules.core.enums import CastlingSide, Color, DrawReason
from chessrules.core.move import Move
from chessrules.core.piece import Piece
from chessrules.game.state import GameState


class GameEventType(Enum):
    MOVE = "move"
    CAPTURE = "capture"
    CASTLE = "castle"
    PROMOTION = "promotion"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    DRAW = "draw"


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single notification; only the fields relevant to its type are set."""

    type: GameEventType
    state: GameState
    move: Move | None = None
    captured_piece: Piece | None = None
    castling_side: CastlingSide | None = None
    color: Color | None = None  # winner on checkmate, checked king on check
    draw_reason: DrawReason | None = None


def events_for_move(move: Move, state: GameState) -> list[GameEvent]:
    """Events describing *move*, in dispatch order.

    ``MOVE`` comes first, followed by ``CAPTURE`` / ``CASTLE`` / ``PROMOTION``
    as annotated on the move, then at most one status event.
    """
    events = [GameEvent(GameEventType.MOVE, state, move=move)]

    if move.is_capture:
        events.append(
            GameEvent(
                GameEventType.CAPTURE,
                state,
                move=move,
                captured_piece=move.captured_piece,
            )
        )
    if move.is_castling:
        events.append(
            GameEvent(
                GameEventType.CASTLE,
                state,
                move=move,
                castling_side=move.castling_side,
            )
        )
    if move.promotion is not None:
        events.append(GameEvent(GameEventType.PROMOTION, state, move=move))

    status = status_event(state)
    if status is not None:
        events.append(status)
    return events


def status_event(state: GameState) -> GameEvent | None:
    """The single status event for *state*, or None while play is quiet.

    Precedence: checkmate, stalemate, other draws, check.
    """
    if state.is_checkmate:
        return GameEvent(GameEventType.CHECKMATE, state, color=state.turn.opposite)
    if state.is_stalemate:
        return GameEvent(GameEventType.STALEMATE, state)
    if state.is_draw:
        return GameEvent(GameEventType.DRAW, state, draw_reason=state.draw_reason)
    if state.is_check:
        return GameEvent(GameEventType.CHECK, state, color=state.turn)
    return None
