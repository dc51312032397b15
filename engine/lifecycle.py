# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Half-inning and game-end decisions.

``evaluate`` only reads the game state, so it can be called any number of
times on the same state and will always give the same answer. The driver
applies half-inning transitions separately with ``advance_half_inning``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from engine.state import AWAY, HOME, GameState
from models import Half

REGULATION_INNINGS = 9


class Status(str, Enum):
    CONTINUE = "CONTINUE"  # keep playing this half-inning
    HALF_OVER = "HALF_OVER"  # three outs, game goes on
    GAME_OVER = "GAME_OVER"


@dataclass(frozen=True)
class Evaluation:
    status: Status
    winner: str | None = None  # "Home" or "Away"
    final_score: tuple[int, int] | None = None  # (away, home)
    inning: int | None = None
    was_top: bool | None = None
    walk_off: bool = False

    @property
    def ended(self) -> bool:
        return self.status == Status.GAME_OVER

    @property
    def half_label(self) -> str | None:
        if self.was_top is None:
            return None
        return "Top" if self.was_top else "Bottom"


def _end(state: GameState, winner: str, was_top: bool,
         walk_off: bool = False) -> Evaluation:
    return Evaluation(
        status=Status.GAME_OVER,
        winner=winner,
        final_score=(state.score[AWAY], state.score[HOME]),
        inning=state.inning,
        was_top=was_top,
        walk_off=walk_off,
    )


def evaluate(state: GameState) -> Evaluation:
    """Decide whether the game continues, the half ends, or the game ends."""
    away, home = state.score[AWAY], state.score[HOME]
    half_over = state.outs >= 3

    if state.inning < REGULATION_INNINGS:
        return Evaluation(Status.HALF_OVER if half_over else Status.CONTINUE)

    if state.top:
        if half_over and home > away:
            # Bottom half not needed
            return _end(state, "Home", was_top=True)
    else:
        if half_over:
            if away > home:
                return _end(state, "Away", was_top=False)
            if home > away:
                return _end(state, "Home", was_top=False)
        elif home > away:
            return _end(state, "Home", was_top=False, walk_off=True)

    return Evaluation(Status.HALF_OVER if half_over else Status.CONTINUE)


def advance_half_inning(state: GameState) -> None:
    """Clear outs and bases and move to the next half-inning."""
    state.outs = 0
    state.clear_bases()
    if state.top:
        state.half = Half.BOTTOM
    else:
        state.half = Half.TOP
        state.inning += 1
