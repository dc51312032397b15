# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Simulation engine components -- probability model, state, baserunning, lifecycle."""

from engine.baserunning import PickoffResult, StealResult, attempt_pickoff, attempt_steal
from engine.lifecycle import Evaluation, Status, advance_half_inning, evaluate
from engine.matchups import Matchup, prepare_matchups
from engine.probability import Distribution, Situation, compute_probabilities
from engine.random_source import RandomSource, ScriptedRandom, SeededRandom
from engine.roster import RosterError, build_roster
from engine.state import AWAY, HOME, AtBatResult, GameState, new_game_state

__all__ = [
    "AWAY",
    "HOME",
    "AtBatResult",
    "Distribution",
    "Evaluation",
    "GameState",
    "Matchup",
    "PickoffResult",
    "RandomSource",
    "RosterError",
    "ScriptedRandom",
    "SeededRandom",
    "Situation",
    "StealResult",
    "Status",
    "advance_half_inning",
    "attempt_pickoff",
    "attempt_steal",
    "build_roster",
    "compute_probabilities",
    "evaluate",
    "new_game_state",
    "prepare_matchups",
]
