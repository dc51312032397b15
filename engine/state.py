# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Mutable game state shared by the at-bat and baserunning engines.

One ``GameState`` per game. It is created empty, mutated in place by every
resolver call, and simply discarded when the game is over. Team-indexed
pairs are ordered ``[away, home]``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from models import BattedBall, Batter, Fielder, Half, Outcome

AWAY = 0
HOME = 1


@dataclass
class PitcherFatigue:
    batters_faced: int = 0


@dataclass
class GameState:
    """Authoritative state of one game."""
    inning: int = 1
    half: Half = Half.TOP  # TOP = away bats
    outs: int = 0
    # bases[0] = 1st, bases[1] = 2nd, bases[2] = 3rd
    bases: list[Optional[Batter]] = field(default_factory=lambda: [None, None, None])
    lineup_indices: list[int] = field(default_factory=lambda: [0, 0])
    score: list[int] = field(default_factory=lambda: [0, 0])
    pitcher_fatigue: list[PitcherFatigue] = field(
        default_factory=lambda: [PitcherFatigue(), PitcherFatigue()]
    )

    @property
    def top(self) -> bool:
        return self.half == Half.TOP

    @property
    def batting_index(self) -> int:
        return AWAY if self.top else HOME

    @property
    def fielding_index(self) -> int:
        return HOME if self.top else AWAY

    def runner_on(self, base: int) -> Batter | None:
        """Runner on ``base`` (1-3), or None."""
        return self.bases[base - 1]

    def occupied(self) -> int:
        return sum(1 for b in self.bases if b is not None)

    def score_run(self, runs: int = 1) -> None:
        self.score[self.batting_index] += runs

    def clear_bases(self) -> None:
        self.bases = [None, None, None]

    def reset_pitcher_fatigue(self, team_index: int) -> None:
        """Call when ``team_index`` changes pitchers."""
        self.pitcher_fatigue[team_index] = PitcherFatigue()

    def bases_string(self) -> str:
        """Return base state string like '110' for runners on 1st and 2nd."""
        return "".join("1" if b is not None else "0" for b in self.bases)

    def score_display(self) -> str:
        return f"Away {self.score[AWAY]} - Home {self.score[HOME]}"

    def situation_display(self) -> str:
        half_str = "Top" if self.top else "Bot"
        on_bases = [name for name, b in zip(("1st", "2nd", "3rd"), self.bases) if b]
        runners_str = "runners on " + ", ".join(on_bases) if on_bases else "bases empty"
        return f"{half_str} {self.inning}, {self.outs} out, {runners_str}, {self.score_display()}"


def new_game_state() -> GameState:
    return GameState()


@dataclass
class AtBatResult:
    """What happened in one plate appearance."""
    batter_id: str
    description: str
    outcome: Outcome
    batted_ball: BattedBall | None = None
    fielder: Fielder | None = None
    fielder_position: str | None = None
    runs_scored: int = 0
    outs_recorded: int = 0
    error: bool = False
    passed_ball: bool = False

    def to_dict(self) -> dict:
        return {
            "batter_id": self.batter_id,
            "description": self.description,
            "outcome": self.outcome.value,
            "batted_ball": self.batted_ball.value if self.batted_ball else None,
            "fielder_id": self.fielder.player_id if self.fielder else None,
            "fielder_position": self.fielder_position,
            "runs_scored": self.runs_scored,
            "outs_recorded": self.outs_recorded,
            "error": self.error,
            "passed_ball": self.passed_ball,
        }
