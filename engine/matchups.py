# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Per-slot matchup distributions against the opposing starter."""

from __future__ import annotations

from dataclasses import dataclass

from config import SimConfig
from engine.probability import Distribution, compute_probabilities
from models import Batter, Pitcher, Roster


@dataclass
class Matchup:
    batter_id: str
    pitcher_id: str
    probabilities: Distribution


def prepare_matchups(lineup: Roster | list[Batter], opposing_pitcher: Pitcher,
                     config: SimConfig | None = None) -> list[Matchup]:
    """Build one matchup per lineup slot, in batting order."""
    batters = lineup.lineup if isinstance(lineup, Roster) else lineup
    return [
        Matchup(
            batter_id=b.player_id,
            pitcher_id=opposing_pitcher.player_id,
            probabilities=compute_probabilities(b, opposing_pitcher, config=config),
        )
        for b in batters
    ]
