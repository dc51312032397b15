# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Batch-simulate many games between two rosters and summarize the results.

Usage:
    uv run simulate_games.py --games 100 --seed 42
    uv run simulate_games.py --rosters data/sample_rosters.json --games 25 --verbose
"""

from __future__ import annotations

import argparse
import json
import logging
import random
import sys
from collections import Counter
from dataclasses import dataclass, field

from config import SimConfig, load_config
from engine.random_source import SeededRandom
from models import Roster
from simulation import GameSummary, SimulationEngine, load_rosters

logger = logging.getLogger(__name__)


@dataclass
class BatchSummary:
    games: int = 0
    total_away: int = 0
    total_home: int = 0
    away_wins: int = 0
    home_wins: int = 0
    ties: int = 0
    walk_offs: int = 0
    capped: int = 0
    score_distribution: Counter = field(default_factory=Counter)  # "away-home" -> count

    @property
    def avg_away(self) -> float:
        return self.total_away / self.games if self.games else 0.0

    @property
    def avg_home(self) -> float:
        return self.total_home / self.games if self.games else 0.0

    def record(self, game: GameSummary) -> None:
        self.games += 1
        self.total_away += game.away_score
        self.total_home += game.home_score
        if game.winner == "Home":
            self.home_wins += 1
        elif game.winner == "Away":
            self.away_wins += 1
        else:
            self.ties += 1
        if game.walk_off:
            self.walk_offs += 1
        if game.ended_by_cap:
            self.capped += 1
        self.score_distribution[f"{game.away_score}-{game.home_score}"] += 1

    def to_dict(self) -> dict:
        return {
            "games": self.games,
            "avg_away": round(self.avg_away, 2),
            "avg_home": round(self.avg_home, 2),
            "away_wins": self.away_wins,
            "home_wins": self.home_wins,
            "ties": self.ties,
            "walk_offs": self.walk_offs,
            "capped": self.capped,
            "score_distribution": dict(self.score_distribution.most_common()),
        }


def simulate_many(away: Roster, home: Roster, games: int, seed: int | None = None,
                  config: SimConfig | None = None) -> BatchSummary:
    """Run ``games`` independent games.

    Game ``i`` gets its own game state and a random source seeded with
    ``seed + i``, so any single game can be replayed on its own.
    """
    if games < 0:
        raise ValueError(f"games must be non-negative, got {games}")
    if seed is None:
        seed = random.randint(0, 2**31 - 1)
    summary = BatchSummary()
    for i in range(games):
        engine = SimulationEngine(rng=SeededRandom(seed + i), config=config)
        result = engine.simulate_game(away, home)
        summary.record(result)
        logger.info("Game %d/%d (seed %d): %d-%d",
                    i + 1, games, seed + i, result.away_score, result.home_score)
    return summary


def format_report(summary: BatchSummary, away_name: str, home_name: str) -> str:
    lines = [
        f"Simulated {summary.games} games: {away_name} (away) at {home_name} (home)",
        f"Average Away: {summary.avg_away:.2f}, Average Home: {summary.avg_home:.2f}",
        f"Away Wins: {summary.away_wins}, Home Wins: {summary.home_wins}, Ties: {summary.ties}",
        f"Walk-offs: {summary.walk_offs}",
    ]
    if summary.capped:
        lines.append(f"Stopped by safety cap: {summary.capped}")
    lines.append("Score distribution (Away-Home):")
    for score, count in summary.score_distribution.most_common():
        lines.append(f"  {score}: {count}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Simulate many games between two rosters."
    )
    parser.add_argument(
        "--games", type=int, default=25,
        help="Number of games to simulate (default: 25).",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Base seed; game i uses seed + i.",
    )
    parser.add_argument(
        "--rosters", default=None,
        help="Path to a rosters JSON file (default: data/sample_rosters.json).",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to a JSON file of tuning overrides.",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the summary as JSON.",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Log each game result.",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.games < 1:
        print("Error: --games must be at least 1.", file=sys.stderr)
        return 1

    try:
        config = load_config(args.config)
        rosters = load_rosters(args.rosters)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    summary = simulate_many(rosters["away"], rosters["home"], args.games,
                            seed=args.seed, config=config)

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(format_report(summary, rosters["away"].team_name, rosters["home"].team_name))
    return 0


if __name__ == "__main__":
    sys.exit(main())
