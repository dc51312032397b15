# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Baseball game simulation engine.

Resolves each plate appearance from a batter-vs-pitcher outcome
distribution, then works out what the ball in play did: which fielder
handled it, whether he booted it, whether it turned into a double or triple
play, and where every runner ended up. Maintains the authoritative game
state and drives full games with the half-inning lifecycle.

All randomness goes through an injected random source for deterministic
replay.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from config import DEFAULT_CONFIG, SimConfig
from engine.baserunning import PickoffResult, StealResult, attempt_pickoff, attempt_steal
from engine.lifecycle import Evaluation, Status, advance_half_inning, evaluate
from engine.matchups import Matchup, prepare_matchups
from engine.probability import Distribution, Situation, compute_probabilities, normalize
from engine.random_source import RandomSource, SeededRandom
from engine.roster import RosterError, build_roster
from engine.state import AWAY, HOME, AtBatResult, GameState, new_game_state
from models import (
    HIT_OUTCOMES, BattedBall, Batter, Fielder, Half, Outcome, Pitcher, Position, Roster,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Load roster data
# ---------------------------------------------------------------------------

_ROSTER_PATH = Path(__file__).resolve().parent / "data" / "sample_rosters.json"


def _team_from_dict(d: dict) -> Roster:
    """Build a Roster from a team file entry of raw counting stats."""
    batters = [
        Batter.from_counts(
            b["name"], b["player_id"],
            PA=b.get("PA", 0), AB=b.get("AB", 0), H=b.get("H", 0),
            HR=b.get("HR", 0), BB=b.get("BB", 0), SO=b.get("SO", 0),
            SF=b.get("SF", 0), HBP=b.get("HBP", 0),
            doubles=b.get("2B", 0), triples=b.get("3B", 0),
            runs_baserunning=b.get("runs_baserunning"),
        )
        for b in d.get("batters", [])
    ]
    pitchers = [
        Pitcher.from_counts(
            p["name"], p["player_id"],
            IP=p.get("IP", 0), TBF=p.get("TBF", 0), H=p.get("H", 0),
            HR=p.get("HR", 0), BB=p.get("BB", 0), SO=p.get("SO", 0),
            HBP=p.get("HBP", 0), pickoffs=p.get("pickoffs", 0),
        )
        for p in d.get("pitchers", [])
    ]
    fielders = [
        Fielder.from_counts(
            f.get("name", ""), f.get("player_id", ""), f.get("position", ""),
            G=f.get("G", 0), Inn=f.get("Inn", 0), PO=f.get("PO", 0),
            A=f.get("A", 0), E=f.get("E", 0), DP=f.get("DP", 0),
            FP=f.get("FP"), RF=f.get("RF"), TZ=f.get("TZ"),
            sb_allowed=f.get("sb_allowed", 0), cs=f.get("cs", 0),
            cs_pct=f.get("cs_pct"), pickoffs=f.get("pickoffs", 0),
            PB=f.get("PB", 0),
        )
        for f in d.get("fielders", [])
    ]
    return build_roster(
        d.get("lineup", []), d.get("starting_pitcher", ""),
        batters, pitchers, fielders, team_name=d.get("team_name", ""),
    )


def load_rosters(path: Path | str | None = None) -> dict[str, Roster]:
    """Load both team rosters from JSON.

    Raises:
        RosterError: if a team's lineup or starting pitcher is invalid.
        OSError / ValueError: if the file is missing or not valid JSON.
    """
    p = Path(path) if path is not None else _ROSTER_PATH
    with open(p) as f:
        data = json.load(f)
    try:
        return {side: _team_from_dict(data[side]) for side in ("away", "home")}
    except KeyError as e:
        raise RosterError(f"Roster file {p} is missing key {e}") from e


# ---------------------------------------------------------------------------
# Ball-in-play tables
# ---------------------------------------------------------------------------

BATTED_BALL_WEIGHTS: dict[BattedBall, float] = {
    BattedBall.GROUNDOUT: 0.48,
    BattedBall.FLYOUT: 0.32,
    BattedBall.LINEOUT: 0.12,
    BattedBall.POPOUT: 0.08,
}

FIELDER_WEIGHTS: dict[BattedBall, dict[str, float]] = {
    BattedBall.GROUNDOUT: {"1B": 0.10, "2B": 0.27, "SS": 0.32, "3B": 0.16, "P": 0.15},
    BattedBall.FLYOUT: {"LF": 0.28, "CF": 0.48, "RF": 0.24},
    BattedBall.LINEOUT: {
        "1B": 0.28, "2B": 0.18, "SS": 0.18, "3B": 0.28,
        "LF": 0.04, "CF": 0.02, "RF": 0.02,
    },
    BattedBall.POPOUT: {
        "C": 0.30, "1B": 0.18, "2B": 0.08, "SS": 0.18, "3B": 0.18,
        "LF": 0.04, "RF": 0.04,
    },
}

_DESCRIPTIONS = {
    Outcome.K: "Strikeout",
    Outcome.BB: "Walk",
    Outcome.HBP: "Hit by pitch",
    Outcome.HR: "Home run",
    Outcome.SINGLE: "Single",
    Outcome.DOUBLE: "Double",
    Outcome.TRIPLE: "Triple",
    Outcome.OUT: "Out",
}


def describe_outcome(outcome: Outcome) -> str:
    return _DESCRIPTIONS[outcome]


def forced_runners(bases: list) -> list[int]:
    """Base indices (0=1st) of runners forced when the batter takes first.

    A runner is forced only if every base behind him is occupied.
    """
    forced = []
    for i in range(3):
        if bases[i] is None:
            break
        forced.append(i)
    return forced


def _speed(runner: Batter, cfg: SimConfig) -> float:
    speed = runner.baserunning.speed
    return cfg.average_speed if speed is None else speed


def _find_fielder(fielders, position: str) -> Fielder | None:
    for f in fielders or ():
        if getattr(f, "position", None) == position:
            return f
    return None


# ---------------------------------------------------------------------------
# Play-by-play event
# ---------------------------------------------------------------------------

@dataclass
class PlayEvent:
    inning: int
    half: str  # "TOP" or "BOTTOM"
    outs_before: int
    description: str
    event_type: str  # "at_bat", "inning_change", "game_end"
    score_home: int = 0
    score_away: int = 0
    runs_scored: int = 0
    batter_id: str = ""

    def to_dict(self) -> dict:
        return {
            "inning": self.inning,
            "half": self.half,
            "outs_before": self.outs_before,
            "description": self.description,
            "event_type": self.event_type,
            "score": {"home": self.score_home, "away": self.score_away},
            "runs_scored": self.runs_scored,
            "batter_id": self.batter_id,
        }


@dataclass
class GameSummary:
    """Outcome of one simulated game."""
    away_score: int
    home_score: int
    winner: str | None  # "Away", "Home", or None if stopped tied by a cap
    innings: int
    last_half: str
    walk_off: bool = False
    ended_by_cap: bool = False
    plate_appearances: int = 0
    play_log: list[PlayEvent] = field(default_factory=list)
    state: GameState | None = None

    def to_dict(self) -> dict:
        return {
            "final_score": {"away": self.away_score, "home": self.home_score},
            "winner": self.winner,
            "innings": self.innings,
            "last_half": self.last_half,
            "walk_off": self.walk_off,
            "ended_by_cap": self.ended_by_cap,
            "plate_appearances": self.plate_appearances,
            "play_log": [e.to_dict() for e in self.play_log],
        }


# ---------------------------------------------------------------------------
# Simulation engine
# ---------------------------------------------------------------------------

class SimulationEngine:
    """Resolves plate appearances and manages game flow.

    Each at-bat:
    - samples an outcome from the (fatigue-adjusted) matchup distribution
    - for fielded outs, picks the batted-ball type and the fielder
    - checks for errors, triple plays, and double plays
    - advances runners, scores runs, and records outs
    - checks for a passed ball on strikeouts and walks
    """

    def __init__(self, seed: int | None = None, rng: RandomSource | None = None,
                 config: SimConfig | None = None):
        if rng is None:
            rng = SeededRandom(seed)
        self.rng = rng
        self.seed = getattr(rng, "seed", seed)
        self.config = config or DEFAULT_CONFIG

    # -------------------------------------------------------------------
    # Probability helpers
    # -------------------------------------------------------------------

    def _situation(self, state: GameState) -> Situation:
        cfg = self.config
        return Situation(
            risp=state.bases[1] is not None or state.bases[2] is not None,
            late_and_close=(
                state.inning >= cfg.late_inning
                and abs(state.score[AWAY] - state.score[HOME]) <= cfg.close_game_margin
            ),
            two_outs=state.outs == 2,
        )

    def apply_fatigue(self, probabilities: Distribution, batters_faced: int) -> Distribution:
        """Shift probability from Out toward BB and 1B for a tired pitcher.

        Starts once ``batters_faced`` passes the threshold (two times through
        the order), grows per batter, and is capped. Out never drops below
        half of its original value.
        """
        cfg = self.config
        if batters_faced <= cfg.fatigue_threshold:
            return probabilities
        factor = min((batters_faced - cfg.fatigue_threshold) * cfg.fatigue_step,
                     cfg.fatigue_cap)
        adjusted = dict(probabilities)
        orig_out = adjusted.get(Outcome.OUT, 0.0)
        if adjusted.get(Outcome.BB, 0.0) > 0:
            adjusted[Outcome.BB] += factor
        if adjusted.get(Outcome.SINGLE, 0.0) > 0:
            adjusted[Outcome.SINGLE] += factor
        if orig_out > 0:
            adjusted[Outcome.OUT] = max(orig_out - factor, 0.5 * orig_out)
        return normalize(adjusted)

    def _fielding_bonus(self, fielder: Fielder | None, range_bonus: float,
                        zone_bonus: float, elite_bonus: float) -> float:
        if fielder is None:
            return 0.0
        stats = fielder.stats
        cfg = self.config
        rf = stats.RF if stats.RF is not None else 0.0
        tz = stats.TZ if stats.TZ is not None else 0.0
        fp = stats.FP if stats.FP is not None else cfg.default_fielding_pct
        bonus = max(0.0, (rf - cfg.league_range_factor) * range_bonus)
        bonus += max(0.0, tz * zone_bonus)
        if fp > cfg.elite_fielding_pct:
            bonus += elite_bonus
        return bonus

    def error_probability(self, fielder: Fielder | None) -> float:
        """Fielder's errors per chance, or the flat fallback without data."""
        if fielder is None or fielder.stats.chances <= 0:
            return self.config.error_fallback
        return fielder.stats.E / fielder.stats.chances

    def double_play_probability(self, fielder: Fielder | None) -> float:
        cfg = self.config
        prob = cfg.double_play_base + self._fielding_bonus(
            fielder, cfg.double_play_range_bonus, cfg.double_play_zone_bonus,
            cfg.double_play_elite_bonus,
        )
        return min(cfg.double_play_cap, prob)

    def triple_play_probability(self, fielder: Fielder | None) -> float:
        cfg = self.config
        prob = cfg.triple_play_base + self._fielding_bonus(
            fielder, cfg.triple_play_range_bonus, cfg.triple_play_zone_bonus,
            cfg.triple_play_elite_bonus,
        )
        return min(cfg.triple_play_cap, prob)

    def passed_ball_probability(self, catcher: Fielder) -> float:
        """Chance of a passed ball on a strikeout or walk with runners on.

        Elite fielding percentage picks the lower base rate. A catcher with
        innings logged then scales it by passed balls per nine innings.
        """
        cfg = self.config
        stats = catcher.stats
        fp = stats.FP if stats.FP is not None else cfg.default_fielding_pct
        rate = cfg.elite_passed_ball_rate if fp > cfg.elite_fielding_pct else cfg.passed_ball_rate
        if stats.Inn > 0:
            per_nine = stats.PB * 9 / stats.Inn
            factor = per_nine / cfg.league_passed_balls_per_nine
            factor = max(cfg.passed_ball_factor_floor,
                         min(cfg.passed_ball_factor_ceiling, factor))
            rate *= factor
        return min(1.0, rate)

    # -------------------------------------------------------------------
    # Runner movement
    # -------------------------------------------------------------------

    def advance_on_hit(self, state: GameState, outcome: Outcome, batter: Batter) -> int:
        """Move every runner by the hit's base count and place the batter.

        Runners are processed lead runner first. A fast runner may take an
        extra base on a single, and an elite baserunner may score from first
        on a double, but never onto a base a lead runner already holds.
        Returns runs scored.
        """
        cfg = self.config
        hit_bases = outcome.bases
        runs = 0
        new_bases: list[Batter | None] = [None, None, None]

        for i in range(2, -1, -1):
            runner = state.bases[i]
            if runner is None:
                continue
            dest = i + hit_bases
            if outcome == Outcome.SINGLE and dest < 3:
                if (_speed(runner, cfg) > cfg.extra_base_speed
                        and self.rng.uniform() < cfg.extra_base_chance):
                    if dest + 1 >= 3 or new_bases[dest + 1] is None:
                        dest += 1
            elif outcome == Outcome.DOUBLE and i == 0:
                value = runner.baserunning.runs_baserunning or 0.0
                if (value > cfg.score_from_first_value
                        and self.rng.uniform() < cfg.score_from_first_chance):
                    dest = 3
            if dest >= 3:
                runs += 1
            else:
                new_bases[dest] = runner

        if outcome == Outcome.HR:
            runs += 1
        else:
            new_bases[hit_bases - 1] = batter

        state.bases = new_bases
        state.score_run(runs)
        return runs

    def advance_on_walk(self, state: GameState, batter: Batter) -> int:
        """Award first base; forced runners move up exactly one base."""
        runs = 0
        for idx in reversed(forced_runners(state.bases)):
            runner = state.bases[idx]
            state.bases[idx] = None
            if idx == 2:
                runs += 1
            else:
                state.bases[idx + 1] = runner
        state.bases[0] = batter
        state.score_run(runs)
        return runs

    def advance_all_one_base(self, state: GameState) -> int:
        """Every runner moves up one base (passed ball); third scores."""
        runs = 0
        for i in range(2, -1, -1):
            runner = state.bases[i]
            if runner is None:
                continue
            state.bases[i] = None
            if i == 2:
                runs += 1
            else:
                state.bases[i + 1] = runner
        state.score_run(runs)
        return runs

    # -------------------------------------------------------------------
    # Plate appearance
    # -------------------------------------------------------------------

    def resolve_at_bat(self, away_matchups: list[Matchup], home_matchups: list[Matchup],
                       state: GameState, away_fielders: list[Fielder] | None = None,
                       home_fielders: list[Fielder] | None = None,
                       away_roster: Roster | None = None,
                       home_roster: Roster | None = None) -> AtBatResult:
        """Simulate one plate appearance and update ``state`` in place.

        Raises:
            ValueError: if the batting team's lineup is empty.
        """
        cfg = self.config
        team = state.batting_index
        matchups = away_matchups if team == AWAY else home_matchups
        roster = away_roster if team == AWAY else home_roster
        opposing = home_roster if team == AWAY else away_roster
        fielders = (home_fielders if team == AWAY else away_fielders) or []
        if not fielders and opposing is not None:
            fielders = opposing.fielders

        if not matchups:
            raise ValueError("Batting team has an empty lineup")

        slot = state.lineup_indices[team]
        matchup = matchups[slot % len(matchups)]
        if roster is not None and roster.lineup:
            batter = roster.lineup[slot % len(roster.lineup)]
        else:
            batter = Batter(name=matchup.batter_id, player_id=matchup.batter_id)
        state.lineup_indices[team] += 1

        if roster is not None and roster.lineup and opposing is not None:
            probabilities = compute_probabilities(
                batter, opposing.pitcher, self._situation(state), cfg,
            )
        else:
            probabilities = normalize(matchup.probabilities)

        fatigue = state.pitcher_fatigue[state.fielding_index]
        fatigue.batters_faced += 1
        probabilities = self.apply_fatigue(probabilities, fatigue.batters_faced)

        outcome = Outcome(self.rng.weighted_choice(probabilities))
        outs_before = state.outs
        score_before = state.score[team]

        if outcome == Outcome.OUT:
            result = self._resolve_fielded_out(state, batter, matchup.batter_id, fielders)
        else:
            result = self._resolve_non_out(state, batter, matchup.batter_id, outcome, fielders)

        result.outs_recorded = state.outs - outs_before
        result.runs_scored = state.score[team] - score_before
        logger.debug("%s: %s [%s]", matchup.batter_id, result.description,
                     state.situation_display())
        return result

    def _resolve_fielded_out(self, state: GameState, batter: Batter, batter_id: str,
                             fielders: list[Fielder]) -> AtBatResult:
        batted_ball = BattedBall(self.rng.weighted_choice(BATTED_BALL_WEIGHTS))
        position = self.rng.weighted_choice(FIELDER_WEIGHTS[batted_ball])
        fielder = _find_fielder(fielders, position)

        def result(description: str, error: bool = False) -> AtBatResult:
            return AtBatResult(
                batter_id=batter_id, description=description, outcome=Outcome.OUT,
                batted_ball=batted_ball, fielder=fielder, fielder_position=position,
                error=error,
            )

        if self.rng.uniform() < self.error_probability(fielder):
            # Batter reaches; runners move as on a single
            self.advance_on_hit(state, Outcome.SINGLE, batter)
            return result(f"Error on {position}", error=True)

        if batted_ball != BattedBall.GROUNDOUT:
            state.outs += 1
            return result(f"{batted_ball.value} to {position}")

        forced = forced_runners(state.bases)

        if state.outs == 0 and len(forced) >= 2:
            if self.rng.uniform() < self.triple_play_probability(fielder):
                for idx in sorted(forced, reverse=True)[:2]:
                    state.bases[idx] = None
                state.outs = 3
                return result("Grounded into triple play")

        if state.outs < 2 and forced:
            if self.rng.uniform() < self.double_play_probability(fielder):
                state.bases[max(forced)] = None
                state.outs = min(state.outs + 2, 3)
                return result("Grounded into double play")

        # Batter out at first, forced runners move up, the rest hold
        state.outs += 1
        if state.outs < 3:
            runs = 0
            for idx in reversed(forced):
                runner = state.bases[idx]
                state.bases[idx] = None
                if idx == 2:
                    runs += 1
                else:
                    state.bases[idx + 1] = runner
            state.score_run(runs)
        return result(f"{batted_ball.value} to {position}")

    def _resolve_non_out(self, state: GameState, batter: Batter, batter_id: str,
                         outcome: Outcome, fielders: list[Fielder]) -> AtBatResult:
        if outcome == Outcome.K:
            state.outs += 1
        elif outcome in (Outcome.BB, Outcome.HBP):
            self.advance_on_walk(state, batter)
        elif outcome in HIT_OUTCOMES:
            self.advance_on_hit(state, outcome, batter)

        result = AtBatResult(batter_id=batter_id, description=describe_outcome(outcome),
                             outcome=outcome)

        if outcome in (Outcome.K, Outcome.BB) and state.outs < 3 and state.occupied():
            catcher = _find_fielder(fielders, Position.C)
            if catcher is not None and self.rng.uniform() < self.passed_ball_probability(catcher):
                self.advance_all_one_base(state)
                lead = "Strikeout" if outcome == Outcome.K else "Walk"
                result.description = f"{lead}, but passed ball allows runners to advance"
                result.fielder = catcher
                result.fielder_position = Position.C.value
                result.passed_ball = True
        return result

    # -------------------------------------------------------------------
    # Baserunning between at-bats
    # -------------------------------------------------------------------

    def attempt_steal(self, target_base: int, state: GameState, runner: Batter | None,
                      pitcher: Pitcher | None, catcher: Fielder | None,
                      from_base: int) -> StealResult:
        return attempt_steal(target_base, state, runner, pitcher, catcher, from_base,
                             self.rng, self.config)

    def attempt_pickoff(self, base: int, state: GameState, runner: Batter | None,
                        pitcher: Pitcher | None, fielder: Fielder | None) -> PickoffResult:
        return attempt_pickoff(base, state, runner, pitcher, fielder, self.rng, self.config)

    # -------------------------------------------------------------------
    # Simulate full game
    # -------------------------------------------------------------------

    def simulate_game(self, away: Roster, home: Roster, verbose: bool = False) -> GameSummary:
        """Play a full game between two rosters with no manager input.

        Stops early, with a logged warning, if the plate-appearance or
        inning safety cap is reached.
        """
        cfg = self.config
        away_matchups = prepare_matchups(away, home.pitcher, cfg)
        home_matchups = prepare_matchups(home, away.pitcher, cfg)
        state = new_game_state()
        log: list[PlayEvent] = []
        ending: Evaluation | None = None
        plate_appearances = 0

        while plate_appearances < cfg.max_plate_appearances:
            outs_before = state.outs
            result = self.resolve_at_bat(
                away_matchups, home_matchups, state,
                away.fielders, home.fielders, away, home,
            )
            plate_appearances += 1
            log.append(PlayEvent(
                inning=state.inning, half=state.half.value, outs_before=outs_before,
                description=result.description, event_type="at_bat",
                score_home=state.score[HOME], score_away=state.score[AWAY],
                runs_scored=result.runs_scored, batter_id=result.batter_id,
            ))
            if verbose:
                print(f"  {result.description}")

            decision = evaluate(state)
            if decision.ended:
                ending = decision
                break
            if decision.status == Status.HALF_OVER:
                advance_half_inning(state)
                if state.inning > cfg.max_innings:
                    break
                log.append(PlayEvent(
                    inning=state.inning, half=state.half.value, outs_before=0,
                    description=f"--- {'Top' if state.top else 'Bottom'} of the {_ordinal(state.inning)} ---",
                    event_type="inning_change",
                    score_home=state.score[HOME], score_away=state.score[AWAY],
                ))
                if verbose:
                    print(f"\n{log[-1].description}")

        away_score, home_score = state.score[AWAY], state.score[HOME]
        if ending is not None:
            summary = GameSummary(
                away_score=away_score, home_score=home_score, winner=ending.winner,
                innings=ending.inning, last_half=ending.half_label,
                walk_off=ending.walk_off, plate_appearances=plate_appearances,
                play_log=log, state=state,
            )
            desc = f"{'Walk-off! ' if ending.walk_off else 'Game over! '}{ending.winner} wins {away_score}-{home_score}"
        else:
            logger.warning(
                "Game stopped by safety cap after %d plate appearances: %s",
                plate_appearances, state.situation_display(),
            )
            winner = None
            if away_score != home_score:
                winner = "Home" if home_score > away_score else "Away"
            if state.inning > cfg.max_innings:
                # State already rolled into the next top; the bottom of the cap inning was last
                innings, last_half = cfg.max_innings, "Bottom"
            else:
                innings, last_half = state.inning, "Top" if state.top else "Bottom"
            summary = GameSummary(
                away_score=away_score, home_score=home_score, winner=winner,
                innings=innings, last_half=last_half, ended_by_cap=True,
                plate_appearances=plate_appearances, play_log=log, state=state,
            )
            desc = f"Game stopped by safety cap at {away_score}-{home_score}"

        log.append(PlayEvent(
            inning=summary.innings,
            half=(Half.BOTTOM if summary.last_half == "Bottom" else Half.TOP).value,
            outs_before=state.outs,
            description=desc, event_type="game_end",
            score_home=home_score, score_away=away_score,
        ))
        if verbose:
            print(f"\n{desc}")
        return summary


def _ordinal(n: int) -> str:
    """Return ordinal string for an integer (1st, 2nd, 3rd, etc.)."""
    if 11 <= n % 100 <= 13:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


# ---------------------------------------------------------------------------
# Serialization support
# ---------------------------------------------------------------------------

def game_state_to_dict(state: GameState) -> dict:
    """Serialize game state to a dict for display or JSON persistence."""
    return {
        "inning": state.inning,
        "half": state.half.value,
        "outs": state.outs,
        "bases": [
            {"player_id": r.player_id, "name": r.name} if r is not None else None
            for r in state.bases
        ],
        "lineup_indices": {"away": state.lineup_indices[AWAY], "home": state.lineup_indices[HOME]},
        "score": {"away": state.score[AWAY], "home": state.score[HOME]},
        "pitcher_fatigue": {
            "away": state.pitcher_fatigue[AWAY].batters_faced,
            "home": state.pitcher_fatigue[HOME].batters_faced,
        },
    }


# ---------------------------------------------------------------------------
# CLI entry point for testing
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    import sys

    seed = int(sys.argv[1]) if len(sys.argv) > 1 and sys.argv[1].isdigit() else None
    verbose = "--verbose" in sys.argv or "-v" in sys.argv

    rosters = load_rosters()
    engine = SimulationEngine(seed=seed)

    print(f"Simulating game with seed {engine.seed}...")
    print(f"{rosters['away'].team_name} at {rosters['home'].team_name}")
    print("=" * 72)

    summary = engine.simulate_game(rosters["away"], rosters["home"], verbose=verbose)
    print(f"Final: Away {summary.away_score} - Home {summary.home_score} "
          f"({summary.last_half} {summary.innings})")
    print(f"Total plate appearances: {summary.plate_appearances}")
