# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Stolen-base and pickoff resolution.

Both resolvers are invoked by the driver between plate appearances. They
mutate the game state in place and report what happened; asking about an
empty base is a no-op, not an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from config import DEFAULT_CONFIG, SimConfig
from engine.random_source import RandomSource
from engine.state import GameState
from models import Batter, Fielder, Pitcher

logger = logging.getLogger(__name__)

HOME_PLATE = 4


@dataclass
class StealResult:
    success: bool
    out: bool
    description: str
    probability: float = 0.0


@dataclass
class PickoffResult:
    success: bool
    out: bool
    error: bool
    description: str


def _clamp(v: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, v))


def _base_name(base: int) -> str:
    return "Home" if base == HOME_PLATE else str(base)


def _runner_name(runner: Batter | None) -> str:
    if runner is None:
        return "Unknown Runner"
    return runner.name or runner.player_id


def steal_probability(target_base: int, runner: Batter | None,
                      catcher: Fielder | None,
                      config: SimConfig | None = None) -> float:
    """Chance that a steal of ``target_base`` (2, 3, or 4 for home) succeeds.

    With both players known, missing speed or arm ratings count as league
    average. Without them the flat base rate for the target applies.
    """
    cfg = config or DEFAULT_CONFIG
    if runner is None or catcher is None:
        if target_base == 2:
            return cfg.steal_second_rate
        if target_base == 3:
            return cfg.steal_third_rate
        return cfg.steal_home_rate

    speed = runner.baserunning.speed
    if speed is None:
        speed = cfg.average_speed
    arm = catcher.stats.arm_strength
    if arm is None:
        arm = cfg.average_arm

    prob = 0.5 + (speed - arm) / 200
    if target_base == 3:
        prob -= cfg.steal_third_penalty
    elif target_base == HOME_PLATE:
        prob -= cfg.steal_home_penalty
    return _clamp(prob, cfg.steal_floor, cfg.steal_ceiling)


def attempt_steal(target_base: int, state: GameState, runner: Batter | None,
                  pitcher: Pitcher | None, catcher: Fielder | None,
                  from_base: int, rng: RandomSource,
                  config: SimConfig | None = None) -> StealResult:
    """Resolve a stolen-base attempt from ``from_base`` to ``target_base``.

    The runner reference occupying ``from_base`` is what moves; ``runner``
    only supplies the speed rating.

    Raises:
        ValueError: if the target is not ahead of ``from_base`` or is occupied.
    """
    if not 1 <= from_base <= 3 or state.bases[from_base - 1] is None:
        return StealResult(
            success=False, out=False,
            description=f"No runner on base {from_base} to steal from.",
        )
    if target_base <= from_base or target_base > HOME_PLATE:
        raise ValueError(f"Cannot steal base {target_base} from base {from_base}")
    if target_base < HOME_PLATE and state.bases[target_base - 1] is not None:
        raise ValueError(f"Base {target_base} is already occupied")

    prob = steal_probability(target_base, runner, catcher, config)
    logger.debug(
        "Steal attempt: %s to %s (p=%.3f) vs catcher %s",
        _runner_name(runner), _base_name(target_base), prob,
        catcher.name if catcher else "unknown",
    )

    runner_ref = state.bases[from_base - 1]
    state.bases[from_base - 1] = None
    if rng.uniform() < prob:
        if target_base == HOME_PLATE:
            state.score_run()
        else:
            state.bases[target_base - 1] = runner_ref
        return StealResult(
            success=True, out=False, probability=prob,
            description=f"Runner successfully stole base {_base_name(target_base)}",
        )

    state.outs += 1
    return StealResult(
        success=False, out=True, probability=prob,
        description=f"Runner caught stealing base {_base_name(target_base)}",
    )


def pickoff_probabilities(runner: Batter | None, pitcher: Pitcher | None,
                          fielder: Fielder | None,
                          config: SimConfig | None = None) -> tuple[float, float]:
    """Return (pickoff, throwing error) probabilities."""
    cfg = config or DEFAULT_CONFIG
    pickoff = cfg.pickoff_rate
    error = cfg.pickoff_error_rate

    if pitcher is not None and runner is not None:
        speed = runner.baserunning.speed
        if speed is None:
            speed = cfg.average_speed
        pickoff = 0.03 + pitcher.stats.pickoffs * 0.02 - (speed - 50) / 1000
        pickoff = _clamp(pickoff, cfg.pickoff_floor, cfg.pickoff_ceiling)

    if fielder is not None:
        stats = fielder.stats
        if stats.FP is not None:
            fp = stats.FP
        elif stats.chances > 0:
            fp = 1 - stats.E / stats.chances
        else:
            fp = cfg.default_fielding_pct
        error = 0.05 + (1 - fp) * 2
        error = _clamp(error, cfg.pickoff_error_floor, cfg.pickoff_error_ceiling)

    return pickoff, error


def _advance_from(state: GameState, idx: int) -> None:
    """Move the runner at ``idx`` up one base, pushing anyone in the way."""
    end = idx
    while end < 3 and state.bases[end] is not None:
        end += 1
    # Lead runner of the chain first
    for i in range(end - 1, idx - 1, -1):
        runner = state.bases[i]
        state.bases[i] = None
        if i == 2:
            state.score_run()
        else:
            state.bases[i + 1] = runner


def attempt_pickoff(base: int, state: GameState, runner: Batter | None,
                    pitcher: Pitcher | None, fielder: Fielder | None,
                    rng: RandomSource,
                    config: SimConfig | None = None) -> PickoffResult:
    """Resolve a pickoff throw to ``base`` (1-3).

    One draw decides between an out, a throwing error (runner takes the next
    base, or scores from third), and no effect.
    """
    if not 1 <= base <= 3 or state.bases[base - 1] is None:
        return PickoffResult(
            success=False, out=False, error=False,
            description=f"No runner on base {base} to pick off.",
        )

    pickoff, error = pickoff_probabilities(runner, pitcher, fielder, config)
    logger.debug(
        "Pickoff attempt at base %d on %s (out p=%.3f, error p=%.3f)",
        base, _runner_name(runner), pickoff, error,
    )

    roll = rng.uniform()
    if roll < pickoff:
        state.bases[base - 1] = None
        state.outs += 1
        return PickoffResult(
            success=True, out=True, error=False,
            description=f"Runner picked off at base {base}",
        )
    if roll < pickoff + error:
        _advance_from(state, base - 1)
        return PickoffResult(
            success=False, out=False, error=True,
            description=f"Pickoff error: runner advances from base {base}",
        )
    return PickoffResult(
        success=False, out=False, error=False,
        description=f"Pickoff attempt at base {base} unsuccessful",
    )
