# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Outcome probability model.

Turns a batter's and a pitcher's season rates into a distribution over the
eight plate-appearance outcomes. The K, BB and HR rates of the two players
are combined against league average (log5-style) rather than averaged, so two
extreme players compound: a strikeout-prone hitter facing a strikeout pitcher
strikes out more often than either does on average.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from config import DEFAULT_CONFIG, SimConfig
from models import Batter, Outcome, Pitcher

logger = logging.getLogger(__name__)

Distribution = dict[Outcome, float]


@dataclass(frozen=True)
class Situation:
    """Game context for the current plate appearance."""
    risp: bool = False  # runner on 2nd or 3rd
    late_and_close: bool = False
    two_outs: bool = False


def clamp01(x, label: str = "") -> float:
    """Clamp to [0, 1]. NaN, None and non-numbers become 0."""
    if isinstance(x, bool) or not isinstance(x, (int, float)) or math.isnan(x):
        if label:
            logger.warning("Replaced non-numeric value for %s: %r -> 0", label, x)
        return 0.0
    if x < 0:
        if label:
            logger.warning("Clamped negative value for %s: %s -> 0", label, x)
        return 0.0
    if x > 1:
        if label:
            logger.warning("Clamped value >1 for %s: %s -> 1", label, x)
        return 1.0
    return float(x)


def safe_rate(rate: Optional[float], fallback: float) -> float:
    """Return ``rate`` unless it is missing or non-finite."""
    if rate is None or isinstance(rate, bool):
        return fallback
    try:
        value = float(rate)
    except (TypeError, ValueError):
        return fallback
    if not math.isfinite(value):
        return fallback
    return value


def _combine(batter_rate: float, pitcher_rate: float, league: float) -> float:
    if league <= 0:
        return (batter_rate + pitcher_rate) / 2
    return batter_rate * pitcher_rate / league


def _count(value) -> float:
    try:
        x = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(x) or x < 0:
        return 0.0
    return x


def normalize(dist: dict[Outcome, float]) -> Distribution:
    """Clamp every outcome to [0, 1] and rescale so the total is 1.

    Missing outcomes are filled with 0. A distribution with no mass at all
    collapses to a certain out.
    """
    result = {o: clamp01(dist.get(o, 0.0), o.value) for o in Outcome}
    total = sum(result.values())
    if total <= 0:
        logger.warning("Distribution has no mass; defaulting to an out")
        return {o: (1.0 if o is Outcome.OUT else 0.0) for o in Outcome}
    return {o: p / total for o, p in result.items()}


def _shift(dist: dict[Outcome, float], sources: tuple[Outcome, ...],
           target: Outcome, fraction: float) -> None:
    """Move ``fraction`` of the mass in ``sources`` onto ``target``."""
    if fraction <= 0:
        return
    for o in sources:
        moved = dist[o] * fraction
        dist[o] -= moved
        dist[target] += moved


def compute_probabilities(batter: Batter, pitcher: Pitcher,
                          situation: Situation | None = None,
                          config: SimConfig | None = None) -> Distribution:
    """Compute the outcome distribution for one batter-pitcher matchup.

    Never raises for bad statistics: missing or non-finite rates fall back
    to league average and every component is clamped before the final
    renormalization.
    """
    cfg = config or DEFAULT_CONFIG
    b_rates = batter.rates
    p_rates = pitcher.rates
    b_stats = batter.stats

    k_b = clamp01(safe_rate(b_rates.k_rate, cfg.league_k_rate), "batter.k_rate")
    k_p = clamp01(safe_rate(p_rates.k_rate, cfg.league_k_rate), "pitcher.k_rate")
    bb_b = clamp01(safe_rate(b_rates.bb_rate, cfg.league_bb_rate), "batter.bb_rate")
    bb_p = clamp01(safe_rate(p_rates.bb_rate, cfg.league_bb_rate), "pitcher.bb_rate")
    hr_b = clamp01(safe_rate(b_rates.hr_rate, cfg.league_hr_rate), "batter.hr_rate")
    hr_p = clamp01(safe_rate(p_rates.hr_rate, cfg.league_hr_rate), "pitcher.hr_rate")
    babip_b = clamp01(safe_rate(b_rates.babip, cfg.league_babip), "batter.babip")
    babip_p = clamp01(safe_rate(p_rates.babip, cfg.league_babip), "pitcher.babip")

    k = _combine(k_b, k_p, cfg.league_k_rate)
    bb = _combine(bb_b, bb_p, cfg.league_bb_rate)
    hr = _combine(hr_b, hr_p, cfg.league_hr_rate)

    pa = _count(batter.PA)
    hbp = _count(b_stats.HBP) / pa if pa > 0 else 0.0

    balls_in_play = max(0.0, 1.0 - (k + bb + hbp + hr))

    babip = max(cfg.babip_floor, min(cfg.babip_ceiling, (babip_b + babip_p) / 2))
    hits_in_play = babip * balls_in_play
    outs_in_play = balls_in_play - hits_in_play

    singles = _count(b_stats.singles)
    doubles = _count(b_stats.doubles)
    triples = _count(b_stats.triples)
    total_hits = singles + doubles + triples
    if total_hits > 0:
        shares = (singles / total_hits, doubles / total_hits, triples / total_hits)
    else:
        shares = (cfg.default_single_share, cfg.default_double_share,
                  cfg.default_triple_share)

    dist = {
        Outcome.K: k,
        Outcome.BB: bb,
        Outcome.HBP: hbp,
        Outcome.HR: hr,
        Outcome.SINGLE: hits_in_play * shares[0],
        Outcome.DOUBLE: hits_in_play * shares[1],
        Outcome.TRIPLE: hits_in_play * shares[2],
        Outcome.OUT: outs_in_play,
    }

    if situation is not None:
        hits = (Outcome.SINGLE, Outcome.DOUBLE, Outcome.TRIPLE)
        if situation.risp:
            _shift(dist, hits, Outcome.OUT, cfg.risp_out_shift)
        if situation.late_and_close:
            _shift(dist, hits, Outcome.OUT, cfg.late_close_out_shift)
        if situation.two_outs:
            _shift(dist, (Outcome.BB,) + hits, Outcome.K, cfg.two_out_k_shift)

    return normalize(dist)
