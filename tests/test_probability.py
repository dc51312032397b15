# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0", "pytest>=7.0"]
# ///
"""Tests for the outcome probability model.

Validates:
  1. The distribution always covers all eight outcomes and sums to 1
  2. Missing rates fall back to league averages
  3. K, BB and HR rates compound multiplicatively against league average
  4. BABIP is averaged and clamped to the league band
  5. Hit types follow the batter's own mix, or the default shape
  6. Situational context moves probability mass in the right direction
  7. Garbage inputs never raise
"""

import logging
import math
import sys
from pathlib import Path

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

import pytest

from config import SimConfig
from engine.probability import (
    Situation,
    clamp01,
    compute_probabilities,
    normalize,
    safe_rate,
)
from models import Baserunning, BattingStats, Batter, Outcome, Pitcher, Rates

HITS = (Outcome.SINGLE, Outcome.DOUBLE, Outcome.TRIPLE)


def make_batter(rates=None, **kwargs):
    return Batter(name="Batter", player_id="b1", rates=rates or Rates(), **kwargs)


def make_pitcher(rates=None):
    return Pitcher(name="Pitcher", player_id="p1", rates=rates or Rates())


def assert_valid(dist):
    assert set(dist) == set(Outcome)
    assert sum(dist.values()) == pytest.approx(1.0)
    for outcome, p in dist.items():
        assert 0.0 <= p <= 1.0, f"{outcome} out of range: {p}"


class TestLeagueFallbacks:
    """Players with no rates produce the league-average distribution."""

    def test_distribution_is_valid(self):
        assert_valid(compute_probabilities(make_batter(), make_pitcher()))

    def test_league_average_components(self):
        dist = compute_probabilities(make_batter(), make_pitcher())
        assert dist[Outcome.K] == pytest.approx(0.22)
        assert dist[Outcome.BB] == pytest.approx(0.08)
        assert dist[Outcome.HR] == pytest.approx(0.03)
        assert dist[Outcome.HBP] == 0.0
        hits = sum(dist[o] for o in HITS)
        assert hits == pytest.approx(0.29 * 0.67)
        assert dist[Outcome.OUT] == pytest.approx(0.71 * 0.67)

    def test_config_overrides_league_average(self):
        cfg = SimConfig(league_k_rate=0.25)
        dist = compute_probabilities(make_batter(), make_pitcher(), config=cfg)
        assert dist[Outcome.K] == pytest.approx(0.25)

    def test_hbp_from_batter_history(self):
        batter = make_batter(PA=100, stats=BattingStats(HBP=5))
        dist = compute_probabilities(batter, make_pitcher())
        assert dist[Outcome.HBP] == pytest.approx(0.05)


class TestCombination:

    def test_strikeout_prone_matchup_compounds(self):
        batter = make_batter(Rates(k_rate=0.30))
        pitcher = make_pitcher(Rates(k_rate=0.30))
        dist = compute_probabilities(batter, pitcher)
        assert dist[Outcome.K] == pytest.approx(0.30 * 0.30 / 0.22)
        assert dist[Outcome.K] > 0.30

    def test_contact_hitter_vs_strikeout_pitcher(self):
        batter = make_batter(Rates(k_rate=0.11))
        pitcher = make_pitcher(Rates(k_rate=0.22))
        dist = compute_probabilities(batter, pitcher)
        assert dist[Outcome.K] == pytest.approx(0.11)

    def test_babip_clamped_to_band(self):
        high = compute_probabilities(make_batter(Rates(babip=0.50)),
                                     make_pitcher(Rates(babip=0.50)))
        assert sum(high[o] for o in HITS) == pytest.approx(0.33 * 0.67)
        low = compute_probabilities(make_batter(Rates(babip=0.10)),
                                    make_pitcher(Rates(babip=0.10)))
        assert sum(low[o] for o in HITS) == pytest.approx(0.27 * 0.67)

    def test_extreme_rates_renormalize(self, caplog):
        batter = make_batter(Rates(k_rate=1.0))
        pitcher = make_pitcher(Rates(k_rate=1.0))
        with caplog.at_level(logging.WARNING, logger="engine.probability"):
            dist = compute_probabilities(batter, pitcher)
        assert_valid(dist)
        assert max(dist, key=dist.get) == Outcome.K
        assert dist[Outcome.OUT] == 0.0
        assert any("K" in r.getMessage() for r in caplog.records)


class TestHitShape:

    def test_batter_hit_mix(self):
        batter = make_batter(stats=BattingStats(singles=60, doubles=30, triples=10))
        dist = compute_probabilities(batter, make_pitcher())
        assert dist[Outcome.SINGLE] / dist[Outcome.DOUBLE] == pytest.approx(2.0)
        assert dist[Outcome.TRIPLE] / dist[Outcome.DOUBLE] == pytest.approx(1 / 3)

    def test_default_shape_without_hits(self):
        dist = compute_probabilities(make_batter(), make_pitcher())
        assert dist[Outcome.SINGLE] / dist[Outcome.DOUBLE] == pytest.approx(3.5)
        assert dist[Outcome.DOUBLE] / dist[Outcome.TRIPLE] == pytest.approx(2.0)

    def test_pure_power_hitter_never_singles(self):
        batter = make_batter(stats=BattingStats(doubles=20, triples=0, singles=0))
        dist = compute_probabilities(batter, make_pitcher())
        assert dist[Outcome.SINGLE] == 0.0
        assert dist[Outcome.TRIPLE] == 0.0
        assert dist[Outcome.DOUBLE] > 0.0


class TestSituation:

    def base(self):
        return compute_probabilities(make_batter(), make_pitcher())

    def test_no_situation_matches_default(self):
        assert compute_probabilities(make_batter(), make_pitcher(), Situation()) == \
            pytest.approx(self.base())

    def test_risp_moves_hits_to_outs(self):
        dist = compute_probabilities(make_batter(), make_pitcher(), Situation(risp=True))
        base = self.base()
        assert_valid(dist)
        assert dist[Outcome.OUT] > base[Outcome.OUT]
        for o in HITS:
            assert dist[o] < base[o]
        assert dist[Outcome.K] == pytest.approx(base[Outcome.K])

    def test_late_and_close_moves_hits_to_outs(self):
        dist = compute_probabilities(make_batter(), make_pitcher(),
                                     Situation(late_and_close=True))
        base = self.base()
        assert dist[Outcome.OUT] > base[Outcome.OUT]
        assert dist[Outcome.SINGLE] < base[Outcome.SINGLE]

    def test_two_outs_raises_strikeouts(self):
        dist = compute_probabilities(make_batter(), make_pitcher(), Situation(two_outs=True))
        base = self.base()
        assert dist[Outcome.K] > base[Outcome.K]
        assert dist[Outcome.BB] < base[Outcome.BB]
        assert dist[Outcome.HR] == pytest.approx(base[Outcome.HR])

    def test_all_situations_stay_valid(self):
        assert_valid(compute_probabilities(
            make_batter(), make_pitcher(),
            Situation(risp=True, late_and_close=True, two_outs=True),
        ))


class TestGarbageInputs:
    """Rates that bypass validation are sanitized, never raised on."""

    def garbage_batter(self, **rates):
        return Batter.model_construct(
            name="Junk", player_id="junk", PA=0, stats=BattingStats(),
            rates=Rates.model_construct(**rates), baserunning=Baserunning(),
        )

    def test_non_finite_rates_fall_back(self):
        batter = self.garbage_batter(k_rate=float("nan"), bb_rate=float("inf"),
                                     hr_rate=None, babip=None)
        dist = compute_probabilities(batter, make_pitcher())
        assert_valid(dist)
        assert dist[Outcome.K] == pytest.approx(0.22)
        assert dist[Outcome.BB] == pytest.approx(0.08)

    def test_negative_rate_clamped_to_zero(self):
        batter = self.garbage_batter(k_rate=-0.5, bb_rate=None, hr_rate=None, babip=None)
        dist = compute_probabilities(batter, make_pitcher())
        assert_valid(dist)
        assert dist[Outcome.K] == 0.0

    def test_rate_above_one_clamped(self):
        batter = self.garbage_batter(k_rate=None, bb_rate=None, hr_rate=2.0, babip=1.7)
        dist = compute_probabilities(batter, make_pitcher())
        assert_valid(dist)


class TestHelpers:

    def test_clamp01(self):
        assert clamp01(0.5) == 0.5
        assert clamp01(-1) == 0.0
        assert clamp01(3) == 1.0
        assert clamp01(float("nan")) == 0.0
        assert clamp01(None) == 0.0
        assert clamp01("0.3") == 0.0

    def test_safe_rate(self):
        assert safe_rate(None, 0.2) == 0.2
        assert safe_rate(float("inf"), 0.2) == 0.2
        assert safe_rate(0.4, 0.2) == 0.4
        assert safe_rate("bad", 0.2) == 0.2

    def test_normalize_fills_missing_outcomes(self):
        dist = normalize({Outcome.K: 1.0, Outcome.BB: 1.0})
        assert dist[Outcome.K] == pytest.approx(0.5)
        assert dist[Outcome.BB] == pytest.approx(0.5)
        assert dist[Outcome.TRIPLE] == 0.0

    def test_normalize_empty_is_certain_out(self, caplog):
        with caplog.at_level(logging.WARNING, logger="engine.probability"):
            dist = normalize({})
        assert dist[Outcome.OUT] == 1.0
        assert math.fsum(dist.values()) == 1.0
        assert "no mass" in caplog.text
