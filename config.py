# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Centralized tuning constants for the simulator.

Every fallback and coefficient the engine uses lives here, once. The values
come from playtesting rather than first principles, so all of them can be
overridden from a JSON file named by the ``BASEBALL_SIM_CONFIG`` environment
variable.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

SIM_CONFIG_ENV = "BASEBALL_SIM_CONFIG"


class SimConfig(BaseModel):
    """Tunable parameters for probability, at-bat, and baserunning models."""

    # League averages used when a rate is missing
    league_k_rate: float = Field(default=0.22, ge=0.0, le=1.0)
    league_bb_rate: float = Field(default=0.08, ge=0.0, le=1.0)
    league_hr_rate: float = Field(default=0.03, ge=0.0, le=1.0)
    league_babip: float = Field(default=0.29, ge=0.0, le=1.0)
    babip_floor: float = Field(default=0.27, ge=0.0, le=1.0)
    babip_ceiling: float = Field(default=0.33, ge=0.0, le=1.0)
    # Hit-type shape when a batter has no recorded hits
    default_single_share: float = 0.70
    default_double_share: float = 0.20
    default_triple_share: float = 0.10

    # Situational nudges: fraction of hit mass moved to Out
    risp_out_shift: float = Field(default=0.02, ge=0.0, le=0.5)
    late_close_out_shift: float = Field(default=0.01, ge=0.0, le=0.5)
    two_out_k_shift: float = Field(default=0.01, ge=0.0, le=0.5)
    late_inning: int = 8
    close_game_margin: int = 2

    # Pitcher fatigue
    fatigue_threshold: int = Field(default=18, ge=0)
    fatigue_step: float = Field(default=0.005, ge=0.0)
    fatigue_cap: float = Field(default=0.05, ge=0.0)

    # Fielding
    error_fallback: float = Field(default=0.01, ge=0.0, le=1.0)
    double_play_base: float = Field(default=0.25, ge=0.0, le=1.0)
    double_play_cap: float = Field(default=0.60, ge=0.0, le=1.0)
    triple_play_base: float = Field(default=0.01, ge=0.0, le=1.0)
    triple_play_cap: float = Field(default=0.05, ge=0.0, le=1.0)
    # Fielding bonuses: per range-factor point above league, per total-zone
    # run, and flat for elite fielding percentage
    double_play_range_bonus: float = 0.05
    double_play_zone_bonus: float = 0.02
    double_play_elite_bonus: float = 0.10
    triple_play_range_bonus: float = 0.005
    triple_play_zone_bonus: float = 0.002
    triple_play_elite_bonus: float = 0.01
    league_range_factor: float = 4.5
    default_fielding_pct: float = 0.985
    elite_fielding_pct: float = 0.995
    passed_ball_rate: float = Field(default=0.005, ge=0.0, le=1.0)
    elite_passed_ball_rate: float = Field(default=0.001, ge=0.0, le=1.0)
    # Catchers with innings behind the plate scale the rate by their
    # passed balls per nine against league average, within the factor band
    league_passed_balls_per_nine: float = Field(default=0.05, gt=0.0)
    passed_ball_factor_floor: float = Field(default=0.25, ge=0.0)
    passed_ball_factor_ceiling: float = Field(default=3.0, ge=0.0)

    # Baserunning on hits
    extra_base_speed: float = 70.0
    extra_base_chance: float = Field(default=0.15, ge=0.0, le=1.0)
    score_from_first_value: float = 2.0
    score_from_first_chance: float = Field(default=0.25, ge=0.0, le=1.0)

    # Steals and pickoffs
    steal_second_rate: float = 0.6
    steal_third_rate: float = 0.3
    steal_home_rate: float = 0.1
    steal_third_penalty: float = 0.2
    steal_home_penalty: float = 0.4
    steal_floor: float = 0.05
    steal_ceiling: float = 0.95
    pickoff_rate: float = 0.05
    pickoff_floor: float = 0.01
    pickoff_ceiling: float = 0.15
    pickoff_error_rate: float = 0.1
    pickoff_error_floor: float = 0.01
    pickoff_error_ceiling: float = 0.2
    average_speed: float = 50.0
    average_arm: float = 50.0

    # Game driver safety valves
    max_plate_appearances: int = Field(default=200, ge=1)
    max_innings: int = Field(default=15, ge=9)


DEFAULT_CONFIG = SimConfig()


def get_config_path() -> Path | None:
    """Return the override file named by the environment, if any."""
    value = os.environ.get(SIM_CONFIG_ENV, "")
    return Path(value) if value else None


def load_config(path: Path | str | None = None) -> SimConfig:
    """Load tunables, falling back to the defaults when no file is given.

    Raises:
        ValueError: if the file is not valid JSON or a field is out of range.
        OSError: if the file cannot be read.
    """
    p = Path(path) if path is not None else get_config_path()
    if p is None:
        return DEFAULT_CONFIG
    with open(p) as f:
        try:
            overrides = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Config file {p} is not valid JSON: {e}") from e
    try:
        config = SimConfig.model_validate(overrides)
    except ValidationError as e:
        raise ValueError(f"Invalid simulator config in {p}: {e}") from e
    logger.info("Loaded simulator config overrides from %s", p)
    return config
