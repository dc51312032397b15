# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Data models for the at-bat simulator.

Player records arrive already normalized from season statistics. Every rate
is either ``None`` (not enough sample to compute it) or a value in [0, 1];
the simulation engine substitutes league-average constants for the gaps.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Outcome(str, Enum):
    K = "K"
    BB = "BB"
    HBP = "HBP"
    HR = "HR"
    SINGLE = "1B"
    DOUBLE = "2B"
    TRIPLE = "3B"
    OUT = "Out"

    @property
    def bases(self) -> int:
        """Bases awarded to the batter (0 for outs)."""
        return _BASES_AWARDED[self]


_BASES_AWARDED = {
    Outcome.K: 0,
    Outcome.OUT: 0,
    Outcome.BB: 1,
    Outcome.HBP: 1,
    Outcome.SINGLE: 1,
    Outcome.DOUBLE: 2,
    Outcome.TRIPLE: 3,
    Outcome.HR: 4,
}

HIT_OUTCOMES = (Outcome.SINGLE, Outcome.DOUBLE, Outcome.TRIPLE, Outcome.HR)


class Half(str, Enum):
    TOP = "TOP"
    BOTTOM = "BOTTOM"


class BattedBall(str, Enum):
    GROUNDOUT = "Groundout"
    FLYOUT = "Flyout"
    LINEOUT = "Lineout"
    POPOUT = "Popout"


class Position(str, Enum):
    P = "P"
    C = "C"
    FIRST_BASE = "1B"
    SECOND_BASE = "2B"
    THIRD_BASE = "3B"
    SS = "SS"
    LF = "LF"
    CF = "CF"
    RF = "RF"


def _rate(num: float, denom: float) -> float | None:
    if denom <= 0:
        return None
    return max(0.0, min(1.0, num / denom))


def _num(value) -> float:
    """Coerce a raw table cell to a number (blank/garbage -> 0)."""
    try:
        x = float(value)
    except (TypeError, ValueError):
        return 0.0
    return x if x == x else 0.0


def _optional_num(value) -> float | None:
    if value is None or value == "":
        return None
    try:
        x = float(value)
    except (TypeError, ValueError):
        return None
    return x if x == x else None


# ---------------------------------------------------------------------------
# Shared rate block
# ---------------------------------------------------------------------------

class Rates(BaseModel):
    """Per-PA rates. None means the sample was too small to compute."""
    k_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0, description="Strikeouts per PA")
    bb_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0, description="Walks per PA")
    hr_rate: Optional[float] = Field(default=None, ge=0.0, le=1.0, description="Home runs per PA")
    babip: Optional[float] = Field(default=None, ge=0.0, le=1.0,
                                   description="Batting average on balls in play")


# ---------------------------------------------------------------------------
# Batters
# ---------------------------------------------------------------------------

class BattingStats(BaseModel):
    H: int = Field(default=0, ge=0)
    HR: int = Field(default=0, ge=0)
    BB: int = Field(default=0, ge=0)
    SO: int = Field(default=0, ge=0)
    SF: int = Field(default=0, ge=0)
    HBP: int = Field(default=0, ge=0)
    singles: int = Field(default=0, ge=0)
    doubles: int = Field(default=0, ge=0)
    triples: int = Field(default=0, ge=0)


class Baserunning(BaseModel):
    """Baserunning profile. Speed 50 is league average."""
    speed: Optional[float] = Field(default=None, ge=0.0, le=100.0,
                                   description="Sprint speed rating (0-100)")
    runs_baserunning: Optional[float] = Field(default=None, description="Baserunning runs above average")


class Batter(BaseModel):
    name: str
    player_id: str
    PA: int = Field(default=0, ge=0)
    stats: BattingStats = Field(default_factory=BattingStats)
    rates: Rates = Field(default_factory=Rates)
    baserunning: Baserunning = Field(default_factory=Baserunning)

    @classmethod
    def from_counts(cls, name: str, player_id: str, *, PA=0, AB=0, H=0,
                    HR=0, BB=0, SO=0, SF=0, HBP=0, doubles=0, triples=0,
                    runs_baserunning=None) -> Batter:
        """Build a batter from season counting stats, deriving the rates."""
        pa = int(_num(PA))
        ab = int(_num(AB))
        h = int(_num(H))
        hr = int(_num(HR))
        bb = int(_num(BB))
        so = int(_num(SO))
        sf = int(_num(SF))
        hbp = int(_num(HBP))
        d2 = int(_num(doubles))
        d3 = int(_num(triples))
        singles = max(0, h - d2 - d3 - hr)

        runs_br = _optional_num(runs_baserunning)
        if runs_br is not None:
            speed = max(0.0, min(100.0, 50 + runs_br * 10))
        else:
            # No baserunning data: more triples usually means a faster runner
            speed = max(30.0, min(80.0, 50 + d3 * 5 + d2 * 1))

        return cls(
            name=name,
            player_id=player_id,
            PA=pa,
            stats=BattingStats(
                H=h, HR=hr, BB=bb, SO=so, SF=sf, HBP=hbp,
                singles=singles, doubles=d2, triples=d3,
            ),
            rates=Rates(
                k_rate=_rate(so, pa),
                bb_rate=_rate(bb, pa),
                hr_rate=_rate(hr, pa),
                babip=_rate(h - hr, ab - so - hr + sf),
            ),
            baserunning=Baserunning(speed=speed, runs_baserunning=runs_br),
        )


# ---------------------------------------------------------------------------
# Pitchers
# ---------------------------------------------------------------------------

class PitchingStats(BaseModel):
    IP: float = Field(default=0.0, ge=0.0)
    H: int = Field(default=0, ge=0)
    HR: int = Field(default=0, ge=0)
    BB: int = Field(default=0, ge=0)
    SO: int = Field(default=0, ge=0)
    HBP: int = Field(default=0, ge=0)
    pickoffs: int = Field(default=0, ge=0)


class Pitcher(BaseModel):
    name: str
    player_id: str
    TBF: int = Field(default=0, ge=0)
    stats: PitchingStats = Field(default_factory=PitchingStats)
    rates: Rates = Field(default_factory=Rates)

    @classmethod
    def from_counts(cls, name: str, player_id: str, *, IP=0, TBF=0, H=0,
                    HR=0, BB=0, SO=0, HBP=0, pickoffs=0) -> Pitcher:
        """Build a pitcher from season counting stats, deriving the rates."""
        tbf = int(_num(TBF))
        h = int(_num(H))
        hr = int(_num(HR))
        bb = int(_num(BB))
        so = int(_num(SO))
        hbp = int(_num(HBP))
        bip = tbf - so - hr - bb - hbp
        return cls(
            name=name,
            player_id=player_id,
            TBF=tbf,
            stats=PitchingStats(
                IP=_num(IP), H=h, HR=hr, BB=bb, SO=so, HBP=hbp,
                pickoffs=int(_num(pickoffs)),
            ),
            rates=Rates(
                k_rate=_rate(so, tbf),
                bb_rate=_rate(bb, tbf),
                hr_rate=_rate(hr, tbf),
                babip=_rate(h - hr, bip),
            ),
        )


# ---------------------------------------------------------------------------
# Fielders
# ---------------------------------------------------------------------------

class FieldingStats(BaseModel):
    G: int = 0
    Inn: float = Field(default=0.0, description="Innings in the field")
    PO: int = Field(default=0, ge=0)
    A: int = Field(default=0, ge=0)
    E: int = Field(default=0, ge=0)
    DP: int = Field(default=0, ge=0)
    FP: Optional[float] = Field(default=None, ge=0.0, le=1.0, description="Fielding percentage")
    RF: Optional[float] = Field(default=None, ge=0.0, description="Range factor per nine innings")
    TZ: Optional[float] = Field(default=None, description="Total zone runs saved")
    # Catcher only
    sb_allowed: int = Field(default=0, ge=0, description="Stolen bases allowed")
    cs: int = Field(default=0, ge=0, description="Runners caught stealing")
    cs_pct: Optional[float] = Field(default=None, ge=0.0, le=100.0,
                                    description="Caught-stealing percentage (0-100)")
    pickoffs: int = Field(default=0, ge=0)
    arm_strength: Optional[float] = Field(default=None, ge=0.0, le=100.0,
                                          description="Catcher arm rating (0-100)")
    PB: int = Field(default=0, ge=0, description="Passed balls allowed")

    @property
    def chances(self) -> int:
        return self.PO + self.A + self.E


class Fielder(BaseModel):
    name: str = ""
    player_id: str = ""
    position: str
    stats: FieldingStats = Field(default_factory=FieldingStats)

    @classmethod
    def from_counts(cls, name: str, player_id: str, position: str, *,
                    G=0, Inn=0, PO=0, A=0, E=0, DP=0, FP=None, RF=None,
                    TZ=None, sb_allowed=0, cs=0, cs_pct=None, pickoffs=0,
                    PB=0) -> Fielder:
        """Build a fielder from a raw fielding line.

        Arm strength is only meaningful for catchers: it is derived from
        caught-stealing percentage when present (50 = league-average 25%),
        otherwise from CS / (CS + SB), otherwise left at 50.
        """
        sb = int(_num(sb_allowed))
        caught = int(_num(cs))
        pct = _optional_num(cs_pct)
        if pct is not None:
            arm = max(0.0, min(100.0, 50 + (pct - 25) * 2))
        elif sb > 0 or caught > 0:
            cs_rate = caught / (caught + sb)
            arm = max(20.0, min(80.0, 50 + (cs_rate - 0.25) * 100))
        else:
            arm = 50.0

        return cls(
            name=name,
            player_id=player_id,
            position=position or "",
            stats=FieldingStats(
                G=int(_num(G)), Inn=_num(Inn), PO=int(_num(PO)),
                A=int(_num(A)), E=int(_num(E)), DP=int(_num(DP)),
                FP=_optional_num(FP), RF=_optional_num(RF),
                TZ=_optional_num(TZ), sb_allowed=sb, cs=caught,
                cs_pct=pct, pickoffs=int(_num(pickoffs)),
                arm_strength=arm, PB=int(_num(PB)),
            ),
        )


# ---------------------------------------------------------------------------
# Rosters
# ---------------------------------------------------------------------------

class Roster(BaseModel):
    """A playable team: batting order, starting pitcher, and defense."""
    team_name: str = ""
    lineup: list[Batter]
    pitcher: Pitcher
    fielders: list[Fielder] = Field(default_factory=list)

    def fielder_at(self, position: str) -> Fielder | None:
        for f in self.fielders:
            if f.position == position:
                return f
        return None
