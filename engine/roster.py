# /// script
# requires-python = ">=3.12"
# dependencies = ["pydantic>=2.0"]
# ///
"""Roster construction from selected player ids."""

from __future__ import annotations

from collections.abc import Iterable

from models import Batter, Fielder, Pitcher, Roster


class RosterError(ValueError):
    """A roster that cannot be played: missing, duplicated, or overlapping ids."""


def build_roster(lineup_ids: list[str], pitcher_id: str,
                 batters: Iterable[Batter], pitchers: Iterable[Pitcher],
                 fielders: Iterable[Fielder] = (),
                 team_name: str = "") -> Roster:
    """Pick a batting order and starting pitcher out of full stat pools.

    Raises:
        RosterError: for an empty lineup, an id not found in its pool, a
            duplicate lineup id, or a pitcher who also bats in the lineup.
    """
    if not lineup_ids:
        raise RosterError("Lineup is empty")

    by_id = {b.player_id: b for b in batters}
    lineup = []
    seen: set[str] = set()
    for pid in lineup_ids:
        if pid not in by_id:
            raise RosterError(f"Lineup player not found: {pid}")
        if pid in seen:
            raise RosterError(f"Duplicate player in lineup: {pid}")
        seen.add(pid)
        lineup.append(by_id[pid])

    pitcher = next((p for p in pitchers if p.player_id == pitcher_id), None)
    if pitcher is None:
        raise RosterError(f"Starting pitcher not found: {pitcher_id}")
    if pitcher_id in seen:
        raise RosterError(f"Pitcher also appears in lineup: {pitcher_id}")

    return Roster(team_name=team_name, lineup=lineup, pitcher=pitcher,
                  fielders=list(fielders))
