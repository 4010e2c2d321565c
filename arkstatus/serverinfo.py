"""Immutable records built from A2S answers."""

import re
from dataclasses import dataclass, field
from typing import Any, Optional

_VERSION_RE = re.compile(r"\(v([^)]+)\)")


@dataclass(frozen=True)
class QueryTarget:
    host: str
    port: int

    def __str__(self) -> str:
        return f"{self.host}:{self.port}"


@dataclass(frozen=True)
class ArkPlayer:
    """A logged-in player as reported by A2S_PLAYER.

    `steam_name` is the Steam name shown above the in-game name; the in-game name
    and Steam id are not exposed by the query protocol and stay None.
    `elapsed_time` is seconds since the player connected, as of the query.
    """

    steam_name: str
    elapsed_time: float
    player_name: Optional[str] = None
    steam_id: Optional[str] = None


@dataclass(frozen=True)
class ArkServerInfo:
    """One live server, as seen by a single successful query."""

    host: str
    port: int
    name: Optional[str]
    version: Optional[str]
    map: Optional[str]
    max_players: Optional[int]
    players: tuple = ()
    day_number: Optional[int] = None
    mode: Optional[str] = None
    password_protected: Optional[bool] = None
    rules: dict = field(default_factory=dict, compare=False, repr=False)

    @classmethod
    def from_a2s(cls, target: QueryTarget, info: Any, players=(), rules: Optional[dict] = None):
        name, version = split_server_name(getattr(info, "server_name", None))
        roster = tuple(
            ArkPlayer(steam_name=p.name, elapsed_time=p.duration)
            for p in (players or [])
            if p is not None and (p.name or "").strip()
        )
        return cls(
            host=target.host,
            port=target.port,
            name=name,
            version=version,
            map=getattr(info, "map_name", None),
            max_players=getattr(info, "max_players", None),
            players=roster,
            day_number=_day_number(rules),
            mode=_session_mode(rules),
            password_protected=getattr(info, "password_protected", None),
            rules=dict(rules or {}),
        )


def split_server_name(raw):
    """'NA-PVE-Official-Aberration409 - (v281.110)' -> ('NA-PVE-Official-Aberration409', '281.110')"""
    if not raw:
        return None, None
    if " - " not in raw:
        return raw, None
    name, tail = raw.split(" - ", 1)
    m = _VERSION_RE.search(tail)
    return name, (m.group(1) if m else tail.strip())


def _to_int_or_none(v):
    if v is None:
        return None
    try:
        return int(str(v).strip())
    except ValueError:
        return None


def _day_number(rules):
    if not rules:
        return None
    return _to_int_or_none(rules.get("DayTime_s"))


def _session_mode(rules):
    if not rules:
        return None
    pve = _to_int_or_none(rules.get("SESSIONISPVE_i"))
    if pve is None:
        return None
    return "PVE" if pve else "PVP"
