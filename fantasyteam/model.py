"""Players, queries, solutions and the text formats they are read from and written to."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from enum import Enum
from functools import cmp_to_key
from pathlib import Path
from typing import Iterable, Sequence

_EFFICIENCY_EXPONENT = 0.35
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Position(Enum):
    """Field position of a player, in the order a team sheet lists them."""

    POR = "por"
    DEF = "def"
    MIG = "mig"
    DAV = "dav"


@dataclass(frozen=True)
class Player:
    """A player with a price and the points scored so far."""

    name: str
    position: Position
    price: int
    team: str
    points: int


@dataclass(frozen=True)
class Query:
    """Team formation and budget constraints."""

    defenders: int
    midfielders: int
    forwards: int
    total_limit: int
    player_limit: int
    goalkeepers: int = 1

    def required(self, position: Position) -> int:
        """Number of players the formation needs in ``position``."""
        return {
            Position.POR: self.goalkeepers,
            Position.DEF: self.defenders,
            Position.MIG: self.midfielders,
            Position.DAV: self.forwards,
        }[position]


@dataclass(frozen=True)
class PlayerDatabase:
    """Players grouped by position, each group sorted by efficiency."""

    by_position: dict[Position, tuple[Player, ...]] = field(default_factory=dict)

    @classmethod
    def from_players(cls, players: Iterable[Player]) -> PlayerDatabase:
        groups: dict[Position, list[Player]] = {position: [] for position in Position}
        for player in players:
            groups[player.position].append(player)
        return cls(
            {position: tuple(sort_by_efficiency(group)) for position, group in groups.items()}
        )

    def players(self, position: Position) -> tuple[Player, ...]:
        """The sorted players that play in ``position``."""
        return self.by_position.get(position, ())


@dataclass(frozen=True)
class Solution:
    """A chosen team with its total points, total price and search time in seconds."""

    players: tuple[Player, ...]
    time: float
    points: int
    price: int

    @classmethod
    def from_players(cls, players: Iterable[Player], time: float = 0.0) -> Solution:
        team = tuple(players)
        return cls(
            players=team,
            time=time,
            points=sum(player.points for player in team),
            price=sum(player.price for player in team),
        )


def _efficiency(player: Player) -> float:
    scale = player.price**_EFFICIENCY_EXPONENT if player.price > 0 else 0.0
    if scale == 0.0:
        return math.copysign(math.inf, player.points)
    return player.points / scale


def more_efficient(a: Player, b: Player) -> bool:
    """True when ``a`` ranks before ``b``.

    Players with points rank by points over price to the power 0.35; players
    without points come last, the cheaper first.
    """
    if a.points == 0 and b.points == 0:
        return a.price < b.price
    if a.points == 0:
        return False
    if b.points == 0:
        return True
    return _efficiency(a) > _efficiency(b)


def _compare(a: Player, b: Player) -> int:
    if more_efficient(a, b):
        return -1
    if more_efficient(b, a):
        return 1
    return 0


def sort_by_efficiency(players: Iterable[Player]) -> list[Player]:
    """Players ordered from most to least efficient."""
    return sorted(players, key=cmp_to_key(_compare))


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"expected an integer, got {text!r}")
    return int(match.group(1))


def parse_players(text: str, player_limit: int) -> list[Player]:
    """Parse ``name;position;price;team;points`` lines.

    Reading stops at the first line with an empty name. Players dearer than
    ``player_limit`` or with an unknown position are left out.
    """
    players = []
    for line in text.splitlines():
        fields = line.split(";")
        if not fields[0]:
            break
        if len(fields) < 5:
            raise ValueError(f"malformed player line: {line!r}")
        name, position_code, price_text, team, points_text = fields[:5]
        price = _leading_int(price_text)
        points = _leading_int(points_text)
        if price > player_limit:
            continue
        try:
            position = Position(position_code)
        except ValueError:
            continue
        players.append(Player(name, position, price, team, points))
    return players


def read_players(path: str | Path, player_limit: int) -> list[Player]:
    """Read a player file; see :func:`parse_players`."""
    return parse_players(Path(path).read_text(encoding="utf-8"), player_limit)


def parse_query(text: str) -> Query:
    """Parse ``defenders midfielders forwards total_limit player_limit``."""
    tokens = text.split()
    if len(tokens) < 5:
        raise ValueError("a query needs five integers")
    defenders, midfielders, forwards, total_limit, player_limit = (
        int(token) for token in tokens[:5]
    )
    return Query(defenders, midfielders, forwards, total_limit, player_limit)


def read_query(path: str | Path) -> Query:
    """Read a query file; see :func:`parse_query`."""
    return parse_query(Path(path).read_text(encoding="utf-8"))


def format_solution(solution: Solution) -> str:
    """Render a solution as the time, one line per position, points and price."""
    names: dict[Position, list[str]] = {position: [] for position in Position}
    for player in solution.players:
        names[player.position].append(player.name)
    lines = [f"{solution.time:.1f}"]
    lines.extend(f"{position.name}: {';'.join(names[position])}" for position in Position)
    lines.append(f"Punts: {solution.points}")
    lines.append(f"Preu: {solution.price}")
    return "\n".join(lines) + "\n"


def write_solution(path: str | Path, solution: Solution) -> None:
    """Write ``solution`` to ``path``, replacing what was there."""
    Path(path).write_text(format_solution(solution), encoding="utf-8")


def _names(players: Sequence[Player]) -> list[str]:
    return [player.name for player in players]