"""Exhaustive team search: try every formation-valid team within the budget."""

from __future__ import annotations

import argparse
import time
from typing import Iterator, Sequence

from fantasyteam.model import (
    Player,
    PlayerDatabase,
    Position,
    Query,
    Solution,
    read_players,
    read_query,
    write_solution,
)

_POSITIONS = tuple(Position)


def exhaustive_search(database: PlayerDatabase, query: Query) -> Iterator[Solution]:
    """Yield each team that scores more points than every team yielded before it.

    Teams are explored position by position (goalkeeper, defenders,
    midfielders, forwards), taking players in the database's efficiency
    order and never letting the total price exceed ``query.total_limit``.
    A team is only reported when its points are strictly positive and
    strictly above the best found so far, so the last solution yielded is
    the best team.
    """
    if any(query.required(position) < 0 for position in _POSITIONS):
        return

    start = time.process_time()
    best_points = 0
    chosen: list[Player] = []

    def search(depth: int, count: int, first: int, price: int, points: int) -> Iterator[Solution]:
        nonlocal best_points
        position = _POSITIONS[depth]
        if count == query.required(position):
            if depth + 1 < len(_POSITIONS):
                yield from search(depth + 1, 0, 0, price, points)
            elif points > best_points:
                best_points = points
                yield Solution(
                    players=tuple(chosen),
                    time=time.process_time() - start,
                    points=points,
                    price=price,
                )
            return

        candidates = database.players(position)
        for index, player in enumerate(candidates[first:], start=first):
            if price + player.price > query.total_limit:
                continue
            chosen.append(player)
            yield from search(depth, count + 1, index + 1, price + player.price, points + player.points)
            chosen.pop()

    yield from search(0, 0, 0, 0, 0)


def best_solution(database: PlayerDatabase, query: Query) -> Solution:
    """The highest-scoring team for ``query``.

    Raises ValueError if no team with positive points fits the query.
    """
    best = None
    for solution in exhaustive_search(database, query):
        best = solution
    if best is None:
        raise ValueError("no team fits the query")
    return best


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find the best team by exhaustive search.")
    parser.add_argument("database", help="player file")
    parser.add_argument("query", help="query file")
    parser.add_argument("output", help="file the team is written to")
    args = parser.parse_args(argv)

    query = read_query(args.query)
    database = PlayerDatabase.from_players(read_players(args.database, query.player_limit))
    for solution in exhaustive_search(database, query):
        write_solution(args.output, solution)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())