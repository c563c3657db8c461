"""Greedy team selection: take the most efficient players that still fit."""

from __future__ import annotations

import argparse
import time
from collections import Counter
from typing import Sequence

from fantasyteam.model import (
    Player,
    Query,
    Solution,
    read_players,
    read_query,
    sort_by_efficiency,
    write_solution,
)

TEAM_SIZE = 11


def greedy_search(players: Sequence[Player], query: Query) -> Solution:
    """Pick players in the given order while the formation and budget allow.

    Each pass over ``players`` adds every unused player whose position still
    has a free slot and whose price keeps the total strictly below the budget.
    Passes repeat until the team has eleven players.

    Raises ValueError if a pass adds nobody before the team is complete.
    """
    start = time.process_time()
    chosen: list[Player] = []
    taken: set[int] = set()
    counts: Counter = Counter()
    price = 0
    while len(chosen) < TEAM_SIZE:
        added = False
        for index, player in enumerate(players):
            if index in taken or price + player.price >= query.total_limit:
                continue
            if counts[player.position] >= query.required(player.position):
                continue
            taken.add(index)
            chosen.append(player)
            counts[player.position] += 1
            price += player.price
            added = True
        if not added:
            raise ValueError("no team of eleven fits the query")
    return Solution.from_players(chosen, time.process_time() - start)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Pick a team greedily.")
    parser.add_argument("database", help="player file")
    parser.add_argument("query", help="query file")
    parser.add_argument("output", help="file the team is written to")
    args = parser.parse_args(argv)

    query = read_query(args.query)
    players = sort_by_efficiency(read_players(args.database, query.player_limit))
    write_solution(args.output, greedy_search(players, query))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())