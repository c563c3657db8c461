"""GRASP team search: a greedy start refined by simulated annealing swaps."""

from __future__ import annotations

import argparse
import math
import random
import sys
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

DEFAULT_TEMPERATURE = 1e5
COOLING_RATE = 0.999999


def construct_greedy_solution(database: PlayerDatabase, query: Query) -> list[tuple[int, Player]]:
    """Fill the formation position by position with the first players that fit.

    Positions are filled in order (goalkeeper, defenders, midfielders,
    forwards), taking players in the database's efficiency order and skipping
    any whose price would push the total above ``query.total_limit``.
    Returns ``(index, player)`` pairs, where ``index`` is the player's place
    in its position group.

    Raises ValueError if the formation cannot be filled or the team scores
    no points.
    """
    team: list[tuple[int, Player]] = []
    price = 0
    for position in Position:
        needed = query.required(position)
        if needed < 0:
            raise ValueError(f"negative number of players requested for {position.name}")
        taken = 0
        for index, player in enumerate(database.players(position)):
            if taken >= needed:
                break
            if price + player.price <= query.total_limit:
                team.append((index, player))
                price += player.price
                taken += 1
        if taken < needed:
            raise ValueError(f"not enough affordable players for {position.name}")
    if sum(player.points for _, player in team) <= 0:
        raise ValueError("no team with positive points fits the query")
    return team


def accept_worse(new_points: int, old_points: int, temperature: float, rng: random.Random) -> bool:
    """Decide whether a swap to ``new_points`` from ``old_points`` is taken.

    Follows the Boltzmann distribution: the chance is
    ``exp(-(old_points - new_points) / temperature)``. Equal points or a zero
    temperature never accept.
    """
    if new_points == old_points or temperature <= 0:
        return False
    if new_points > old_points:
        return True
    return rng.random() < math.exp(-(old_points - new_points) / temperature)


class GraspSearch:
    """Local search over single-player swaps starting from a greedy team."""

    def __init__(
        self,
        database: PlayerDatabase,
        query: Query,
        rng: random.Random | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        self._start = time.process_time()
        self.database = database
        self.query = query
        self.rng = rng if rng is not None else random.Random()
        self.temperature = temperature

        start_team = construct_greedy_solution(database, query)
        self.indexes = [index for index, _ in start_team]
        self.team = [player for _, player in start_team]
        self.used: dict[Position, set[int]] = {position: set() for position in Position}
        for index, player in start_team:
            self.used[player.position].add(index)
        self.price = sum(player.price for player in self.team)
        self.points = sum(player.points for player in self.team)
        self.best = Solution(
            players=tuple(self.team),
            time=self._elapsed(),
            points=self.points,
            price=self.price,
        )

    def _elapsed(self) -> float:
        return time.process_time() - self._start

    def improve(self) -> bool:
        """Try one swap of a randomly chosen player; True if a swap was made.

        The temperature cools after each team slot examined. When the swap
        produces a new best team, :attr:`best` is updated.
        """
        order = list(range(len(self.team)))
        self.rng.shuffle(order)
        for slot in order:
            current = self.team[slot]
            position = current.position
            price_without = self.price - current.price
            points_without = self.points - current.points
            used = self.used[position]

            for index, candidate in enumerate(self.database.players(position)):
                if index in used:
                    continue
                if candidate.price + price_without > self.query.total_limit:
                    continue
                if not (
                    candidate.points + points_without > self.points
                    or accept_worse(candidate.points, current.points, self.temperature, self.rng)
                ):
                    continue

                used.discard(self.indexes[slot])
                used.add(index)
                self.team[slot] = candidate
                self.indexes[slot] = index
                self.points = points_without + candidate.points
                self.price = price_without + candidate.price
                if self.points > self.best.points:
                    self.best = Solution(
                        players=tuple(self.team),
                        time=self._elapsed(),
                        points=self.points,
                        price=self.price,
                    )
                self.temperature *= COOLING_RATE
                return True

            self.temperature *= COOLING_RATE
        return False

    def run(self) -> Iterator[Solution]:
        """Swap until no swap is taken, yielding each new best team.

        At a high temperature worse swaps are nearly always taken, so the
        search may go on for a very long time; callers can stop early.
        """
        while self.improve():
            if self.best.players == tuple(self.team) and self.best.points == self.points:
                if self.best is not getattr(self, "_reported", None):
                    self._reported = self.best
                    yield self.best


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Find a team by GRASP with simulated annealing.")
    parser.add_argument("database", help="player file")
    parser.add_argument("query", help="query file")
    parser.add_argument("output", help="file the team is written to")
    parser.add_argument(
        "--temperature",
        type=float,
        default=DEFAULT_TEMPERATURE,
        help="initial annealing temperature",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    query = read_query(args.query)
    database = PlayerDatabase.from_players(read_players(args.database, query.player_limit))
    try:
        search = GraspSearch(database, query, random.Random(args.seed), args.temperature)
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    try:
        for solution in search.run():
            write_solution(args.output, solution)
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())