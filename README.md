# fantasyteam

Choose a fantasy football line-up: one goalkeeper plus a requested number of
defenders, midfielders and forwards. The total price must stay within a budget,
each player's price must stay within a per-player limit, and the aim is to
collect as many points as possible.

There are three search strategies, each with its own command:

| Command                  | Module                      | Strategy                                                        |
|--------------------------|-----------------------------|-----------------------------------------------------------------|
| `fantasyteam-greedy`     | `fantasyteam.greedy`        | Takes the most efficient players that still fit                 |
| `fantasyteam-exhaustive` | `fantasyteam.exhaustive`    | Backtracking search; writes each better line-up as it is found  |
| `fantasyteam-mh`         | `fantasyteam.metaheuristic` | Greedy start, then single-player swaps with simulated annealing |

## Installation

```
pip install .
```

Install with the `test` extra to get pytest for the test suite:

```
pip install ".[test]"
```

## Input files

**Player database**: one player per line, with fields separated by `;`:

```
name;position;price;team;points
```

`position` is one of `por` (goalkeeper), `def` (defender), `mig` (midfielder)
or `dav` (forward). Players with any other position, and players priced above
the per-player limit, are ignored. Reading stops at the first line whose name
is empty.

**Query**: five whitespace-separated integers:

```
defenders midfielders forwards total_limit player_limit
```

Every team has exactly one goalkeeper.

## Ranking players

All three strategies consider players in order of efficiency: points divided
by price raised to the power 0.35, highest first. Players with no points come
last, with the cheaper ones first.

## Usage

Each command takes the database, the query and the output path:

```
fantasyteam-greedy players.txt query.txt out.txt
fantasyteam-exhaustive players.txt query.txt out.txt
fantasyteam-mh players.txt query.txt out.txt
```

The output file holds the elapsed processor time in seconds, the chosen
players by position, the points (`Punts`) and the price (`Preu`):

```
0.1
POR: Keeper
DEF: A;B;C;D
MIG: E;F;G
DAV: H;I;J
Punts: 420
Preu: 9500000
```

### fantasyteam-greedy

The command makes repeated passes over the players in efficiency order. Each
pass adds every unused player whose position still has a free slot and whose
price keeps the running total *strictly below* the budget. It stops once the
team has eleven players. If a pass adds nobody before the team is complete,
the search raises `ValueError`.

### fantasyteam-exhaustive

The command explores every line-up that fits the formation and the budget,
position by position. It rewrites the output file each time it finds a team
that scores more points than any team found before. A team is only written
when its points are greater than zero, so if no such team fits, no file is
written.

### fantasyteam-mh

The command builds a starting team by filling each position with the first
affordable players in efficiency order. It then repeatedly tries to swap one
randomly chosen player for an unused player of the same position. A swap is
taken when it raises the points. A swap that does not raise the points may
still be taken, with a chance that follows the Boltzmann distribution at the
current temperature. The temperature is multiplied by 0.999999 for each team
slot examined. The search ends when no swap is taken.

The output file is rewritten each time a swap produces a new best team. The
starting team itself is not written. Options:

- `--temperature T`: initial annealing temperature (default `1e5`)
- `--seed N`: random seed, for repeatable runs

At a high temperature almost every swap is taken, so the search can run for a
very long time. Press Ctrl-C to stop it; the file keeps the best team written
so far. If no starting team can be built, the command prints an error and
exits with status 1.

## Library use

```python
import random

from fantasyteam.model import (
    PlayerDatabase,
    read_players,
    read_query,
    sort_by_efficiency,
    write_solution,
)
from fantasyteam.exhaustive import best_solution, exhaustive_search
from fantasyteam.greedy import greedy_search
from fantasyteam.metaheuristic import GraspSearch

query = read_query("query.txt")
players = read_players("players.txt", query.player_limit)

# Greedy: expects the players already in efficiency order.
greedy = greedy_search(sort_by_efficiency(players), query)

# Exhaustive: best_solution raises ValueError if no team fits.
database = PlayerDatabase.from_players(players)
best = best_solution(database, query)
for improvement in exhaustive_search(database, query):
    print(improvement.points, improvement.price)

# GRASP with simulated annealing.
search = GraspSearch(database, query, random.Random(1), temperature=10.0)
for solution in search.run():
    write_solution("out.txt", solution)
print(search.best.points)
```

`fantasyteam.model` also provides `parse_players`, `parse_query` and
`format_solution` for working with text instead of files, and the `Position`,
`Player`, `Query`, `PlayerDatabase` and `Solution` types.