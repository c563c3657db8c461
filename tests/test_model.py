import pytest

from fantasyteam.model import (
    Player,
    PlayerDatabase,
    Position,
    Query,
    Solution,
    format_solution,
    more_efficient,
    parse_players,
    parse_query,
    read_players,
    read_query,
    sort_by_efficiency,
    write_solution,
)

SAMPLE = (
    "Alba;por;10;Team A;30\n"
    "Bruno;def;20;Team B;40\n"
    "Carla;mig;5;Team C;0\n"
    "Dani;dav;500;Team D;90\n"
    "Enzo;ent;1;Team E;5\n"
)


def make(name, position, price, points):
    return Player(name, position, price, "Team", points)


def test_parse_players_fields_and_filters():
    players = parse_players(SAMPLE, 100)
    assert [p.name for p in players] == ["Alba", "Bruno", "Carla"]
    assert players[0] == Player("Alba", Position.POR, 10, "Team A", 30)


def test_parse_players_player_limit_is_inclusive():
    players = parse_players(SAMPLE, 500)
    assert "Dani" in [p.name for p in players]


def test_parse_players_stops_at_empty_name():
    text = "Alba;por;10;T;30\n\nBruno;def;20;T;40\n"
    assert [p.name for p in parse_players(text, 100)] == ["Alba"]


def test_parse_players_ignores_trailing_text_after_points():
    players = parse_players("Alba;por;10;T;30 extra\n", 100)
    assert players[0].points == 30


def test_parse_players_rejects_bad_price():
    with pytest.raises(ValueError):
        parse_players("Alba;por;abc;T;30\n", 100)


def test_read_players_from_file(tmp_path):
    path = tmp_path / "players.txt"
    path.write_text(SAMPLE, encoding="utf-8")
    assert read_players(path, 100) == parse_players(SAMPLE, 100)


def test_parse_query_and_required():
    query = parse_query("4 4 2\n1000 200\n")
    assert query == Query(4, 4, 2, 1000, 200)
    assert query.required(Position.DEF) == 4
    assert query.required(Position.DAV) == 2
    assert query.required(Position.POR) == 1


def test_parse_query_rejects_short_input():
    with pytest.raises(ValueError):
        parse_query("1 2")


def test_read_query_from_file(tmp_path):
    path = tmp_path / "query.txt"
    path.write_text("3 5 2 900 300", encoding="utf-8")
    assert read_query(path) == Query(3, 5, 2, 900, 300)


def test_more_efficient_prefers_cheaper_for_same_points():
    cheap = make("a", Position.DEF, 1, 10)
    dear = make("b", Position.DEF, 100, 10)
    assert more_efficient(cheap, dear)
    assert not more_efficient(dear, cheap)


def test_zero_point_players_rank_last_and_by_price():
    scorer = make("s", Position.MIG, 1000, 1)
    free = make("f", Position.MIG, 1, 0)
    costly = make("c", Position.MIG, 50, 0)
    assert more_efficient(scorer, free)
    assert not more_efficient(free, scorer)
    assert more_efficient(free, costly)
    ordered = sort_by_efficiency([costly, free, scorer])
    assert [p.name for p in ordered] == ["s", "f", "c"]


def test_sort_by_efficiency_keeps_all_players_in_ranked_order():
    players = [make(str(i), Position.DAV, 10 + i * 7, (i * 13) % 29) for i in range(12)]
    ordered = sort_by_efficiency(players)
    assert sorted(p.name for p in ordered) == sorted(p.name for p in players)
    for first, second in zip(ordered, ordered[1:]):
        assert not more_efficient(second, first)


def test_zero_price_scorer_ranks_first():
    free_scorer = make("z", Position.DEF, 0, 5)
    other = make("o", Position.DEF, 1, 100)
    assert sort_by_efficiency([other, free_scorer])[0] is free_scorer


def test_database_groups_and_sorts():
    database = PlayerDatabase.from_players(parse_players(SAMPLE, 1000))
    assert [p.name for p in database.players(Position.DEF)] == ["Bruno"]
    assert [p.name for p in database.players(Position.DAV)] == ["Dani"]
    defenders = [make("d1", Position.DEF, 100, 1), make("d2", Position.DEF, 1, 50)]
    database = PlayerDatabase.from_players(defenders)
    assert [p.name for p in database.players(Position.DEF)] == ["d2", "d1"]
    assert database.players(Position.POR) == ()


def test_solution_from_players_sums():
    team = parse_players(SAMPLE, 1000)
    solution = Solution.from_players(team, 1.5)
    assert solution.players == tuple(team)
    assert solution.points == sum(p.points for p in team)
    assert solution.price == sum(p.price for p in team)
    assert solution.time == 1.5


def test_format_solution_layout():
    team = (
        make("Alba", Position.POR, 1, 1),
        make("Bruno", Position.DEF, 2, 2),
        make("Berta", Position.DEF, 4, 4),
    )
    solution = Solution(players=team, time=3.5, points=42, price=7)
    assert format_solution(solution).splitlines() == [
        "3.5",
        "POR: Alba",
        "DEF: Bruno;Berta",
        "MIG: ",
        "DAV: ",
        "Punts: 42",
        "Preu: 7",
    ]


def test_write_solution_writes_formatted_text(tmp_path):
    solution = Solution.from_players(parse_players(SAMPLE, 100), 0.0)
    path = tmp_path / "out.txt"
    write_solution(path, solution)
    assert path.read_text(encoding="utf-8") == format_solution(solution)