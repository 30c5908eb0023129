import random

import pytest

from cses_kit.graphs import (
    all_pairs_shortest,
    building_teams,
    connecting_roads,
    high_score,
    message_route,
    round_trip,
    shortest_routes,
)


def _random_edges(n, m, seed):
    rng = random.Random(seed)
    edges = set()
    while len(edges) < m:
        a, b = rng.sample(range(1, n + 1), 2)
        edges.add((min(a, b), max(a, b)))
    return sorted(edges)


def _component_count(n, edges):
    parent = list(range(n + 1))

    def find(node):
        while parent[node] != node:
            parent[node] = parent[parent[node]]
            node = parent[node]
        return node

    for a, b in edges:
        parent[find(a)] = find(b)
    return len({find(node) for node in range(1, n + 1)})


def test_high_score_single_tunnel():
    assert high_score(2, [(1, 2, 5)]) == 5


def test_high_score_positive_cycle_reaching_end_is_unbounded():
    assert high_score(3, [(1, 2, 1), (2, 1, 1), (2, 3, 4)]) == -1


def test_high_score_cycle_not_reaching_end_is_ignored():
    assert high_score(3, [(1, 3, 7), (1, 2, 1), (2, 2, 5)]) == 7


def test_high_score_prefers_larger_path():
    result = high_score(3, [(1, 3, 5), (1, 2, 4), (2, 3, 4)])
    assert result >= 5
    assert result == 4 + 4


def test_high_score_single_room_with_positive_loop():
    assert high_score(1, [(1, 1, 3)]) == -1


def test_high_score_unreachable_raises():
    with pytest.raises(ValueError):
        high_score(3, [(1, 2, 1)])


def test_high_score_bad_node_raises():
    with pytest.raises(ValueError):
        high_score(2, [(1, 5, 1)])


def test_building_teams_path():
    assert building_teams(3, [(1, 2), (2, 3)]) == [1, 2, 1]


def test_building_teams_odd_cycle_is_impossible():
    assert building_teams(3, [(1, 2), (2, 3), (3, 1)]) is None


def test_building_teams_isolated_pupils_in_first_team():
    assert building_teams(2, []) == [1, 1]


@pytest.mark.parametrize("seed", range(5))
def test_building_teams_even_cycles_split_friends(seed):
    rng = random.Random(seed)
    left = list(range(1, 6))
    right = list(range(6, 11))
    edges = [(rng.choice(left), rng.choice(right)) for _ in range(12)]
    teams = building_teams(10, edges)
    assert teams is not None
    assert all(teams[a - 1] != teams[b - 1] for a, b in edges)
    assert set(teams) <= {1, 2}


def test_connecting_roads_no_edges():
    assert connecting_roads(3, []) == [(1, 2), (2, 3)]


def test_connecting_roads_two_components():
    assert connecting_roads(4, [(1, 2), (3, 4)]) == [(1, 3)]


def test_connecting_roads_connect_everything():
    edges = [(1, 2), (5, 6), (6, 7)]
    roads = connecting_roads(8, edges)
    assert roads == [(1, 3), (3, 4), (4, 5), (5, 8)]
    assert len(roads) == _component_count(8, edges) - 1
    assert _component_count(8, edges + roads) == 1
    route = message_route(8, edges + roads)
    assert route[0] == 1
    assert route[-1] == 8


def test_message_route_takes_shortcut():
    assert message_route(3, [(1, 2), (2, 3), (1, 3)]) == [1, 3]


def test_message_route_impossible():
    assert message_route(3, [(1, 2)]) is None


def test_message_route_single_computer():
    assert message_route(1, []) == [1]


@pytest.mark.parametrize("seed", range(5))
def test_message_route_is_a_valid_walk(seed):
    edges = _random_edges(12, 20, seed)
    route = message_route(12, edges)
    if route is None:
        assert connecting_roads(12, edges) != []
    else:
        adjacent = {frozenset(edge) for edge in edges}
        assert route[0] == 1 and route[-1] == 12
        assert all(frozenset(pair) in adjacent for pair in zip(route, route[1:]))
        assert len(set(route)) == len(route)


def test_round_trip_tree_has_none():
    assert round_trip(4, [(1, 2), (2, 3), (2, 4)]) is None


@pytest.mark.parametrize(
    "n, edges",
    [
        (3, [(1, 2), (2, 3), (3, 1)]),
        (5, [(1, 2), (2, 3), (3, 4), (4, 2), (4, 5)]),
        (6, [(1, 2), (3, 4), (4, 5), (5, 6), (6, 3)]),
    ],
)
def test_round_trip_is_a_cycle(n, edges):
    cycle = round_trip(n, edges)
    adjacent = {frozenset(edge) for edge in edges}
    assert cycle[0] == cycle[-1]
    assert len(cycle) >= 4
    assert len(set(cycle[:-1])) == len(cycle) - 1
    assert all(frozenset(pair) in adjacent for pair in zip(cycle, cycle[1:]))


def test_shortest_routes_values():
    assert shortest_routes(3, [(1, 2, 3), (2, 3, 4), (1, 3, 10)]) == [0, 3, 7]


def test_shortest_routes_are_directed():
    assert shortest_routes(2, [(2, 1, 5)]) == [0, None]


def test_all_pairs_shortest_parallel_roads_take_minimum():
    dist = all_pairs_shortest(2, [(1, 2, 5), (1, 2, 3)])
    assert dist[(1, 2)] == 3
    assert dist[(2, 1)] == 3
    assert dist[(1, 1)] == 0


def test_all_pairs_shortest_unreachable_absent():
    dist = all_pairs_shortest(3, [(1, 2, 4)])
    assert (1, 3) not in dist
    assert (3, 3) in dist


@pytest.mark.parametrize("seed", range(4))
def test_all_pairs_shortest_invariants(seed):
    rng = random.Random(seed)
    n = 8
    edges = [(a, b, rng.randint(1, 20)) for a, b in _random_edges(n, 14, seed)]
    dist = all_pairs_shortest(n, edges)
    for (a, b), d in dist.items():
        assert dist[(b, a)] == d
        for c in range(1, n + 1):
            if (a, c) in dist and (c, b) in dist:
                assert d <= dist[(a, c)] + dist[(c, b)]
    for a, b, length in edges:
        assert dist[(a, b)] <= length
    for source in range(1, 2):
        routes = shortest_routes(n, edges + [(b, a, w) for a, b, w in edges])
        assert routes == [dist.get((source, target)) for target in range(1, n + 1)]