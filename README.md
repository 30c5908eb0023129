# cses-kit

Algorithms for well-known contest problems, usable as a library or, for
three of the problems, from the command line. It needs nothing beyond
the Python standard library (3.10 or newer).

## Library

### `cses_kit.dp`: dynamic programming

Counts are taken modulo `MOD` (10^9+7).

- `max_pages(prices, pages, budget)`: 0/1 knapsack, the most pages you can
  buy with each book bought at most once. `max_pages_memoized` gives the
  same answer top-down. Raises `ValueError` if the lists differ in length
  or a price is negative.
- `coin_combinations(coins, target)`: the number of ordered ways to make
  `target` from the coins. `coin_combinations_memoized` gives the same
  answer top-down. Coins must be positive.
- `dice_combinations(n)`: the number of ways to reach `n` with throws of a
  six-sided die.
- `grid_paths(grid)`: the number of right/down paths from the top-left to
  the bottom-right of a square grid (a sequence of strings) avoiding `*`
  cells. Raises `ValueError` if the grid is not square.

### `cses_kit.graphs`: graphs with nodes numbered from 1

Edges are `(a, b)` pairs or `(a, b, weight)` triples; a node outside
`1..n` raises `ValueError`.

- `high_score(n, edges)`: the largest score of a walk from 1 to `n` over
  one-way tunnels, or `-1` if it can be made arbitrarily large. Raises
  `ValueError` when `n` cannot be reached.
- `building_teams(n, edges)`: a list of teams (1 or 2) for nodes `1..n`
  such that neighbours differ, or `None` if the graph is not bipartite.
- `connecting_roads(n, edges)`: the new roads, as pairs, that join all
  components, each component represented by its lowest node.
- `message_route(n, edges)`: the shortest list of nodes from 1 to `n`, or
  `None`.
- `round_trip(n, edges)`: a cycle as a list of nodes that starts and ends
  at the same node, or `None`.
- `shortest_routes(n, edges)`: Dijkstra from node 1 over one-way edges; a
  list of distances with `None` for unreachable nodes.
- `all_pairs_shortest(n, edges)`: Floyd–Warshall over two-way edges; a
  dict from `(a, b)` to the distance, with unreachable pairs absent.

### `cses_kit.mazes`: grid searches

Grids are sequences of equal-length strings; `#` is a wall.

- `labyrinth(grid)`: the shortest route from `A` to `B` as a string of
  `U`/`D`/`L`/`R` moves, or `None` if there is none.
- `escape_monsters(grid)`: moves taking `A` to a border cell strictly
  before any `M` can reach it (an empty string if `A` starts on the
  border), or `None`.

### `cses_kit.strings`: string algorithms

- `z_function`, `prefix_function`, `borders` (proper border lengths,
  ascending), `count_occurrences` (overlapping matches; the pattern must
  not be empty) and `minimal_rotation`.
- `Manacher(text)`: palindrome radii, with `longest(center, odd)` and
  `is_palindrome(left, right)`.
- `PolynomialHash(text, base, modulus)` and `DoubleHash(text)`: forward
  and reverse substring hashes through `hash` and `reverse_hash`;
  `DoubleHash` also has `is_palindrome`.

Substring ranges are 0-based and inclusive at both ends; a range outside
the text raises `IndexError`.

```python
from cses_kit.dp import coin_combinations, dice_combinations, max_pages
from cses_kit.strings import DoubleHash, count_occurrences, minimal_rotation

dice_combinations(3)                                  # 4
coin_combinations([2, 3, 5], 9)                       # 8
max_pages([4, 8, 5, 3], [5, 12, 8, 1], 10)            # 13
count_occurrences("saippuakauppias", "pp")            # 2
minimal_rotation("acab")                              # "abac"
DoubleHash("abacaba").is_palindrome(0, 6)             # True
```

## Command line

The `cses-kit` command reads whitespace-separated input from a file
named as its last argument, or from standard input, and prints one
answer per line.

```
cses-kit book-shop [input]
cses-kit shortest-routes [input]
cses-kit string-matching [input]
```

- `book-shop`: `n x`, then `n` prices, then `n` page counts; prints the
  most pages within budget `x`.
- `shortest-routes`: `n m q`, then `m` roads `a b c`, then `q` queries
  `a b`; prints each distance, or `-1` if unreachable.
- `string-matching`: a text and a pattern; prints the number of
  occurrences.

Malformed input ends the command with a usage error. The other problems
are available only through the library; the command does not solve them.

## Running the tests

```
pip install -e ".[test]"
pytest
```