"""Dynamic-programming counting and optimisation problems."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import TypeVar

MOD = 1_000_000_007
BLOCKED = "*"

_K = TypeVar("_K", bound=Hashable)


def _evaluate(
    root: _K,
    dependencies: Callable[[_K], Iterable[_K]],
    combine: Callable[[_K, dict], int],
) -> int:
    """Evaluate a memoised recurrence without deep recursion.

    ``dependencies(key)`` names the sub-states ``key`` needs; ``combine`` builds
    the value of ``key`` once all of them are known.
    """
    memo: dict = {}
    stack = [root]
    while stack:
        key = stack[-1]
        if key in memo:
            stack.pop()
            continue
        missing = [dep for dep in dependencies(key) if dep not in memo]
        if missing:
            stack.extend(missing)
        else:
            memo[key] = combine(key, memo)
            stack.pop()
    return memo[root]


def _items(prices: Iterable[int], pages: Iterable[int]) -> tuple[list[int], list[int]]:
    prices, pages = list(prices), list(pages)
    if len(prices) != len(pages):
        raise ValueError("prices and pages must have the same length")
    if any(price < 0 for price in prices):
        raise ValueError("prices must not be negative")
    return prices, pages


def _coins(coins: Iterable[int]) -> list[int]:
    coins = list(coins)
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    return coins


def max_pages(prices: Iterable[int], pages: Iterable[int], budget: int) -> int:
    """Most pages obtainable buying each book at most once within ``budget``."""
    prices, pages = _items(prices, pages)
    if budget < 0:
        return 0
    best = [0] * (budget + 1)
    for price, value in zip(prices, pages):
        for spend in range(budget, price - 1, -1):
            candidate = best[spend - price] + value
            if candidate > best[spend]:
                best[spend] = candidate
    return best[budget]


def max_pages_memoized(prices: Iterable[int], pages: Iterable[int], budget: int) -> int:
    """Same answer as :func:`max_pages`, by top-down choice over each book."""
    prices, pages = _items(prices, pages)
    if budget < 0:
        return 0
    count = len(prices)

    def dependencies(state: tuple[int, int]) -> list[tuple[int, int]]:
        level, left = state
        if level == count:
            return []
        needed = [(level + 1, left)]
        if prices[level] <= left:
            needed.append((level + 1, left - prices[level]))
        return needed

    def combine(state: tuple[int, int], memo: dict) -> int:
        level, left = state
        if level == count:
            return 0
        best = memo[(level + 1, left)]
        if prices[level] <= left:
            best = max(best, pages[level] + memo[(level + 1, left - prices[level])])
        return best

    return _evaluate((0, budget), dependencies, combine)


def coin_combinations(coins: Iterable[int], target: int) -> int:
    """Ordered ways to sum to ``target`` with the given coins, modulo ``MOD``."""
    coins = _coins(coins)
    if target < 0:
        return 0
    ways = [0] * (target + 1)
    ways[0] = 1
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in coins if coin <= amount) % MOD
    return ways[target]


def coin_combinations_memoized(coins: Iterable[int], target: int) -> int:
    """Same answer as :func:`coin_combinations`, computed top-down."""
    coins = _coins(coins)
    if target < 0:
        return 0

    def dependencies(amount: int) -> list[int]:
        return [amount - coin for coin in coins if coin <= amount]

    def combine(amount: int, memo: dict) -> int:
        if amount == 0:
            return 1
        return sum(memo[amount - coin] for coin in coins if coin <= amount) % MOD

    return _evaluate(target, dependencies, combine)


def dice_combinations(n: int) -> int:
    """Ordered ways to reach ``n`` by throws of a six-sided die, modulo ``MOD``."""
    if n < 0:
        return 0
    ways = [1]
    for total in range(1, n + 1):
        ways.append(sum(ways[max(0, total - 6):total]) % MOD)
    return ways[n]


def grid_paths(grid: Sequence[str]) -> int:
    """Right/down paths across a square grid avoiding ``*`` cells, modulo ``MOD``."""
    rows = list(grid)
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("grid must be square")
    if size == 0:
        return 0
    above = [0] * size
    for i, row in enumerate(rows):
        current = [0] * size
        for j, cell in enumerate(row):
            if cell == BLOCKED:
                continue
            if i == 0 and j == 0:
                current[j] = 1
            else:
                left = current[j - 1] if j > 0 else 0
                current[j] = (above[j] + left) % MOD
        above = current
    return above[-1]