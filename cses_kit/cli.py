"""Command-line front end that reads problem input and prints the answers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator, Sequence

from .dp import max_pages
from .graphs import all_pairs_shortest
from .strings import count_occurrences

UNREACHABLE = "-1"


class _Tokens:
    """Whitespace-separated tokens of an input document."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        return [self.integer() for _ in range(count)]


def _book_shop(tokens: _Tokens) -> list[str]:
    count, budget = tokens.integers(2)
    prices = tokens.integers(count)
    pages = tokens.integers(count)
    return [str(max_pages(prices, pages, budget))]


def _shortest_routes(tokens: _Tokens) -> list[str]:
    nodes, roads, queries = tokens.integers(3)
    edges = [tuple(tokens.integers(3)) for _ in range(max(roads, 0))]
    distances = all_pairs_shortest(nodes, edges)
    answers = []
    for _ in range(max(queries, 0)):
        a, b = tokens.integers(2)
        distance = distances.get((a, b))
        answers.append(UNREACHABLE if distance is None else str(distance))
    return answers


def _string_matching(tokens: _Tokens) -> list[str]:
    text = tokens.word()
    pattern = tokens.word()
    return [str(count_occurrences(text, pattern))]


_COMMANDS: dict[str, tuple[Callable[[_Tokens], list[str]], str]] = {
    "book-shop": (_book_shop, "most pages within a budget, each book bought once"),
    "shortest-routes": (_shortest_routes, "answer shortest-distance queries over two-way roads"),
    "string-matching": (_string_matching, "count occurrences of a pattern in a text"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cses-kit", description="Solve classic problems from input data.")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, summary) in _COMMANDS.items():
        sub = commands.add_parser(name, help=summary, description=summary)
        sub.add_argument("input", nargs="?", help="input file (default: standard input)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run a solver on its input and print one answer per line."""
    parser = _parser()
    args = parser.parse_args(argv)
    try:
        if args.input is None:
            text = sys.stdin.read()
        else:
            with open(args.input, encoding="utf-8") as handle:
                text = handle.read()
    except OSError as error:
        parser.error(f"cannot read {args.input}: {error}")
    solver, _ = _COMMANDS[args.command]
    try:
        lines = solver(_Tokens(text))
    except ValueError as error:
        parser.error(str(error))
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())