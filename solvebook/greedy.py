"""Greedy and dynamic-programming puzzles, with console entry points."""

import argparse
import math
import sys
from collections.abc import Sequence


def find_content_children(greed: Sequence[int], sizes: Sequence[int]) -> int:
    """Most children whose greed can be met, one cookie each."""
    children = sorted(greed)
    content = 0
    for size in sorted(sizes):
        if content == len(children):
            break
        if size >= children[content]:
            content += 1
    return content


def count_gondolas(weights: Sequence[int], limit: int) -> int:
    """Fewest gondolas, each holding at most two people within ``limit``."""
    ordered = sorted(weights)
    left, right = 0, len(ordered) - 1
    gondolas = 0
    while left <= right:
        if ordered[left] + ordered[right] <= limit:
            left += 1
        right -= 1
        gondolas += 1
    return gondolas


def min_coins(coins: Sequence[int], amount: int) -> int:
    """Fewest coins summing to ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    if any(coin < 0 for coin in coins):
        raise ValueError("coin values must not be negative")
    usable = [coin for coin in coins if coin > 0]
    best = [0.0] + [math.inf] * amount
    for total in range(1, amount + 1):
        best[total] = min(
            (best[total - coin] + 1 for coin in usable if coin <= total), default=math.inf
        )
    return -1 if math.isinf(best[amount]) else int(best[amount])


def _read_problem(prog: str, description: str, argv: Sequence[str] | None) -> tuple[int, list[int]]:
    """Parse options, then read ``N X`` followed by ``N`` integers from stdin."""
    parser = argparse.ArgumentParser(prog=prog, description=description)
    parser.parse_args(argv)
    try:
        numbers = [int(token) for token in sys.stdin.read().split()]
    except ValueError:
        parser.error("input must be whitespace-separated integers")
    if len(numbers) < 2:
        parser.error("input must start with a count and a value")
    count, value = numbers[0], numbers[1]
    items = numbers[2 : 2 + count]
    if count < 0 or len(items) < count:
        parser.error(f"expected {count} values after the header")
    return value, items


def ferris_wheel_main(argv: Sequence[str] | None = None) -> int:
    """Read children and a weight limit from stdin; print the gondolas needed."""
    limit, weights = _read_problem(
        "ferris-wheel", "Count gondolas for children of given weights.", argv
    )
    print(count_gondolas(weights, limit))
    return 0


def minimizing_coins_main(argv: Sequence[str] | None = None) -> int:
    """Read coin values and a target sum from stdin; print the fewest coins or -1."""
    amount, coins = _read_problem(
        "minimizing-coins", "Fewest coins needed to make a sum.", argv
    )
    print(min_coins(coins, amount))
    return 0