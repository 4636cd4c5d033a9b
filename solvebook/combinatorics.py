"""Enumeration of combinations, permutations and subsets."""

from collections.abc import Sequence


def combination_sum(candidates: Sequence[int], target: int) -> list[list[int]]:
    """Distinct combinations of candidates, each usable repeatedly, summing to ``target``."""
    values = list(candidates)
    if any(value <= 0 for value in values):
        raise ValueError("candidates must be positive")
    found: list[list[int]] = []
    seen: set[tuple[int, ...]] = set()
    chosen: list[int] = []

    def explore(index: int, remaining: int) -> None:
        if index == len(values) or remaining < 0:
            return
        if remaining == 0:
            key = tuple(chosen)
            if key not in seen:
                seen.add(key)
                found.append(list(chosen))
                return
        chosen.append(values[index])
        explore(index + 1, remaining - values[index])
        explore(index, remaining - values[index])
        chosen.pop()
        explore(index + 1, remaining)

    explore(0, target)
    return found


def permute(nums: Sequence[int]) -> list[list[int]]:
    """Every ordering of ``nums``, produced by successive swaps."""
    items = list(nums)
    result: list[list[int]] = []

    def place(index: int) -> None:
        if index == len(items):
            result.append(list(items))
            return
        for other in range(index, len(items)):
            items[index], items[other] = items[other], items[index]
            place(index + 1)
            items[index], items[other] = items[other], items[index]

    place(0)
    return result


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums`` in depth-first order, starting with the empty one."""
    items = list(nums)
    result: list[list[int]] = []
    current: list[int] = []

    def extend(start: int) -> None:
        result.append(list(current))
        for index in range(start, len(items)):
            current.append(items[index])
            extend(index + 1)
            current.pop()

    extend(0)
    return result


def subsets_with_dup(nums: Sequence[int]) -> list[list[int]]:
    """Every distinct sub-multiset of ``nums``, each in ascending order."""
    items = sorted(nums)
    result: list[list[int]] = []
    current: list[int] = []

    def build(index: int) -> None:
        if index == len(items):
            result.append(list(current))
            return
        current.append(items[index])
        build(index + 1)
        current.pop()
        skip = index + 1
        while skip < len(items) and items[skip] == items[index]:
            skip += 1
        build(skip)

    build(0)
    return result