"""Puzzles over one-dimensional sequences of numbers."""

import heapq
import operator
from collections import Counter
from collections.abc import MutableSequence, Sequence
from functools import reduce
from itertools import accumulate


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct triplets of ``nums`` that add up to zero, each in ascending order."""
    values = sorted(nums)
    triplets: list[list[int]] = []
    for i, first in enumerate(values):
        if i and values[i - 1] == first:
            continue
        front, back = i + 1, len(values) - 1
        while front < back:
            total = first + values[front] + values[back]
            if total < 0:
                front += 1
            elif total > 0:
                back -= 1
            else:
                triplet = [first, values[front], values[back]]
                triplets.append(triplet)
                while front < back and values[front] == triplet[1]:
                    front += 1
                while front < back and values[back] == triplet[2]:
                    back -= 1
    return triplets


def max_profit(prices: Sequence[int]) -> int:
    """Best gain from one buy followed by one later sale; zero if none is possible."""
    lowest = None
    best = 0
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def get_concatenation(nums: Sequence[int]) -> list[int]:
    """The sequence followed by itself."""
    return [*nums, *nums]


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the vertical lines."""
    if not height:
        raise ValueError("height must not be empty")
    lo, hi = 0, len(height) - 1
    best = 0
    while lo < hi:
        best = max(best, min(height[lo], height[hi]) * (hi - lo))
        if height[lo] > height[hi]:
            hi -= 1
        else:
            lo += 1
    return best


def contains_duplicate(nums: Sequence[int]) -> bool:
    """Whether any value appears more than once."""
    return len(set(nums)) != len(nums)


def kids_with_candies(candies: Sequence[int], extra_candies: int) -> list[bool]:
    """For each kid, whether the extra candies would give them the most."""
    if not candies:
        raise ValueError("candies must not be empty")
    most = max(candies)
    return [count + extra_candies >= most for count in candies]


def majority_element(nums: Sequence[int]) -> int:
    """The value held by more than half of ``nums`` (Boyer-Moore vote)."""
    if not nums:
        raise ValueError("nums must not be empty")
    candidate = nums[0]
    count = 0
    for num in nums:
        if count == 0:
            candidate, count = num, 1
        elif num == candidate:
            count += 1
        else:
            count -= 1
    return candidate


def max_sub_array(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run of ``nums``."""
    if not nums:
        raise ValueError("nums must not be empty")
    best = nums[0]
    running = 0
    for num in nums:
        running += num
        best = max(best, running)
        running = max(running, 0)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping or touching ``[start, end]`` intervals."""
    merged: list[list[int]] = []
    for start, end in sorted(intervals):
        if not merged or merged[-1][1] < start:
            merged.append([start, end])
        else:
            merged[-1][1] = max(merged[-1][1], end)
    return merged


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into the first ``m`` of ``nums1``, in place."""
    if m + n > len(nums1):
        raise ValueError("nums1 has no room for the merged values")
    nums1[: m + n] = list(heapq.merge(nums1[:m], nums2[:n]))


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` into its next lexicographic permutation, wrapping round."""
    pivot = next((i for i in range(len(nums) - 2, -1, -1) if nums[i] < nums[i + 1]), None)
    if pivot is None:
        nums.reverse()
        return
    successor = next(i for i in range(len(nums) - 1, pivot, -1) if nums[i] > nums[pivot])
    nums[pivot], nums[successor] = nums[successor], nums[pivot]
    nums[pivot + 1 :] = nums[pivot + 1 :][::-1]


def num_identical_pairs(nums: Sequence[int]) -> int:
    """Number of index pairs ``i < j`` whose values are equal."""
    return sum(count * (count - 1) // 2 for count in Counter(nums).values())


def product_except_self(nums: Sequence[int]) -> list[int]:
    """For each position, the product of every other entry."""
    before = list(accumulate(nums, operator.mul, initial=1))[:-1]
    after = list(accumulate(reversed(nums), operator.mul, initial=1))[:-1][::-1]
    return [left * right for left, right in zip(before, after)]


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact sorted ``nums`` so its first k entries are unique; return k."""
    kept = 0
    for value in nums:
        if kept == 0 or nums[kept - 1] != value:
            nums[kept] = value
            kept += 1
    return kept


def remove_element(nums: MutableSequence[int], val: int) -> int:
    """Move every entry other than ``val`` to the front; return how many there are."""
    kept = 0
    for value in nums:
        if value != val:
            nums[kept] = value
            kept += 1
    return kept


def running_sum(nums: Sequence[int]) -> list[int]:
    """Prefix sums of ``nums``."""
    return list(accumulate(nums))


def single_number(nums: Sequence[int]) -> int:
    """The one value that is not paired, found by XOR of all entries."""
    return reduce(operator.xor, nums, 0)


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a sequence of 0s, 1s and 2s in place in a single pass."""
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        if nums[mid] == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif nums[mid] == 2:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1
        else:
            mid += 1