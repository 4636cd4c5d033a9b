"""Binary searches and scans over sorted or structured data."""

from collections.abc import Sequence


def search_matrix(matrix: Sequence[Sequence[int]], target: int) -> bool:
    """Whether ``target`` is in a matrix whose rows, read in order, are sorted."""
    if not matrix or not matrix[0]:
        return False
    width = len(matrix[0])
    lo, hi = 0, len(matrix) * width - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        value = matrix[mid // width][mid % width]
        if value == target:
            return True
        if value > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return False


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in a rotated sorted sequence, or -1."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[lo] <= nums[mid]:
            if nums[lo] <= target <= nums[mid]:
                hi = mid - 1
            else:
                lo = mid + 1
        elif nums[mid] <= target <= nums[hi]:
            lo = mid + 1
        else:
            hi = mid - 1
    return -1


def search_insert(nums: Sequence[int], target: int) -> int:
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    lo, hi = 0, len(nums) - 1
    while lo <= hi:
        mid = (lo + hi) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return lo


def single_non_duplicate(nums: Sequence[int]) -> int:
    """The one value in a sorted sequence of pairs that appears only once."""
    if not nums:
        raise ValueError("nums must not be empty")
    lo, hi = 0, len(nums) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        mid -= mid % 2
        if nums[mid] == nums[mid + 1]:
            lo = mid + 2
        else:
            hi = mid
    return nums[lo]


def peak_index_in_mountain_array(arr: Sequence[int]) -> int:
    """Index of the peak of a strictly rising then falling sequence."""
    lo, hi = 0, len(arr) - 1
    while lo < hi:
        mid = (lo + hi) // 2
        if arr[mid] < arr[mid + 1]:
            lo = mid + 1
        else:
            hi = mid
    return lo


def two_sum_sorted(numbers: Sequence[int], target: int) -> tuple[int, int]:
    """1-based positions of two entries of sorted ``numbers`` adding to ``target``."""
    lo, hi = 0, len(numbers) - 1
    while lo < hi:
        total = numbers[lo] + numbers[hi]
        if total == target:
            return lo + 1, hi + 1
        if total < target:
            lo += 1
        else:
            hi -= 1
    raise ValueError(f"no two numbers add up to {target}")


def count_negatives(grid: Sequence[Sequence[int]]) -> int:
    """Count negatives in a grid sorted non-increasingly along rows and columns."""
    if not grid or not grid[0]:
        return 0
    rows = len(grid)
    row, col = 0, len(grid[0]) - 1
    count = 0
    while row < rows and col >= 0:
        if grid[row][col] < 0:
            count += rows - row
            col -= 1
        else:
            row += 1
    return count


def find_duplicate(nums: Sequence[int]) -> int:
    """The first value seen twice in ``nums``, or -1 if none repeats."""
    seen = set()
    for num in nums:
        value = abs(num)
        if value in seen:
            return value
        seen.add(value)
    return -1