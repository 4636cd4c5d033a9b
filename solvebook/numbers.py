"""Puzzles over single integers and digit sequences."""

_INT_MAX = 2**31 - 1
_FIB_MODULUS = 10**9 + 7


def _digits(num: int) -> list[int]:
    return [int(ch) for ch in str(num)]


def add_digits(num: int) -> int:
    """Repeatedly sum the decimal digits of ``num`` until one digit remains."""
    while num >= 10:
        num = sum(_digits(num))
    return num


def arrange_coins(n: int) -> int:
    """Number of complete staircase rows that ``n`` coins can fill."""
    row = 0
    while n > 0:
        row += 1
        n -= row
    return row if n == 0 else row - 1


def fib(n: int) -> int:
    """The ``n``-th Fibonacci number; values of ``n`` below 2 are returned as is."""
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current


def nth_fibonacci(n: int) -> int:
    """The ``n``-th Fibonacci number modulo 1_000_000_007."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, (previous + current) % _FIB_MODULUS
    return current


def is_happy(n: int) -> bool:
    """Whether repeatedly summing squared digits of ``n`` ends at 1."""
    while n >= 10 and n not in (1, 7):
        n = sum(d * d for d in _digits(n))
    return n in (1, 7)


def is_palindrome_number(x: int) -> bool:
    """Whether ``x`` reads the same backwards, within 32-bit limits."""
    if x < 0:
        return False
    reversed_value = 0
    rest = x
    while rest > 0:
        if reversed_value >= _INT_MAX // 10:
            return False
        rest, digit = divmod(rest, 10)
        reversed_value = reversed_value * 10 + digit
    return reversed_value == x


def fizz_buzz(n: int) -> list[str]:
    """The FizzBuzz sequence for 1..n."""

    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 3 == 0:
            return "Fizz"
        if i % 5 == 0:
            return "Buzz"
        return str(i)

    return [word(i) for i in range(1, n + 1)]


def plus_one(digits: list[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits."""
    digits = list(digits)
    end = len(digits)
    while end and digits[end - 1] == 9:
        end -= 1
    trailing_zeros = [0] * (len(digits) - end)
    if end == 0:
        return [1, *trailing_zeros]
    return [*digits[: end - 1], digits[end - 1] + 1, *trailing_zeros]