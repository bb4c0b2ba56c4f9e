# bfhl/core/numeric.py

import math
from functools import reduce
from numbers import Real
from typing import Any, Iterable, List, Sequence, Union

Number = Union[int, float]


def is_number(value: Any) -> bool:
    # bool is an int subclass but never a JSON number
    return isinstance(value, Real) and not isinstance(value, bool)


def is_integer(value: Any) -> bool:
    """True for ints and integral floats such as 17.0 (JSON makes no distinction)."""
    if not is_number(value):
        return False
    if isinstance(value, int):
        return True
    return float(value).is_integer()


def normalize(value: Number) -> Number:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    i = 2
    while i * i <= n:
        if n % i == 0:
            return False
        i += 1
    return True


def remainder(a: Number, b: Number) -> Number:
    """Truncated remainder: the result takes the sign of the dividend a."""
    if isinstance(a, int) and isinstance(b, int):
        r = abs(a) % abs(b)
        return -r if a < 0 else r
    return math.fmod(a, b)


def gcd(a: Number, b: Number) -> Number:
    if b == 0:
        return a
    return gcd(b, remainder(a, b))


def lcm(a: Number, b: Number) -> Number:
    divisor = gcd(a, b)
    if divisor == 0:
        # only reachable for lcm(0, 0)
        return 0
    if isinstance(a, int) and isinstance(b, int):
        return a * b // divisor
    return a * b / divisor


def fibonacci(n: int) -> List[int]:
    """
    First n Fibonacci numbers, starting 0, 1.

    The two seed values always exist and the result is cut to length n,
    so fibonacci(0) == [] and fibonacci(1) == [0].
    """
    seq = [0, 1]
    for i in range(2, n):
        seq.append(seq[i - 1] + seq[i - 2])
    return seq[:n]


def filter_primes(values: Iterable[Any]) -> List[int]:
    """Keep integer primes in order; anything that is not an integer is dropped."""
    return [normalize(v) for v in values if is_integer(v) and is_prime(int(v))]


def lcm_of(values: Sequence[Number]) -> Number:
    # left fold seeded with the first element; callers reject empty input
    return normalize(reduce(lcm, values))


def hcf_of(values: Sequence[Number]) -> Number:
    return normalize(reduce(gcd, values))
