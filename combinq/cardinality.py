"""
exact counting for the three generator families.
everything here works on python ints, so results never overflow.
"""

import math


def factorial(n: int) -> int:
    """n! with 0! == 1. negative n raises valueerror."""
    if n < 0:
        raise ValueError("factorial is not defined for negative values")
    return math.factorial(n)


def choose(n: int, k: int) -> int:
    """
    n choose k.
    returns 0 when k > n or either argument is not positive, so choose(0, 0) == 0.
    """
    if n <= 0 or k <= 0:
        return 0
    if k > n:
        return 0
    if k == n:
        return 1
    # the numerator is always divisible here, floor division is exact
    return factorial(n) // (factorial(k) * factorial(n - k))


def permute(n: int, k: int) -> int:
    """number of ordered k-tuples of distinct items out of n: n! / (n-k)!"""
    if n < 0 or k < 0:
        raise ValueError("permute is not defined for negative values")
    if k > n:
        return 0
    return factorial(n) // factorial(n - k)


def multichoose(n: int, k: int) -> int:
    """number of size-k multisets over n items: (n+k-1)! / (k! * (n-1)!)"""
    if k < 0:
        raise ValueError("multichoose is not defined for negative k")
    if n <= 0:
        return 0
    return factorial(n + k - 1) // (factorial(k) * factorial(n - 1))


# --- appearance counts ---
# how often a single index value shows up across a full enumeration.
# every value is symmetric, so these are handy cross-checks for the generators.

def combination_appearances(n: int, k: int) -> int:
    return choose(n, k) - choose(n - 1, k)


def permutation_appearances(n: int, k: int) -> int:
    return permute(n, k) - permute(n - 1, k)


def multichoose_appearances(n: int, k: int) -> int:
    """counts repeated occurrences inside one tuple separately"""
    if n <= 0:
        return 0
    return k * multichoose(n, k) // n
