import math

from .errors import InvalidLengthError


def is_power_of_two(n: int) -> bool:
    """Return True for 1, 2, 4, 8, ... and False otherwise (including 0)."""
    return n > 0 and (n & (n - 1)) == 0


def lowest_odd_factor(n: int) -> int:
    """
    Find the smallest odd factor >= 3 of n.

    Trial division runs over odd candidates up to floor(sqrt(n)); if none
    divides n, n itself is returned (primes, and lengths such as 6 or 10 whose
    odd factor is larger than sqrt(n)).

    Parameters
    ----------
    n : int
        Positive integer

    Returns
    -------
    int
        The lowest odd factor, or n

    Examples
    --------
    >>> lowest_odd_factor(15)
    3
    >>> lowest_odd_factor(17)
    17
    """
    if n <= 0:
        raise InvalidLengthError(f"Factor search needs a positive integer, got {n}")

    sqrt_n = math.sqrt(n)
    factor = 3
    while factor <= sqrt_n:
        if n % factor == 0:
            return factor
        factor += 2
    return n
