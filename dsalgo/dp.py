"""Counting and optimisation problems solved by dynamic programming.

Counts are reported modulo ``MOD``.
"""

from collections.abc import Iterable, Sequence

__all__ = [
    "MOD",
    "TRAP",
    "array_descriptions",
    "book_shop",
    "dice_combinations",
    "grid_paths",
    "minimizing_coins",
    "ordered_coin_combinations",
    "removing_digits",
    "unordered_coin_combinations",
]

MOD = 10**9 + 7
TRAP = "*"
DIE_FACES = 6


def _check_target(target: int) -> None:
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")


def _checked_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    for coin in values:
        if coin <= 0:
            raise ValueError(f"coin values must be positive, got {coin}")
    return values


def array_descriptions(values: Iterable[int], upper: int) -> int:
    """Count the arrays that match ``values`` where 0 marks an unknown entry.

    Every entry lies in ``1..upper`` and neighbouring entries differ by at
    most one. A known entry above ``upper`` admits no array.
    """
    known = list(values)
    if not known:
        raise ValueError("values must not be empty")
    if upper < 1:
        raise ValueError(f"upper must be positive, got {upper}")
    if any(value < 0 for value in known):
        raise ValueError("values must be non-negative")

    # Slots 0 and upper + 1 stay zero so that neighbours need no bounds checks.
    first = known[0]
    ways = [0] * (upper + 2)
    for x in range(1, upper + 1):
        if first in (0, x):
            ways[x] = 1
    for value in known[1:]:
        following = [0] * (upper + 2)
        if value == 0:
            allowed: Iterable[int] = range(1, upper + 1)
        else:
            allowed = [value] if value <= upper else []
        for x in allowed:
            following[x] = (ways[x - 1] + ways[x] + ways[x + 1]) % MOD
        ways = following
    return sum(ways) % MOD


def book_shop(budget: int, prices: Iterable[int], pages: Iterable[int]) -> int:
    """Return the most pages that books costing at most ``budget`` can hold.

    Each book is bought at most once.
    """
    if budget < 0:
        raise ValueError(f"budget must be non-negative, got {budget}")
    costs = list(prices)
    counts = list(pages)
    if len(costs) != len(counts):
        raise ValueError("prices and pages must have the same length")
    best = [0] * (budget + 1)
    for cost, count in zip(costs, counts):
        if cost < 0:
            raise ValueError(f"prices must be non-negative, got {cost}")
        for spent in range(budget, cost - 1, -1):
            best[spent] = max(best[spent], best[spent - cost] + count)
    return best[budget]


def ordered_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count the ordered sequences of coins that sum to ``target``."""
    values = _checked_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for amount in range(1, target + 1):
        ways[amount] = sum(ways[amount - coin] for coin in values if coin <= amount) % MOD
    return ways[target]


def unordered_coin_combinations(coins: Iterable[int], target: int) -> int:
    """Count the multisets of coins that sum to ``target``."""
    values = _checked_coins(coins)
    _check_target(target)
    ways = [1] + [0] * target
    for coin in values:
        for amount in range(coin, target + 1):
            ways[amount] = (ways[amount] + ways[amount - coin]) % MOD
    return ways[target]


def dice_combinations(total: int) -> int:
    """Count the sequences of die throws whose faces sum to ``total``."""
    _check_target(total)
    ways = [1] + [0] * total
    for amount in range(1, total + 1):
        ways[amount] = sum(ways[amount - face] for face in range(1, min(DIE_FACES, amount) + 1)) % MOD
    return ways[total]


def grid_paths(grid: Iterable[Sequence[str]]) -> int:
    """Count the right-and-down paths from the top-left to the bottom-right cell.

    Cells holding ``TRAP`` cannot be entered.
    """
    rows = [list(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    above = [0] * width
    for r, row in enumerate(rows):
        current = [0] * width
        for c, cell in enumerate(row):
            if cell == TRAP:
                continue
            if r == 0 and c == 0:
                current[c] = 1
            else:
                left = current[c - 1] if c > 0 else 0
                current[c] = (above[c] + left) % MOD
        above = current
    return above[-1]


def minimizing_coins(coins: Iterable[int], target: int) -> int | None:
    """Return the fewest coins that sum to ``target``, or None if none do."""
    values = _checked_coins(coins)
    _check_target(target)
    fewest: list[int | None] = [0] + [None] * target
    for amount in range(1, target + 1):
        options = [
            previous
            for coin in values
            if coin <= amount and (previous := fewest[amount - coin]) is not None
        ]
        if options:
            fewest[amount] = min(options) + 1
    return fewest[target]


def removing_digits(number: int) -> int:
    """Return the fewest steps to reach zero, each subtracting a digit of the number."""
    if number < 0:
        raise ValueError(f"number must be non-negative, got {number}")
    steps = [0] * (number + 1)
    for value in range(1, number + 1):
        steps[value] = min(
            steps[value - digit] + 1 for digit in map(int, str(value)) if digit
        )
    return steps[number]