import random


def random_terms(seed: int, count: int = 100, low: int = 0, high: int = 99):
    """Yields ``count`` tuples (a, b, c, d) with b and d strictly positive."""
    rng = random.Random(seed)
    for _ in range(count):
        yield (
            rng.randint(low, high),
            rng.randint(1, high + 1),
            rng.randint(low, high),
            rng.randint(1, high + 1),
        )
