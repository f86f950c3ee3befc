"""Pseudo-random numbers with random.Random."""

from primer.core.constants import DemoCategory
from primer.demos import pacing
from primer.demos.registry import register_demo

# Largest value returned by the default integer draw (2**31 - 1, exclusive)
MAX_DEFAULT_INT = 2 ** 31 - 1


def format_bytes(data: bytes) -> str:
    """Format bytes as upper-case hex pairs joined by dashes, e.g. 0A-FF-10."""
    return data.hex("-").upper()


@register_demo("randoms", "Random Numbers", DemoCategory.BASICS)
def run() -> None:
    """Integers, ranges, floats and random bytes."""
    rand = pacing.rng()

    default_random = rand.randrange(MAX_DEFAULT_INT)
    print("Default random int:", default_random)

    # randrange excludes the stop value, randint includes it
    in_range = rand.randrange(1, 100)
    print("Random number between 1 and 99:", in_range)

    print("Random float between 0.0 and 1.0:", rand.random())

    buffer = rand.randbytes(5)
    print("Random bytes:", format_bytes(buffer))

    print("Random choice:", rand.choice(["rock", "paper", "scissors"]))
    deck = list(range(1, 6))
    rand.shuffle(deck)
    print("Shuffled:", deck)
