"""
Randomness for share generation.

Any object with the `random.Random` methods `shuffle` and `randbytes` can
act as the source. Production code uses the OS CSPRNG through
`secrets.SystemRandom`; tests pass a seeded `random.Random` to get
reproducible shares.
"""

import secrets

_SYSTEM_RNG = secrets.SystemRandom()


def default_rng() -> secrets.SystemRandom:
    """The process-wide CSPRNG. Stateless (reads os.urandom), so thread-safe."""
    return _SYSTEM_RNG


def x_coordinates(n: int, rng=None) -> list:
    """
    Draw `n` distinct non-zero field elements in random order.

    Shuffles 1..255 with a Fisher-Yates pass (`rng.shuffle`) and keeps the
    first `n`.
    """
    if not 1 <= n <= 255:
        raise ValueError(f"Can only draw 1..255 x-coordinates, asked for {n}")
    rng = rng or _SYSTEM_RNG
    xs = list(range(1, 256))
    rng.shuffle(xs)
    return xs[:n]


def random_bytes(n: int, rng=None) -> bytearray:
    """`n` independent uniform bytes, in a wipeable buffer."""
    rng = rng or _SYSTEM_RNG
    return bytearray(rng.randbytes(n))
