"""
Shamir's Secret Sharing over GF(2^8).

Splits a secret of any length into N shares where any K shares can
reconstruct the original, but K-1 shares reveal nothing beyond its length
(information-theoretic security).

Each secret byte gets its own random polynomial of degree K-1, so a share
is one y-value per secret byte followed by the share's x-coordinate:

    y_0 y_1 ... y_{len-1} x

There is no header, version byte or checksum. Framing is up to the caller
(see `gf_shamir.codec`).
"""

import operator
from typing import List, Sequence, Tuple

from .errors import (
    DuplicateShare,
    InconsistentShareLength,
    InsufficientShares,
    InvalidParameters,
    MalformedShare,
)
from .polynomial import Polynomial
from .rng import x_coordinates
from .secret import SecretBytes, as_secret, wipe

MAX_SHARES = 255
MIN_THRESHOLD = 2


def split(secret, n: int, k: int, *, rng=None) -> List[bytes]:
    """
    Split a secret into n shares, requiring k to reconstruct.

    Args:
        secret: The secret to split. Anything `as_secret` accepts: bytes,
            bytearray, memoryview, str, a sequence of ints, or a `Secret`.
        n: Total number of shares to generate (k..255)
        k: Minimum shares needed to reconstruct (2..255)
        rng: Random source with `shuffle` and `randbytes`. Defaults to the
            OS CSPRNG; only pass something else in tests.

    Returns:
        n shares of len(secret) + 1 bytes each. Their order follows the
        random x-coordinate draw, so index says nothing about x.

    Raises:
        InvalidParameters: If k or n is out of range or the secret is empty
        TypeError: If n or k is not an integer, or the secret type is unsupported
    """
    n = operator.index(n)
    k = operator.index(k)
    secret = as_secret(secret)

    if not MIN_THRESHOLD <= k <= MAX_SHARES:
        raise InvalidParameters(f"threshold k must be in {MIN_THRESHOLD}..{MAX_SHARES}, got {k}")
    if not k <= n <= MAX_SHARES:
        raise InvalidParameters(f"share count n must be in k..{MAX_SHARES}, got n={n} k={k}")
    if secret.is_empty():
        raise InvalidParameters("secret must not be empty")

    xs = x_coordinates(n, rng)
    size = len(secret)
    shares = [bytearray(size + 1) for _ in range(n)]
    for share, x in zip(shares, xs):
        share[size] = x

    # k points determine a polynomial of degree k-1
    degree = k - 1
    check_range = not isinstance(secret, SecretBytes)
    for s_idx, secret_byte in enumerate(secret):
        if check_range and not 0 <= secret_byte <= 0xFF:
            raise ValueError(f"Secret byte {s_idx} is out of range")
        poly = Polynomial.generate(secret_byte, degree, rng)
        try:
            for share, x in zip(shares, xs):
                share[s_idx] = poly.evaluate(x)
        finally:
            poly.wipe()

    return [bytes(share) for share in shares]


def _share_view(share, position: int) -> memoryview:
    if isinstance(share, str):
        raise TypeError(
            f"Share {position} is a str; decode it first (gf_shamir.codec.decode_share)"
        )
    try:
        view = memoryview(share)
    except TypeError:
        if not isinstance(share, (list, tuple)):
            raise TypeError(f"Share {position} is not byte-like: {type(share).__name__}") from None
        view = memoryview(bytes(share))
    if view.format != 'B' or view.ndim != 1:
        view = view.cast('B')
    return view


def validate_shares(shares: Sequence) -> Tuple[List[memoryview], List[int]]:
    """
    Check a share set the way `combine` does, without reconstructing.

    Returns:
        (views, xs): a byte view of every share and their x-coordinates

    Raises:
        InsufficientShares: Fewer than two shares
        MalformedShare: A share shorter than two bytes, or with x = 0
        InconsistentShareLength: Shares differ in length
        DuplicateShare: Two shares carry the same x-coordinate
    """
    shares = list(shares)
    if len(shares) < 2:
        raise InsufficientShares(f"got {len(shares)}")

    views = [_share_view(share, i) for i, share in enumerate(shares)]

    for i, view in enumerate(views):
        if len(view) < 2:
            raise MalformedShare(f"share {i} is {len(view)} bytes, need at least 2")

    length = len(views[0])
    for i, view in enumerate(views[1:], 1):
        if len(view) != length:
            raise InconsistentShareLength(f"share {i} is {len(view)} bytes, expected {length}")

    xs = []
    seen = set()
    for i, view in enumerate(views):
        x = view[length - 1]
        if x == 0:
            raise MalformedShare(f"share {i} has x-coordinate 0")
        if x in seen:
            raise DuplicateShare(f"x-coordinate {x} appears more than once")
        seen.add(x)
        xs.append(x)

    return views, xs


def combine(shares: Sequence) -> bytes:
    """
    Reconstruct the secret from a set of shares by Lagrange interpolation at 0.

    Every share supplied is used. Combine does not know the threshold: with
    k or more shares from one split the result is the secret; with fewer it
    is random-looking bytes and no error is raised. Callers must supply at
    least k shares.

    Args:
        shares: Sequence of shares (bytes, bytearray, memoryview or
            sequences of ints) as returned by `split`

    Returns:
        The secret, one byte shorter than each share

    Raises:
        InsufficientShares, MalformedShare, InconsistentShareLength,
        DuplicateShare: See `validate_shares`
    """
    views, xs = validate_shares(shares)
    size = len(views[0]) - 1

    # Basis values at 0 depend only on the x-coordinates, shared by every column
    weights = Polynomial.lagrange_weights(xs, 0)

    secret = bytearray(size)
    ys = bytearray(len(views))
    try:
        for s_idx in range(size):
            for i, view in enumerate(views):
                ys[i] = view[s_idx]
            secret[s_idx] = Polynomial.combine_weighted(weights, ys)
        return bytes(secret)
    finally:
        wipe(ys)
        wipe(secret)
