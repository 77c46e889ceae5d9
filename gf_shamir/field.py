"""
Arithmetic in GF(2^8) with the AES reduction polynomial.

Bytes are read as polynomials over GF(2) modulo x^8 + x^4 + x^3 + x + 1
(0x11B). Addition is XOR. Multiplication is bit-serial and branch-free so
its running time does not depend on the operands; no log/exp tables are
consulted, since indexing a table by a secret byte leaks it through the
cache.
"""

# x^8 + x^4 + x^3 + x + 1
POLYNOMIAL = 0x11B
ORDER = 256


def add(a: int, b: int) -> int:
    """Add two field elements (XOR). Also serves as subtraction."""
    return a ^ b


sub = add


def mul(a: int, b: int) -> int:
    """
    Multiply two field elements.

    Russian-peasant multiplication over exactly 8 rounds. Each round folds
    `a` into the product when the low bit of `b` is set, then doubles `a`
    and reduces it by 0x1B when its high bit overflowed. Both conditionals
    are masks, not branches.
    """
    product = 0
    for _ in range(8):
        product ^= -(b & 1) & a
        carry = -(a >> 7) & 0x1B
        a = ((a << 1) & 0xFF) ^ carry
        b >>= 1
    return product


def power(a: int, exponent: int) -> int:
    """Raise `a` to a public, non-negative exponent by square-and-multiply."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    base = a
    while exponent:
        if exponent & 1:
            result = mul(result, base)
        base = mul(base, base)
        exponent >>= 1
    return result


def inv(a: int) -> int:
    """Multiplicative inverse, computed as a^254 (the group has order 255)."""
    if a == 0:
        raise ZeroDivisionError("0 has no inverse in GF(2^8)")
    return power(a, 254)


def div(a: int, b: int) -> int:
    """Divide `a` by a non-zero `b`."""
    if b == 0:
        raise ZeroDivisionError("division by 0 in GF(2^8)")
    return mul(a, inv(b))
