"""
Integer polynomial helpers and interpolation modulo p^e.

Polynomials are numpy object arrays of Python ints, constant term first
(coeffs[k] is the coefficient of x^k).
"""
from typing import Optional, Sequence
import numpy as np


def poly_trim(coeffs) -> np.ndarray:
    """Drop trailing zero coefficients."""
    c = [int(v) for v in coeffs]
    while c and c[-1] == 0:
        c.pop()
    return np.array(c, dtype=object)


def poly_degree(coeffs) -> int:
    """Degree of the polynomial, -1 for the zero polynomial."""
    return len(poly_trim(coeffs)) - 1


def poly_eval_int(coeffs, x: int, modulus: Optional[int] = None) -> int:
    """Horner evaluation in exact integers, optionally reduced mod modulus."""
    result = 0
    for c in reversed(list(coeffs)):
        result = result * x + int(c)
        if modulus is not None:
            result %= modulus
    return result


def poly_add(a, b) -> np.ndarray:
    n = max(len(a), len(b))
    out = [0] * n
    for k, c in enumerate(a):
        out[k] += int(c)
    for k, c in enumerate(b):
        out[k] += int(c)
    return np.array(out, dtype=object)


def interpolate_mod(x: Sequence[int], y: Sequence[int], p: int, e: int) -> np.ndarray:
    """
    Interpolate the polynomial of degree < len(x) through (x[i], y[i])
    with coefficients in [0, p^e).

    The x values must be pairwise distinct mod p, so that every difference
    x[i] - x[j] is a unit mod p^e.
    """
    if len(x) != len(y):
        raise ValueError(f"length mismatch: {len(x)} x values, {len(y)} y values")
    if not x:
        raise ValueError("need at least one point")
    n = len(x)
    m = p ** e
    xs = [int(v) for v in x]
    for i in range(n):
        for j in range(i):
            if (xs[i] - xs[j]) % p == 0:
                raise ValueError(f"x values {xs[j]} and {xs[i]} coincide mod {p}")

    # Newton divided differences mod p^e
    dd = [int(v) % m for v in y]
    for k in range(1, n):
        for i in range(n - 1, k - 1, -1):
            inv = pow((xs[i] - xs[i - k]) % m, -1, m)
            dd[i] = (dd[i] - dd[i - 1]) * inv % m

    # Newton form -> monomial coefficients, innermost term first
    coeffs = [dd[n - 1]]
    for k in range(n - 2, -1, -1):
        # coeffs <- coeffs * (x - xs[k]) + dd[k]
        shifted = [0] + coeffs
        for i in range(len(coeffs)):
            shifted[i] -= xs[k] * coeffs[i]
        shifted[0] += dd[k]
        coeffs = [c % m for c in shifted]
    return poly_trim(coeffs)
