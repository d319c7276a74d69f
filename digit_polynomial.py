from functools import lru_cache
from pathlib import Path
from typing import Optional
import numpy as np

from coeff_io import coeff_path, load_coeff1d
from interpolation import interpolate_mod, poly_degree, poly_add
from utils import SectionTimer

"""
    digit polynomial :
    f(x) = x^p + g(x),  deg g < p
    g interpolated mod p^e through (z0, z0 - z0^p) for the p centered residues z0

    => for any t < e and z = z0 + p^t * z1:  f(z) = z0 (mod p^(t+1))
       i.e. f acts like x^p on digits but keeps the low digit fixed
"""


def build_digit_polynomial(p: int, e: int, timer: Optional[SectionTimer] = None) -> np.ndarray:
    """
    Degree-p polynomial f with f(z0 + p^t*z1) = z0 (mod p^(t+1)) for every
    t < e and every digit representative z0. coeffs[k] is the coefficient of x^k.

    Returns an empty array for p < 2 or e <= 1, where no correction is needed.
    """
    if p < 2 or e <= 1:
        return np.array([], dtype=object)
    timer = timer or SectionTimer(enabled=False)
    with timer.section("build_digit_polynomial"):
        p2e = p ** e

        # z0 - z0^p (mod p^e) on the centered residues
        x = []
        y = []
        bottom = -(p // 2)
        for j in range(p):
            z = bottom + j
            v = z - pow(z + p2e if z < 0 else z, p, p2e)
            while v > p2e // 2:
                v -= p2e
            while v < -(p2e // 2):
                v += p2e
            x.append(z)
            y.append(v)

        g = interpolate_mod(x, y, p, e)
        # p points, so deg g <= p-1
        assert poly_degree(g) < p, f"interpolation mod {p}^{e} returned degree {poly_degree(g)}"

        xp = np.array([0] * p + [1], dtype=object)
        return poly_add(g, xp)


@lru_cache(maxsize=None)
def _cached(p: int, e: int) -> tuple:
    return tuple(build_digit_polynomial(p, e))


def get_digit_polynomial(p: int, e: int) -> np.ndarray:
    """Memoized build_digit_polynomial. The returned array is read-only."""
    coeffs = np.array(_cached(p, e), dtype=object)
    coeffs.setflags(write=False)
    return coeffs


def load_digit_polynomial(p: int, e: int, coeff_dir: Optional[Path] = None) -> np.ndarray:
    """
    Prefer coefficients precomputed by gen/make_digit_poly_coeffs.py under
    coeff_dir; fall back to get_digit_polynomial when no file exists.
    """
    if coeff_dir is None or p < 2 or e <= 1:
        return get_digit_polynomial(p, e)
    path = coeff_path(coeff_dir, p, e)
    if not path.exists():
        return get_digit_polynomial(p, e)
    coeffs = load_coeff1d(path)
    if poly_degree(coeffs) != p or coeffs[p] != 1:
        raise ValueError(f"{path}: expected a monic degree-{p} polynomial")
    coeffs.setflags(write=False)
    return coeffs
