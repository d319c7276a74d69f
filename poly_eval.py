from typing import Any, Dict, List
import numpy as np

from ciphertext import Ciphertext
from interpolation import poly_trim


def make_power_basis(ct: Ciphertext, degree: int) -> List[Ciphertext]:
    """
    Returns [ct^1, ..., ct^degree].
    ct^k costs ceil(log2 k) levels: ct^(2^j) by repeated squaring,
    the rest as ct^(2^j) * ct^(k - 2^j).
    """
    if degree < 1:
        return []
    pos: Dict[int, Ciphertext] = {1: ct.copy()}
    for k in range(2, degree + 1):
        hi = 1 << (k.bit_length() - 1)
        if hi == k:
            pos[k] = pos[k // 2].copy().square()
        else:
            x = pos[hi].copy()
            x *= pos[k - hi]
            pos[k] = x
    return [pos[k] for k in range(1, degree + 1)]


class PolyEvaluator:
    """
    Evaluates a public integer polynomial at an encrypted point.
    coeffs[k] is the coefficient of x^k.
    """

    def __init__(self, ctx: Any):
        self.ctx = ctx

    def apply(self, target: Ciphertext, poly: np.ndarray, source: Ciphertext) -> Ciphertext:
        t = source.ptxt_space
        coeffs = poly_trim([int(c) % t for c in poly])
        deg = len(coeffs) - 1

        if deg <= 0:
            # constant (or zero) polynomial: 0*x + c keeps source's metadata
            res = source.copy().multiply_plain(0)
            if deg == 0:
                res.add_plain(coeffs[0])
            return target.assign(res)

        pos = make_power_basis(source, deg)

        res = None
        for k in range(1, deg + 1):
            c = coeffs[k]
            if c == 0:
                continue
            term = pos[k - 1]
            if c != 1:
                term.multiply_plain(c)
            if res is None:
                res = term
            else:
                res += term
        if coeffs[0] != 0:
            res.add_plain(coeffs[0])
        return target.assign(res)

    def __call__(self, target: Ciphertext, poly: np.ndarray, source: Ciphertext) -> Ciphertext:
        return self.apply(target, poly, source)
