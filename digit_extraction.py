from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import Any, List, Optional

from ciphertext import Ciphertext
from digit_polynomial import load_digit_polynomial
from poly_eval import PolyEvaluator
from utils import SectionTimer


class PowerStrategy(Enum):
    """How w -> w^p is computed for the digit-peeling rounds."""
    SQUARE = "square"
    CUBE = "cube"
    POLY = "poly"

    @classmethod
    def for_prime(cls, p: int) -> PowerStrategy:
        if p == 2:
            return cls.SQUARE
        if p == 3:
            return cls.CUBE
        return cls.POLY


class DigitExtractor:
    """
    Homomorphic base-p digit extraction (HElib extractDigits).

    The input must encrypt, in every slot, an integer in [0, p^r) with only
    the constant term set. This is not checked: an out-of-range input or a
    ciphertext without enough levels left gives wrong digits, not an error.

    Digits come out over the representatives fixed by the p-th power map,
    {0, 1} for p = 2 and the centered residues for odd p, so that
    sum(d_i * p^i) = z (mod p^r).
    """

    def __init__(self, ctx: Any, *, evaluator: Optional[PolyEvaluator] = None,
                 coeff_dir: Optional[Path] = None, profile: bool = False):
        self.ctx = ctx
        self.evaluator = evaluator if evaluator is not None else PolyEvaluator(ctx)
        self.coeff_dir = coeff_dir
        self.profile = profile
        self._last_stats = None

    def extract(self, c: Ciphertext, r: int = 0, short_cut: bool = False) -> List[Ciphertext]:
        """
        Returns [d_0, ..., d_{r-1}], least significant first.

        r <= 0 or r > c.effective_r silently falls back to c.effective_r.

        short_cut=True: d_i is read mod p and sits at the highest level
        available (levels decrease with i).
        short_cut=False: d_i is exact mod p^(r-i) and all digits share one level.
        """
        timer = SectionTimer(enabled=self.profile)

        rr = c.effective_r
        if r <= 0 or r > rr:
            r = rr

        p = c.p
        strategy = PowerStrategy.for_prime(p)
        x2p = None
        if strategy is PowerStrategy.POLY:
            with timer.section("digit_polynomial"):
                x2p = load_digit_polynomial(p, r, self.coeff_dir)

        def raise_to_p(w: Ciphertext):
            with timer.section("power"):
                if strategy is PowerStrategy.SQUARE:
                    w.square()
                elif strategy is PowerStrategy.CUBE:
                    w.cube()
                else:
                    # "in spirit" w = w^p
                    self.evaluator.apply(w, x2p, w)

        digits: List[Optional[Ciphertext]] = [None] * r
        w: List[Optional[Ciphertext]] = [None] * r
        for i in range(r):
            tmp = c.copy()
            for j in range(i):
                raise_to_p(w[j])
                tmp -= w[j]
                tmp.divide_by_p()
            w[i] = tmp  # needed in the next round
            if short_cut:
                digits[i] = tmp.copy()

        if not short_cut:
            digits = [wi.copy() for wi in w]

        self._last_stats = timer.stats() if self.profile else None
        return digits

    def last_profile(self) -> Optional[dict]:
        return self._last_stats


def extract_digits(digits: list, c: Ciphertext, r: int = 0, short_cut: bool = False,
                   *, evaluator: Optional[PolyEvaluator] = None, coeff_dir: Optional[Path] = None,
                   profile: bool = False) -> list:
    """
    Replace the contents of `digits` with the r lowest base-p digits of c
    and return it. See DigitExtractor.extract.
    """
    extractor = DigitExtractor(c.ctx, evaluator=evaluator, coeff_dir=coeff_dir, profile=profile)
    digits[:] = extractor.extract(c, r, short_cut)
    return digits
