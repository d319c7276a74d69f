from contextlib import contextmanager
from typing import Dict, List, Optional, Sequence
import time


class DigitEncoder:
    """
    Base-p digits over the representatives fixed by the p-th power map:
    {0, 1} for p = 2, the centered residue system for odd p.
    """
    @staticmethod
    def center(v: int, m: int) -> int:
        # into (-m/2, m/2]
        v %= m
        return v - m if v > m // 2 else v

    @staticmethod
    def representatives(p: int) -> List[int]:
        if p == 2:
            return [0, 1]
        bottom = -(p // 2)
        return list(range(bottom, bottom + p))

    @staticmethod
    def to_digits(z: int, p: int, r: int) -> List[int]:
        reps = {d % p: d for d in DigitEncoder.representatives(p)}
        z %= p ** r
        digits = []
        for _ in range(r):
            d = reps[z % p]
            digits.append(d)
            z = (z - d) // p
        return digits

    @staticmethod
    def from_digits(digits: Sequence[int], p: int, modulus: Optional[int] = None) -> int:
        z = sum(int(d) * p ** i for i, d in enumerate(digits))
        return z if modulus is None else z % modulus


class SectionTimer:
    """
    Accumulates wall time per named section. A disabled timer records nothing.
    """

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._total: Dict[str, float] = {}
        self._count: Dict[str, int] = {}

    @contextmanager
    def section(self, name: str):
        if not self.enabled:
            yield
            return
        t0 = time.perf_counter()
        try:
            yield
        finally:
            dt = time.perf_counter() - t0
            self._total[name] = self._total.get(name, 0.0) + dt
            self._count[name] = self._count.get(name, 0) + 1

    def stats(self) -> Dict[str, dict]:
        return {k: {"count": self._count[k], "total_s": self._total[k]}
                for k in self._total}
