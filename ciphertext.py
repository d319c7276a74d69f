from __future__ import annotations
from math import gcd
from typing import Any
import numpy as np


class Ciphertext:
    """
    Encrypted vector of integers mod ptxt_space, one integer per slot.
    All arithmetic is in place, as in HElib's Ctxt.
    """

    def __init__(self, ctx: Any, data: np.ndarray, ptxt_space: int, level: int):
        self.ctx = ctx
        self.data = data
        self._ptxt_space = ptxt_space
        self._level = level
        self._reduce()

    # ---------- metadata ----------
    @property
    def p(self) -> int:
        return self.ctx.p

    @property
    def ptxt_space(self) -> int:
        return self._ptxt_space

    @property
    def level(self) -> int:
        return self._level

    @property
    def effective_r(self) -> int:
        """
        Number of base-p digits the plaintext space still holds,
        i.e. log_p(ptxt_space).
        """
        p, t, k = self.p, self._ptxt_space, 0
        while t % p == 0:
            t //= p
            k += 1
        if t != 1:
            raise ValueError(f"ptxt_space {self._ptxt_space} is not a power of {p}")
        return k

    # ---------- copy ----------
    def copy(self) -> Ciphertext:
        return Ciphertext(self.ctx, self.data.copy(), self._ptxt_space, self._level)

    def assign(self, other: Ciphertext) -> Ciphertext:
        self.ctx = other.ctx
        self.data = other.data.copy()
        self._ptxt_space = other._ptxt_space
        self._level = other._level
        return self

    # ---------- helpers ----------
    def _check_ctx(self, other: Ciphertext):
        if other.ctx is not self.ctx:
            raise ValueError("ciphertexts belong to different contexts")

    def _reduce(self):
        # mod t*q keeps the value mod t and divisibility by p
        self.data = self.data % (self._ptxt_space * self.ctx.q)

    def _drop_levels(self, n: int):
        if self._level - n < 0:
            raise RuntimeError(
                f"level exhausted: need {n} level(s), have {self._level}")
        self._level -= n

    # ---------- ct (+/-) ct ----------
    def __iadd__(self, other: Ciphertext) -> Ciphertext:
        self._check_ctx(other)
        self.data = self.data + other.data
        self._ptxt_space = gcd(self._ptxt_space, other._ptxt_space)
        self._level = min(self._level, other._level)
        self._reduce()
        self.ctx._count("add")
        return self

    def __isub__(self, other: Ciphertext) -> Ciphertext:
        self._check_ctx(other)
        self.data = self.data - other.data
        self._ptxt_space = gcd(self._ptxt_space, other._ptxt_space)
        self._level = min(self._level, other._level)
        self._reduce()
        self.ctx._count("sub")
        return self

    # ---------- multiplication ----------
    def __imul__(self, other: Ciphertext) -> Ciphertext:
        self._check_ctx(other)
        if other._level < self._level:
            self._level = other._level
        self._drop_levels(1)
        self.data = self.data * other.data
        self._ptxt_space = gcd(self._ptxt_space, other._ptxt_space)
        self._reduce()
        self.ctx._count("multiply")
        return self

    def square(self) -> Ciphertext:
        self._drop_levels(1)
        self.data = self.data * self.data
        self._reduce()
        self.ctx._count("square")
        return self

    def cube(self) -> Ciphertext:
        # x^2 then x^2 * x
        self._drop_levels(2)
        self.data = self.data * self.data * self.data
        self._reduce()
        self.ctx._count("cube")
        return self

    def multiply_plain(self, c: int) -> Ciphertext:
        self.data = self.data * (int(c) % self._ptxt_space)
        self._reduce()
        self.ctx._count("multiply_plain")
        return self

    def add_plain(self, c: int) -> Ciphertext:
        self.data = self.data + (int(c) % self._ptxt_space)
        self._reduce()
        self.ctx._count("add_plain")
        return self

    # ---------- digit shift ----------
    def divide_by_p(self) -> Ciphertext:
        """
        Divide by p, for plaintext space p^k with k > 1.

        The plaintext is assumed to be zero mod p. If it is not, the result
        is no longer a valid encryption of anything meaningful.
        """
        p = self.p
        if self._ptxt_space <= p:
            raise ValueError(f"cannot divide by p with ptxt_space {self._ptxt_space}")
        self.data = self.data // p
        self._ptxt_space //= p
        self._reduce()
        self.ctx._count("divide_by_p")
        return self

    def __repr__(self):
        return (f"Ciphertext(p={self.p}, ptxt_space={self._ptxt_space}, "
                f"level={self._level}, slots={len(self.data)})")
