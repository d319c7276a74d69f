from typing import Dict, Optional
import numpy as np

from ciphertext import Ciphertext
from utils import DigitEncoder


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    k = 2
    while k * k <= n:
        if n % k == 0:
            return False
        k += 1
    return True


class EngineContext:
    """
    Simulated BGV context over Z_{p^r} slots.

    Each slot holds one integer (constant term only). A ciphertext slot is
    m + t*e with t the plaintext space and e small noise drawn at encryption,
    kept mod t*q. Since p | t, decryption mod t and exact divide-by-p survive
    the reduction.
    """

    def __init__(self,
                 p: int,
                 r: int,
                 *,
                 slot_count: int = 8,
                 max_level: int = 24,
                 noise_bound: int = 16,
                 q_bits: int = 128,
                 seed: Optional[int] = None):
        if not _is_prime(p):
            raise ValueError(f"p must be prime, got {p}")
        if r < 1:
            raise ValueError(f"r must be >= 1, got {r}")
        if slot_count < 1:
            raise ValueError(f"slot_count must be >= 1, got {slot_count}")
        if max_level < 0:
            raise ValueError(f"max_level must be >= 0, got {max_level}")
        if noise_bound < 0:
            raise ValueError(f"noise_bound must be >= 0, got {noise_bound}")
        if q_bits < 1:
            raise ValueError(f"q_bits must be >= 1, got {q_bits}")

        self.p = p
        self.r = r
        self.p2r = p ** r
        self.slot_count = slot_count
        self.max_level = max_level
        self.noise_bound = noise_bound
        self.q_bits = q_bits
        self.q = 1 << q_bits
        self.rng = np.random.default_rng(seed)

        # operation counters
        self._ops: Dict[str, int] = {}

    def _count(self, op: str, n: int = 1):
        self._ops[op] = self._ops.get(op, 0) + n

    def op_stats(self) -> Dict[str, int]:
        return dict(self._ops)

    def reset_op_stats(self):
        self._ops = {}

    def _slots(self, values) -> np.ndarray:
        if np.isscalar(values):
            values = [values] * self.slot_count
        arr = [int(v) for v in np.asarray(values).ravel()]
        if len(arr) > self.slot_count:
            raise ValueError(f"got {len(arr)} values for {self.slot_count} slots")
        # unused slots are zero
        arr += [0] * (self.slot_count - len(arr))
        return np.array(arr, dtype=object)

    def encrypt(self, values, ptxt_space: Optional[int] = None) -> Ciphertext:
        t = self.p2r if ptxt_space is None else ptxt_space
        if t < self.p or t > self.p2r or self.p2r % t != 0:
            raise ValueError(f"ptxt_space must be p^k with 1 <= k <= {self.r}, got {t}")
        m = self._slots(values) % t
        e = self.rng.integers(-self.noise_bound, self.noise_bound + 1, size=self.slot_count)
        data = m + t * np.array([int(v) for v in e], dtype=object)
        self._count("encrypt")
        return Ciphertext(self, data, t, self.max_level)

    def decrypt(self, ct: Ciphertext, modulus: Optional[int] = None) -> np.ndarray:
        """
        Slot values in [0, modulus). modulus defaults to the ciphertext's
        plaintext space and must divide it.
        """
        m = ct.ptxt_space if modulus is None else modulus
        if m < 1 or ct.ptxt_space % m != 0:
            raise ValueError(f"modulus {m} does not divide ptxt_space {ct.ptxt_space}")
        self._count("decrypt")
        return np.array([int(v) % m for v in ct.data], dtype=object)

    def decrypt_centered(self, ct: Ciphertext, modulus: Optional[int] = None) -> np.ndarray:
        m = ct.ptxt_space if modulus is None else modulus
        vals = self.decrypt(ct, m)
        return np.array([DigitEncoder.center(v, m) for v in vals], dtype=object)
