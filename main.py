import numpy as np
from engine_context import EngineContext
from digit_extraction import DigitExtractor
from utils import DigitEncoder
import time
from pathlib import Path

# -------- setting ----------

# written by gen/make_digit_poly_coeffs.py; missing files are built on the fly
COEFF_DIR = Path(__file__).parent / "gen" / "coeffs"

# BGV parameters (plaintext space p^r, one integer per slot)
BGV_PARAMS = {
    "p": 7,
    "r": 4,
    "slot_count": 8,
    "max_level": 24,
    "seed": 0,
}


def decode_digits(ctx, digits, short_cut: bool) -> np.ndarray:
    """rows = digit position, columns = slot"""
    rows = []
    for d in digits:
        # short-cut digits are read mod p, the others at their own ptxt space
        m = ctx.p if short_cut else d.ptxt_space
        rows.append(ctx.decrypt_centered(d, m))
    return np.array(rows, dtype=object)


# ------ Main ------------
def main():
    # 1) context
    ctx = EngineContext(**BGV_PARAMS)
    p, r = ctx.p, ctx.r

    # 2) sample integers in [0, p^r)
    rng = np.random.default_rng(0)
    values = rng.integers(0, p ** r, size=ctx.slot_count)
    print("Plaintext values:", values)

    ct = ctx.encrypt(values)
    extractor = DigitExtractor(ctx, coeff_dir=COEFF_DIR, profile=True)

    for short_cut in (False, True):
        ctx.reset_op_stats()
        start = time.perf_counter()
        digits = extractor.extract(ct, r, short_cut=short_cut)
        end = time.perf_counter()

        got = decode_digits(ctx, digits, short_cut)
        expected = np.array([DigitEncoder.to_digits(int(v), p, r) for v in values], dtype=object).T
        if short_cut:
            got = got % p
            expected = expected % p

        print(f"--- short_cut={short_cut} ---")
        print("levels:     ", [d.level for d in digits])
        print("ptxt spaces:", [d.ptxt_space for d in digits])
        print("HE digits:\n", got)
        print("expected:\n", expected)
        print("match:", bool((got == expected).all()))
        print("ops:", ctx.op_stats())
        print("profile:", extractor.last_profile())
        print(f"extract_digits took {end - start : .6f} seconds")


if __name__ == '__main__':
    main()
