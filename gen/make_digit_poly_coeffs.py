"""
Script to generate digit-extraction polynomial coefficients.
Outputs JSON files in gen/coeffs/digit_poly_p{p}_e{e}.json, which
DigitExtractor(coeff_dir=...) and main.py pick up.

Runs from a source checkout (python gen/make_digit_poly_coeffs.py): the
repository root is put on sys.path so the root modules import without
installing the package.
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from coeff_io import coeff_path, save_coeff1d  # noqa: E402
from digit_polynomial import build_digit_polynomial  # noqa: E402
from interpolation import poly_eval_int  # noqa: E402

OUT_DIR = Path(__file__).parent / "coeffs"


def quick_verify(coeffs, p: int, e: int) -> bool:
    """
    f(z0 + p^t * z1) = z0 (mod p^(t+1)) for 1 <= t < e, over a few z1 values.
    """
    for t in range(1, e):
        mod = p ** (t + 1)
        for z0 in range(-(p // 2), p - p // 2):
            for z1 in range(-p, p + 1):
                z = z0 + p ** t * z1
                if poly_eval_int(coeffs, z, mod) != z0 % mod:
                    # first failure only
                    print(f"[verify fail] p={p} e={e}: t={t} z={z}")
                    return False
    return True


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--primes", type=int, nargs="+", default=[5, 7, 11, 13])
    parser.add_argument("--exponents", type=int, nargs="+", default=[2, 3, 4, 5, 6])
    parser.add_argument("--out-dir", type=Path, default=OUT_DIR)
    args = parser.parse_args()

    args.out_dir.mkdir(parents=True, exist_ok=True)
    for p in args.primes:
        for e in args.exponents:
            coeffs = build_digit_polynomial(p, e)
            if len(coeffs) == 0:
                print(f"skip: p={p} e={e} (no correction needed)")
                continue
            assert quick_verify(coeffs, p, e), f"verification failed for p={p} e={e}"
            out = save_coeff1d(coeffs, coeff_path(args.out_dir, p, e), p=p, e=e)
            print(f"saved: {out} (degree={len(coeffs) - 1})")
    print("All done & verified.")


if __name__ == "__main__":
    main()
