import json
from pathlib import Path

import numpy as np

POLY_TYPE = "digit_poly_1d"


def coeff_path(coeff_dir: Path, p: int, e: int) -> Path:
    """Where gen/make_digit_poly_coeffs.py writes the (p, e) polynomial."""
    return Path(coeff_dir) / f"digit_poly_p{p}_e{e}.json"


def save_coeff1d(coeffs, path: Path, **meta) -> Path:
    """
    Save 1D integer polynomial coefficients as JSON.

    JSON format:
    {
        "type": "digit_poly_1d",
        ...meta...,
        "entries": [
            [k, c_k],
            ...
        ]
    }
    Only nonzero coefficients are written.
    """
    entries = [[int(k), int(c)] for k, c in enumerate(coeffs) if int(c) != 0]
    obj = {"type": POLY_TYPE, **meta, "entries": entries}
    path = Path(path)
    path.write_text(json.dumps(obj, indent=2), encoding="utf-8")
    return path


def load_coeff1d(path: Path) -> np.ndarray:
    """
    Load coefficients written by save_coeff1d into an object array A with
    A[k] = c_k. Missing indices are filled with 0.
    """
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if data.get("type", POLY_TYPE) != POLY_TYPE:
        raise ValueError(f"unexpected coefficient file type: {data.get('type')}")
    entries = data.get("entries", [])
    if not entries:
        return np.array([], dtype=object)
    max_k = max(int(k) for k, _ in entries)
    A = np.array([0] * (max_k + 1), dtype=object)
    for k, c in entries:
        A[int(k)] = int(c)
    return A
