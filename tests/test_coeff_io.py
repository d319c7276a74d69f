"""Tests for coefficient JSON files."""

import json
import pytest
from coeff_io import load_coeff1d, save_coeff1d
from digit_polynomial import build_digit_polynomial


class TestCoeffIO:

    def test_save_load(self, tmp_path):
        f = build_digit_polynomial(7, 4)
        path = save_coeff1d(f, tmp_path / "p7_e4.json", p=7, e=4)
        assert list(load_coeff1d(path)) == list(f)

    def test_sparse_entries_and_meta(self, tmp_path):
        path = save_coeff1d([0, 3, 0, 1], tmp_path / "c.json", p=3, e=2)
        obj = json.loads(path.read_text(encoding="utf-8"))
        assert obj["type"] == "digit_poly_1d"
        assert obj["p"] == 3
        assert obj["entries"] == [[1, 3], [3, 1]]
        assert list(load_coeff1d(path)) == [0, 3, 0, 1]

    def test_big_coefficients_survive(self, tmp_path):
        big = 7 ** 40 + 1
        path = save_coeff1d([big, 0, 1], tmp_path / "big.json")
        assert load_coeff1d(path)[0] == big

    def test_empty(self, tmp_path):
        path = save_coeff1d([], tmp_path / "empty.json")
        assert len(load_coeff1d(path)) == 0

    def test_wrong_type(self, tmp_path):
        path = tmp_path / "other.json"
        path.write_text(json.dumps({"type": "lut_2d", "entries": []}), encoding="utf-8")
        with pytest.raises(ValueError):
            load_coeff1d(path)
