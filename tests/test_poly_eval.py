"""Tests for homomorphic polynomial evaluation."""

import numpy as np
import pytest
from interpolation import poly_eval_int
from poly_eval import PolyEvaluator, make_power_basis


class TestPowerBasis:

    def test_values(self, ctx5):
        ct = ctx5.encrypt([2, 3, 4])
        pos = make_power_basis(ct, 7)
        assert len(pos) == 7
        for k, x in enumerate(pos, start=1):
            assert list(ctx5.decrypt(x))[:3] == [pow(v, k, 125) for v in (2, 3, 4)]

    def test_depth_is_log(self, ctx5):
        ct = ctx5.encrypt([2])
        lvl = ct.level
        pos = make_power_basis(ct, 8)
        depths = [lvl - x.level for x in pos]
        assert depths == [0, 1, 2, 2, 3, 3, 3, 3]

    def test_source_untouched(self, ctx5):
        ct = ctx5.encrypt([2])
        lvl = ct.level
        make_power_basis(ct, 5)
        assert ct.level == lvl
        assert ctx5.decrypt(ct)[0] == 2

    def test_zero_degree(self, ctx5):
        assert make_power_basis(ctx5.encrypt([2]), 0) == []


class TestPolyEvaluator:

    def test_matches_plain_evaluation(self, ctx5, rng):
        ev = PolyEvaluator(ctx5)
        vals = [rng.randrange(125) for _ in range(8)]
        for deg in (1, 2, 5, 6):
            poly = np.array([rng.randrange(-200, 200) for _ in range(deg + 1)], dtype=object)
            poly[-1] = 1
            src = ctx5.encrypt(vals)
            out = ctx5.encrypt(0)
            ev.apply(out, poly, src)
            assert list(ctx5.decrypt(out)) == [poly_eval_int(poly, v, 125) for v in vals]

    def test_in_place_alias(self, ctx5):
        ev = PolyEvaluator(ctx5)
        ct = ctx5.encrypt([3, 4])
        ev(ct, np.array([1, 0, 2], dtype=object), ct)
        assert list(ctx5.decrypt(ct))[:2] == [19, 33]

    def test_result_level(self, ctx5):
        ev = PolyEvaluator(ctx5)
        ct = ctx5.encrypt([3])
        lvl = ct.level
        ev.apply(ct, np.array([0, 1, 0, 0, 0, 1], dtype=object), ct)
        assert ct.level == lvl - 3

    def test_constant_polynomial(self, ctx5):
        ev = PolyEvaluator(ctx5)
        ct = ctx5.encrypt([3, 4])
        out = ctx5.encrypt(0)
        ev.apply(out, np.array([7], dtype=object), ct)
        assert list(ctx5.decrypt(out))[:2] == [7, 7]
        ev.apply(out, np.array([], dtype=object), ct)
        assert list(ctx5.decrypt(out))[:2] == [0, 0]

    def test_coefficients_reduced_mod_ptxt_space(self, ctx5):
        ev = PolyEvaluator(ctx5)
        ct = ctx5.encrypt([3], ptxt_space=25)
        lvl = ct.level
        # 25x^2 vanishes mod 25, leaving a linear polynomial
        ev.apply(ct, np.array([1, 2, 25], dtype=object), ct)
        assert ctx5.decrypt(ct)[0] == 7
        assert ct.level == lvl

    def test_read_only_coefficients(self, ctx5):
        ev = PolyEvaluator(ctx5)
        poly = np.array([0, 0, 1], dtype=object)
        poly.setflags(write=False)
        ct = ctx5.encrypt([4])
        ev.apply(ct, poly, ct)
        assert ctx5.decrypt(ct)[0] == 16
