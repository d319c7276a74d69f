"""Tests for digit encoding helpers and section timers."""

from utils import DigitEncoder, SectionTimer


class TestDigitEncoder:

    def test_representatives(self):
        assert DigitEncoder.representatives(2) == [0, 1]
        assert DigitEncoder.representatives(3) == [-1, 0, 1]
        assert DigitEncoder.representatives(5) == [-2, -1, 0, 1, 2]

    def test_binary_digits_are_standard(self):
        assert DigitEncoder.to_digits(11, 2, 4) == [1, 1, 0, 1]

    def test_balanced_digits(self):
        assert DigitEncoder.to_digits(3, 5, 2) == [-2, 1]
        assert DigitEncoder.to_digits(24, 5, 2) == [-1, 0]
        assert DigitEncoder.to_digits(8, 3, 2) == [-1, 0]

    def test_round_trip_mod_p_r(self):
        for p in (2, 3, 5, 7):
            for z in range(p ** 3):
                digits = DigitEncoder.to_digits(z, p, 3)
                assert all(d in DigitEncoder.representatives(p) for d in digits)
                assert DigitEncoder.from_digits(digits, p, p ** 3) == z

    def test_center(self):
        assert DigitEncoder.center(3, 5) == -2
        assert DigitEncoder.center(2, 5) == 2
        assert DigitEncoder.center(-1, 4) == -1
        assert DigitEncoder.center(2, 4) == 2


class TestSectionTimer:

    def test_accumulates(self):
        timer = SectionTimer()
        for _ in range(3):
            with timer.section("a"):
                pass
        with timer.section("b"):
            pass
        stats = timer.stats()
        assert stats["a"]["count"] == 3
        assert stats["b"]["count"] == 1
        assert stats["a"]["total_s"] >= 0.0

    def test_disabled(self):
        timer = SectionTimer(enabled=False)
        with timer.section("a"):
            pass
        assert timer.stats() == {}
