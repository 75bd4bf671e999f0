"""Tests for pascal.py: exact counts for sums of dice."""

import math

import numpy as np
import pytest

import pascal as pascal_module
from pascal import pascal, MAX_WORK
from dice_errors import InvalidArgument, ComputationTooLarge


# =============================================================================
# Known rows
# =============================================================================

class TestKnownRows:

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 7, 10, 33])
    def test_coin_rows_are_binomial(self, n):
        """With two faces the rows are Pascal's triangle."""
        assert list(pascal(2).row(n)) == [math.comb(n, k) for k in range(n + 1)]

    def test_four_coins(self):
        assert list(pascal(2).row(4)) == [1, 4, 6, 4, 1]

    def test_two_d6(self):
        x = pascal(6).row(2)
        assert len(x) == 11
        assert list(x) == [1, 2, 3, 4, 5, 6, 5, 4, 3, 2, 1]

    def test_three_d6(self):
        x = pascal(6).row(3)
        assert list(x) == [1, 3, 6, 10, 15, 21, 25, 27, 27, 25, 21, 15, 10, 6, 3, 1]

    def test_single_die_is_all_ones(self):
        x = pascal(20).row(1)
        assert len(x) == 20
        assert all(c == 1 for c in x)

    def test_one_faced_die(self):
        e = pascal(1)
        assert list(e.row(1)) == [1]
        assert list(e.row(50)) == [1]


# =============================================================================
# Invariants
# =============================================================================

class TestInvariants:

    @pytest.mark.parametrize("die,n", [(2, 9), (3, 5), (6, 13), (10, 17), (20, 50), (4, 250)])
    def test_length_sum_symmetry(self, die, n):
        x = pascal(die).row(n)
        assert len(x) == (die - 1) * n + 1
        assert sum(x) == die**n
        assert list(x) == list(x[::-1])

    def test_exact_beyond_64_bits(self):
        """2d... rows get far bigger than any machine integer."""
        x = pascal(2).row(500)
        assert x[250] == math.comb(500, 250)
        assert sum(x) == 2**500
        assert all(isinstance(c, int) for c in x)

    def test_matches_direct_count(self):
        """Compare against adding up every roll of 4d5 by brute force."""
        counts = [0] * 17
        for a in range(5):
            for b in range(5):
                for c in range(5):
                    for d in range(5):
                        counts[a + b + c + d] += 1
        assert list(pascal(5).row(4)) == counts


# =============================================================================
# Errors
# =============================================================================

class TestErrors:

    @pytest.mark.parametrize("n", [0, -1, -20])
    def test_n_below_one(self, n):
        with pytest.raises(InvalidArgument):
            pascal(6).row(n)

    def test_non_integer_n(self):
        with pytest.raises(InvalidArgument):
            pascal(6).row(2.5)

    def test_too_large(self):
        with pytest.raises(ComputationTooLarge) as info:
            pascal(2).row(1001)
        assert info.value.n == 1001
        assert info.value.die == 2
        assert info.value.limit == MAX_WORK

    def test_limit_is_inclusive(self):
        assert sum(pascal(2).row(500)) == 2**500
        assert len(pascal(10).row(100)) == 901

    def test_limit_is_adjustable(self):
        e = pascal(6, limit=30)
        e.row(5)
        with pytest.raises(ComputationTooLarge):
            e.row(6)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            pascal(6).row(0)
        with pytest.raises(ValueError):
            pascal(6).row(500)

    @pytest.mark.parametrize("faces", [0, -3, 2.5])
    def test_bad_die(self, faces):
        with pytest.raises(InvalidArgument):
            pascal(faces)

    def test_failed_row_not_cached(self):
        e = pascal(2)
        with pytest.raises(ComputationTooLarge):
            e.row(2000)
        assert e.cached() == []


# =============================================================================
# Cache
# =============================================================================

class TestCache:

    def test_intermediate_rows_cached(self):
        e = pascal(6)
        e.row(10)
        assert e.cached() == [1, 2, 3, 5, 10]

    def test_same_object_returned(self):
        e = pascal(6)
        assert e.row(7) is e.row(7)

    def test_each_row_computed_once(self, capsys, monkeypatch):
        monkeypatch.setattr(pascal_module, "PRINT_ROWS", [True])
        e = pascal(3)
        e.row(8)
        e.row(8)
        e.row(16)
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == len(e.cached())
        assert lines[-1] == "row 16 computed for d3, length 33"

    def test_changing_die_clears_cache(self):
        e = pascal(6)
        e.row(4)
        e.die = 4
        assert e.cached() == []
        assert len(e.row(4)) == 13

    def test_same_die_keeps_cache(self):
        e = pascal(6)
        e.row(4)
        e.die = 6
        assert e.cached() == [1, 2, 4]

    def test_precompute(self):
        e = pascal(2)
        e.precompute(6)
        assert e.cached() == [1, 2, 3, 4, 5, 6]


# =============================================================================
# Derived values
# =============================================================================

class TestDerived:

    def test_totals(self):
        assert list(pascal(6).totals(3)) == list(range(3, 19))

    def test_mass_and_peak(self):
        e = pascal(6)
        assert e.mass(3) == 216
        assert e.peak(3) == 27
        assert e.peak(2) == 6

    def test_percentages(self):
        p = pascal(6).percentages(2)
        assert p[0] == pytest.approx(100 / 36)
        assert p[5] == pytest.approx(600 / 36)
        assert np.sum(p) == pytest.approx(100.0)

    def test_at_least(self):
        a = pascal(2).at_least(2)
        np.testing.assert_allclose(a, [100.0, 75.0, 25.0])

    def test_two_decimal_percentages_for_large_rows(self):
        """The middle of 200d2 is about 5.63%."""
        p = pascal(2).percentages(200)
        assert f"{p[100]:.2f}" == "5.63"
