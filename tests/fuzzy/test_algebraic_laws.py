"""
Algebraic properties of the operator algebra, checked pointwise on
unevaluated composite graphs.
"""

import pytest

from fuzzylang.fuzzy.operators import Operator
from fuzzylang.fuzzy.sets import combine, primitive


@pytest.fixture
def fuzzy_pairs(rising, peaked, above_half, below_half):
    """Pairs of sets mixing crisp and graded membership."""
    falling = primitive(lambda x: min(1.0, max(0.0, 1.0 - x)), name="falling")
    return [
        (rising, peaked),
        (above_half, below_half),
        (rising, falling),
        (peaked, above_half),
    ]


class TestIdempotence:
    @pytest.mark.parametrize("operator", [Operator.UNION, Operator.INTERSECTION])
    def test_idempotent(self, operator, rising, peaked, sample_points):
        for fuzzy_set in (rising, peaked):
            combined = combine(fuzzy_set, operator, fuzzy_set)
            for x in sample_points:
                assert combined.membership(x) == fuzzy_set.membership(x)


class TestCommutativity:
    @pytest.mark.parametrize(
        "operator",
        [Operator.UNION, Operator.INTERSECTION, Operator.ADD, Operator.MULTIPLY],
    )
    def test_commutative(self, operator, fuzzy_pairs, sample_points):
        for a, b in fuzzy_pairs:
            ab = combine(a, operator, b)
            ba = combine(b, operator, a)
            for x in sample_points:
                assert ab.membership(x) == ba.membership(x)

    def test_difference_is_not_commutative(self, rising, peaked):
        assert (rising - peaked).membership(0.9) != (peaked - rising).membership(0.9)


class TestDeMorgan:
    def test_complement_of_union(self, fuzzy_pairs, sample_points):
        for a, b in fuzzy_pairs:
            left = combine(combine(a, Operator.UNION, b), Operator.COMPLEMENT)
            right = combine(
                combine(a, Operator.COMPLEMENT), Operator.INTERSECTION, combine(b, Operator.COMPLEMENT)
            )
            for x in sample_points:
                assert left.membership(x) == right.membership(x)

    def test_complement_of_intersection(self, fuzzy_pairs, sample_points):
        for a, b in fuzzy_pairs:
            left = ~(a & b)
            right = ~a | ~b
            for x in sample_points:
                assert left.membership(x) == right.membership(x)

    def test_equivalent_graphs_stay_distinct(self, above_half, below_half):
        left = ~(above_half | below_half)
        right = ~above_half & ~below_half
        assert left is not right
        assert left.operator is not right.operator


class TestDoubleComplement:
    def test_double_complement(self, rising, peaked, above_half, sample_points):
        for fuzzy_set in (rising, peaked, above_half):
            twice = combine(combine(fuzzy_set, Operator.COMPLEMENT), Operator.COMPLEMENT)
            for x in sample_points:
                assert twice.membership(x) == pytest.approx(fuzzy_set.membership(x))

    def test_crisp_double_complement_is_exact(self, above_half, sample_points):
        twice = ~~above_half
        for x in sample_points:
            assert twice.membership(x) == above_half.membership(x)


class TestAlphaCut:
    @pytest.mark.parametrize("threshold", [0.0, 0.25, 0.5, 0.75, 1.0])
    def test_boundary(self, threshold, rising, peaked, sample_points):
        for fuzzy_set in (rising, peaked):
            cut = combine(fuzzy_set, Operator.ALPHA_CUT, threshold=threshold)
            for x in sample_points:
                expected = 1.0 if fuzzy_set.membership(x) >= threshold else 0.0
                assert cut.membership(x) == expected

    def test_zero_threshold_keeps_everything(self, rising, sample_points):
        cut = rising.alpha_cut(0.0)
        assert all(cut.membership(x) == 1.0 for x in sample_points)

    def test_unit_threshold_keeps_only_full_members(self, rising, sample_points):
        cut = rising.alpha_cut(1.0)
        for x in sample_points:
            assert cut.membership(x) == (1.0 if rising.membership(x) == 1.0 else 0.0)
        assert cut.membership(1.0) == 1.0
        assert cut.membership(1.5) == 1.0
        assert cut.membership(0.9) == 0.0


class TestCrispScenario:
    """A = x > 0.5, B = x < 0.5, evaluated at 0.3."""

    def test_scenario(self, above_half, below_half):
        a, b = above_half, below_half

        assert combine(a, Operator.UNION, b).membership(0.3) == 1.0
        assert combine(a, Operator.INTERSECTION, b).membership(0.3) == 0.0
        assert combine(combine(a, Operator.UNION, b), Operator.COMPLEMENT).membership(0.3) == 0.0
        assert (
            combine(
                combine(a, Operator.COMPLEMENT), Operator.INTERSECTION, combine(b, Operator.COMPLEMENT)
            ).membership(0.3)
            == 0.0
        )

    def test_midpoint_belongs_to_neither(self, above_half, below_half):
        assert (above_half | below_half).membership(0.5) == 0.0
        assert (~above_half & ~below_half).membership(0.5) == 1.0
