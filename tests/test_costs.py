"""
Tests for the bundled cost logic
"""

from fractions import Fraction

import pytest

from category_paths import (
    ApplyMorphism,
    ConstantCost,
    DeductiveLinearCost,
    NonNegativeCost,
    NonNegativeSimpleMorphism,
    SimpleMorphism,
)
from cost_models import Signed


class TestDeductiveLinearCost:
    def test_cost_is_deducted(self):
        output = DeductiveLinearCost(Fraction(1, 10), 5).apply(100)
        assert output.cost == 15
        assert output.size == 85

    def test_size_never_below_zero(self):
        output = DeductiveLinearCost(10, 10).apply(100)
        assert output.cost == 1010
        assert output.size == 0

    def test_exact_payment(self):
        output = DeductiveLinearCost(0, 100).apply(100)
        assert output.size == 0

    def test_floats(self):
        output = DeductiveLinearCost(0.5, 1.0).apply(10.0)
        assert output.cost == pytest.approx(6.0)
        assert output.size == pytest.approx(4.0)

    def test_is_marked_non_negative(self):
        assert isinstance(DeductiveLinearCost(1, 1), NonNegativeCost)
        assert isinstance(DeductiveLinearCost(1, 1), ApplyMorphism)


class TestConstantCost:
    def test_passes_size_through(self):
        output = ConstantCost().apply(42)
        assert output.size == 42
        assert output.cost == 1.0

    def test_custom_cost(self):
        assert ConstantCost(7).apply(1).cost == 7


class TestSimpleMorphism:
    def test_identity_is_meta_only(self):
        first = SimpleMorphism("swap", DeductiveLinearCost(1, 1))
        second = SimpleMorphism("swap", DeductiveLinearCost(2, 2))
        assert first == second
        assert hash(first) == hash(second)
        assert SimpleMorphism("swap") != SimpleMorphism("repay")

    def test_unhashable_logic(self):
        class Table:
            __hash__ = None

            def apply(self, input_size):
                return input_size, 0

        meta = SimpleMorphism("lookup", Table())
        assert hash(meta) == hash("lookup")
        assert meta.apply(3) == (3, 0)

    def test_default_logic(self):
        assert SimpleMorphism("hop").apply(5).cost == 1.0

    def test_str(self):
        assert str(SimpleMorphism("repay")) == "repay"

    def test_not_marked_by_default(self):
        assert not isinstance(SimpleMorphism("hop"), NonNegativeCost)


class TestNonNegativeSimpleMorphism:
    def test_marked(self):
        meta = NonNegativeSimpleMorphism("repay", DeductiveLinearCost(1, 1))
        assert isinstance(meta, NonNegativeCost)
        assert meta == SimpleMorphism("repay")

    def test_rejects_unmarked_logic(self):
        with pytest.raises(TypeError):
            NonNegativeSimpleMorphism("refund", Signed(-5))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
