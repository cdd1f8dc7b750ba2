"""
Tests for vertex successor expansion
"""

import pytest

from category_paths import Category, InvariantViolation, Morphism, MorphismVertex, ObjectVertex
from cost_models import Dynamic, Static


@pytest.fixture
def category():
    return Category.from_morphisms([
        Morphism("A", "B", Static(3)),
        Morphism("A", "C", Dynamic(2, 5)),
        Morphism("B", "A", Static(1)),
    ])


class TestObjectVertex:
    def test_successors_are_morphisms_at_zero_cost(self, category):
        successors = ObjectVertex("A", 10).successors(category)
        assert [cost for _, cost in successors] == [0, 0]
        assert [v.inner.target for v, _ in successors] == ["B", "C"]
        assert all(isinstance(v, MorphismVertex) and v.input_size == 10 for v, _ in successors)

    def test_custom_zero(self, category):
        successors = ObjectVertex("A", 10).successors(category, zero=0.0)
        assert all(isinstance(cost, float) for _, cost in successors)

    def test_leaf_has_no_successors(self, category):
        assert ObjectVertex("C", 1).successors(category) == []

    def test_unknown_object_is_a_defect(self, category):
        with pytest.raises(InvariantViolation):
            ObjectVertex("Z", 1).successors(category)

    def test_blacklist_records_expansion(self, category):
        blacklist = set()
        ObjectVertex("A", 10).successors(category, blacklist=blacklist)
        assert blacklist == {"A"}
        assert ObjectVertex("A", 99).successors(category, blacklist=blacklist) == []

    def test_blacklist_hides_expanded_targets(self, category):
        blacklist = {"A"}
        successors = ObjectVertex("B", 10).successors(category, blacklist=blacklist)
        assert successors == []
        assert blacklist == {"A", "B"}

    def test_resolve(self):
        cat = Category.of(["A", "B"], [])
        vertex = ObjectVertex("A", 5).resolve(cat)
        assert vertex == ObjectVertex("A", 5)
        assert vertex.is_object_with_id("A")
        assert not vertex.is_object_with_id("B")


class TestMorphismVertex:
    def test_successor_carries_output(self, category):
        morphism = category.get_outbound("A")[1]
        successors = MorphismVertex(morphism, 10).successors(category)
        assert successors == [(ObjectVertex("C", 50), 20)]

    def test_is_never_an_object(self, category):
        morphism = category.get_outbound("A")[0]
        vertex = MorphismVertex(morphism, 10)
        assert not vertex.is_object_with_id("A")
        assert vertex.resolve(category) is vertex

    def test_vertices_are_hashable(self, category):
        morphism = category.get_outbound("A")[0]
        seen = {MorphismVertex(morphism, 10), MorphismVertex(morphism, 10), ObjectVertex("A", 10)}
        assert len(seen) == 2


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
