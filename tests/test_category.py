"""
Tests for the Category store
"""

from dataclasses import dataclass

import pytest

from category_paths import (
    Category,
    CategoryError,
    InvariantViolation,
    MissingObjects,
    Morphism,
    MorphismAlreadyInserted,
    ObjectAlreadyInserted,
    identify,
)
from cost_models import Signed, Static


@dataclass(frozen=True)
class Account:
    id: str
    owner: str


class TestCategory:
    def test_create_category(self):
        cat = Category()
        assert len(cat) == 0
        assert list(cat.morphisms()) == []
        assert cat.non_negative

    def test_add_object(self):
        cat = Category()
        cat.add_object("A")
        assert "A" in cat
        assert cat.get_object("A") == "A"
        assert cat.get_outbound("A") == []

    def test_add_duplicate_object(self):
        cat = Category()
        cat.add_object("A")
        with pytest.raises(ObjectAlreadyInserted) as excinfo:
            cat.add_object("A")
        assert excinfo.value.object_id == "A"
        assert len(cat) == 1

    def test_add_morphism(self):
        cat = Category()
        cat.add_objects(["A", "B"])
        f = Morphism("A", "B", Static(1))
        cat.add_morphism(f)

        assert f in cat
        assert cat.get_outbound("A") == [f]
        assert cat.get_outbound("B") == []

    def test_add_duplicate_morphism(self):
        cat = Category()
        cat.add_objects(["A", "B"])
        cat.add_morphism(Morphism("A", "B", Static(1)))
        with pytest.raises(MorphismAlreadyInserted) as excinfo:
            cat.add_morphism(Morphism("A", "B", Static(1)))
        assert (excinfo.value.source, excinfo.value.target) == ("A", "B")
        assert len(cat.get_outbound("A")) == 1

    def test_parallel_morphisms_with_distinct_metadata(self):
        cat = Category()
        cat.add_objects(["A", "B"])
        cat.add_morphisms([Morphism("A", "B", Static(1)), Morphism("A", "B", Static(2))])
        assert len(cat.get_outbound("A")) == 2

    def test_add_morphism_with_missing_objects(self):
        cat = Category()
        cat.add_object("A")
        with pytest.raises(MissingObjects) as excinfo:
            cat.add_morphism(Morphism("X", "Y", Static(1)))
        assert excinfo.value.missing == ["X", "Y"]

        with pytest.raises(MissingObjects) as excinfo:
            cat.add_morphism(Morphism("A", "Y", Static(1)))
        assert excinfo.value.missing == ["Y"]
        assert cat.get_outbound("A") == []

    def test_errors_share_a_base(self):
        cat = Category()
        with pytest.raises(CategoryError):
            cat.add_morphism(Morphism("A", "B", Static(1)))
        with pytest.raises(ValueError):
            cat.add_morphism(Morphism("A", "B", Static(1)))

    def test_outbound_keeps_insertion_order(self):
        cat = Category()
        cat.add_objects(["A", "B", "C"])
        morphisms = [
            Morphism("A", "C", Static(3)),
            Morphism("A", "B", Static(1)),
            Morphism("A", "C", Static(2)),
        ]
        cat.add_morphisms(morphisms)
        assert cat.get_outbound("A") == morphisms
        assert list(cat.morphisms()) == morphisms

    def test_get_missing(self):
        cat = Category()
        assert cat.get_object("nope") is None
        assert cat.get_outbound("nope") is None
        with pytest.raises(InvariantViolation):
            cat.require_object("nope")

    def test_of(self):
        f = Morphism("A", "B", Static(1))
        cat = Category.of(["A", "B"], [f])
        assert [object_id for object_id, _ in cat.objects()] == ["A", "B"]
        assert f in cat

    def test_of_propagates_first_error(self):
        with pytest.raises(MissingObjects):
            Category.of(["A"], [Morphism("A", "B", Static(1))])

    def test_from_morphisms(self):
        cat = Category.from_morphisms([
            Morphism("A", "B", Static(1)),
            Morphism("B", "C", Static(1)),
            Morphism("C", "A", Static(1)),
        ])
        assert len(cat) == 3
        for object_id in "ABC":
            assert cat.get_object(object_id) == object_id
            assert len(cat.get_outbound(object_id)) == 1

    def test_from_morphisms_duplicate(self):
        with pytest.raises(MorphismAlreadyInserted):
            Category.from_morphisms([
                Morphism("A", "B", Static(1)),
                Morphism("A", "B", Static(1)),
            ])

    def test_rich_objects(self):
        alice = Account("alice", "Alice")
        bob = Account("bob", "Bob")
        cat = Category.of([alice, bob], [Morphism("alice", "bob", Static(1))])

        assert identify(alice) == "alice"
        assert cat.get_object("alice") is alice
        assert "bob" in cat
        with pytest.raises(ObjectAlreadyInserted):
            cat.add_object(Account("alice", "Someone else"))

    def test_non_negative_tracking(self):
        cat = Category.from_morphisms([Morphism("A", "B", Static(1))])
        assert cat.non_negative
        cat.add_morphism(Morphism("B", "A", Signed(-1)))
        assert not cat.non_negative

    def test_copy_is_independent(self):
        cat = Category.from_morphisms([Morphism("A", "B", Static(1))])
        copy = cat.copy()
        copy.add_object("C")
        copy.add_morphism(Morphism("B", "C", Static(1)))

        assert "C" not in cat
        assert cat.get_outbound("B") == []
        assert len(copy) == 3
        assert copy.get_object("A") is cat.get_object("A")


class TestMorphism:
    def test_equality_uses_all_fields(self):
        assert Morphism("A", "B", Static(1)) == Morphism("A", "B", Static(1))
        assert Morphism("A", "B", Static(1)) != Morphism("A", "B", Static(2))
        assert Morphism("A", "B", Static(1)) != Morphism("B", "A", Static(1))
        assert len({Morphism("A", "B", Static(1)), Morphism("A", "B", Static(1))}) == 1

    def test_apply_delegates_to_metadata(self):
        output = Morphism("A", "B", Static(4)).apply(10)
        assert output.size == 10
        assert output.cost == 4

    def test_apply_accepts_plain_tuples(self):
        class Pair:
            def apply(self, input_size):
                return input_size * 2, 3

        output = Morphism("A", "B", Pair()).apply(5)
        assert output.size == 10
        assert output.cost == 3

    def test_non_negative(self):
        assert Morphism("A", "B", Static(1)).non_negative
        assert not Morphism("A", "B", Signed(1)).non_negative

    def test_str(self):
        assert str(Morphism("A", "B", Static(1))) == "static(1): A -> B"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
