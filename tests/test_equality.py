"""Tests for equality and cross-class compatibility."""

from enumkit import compatible, strict_equals
from sample_enums import (
    Planet,
    RefinedSample,
    SampleNoLabel,
    SamplePartialLabel,
    SampleWithLabel,
)


class TestEquals:
    """Tests for equals() / not_equals()."""

    def test_same_value_same_class(self):
        """Instances with the same value are equal."""
        assert SampleWithLabel.create("foo").equals(SampleWithLabel.FOO())

    def test_different_values(self):
        """Different values are not equal."""
        assert not SampleWithLabel.FOO().equals(SampleWithLabel.BAR())
        assert SampleWithLabel.FOO().not_equals(SampleWithLabel.BAR())

    def test_equals_only_for_matching_member(self):
        """create(v).equals(Cls.FOO()) holds only for FOO's value."""
        for value in SampleWithLabel.values():
            expected = value == SampleWithLabel.FOO.value
            assert SampleWithLabel.create(value).equals(SampleWithLabel.FOO()) is expected

    def test_subclass_and_base_are_compatible(self):
        """A refined enum compares equal to its base in both directions."""
        assert RefinedSample.FOO().equals(SampleWithLabel.FOO())
        assert SampleWithLabel.FOO().equals(RefinedSample.FOO())

    def test_labels_are_ignored(self):
        """Differing labels do not affect equality."""
        refined = RefinedSample.FOO()
        base = SampleWithLabel.FOO()

        assert refined.label() != base.label()
        assert refined.equals(base)

    def test_unrelated_classes_are_not_equal(self):
        """Same value in unrelated enums is not equal."""
        assert not SampleNoLabel.FOO().equals(SampleWithLabel.FOO())
        assert not SamplePartialLabel.FOO().equals(SampleNoLabel.FOO())

    def test_raw_values_are_not_equal(self):
        """Only enum instances can be equal."""
        assert not SampleWithLabel.FOO().equals("foo")
        assert SampleWithLabel.FOO().not_equals("foo")


class TestOperators:
    """Tests for ==, != and hashing."""

    def test_eq_operator(self):
        """== follows equals()."""
        assert Planet.EARTH() == Planet(3)
        assert Planet.EARTH() != Planet.MARS()
        assert RefinedSample.BAR() == SampleWithLabel.BAR()

    def test_raw_value_comparison(self):
        """Instances never equal their raw value."""
        assert Planet.EARTH() != 3
        assert not (SampleWithLabel.FOO() == "foo")

    def test_hash_consistent_with_equality(self):
        """Equal instances collapse in a set."""
        assert len({Planet.EARTH(), Planet(3), Planet()}) == 1
        assert len({Planet.EARTH(), Planet.MARS()}) == 2

    def test_factory_operands(self):
        """Member factories compare like the instances they build."""
        assert SampleWithLabel.FOO() == SampleWithLabel.FOO
        assert SampleWithLabel.FOO == SampleWithLabel.FOO()
        assert SampleWithLabel.FOO().equals(SampleWithLabel.FOO)
        assert SampleWithLabel.FOO() != SampleWithLabel.BAR
        assert RefinedSample.FOO() == SampleWithLabel.FOO
        assert SampleNoLabel.FOO() != SampleWithLabel.FOO

    def test_factories_compare_by_member(self):
        """Factories for the same member are equal and hash like instances."""
        assert SampleWithLabel.FOO == SampleWithLabel.FOO
        assert SampleWithLabel.FOO != SampleWithLabel.BAR
        assert hash(SampleWithLabel.FOO) == hash(SampleWithLabel.FOO())
        assert SampleWithLabel.FOO in {SampleWithLabel.FOO()}


class TestCompatibility:
    """Tests for the compatibility helpers."""

    def test_compatible(self):
        """Same class and either direction of subclassing are compatible."""
        assert compatible(SampleWithLabel, SampleWithLabel)
        assert compatible(RefinedSample, SampleWithLabel)
        assert compatible(SampleWithLabel, RefinedSample)
        assert not compatible(SampleWithLabel, SampleNoLabel)

    def test_strict_equals(self):
        """strict_equals requires identical types."""
        assert strict_equals("a", "a")
        assert not strict_equals(1, True)
        assert not strict_equals(1, 1.0)
