"""Tests for strict mode."""

import pytest

from hellotype import (
    ArityError,
    IfExists,
    List,
    MismatchError,
    Number,
    Object,
    StrictModeError,
    String,
    Tuple,
    Type,
    expect,
    matching_context,
)


class TestStrictObjects:
    def test_new_type(self):
        SomeType = Type({"name": String, "age": IfExists(Number)})

        SomeType.strict.assert_({"name": "tomy", "age": 10})
        SomeType.Strict.assert_({"name": "tomy", "age": 10})
        with pytest.raises(MismatchError):
            SomeType.strict.assert_({"name": "tomy", "age": 10, "height": 170})
        with pytest.raises(MismatchError):
            SomeType.strict.assert_({"name": "tomy"})

    def test_extra_key(self):
        SomeType = Type({"name": String})
        SomeType.assert_({"name": "x", "age": 1})
        with pytest.raises(StrictModeError) as exc_info:
            SomeType.strict.assert_({"name": "x", "age": 1})
        assert '"age" should not be in object' in str(exc_info.value)

    def test_nested_plain_objects_stay_loose(self):
        SomeType = Type({"user": {"name": String}})
        assert SomeType.test({"user": {"name": "x", "age": 1}})
        assert SomeType.strict.test({"user": {"name": "x", "age": 1}})
        assert not SomeType.strict.test({"user": {"name": "x"}, "age": 1})

    def test_nested_plain_arrays_stay_loose(self):
        SomeType = Type({"tags": [String]})
        assert SomeType.strict.test({"tags": ["a", "b"]})
        assert SomeType.strict.test({"tags": []})
        assert not SomeType.strict.test({"tags": ["a", 1]})

    def test_context_reaches_nested_containers(self):
        SomeType = Type({"user": {"name": String}})
        with matching_context(strict=True):
            assert not SomeType.test({"user": {"name": "x", "age": 1}})


class TestStrictArrays:
    def test_list(self):
        SomeType = List([String, Number])
        SomeType.Strict.assert_(["tomy", 10])
        with pytest.raises(StrictModeError):
            SomeType.Strict.assert_(["tomy"])
        with pytest.raises(StrictModeError):
            SomeType.Strict.assert_(["tomy", 10, "tomy"])

    def test_list_if_exists(self):
        SomeType = List([String, IfExists(Number)])
        SomeType.Strict.assert_(["tomy", 10])
        with pytest.raises(MismatchError):
            SomeType.Strict.assert_(["tomy"])
        with pytest.raises(MismatchError):
            SomeType.Strict.assert_(["tomy", 10, "tomy"])

    def test_overflow_is_loose_only(self):
        SomeType = List([String, Number])
        assert SomeType.test(["a", 1, "b"])
        assert not SomeType.Strict.test(["a", 1, "b"])


def test_tuple():
    SomeType = Tuple(String, Number, IfExists(Object))
    SomeType.assert_("tomy", 10)
    with pytest.raises(ArityError):
        SomeType.Strict.assert_("tomy", 10)
    SomeType.Strict.assert_("tomy", 10, {})


def test_expect_to_match():
    SomeType = Type({"name": String, "age": IfExists(Number)})
    expect({"name": "tomy", "age": 10}).to_match(SomeType.Strict)
    with pytest.raises(MismatchError):
        expect({"name": "tomy", "age": 10, "height": 170}).to_match(SomeType.Strict)
    with pytest.raises(MismatchError):
        expect({"name": "tomy"}).to_match(SomeType.Strict)


def test_to_be_strict():
    SomeType = Type(Number)
    assert SomeType is SomeType.to_be_strict()
    assert SomeType is not SomeType.Strict
