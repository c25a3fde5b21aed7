import random

import pytest

from equivset import BasicSet, ExtendedSet, Float, Integer, NotAnElementError, Text


def integers(*values):
    return [Integer(value) for value in values]


def test_empty_set():
    s = BasicSet()

    assert len(s) == 0
    assert str(s) == "{}"
    assert not s.has_element(Integer(1))


def test_add_remove_power_set_scenario():
    s = BasicSet()
    for element in integers(1, 4, 4, 2, 2, 3, 4):
        s.add_element(element)

    assert len(s) == 4
    assert s == BasicSet(*integers(1, 2, 3, 4))

    s.remove_element(Integer(4))

    assert len(s) == 3
    assert s == BasicSet(*integers(1, 2, 3))

    power_set = s.power_set()

    assert len(power_set) == 8
    assert power_set.has_element(BasicSet())
    assert power_set.has_element(s)
    assert power_set.has_element(BasicSet(*integers(1, 3)))
    assert not power_set.has_element(BasicSet(*integers(4)))


def test_constructor_deduplicates():
    s = BasicSet(*integers(1, 1, 2, 1))

    assert len(s) == 2


def test_add_allocates_new_list():
    s = BasicSet(*integers(1, 2))
    before = s._elements

    s.add_element(Integer(3))

    assert s._elements is not before
    assert len(before) == 2


def test_remove_missing_is_noop():
    s = BasicSet(*integers(1, 2))

    s.remove_element(Integer(3))

    assert s == BasicSet(*integers(1, 2))


def test_remove_from_empty_is_noop():
    s = BasicSet()

    s.remove_element(Integer(1))

    assert len(s) == 0


def test_add_non_element():
    s = BasicSet()

    with pytest.raises(NotAnElementError):
        s.add_element(1)


def test_non_element_is_never_member():
    s = BasicSet(*integers(1))

    assert not s.has_element(1)
    assert 1 not in s


def test_membership_uses_custom_equivalence():
    s = BasicSet(Text("Hello"), Float(float("nan")))

    assert Text("HELLO") in s
    assert Float(float("nan")) in s
    assert len(s) == 2


def test_set_not_equal_to_element():
    s = BasicSet(Integer(3))

    assert not s.equal(Integer(3))
    assert s != Integer(3)


def test_set_not_equal_to_other_values():
    s = BasicSet()

    assert not s.equal([])
    assert not s.equal(None)


def test_sets_with_different_members_not_equal():
    assert BasicSet(Float(3.0)) != BasicSet(Float(4.0))
    assert BasicSet(*integers(1, 2)) != BasicSet(*integers(1))


def test_basic_and_extended_sets_compare_equal():
    assert BasicSet(*integers(1, 2)) == ExtendedSet(*integers(2, 1))
    assert ExtendedSet(*integers(1, 2)) == BasicSet(*integers(2, 1))


def test_equal_ignores_order():
    assert BasicSet(*integers(1, 2, 3)) == BasicSet(*integers(3, 1, 2))


def test_sets_are_unhashable():
    with pytest.raises(TypeError):
        hash(BasicSet())


def test_nested_sets():
    inner = BasicSet(*integers(1, 2))
    s = BasicSet(inner, BasicSet(*integers(2, 1)), BasicSet())

    assert len(s) == 2
    assert BasicSet(*integers(2, 1)) in s


@pytest.mark.parametrize("size", [0, 1, 2, 3, 5])
def test_power_set_cardinality(size):
    s = BasicSet(*integers(*range(size)))

    power_set = s.power_set()

    assert len(power_set) == 2**size
    assert BasicSet() in power_set
    assert s in power_set
    assert all(isinstance(subset, BasicSet) for subset in power_set)


def test_power_set_leaves_receiver_unchanged():
    s = BasicSet(*integers(1, 2))

    s.power_set()

    assert s == BasicSet(*integers(1, 2))
    assert len(s) == 2


def test_str_contains_every_element():
    s = BasicSet(*integers(1, 2, 3))

    rendered = str(s)

    assert rendered.startswith("{")
    assert rendered.endswith("}")
    assert sorted(rendered[1:-1].split(" ")) == ["1", "2", "3"]


def test_str_nested():
    s = BasicSet(BasicSet(Integer(1)))

    assert str(s) == "{{1}}"


def test_str_order_varies():
    s = BasicSet(*integers(*range(8)))
    random.seed(0)

    renderings = {str(s) for _ in range(20)}

    assert len(renderings) > 1


def test_repr():
    assert repr(BasicSet(Integer(1))) == "BasicSet(Integer(value=1))"


def test_iteration_visits_every_element():
    s = BasicSet(*integers(1, 2, 3))

    assert sorted(element.value for element in s) == [1, 2, 3]


def test_iteration_tolerates_shrinking():
    s = BasicSet(*integers(1, 2, 3, 4))

    visited = []
    for element in s:
        visited.append(element)
        s.remove_element(element)

    assert 0 < len(visited) <= 4
