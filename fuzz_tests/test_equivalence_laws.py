from hypothesis import given

from equivset import reflexive, symmetric, transitive

from .strategies import leaves, nested_sets

elements = leaves | nested_sets


@given(elements)
def test_reflexive(e):
    assert reflexive(e)


@given(elements, elements)
def test_symmetric(a, b):
    assert symmetric(a, b)


@given(elements, elements, elements)
def test_transitive(a, b, c):
    assert transitive(a, b, c)


@given(nested_sets)
def test_set_equals_itself(s):
    assert s.equal(s)
    assert s.equal(s.copy())
