import hypothesis.strategies as st

from equivset import ExtendedSet, Float, Integer, Text

# Narrow ranges so that drawn sets overlap often
integers = st.builds(Integer, st.integers(min_value=-8, max_value=8))
floats = st.builds(Float, st.floats() | st.sampled_from([0.0, -0.0, float("nan")]))
texts = st.builds(Text, st.text(alphabet="aAbBß", max_size=3))
leaves = integers | floats | texts


def sets(elements=integers, max_size=6):
    return st.builds(lambda items: ExtendedSet(*items), st.lists(elements, max_size=max_size))


nested_sets = st.recursive(
    sets(integers, max_size=4),
    lambda children: sets(integers | children, max_size=4),
    max_leaves=12,
)
