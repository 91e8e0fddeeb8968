"""Hypothesis strategies for property-based testing of kestrel types."""

from hypothesis import strategies as st

integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()
floats = st.floats(allow_nan=False)

# Any value except None
non_none = st.one_of(integers, texts, booleans, floats, st.lists(integers, max_size=5))

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])

# Field names for generated structs
field_names = st.text(alphabet=st.sampled_from('abcdefghijklmnopqrstuvwxyz_'), min_size=1, max_size=12)

# Values that are not numbers, as seen by the Number schema
non_numbers = st.one_of(texts, booleans, st.none(), st.lists(integers, max_size=3))

# Values that are not mappings, as seen by the Struct schema
non_mappings = st.one_of(integers, texts, booleans, st.none(), st.lists(integers, max_size=3))

# Flat records of str/int/bool fields
records = st.dictionaries(field_names, st.one_of(texts, integers, booleans), max_size=6)
