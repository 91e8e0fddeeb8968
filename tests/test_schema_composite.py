"""Tests for Struct and List: accumulation, path prefixing, encoding."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from kestrel import Err, Ok
from kestrel.schema import (
    Boolean,
    ErrorCode,
    List,
    Literal,
    Number,
    SchemaError,
    String,
    Struct,
    ValidationError,
)

from tests.strategies import field_names, integers, non_mappings, records, texts


class TestStructDecode:
    """Tests for Struct.decode."""

    def test_valid_payload(self, user_schema, valid_user):
        assert user_schema.decode(valid_user) == Ok(valid_user)

    @given(non_mappings)
    def test_non_mapping_is_invalid_type(self, value):
        result = Struct({'a': String}).decode(value)
        assert isinstance(result, Err)
        (error,) = result.error
        assert error.code == ErrorCode.INVALID_TYPE
        assert error.path == ()

    def test_missing_fields_are_all_reported(self):
        """Two missing required fields give exactly two errors."""
        result = Struct({'a': String, 'b': Number}).decode({})
        assert isinstance(result, Err)
        assert sorted(result.error, key=lambda e: e.path) == [
            ValidationError(code='required', message='Required field a is missing', path=('a',)),
            ValidationError(code='required', message='Required field b is missing', path=('b',)),
        ]

    def test_does_not_stop_at_first_failure(self):
        result = Struct({'a': String, 'b': Number, 'c': Boolean}).decode({'a': 1, 'c': 'x'})
        assert isinstance(result, Err)
        assert {(e.path, e.code) for e in result.error} == {
            (('a',), 'invalid_type'),
            (('b',), 'required'),
            (('c',), 'invalid_type'),
        }

    def test_nested_paths_are_prefixed(self):
        schema = Struct({'a': Struct({'b': Number})})
        result = schema.decode({'a': {'b': 'x'}})
        assert isinstance(result, Err)
        (error,) = result.error
        assert error.path == ('a', 'b')
        assert error.input == 'x'

    def test_none_value_is_decoded_not_missing(self):
        """A key present with None is type-checked, not reported as required."""
        (error,) = Struct({'a': String}).decode({'a': None}).error
        assert error.code == ErrorCode.INVALID_TYPE
        assert error.path == ('a',)

    def test_extra_keys_are_dropped(self):
        result = Struct({'a': String}).decode({'a': 'x', 'z': 1})
        assert result == Ok({'a': 'x'})
        assert 'z' not in result.value

    @given(records)
    def test_empty_struct_accepts_any_mapping(self, record):
        assert Struct({}).decode(record) == Ok({})

    def test_fields_are_snapshotted(self):
        fields = {'a': String}
        schema = Struct(fields)
        fields['b'] = Number
        assert schema.decode({'a': 'x'}) == Ok({'a': 'x'})

    def test_deep_error_path_from_fixture(self, user_schema, valid_user):
        payload = {**valid_user, 'permissions': {'roles': ['admin', 'user']}}
        (error,) = user_schema.decode(payload).error
        assert error.path == ('permissions', 'roles', '1')
        assert error.code == ErrorCode.INVALID_LITERAL


class TestStructEncode:
    """Tests for Struct.encode."""

    def test_encodes_declared_keys_only(self):
        schema = Struct({'a': String, 'b': Number})
        assert schema.encode({'a': 'x', 'b': 1, 'z': True}) == {'a': 'x', 'b': 1}

    def test_skips_absent_keys(self):
        assert Struct({'a': String, 'b': Number}).encode({'a': 'x'}) == {'a': 'x'}

    @given(st.dictionaries(field_names, texts, max_size=5))
    def test_round_trip(self, record):
        """encode(decode(v)) == v for schemas without transforms."""
        schema = Struct(dict.fromkeys(record, String))
        assert schema.encode(schema.decode(record).unwrap()) == record

    def test_round_trip_fixture(self, user_schema, valid_user):
        assert user_schema.encode(user_schema.decode(valid_user).unwrap()) == valid_user


class TestStructMake:
    """Tests for Struct.make."""

    def test_make_success(self, user_schema, valid_user):
        assert user_schema.make(valid_user) == valid_user

    def test_make_message_contains_dotted_path(self):
        schema = Struct({'a': Struct({'b': Number})})
        with pytest.raises(SchemaError) as exc_info:
            schema.make({'a': {}})
        message = str(exc_info.value)
        assert message.startswith('Validation failed: ')
        assert 'a.b' in message
        assert message == 'Validation failed: a.b: Required field b is missing'

    def test_make_joins_every_error(self):
        with pytest.raises(SchemaError) as exc_info:
            Struct({'a': String, 'b': String}).make({})
        assert len(exc_info.value.errors) == 2
        assert str(exc_info.value).count(', ') == 1


class TestList:
    """Tests for List."""

    @given(st.lists(integers))
    def test_accepts_matching_elements(self, values):
        assert List(Number).decode(values) == Ok(values)

    def test_tuple_input_decodes_to_list(self):
        assert List(Number).decode((1, 2)) == Ok([1, 2])

    @pytest.mark.parametrize('value', ['abc', {'a': 1}, None, 3])
    def test_non_list_is_invalid_type(self, value):
        (error,) = List(Number).decode(value).error
        assert error.code == ErrorCode.INVALID_TYPE
        assert error.path == ()

    def test_index_path(self):
        (error,) = List(Number).decode([1, 'x', 3]).error
        assert error.path == ('1',)

    def test_accumulates_all_elements(self):
        result = List(Number).decode(['a', 2, 'b'])
        assert [e.path for e in result.error] == [('0',), ('2',)]

    def test_nested_struct_in_list(self):
        schema = List(Struct({'role': Literal('admin')}))
        (error,) = schema.decode([{'role': 'admin'}, {}]).error
        assert error.path == ('1', 'role')
        assert error.code == ErrorCode.REQUIRED

    def test_preserves_order(self):
        assert List(String).decode(['b', 'a', 'c']) == Ok(['b', 'a', 'c'])

    @given(st.lists(texts))
    def test_round_trip(self, values):
        schema = List(String)
        assert schema.encode(schema.decode(values).unwrap()) == values

    def test_make(self):
        with pytest.raises(SchemaError, match=r'^Validation failed: 0: Expected number, received str$'):
            List(Number).make(['x'])
