"""Pytest configuration and shared fixtures for kestrel tests."""

import pytest


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from kestrel import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from kestrel import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from kestrel import Some

    return Some('hello')


@pytest.fixture
def user_schema():
    """Nested struct schema mirroring a typical user payload."""
    from kestrel.schema import Boolean, List, Literal, String, Struct

    return Struct({
        'id': String,
        'name': String,
        'active': Boolean,
        'permissions': Struct({'roles': List(Literal('admin'))}),
    })


@pytest.fixture
def valid_user():
    """Payload accepted by user_schema."""
    return {
        'id': 'u-1',
        'name': 'Ada',
        'active': True,
        'permissions': {'roles': ['admin']},
    }
