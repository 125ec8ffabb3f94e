"""Tests for ID generation system."""

import pytest
from hypothesis import given, settings, strategies as st
from ulid import ULID

from canvas_studio.core.id import COMPONENT_PREFIX, new_component_id


@pytest.mark.unit
def test_component_id_format():
    """Component IDs carry the cmp prefix and a 26-char ULID."""
    id_str = new_component_id()
    prefix, ulid_part = id_str.split("_", 1)
    assert prefix == COMPONENT_PREFIX
    assert len(ulid_part) == 26
    assert str(ULID.from_str(ulid_part)) == ulid_part


@pytest.mark.unit
def test_ids_sort_by_creation():
    first = new_component_id()
    second = new_component_id()
    assert first[:14] <= second[:14]


@pytest.mark.unit
def test_batch_uniqueness():
    """IDs minted back to back (same millisecond) never collide."""
    ids = [new_component_id() for _ in range(1000)]
    assert len(set(ids)) == 1000


@given(st.integers(min_value=2, max_value=200))
@settings(max_examples=25)
def test_uniqueness_property(count):
    ids = {new_component_id() for _ in range(count)}
    assert len(ids) == count
