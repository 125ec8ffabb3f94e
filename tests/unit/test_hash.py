"""Tests for hash module."""

import pytest
from hypothesis import given, strategies as st

from canvas_studio.core.hash import (
    Algorithm,
    digest,
    hash_fields,
    hash_string,
)


def test_hash_string_xxhash():
    """Test xxhash string hashing."""
    result = hash_string("test", Algorithm.XXHASH64)
    assert isinstance(result, str)
    assert len(result) == 16  # xxhash64 produces 16 hex chars

    # Same input = same hash
    assert hash_string("test", Algorithm.XXHASH64) == result


def test_hash_string_sha256():
    """Test SHA256 string hashing."""
    result = hash_string("test", Algorithm.SHA256)
    assert len(result) == 64
    assert hash_string("test", Algorithm.SHA256) == result


def test_hash_string_truncate():
    full = hash_string("cmp_01HV", Algorithm.XXHASH64)
    truncated = hash_string("cmp_01HV", truncate=8)
    assert truncated == full[:8]


def test_hash_fields_separates_fields():
    """Field boundaries matter: ("ab", "c") != ("a", "bc")."""
    assert hash_fields("ab", "c") != hash_fields("a", "bc")
    assert hash_fields("html", "[]") == hash_fields("html", "[]")


def test_unknown_algorithm():
    with pytest.raises(ValueError):
        digest(b"x", "md5")  # type: ignore[arg-type]


def test_digest_matches_hash_string():
    assert digest("héllo".encode("utf-8")) == hash_string("héllo")


@given(st.text())
def test_hash_deterministic(text):
    assert hash_string(text) == hash_string(text)
