"""Test bug ID generation and shape checks"""

import pytest

from bugtracker.storage.id_generator import (
    generate_random_string,
    generate_bug_id,
    is_valid_bug_id,
)


class TestIdGeneration:
    """Test bug ID generation functionality"""

    def test_generate_random_string_default_length(self):
        result = generate_random_string()
        assert len(result) == 16
        assert all(char in "0123456789abcdef" for char in result)

    def test_generate_random_string_custom_alphabet(self):
        result = generate_random_string(8, chars="xy")
        assert len(result) == 8
        assert set(result) <= {"x", "y"}

    def test_generate_bug_id_shape(self):
        bug_id = generate_bug_id()
        assert len(bug_id) == 24
        assert is_valid_bug_id(bug_id)

    def test_generate_bug_id_timestamp_prefix(self):
        """Test the first 8 hex digits encode the creation time"""
        bug_id = generate_bug_id(timestamp=0x5F5E1000)
        assert bug_id.startswith("5f5e1000")

    def test_generate_bug_id_uniqueness(self):
        ids = {generate_bug_id() for _ in range(1000)}
        assert len(ids) == 1000


@pytest.mark.parametrize("value,expected", [
    ("0123456789abcdef01234567", True),
    ("0123456789ABCDEF01234567", False),
    ("0123456789abcdef0123456", False),
    ("0123456789abcdef01234567\n", False),
    ("invalid-id", False),
    ("", False),
    (None, False),
    (12345, False),
])
def test_is_valid_bug_id(value, expected):
    assert is_valid_bug_id(value) is expected
