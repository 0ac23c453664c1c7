import re

import pytest

from file_service.utils.ids import generate_storage_key
from file_service.utils.validators import (
    MAX_KEY_BYTES,
    FilenameValidationError,
    is_valid_storage_key,
    sanitize_original_name,
)
from tests.constants import storage_key_pattern


class TestSanitizeOriginalName:
    """Client filename sanitization tests"""

    def test_plain_name_unchanged(self):
        """Test a name without path components"""
        assert sanitize_original_name("report 2024.pdf") == "report 2024.pdf"

    def test_posix_path_reduced_to_name(self):
        """Test a POSIX path"""
        assert sanitize_original_name("/home/me/report.pdf") == "report.pdf"

    def test_windows_path_reduced_to_name(self):
        """Test a Windows path"""
        assert sanitize_original_name("C:\\Users\\me\\report.pdf") == "report.pdf"

    @pytest.mark.parametrize("name", [None, "", "  ", ".", "..", "dir/", "a\\..", "x\x00.txt"])
    def test_unusable_names(self, name):
        """Test names that leave nothing usable"""
        with pytest.raises(FilenameValidationError):
            sanitize_original_name(name)


class TestStorageKeyValidation:
    """Storage key validation tests"""

    def test_generated_key_is_valid(self):
        """Test that generated keys pass validation"""
        assert is_valid_storage_key(generate_storage_key("report.pdf"))

    @pytest.mark.parametrize("key", ["", ".tmp", "..", "../x", "a/b", "a\\b", "a\x00b"])
    def test_invalid_keys(self, key):
        """Test keys outside the flat namespace"""
        assert not is_valid_storage_key(key)

    def test_key_length_limit(self):
        """Test the byte length limit"""
        assert is_valid_storage_key("a" * MAX_KEY_BYTES)
        assert not is_valid_storage_key("a" * (MAX_KEY_BYTES + 1))
        # Multi-byte characters count by encoded size
        assert not is_valid_storage_key("é" * 128)


class TestGenerateStorageKey:
    """Storage key generation tests"""

    def test_key_format(self):
        """Test <uuid4>_<name> format"""
        assert re.match(storage_key_pattern("report.pdf"), generate_storage_key("report.pdf"))

    def test_keys_are_unique(self):
        """Test that the same name yields different keys"""
        keys = {generate_storage_key("same.txt") for _ in range(1000)}
        assert len(keys) == 1000

    def test_too_long_name(self):
        """Test that overlong names are rejected"""
        with pytest.raises(FilenameValidationError) as exc:
            generate_storage_key("a" * 230)
        assert "too long" in str(exc.value)
