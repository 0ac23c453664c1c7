import pytest

from file_service.storage.content_types import DEFAULT_CONTENT_TYPE, resolve_content_type


class TestResolveContentType:
    """Extension to MIME type resolution tests"""

    @pytest.mark.parametrize(
        "file_name, expected",
        [
            ("report.pdf", "application/pdf"),
            ("letter.doc", "application/msword"),
            ("letter.docx", "application/vnd.openxmlformats-officedocument.wordprocessingml.document"),
            ("sheet.xls", "application/vnd.ms-excel"),
            ("sheet.xlsx", "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"),
            ("image.png", "image/png"),
            ("photo.jpg", "image/jpeg"),
            ("photo.jpeg", "image/jpeg"),
            ("anim.gif", "image/gif"),
            ("notes.txt", "text/plain"),
            ("bundle.zip", "application/zip"),
            ("bundle.rar", "application/x-rar-compressed"),
        ],
    )
    def test_known_extensions(self, file_name, expected):
        """Test every extension in the table"""
        assert resolve_content_type(file_name) == expected

    def test_only_last_extension_counts_case_insensitive(self):
        """Test multi-dot, upper-case name"""
        assert resolve_content_type("a.b.PDF") == "application/pdf"

    def test_upper_case_extension(self):
        """Test upper-case JPG"""
        assert resolve_content_type("x.JPG") == "image/jpeg"

    def test_no_extension(self):
        """Test name without extension"""
        assert resolve_content_type("noext") == DEFAULT_CONTENT_TYPE

    def test_unknown_extension(self):
        """Test extension missing from the table"""
        assert resolve_content_type("archive.tar.gz") == "application/octet-stream"

    def test_storage_key(self):
        """Test resolution on a generated storage key"""
        key = "0b6a8c4e-8d7e-4c1f-9a55-2f3f1f0c9d1e_report.pdf"
        assert resolve_content_type(key) == "application/pdf"
