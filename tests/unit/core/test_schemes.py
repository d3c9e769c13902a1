"""Tests for location scheme utilities."""

from __future__ import annotations

import pytest

from resloc.core.exceptions import InvalidLocationError
from resloc.core.schemes import extract_scheme, has_scheme, strip_scheme, validate_location

# ============================================================================
# extract_scheme Tests
# ============================================================================


class TestExtractScheme:
    """Tests for the extract_scheme function."""

    @pytest.mark.parametrize(
        "location,expected",
        [
            ("classpath:META-INF/cl_resource.nfo", "classpath"),
            ("file:/tmp/fs_resource_0.nfo", "file"),
            ("file:///tmp/fs_resource_0.nfo", "file"),
            ("https://example.com/data.nfo", "https"),
            ("svn+ssh://host/repo", "svn+ssh"),
            ("FILE:/tmp/x.nfo", "file"),
        ],
    )
    def test_scheme_found(self, location: str, expected: str):
        """Leading scheme token should be extracted and lower-cased."""
        assert extract_scheme(location) == expected

    @pytest.mark.parametrize(
        "location",
        [
            "/tmp/fs_resource_0.nfo",
            "fs_resource_0.nfo",
            "../inner/x.nfo",
            "1abc:rest",
            ":no-scheme",
        ],
    )
    def test_no_scheme(self, location: str):
        """Locations without a scheme token should yield an empty string."""
        assert extract_scheme(location) == ""

    def test_drive_letter_is_a_scheme_token(self):
        """A Windows drive letter parses as a single-letter scheme."""
        assert extract_scheme("c:\\tmp\\x.nfo") == "c"

    def test_only_first_token(self):
        """Only the leading token is a scheme."""
        assert extract_scheme("file:incorrect:path:") == "file"


# ============================================================================
# has_scheme Tests
# ============================================================================


class TestHasScheme:
    """Tests for the has_scheme function."""

    def test_matching_scheme(self):
        """Matching scheme should be detected case-insensitively."""
        assert has_scheme("CLASSPATH:x.nfo", "classpath") is True

    def test_other_scheme(self):
        """A different scheme should not match."""
        assert has_scheme("file:/tmp/x.nfo", "classpath") is False

    def test_none_scheme(self):
        """No claimed scheme never matches."""
        assert has_scheme("file:/tmp/x.nfo", None) is False


# ============================================================================
# strip_scheme Tests
# ============================================================================


class TestStripScheme:
    """Tests for the strip_scheme function."""

    def test_strip_any_scheme(self):
        """Without an explicit scheme, any scheme is stripped."""
        assert strip_scheme("classpath:META-INF/x.nfo") == "META-INF/x.nfo"

    def test_strip_given_scheme(self):
        """The given scheme is stripped."""
        assert strip_scheme("file:/tmp/x.nfo", "file") == "/tmp/x.nfo"

    def test_keep_other_scheme(self):
        """A scheme other than the given one is kept."""
        assert strip_scheme("classpath:x.nfo", "file") == "classpath:x.nfo"

    def test_empty_authority(self):
        """An empty authority is dropped with the scheme."""
        assert strip_scheme("file:///tmp/x.nfo", "file") == "/tmp/x.nfo"

    def test_no_scheme(self):
        """Locations without a scheme are returned unchanged."""
        assert strip_scheme("/tmp/x.nfo") == "/tmp/x.nfo"

    def test_only_first_scheme(self):
        """Only the leading scheme is removed."""
        assert strip_scheme("file:incorrect:path:", "file") == "incorrect:path:"


# ============================================================================
# validate_location Tests
# ============================================================================


class TestValidateLocation:
    """Tests for the validate_location function."""

    def test_valid_location(self):
        """Valid locations are returned unchanged."""
        assert validate_location("classpath:x.nfo") == "classpath:x.nfo"

    @pytest.mark.parametrize("location", [None, "", "   ", 42, b"/tmp/x.nfo"])
    def test_malformed_location(self, location):
        """Malformed locations should raise InvalidLocationError."""
        with pytest.raises(InvalidLocationError) as exc_info:
            validate_location(location)
        assert exc_info.value.location == location
