"""Tests for utility functions."""

from fitgoal.utils.image_utils import image_mime_type, strip_data_uri


class TestStripDataUri:
    """Tests for strip_data_uri function."""

    def test_strips_prefix(self):
        """Test data URI prefix removal."""
        assert strip_data_uri("data:image/png;base64,AAA") == "AAA"

    def test_bare_payload_unchanged(self):
        """Test that a bare payload is returned as is."""
        assert strip_data_uri("AAA") == "AAA"

    def test_jpeg_prefix(self):
        """Test other image subtypes."""
        assert strip_data_uri("data:image/jpeg;base64,/9j/4AAQ") == "/9j/4AAQ"

    def test_idempotent(self):
        """Test that applying twice equals applying once."""
        for value in ["data:image/webp;base64,UklGR", "UklGR", ""]:
            once = strip_data_uri(value)
            assert strip_data_uri(once) == once

    def test_non_image_uri_unchanged(self):
        """Test that only image data URIs are stripped."""
        value = "data:text/plain;base64,SGVsbG8="
        assert strip_data_uri(value) == value

    def test_prefix_only_at_start(self):
        """Test that a prefix in the middle is left alone."""
        value = "AAAdata:image/png;base64,BBB"
        assert strip_data_uri(value) == value


class TestImageMimeType:
    """Tests for image_mime_type function."""

    def test_from_data_uri(self):
        """Test MIME type detection."""
        assert image_mime_type("data:image/png;base64,AAA") == "image/png"

    def test_default_for_bare_payload(self):
        """Test default MIME type."""
        assert image_mime_type("AAA") == "image/jpeg"

    def test_custom_default(self):
        """Test custom default."""
        assert image_mime_type("AAA", default="image/webp") == "image/webp"
