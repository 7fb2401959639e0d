"""
Unit tests for free-text sanitization.
"""

import pytest

from workportal.domain.models.base import ValidationError
from workportal.infrastructure.validation.validators import SecurityValidator, clean_text


class TestCleanText:

    def test_strips_tags_and_keeps_text(self):
        assert clean_text("<p>Hello <em>there</em></p>") == "Hello there"

    def test_keeps_plain_ampersands(self):
        assert clean_text("R&D <b>budget</b>") == "R&D budget"

    def test_strips_control_characters(self):
        assert SecurityValidator.strip_control_chars("line\x00one\x07") == "lineone"

    def test_empty_after_cleaning(self):
        with pytest.raises(ValidationError) as exc_info:
            clean_text("<img src=x>", field="content")
        assert exc_info.value.field == "content"

    def test_max_length(self):
        with pytest.raises(ValidationError, match="max 5"):
            clean_text("abcdef", max_length=5)


class TestSecurityValidator:

    def test_accepts_http_urls(self):
        assert SecurityValidator.check_url("https://example.com/a.zip") == "https://example.com/a.zip"

    @pytest.mark.parametrize("url", ["javascript:alert(1)", "ftp://example.com/file", "not a url"])
    def test_rejects_other_urls(self, url):
        with pytest.raises(ValueError):
            SecurityValidator.check_url(url)
