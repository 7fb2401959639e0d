"""
Input validation utilities.
Free text is stored as plain text: markup is stripped before it reaches the store.
"""

import html
import re
from typing import Optional

import bleach

from workportal.domain.models.base import ValidationError


PATTERNS = {
    'url': re.compile(r'^https?://[^\s/$.?#].[^\s]*$', re.IGNORECASE),
    'control_chars': re.compile(r'[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]'),
}


class SecurityValidator:
    """Security-focused sanitizers for user-supplied text."""

    @staticmethod
    def strip_markup(value: str) -> str:
        """Remove every HTML tag, keeping the text content."""
        if not isinstance(value, str):
            return value
        return bleach.clean(value, tags=[], attributes={}, strip=True)

    @staticmethod
    def strip_control_chars(value: str) -> str:
        if not isinstance(value, str):
            return value
        return PATTERNS['control_chars'].sub('', value)

    @staticmethod
    def check_url(value: str) -> str:
        if not PATTERNS['url'].match(value):
            raise ValueError("URL must start with http:// or https://")
        if value.lower().startswith(('javascript:', 'vbscript:', 'data:')):
            raise ValueError("Unsafe URL scheme")
        return value


def clean_text(value: str, max_length: Optional[int] = None, field: Optional[str] = None) -> str:
    """
    Strip markup and control characters from free text.
    Raises ValidationError when nothing is left or the result is too long.
    """
    # bleach escapes the characters it keeps; store the plain text
    cleaned = html.unescape(SecurityValidator.strip_markup(value or ""))
    cleaned = SecurityValidator.strip_control_chars(cleaned).strip()
    if not cleaned:
        raise ValidationError("Text cannot be empty", field)
    if max_length is not None and len(cleaned) > max_length:
        raise ValidationError(f"Text too long (max {max_length} characters)", field)
    return cleaned


def secure_url_validator(value: Optional[str]) -> Optional[str]:
    """Pydantic validator body for optional URL fields."""
    if value is None:
        return value
    value = value.strip()
    if not value:
        return None
    return SecurityValidator.check_url(value)
