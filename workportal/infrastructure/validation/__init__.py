"""
Input sanitation helpers shared by DTOs and use cases.
"""

from .validators import SecurityValidator, clean_text, secure_url_validator

__all__ = [
    "SecurityValidator",
    "clean_text",
    "secure_url_validator",
]
