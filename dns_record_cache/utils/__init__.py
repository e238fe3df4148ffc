"""
Utility functions and helpers.

This package contains normalization helpers shared by the providers.
"""

from .validators import sanitize_fqdn, validate_record_type

__all__ = ["sanitize_fqdn", "validate_record_type"]
