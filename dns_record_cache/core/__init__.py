"""
Core DNS record lookup functionality.

This package contains the zone record cache and the lookup layer built on it.
"""

from .models import CacheStats, DNSRecord, LookupResult
from .record_cache import ZoneRecordCache
from .lookup_manager import LookupManager

__all__ = ["CacheStats", "DNSRecord", "LookupResult", "ZoneRecordCache", "LookupManager"]
