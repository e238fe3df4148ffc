"""
DNS Record Cache - Read-through caching of DNS provider records

Looks up DNS records by zone and record id, listing each zone from the
provider at most once per process.
"""

__version__ = "1.0.0"
__author__ = "DNS Record Cache Team"
__description__ = "Read-through per-zone cache for DNS provider records"

from .core.models import DNSRecord
from .core.record_cache import ZoneRecordCache
from .core.lookup_manager import LookupManager
from .providers.dns_client import DNSClient

__all__ = [
    "DNSRecord",
    "ZoneRecordCache",
    "LookupManager",
    "DNSClient",
]
