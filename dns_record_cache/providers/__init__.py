"""
DNS provider implementations.

Providers list every record of a zone and are what the zone record cache
calls on a cold lookup.
"""

from .base_provider import DNSProvider, DNSProviderError
from .bind_provider import BINDProvider
from .cloudflare_provider import CloudflareProvider
from .dns_client import DNSClient
from .mock_provider import MockDNSProvider

__all__ = [
    "DNSClient",
    "DNSProvider",
    "DNSProviderError",
    "BINDProvider",
    "CloudflareProvider",
    "MockDNSProvider",
]
