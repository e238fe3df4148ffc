"""
DNS Client - Unified interface for DNS provider APIs

This module selects the configured provider, currently supporting
Cloudflare, BIND and an in-memory mock.
"""

import logging
from typing import Dict, List

from .base_provider import DNSProvider
from .bind_provider import BINDProvider
from .cloudflare_provider import CloudflareProvider
from .mock_provider import MockDNSProvider
from ..core.models import DNSRecord

logger = logging.getLogger(__name__)


class DNSClient:
    """Unified DNS client that supports multiple providers."""

    def __init__(self, config: Dict):
        """Initialize DNS client with configuration."""
        self.config = config
        self.provider_name = self.config.get("default_provider", "mock")
        self.provider = self._get_provider()

    def _get_provider(self) -> DNSProvider:
        """Get DNS provider based on configuration."""
        provider_config = (self.config.get("dns_providers") or {}).get(
            self.provider_name
        ) or {}

        if self.provider_name == "cloudflare":
            return CloudflareProvider(provider_config)
        elif self.provider_name == "bind":
            return BINDProvider(provider_config)
        elif self.provider_name == "mock":
            return MockDNSProvider(provider_config)
        else:
            logger.warning(f"Unknown provider '{self.provider_name}', using mock provider")
            return MockDNSProvider()

    def get_records(self, zone_id: str) -> List[DNSRecord]:
        """Get all DNS records for a zone."""
        return self.provider.get_records(zone_id)

    def close(self) -> None:
        """Close the provider's connections."""
        self.provider.close()
