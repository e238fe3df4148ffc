"""
Cloudflare DNS provider implementation.

This module lists DNS records through the Cloudflare v4 REST API using httpx.
"""

import logging
from typing import Dict, List, Optional

import httpx

from .base_provider import DNSProvider, DNSProviderError
from ..core.models import DNSRecord

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.cloudflare.com/client/v4"


class CloudflareProvider(DNSProvider):
    """Cloudflare DNS provider implementation using the v4 API."""

    def __init__(self, config: Dict, transport: Optional[httpx.BaseTransport] = None):
        """Initialize Cloudflare provider."""
        self.config = config
        self.api_token = config.get("api_token", "")
        self.base_url = config.get("base_url", DEFAULT_BASE_URL).rstrip("/")
        self.per_page = int(config.get("per_page", 1000))
        if self.per_page < 1:
            raise ValueError(f"Cloudflare per_page must be at least 1, got {self.per_page}")
        self.timeout = float(config.get("timeout", 30))

        if not self.api_token:
            logger.warning("Cloudflare API token is not configured")

        self.http_client = httpx.Client(
            base_url=self.base_url,
            headers={"Authorization": f"Bearer {self.api_token}"},
            timeout=self.timeout,
            transport=transport,
        )

        logger.info(f"Cloudflare provider initialized for {self.base_url}")

    def get_records(self, zone_id: str) -> List[DNSRecord]:
        """Get all DNS records for a zone, following pagination."""
        all_records: List[DNSRecord] = []
        page = 1

        while True:
            records = self._list_page(zone_id, page)
            all_records.extend(records)
            if len(records) < self.per_page:
                break
            page += 1

        logger.info(f"Retrieved {len(all_records)} records from Cloudflare zone {zone_id}")
        return all_records

    def _list_page(self, zone_id: str, page: int) -> List[DNSRecord]:
        """Fetch one page of the zone's DNS records."""
        try:
            response = self.http_client.get(
                f"/zones/{zone_id}/dns_records",
                params={"page": page, "per_page": self.per_page},
            )
            response.raise_for_status()
            payload = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Failed to list records for zone {zone_id}: {e}")
            raise DNSProviderError(
                f"Failed to list records for zone {zone_id}: {e}"
            ) from e

        if not payload.get("success", False):
            self._handle_api_error(payload, zone_id)

        return [
            DNSRecord.from_dict(item, zone_id=zone_id)
            for item in payload.get("result") or []
        ]

    def _handle_api_error(self, payload: Dict, zone_id: str) -> None:
        """Log the API error messages and raise."""
        messages = ", ".join(
            f"{error.get('code')}: {error.get('message')}"
            for error in payload.get("errors") or []
        )
        error_message = f"Cloudflare API error for zone {zone_id}: {messages or 'unknown error'}"
        logger.error(error_message)
        raise DNSProviderError(error_message)

    def close(self) -> None:
        """Close the HTTP client."""
        self.http_client.close()
