"""
Mock DNS provider for testing and demonstration.

This module provides a mock DNS provider that serves records from memory
for safe testing and demonstration purposes.
"""

import logging
from typing import Dict, List

from .base_provider import DNSProvider, DNSProviderError
from ..core.models import DNSRecord

logger = logging.getLogger(__name__)


class MockDNSProvider(DNSProvider):
    """Mock DNS provider for testing and demonstration purposes."""

    def __init__(self, config: Dict = None):
        """Initialize mock provider with zones from configuration."""
        config = config or {}
        self.zones: Dict[str, List[DNSRecord]] = {}
        self.fetch_count = 0

        for zone_id, records in (config.get("zones") or {}).items():
            self.zones[zone_id] = [
                DNSRecord.from_dict(record, zone_id=zone_id) for record in records
            ]

        logger.info(f"Mock DNS provider initialized with {len(self.zones)} zones")

    def add_record(self, record: DNSRecord) -> None:
        """Seed a record into the in-memory zone it belongs to."""
        self.zones.setdefault(record.zone_id, []).append(record)

    def get_records(self, zone_id: str) -> List[DNSRecord]:
        """Get all DNS records for a zone."""
        self.fetch_count += 1
        if zone_id not in self.zones:
            logger.error(f"Mock: Unknown zone {zone_id}")
            raise DNSProviderError(f"Unknown zone {zone_id}")

        records = list(self.zones[zone_id])
        logger.info(f"Mock: Retrieved {len(records)} records for zone {zone_id}")
        return records
