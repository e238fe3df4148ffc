"""
Zone Record Cache - Read-through cache of DNS records per zone

Listing every record of a zone is the only bulk read most DNS provider APIs
offer, so the cache fetches a zone once, on first access, and serves every
later lookup in that zone from memory.
"""

import logging
import threading
from dataclasses import replace
from typing import Callable, Dict, Iterable, Set, Tuple

from .models import CacheStats, DNSRecord

logger = logging.getLogger(__name__)

FetchZoneRecords = Callable[[str], Iterable[DNSRecord]]


class ZoneRecordCache:
    """Thread-safe, populate-once cache mapping (zone id, record id) to a record."""

    def __init__(self, retry_failed_fetches: bool = False):
        """
        Initialize an empty cache.

        Args:
            retry_failed_fetches: When True a zone whose fetch raised is fetched
                again on its next lookup instead of staying cached as empty.
        """
        self.retry_failed_fetches = retry_failed_fetches
        self._lock = threading.Lock()
        self._zones: Dict[str, Dict[str, DNSRecord]] = {}
        self._failed_zones: Set[str] = set()
        self._stats = CacheStats()

    def lookup(
        self, zone_id: str, record_id: str, fetch_records: FetchZoneRecords
    ) -> Tuple[DNSRecord, bool]:
        """
        Look up a record, fetching the whole zone on first access.

        Args:
            zone_id: Zone the record belongs to
            record_id: Provider identifier of the record
            fetch_records: Callable returning every record of a zone; any
                exception it raises is logged and treated as an empty zone

        Returns:
            Tuple of the record (an empty DNSRecord when missing) and a found flag
        """
        # The fetch runs under the lock so each zone is fetched once.
        with self._lock:
            zone_records = self._ensure_zone_loaded(zone_id, fetch_records)

            record = zone_records.get(record_id)
            found = record is not None

            self._stats.requests += 1
            if found:
                self._stats.cache_hits += 1

            logger.debug(
                f"DNS zone {zone_id} - record {record_id} "
                f"{'found' if found else 'not found'} in cache "
                f"({self._stats.cache_hits}/{self._stats.requests} hits)"
            )

            if not found:
                return DNSRecord(), False
            return record, True

    @property
    def stats(self) -> CacheStats:
        """Snapshot of the cache counters."""
        with self._lock:
            return replace(self._stats)

    def _ensure_zone_loaded(
        self, zone_id: str, fetch_records: FetchZoneRecords
    ) -> Dict[str, DNSRecord]:
        """Return the record map of a zone, fetching it if not yet cached."""
        zone_records = self._zones.get(zone_id)
        if zone_records is not None and not self._should_refetch(zone_id):
            logger.debug(f"DNS zone {zone_id} already cached")
            return zone_records

        logger.warning(f"DNS zone {zone_id} not found in cache")

        # The zone stays registered, empty, even when the fetch fails.
        self._zones[zone_id] = {}
        self._stats.fetches += 1

        try:
            records = list(fetch_records(zone_id))
            zone_records = {record.id: record for record in records}
        except Exception as e:
            self._stats.fetch_failures += 1
            if self.retry_failed_fetches:
                self._failed_zones.add(zone_id)
            logger.warning(f"DNS zone {zone_id} - Failed to fetch records: {e}")
            return self._zones[zone_id]

        self._failed_zones.discard(zone_id)
        logger.info(f"DNS zone {zone_id} - Fetched all {len(records)} records")

        self._zones[zone_id] = zone_records
        logger.info(f"DNS zone {zone_id} - cache initialized")
        return zone_records

    def _should_refetch(self, zone_id: str) -> bool:
        return self.retry_failed_fetches and zone_id in self._failed_zones
