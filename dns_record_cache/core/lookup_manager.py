"""
Lookup Manager - Resolve DNS records by zone and record id

This module wires the configured DNS provider to a zone record cache so that
callers looking up many records only pay for one zone listing per zone.
"""

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from rich.console import Console
from rich.table import Table

from ..providers.dns_client import DNSClient
from .models import DNSRecord, LookupResult
from .record_cache import ZoneRecordCache

console = Console()
logger = logging.getLogger(__name__)


class LookupManager:
    """Looks up DNS records through an injected zone record cache."""

    def __init__(self, config: Dict, cache: Optional[ZoneRecordCache] = None):
        """Initialize the lookup manager with configuration and an optional cache."""
        self.config = config or {}
        self.dns_client = DNSClient(self.config)
        self.cache = cache if cache is not None else self._build_cache()

    def _build_cache(self) -> ZoneRecordCache:
        cache_config = self.config.get("cache") or {}
        retry = bool(cache_config.get("retry_failed_fetches", False))
        if retry:
            logger.info("Zones whose fetch failed will be fetched again on next lookup")
        return ZoneRecordCache(retry_failed_fetches=retry)

    def find_record(self, zone_id: str, record_id: str) -> Optional[DNSRecord]:
        """Return the record or None when the zone has no such record."""
        record, found = self.cache.lookup(zone_id, record_id, self.dns_client.get_records)
        if not found:
            logger.info(f"Record {record_id} not found in zone {zone_id}")
            return None
        return record

    def find_records(self, requests: Iterable[Tuple[str, str]]) -> List[LookupResult]:
        """Look up several (zone id, record id) pairs, preserving their order."""
        results = []
        for zone_id, record_id in requests:
            record, found = self.cache.lookup(
                zone_id, record_id, self.dns_client.get_records
            )
            results.append(LookupResult(zone_id, record_id, found, record))

        found_count = sum(1 for result in results if result.found)
        logger.info(f"Lookup complete: {found_count}/{len(results)} records found")
        return results

    def display_results(self, results: List[LookupResult]):
        """Display lookup results as a table."""
        table = Table(title="DNS Record Lookups")
        table.add_column("Zone", style="cyan")
        table.add_column("Record ID", style="magenta")
        table.add_column("Type", style="white")
        table.add_column("Name", style="white")
        table.add_column("Content", style="white")

        for result in results:
            if result.found:
                table.add_row(
                    result.zone_id,
                    result.record_id,
                    result.record.type,
                    result.record.name,
                    result.record.content,
                )
            else:
                table.add_row(
                    result.zone_id, result.record_id, "", "[red]not found[/red]", ""
                )

        console.print(table)

    def display_stats(self):
        """Display the cache counters."""
        stats = self.cache.stats
        table = Table(title="Zone Record Cache")
        table.add_column("Counter", style="cyan")
        table.add_column("Value", style="magenta")
        table.add_row("Requests", str(stats.requests))
        table.add_row("Cache hits", str(stats.cache_hits))
        table.add_row("Hit rate", f"{stats.hit_rate:.1f}%")
        table.add_row("Zone fetches", str(stats.fetches))
        table.add_row("Failed fetches", str(stats.fetch_failures))
        console.print(table)

    def close(self):
        """Close the DNS client's provider connections."""
        self.dns_client.close()
