"""
DNS record value types shared by the cache and the providers.
"""

from dataclasses import asdict, dataclass, field
from typing import Dict


@dataclass(frozen=True)
class DNSRecord:
    """A single DNS record as returned by a provider."""

    id: str = ""
    zone_id: str = ""
    type: str = ""
    name: str = ""
    content: str = ""
    ttl: int = 1
    proxied: bool = False

    @classmethod
    def from_dict(cls, data: Dict, zone_id: str = "") -> "DNSRecord":
        """Build a record from a provider payload, ignoring unknown keys."""
        return cls(
            id=str(data.get("id", "")),
            zone_id=str(data.get("zone_id") or zone_id),
            type=str(data.get("type", "")).upper(),
            name=str(data.get("name", "")),
            content=str(data.get("content", "")),
            ttl=int(data.get("ttl", 1)),
            proxied=bool(data.get("proxied", False)),
        )

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass
class CacheStats:
    """Counters kept by the zone record cache."""

    requests: int = 0
    cache_hits: int = 0
    fetches: int = 0
    fetch_failures: int = 0

    @property
    def hit_rate(self) -> float:
        if not self.requests:
            return 0.0
        return self.cache_hits / self.requests * 100


@dataclass
class LookupResult:
    """Outcome of one (zone, record) lookup."""

    zone_id: str
    record_id: str
    found: bool
    record: DNSRecord = field(default_factory=DNSRecord)
