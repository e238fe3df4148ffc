"""
BIND DNS provider implementation.

This module lists zone records from a BIND server through an AXFR zone
transfer using the dnspython library.
"""

import hashlib
import logging
import re
from typing import Dict, List, Optional

import dns.exception
import dns.query
import dns.rdatatype
import dns.tsigkeyring
import dns.zone

from .base_provider import DNSProvider, DNSProviderError
from ..core.models import DNSRecord
from ..utils.validators import sanitize_fqdn, validate_record_type

logger = logging.getLogger(__name__)


class BINDProvider(DNSProvider):
    """BIND DNS provider implementation using dnspython library."""

    def __init__(self, config: Dict):
        """Initialize BIND provider."""
        self.config = config
        self.nameserver = config.get("nameserver", "127.0.0.1")
        self.port = config.get("port", 53)
        self.timeout = config.get("timeout", 30)
        self.key_file = config.get("key_file", "")
        self.key_name = config.get("key_name", "")
        self.record_types = [
            t.upper() for t in config.get("record_types", []) if validate_record_type(t)
        ]

        self.keyring = None
        if self.key_file and self.key_name:
            try:
                with open(self.key_file, "r") as f:
                    key_content = f.read().strip()

                secret = self._parse_bind_key_file(key_content, self.key_name)

                if secret:
                    self.keyring = dns.tsigkeyring.from_text({self.key_name: secret})
                    logger.info(f"TSIG key loaded from {self.key_file}")
                else:
                    logger.warning(
                        f"Could not extract secret for key '{self.key_name}' from {self.key_file}"
                    )
            except OSError as e:
                logger.warning(f"Failed to load TSIG key: {e}")
                logger.debug("Zone transfers will not be TSIG signed")

        logger.info(
            f"BIND provider initialized for nameserver {self.nameserver}:{self.port}"
        )

    def _parse_bind_key_file(self, key_content: str, key_name: str) -> Optional[str]:
        """Parse BIND key file format to extract the secret for a specific key."""
        key_pattern = rf'key\s+"{re.escape(key_name)}"\s*{{(.*?)}}'
        match = re.search(key_pattern, key_content, re.DOTALL)
        if match:
            secret_match = re.search(r'secret\s+"([^"]+)"', match.group(1))
            if secret_match:
                return secret_match.group(1)
        return None

    def get_records(self, zone_id: str) -> List[DNSRecord]:
        """Get all DNS records for a zone using a zone transfer."""
        zone_obj = self._zone_transfer(zone_id)
        records = self._zone_to_records(zone_obj, zone_id)
        logger.info(f"Retrieved {len(records)} records from BIND zone {zone_id}")
        return records

    def _zone_transfer(self, zone_id: str) -> dns.zone.Zone:
        """Transfer the full zone from the nameserver."""
        try:
            return dns.zone.from_xfr(
                dns.query.xfr(
                    self.nameserver,
                    zone_id,
                    port=self.port,
                    keyring=self.keyring,
                    keyname=self.key_name or None,
                    lifetime=self.timeout,
                )
            )
        except (dns.exception.DNSException, OSError) as e:
            logger.error(f"Zone transfer failed for {zone_id}: {e}")
            raise DNSProviderError(f"Zone transfer failed for {zone_id}: {e}") from e

    def _zone_to_records(self, zone_obj: dns.zone.Zone, zone_id: str) -> List[DNSRecord]:
        """Flatten a transferred zone into one record per rdata."""
        records = []
        for name, node in zone_obj.nodes.items():
            fqdn = sanitize_fqdn(str(name.derelativize(zone_obj.origin)))
            for rdataset in node.rdatasets:
                record_type = dns.rdatatype.to_text(rdataset.rdtype)
                if self.record_types and record_type not in self.record_types:
                    continue
                for rdata in rdataset:
                    content = rdata.to_text()
                    records.append(
                        DNSRecord(
                            id=self._record_id(fqdn, record_type, content),
                            zone_id=zone_id,
                            type=record_type,
                            name=fqdn,
                            content=content,
                            ttl=rdataset.ttl,
                        )
                    )
        return records

    @staticmethod
    def _record_id(fqdn: str, record_type: str, content: str) -> str:
        """BIND has no record ids; derive a stable one from the record itself."""
        digest = hashlib.sha1(f"{fqdn}|{record_type}|{content}".encode("utf-8"))
        return digest.hexdigest()[:32]
