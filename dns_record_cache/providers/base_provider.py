"""
Base DNS provider interface.

This module defines the abstract base class that all DNS providers must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from ..core.models import DNSRecord


class DNSProviderError(RuntimeError):
    """Raised when a provider fails to list the records of a zone."""


class DNSProvider(ABC):
    """Abstract base class for DNS providers."""

    @abstractmethod
    def get_records(self, zone_id: str) -> List[DNSRecord]:
        """Get all DNS records for a zone."""
        pass

    def close(self) -> None:
        """Release any connections held by the provider."""
        pass
