"""
Validators - Input normalization for DNS record data

This module provides helpers used by providers to normalize names and
check record types before records reach the cache.
"""

import logging
import re

import dns.rdatatype

logger = logging.getLogger(__name__)


def validate_record_type(record_type: str) -> bool:
    """
    Validate a DNS record type mnemonic such as "A" or "CNAME".

    Args:
        record_type: The record type to validate

    Returns:
        True if dnspython knows the type, False otherwise
    """
    if not record_type or not isinstance(record_type, str):
        return False

    try:
        dns.rdatatype.from_text(record_type.strip().upper())
        return True
    except dns.rdatatype.UnknownRdatatype:
        logger.warning(f"Unknown DNS record type: {record_type}")
        return False


def sanitize_fqdn(fqdn: str) -> str:
    """
    Sanitize FQDN by removing invalid characters and normalizing.

    Args:
        fqdn: The FQDN to sanitize

    Returns:
        Sanitized FQDN
    """
    if not fqdn:
        return fqdn

    fqdn = fqdn.strip().strip(".").lower()

    # Underscores stay for service labels such as _dmarc
    fqdn = re.sub(r"[^a-z0-9._*-]", "", fqdn)
    fqdn = re.sub(r"\.+", ".", fqdn)

    return fqdn.strip(".")
