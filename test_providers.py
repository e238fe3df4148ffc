#!/usr/bin/env python3
"""
Test suite for the DNS providers that back the zone record cache.
"""

import os
import tempfile
import unittest
from unittest.mock import patch

import dns.exception
import dns.zone
import httpx

from dns_record_cache.core.models import DNSRecord
from dns_record_cache.providers.base_provider import DNSProviderError
from dns_record_cache.providers.bind_provider import BINDProvider
from dns_record_cache.providers.cloudflare_provider import CloudflareProvider
from dns_record_cache.providers.dns_client import DNSClient
from dns_record_cache.providers.mock_provider import MockDNSProvider
from dns_record_cache.utils.validators import sanitize_fqdn, validate_record_type

ZONE_TEXT = """
$TTL 300
@     IN SOA ns1.example.com. admin.example.com. 1 3600 600 86400 300
@     IN NS  ns1.example.com.
www   IN A   192.0.2.10
mail  IN A   192.0.2.20
"""


class TestDNSRecord(unittest.TestCase):
    """Test the record value type."""

    def test_from_dict(self):
        """Provider payloads map onto record fields."""
        record = DNSRecord.from_dict(
            {
                "id": "abc",
                "type": "cname",
                "name": "www.example.com",
                "content": "example.com",
                "ttl": 300,
                "proxied": True,
                "comment": "ignored",
            },
            zone_id="zone-1",
        )

        self.assertEqual(record.id, "abc")
        self.assertEqual(record.zone_id, "zone-1")
        self.assertEqual(record.type, "CNAME")
        self.assertEqual(record.ttl, 300)
        self.assertTrue(record.proxied)

    def test_from_dict_prefers_payload_zone_id(self):
        """A zone id in the payload wins over the fallback."""
        record = DNSRecord.from_dict({"id": "abc", "zone_id": "zone-2"}, zone_id="zone-1")
        self.assertEqual(record.zone_id, "zone-2")

    def test_zero_value(self):
        """The default record is empty."""
        record = DNSRecord()
        self.assertEqual(record.to_dict()["id"], "")
        self.assertEqual(record.ttl, 1)


class TestMockDNSProvider(unittest.TestCase):
    """Test the mock DNS provider."""

    def setUp(self):
        """Set up test fixtures."""
        self.provider = MockDNSProvider(
            {
                "zones": {
                    "zone-A": [
                        {"id": "record-0", "type": "A", "name": "zero-A", "content": "127.0.0.0"}
                    ]
                }
            }
        )

    def test_get_records(self):
        """Configured zones are served with their zone id filled in."""
        records = self.provider.get_records("zone-A")

        self.assertEqual(len(records), 1)
        self.assertEqual(records[0].zone_id, "zone-A")
        self.assertEqual(self.provider.fetch_count, 1)

    def test_unknown_zone_raises(self):
        """Unknown zones raise a provider error."""
        with self.assertRaises(DNSProviderError):
            self.provider.get_records("zone-Z")
        self.assertEqual(self.provider.fetch_count, 1)

    def test_add_record(self):
        """Seeded records are returned by the next listing."""
        self.provider.add_record(DNSRecord(id="r", zone_id="zone-N", name="new"))

        records = self.provider.get_records("zone-N")

        self.assertEqual([r.name for r in records], ["new"])

    def test_returned_list_is_a_copy(self):
        """Changing a listing does not change the provider's zone."""
        records = self.provider.get_records("zone-A")
        records.clear()

        self.assertEqual(len(self.provider.get_records("zone-A")), 1)


class TestCloudflareProvider(unittest.TestCase):
    """Test the Cloudflare provider against a mocked HTTP transport."""

    def _provider(self, handler, per_page=2):
        config = {
            "api_token": "secret-token",
            "base_url": "https://api.test/client/v4",
            "per_page": per_page,
        }
        return CloudflareProvider(config, transport=httpx.MockTransport(handler))

    def test_get_records_follows_pagination(self):
        """Pages are requested until a short page comes back."""
        pages = {
            "1": [
                {"id": "r1", "type": "A", "name": "a.example.com", "content": "192.0.2.1"},
                {"id": "r2", "type": "A", "name": "b.example.com", "content": "192.0.2.2"},
            ],
            "2": [
                {"id": "r3", "type": "TXT", "name": "example.com", "content": "v=spf1 -all"},
            ],
        }
        seen = []

        def handler(request):
            seen.append(request)
            page = request.url.params["page"]
            return httpx.Response(200, json={"success": True, "errors": [], "result": pages[page]})

        records = self._provider(handler).get_records("zone-1")

        self.assertEqual([r.id for r in records], ["r1", "r2", "r3"])
        self.assertTrue(all(r.zone_id == "zone-1" for r in records))
        self.assertEqual(len(seen), 2)
        self.assertEqual(seen[0].url.path, "/client/v4/zones/zone-1/dns_records")
        self.assertEqual(seen[0].headers["Authorization"], "Bearer secret-token")

    def test_api_error_raises(self):
        """An unsuccessful API payload raises a provider error."""

        def handler(request):
            return httpx.Response(
                200,
                json={"success": False, "errors": [{"code": 7003, "message": "Could not route"}]},
            )

        with self.assertRaises(DNSProviderError) as ctx:
            self._provider(handler).get_records("zone-1")
        self.assertIn("7003", str(ctx.exception))

    def test_http_error_raises(self):
        """A non-2xx response raises a provider error."""

        def handler(request):
            return httpx.Response(403, json={"success": False, "errors": []})

        with self.assertRaises(DNSProviderError):
            self._provider(handler).get_records("zone-1")

    def test_transport_error_raises(self):
        """A network failure raises a provider error."""

        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with self.assertRaises(DNSProviderError):
            self._provider(handler).get_records("zone-1")

    def test_invalid_per_page_rejected(self):
        """A page size below one is rejected at construction."""
        for per_page in [0, -5]:
            with self.subTest(per_page=per_page):
                with self.assertRaises(ValueError):
                    self._provider(lambda request: httpx.Response(200), per_page=per_page)

    def test_close_closes_http_client(self):
        """Closing the provider closes its HTTP client."""
        provider = self._provider(lambda request: httpx.Response(200))

        provider.close()

        self.assertTrue(provider.http_client.is_closed)


class TestBINDProvider(unittest.TestCase):
    """Test the BIND provider without a live nameserver."""

    def setUp(self):
        """Set up test fixtures."""
        self.config = {"nameserver": "127.0.0.1", "port": 5353}
        self.zone = dns.zone.from_text(ZONE_TEXT, origin="example.com.")

    def test_bind_config_parsing(self):
        """Test BIND configuration parsing."""
        provider = BINDProvider(self.config)

        self.assertEqual(provider.nameserver, "127.0.0.1")
        self.assertEqual(provider.port, 5353)
        self.assertIsNone(provider.keyring)

    def test_tsig_key_loaded_from_key_file(self):
        """The TSIG secret is read from a BIND key file."""
        key_content = (
            'key "update-key" {\n'
            "    algorithm hmac-sha256;\n"
            '    secret "c2VjcmV0LXNlY3JldC1zZWNyZXQ=";\n'
            "};\n"
        )
        with tempfile.NamedTemporaryFile("w", suffix=".conf", delete=False) as f:
            f.write(key_content)
        self.addCleanup(os.remove, f.name)

        provider = BINDProvider(
            dict(self.config, key_file=f.name, key_name="update-key")
        )

        self.assertIsNotNone(provider.keyring)

    def test_get_records_from_zone_transfer(self):
        """Every rdata of the transferred zone becomes one record."""
        provider = BINDProvider(self.config)

        with patch("dns.query.xfr"), patch("dns.zone.from_xfr", return_value=self.zone):
            records = provider.get_records("example.com")

        by_name = {(r.name, r.type): r for r in records}
        self.assertEqual(len(records), 4)
        self.assertEqual(by_name[("www.example.com", "A")].content, "192.0.2.10")
        self.assertEqual(by_name[("www.example.com", "A")].ttl, 300)
        self.assertEqual(by_name[("www.example.com", "A")].zone_id, "example.com")

    def test_record_types_filter(self):
        """Only configured record types are returned."""
        provider = BINDProvider(dict(self.config, record_types=["a", "BOGUS"]))

        with patch("dns.query.xfr"), patch("dns.zone.from_xfr", return_value=self.zone):
            records = provider.get_records("example.com")

        self.assertEqual(provider.record_types, ["A"])
        self.assertEqual(sorted(r.name for r in records), ["mail.example.com", "www.example.com"])

    def test_record_ids_are_stable(self):
        """Derived ids are the same across transfers and unique per record."""
        provider = BINDProvider(self.config)

        with patch("dns.query.xfr"), patch("dns.zone.from_xfr", return_value=self.zone):
            first = provider.get_records("example.com")
            second = provider.get_records("example.com")

        self.assertEqual(sorted(r.id for r in first), sorted(r.id for r in second))
        self.assertEqual(len({r.id for r in first}), len(first))

    def test_zone_transfer_failure_raises(self):
        """A failed transfer raises a provider error."""
        provider = BINDProvider(self.config)

        with patch("dns.query.xfr", side_effect=dns.exception.Timeout()):
            with self.assertRaises(DNSProviderError):
                provider.get_records("example.com")


class TestDNSClient(unittest.TestCase):
    """Test provider selection."""

    def test_selects_mock_provider(self):
        client = DNSClient({"default_provider": "mock", "dns_providers": {"mock": {}}})
        self.assertIsInstance(client.provider, MockDNSProvider)

    def test_selects_cloudflare_provider(self):
        client = DNSClient(
            {"default_provider": "cloudflare", "dns_providers": {"cloudflare": {"api_token": "t"}}}
        )
        self.assertIsInstance(client.provider, CloudflareProvider)

    def test_selects_bind_provider(self):
        client = DNSClient({"default_provider": "bind"})
        self.assertIsInstance(client.provider, BINDProvider)

    def test_unknown_provider_falls_back_to_mock(self):
        client = DNSClient({"default_provider": "route53"})
        self.assertIsInstance(client.provider, MockDNSProvider)

    def test_get_records_delegates_to_provider(self):
        client = DNSClient(
            {
                "default_provider": "mock",
                "dns_providers": {"mock": {"zones": {"zone-A": [{"id": "r"}]}}},
            }
        )
        self.assertEqual([r.id for r in client.get_records("zone-A")], ["r"])

    def test_close_delegates_to_provider(self):
        client = DNSClient({"default_provider": "mock"})

        with patch.object(client.provider, "close") as close:
            client.close()

        close.assert_called_once_with()

    def test_mock_provider_close_is_a_no_op(self):
        DNSClient({"default_provider": "mock"}).close()


class TestValidators(unittest.TestCase):
    """Test the validation functions."""

    def test_validate_record_type(self):
        for record_type in ["A", "aaaa", "CNAME", "TXT", "MX"]:
            with self.subTest(record_type=record_type):
                self.assertTrue(validate_record_type(record_type))

        for record_type in ["", "BOGUS", None]:
            with self.subTest(record_type=record_type):
                self.assertFalse(validate_record_type(record_type))

    def test_sanitize_fqdn(self):
        self.assertEqual(sanitize_fqdn("WWW.Example.COM."), "www.example.com")
        self.assertEqual(sanitize_fqdn("a..b.example.com"), "a.b.example.com")
        self.assertEqual(sanitize_fqdn("_dmarc.example.com"), "_dmarc.example.com")
        self.assertEqual(sanitize_fqdn(""), "")


if __name__ == "__main__":
    unittest.main()
