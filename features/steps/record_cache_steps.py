"""
Step definitions for zone record cache scenarios.
"""

from behave import given, when, then

from dns_record_cache.core.lookup_manager import LookupManager


def _lookup_manager(context):
    if not hasattr(context, "lookup_manager") or context.lookup_manager is None:
        context.lookup_manager = LookupManager(context.test_config)
    return context.lookup_manager


@given("the lookup manager is configured with the mock provider")
def step_impl(context):
    """Reset the lookup manager so each scenario starts with a cold cache."""
    context.lookup_manager = None


@given("failed zone fetches are retried")
def step_impl(context):
    """Enable retrying zones whose fetch failed."""
    context.test_config["cache"]["retry_failed_fetches"] = True
    context.lookup_manager = None


@when('I look up record "{record_id}" in zone "{zone_id}" {count:d} times')
def step_impl(context, record_id, zone_id, count):
    """Look up the same record several times."""
    manager = _lookup_manager(context)
    context.results.extend(manager.find_records([(zone_id, record_id)] * count))


@when('I look up record "{record_id}" in zone "{zone_id}"')
def step_impl(context, record_id, zone_id):
    """Look up a single record."""
    manager = _lookup_manager(context)
    context.results.extend(manager.find_records([(zone_id, record_id)]))


@then('lookup {index:d} should return the record named "{name}"')
def step_impl(context, index, name):
    result = context.results[index - 1]
    assert result.found, f"Lookup {index} missed: {result.zone_id}/{result.record_id}"
    assert result.record.name == name, f"Expected {name}, got {result.record.name}"
    assert result.record.zone_id == result.zone_id


@then("lookup {index:d} should miss")
def step_impl(context, index):
    assert not context.results[index - 1].found


@then("every lookup should miss")
def step_impl(context):
    assert context.results, "No lookups were made"
    assert not any(result.found for result in context.results)


@then("the provider should have listed zones {count:d} time")
@then("the provider should have listed zones {count:d} times")
def step_impl(context, count):
    fetch_count = context.lookup_manager.dns_client.provider.fetch_count
    assert fetch_count == count, f"Expected {count} zone listings, got {fetch_count}"


@then("the cache should report {requests:d} requests and {hits:d} hits")
def step_impl(context, requests, hits):
    stats = context.lookup_manager.cache.stats
    assert stats.requests == requests, f"Expected {requests} requests, got {stats.requests}"
    assert stats.cache_hits == hits, f"Expected {hits} hits, got {stats.cache_hits}"
