"""
Behave environment configuration for DNS Record Cache scenarios.
"""

import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_zones = {
        "zone-A": [
            {"id": "record-0", "type": "A", "name": "zero-A", "content": "127.0.0.0"},
            {"id": "record-1", "type": "A", "name": "one-A", "content": "127.0.0.1"},
        ],
        "zone-B": [
            {"id": "record-0", "type": "A", "name": "zero-B", "content": "127.0.0.0"},
            {"id": "record-1", "type": "A", "name": "one-B", "content": "127.0.0.1"},
        ],
    }
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.test_config = {
        "dns_providers": {"mock": {"zones": context.test_zones}},
        "default_provider": "mock",
        "cache": {"retry_failed_fetches": False},
    }
    context.results = []
    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Log the end of each scenario."""
    logger.info(f"Completed scenario: {scenario.name}")
