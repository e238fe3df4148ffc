#!/usr/bin/env python3
"""
DNS Record Cache - Demo Script

This script demonstrates cold and warm lookups through the zone record cache
using the mock provider, so no real DNS API is contacted.
"""

import logging

from rich.console import Console
from rich.panel import Panel

from dns_record_cache.core.lookup_manager import LookupManager

# Initialize rich console
console = Console()


def create_demo_config():
    """Create a demo configuration with two mock zones."""
    return {
        "dns_providers": {
            "mock": {
                "zones": {
                    "zone-A": [
                        {"id": "record-0", "type": "A", "name": "zero-A", "content": "127.0.0.0"},
                        {"id": "record-1", "type": "A", "name": "one-A", "content": "127.0.0.1"},
                    ],
                    "zone-B": [
                        {"id": "record-0", "type": "A", "name": "zero-B", "content": "127.0.0.0"},
                        {"id": "record-1", "type": "A", "name": "one-B", "content": "127.0.0.1"},
                    ],
                }
            }
        },
        "default_provider": "mock",
    }


def display_demo_header():
    """Display the demo header."""
    console.print(
        Panel.fit(
            "[bold blue]DNS Record Cache - Demo[/bold blue]\n"
            "[cyan]One zone listing per zone, every other lookup from memory[/cyan]",
            border_style="blue",
        )
    )
    console.print()


def run_lookups(lookup_manager, title, requests):
    """Run a batch of lookups and show the results."""
    console.print(f"[bold]{title}[/bold]")
    results = lookup_manager.find_records(requests)
    lookup_manager.display_results(results)
    console.print(
        f"[blue]Provider zone listings so far: "
        f"{lookup_manager.dns_client.provider.fetch_count}[/blue]"
    )
    console.print()


def main():
    """Main demo function."""
    logging.basicConfig(level=logging.WARNING)
    display_demo_header()

    try:
        lookup_manager = LookupManager(create_demo_config())

        run_lookups(
            lookup_manager,
            "Cold lookups (zones fetched on first access)",
            [("zone-A", "record-0"), ("zone-B", "record-0")],
        )
        run_lookups(
            lookup_manager,
            "Warm lookups (served from memory)",
            [("zone-A", "record-1"), ("zone-B", "record-1"), ("zone-A", "missing")],
        )
        run_lookups(
            lookup_manager,
            "Unknown zone (fetch fails, zone cached as empty)",
            [("unknown-zone", "record-0"), ("unknown-zone", "record-0")],
        )

        lookup_manager.display_stats()

    except Exception as e:
        console.print(f"[red]Demo failed with error: {e}[/red]")

    console.print()
    console.print("[bold blue]Demo completed![/bold blue]")


if __name__ == "__main__":
    main()
