#!/usr/bin/env python3
"""
DNS Record Cache - Main Entry Point

This is the main entry point for the DNS Record Cache.
It can be run directly or imported as a module.
"""

from dns_record_cache.cli.main import main

if __name__ == "__main__":
    main()
