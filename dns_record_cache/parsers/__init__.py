"""
Input parsers for lookup requests.
"""

from .csv import CSVParser

__all__ = ["CSVParser"]
