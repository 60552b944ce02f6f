"""
metadata.api_clients
~~~~~~~~~~~~~~~~~~~~
Thin wrappers around the KOBIS REST API and its HTML detail pages.
"""

from .kofic_client  import KoficClient
from .kobis_scraper import KobisScraper

__all__ = ["KoficClient", "KobisScraper"]
