"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – Movie dataclass, error types, flatteners
* api_clients – KOBIS REST client + HTML scraper
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieShipper.metadata.core import (
    Movie,
    KoficError,
    TransportError,
    ParseError,
    NotFoundError,
    flatten_named_list,
)

# ── API clients ───────────────────────────────────────────────────────────
from movieShipper.metadata.api_clients import KoficClient, KobisScraper

__all__ = [
    "Movie",
    "KoficError",
    "TransportError",
    "ParseError",
    "NotFoundError",
    "flatten_named_list",
    "KoficClient",
    "KobisScraper",
]
